"""JSON serialization and deserialization for puzzle configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from src.config.puzzle import PuzzleConfig

_DACITE_CONFIG = DaciteConfig(
    check_types=True,
    strict=True,
)


def config_to_json(config: PuzzleConfig) -> str:
    """Serialize a PuzzleConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> PuzzleConfig:
    """Deserialize a JSON string to a PuzzleConfig.

    Uses dacite with strict=True to reject unknown keys. Missing keys fall
    back to the dataclass defaults, so a partial file only overrides what
    it names.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: PuzzleConfig) -> dict[str, Any]:
    """Convert a PuzzleConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> PuzzleConfig:
    """Reconstruct a PuzzleConfig from a plain dictionary."""
    return from_dict(data_class=PuzzleConfig, data=d, config=_DACITE_CONFIG)
