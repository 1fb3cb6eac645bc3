"""Default configuration: single source of truth for puzzle parameters."""

from src.config.puzzle import PuzzleConfig

# Instantiated with all-default values: short_knots=2, long_knots=10,
# small_dir_limit=100_000, disk_capacity=70_000_000, required_free=30_000_000,
# top_n=3, packet_marker=4, message_marker=14.
DEFAULT_CONFIG = PuzzleConfig()
