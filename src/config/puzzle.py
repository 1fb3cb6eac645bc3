"""Puzzle configuration dataclasses, all frozen and slotted for immutability."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class RopeConfig:
    """Knot counts for the two rope simulations."""

    short_knots: int = 2  # head + tail
    long_knots: int = 10


@dataclass(frozen=True, slots=True)
class FilesystemConfig:
    """Size thresholds for the directory reductions."""

    small_dir_limit: int = 100_000  # T1
    disk_capacity: int = 70_000_000
    required_free: int = 30_000_000  # target free space for T2


@dataclass(frozen=True, slots=True)
class CalorieConfig:
    """Calorie reduction parameters."""

    top_n: int = 3  # elves summed in part 2


@dataclass(frozen=True, slots=True)
class SignalConfig:
    """Marker window sizes for the signal scan."""

    packet_marker: int = 4
    message_marker: int = 14


@dataclass(frozen=True, slots=True)
class PuzzleConfig:
    """Top-level configuration composing all per-day sub-configs.

    All fields are frozen and typed. Cross-parameter validation runs
    in __post_init__ to reject invalid configurations early.
    """

    rope: RopeConfig = field(default_factory=RopeConfig)
    filesystem: FilesystemConfig = field(default_factory=FilesystemConfig)
    calories: CalorieConfig = field(default_factory=CalorieConfig)
    signal: SignalConfig = field(default_factory=SignalConfig)

    def __post_init__(self) -> None:
        """Cross-parameter validation."""
        if self.rope.short_knots < 1 or self.rope.long_knots < 1:
            raise ValueError(
                f"knot counts must be >= 1, got short_knots="
                f"{self.rope.short_knots}, long_knots={self.rope.long_knots}"
            )
        if self.filesystem.small_dir_limit < 0:
            raise ValueError(
                f"small_dir_limit must be >= 0, got "
                f"{self.filesystem.small_dir_limit}"
            )
        if self.filesystem.disk_capacity <= 0:
            raise ValueError(
                f"disk_capacity must be positive, got "
                f"{self.filesystem.disk_capacity}"
            )
        if not 0 <= self.filesystem.required_free <= self.filesystem.disk_capacity:
            raise ValueError(
                f"required_free ({self.filesystem.required_free}) must be "
                f"between 0 and disk_capacity ({self.filesystem.disk_capacity})"
            )
        if self.calories.top_n < 1:
            raise ValueError(f"top_n must be >= 1, got {self.calories.top_n}")
        if self.signal.packet_marker < 1 or self.signal.message_marker < 1:
            raise ValueError(
                f"marker windows must be >= 1, got packet_marker="
                f"{self.signal.packet_marker}, message_marker="
                f"{self.signal.message_marker}"
            )
