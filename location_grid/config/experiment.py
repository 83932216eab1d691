"""Grid configuration dataclasses, frozen and slotted."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class GridConfig:
    """Location grid generation parameters."""

    size: int = 100  # number of locations in the finished grid


@dataclass(frozen=True, slots=True)
class ExperimentConfig:
    """Top-level configuration for a grid generation run.

    Validation runs in __post_init__ so a bad size or seed is rejected
    before any generation work starts.
    """

    grid: GridConfig = field(default_factory=GridConfig)
    seed: int = 42
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.grid.size < 1:
            raise ValueError(
                f"grid size must be >= 1, got {self.grid.size}"
            )
        if self.seed < 0:
            raise ValueError(f"seed must be non-negative, got {self.seed}")
