"""Parser configuration."""

from dataclasses import dataclass
from typing import Final

# Two interpreter frames per nesting level keeps this well inside the default
# recursion limit.
DEFAULT_MAX_DEPTH: Final = 256


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures JSON parsing behavior with immutable settings.

    `allow_extra_commas` keeps the lax comma policy: leading, doubled and
    trailing commas inside containers are skipped. `container_root` requires
    the document to be an object or array.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    allow_extra_commas: bool = True
    container_root: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(
            self.max_depth, int
        ):
            raise TypeError("max_depth must be an integer")
        if self.max_depth < 1:
            raise ValueError("max_depth must be positive")
        if not isinstance(self.allow_extra_commas, bool):
            raise TypeError("allow_extra_commas must be a boolean")
        if not isinstance(self.container_root, bool):
            raise TypeError("container_root must be a boolean")
