"""Chunk capacity: a target size plus a hard ceiling.

Rigid sizes force awkward splits. Separating the size a chunker aims for
(``desired``) from the size it may never exceed (``max``) lets a chunker stay
at a coarser boundary (paragraph rather than sentence) when that only
slightly overshoots the target.
"""

from dataclasses import dataclass, replace
from enum import Enum

from ..errors import CapacityError

DEFAULT_CAPACITY = 2048


class Fit(str, Enum):
    """How a candidate size compares to a capacity."""

    UNDER = "under"  # below desired, room to grow
    WITHIN = "within"  # in [desired, max]
    OVER = "over"  # above max, must split


@dataclass(frozen=True)
class ChunkCapacity:
    """Target/maximum size pair, both in bytes.

    Attributes:
        desired: Size chunkers aim for
        max: Absolute ceiling

    Raises:
        CapacityError: If ``max < desired``

    Example:
        >>> cap = ChunkCapacity.fixed(512).with_max(640)
        >>> cap.fits(600)
        <Fit.WITHIN: 'within'>
    """

    desired: int = DEFAULT_CAPACITY
    max: int = DEFAULT_CAPACITY

    def __post_init__(self):
        if self.max < self.desired:
            raise CapacityError(self.desired, self.max)

    @classmethod
    def fixed(cls, size: int) -> "ChunkCapacity":
        """Capacity with the same desired and max size."""
        return cls(desired=size, max=size)

    @classmethod
    def from_range(cls, start: int, stop: int) -> "ChunkCapacity":
        """Build from a half-open range, like ``range(start, stop)``.

        The max is the last value inside the range, never below ``start``.
        """
        return cls(desired=start, max=max(stop - 1, start))

    @classmethod
    def from_inclusive(cls, start: int, end: int) -> "ChunkCapacity":
        """Build from an inclusive ``[start, end]`` range."""
        return cls(desired=start, max=end)

    def with_max(self, max: int) -> "ChunkCapacity":
        """Return a copy with a new ceiling.

        Raises:
            CapacityError: If ``max`` is below the desired size
        """
        return replace(self, max=max)

    def fits(self, size: int) -> Fit:
        if size < self.desired:
            return Fit.UNDER
        if size > self.max:
            return Fit.OVER
        return Fit.WITHIN

    def would_overflow(self, current: int, additional: int) -> bool:
        """Check if growing ``current`` by ``additional`` bytes exceeds max."""
        return current + additional > self.max
