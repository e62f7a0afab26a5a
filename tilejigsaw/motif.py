"""Find a fixed motif in an assembled image under any of its 8 orientations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AbstractSet, FrozenSet, Iterable, List, Sequence, Tuple

from .errors import MotifNotFoundError
from .image import Image, Pixel

logger = logging.getLogger(__name__)

Offset = Tuple[int, int]

SEA_MONSTER_PATTERN = """\
                  #
#    ##    ##    ###
 #  #  #  #  #  #
"""


@dataclass(frozen=True)
class Motif:
    """A shape given as (dx, dy) offsets that always include the anchor (0, 0)."""

    offsets: Tuple[Offset, ...]

    def __post_init__(self) -> None:
        offsets = tuple(dict.fromkeys((int(dx), int(dy)) for dx, dy in self.offsets))
        if not offsets:
            raise ValueError("A motif needs at least one offset")
        if (0, 0) not in offsets:
            # Re-anchor on the first cell in reading order so the anchor is always a set pixel.
            ax, ay = min(offsets, key=lambda o: (o[1], o[0]))
            offsets = tuple((dx - ax, dy - ay) for dx, dy in offsets)
        object.__setattr__(self, "offsets", offsets)

    @classmethod
    def from_text(cls, pattern: str, mark: str = "#") -> "Motif":
        """Build a motif from a drawing where `mark` cells belong to the shape."""
        offsets = [
            (x, y)
            for y, line in enumerate(pattern.splitlines())
            for x, char in enumerate(line)
            if char == mark
        ]
        return cls(tuple(offsets))

    def __len__(self) -> int:
        return len(self.offsets)

    def rotate(self) -> "Motif":
        """Rotate 90 degrees: (x, y) -> (-y, x)."""
        return Motif(tuple((-dy, dx) for dx, dy in self.offsets))

    def mirror(self) -> "Motif":
        """Mirror horizontally: (x, y) -> (-x, y)."""
        return Motif(tuple((-dx, dy) for dx, dy in self.offsets))

    def orientations(self) -> List["Motif"]:
        """Base rotations 0/90/180/270, then the same for the mirrored shape."""
        variants: List[Motif] = []
        for start in (self, self.mirror()):
            current = start
            for _ in range(4):
                variants.append(current)
                current = current.rotate()
        return variants


SEA_MONSTER = Motif.from_text(SEA_MONSTER_PATTERN)


@dataclass
class MotifScanResult:
    """All matches found under the single orientation that produced any."""

    matches: List[FrozenSet[Pixel]]
    orientation: int
    offsets: Tuple[Offset, ...]
    total_pixels: int

    @property
    def count(self) -> int:
        return len(self.matches)

    @property
    def covered(self) -> FrozenSet[Pixel]:
        """Pixels belonging to at least one match."""
        return frozenset().union(*self.matches)

    @property
    def uncovered_count(self) -> int:
        return self.total_pixels - len(self.covered)


class MotifScanner:
    """Exhaustive search over every set pixel as a motif anchor."""

    def scan(self, pixels: AbstractSet[Pixel], offsets: Sequence[Offset]) -> List[FrozenSet[Pixel]]:
        """Return the covered pixels of each anchor where the shape fits."""
        found: List[FrozenSet[Pixel]] = []
        for x, y in sorted(pixels):
            if all((x + dx, y + dy) in pixels for dx, dy in offsets):
                found.append(frozenset((x + dx, y + dy) for dx, dy in offsets))
        return found

    def find(self, image: Image, motif: Motif = SEA_MONSTER) -> MotifScanResult:
        """Try orientations in order and keep every match of the first that hits."""
        return self.find_in_pixels(image.pixels, motif)

    def find_in_pixels(self, pixels: Iterable[Pixel], motif: Motif = SEA_MONSTER) -> MotifScanResult:
        pixel_set = frozenset(pixels)
        for index, variant in enumerate(motif.orientations()):
            matches = self.scan(pixel_set, variant.offsets)
            if matches:
                logger.info("Found %d motif match(es) in orientation %d", len(matches), index)
                return MotifScanResult(
                    matches=matches,
                    orientation=index,
                    offsets=variant.offsets,
                    total_pixels=len(pixel_set),
                )
            logger.debug("No motif match in orientation %d", index)
        raise MotifNotFoundError(
            f"Motif of {len(motif)} cells not found in any of 8 orientations "
            f"among {len(pixel_set)} pixels"
        )
