"""Search results and their quality grade."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from taquin.config import QUALITY_TOLERANCE
from taquin.models.board import Direction


class MoveQuality(StrEnum):
    BEST = "best"
    MEDIUM = "medium"
    POOR = "poor"


@dataclass
class SolutionInfo:
    """A found move sequence, graded against a known optimal length.

    The grade is for display only. It says nothing about whether the
    moves actually reach the goal; replay them to check that.
    """

    moves: list[Direction] = field(default_factory=list)
    optimal_length: int | None = None

    def __len__(self) -> int:
        return len(self.moves)

    @property
    def quality(self) -> MoveQuality:
        if self.optimal_length is None:
            return MoveQuality.BEST
        n = len(self.moves)
        if n == self.optimal_length:
            return MoveQuality.BEST
        if n <= self.optimal_length + QUALITY_TOLERANCE:
            return MoveQuality.MEDIUM
        return MoveQuality.POOR

    def describe(self) -> str:
        text = f"Found {self.quality.value} solution in {len(self.moves)} moves"
        if self.optimal_length is not None:
            text += f" (optimal: {self.optimal_length})"
        return text
