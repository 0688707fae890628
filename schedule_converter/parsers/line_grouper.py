"""
Group a page's positioned fragments into text lines.
"""
import math
from enum import Enum
from typing import Dict, Iterable, List

from schedule_converter.models import Line, PositionedFragment


class GroupingPolicy(str, Enum):
    """How fragments are judged to share a line."""

    ROUND = 'round'  # equal after rounding y to the nearest unit
    DELTA = 'delta'  # within `tolerance` of the first fragment of the open line


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class LineGrouper:
    """Cluster fragments by vertical position, top of page first."""

    def __init__(self, policy: GroupingPolicy | str = GroupingPolicy.ROUND, tolerance: float = 5.0):
        """
        Args:
            policy: Grouping policy (ROUND is the default)
            tolerance: Maximum vertical distance for the DELTA policy
        """
        self.policy = GroupingPolicy(policy)
        if tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {tolerance}")
        self.tolerance = tolerance

    def group(self, fragments: Iterable[PositionedFragment]) -> List[Line]:
        """
        Group fragments into lines.

        Returns:
            Lines ordered by descending y; fragments within a line by ascending x.
            An empty page yields an empty list.
        """
        fragments = list(fragments)
        if not fragments:
            return []
        if self.policy is GroupingPolicy.ROUND:
            return self._group_rounded(fragments)
        return self._group_by_delta(fragments)

    def _group_rounded(self, fragments: List[PositionedFragment]) -> List[Line]:
        rows: Dict[int, List[PositionedFragment]] = {}
        for fragment in fragments:
            rows.setdefault(round_half_up(fragment.y), []).append(fragment)
        return [Line(y=y, fragments=rows[y]) for y in sorted(rows, reverse=True)]

    def _group_by_delta(self, fragments: List[PositionedFragment]) -> List[Line]:
        ordered = sorted(fragments, key=lambda f: (-f.y, f.x, f.text))
        lines: List[Line] = []
        anchor = ordered[0].y
        current = [ordered[0]]
        for fragment in ordered[1:]:
            if anchor - fragment.y <= self.tolerance:
                current.append(fragment)
                continue
            lines.append(Line(y=anchor, fragments=current))
            anchor = fragment.y
            current = [fragment]
        lines.append(Line(y=anchor, fragments=current))
        return lines
