"""Counters of how alpha-beta search nodes end, by depth and by reason."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

MAX_DEPTH = 49
_RULE = "-" * 65


class ABCount(IntEnum):
    """Reasons for which a search node returns."""

    TARGET_REACHED = 0
    DEPTH_ZERO = 1
    QUICKTRICKS = 2
    QUICKTRICKS_2ND = 3
    LATERTRICKS = 4
    MAIN_LOOKUP = 5
    SIDE_LOOKUP = 6
    MOVE_LOOP = 7


_NAMES = {
    ABCount.TARGET_REACHED: "Target decided",
    ABCount.DEPTH_ZERO: "depth == 0",
    ABCount.QUICKTRICKS: "QuickTricks",
    ABCount.QUICKTRICKS_2ND: "QuickTricks 2nd",
    ABCount.LATERTRICKS: "LaterTricks",
    ABCount.MAIN_LOOKUP: "Main lookup",
    ABCount.SIDE_LOOKUP: "Other lookup",
    ABCount.MOVE_LOOP: "Move trial",
}


@dataclass
class ABTracker:
    """Counts by depth, with plain and depth-weighted totals."""

    list: list[int] = field(default_factory=lambda: [0] * MAX_DEPTH)
    sum: int = 0
    sum_weighted: int = 0
    sum_cum: int = 0
    sum_cum_weighted: int = 0

    def clear(self) -> None:
        self.list = [0] * MAX_DEPTH
        self.sum = 0
        self.sum_weighted = 0

    def clear_cumulative(self) -> None:
        self.sum_cum = 0
        self.sum_cum_weighted = 0


def _ratio(num: float, den: float) -> float:
    if den:
        return num / den
    if num:
        return float("inf") if num > 0 else float("-inf")
    return float("nan")


class ABStats:
    """Statistics of alpha-beta terminations and generated nodes."""

    def __init__(self, details: bool = False) -> None:
        self.details = details
        self.node_tracker = ABTracker()
        self.node_cum_tracker = ABTracker()
        self.sides = [ABTracker(), ABTracker()]
        self.places = [ABTracker() for _ in ABCount]

    def reset(self) -> None:
        """Clear the per-run counts; cumulative totals are kept."""
        self.node_tracker.clear()
        for tracker in (*self.sides, *self.places):
            tracker.clear()

    def reset_cumulative(self) -> None:
        """Clear the cumulative totals."""
        for tracker in (self.node_cum_tracker, *self.sides, *self.places):
            tracker.clear_cumulative()

    def incr_pos(self, no: int, side: bool, depth: int) -> None:
        """Count a termination for reason ``no`` at ``depth``.

        Unknown reasons are ignored.
        """
        if not 0 <= no < len(ABCount):
            return
        for tracker in (self.places[no], self.sides[1 if side else 0]):
            tracker.list[depth] += 1
            tracker.sum += 1
            tracker.sum_weighted += depth
            tracker.sum_cum += 1
            tracker.sum_cum_weighted += depth

    def incr_node(self, depth: int) -> None:
        """Count a generated node at ``depth``."""
        self.node_tracker.list[depth] += 1
        self.node_tracker.sum += 1
        self.node_tracker.sum_weighted += depth
        self.node_cum_tracker.list[depth] += 1
        self.node_cum_tracker.sum_cum += 1
        self.node_cum_tracker.sum_cum_weighted += depth

    @property
    def nodes(self) -> int:
        """Nodes counted since the last reset."""
        return self.node_tracker.sum

    def _position_header(self) -> list[str]:
        return [
            f"No {'Return':<20}{'Count':>9}{'%':>6}{'d_avg':>6}"
            f"{'Cumul':>9}{'%':>6}{'d_avg':>6}\n",
            _RULE + "\n",
        ]

    def _position_line(self, no: int, text: str, abt: ABTracker,
                       divisor: ABTracker) -> str:
        if not abt.sum_cum:
            return ""
        label = "" if no == -1 else str(no)
        line = (f"{label:>2} {text:<20}{abt.sum:>9}"
                f"{100.0 * _ratio(abt.sum, divisor.sum):6.1f}")
        if abt.sum:
            line += f"{_ratio(abt.sum_weighted, abt.sum):6.1f}"
        else:
            line += " " * 6
        line += (f"{abt.sum_cum:>9}"
                 f"{100.0 * _ratio(abt.sum_cum, divisor.sum_cum):6.1f}"
                 f"{_ratio(abt.sum_cum_weighted, abt.sum_cum):6.1f}\n")
        return line

    def _depth_header(self) -> list[str]:
        return [
            f"{'Depth':>5}{'Nodes':>7}{'Cumul':>7}{'Cum%':>6}"
            f"{'Cumc%':>6}{'Branch':>7}\n",
            "-" * 38 + "\n",
        ]

    def _depth_line(self, depth: int, cum: int) -> str:
        cum_list = self.node_cum_tracker.list
        total = self.node_cum_tracker.sum_cum
        line = (f"{depth:>5}{self.node_tracker.list[depth]:>7}"
                f"{cum_list[depth]:>7}"
                f"{100.0 * _ratio(cum_list[depth], total):6.1f}"
                f"{100.0 * _ratio(cum, total):6.1f}")
        # Branching factor from the end of one trick to the end of the
        # previous one.
        if (depth % 4 == 1 and depth < MAX_DEPTH - 4
                and cum_list[depth + 4] > 0):
            line += f"{cum_list[depth] / cum_list[depth + 4]:6.2f}"
        return line + "\n"

    def _average_lines(self, sides_sum: ABTracker) -> list[str]:
        nodes = self.node_tracker
        cum = self.node_cum_tracker
        out = [f"\nTotal{nodes.sum:>7}{cum.sum_cum:>7}\n"]
        if not cum.sum_cum:
            return out
        line = f"{'Avg':<5}"
        if nodes.sum:
            line += f"{nodes.sum_weighted / nodes.sum:7.1f}"
        else:
            line += " " * 7
        line += f"{cum.sum_cum_weighted / cum.sum_cum:7.1f}\n\n"
        out.append(line)
        out.append(f"{'Nodes':<5}{nodes.sum:>7}{cum.sum_cum:>7}\n")
        out.append(f"{'Ends':<5}{sides_sum.sum:>7}{sides_sum.sum_cum:>7}\n")
        if sides_sum.sum:
            out.append(
                f"{'Ratio':<5}"
                f"{100.0 * _ratio(sides_sum.sum, nodes.sum):6.0f}%"
                f"{100.0 * _ratio(sides_sum.sum_cum, cum.sum_cum):6.0f}%\n\n")
        return out

    def _detail_lines(self) -> list[str]:
        out = [" d" + f"{'Side1':>7}{'Side0':>7}"
               + "".join(f"{p:>6}" for p in range(len(ABCount)))
               + "\n" + _RULE + "\n"]
        for depth in reversed(range(MAX_DEPTH)):
            s1 = self.sides[1].list[depth]
            s0 = self.sides[0].list[depth]
            if s1 == 0 and s0 == 0:
                continue
            out.append(f"{depth:>2}{s1:>7}{s0:>7}"
                       + "".join(f"{p.list[depth]:>6}" for p in self.places)
                       + "\n")
        out.append(_RULE + "\n")
        out.append(f"{'S':>2}{self.sides[1].sum:>7}{self.sides[0].sum:>7}"
                   + "".join(f"{p.sum:>6}" for p in self.places) + "\n\n")
        return out

    def format_stats(self) -> str:
        """The statistics as text tables: by reason, by depth, in detail."""
        sides_sum = ABTracker()
        sides_sum.sum = self.sides[1].sum + self.sides[0].sum
        sides_sum.sum_cum = self.sides[1].sum_cum + self.sides[0].sum_cum

        out: list[str] = []
        if sides_sum.sum:
            out.extend(self._position_header())
            out.append(self._position_line(-1, "Side1", self.sides[1],
                                           sides_sum))
            out.append(self._position_line(-1, "Side0", self.sides[0],
                                           sides_sum))
            out.append("\n")
            for count in ABCount:
                out.append(self._position_line(
                    int(count), _NAMES[count], self.places[count], sides_sum))
            out.append("\n")

        out.extend(self._depth_header())
        cumulative = 0
        for depth in reversed(range(MAX_DEPTH)):
            entries = self.node_cum_tracker.list[depth]
            if entries == 0:
                continue
            cumulative += entries
            out.append(self._depth_line(depth, cumulative))

        out.extend(self._average_lines(sides_sum))

        if self.details:
            out.extend(self._detail_lines())
        return "".join(out)