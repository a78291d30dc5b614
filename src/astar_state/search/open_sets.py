# astar_state/search/open_sets.py
import heapq
from collections.abc import Hashable

from astar_state.app.protocols import WaypointLike


class ScanOpenSet:
    """Plain dict; min() visits every entry."""

    def __init__(self):
        self._entries: dict[Hashable, WaypointLike] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, loc: Hashable) -> bool:
        return loc in self._entries

    def get(self, loc: Hashable) -> WaypointLike | None:
        return self._entries.get(loc)

    def put(self, loc: Hashable, wp: WaypointLike) -> None:
        self._entries[loc] = wp

    def pop(self, loc: Hashable) -> WaypointLike:
        return self._entries.pop(loc)

    def min(self) -> WaypointLike | None:
        best, best_cost = None, float("inf")
        for wp in self._entries.values():
            if best is None or wp.total_cost < best_cost:
                best, best_cost = wp, wp.total_cost
        return best


class HeapOpenSet:
    """
    Dict plus a heap index keyed (total_cost, seq).
    Replaced and popped entries stay in the heap until they surface at the top;
    a heap item is live only while the dict still maps its location to the very
    same waypoint object.
    """

    def __init__(self, compact_ratio: float = 4.0):
        self._entries: dict[Hashable, WaypointLike] = {}
        self._heap: list[tuple[float, int, Hashable, WaypointLike]] = []
        self._seq = 0
        self.compact_ratio = max(1.0, compact_ratio)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, loc: Hashable) -> bool:
        return loc in self._entries

    def get(self, loc: Hashable) -> WaypointLike | None:
        return self._entries.get(loc)

    def put(self, loc: Hashable, wp: WaypointLike) -> None:
        self._entries[loc] = wp
        self._push(loc, wp)
        if len(self._heap) > self.compact_ratio * max(len(self._entries), 16):
            self._compact()

    def pop(self, loc: Hashable) -> WaypointLike:
        return self._entries.pop(loc)

    def min(self) -> WaypointLike | None:
        while self._heap:
            _, _, loc, wp = self._heap[0]
            if self._entries.get(loc) is wp:
                return wp
            heapq.heappop(self._heap)  # stale
        return None

    # --------------- Helpers -----------------------------

    def _push(self, loc: Hashable, wp: WaypointLike) -> None:
        # seq is unique, so tuple comparison never reaches loc/wp
        self._seq += 1
        heapq.heappush(self._heap, (wp.total_cost, self._seq, loc, wp))

    def _compact(self) -> None:
        self._heap = [item for item in self._heap if self._entries.get(item[2]) is item[3]]
        heapq.heapify(self._heap)
