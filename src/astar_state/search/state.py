# astar_state/search/state.py
from collections.abc import Hashable

from astar_state.app.protocols import OpenSet, SearchMap, WaypointLike
from astar_state.search.hooks import NoopHooks, SearchHooks
from astar_state.search.open_sets import ScanOpenSet


class PathSearchState:
    """
    Open/closed bookkeeping for one A* run over one map.

    Open holds the cheapest waypoint offered so far per location (by
    previous_cost); closed holds finalized waypoints and is never rewritten.
    A location lives in at most one of the two. Keeping closed locations from
    being re-offered is the driver's job: add_open_waypoint does not look at
    the closed set.
    """

    def __init__(
        self,
        search_map: SearchMap,
        *,
        open_set: OpenSet | None = None,
        hooks: SearchHooks | None = None,
    ):
        if search_map is None:
            raise ValueError("search_map cannot be None")
        self._map = search_map
        self._open: OpenSet = open_set if open_set is not None else ScanOpenSet()
        self._closed: dict[Hashable, WaypointLike] = {}
        self._hooks = hooks or NoopHooks()

    @property
    def map(self) -> SearchMap:
        return self._map

    @property
    def open_set(self) -> OpenSet:
        return self._open

    @property
    def hooks(self) -> SearchHooks:
        return self._hooks

    def num_open_waypoints(self) -> int:
        return len(self._open)

    def num_closed_waypoints(self) -> int:
        return len(self._closed)

    def add_open_waypoint(self, candidate: WaypointLike) -> bool:
        """
        Offer a waypoint. A new location is always accepted; an open one is
        replaced only by a strictly lower previous_cost (ties keep the incumbent).
        """
        loc = candidate.location
        current = self._open.get(loc)
        if current is not None and not candidate.previous_cost < current.previous_cost:
            self._hooks.rejected(candidate, current=current, open_size=len(self._open))
            return False
        self._open.put(loc, candidate)
        self._hooks.opened(candidate, replaced=current is not None, open_size=len(self._open))
        return True

    def get_min_open_waypoint(self) -> WaypointLike | None:
        """Lowest total_cost open waypoint, or None when open is empty. Does not remove it."""
        return self._open.min()

    def close_waypoint(self, loc: Hashable) -> None:
        if loc not in self._open:
            self._hooks.error(loc, reason="not_open")
            raise ValueError(f"cannot close {loc!r}: location is not open")
        wp = self._open.pop(loc)
        # a re-offered closed location leaves open; its first closed waypoint stays
        wp = self._closed.setdefault(loc, wp)
        self._hooks.closed(wp, open_size=len(self._open), closed_size=len(self._closed))

    def is_location_closed(self, loc: Hashable) -> bool:
        return loc in self._closed

    def get_closed_waypoint(self, loc: Hashable) -> WaypointLike | None:
        return self._closed.get(loc)
