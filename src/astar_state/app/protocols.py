from collections.abc import Hashable
from typing import Protocol, runtime_checkable


# ------------- Collaborators --------------------
@runtime_checkable
class SearchMap(Protocol):
    """
    The map a search runs over. Adjacency and terrain cost belong to the
    driver; the search state only holds the reference.
    """


@runtime_checkable
class WaypointLike(Protocol):
    """
    Responsibilities:
      • Name the location it occupies (hashable, value-equal).
      • Report accumulated cost from the start (g) and the ranking cost (f).
    All three are read-only.
    """

    @property
    def location(self) -> Hashable: ...
    @property
    def previous_cost(self) -> float: ...
    @property
    def total_cost(self) -> float: ...


# --------------- Open-set storage -------------------------


@runtime_checkable
class OpenSet(Protocol):
    """
    Location -> waypoint mapping with a minimum-total-cost query.
    min() must not change what get/len/contains report.
    """

    def __len__(self) -> int: ...
    def __contains__(self, loc: Hashable) -> bool: ...
    def get(self, loc: Hashable) -> WaypointLike | None: ...
    def put(self, loc: Hashable, wp: WaypointLike) -> None: ...
    def pop(self, loc: Hashable) -> WaypointLike: ...
    def min(self) -> WaypointLike | None: ...
