# search/hooks.py
from collections.abc import Hashable
from typing import Protocol

from astar_state.app.protocols import WaypointLike


class SearchHooks(Protocol):
    def opened(self, wp: WaypointLike, *, replaced: bool, open_size: int): ...
    def rejected(self, wp: WaypointLike, *, current: WaypointLike, open_size: int): ...
    def closed(self, wp: WaypointLike, *, open_size: int, closed_size: int): ...
    def error(self, loc: Hashable, *, reason: str, **kw): ...


class NoopHooks:
    def opened(self, *_, **__):
        pass

    def rejected(self, *_, **__):
        pass

    def closed(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass
