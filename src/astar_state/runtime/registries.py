# runtime/registries.py
from collections.abc import Callable

from astar_state.app.protocols import OpenSet
from astar_state.config.models import OpenSetHeapModel, OpenSetScanModel, OpenSetUnion
from astar_state.search.open_sets import HeapOpenSet, ScanOpenSet

OpenSetFactory = Callable[[OpenSetUnion], OpenSet]

_open_set_registry: dict[str, OpenSetFactory] = {}


# ------------------- Open set registry ---------------------------


def register_open_set(kind: str):
    def deco(fn: OpenSetFactory):
        _open_set_registry[kind] = fn
        return fn

    return deco


def make_open_set(cfg: OpenSetUnion) -> OpenSet:
    try:
        factory = _open_set_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown open set kind {cfg.kind!r}")
    return factory(cfg)


@register_open_set("scan")
def _make_scan(cfg: OpenSetScanModel):
    return ScanOpenSet()


@register_open_set("heap")
def _make_heap(cfg: OpenSetHeapModel):
    return HeapOpenSet(compact_ratio=cfg.compact_ratio)
