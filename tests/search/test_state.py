# tests/search/test_state.py
import pytest

from astar_state.domain.entities.geography import Location
from astar_state.domain.entities.waypoint import Waypoint
from astar_state.search.hooks import NoopHooks
from astar_state.search.open_sets import HeapOpenSet, ScanOpenSet
from astar_state.search.state import PathSearchState

A = Location(0, 0)
B = Location(1, 0)


def wp(loc, prev, total):
    return Waypoint(loc, previous_cost=prev, remaining_cost=total - prev)


@pytest.fixture(params=["scan", "heap"])
def state(request):
    open_set = ScanOpenSet() if request.param == "scan" else HeapOpenSet()
    return PathSearchState(object(), open_set=open_set)


# --- records every hook call in order ---
class TraceHooks(NoopHooks):
    def __init__(self):
        self.trace = []

    def opened(self, wp, *, replaced, open_size):
        self.trace.append(("opened", wp.location, replaced, open_size))

    def rejected(self, wp, *, current, open_size):
        self.trace.append(("rejected", wp.location, current.previous_cost, open_size))

    def closed(self, wp, *, open_size, closed_size):
        self.trace.append(("closed", wp.location, open_size, closed_size))

    def error(self, loc, *, reason, **kw):
        self.trace.append(("error", loc, reason))


# ------------------ CONSTRUCTION ------------------


def test_none_map_is_rejected():
    with pytest.raises(ValueError):
        PathSearchState(None)


def test_map_is_returned_unchanged():
    m = object()
    s = PathSearchState(m)
    assert s.map is m
    assert s.num_open_waypoints() == 0
    assert s.num_closed_waypoints() == 0


# ------------------ WALKTHROUGH ------------------


def test_replacement_then_selection_walkthrough(state):
    # 1. empty
    assert state.num_open_waypoints() == 0
    assert state.get_min_open_waypoint() is None

    # 2. first offer for A
    w1 = wp(A, 5, 10)
    assert state.add_open_waypoint(w1) is True
    assert state.num_open_waypoints() == 1

    # 3. more expensive path to A is refused even though its total is lower
    w2 = wp(A, 7, 8)
    assert state.add_open_waypoint(w2) is False
    assert state.get_min_open_waypoint() is w1

    # 4. cheaper path to A wins even though its total is higher
    w3 = wp(A, 3, 12)
    assert state.add_open_waypoint(w3) is True
    assert state.num_open_waypoints() == 1
    assert state.get_min_open_waypoint() is w3

    # 5. B has the lowest total
    w4 = wp(B, 1, 2)
    assert state.add_open_waypoint(w4) is True
    assert state.get_min_open_waypoint() is w4

    # 6. close B, A's waypoint is next
    state.close_waypoint(B)
    assert state.is_location_closed(B)
    assert state.num_open_waypoints() == 1
    assert state.get_min_open_waypoint() is w3


def test_equal_previous_cost_keeps_incumbent(state):
    first = wp(A, 4, 9)
    assert state.add_open_waypoint(first)
    assert state.add_open_waypoint(wp(A, 4, 5)) is False
    assert state.get_min_open_waypoint() is first


def test_locations_match_by_value(state):
    state.add_open_waypoint(wp(Location(3, 4), 2, 2))
    assert state.add_open_waypoint(wp(Location(3, 4), 1, 1)) is True
    assert state.num_open_waypoints() == 1
    state.close_waypoint(Location(3, 4))
    assert state.is_location_closed(Location(3, 4))


# ------------------ CLOSING ------------------


def test_close_moves_waypoint_and_freezes_it(state):
    w = wp(A, 2, 6)
    state.add_open_waypoint(w)
    state.close_waypoint(A)

    assert state.num_open_waypoints() == 0
    assert state.num_closed_waypoints() == 1
    assert state.get_closed_waypoint(A) is w
    assert state.get_min_open_waypoint() is None
    assert state.get_closed_waypoint(B) is None


def test_close_unknown_location_raises_and_changes_nothing(state):
    state.add_open_waypoint(wp(A, 1, 1))
    with pytest.raises(ValueError):
        state.close_waypoint(B)
    assert not state.is_location_closed(B)
    assert state.num_open_waypoints() == 1
    assert state.num_closed_waypoints() == 0


def test_close_twice_raises(state):
    state.add_open_waypoint(wp(A, 1, 1))
    state.close_waypoint(A)
    with pytest.raises(ValueError):
        state.close_waypoint(A)
    assert state.num_closed_waypoints() == 1


def test_add_does_not_consult_closed_set(state):
    # guarding closed locations is the driver's job
    first = wp(A, 5, 5)
    state.add_open_waypoint(first)
    state.close_waypoint(A)
    assert state.add_open_waypoint(wp(A, 9, 9)) is True
    assert state.num_open_waypoints() == 1
    assert state.is_location_closed(A)

    # closing the re-offer empties open but keeps the first closed waypoint
    state.close_waypoint(A)
    assert state.num_open_waypoints() == 0
    assert state.num_closed_waypoints() == 1
    assert state.is_location_closed(A)
    assert state.get_closed_waypoint(A) is first
    assert state.get_min_open_waypoint() is None


def test_unguarded_driver_can_reexpand_closed_parent(state):
    # a grid driver that skips the closed check offers A again as B's neighbour
    wa = wp(A, 0, 1)
    state.add_open_waypoint(wa)
    state.close_waypoint(state.get_min_open_waypoint().location)
    state.add_open_waypoint(wp(B, 1, 1))
    state.close_waypoint(state.get_min_open_waypoint().location)
    assert state.add_open_waypoint(wp(A, 2, 3)) is True

    before = state.num_open_waypoints()
    state.close_waypoint(state.get_min_open_waypoint().location)
    assert state.num_open_waypoints() == before - 1
    assert state.get_closed_waypoint(A) is wa


def test_close_leaves_other_locations_alone(state):
    wa, wb = wp(A, 1, 3), wp(B, 2, 4)
    state.add_open_waypoint(wa)
    state.add_open_waypoint(wb)
    state.close_waypoint(A)
    assert not state.is_location_closed(B)
    assert state.get_min_open_waypoint() is wb


# ------------------ HOOKS ------------------


def test_hooks_see_each_transition():
    hooks = TraceHooks()
    s = PathSearchState(object(), hooks=hooks)
    s.add_open_waypoint(wp(A, 5, 10))
    s.add_open_waypoint(wp(A, 6, 10))
    s.add_open_waypoint(wp(A, 4, 10))
    s.close_waypoint(A)
    with pytest.raises(ValueError):
        s.close_waypoint(B)

    assert hooks.trace == [
        ("opened", A, False, 1),
        ("rejected", A, 5, 1),
        ("opened", A, True, 1),
        ("closed", A, 0, 1),
        ("error", B, "not_open"),
    ]


def test_waypoint_total_and_back_pointer():
    start = Waypoint(A, previous_cost=0.0, remaining_cost=1.0)
    step = Waypoint(B, previous_cost=1.0, remaining_cost=0.0, previous=start)
    assert start.total_cost == 1.0
    assert step.total_cost == 1.0
    assert step.previous is start
    with pytest.raises(AttributeError):
        step.previous_cost = 0.5
