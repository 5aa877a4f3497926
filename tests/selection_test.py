import pytest
import random

import region_tree.selection as selection
from region_tree.selection import State
from region_tree.index import HierarchyIndex
from region_tree.errors import RegionNotFoundError, MalformedHierarchyError

@pytest.fixture
def sel(flat_records):
    idx = HierarchyIndex()
    idx.ingest(flat_records)
    return selection.Selection(idx)

@pytest.fixture
def country(country_records):
    idx = HierarchyIndex()
    idx.ingest(country_records)
    return selection.Selection(idx)

def states(sel):
    return dict(sel.items())

def assert_consistent(sel, idx):
    for region_id in idx.ids():
        children = idx.children(region_id)
        if not children:
            assert sel.state(region_id) in (State.CHECKED, State.UNCHECKED)
            continue
        child_states = {sel.state(c) for c in children}
        if child_states == {State.CHECKED}:
            assert sel.state(region_id) == State.CHECKED
        elif child_states == {State.UNCHECKED}:
            assert sel.state(region_id) == State.UNCHECKED
        else:
            assert sel.state(region_id) == State.HALF_CHECKED

def test_initially_unchecked(sel):
    assert set(states(sel).values()) == {State.UNCHECKED}
    assert sel.selected() == []

def test_toggle_leaf(sel):
    changed = sel.toggle(4, State.CHECKED)
    assert changed == [4, 2, 1]
    assert sel.state(4) == State.CHECKED
    assert sel.state(2) == State.CHECKED
    assert sel.state(1) == State.HALF_CHECKED
    assert sel.state(3) == State.UNCHECKED
    assert set(sel.selected()) == {4, 2}

def test_toggle_accepts_string_value(sel):
    sel.toggle(3, "checked")
    assert sel.state(3) == State.CHECKED

def test_toggle_completes_parent(sel):
    sel.toggle(4, State.CHECKED)
    sel.toggle(3, State.CHECKED)
    assert sel.state(1) == State.CHECKED
    assert set(sel.selected()) == {1, 2, 3, 4}

def test_toggle_down(sel):
    changed = sel.toggle(1, State.CHECKED)
    assert changed == [1, 2, 4, 3]
    assert set(sel.selected()) == {1, 2, 3, 4}
    sel.toggle(2, State.UNCHECKED)
    assert sel.state(4) == State.UNCHECKED
    assert sel.state(1) == State.HALF_CHECKED
    assert sel.selected() == [3]

def test_uncheck_last_child_unchecks_parent(sel):
    sel.toggle(4, State.CHECKED)
    sel.toggle(4, State.UNCHECKED)
    assert set(states(sel).values()) == {State.UNCHECKED}

def test_half_propagates_up(country):
    country.toggle("ft", State.CHECKED)
    assert country.state("sz") == State.HALF_CHECKED
    assert country.state("gd") == State.HALF_CHECKED
    assert country.state("cn") == State.HALF_CHECKED
    assert country.state("jp") == State.UNCHECKED
    assert country.selected() == ["ft"]

def test_idempotent(country):
    country.toggle("sz", State.CHECKED)
    once = states(country)
    country.toggle("sz", State.CHECKED)
    assert states(country) == once

def test_subtree_totality(country):
    country.toggle("gd", State.CHECKED)
    assert country.selected() == ["gd", "gz", "sz", "ft", "ns"]

def test_cannot_request_half(sel):
    with pytest.raises(ValueError):
        sel.toggle(1, State.HALF_CHECKED)

def test_unknown_id(sel):
    with pytest.raises(RegionNotFoundError):
        sel.toggle(17, State.CHECKED)
    with pytest.raises(RegionNotFoundError):
        sel.state(17)
    assert set(states(sel).values()) == {State.UNCHECKED}

def test_invert(sel):
    sel.invert(4)
    assert sel.state(4) == State.CHECKED
    assert sel.state(1) == State.HALF_CHECKED
    # Half checked becomes checked
    sel.invert(1)
    assert sel.state(1) == State.CHECKED
    assert sel.state(3) == State.CHECKED
    sel.invert(1)
    assert set(states(sel).values()) == {State.UNCHECKED}

def test_set_all(sel):
    sel.set_all([2])
    assert sel.selected() == [2, 4]
    assert sel.state(4) == State.CHECKED
    assert sel.state(1) == State.HALF_CHECKED

    sel.set_all([3, 3])
    assert sel.selected() == [3]
    assert sel.state(2) == State.UNCHECKED
    assert sel.state(4) == State.UNCHECKED

def test_set_all_single_id(country):
    country.set_all("sz")
    assert country.selected() == ["sz", "ft", "ns"]

def test_set_all_unknown_leaves_state(sel):
    sel.set_all([4])
    with pytest.raises(RegionNotFoundError):
        sel.set_all([3, 99])
    assert set(sel.selected()) == {2, 4}

def test_set_all_empty(sel):
    sel.set_all([1])
    sel.set_all([])
    assert sel.selected() == []

def test_reset(sel):
    sel.toggle(1, State.CHECKED)
    sel.reset()
    assert sel.selected() == []

def test_cycle_fails_without_change():
    idx = HierarchyIndex()
    idx.ingest([{"id":"a", "pid":"b"}, {"id":"b", "pid":"a"}])
    sel = selection.Selection(idx)
    with pytest.raises(MalformedHierarchyError):
        sel.toggle("a", State.CHECKED)
    assert sel.selected() == []

def test_random_toggles_stay_consistent(country_records):
    idx = HierarchyIndex()
    idx.ingest(country_records)
    sel = selection.Selection(idx)
    rng = random.Random(7)
    ids = idx.ids()
    for _ in range(200):
        sel.toggle(rng.choice(ids), rng.choice([State.CHECKED, State.UNCHECKED]))
        assert_consistent(sel, idx)
