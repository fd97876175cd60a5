from __future__ import annotations

import random

import pytest

from tailfeather.palette import BLUE, CYAN, MAGENTA, PALETTE, RED, WHITE
from tailfeather.tracker import FieldTracker


def _check_inverse(tracker: FieldTracker) -> None:
    for value, slot in tracker.slot_of_value.items():
        assert tracker.value_of_slot[slot] == value
    for slot, value in enumerate(tracker.value_of_slot):
        if value is not None:
            assert tracker.slot_of_value[value] == slot


def test_fresh_tracker_state():
    tracker = FieldTracker()
    assert len(tracker) == 0
    assert tracker.capacity == 7
    assert tracker.next_slot == 0
    assert tracker.last_color == RED
    assert tracker.tracked() == []


def test_first_value_gets_first_color():
    tracker = FieldTracker()
    assert tracker.assign("a") == WHITE
    assert tracker.next_slot == 1
    assert tracker.last_color == WHITE


def test_hit_returns_same_color_without_moving_cursor():
    tracker = FieldTracker()
    tracker.assign("a")
    tracker.assign("b")
    cursor = tracker.next_slot
    assert tracker.assign("a") == WHITE
    assert tracker.next_slot == cursor
    assert tracker.last_color == WHITE


def test_novel_values_cycle_through_palette():
    tracker = FieldTracker()
    colors = [tracker.assign(f"v{i}") for i in range(7)]
    assert colors == list(PALETTE)


def test_eighth_value_reuses_first_slot():
    tracker = FieldTracker()
    first = tracker.assign("v0")
    for i in range(1, 7):
        tracker.assign(f"v{i}")

    eighth = tracker.assign("v7")
    assert eighth == first
    assert "v0" not in tracker
    assert len(tracker) == 7

    # v0 is novel again; the cursor sits on slot 1 so it evicts v1.
    assert tracker.assign("v0") == MAGENTA
    assert "v1" not in tracker
    assert tracker.color_of("v7") == WHITE


def test_novel_value_skips_color_just_shown():
    tracker = FieldTracker()
    for i in range(7):
        tracker.assign(f"v{i}")
    # Cursor is back on slot 0 (white); show white via a hit.
    assert tracker.assign("v0") == WHITE

    assert tracker.assign("new") == MAGENTA
    assert "v1" not in tracker
    assert "v0" in tracker
    assert tracker.next_slot == 2


def test_skip_counts_as_consumed_advance():
    tracker = FieldTracker()
    for i in range(7):
        tracker.assign(f"v{i}")
    tracker.assign("v0")
    tracker.assign("new")  # lands on slot 1
    assert tracker.assign("newer") == CYAN
    assert tracker.assign("newest") == BLUE
    assert tracker.tracked() == ["v0", "new", "newer", "newest", "v4", "v5", "v6"]


def test_hit_may_repeat_previous_color():
    tracker = FieldTracker()
    assert tracker.assign("x") == WHITE
    assert tracker.assign("x") == WHITE


def test_empty_string_is_a_regular_value():
    tracker = FieldTracker()
    assert tracker.assign("") == WHITE
    assert tracker.assign("a") == MAGENTA
    assert "" in tracker
    assert tracker.assign("") == WHITE
    _check_inverse(tracker)


def test_color_of_does_not_mutate():
    tracker = FieldTracker()
    tracker.assign("a")
    tracker.assign("b")
    assert tracker.color_of("a") == WHITE
    assert tracker.color_of("missing") is None
    assert tracker.last_color == MAGENTA
    assert len(tracker) == 2


def test_custom_palette():
    tracker = FieldTracker(["one", "two"])
    assert tracker.assign("a") == "one"
    assert tracker.assign("b") == "two"
    assert tracker.assign("c") == "one"
    assert tracker.tracked() == ["c", "b"]


def test_palette_too_small():
    with pytest.raises(ValueError):
        FieldTracker(["only"])


def test_invariants_hold_for_random_streams():
    rng = random.Random(1234)
    for _ in range(25):
        tracker = FieldTracker()
        previous = tracker.last_color
        for _ in range(300):
            value = str(rng.randint(0, 12))
            novel = value not in tracker
            color = tracker.assign(value)
            if novel:
                assert color != previous
            previous = color

            assert len(tracker) <= len(PALETTE)
            live = tracker.tracked()
            assert len({tracker.color_of(v) for v in live}) == len(live)
            _check_inverse(tracker)


def test_value_stable_while_fewer_than_k_novel_values_follow():
    rng = random.Random(99)
    tracker = FieldTracker()
    color = tracker.assign("anchor")
    for i in range(6):
        tracker.assign(f"other{i}")
        for _ in range(rng.randint(0, 3)):
            tracker.assign(f"other{rng.randint(0, i)}")
    assert tracker.assign("anchor") == color
