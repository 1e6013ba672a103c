import pytest

from gemswap.settings import GRID_COLS, GRID_ROWS, HINT_WAIT_TIME, get_index
from gemswap.shared import GameState, GemSlot, GemType, SlotState
from gemswap.states.hint import HintState, forms_match


class _FakeController:
    def __init__(self, slots):
        self.slots = slots
        self.gems = []
        self.shown = []
        self.hidden = 0

    def show_hint_for_slots(self, slot0, slot1):
        self.shown.append((slot0, slot1))

    def hide_hint(self):
        self.hidden += 1


def _board():
    # Neighbouring cells always differ, so no line of three exists.
    return [
        GemSlot(
            row=r,
            col=c,
            index=get_index(r, c),
            state=SlotState.OCCUPIED,
            gem_type=GemType((r + 2 * c) % 5),
        )
        for r in range(GRID_ROWS)
        for c in range(GRID_COLS)
    ]


def _at(slots, row, col):
    return slots[get_index(row, col)]


def test_pattern_board_has_no_match():
    slots = _board()
    assert not any(forms_match(slots, s) for s in slots)


def test_row_of_three_matches():
    slots = _board()
    for col in range(3):
        _at(slots, 0, col).gem_type = GemType.COLOR_1
    assert forms_match(slots, _at(slots, 0, 1))
    assert forms_match(slots, _at(slots, 0, 0))


def test_column_of_three_matches():
    slots = _board()
    for row in range(2, 5):
        _at(slots, row, 6).gem_type = GemType.COLOR_4
    assert forms_match(slots, _at(slots, 4, 6))


def test_blocked_slot_breaks_line():
    slots = _board()
    for col in range(3):
        _at(slots, 0, col).gem_type = GemType.COLOR_1
    _at(slots, 0, 1).state = SlotState.BLOCKED
    assert not forms_match(slots, _at(slots, 0, 0))


def test_kind_done_and_next():
    state = HintState(_FakeController(_board()))
    assert state.kind is GameState.HINTING
    assert state.is_done() is True
    assert state.next_state() is None


def test_no_hint_before_wait():
    slots = _board()
    controller = _FakeController(slots)
    state = HintState(controller)
    state.update(HINT_WAIT_TIME / 2)
    assert controller.shown == []
    assert state.showing_hint is False


def test_hint_shown_once_after_wait():
    slots = _board()
    for row, col in ((7, 0), (7, 1), (6, 2)):
        _at(slots, row, col).gem_type = GemType.COLOR_1
    types_before = [s.gem_type for s in slots]
    controller = _FakeController(slots)
    state = HintState(controller)
    state.update(HINT_WAIT_TIME + 1.0)
    state.update(HINT_WAIT_TIME + 1.0)

    assert len(controller.shown) == 1
    one, two = controller.shown[0]
    assert state.hint_pair == (one, two)
    assert abs(one.row - two.row) + abs(one.col - two.col) == 1
    assert [s.gem_type for s in slots] == types_before

    one.gem_type, two.gem_type = two.gem_type, one.gem_type
    assert forms_match(slots, one) or forms_match(slots, two)


def test_all_blocked_board_shows_nothing():
    slots = _board()
    for slot in slots:
        slot.state = SlotState.BLOCKED
    controller = _FakeController(slots)
    state = HintState(controller)
    state.update(HINT_WAIT_TIME + 1.0)
    assert controller.shown == []
    assert state.hint_pair is None
    assert state.showing_hint is True


def test_close_hides_hint():
    controller = _FakeController(_board())
    HintState(controller).close()
    assert controller.hidden == 1