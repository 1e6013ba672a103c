from gemswap.shared import GemSlot, GemType, SlotState
from gemswap.vectors import Vec2


def test_gem_type_lookup_by_value():
    assert [GemType(i) for i in range(6)] == [
        GemType.COLOR_1,
        GemType.COLOR_2,
        GemType.COLOR_3,
        GemType.COLOR_4,
        GemType.COLOR_5,
        GemType.MAX,
    ]


def test_slots_sort_by_state_order():
    free = GemSlot(row=0, col=0, index=0)
    blocked = GemSlot(row=0, col=1, index=1)
    occupied = GemSlot(row=0, col=2, index=2)
    free.state = SlotState.FREE
    blocked.state = SlotState.BLOCKED
    occupied.state = SlotState.OCCUPIED
    ordered = sorted([free, occupied, blocked], key=lambda s: s.state)
    assert [s.index for s in ordered] == [1, 2, 0]


def test_slot_is_mutable_and_keeps_fields():
    slot = GemSlot(row=2, col=3, index=19, position=Vec2(10.0, 20.0))
    slot.state = SlotState.OCCUPIED
    slot.gem_type = GemType.COLOR_4
    assert slot.state is SlotState.OCCUPIED
    assert slot.gem_type is GemType.COLOR_4
    assert slot.position == Vec2(10.0, 20.0)


def test_slots_compare_by_identity():
    a = GemSlot(row=1, col=1, index=9)
    b = GemSlot(row=1, col=1, index=9)
    assert a != b
    assert a in [a]
    assert b not in [a]


def test_default_vectors_are_independent():
    a = GemSlot()
    b = GemSlot()
    a.center = Vec2(5.0, 5.0)
    assert b.center == Vec2()