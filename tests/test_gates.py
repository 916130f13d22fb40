import itertools

import pytest

from logicboard.gates import (
    AndGate,
    Arc,
    Gate,
    Line,
    NandGate,
    NorGate,
    NotGate,
    Off,
    On,
    OrGate,
    Rect,
    XnorGate,
    XorGate,
)

COMBOS = [list(c) for n in range(1, 6) for c in itertools.product([False, True], repeat=n)]


def _fed(gate, inputs):
    gate.inputs = list(inputs)
    return gate


@pytest.mark.parametrize("inputs", COMBOS)
def test_nand_is_inverse_of_and(inputs):
    nand = _fed(NandGate(0, 0, len(inputs)), inputs)
    and_gate = _fed(AndGate(0, 0, len(inputs)), inputs)
    assert nand.determine_output() == (not and_gate.determine_output())


@pytest.mark.parametrize("inputs", COMBOS)
def test_nor_is_inverse_of_or(inputs):
    nor = _fed(NorGate(0, 0, len(inputs)), inputs)
    or_gate = _fed(OrGate(0, 0, len(inputs)), inputs)
    assert nor.determine_output() == (not or_gate.determine_output())


@pytest.mark.parametrize("inputs", COMBOS)
def test_xnor_is_inverse_of_xor(inputs):
    xnor = _fed(XnorGate(0, 0, len(inputs)), inputs)
    xor = _fed(XorGate(0, 0, len(inputs)), inputs)
    assert xnor.determine_output() == (not xor.determine_output())


@pytest.mark.parametrize("inputs", COMBOS)
def test_and_implies_or(inputs):
    and_gate = _fed(AndGate(0, 0, len(inputs)), inputs)
    or_gate = _fed(OrGate(0, 0, len(inputs)), inputs)
    if and_gate.determine_output():
        assert or_gate.determine_output() is True
    else:
        assert False in inputs


def test_and_truth_table():
    assert _fed(AndGate(0, 0, 2), [True, True]).determine_output() is True
    assert _fed(AndGate(0, 0, 2), [True, False]).determine_output() is False


def test_or_truth_table():
    assert _fed(OrGate(0, 0, 2), [False, False]).determine_output() is False
    assert _fed(OrGate(0, 0, 2), [False, True]).determine_output() is True


def test_xor_counts_exactly_one():
    assert _fed(XorGate(0, 0, 3), [True, False, False]).determine_output() is True
    assert _fed(XorGate(0, 0, 3), [True, True, False]).determine_output() is False


def test_xor_always_raises_stored_output():
    gate = XorGate(0, 0, 2)
    gate.inputs = [True, True]
    assert gate.determine_output() is False
    assert gate.output is True


def test_determine_output_stores_result():
    gate = NandGate(0, 0, 2)
    gate.inputs = [True, True]
    result = gate.determine_output()
    assert gate.output == result
    assert result is False


def test_not_inverts_first_input():
    assert _fed(NotGate(0, 0, 1), [True]).determine_output() is False
    assert _fed(NotGate(0, 0, 1), [False]).determine_output() is True


def test_not_without_input_raises():
    with pytest.raises(ValueError):
        NotGate(0, 0, 1).determine_output()


def test_not_gate_max_input():
    assert NotGate(0, 0, 0).max_input == 1
    assert AndGate(0, 0, 0).max_input == 5


def test_sources():
    on, off = On(3, 4), Off(3, 4)
    assert on.output is True
    assert off.output is False
    assert on.determine_output() is True
    assert off.determine_output() is False


@pytest.mark.parametrize(
    "cls, name",
    [
        (AndGate, "AND"),
        (NandGate, "NAND"),
        (OrGate, "OR"),
        (NorGate, "NOR"),
        (XorGate, "XOR"),
        (XnorGate, "XNOR"),
        (NotGate, "NOT"),
    ],
)
def test_gate_names(cls, name):
    assert cls(0, 0, 2).name == name


def test_source_names():
    assert On(0, 0).name == "On"
    assert Off(0, 0).name == "Off"


def test_distance_from_own_position_is_zero():
    gate = OrGate(-120, 45, 2)
    assert gate.distance_from((-120, 45)) == 0


def test_distance_is_symmetric():
    a = AndGate(10, 20, 0)
    b = AndGate(-7, 3, 0)
    assert a.distance_from(b.position) == pytest.approx(b.distance_from(a.position))


def test_move_to_updates_position():
    gate = On(0, 0)
    gate.move_to(15.5, -8)
    assert gate.position == (15.5, -8)
    assert gate.distance_from((15.5, -8)) == 0


def test_active_inputs_counts_pins():
    gate = AndGate(0, 0, 3)
    gate.active_pins[0] = True
    gate.active_pins[2] = True
    assert gate.active_inputs == 2


@pytest.mark.parametrize("cls", [AndGate, NandGate, OrGate, NorGate, XorGate, XnorGate, NotGate])
@pytest.mark.parametrize("count", range(0, 6))
def test_stub_count_matches_input_count(cls, count):
    base = len(cls(0, 0, 0).shapes())
    stubs = cls(0, 0, count).shapes()[base:]
    assert len(stubs) == count
    assert all(isinstance(s, Line) and s.x1 == 0 and s.y1 == s.y2 for s in stubs)


def test_and_stubs_for_two_inputs():
    shapes = AndGate(0, 0, 2).shapes()
    assert Line(0, 10, 20, 10) in shapes
    assert Line(0, 40, 20, 40) in shapes
    assert Line(70, 25, 100, 25) in shapes


def test_or_stub_reach_follows_curve():
    shapes = OrGate(0, 0, 5).shapes()
    assert Line(0, 25, 35, 25) in shapes
    assert Line(0, 5, 29, 5) in shapes


def test_xor_stub_reach():
    shapes = XorGate(0, 0, 4).shapes()
    assert Line(0, 20, 29, 20) in shapes
    assert Line(0, 10, 27, 10) in shapes


def test_inverting_gates_draw_bubble():
    bubble = Arc(70, 20, 10, 10, 0, 360)
    assert bubble in NandGate(0, 0, 0).shapes()
    assert bubble in NotGate(0, 0, 0).shapes()
    assert bubble not in AndGate(0, 0, 0).shapes()


def test_source_shapes():
    assert On(0, 0).shapes() == [Rect(0, 0, 6, 6, filled=True)]
    assert Off(0, 0).shapes() == [Rect(0, 0, 6, 6)]
    assert On.bounds == Rect(0, 0, 5, 5)
    assert AndGate.bounds == Rect(0, 0, 20, 20)


def test_gate_is_abstract():
    with pytest.raises(TypeError):
        Gate(0, 0, 0)