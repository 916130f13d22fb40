"""Fixed layout of the board: palette items, labels, pin positions and hotkey items."""

from __future__ import annotations

from logicboard.gates import (
    AndGate,
    Gate,
    MAX_PINS,
    NandGate,
    NorGate,
    NotGate,
    Off,
    On,
    OrGate,
    XnorGate,
    XorGate,
)

Point = tuple[float, float]

# Horizontal offset of every input pin relative to the gate position.
PIN_X_OFFSET = -7

# Vertical offsets of the input pins, by input count.
_PIN_Y_OFFSETS: dict[int, tuple[int, ...]] = {
    0: (),
    1: (22,),
    2: (7, 37),
    3: (7, 22, 37),
    4: (7, 17, 27, 37),
    5: (2, 12, 22, 32, 42),
}

INFO_TEXT_WIDTH = 150
INFO_TEXT_RISE = 100

_HOTKEY_LABEL_ORIGIN = (-5000, -950)
_HOTKEY_LABEL_STEP = 200

_HOTKEY_TEXTS = (
    "Hotkey Shift 1 + Click",
    "Hotkey Shift 2 + Click",
    "Hotkey 3 + Click",
    "Hotkey 4 + Click",
    "Hotkey 5 + Click",
    "Hotkey 6 + Click",
    "Hotkey 7 + Click",
    "Hotkey 8 + Click",
    "Hotkey 9 + Click",
)

_INFO_TEXTS = (
    "AND Gate: \nProduces an output which is true only if all its inputs are true",
    "NAND Gate: \nProduces an output which is false only if all its inputs are true",
    "OR Gate \nProduces an output which is true if only one inputs are true",
    "NOR Gate \nProduces an output which is true if all the inputs are true",
    "XOR Gate \nProduces an output which is true if one, and only one, of the inputs to the gate is true",
    "XNOR Gate \nProduces an output which is false if only one of the inputs to the gate is true",
    "NOT Gate \nInverts the input to the gate",
)

_PALETTE_GATE_TYPES = (AndGate, NandGate, OrGate, NorGate, XorGate, XnorGate, NotGate)
_PALETTE_GATE_Y = -1000
_PALETTE_GATE_X0 = -5000
_PALETTE_GATE_STEP = 200
_PALETTE_GATE_INPUTS = 2

_GATE_KINDS: dict[int, type[Gate]] = {
    1: AndGate,
    2: NandGate,
    3: OrGate,
    4: NorGate,
    5: XorGate,
    6: XnorGate,
    7: NotGate,
}
_SOURCE_KINDS: dict[int, type[Gate]] = {8: On, 9: Off}

# Hotkeys that select something to place on the board.
PLACEABLE_KINDS = frozenset(_GATE_KINDS) | frozenset(_SOURCE_KINDS)


def input_pin_points(position: Point, input_count: int) -> list[Point]:
    """Scene points of the used input pins of a gate at ``position``."""
    try:
        offsets = _PIN_Y_OFFSETS[input_count]
    except KeyError:
        raise ValueError(
            f"input count must be between 0 and {MAX_PINS}, got {input_count}"
        ) from None
    x, y = position
    return [(x + PIN_X_OFFSET, y + dy) for dy in offsets]


def palette_gates() -> list[Gate]:
    """The demonstration gates shown in a row at the top of the board."""
    return [
        gate_type(_PALETTE_GATE_X0 + _PALETTE_GATE_STEP * i, _PALETTE_GATE_Y, _PALETTE_GATE_INPUTS)
        for i, gate_type in enumerate(_PALETTE_GATE_TYPES)
    ]


def palette_sources() -> tuple[On, Off]:
    """The demonstration on and off sources next to the palette gates."""
    return On(-3570, -975), Off(-3370, -975)


def hotkey_labels() -> list[tuple[str, Point]]:
    """Hotkey hints with their scene positions, one under each palette item."""
    x0, y0 = _HOTKEY_LABEL_ORIGIN
    return [(text, (x0 + _HOTKEY_LABEL_STEP * i, y0)) for i, text in enumerate(_HOTKEY_TEXTS)]


def info_texts() -> list[tuple[str, Point]]:
    """Gate descriptions, each placed above its palette gate."""
    return [
        (text, (gate.x, gate.y - INFO_TEXT_RISE))
        for text, gate in zip(_INFO_TEXTS, palette_gates())
    ]


def make_item(kind: int, x: float, y: float) -> Gate:
    """Create the item selected by hotkey ``kind`` (1-9) at (x, y)."""
    if kind in _GATE_KINDS:
        return _GATE_KINDS[kind](x, y, 0)
    if kind in _SOURCE_KINDS:
        return _SOURCE_KINDS[kind](x, y)
    raise ValueError(f"no item is bound to hotkey {kind}")