"""The interactive board: placing, wiring, moving and evaluating gates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional, Sequence, Union

from logicboard.connector import Connector, SourceKind
from logicboard.gates import Gate, Off, On
from logicboard.layout import (
    PLACEABLE_KINDS,
    hotkey_labels,
    info_texts,
    input_pin_points,
    make_item,
    palette_gates,
    palette_sources,
)

Point = tuple[float, float]
Item = Union[Gate, Connector]

INFO_RADIUS = 80
RESIZE_RADIUS = 25
PIN_SNAP_RADIUS = 5
SEARCH_LIMIT = 1000
RESIZE_ANCHOR = (50, 25)
GATE_OUTPUT_OFFSET = (100, 22)
GATE_WIRE_OFFSET = (100, 25)


class MouseButton(Enum):
    NONE = auto()
    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()


class Modifier(Enum):
    NONE = auto()
    SHIFT = auto()
    ALT = auto()
    CONTROL = auto()


@dataclass(frozen=True)
class MouseEvent:
    """A mouse event in scene coordinates."""

    x: float
    y: float
    button: MouseButton = MouseButton.NONE
    modifiers: Modifier = Modifier.NONE

    @property
    def point(self) -> Point:
        return (self.x, self.y)


def _nearest(groups: Iterable[tuple[object, Sequence]], point: Point):
    """Find the closest item over several lists, by truncated distance.

    Returns ``(tag, index, item)`` or ``None`` when nothing is within reach.
    Ties keep the earlier candidate.
    """
    best = None
    smallest = SEARCH_LIMIT
    for tag, items in groups:
        for index, item in enumerate(items):
            distance = int(item.distance_from(point))
            if distance < smallest:
                smallest = distance
                best = (tag, index, item)
    return best


def _same_spot(a: Gate, b: Gate) -> bool:
    return int(a.x) == int(b.x) and int(a.y) == int(b.y)


class Environment:
    """The board with its palette, placed items, wires and evaluation rules."""

    def __init__(self) -> None:
        self.palette: list[Gate] = palette_gates()
        self.palette_on, self.palette_off = palette_sources()
        self.labels = hotkey_labels()
        self._info = info_texts()
        self._info_visible = [False] * len(self._info)

        self.gates: list[Gate] = []
        self.gates_io: list[Gate] = []
        self.connectors: list[Connector] = []
        self.on_list: list[On] = []
        self.off_list: list[Off] = []
        self.out_list: list[Gate] = []
        self.connect_list: list[Gate] = []

        self.gate_place = 0
        self.item_move = False
        self.last_moved = 0
        self.pending_click: Optional[tuple[int, int]] = None

        self._scene: list[Item] = []
        for item in (*self.palette, self.palette_on, self.palette_off):
            self._add(item)

    # scene bookkeeping

    def _add(self, item: Item) -> None:
        if not any(existing is item for existing in self._scene):
            self._scene.append(item)

    def _remove(self, item: Item) -> None:
        self._scene = [existing for existing in self._scene if existing is not item]

    def _make_signal(self, value: bool, point: Point) -> Gate:
        if value:
            signal: Gate = On(*point)
            self.on_list.append(signal)
        else:
            signal = Off(*point)
            self.off_list.append(signal)
        self._add(signal)
        return signal

    def items(self) -> list[Item]:
        """Everything currently drawn on the board, in drawing order."""
        return list(self._scene)

    # keyboard

    def key_press(self, key) -> None:
        """Select what a shift-click places: keys 1 to 9."""
        text = str(key)
        if len(text) == 1 and text.isdigit() and int(text) in PLACEABLE_KINDS:
            self.gate_place = int(text)

    # information texts

    def gate_information(self, point: Point) -> None:
        """Show the description of a palette gate the pointer is close to."""
        for gate in self.palette:
            if gate.distance_from(point) < INFO_RADIUS:
                self._info_visible = [gate.name == other.name for other in self.palette]

    def visible_info(self) -> list[tuple[str, Point]]:
        """The gate descriptions that are currently shown."""
        return [entry for entry, shown in zip(self._info, self._info_visible) if shown]

    def update_scene(self) -> list[Gate]:
        """Refresh every placed gate and return them in list order."""
        for gate in self.gates:
            gate.move_to(float(gate.x), float(gate.y))
        return list(self.gates)

    # mouse presses

    def mouse_press(self, event: MouseEvent) -> None:
        if event.button is MouseButton.MIDDLE:
            self._connect(event)
        elif event.modifiers is Modifier.ALT:
            self._resize(event)
        elif event.modifiers is Modifier.SHIFT:
            self._place(event)
        elif event.button is MouseButton.LEFT:
            self.item_move = True
        elif event.button is MouseButton.RIGHT:
            self._delete(event)

    def _connect(self, event: MouseEvent) -> None:
        """First middle click picks a source, the second one lays the wire."""
        if len(self.gates_io) <= 1:
            return
        click = (int(event.x), int(event.y))
        if self.pending_click is None:
            self.pending_click = click
            return
        start = self.pending_click
        self.pending_click = None

        found = _nearest(
            (
                (SourceKind.GATE, self.gates),
                (SourceKind.ON, self.on_list),
                (SourceKind.OFF, self.off_list),
            ),
            start,
        )
        if found is None:
            return
        kind, index, source = found
        if kind is SourceKind.GATE:
            start_x = int(source.x) + GATE_WIRE_OFFSET[0]
            start_y = int(source.y) + GATE_WIRE_OFFSET[1]
            source.connected_out = True
        else:
            start_x, start_y = int(source.x), int(source.y)

        end_x, end_y = click
        up_down = dir_x = dir_y = True
        if end_x < start_x:
            start_x, end_x = end_x, start_x
            up_down = not up_down
            dir_x = False
        if end_y < start_y:
            start_y, end_y = end_y, start_y
            up_down = not up_down
            dir_y = False

        connector = Connector(
            start_x,
            start_y,
            end_x - start_x,
            end_y - start_y,
            source.output,
            up_down,
            kind,
            index,
            dir_x,
            dir_y,
        )
        self.connectors.append(connector)
        self._add(connector)
        self.connect_list.append(self._make_signal(connector.value, connector.end_point()))

    def _resize(self, event: MouseEvent) -> None:
        """Alt-click on a gate adds (left) or removes (right) an input."""
        anchor = (event.x - RESIZE_ANCHOR[0], event.y - RESIZE_ANCHOR[1])
        for gate in self.gates:
            if gate.distance_from(anchor) < RESIZE_RADIUS:
                if event.button is MouseButton.LEFT and gate.input_count < gate.max_input:
                    gate.input_count += 1
                elif event.button is MouseButton.RIGHT and gate.input_count > 0:
                    gate.input_count -= 1
                self.gates.append(gate)
                self._remove(gate)
                self._add(gate)
                break

    def _place(self, event: MouseEvent) -> None:
        if event.button is not MouseButton.LEFT or self.gate_place not in PLACEABLE_KINDS:
            return
        item = make_item(self.gate_place, int(event.x), int(event.y))
        if isinstance(item, On):
            self.on_list.append(item)
        elif isinstance(item, Off):
            self.off_list.append(item)
        else:
            self.gates.append(item)
        self._add(item)
        self.gates_io.append(item)

    def _delete(self, event: MouseEvent) -> None:
        """Remove whatever is closest to a right click."""
        found = _nearest(
            (
                ("item", self.gates_io),
                ("wire", self.connectors),
                ("end", self.connect_list),
            ),
            event.point,
        )
        if found is None:
            return
        tag, index, target = found
        if tag == "item":
            for group in (self.gates, self.on_list, self.off_list):
                remaining = [item for item in group if not _same_spot(item, target)]
                if len(remaining) != len(group):
                    group[:] = remaining
                    break
            self._remove(target)
            del self.gates_io[index]
        elif tag == "wire":
            self._remove(target)
            del self.connectors[index]
        else:
            self._remove(target)
            del self.connect_list[index]

    # mouse release

    def mouse_release(self, event: MouseEvent) -> None:
        """Drop the dragged item and re-evaluate every fully wired gate."""
        for output in self.out_list:
            self._remove(output)
            self.on_list[:] = [s for s in self.on_list if not _same_spot(s, output)]
            self.off_list[:] = [s for s in self.off_list if not _same_spot(s, output)]
        self.out_list.clear()

        self.last_moved = 0
        if event.button is MouseButton.LEFT and self.item_move:
            self.item_move = False

        for index, gate in enumerate(self.gates):
            if gate.active_inputs != gate.input_count or gate.active_inputs <= 0:
                continue
            result = gate.determine_output()
            if not gate.connected_out:
                point = (
                    int(gate.x + GATE_OUTPUT_OFFSET[0]),
                    int(gate.y + GATE_OUTPUT_OFFSET[1]),
                )
                self.out_list.append(self._make_signal(result, point))
                continue
            for connector in self.connectors:
                if connector.source_kind is SourceKind.GATE and connector.source_index == index:
                    connector.value = gate.output
                    self.out_list.append(
                        self._make_signal(connector.value, connector.end_point())
                    )

    # mouse movement

    def mouse_move(self, event: MouseEvent) -> None:
        """Show gate information and drag the item being moved."""
        self.gate_information(event.point)
        if not self.item_move:
            return
        if self.last_moved == 0:
            found = _nearest(((None, self.gates_io),), event.point)
            if found is not None:
                self.last_moved = found[1]
        if self.last_moved < len(self.gates_io):
            item = self.gates_io[self.last_moved]
            if not item.connected_in and not item.connected_out:
                item.move_to(float(event.x), float(event.y))
        self.update_inputs()

    def update_inputs(self) -> None:
        """Snap signals onto nearby free gate pins and record their values."""
        if not self.item_move:
            return
        for sources, value in ((self.on_list, True), (self.off_list, False)):
            for source in sources:
                for gate in self.gates:
                    pins = input_pin_points(gate.position, gate.input_count)
                    for pin, point in enumerate(pins):
                        if source.distance_from(point) < PIN_SNAP_RADIUS:
                            source.move_to(*point)
                            if not gate.active_pins[pin]:
                                gate.active_pins[pin] = True
                                gate.inputs.append(value)
                                gate.connected_in = True