"""Window that shows the board and feeds it keyboard and mouse input."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence, Union

from logicboard.connector import Connector
from logicboard.environment import Environment, Modifier, MouseButton, MouseEvent
from logicboard.gates import Arc, Line, Rect

Point = tuple[float, float]
Command = tuple

# Scene point shown at the top-left corner of the window.
DEFAULT_ORIGIN: Point = (-5100.0, -1150.0)
REFRESH_MS = 10
INFO_TEXT_WIDTH = 150

_BUTTONS = {1: MouseButton.LEFT, 2: MouseButton.MIDDLE, 3: MouseButton.RIGHT}

_SHIFT_MASK = 0x0001
_CONTROL_MASK = 0x0004
_ALT_MASKS = (0x0008, 0x20000)


def translate_event(button: int, state: int, x: float, y: float) -> MouseEvent:
    """Turn a toolkit button number and modifier state into a board event.

    Caps Lock and Num Lock are ignored. A combination of several modifiers
    matches none of the single-modifier actions, so it is reported as none.
    """
    held = []
    if state & _SHIFT_MASK:
        held.append(Modifier.SHIFT)
    if state & _CONTROL_MASK:
        held.append(Modifier.CONTROL)
    if any(state & mask for mask in _ALT_MASKS):
        held.append(Modifier.ALT)
    modifier = held[0] if len(held) == 1 else Modifier.NONE
    return MouseEvent(x, y, _BUTTONS.get(button, MouseButton.NONE), modifier)


def _shape_command(shape: Union[Line, Arc, Rect], dx: float, dy: float) -> Command:
    if isinstance(shape, Line):
        return ("line", shape.x1 + dx, shape.y1 + dy, shape.x2 + dx, shape.y2 + dy)
    if isinstance(shape, Arc):
        return (
            "arc",
            shape.x + dx,
            shape.y + dy,
            shape.width,
            shape.height,
            shape.start,
            shape.span,
        )
    return ("rect", shape.x + dx, shape.y + dy, shape.width, shape.height, shape.filled)


class CircuitView:
    """Maps the board onto window coordinates and lists what to draw."""

    def __init__(
        self, environment: Optional[Environment] = None, origin: Point = DEFAULT_ORIGIN
    ) -> None:
        self.environment = environment if environment is not None else Environment()
        self.origin = origin

    def to_scene(self, x: float, y: float) -> Point:
        """Convert a window point to a scene point."""
        return (x + self.origin[0], y + self.origin[1])

    def _to_view(self, point: Point) -> Point:
        return (point[0] - self.origin[0], point[1] - self.origin[1])

    def render(self) -> list[Command]:
        """Drawing commands in window coordinates, in drawing order.

        Commands are ``("line", x1, y1, x2, y2)``,
        ``("arc", x, y, width, height, start, span)``,
        ``("rect", x, y, width, height, filled)`` and
        ``("text", x, y, text, width)`` where width may be ``None``.
        """
        commands: list[Command] = []
        for item in self.environment.items():
            dx, dy = self._to_view(item.position)
            shapes = item.segments() if isinstance(item, Connector) else item.shapes()
            commands.extend(_shape_command(shape, dx, dy) for shape in shapes)
        for text, point in self.environment.labels:
            commands.append(("text", *self._to_view(point), text, None))
        for text, point in self.environment.visible_info():
            commands.append(("text", *self._to_view(point), text, INFO_TEXT_WIDTH))
        return commands


def _draw(canvas, commands: Sequence[Command]) -> None:
    import tkinter as tk

    canvas.delete("all")
    for command in commands:
        kind, *args = command
        if kind == "line":
            canvas.create_line(*args)
        elif kind == "arc":
            x, y, width, height, start, span = args
            canvas.create_arc(
                x, y, x + width, y + height, start=start, extent=span, style=tk.ARC
            )
        elif kind == "rect":
            x, y, width, height, filled = args
            canvas.create_rectangle(
                x, y, x + width, y + height, fill="black" if filled else ""
            )
        elif kind == "text":
            x, y, text, width = args
            options = {"width": width} if width is not None else {}
            canvas.create_text(x, y, text=text, anchor="nw", **options)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the board in a maximised window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="logicboard", description="Place, wire and evaluate logic gates."
    )
    parser.parse_args(argv)

    import tkinter as tk

    view = CircuitView()
    board = view.environment

    root = tk.Tk()
    root.title("logicboard")
    try:
        root.state("zoomed")
    except tk.TclError:
        try:
            root.attributes("-zoomed", True)
        except tk.TclError:
            pass

    canvas = tk.Canvas(root, background="white", highlightthickness=0)
    canvas.pack(fill=tk.BOTH, expand=True)
    canvas.focus_set()

    def redraw() -> None:
        _draw(canvas, view.render())

    def event_for(tk_event, button: int) -> MouseEvent:
        x, y = view.to_scene(tk_event.x, tk_event.y)
        return translate_event(button, tk_event.state, x, y)

    def on_press(tk_event) -> None:
        board.mouse_press(event_for(tk_event, tk_event.num))
        redraw()

    def on_release(tk_event) -> None:
        board.mouse_release(event_for(tk_event, tk_event.num))
        redraw()

    def on_motion(tk_event) -> None:
        board.mouse_move(event_for(tk_event, 0))
        redraw()

    def on_key(tk_event) -> None:
        board.key_press(tk_event.char)

    def tick() -> None:
        board.update_scene()
        redraw()
        root.after(REFRESH_MS, tick)

    canvas.bind("<ButtonPress>", on_press)
    canvas.bind("<ButtonRelease>", on_release)
    canvas.bind("<Motion>", on_motion)
    canvas.bind("<Key>", on_key)

    tick()
    root.mainloop()
    return 0