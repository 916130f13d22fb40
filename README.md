# logicboard

An interactive board for learning how logic gates behave. You can place AND, NAND,
OR, NOR, XOR, XNOR and NOT gates, feed them with On and Off sources, and wire
gate outputs onward with connectors. Each gate's output appears once all of its
inputs are filled.

## Installation

```
pip install .
```

The window uses `tkinter` from the standard library, so your Python must be
built with Tk support. The board logic does not need it.

To run the tests:

```
pip install ".[test]"
pytest
```

## Starting the board

```
logicboard
```

This opens a maximised window that shows the board. A palette with one gate of
each type sits at the top, followed by an On and an Off source. Under the
palette is a row of hotkey hints. Move the pointer within 80 units of a palette
gate to see a short description of that gate above it.

## Controls

| Action | Effect |
| --- | --- |
| Key `1`–`9` | Choose what to place: 1 AND, 2 NAND, 3 OR, 4 NOR, 5 XOR, 6 XNOR, 7 NOT, 8 On, 9 Off |
| Shift + left click | Place the chosen item at the cursor. Gates start with no inputs |
| Alt + left click on a gate's body | Add an input. A gate takes up to five, a NOT gate one |
| Alt + right click on a gate's body | Remove an input |
| Left button drag | Move the placed item nearest the pointer, unless something is wired to it. An On or Off within 5 units of a free input pin snaps onto that pin and connects to it |
| Middle click twice | The first click picks the nearest placed gate, On or Off. The second click draws a connector from it to the second point and puts a marker there carrying its value. At least two items must already be placed |
| Right click | Delete the nearest placed item, connector or connector end marker |

When you release the mouse, the board evaluates every gate whose pins are all
connected. The result shows as an On marker (filled) or an Off marker (hollow).
The marker sits at the gate's output, or at the far end of each connector
attached to that output. The board clears these markers on the next release
and then works them out again.

## Using it from Python

The board logic does not depend on the window.

`logicboard.gates` holds these classes:

- `AndGate`, `NandGate`, `OrGate`, `NorGate`, `XorGate`, `XnorGate` and `NotGate`
- `On` and `Off`, the two constant sources
- the drawing shapes `Line`, `Arc` and `Rect`

```python
from logicboard.gates import AndGate

gate = AndGate(0, 0, 2)
gate.inputs = [True, False]
print(gate.determine_output())  # False
```

Gate methods:

- `Gate.determine_output()` evaluates the gate on `inputs` and stores the result in `output`. `XorGate` is the exception: it always sets `output` to `True`, and only the value it returns reflects the evaluation.
- `Gate.shapes()` gives the gate's symbol as a list of shapes.
- `Gate.distance_from(point)` and `Gate.move_to(x, y)` cover position.

`logicboard.connector` has two classes:

- `Connector`, a stepped wire. `segments()` gives its lines and `end_point()` gives the scene point where it delivers its signal.
- `SourceKind`, which records whether a wire's signal comes from a gate, an On or an Off.

`logicboard.layout` holds the fixed parts of the board:

- `palette_gates()`, `palette_sources()`, `hotkey_labels()` and `info_texts()`
- `input_pin_points(position, input_count)`, which gives the scene points of a gate's pins
- `make_item(kind, x, y)`, which creates the item for hotkey `kind`

`logicboard.environment.Environment` is the board itself:

- It reacts to `key_press(key)`, and to `mouse_press`, `mouse_release` and `mouse_move`. Each mouse method takes a `MouseEvent(x, y, button, modifiers)` in scene coordinates, where `button` is a `MouseButton` and `modifiers` is a `Modifier`.
- `items()` lists everything drawn on the board.
- `visible_info()` lists the gate descriptions that are showing.

```python
from logicboard.environment import Environment, Modifier, MouseButton, MouseEvent

board = Environment()
board.key_press("1")
board.mouse_press(MouseEvent(0, 0, MouseButton.LEFT, Modifier.SHIFT))
print(board.gates)  # [AndGate(x=0, y=0, input_count=0)]
```

`logicboard.app` provides the window side:

- `CircuitView` maps the board onto window coordinates. `render()` returns its drawing as plain `("line", ...)`, `("arc", ...)`, `("rect", ...)` and `("text", ...)` commands.
- `to_scene(x, y)` converts a window point into a scene point.
- `translate_event(button, state, x, y)` turns a Tk button number and modifier state into a `MouseEvent`.

## What it does not do

The board does not save or load circuits, so a circuit lasts only as long as
the window stays open. There is no undo, and you cannot scroll or zoom the view.