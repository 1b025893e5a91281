# enginecore

Pure-Python core logic for a small 3D scene editor. It has no runtime
dependencies. It holds the parts that do not need a graphics context:
input state, events, timers, transforms, matrix maths and the editor's
bookkeeping.

## Modules

- `enginecore.keys`: the `KeyCode` and `MouseButton` enums.
  `KeyCode.is_printable()` is true for keys from space up to the non-US keys.
- `enginecore.events`: event dataclasses such as `EventKeyPressed`,
  `EventMouseMoved` and `EventWindowResize`, each tagged with an `EventType`.
  `EventDispatcher` keeps one listener per event type. A new
  `add_event_listener` call for the same type replaces the old listener.
  `dispatch` calls the listener for the event's type, if one is registered.
- `enginecore.input`: `Input` tracks which keys and mouse buttons are held
  down, and `last_key_pressed`. `key_string(key)` returns a short display
  name for a key, or `"-1"` when the key has none.
- `enginecore.linked_list`: `LinkedList`, a singly linked list. It provides
  `push_back`, `last`, `find`, `remove`, `remove_at`, `remove_first`,
  `remove_last`, indexing, iteration, `len`, `clear` and `to_list`. `at` and
  indexing raise `IndexError` when the index is out of range.
- `enginecore.logsystem`: `format_message(text, *args)` replaces `{n}` with
  the n-th argument, and `\{` writes a literal brace. `info`, `warn`, `error`
  and `critical` format the message, log it to the `"enginecore"` logger and
  return the text.
- `enginecore.timers`: `Timer` and `TemplateTimer` count down from `start()`
  and call their callback once when the time runs out. `TemplateTimer`
  passes a fixed argument to its callback.
- `enginecore.geometry`: the immutable `Vec3`. `model_matrix(position,
  rotation, scale)` builds translate × rotX × rotY × rotZ × scale, with
  angles in degrees. The module also has `transform_point`,
  `highlight_scale`, `highlight_edges` (the 12 edges of a box as
  start/direction pairs) and `sprite_texture_coords`.
- `enginecore.transform`: `Transform`, a dataclass with position, scale and
  rotation, and a `model_matrix()` method.
- `enginecore.application`: `Application` runs one loop iteration per
  `step(duration)`. Each step calls the overridable `on_update`,
  `on_render`, `on_ui_render` and `on_key_update` hooks. It routes window
  events through `dispatch_system_event`, and from there to
  `event_dispatcher` and the input state. `set_max_tps` limits the update
  rate. `RateCounter` measures ticks or frames per second.
  `StartupSettings` parses and writes the `window_*` entries of a settings
  region.
- `enginecore.window_events`: `key_event` and `mouse_button_event` turn raw
  key and button callbacks (with an `Action`) into events.
  `WindowState.resize`, `move` and `maximize` send the matching events.
  `gl_debug_source_name` and `gl_debug_type_name` name graphics debug
  codes.
- `enginecore.ui_layouts`: `TransformLayout` and `HighlightLayout` hold the
  values of the editor's property panels. They report user edits through an
  `on_change` callback, with `TransformProp` telling which property changed.
- `enginecore.camera_controls`: `CameraControls.key_deltas` turns held keys
  into camera movement and rotation. Left control speeds these up.
  `mouse_drag` turns a mouse drag into rotation.
- `enginecore.editor`: `EditorState` listens on a dispatcher for scrolling,
  mouse movement, buttons, keys and window changes. `FpsAverager` averages
  frames per second. `mouse_direction` and `place_along` handle mouse
  picking.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from enginecore.events import EventDispatcher, EventKeyPressed
from enginecore.input import Input, key_string
from enginecore.keys import KeyCode

state = Input()
dispatcher = EventDispatcher()
dispatcher.add_event_listener(
    EventKeyPressed, lambda e: state.press_key(e.key_code)
)

dispatcher.dispatch(EventKeyPressed(KeyCode.KEY_W, False))
assert state.is_key_pressed(KeyCode.KEY_W)
print(key_string(KeyCode.KEY_W))  # "W"
```

```python
from enginecore.timers import Timer

fired = []
timer = Timer(lambda: fired.append(True))
timer.start(100.0)
timer.update(60.0)
timer.update(60.0)
assert fired == [True]
```

```python
from enginecore.geometry import Vec3, model_matrix, transform_point

matrix = model_matrix((1, 2, 3), (0, 0, 0), (2, 2, 2))
assert transform_point(matrix, (1, 1, 1)) == Vec3(3.0, 4.0, 5.0)
```

```python
from enginecore.logsystem import format_message

assert format_message("Resize: {0}x{1}", 800, 600) == "Resize: 800x600"
```

## What this package does not do

This package does not open windows, draw anything, play sound or load
resources such as models, textures, shaders or settings files. It has no
command-line program.

To use it in a running editor, you must supply these parts yourself:

- Feed window callbacks in through `window_events` or
  `Application.dispatch_system_event`.
- Call `Application.step` from your own loop.
- Use the matrices from `geometry` with your own renderer.