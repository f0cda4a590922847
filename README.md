# spix

Building blocks for driving a user interface from automated tests.

A test thread enqueues commands into a `CommandExecuter`: clicks, drags, key
presses, text input, touch gestures and property queries. The thread that owns
the user interface calls `process_commands(scene)` from time to time, and the
executer runs the queued commands against that scene in order. A command that
is not ready yet, such as a `Wait` whose time has not passed, holds back the
commands behind it. When a command cannot find its item, it records an error
in the executer's state. The commands after it still run.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `spix.geometry`: frozen dataclasses `Size`, `Point` and `Rect`.
  `Rect.from_xywh(x, y, width, height)` builds a rectangle.
- `spix.item_path`:
  - `ItemPath` is a slash-separated path such as `"mainWindow/Button_1"`.
    Empty components are dropped. It has `components`, `root_component()`
    (raises `IndexError` on an empty path), `sub_path(offset)` and `str()`.
  - `ItemPosition(item_path, proportion, offset)` is a point on an item, given
    as a proportion of the item's size plus an offset. By default it is the
    item's centre. `position_for_item_size(size)` resolves it to a point.
- `spix.geometry_utils`: the `SwipeDirection` and `Strategy` enums,
  `get_swipe_direction`, `calculate_path_between_points` and
  `position_for_swipe`.
  - `calculate_path_between_points` samples a straight line at whole-number x
    values.
  - `position_for_swipe` gives the point on the item's edge where a swipe ends.
- `spix.pasteboard`: `PasteboardContent` holds URLs for simulated drops, with
  `add_url` and `has_urls`. `make_pasteboard_content_with_urls(urls)` builds
  one from a list of URLs.
- `spix.executer`:
  - `CommandExecuter` is the queue. `enqueue_command` may be called from any
    thread. `process_commands` and `state` may only be called from the thread
    that created the executer; from any other thread they raise `RuntimeError`.
  - `ExecuterState` collects errors, with `report_error`, `has_errors`,
    `errors` and `errors_description()`.
  - `Command` is the abstract base for commands. `CustomCmd(exec_function,
    can_exec_function)` builds a command from two callables.
  - `CommandEnvironment` is what each command receives: `scene` and `state`.
- `spix.input_commands`: `ClickOnItem`, `DragBegin`, `DragEnd`, `DropFromExt`,
  `Tap`, `Swipe`, `Pinch`, `Rotate`, `EnterKey` and `InputText`. Paths may be
  given as strings.
- `spix.query_commands`: `ExistsAndVisible`, `GetBoundingBox`, `GetProperty`,
  `SetProperty`, `GetTestStatus`, `InvokeMethod`, `Quit`, `Screenshot` and
  `Wait`.
  - Commands that return a value resolve a `concurrent.futures.Future`. You can
    pass one in, or use the one the command creates as its `future` attribute.
  - `Wait` takes a `timedelta` or a number of milliseconds.
  - An item signals a failed method call by raising `InvocationError`.

## The scene you provide

The package brings no scene of its own. Commands use the object you pass to
`process_commands` through these names:

- `scene.item_at_path(path)` returns an item, or `None` if there is none.
- `scene.take_screenshot(path, file_path)`
- `scene.events` with these methods:
  - `mouse_down(item, point, button)`
  - `mouse_up(item, point, button)`
  - `mouse_move(item, point)`
  - `ext_mouse_drop(item, point, content)`
  - `tap(item, point, duration)`
  - `swipe(item, start, end, points)`
  - `pinch(item, paths)`
  - `rotate(item, degree)`
  - `key_press(item, key_code, modifiers)`
  - `key_release(item, key_code, modifiers)`
  - `string_input(item, text)`
  - `quit()`
- Items provide:
  - `size`
  - `visible`
  - `bounds`
  - `string_property(name)`
  - `set_string_property(name, value)`
  - `invoke_method(method, args)`

## Example

```python
from spix.executer import CommandExecuter
from spix.geometry import Rect, Size
from spix.input_commands import ClickOnItem
from spix.query_commands import GetProperty


class Item:
    size = Size(100.0, 30.0)
    visible = True
    bounds = Rect.from_xywh(0.0, 0.0, 100.0, 30.0)

    def __init__(self):
        self.properties = {"text": "hello"}

    def string_property(self, name):
        return self.properties.get(name, "")


class Events:
    def mouse_down(self, item, point, button):
        print("down at", point)

    def mouse_up(self, item, point, button):
        print("up at", point)


class Scene:
    events = Events()
    items = {"mainWindow/button": Item()}

    def item_at_path(self, path):
        return self.items.get(str(path))


scene = Scene()
executer = CommandExecuter()

click = ClickOnItem("mainWindow/button")
query = GetProperty("mainWindow/button", "text")
missing = ClickOnItem("mainWindow/missing")
for command in (click, query, missing):
    executer.enqueue_command(command)

executer.process_commands(scene)  # usually called periodically from the UI thread

print(query.future.result())                   # "hello"
print(executer.state.errors_description())     # "ClickOnItem: Item not found: mainWindow/missing"
```

## What this package does not do

- It has no scene for any GUI toolkit. It does not find items in real windows
  and it does not deliver real mouse, touch or keyboard events. You have to
  supply the scene.
- It has no remote-control server, and it has no test-server class that runs
  a test script on a separate thread.
- It has no timer that calls `process_commands` for you. The UI's own loop has
  to call it.
- It has no command-line program.