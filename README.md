# genengine

The platform-independent core of a small game engine, plus a command that
runs `clang-format` over C++ sources.

## Modules

- `genengine.version.Version`: a frozen, ordered semantic version
  (`major`, `minor`, `patch`). `get_version()` packs it as
  `major << 22 | minor << 12 | patch` in 32 bits; `str()` gives `"1.2.3"`.
- `genengine.fixed_string.FixedString`: immutable text cut to a capacity
  (64 characters by default); `view()` returns the stored text.
- `genengine.mono_instance.MonoInstance`: a base class allowing one live
  instance per subclass. A second instance raises `RuntimeError`;
  `get_instance()` and `exists()` are class methods; `release()` or leaving a
  `with` block frees the slot.
- Logging:
  - `genengine.log_level`: `Level` (`ERROR`, `WARN`, `INFO`, `DEBUG`),
    `Target` flags (`CONSOLE`, `FILE`, `SINKS`, `ALL`) and `level_char()`
    (`"E"`, `"W"`, `"I"`, `"D"`, or `"?"`).
  - `genengine.log_config`: `Config` (`format`, `max_level`,
    `category_max_levels`, `level_targets`, `timestamp`, `copy()`) and
    `Timestamp` (`LOCAL`, `UTC`). Formats are cut to 128 characters.
  - `genengine.log_context`: `Context` (with `Context.make(...)`),
    `get_thread_id()` and the abstract `Sink` with `handle(formatted, context)`.
  - `genengine.log_format`: `format_timestamp()` and `format_entry()`, which
    expand `{level}`, `{thread}`, `{category}`, `{message}`, `{timestamp}`,
    `{func}`, `{file}` and `{line}` and end the entry with a newline. Unknown
    keys are copied through unchanged.
  - `genengine.log_instance`: `Instance`, `ConsoleSink`, `FileSink` and
    `DuplicateError`.
  - `genengine.logger`: `Logger` and `print_entry()`, plus a ready-made
    `general` logger.
- `genengine.frame_time`: `update_delta_time()`, `set_time_scale()`,
  `get_delta_time()`, `get_time_scale()`, `get_current_time()`,
  `set_fps_update_delay()`, `update_fps()` and `get_fps()`.
- `genengine.file.File`: a thread-safe binary file handle.
- `genengine.errors`: `VulkanError`, `GraphicsError` and `WindowingError`,
  which are `RuntimeError`s that log their message when created.
- `genengine.swapchain_select`: the rules for picking a swapchain setup.
- `genengine.formatter`: the `genengine-format` command.

## Installing

```
pip install .
```

## Logging

```python
from genengine.log_config import Config
from genengine.log_instance import Instance
from genengine.logger import Logger

with Instance("genesis.log", Config()):
    log = Logger("game")
    log.info("loaded {} levels", 3)
```

Only one `Instance` may be live at a time; creating another raises
`DuplicateError`. Creating it removes any existing file at the given path
(`genesis.log` when the path is empty or `None`) and logs
`logging to file: <path>`. `close()`, or leaving the `with` block, stops
routing entries to it and writes out everything the file sink has buffered.

Each entry uses the format
`[{level}][T{thread}] [{category}] {message} [{timestamp}]` unless the config
says otherwise (`Config.VERBOSE_FORMAT` adds function, file and line). An entry
is dropped when its level is more verbose than the category's limit in
`category_max_levels`, or, for a category without one, than `max_level`.
`level_targets` picks the destinations per level; by default an entry goes to
all of them:

- the console: errors to standard error, everything else to standard output;
- the log file, written from a background thread;
- every sink added with `Instance.add_sink()`.

`Logger` methods take a `str.format` template and positional arguments:
`error`, `warn`, `info`, `log` (same as `info`) and `debug`, and the
`verbose_*` forms that also take a function name, file path and line number.
A `Logger` with an empty category uses `"unknown"`. With no live `Instance`,
logging does nothing.

## Frame timing

`update_delta_time()` measures the time since its previous call and multiplies
it by the time scale. The time scale starts at `0.0`, so call
`set_time_scale(1.0)` first. `update_fps()` adds the delta time to a timer and,
once it reaches the update delay (0.5 seconds by default), recomputes the
frame rate from the unscaled frame time; `get_fps()` returns it.
`get_current_time()` gives local time as `YYYY-MM-DD HH:MM:SS`.

## Files

```python
from genengine.file import File

with File("data.bin") as handle:
    handle.write(b"hello", flush=True)
    handle.seek(0)
    assert handle.read(5) == b"hello"
```

Opening creates the file or empties an existing one. `write()` takes an
optional position and returns the number of bytes written; `read(size)`
returns up to `size` bytes (`b""` at the end). `file_size()` and
`timestamp()` (whole seconds since the epoch) report on the open file.
Operations on a closed file, a non-positive read size or a negative seek
position raise `ValueError`.

## Swapchain selection

- `choose_surface_format()` returns the first `SurfaceFormat` in the sRGB
  non-linear color space whose format is B8G8R8A8 or R8G8B8A8 sRGB, and raises
  `VulkanError` if there is none.
- `choose_present_mode()` prefers the given mode (mailbox by default), then
  relaxed FIFO, then FIFO.
- `choose_extent()` uses the surface's size, or clamps the framebuffer size to
  the allowed range when the surface width is `0xFFFFFFFF`.
- `choose_image_count()` aims for 3 images within the surface's limits; a
  maximum of 0 means no maximum.
- `check_device_extension_support()` tells whether all required extension names
  are among the available ones.
- `int_to_semver()` unpacks a packed version into `"major.minor.patch"`.

## Formatting sources

```
genengine-format [-q|--quiet] [-s|--simulate] [path]
```

Runs `clang-format -i` on every `.hpp` and `.cpp` file below `path` (the
current directory by default), skipping any path that contains `build/`,
`out/`, `ext/` or `cmake/`, and prints how many files were formatted.
`--simulate` lists the files and changes none of them; `--quiet` prints only
the final count; `--help` or `--usage` prints the usage line. The command
fails with a `fatal error` message when `clang-format` cannot be run, and
with an error when the path is not a directory or an argument is not
understood.

## What this package does not do

There is no window, no graphics device or renderer, no gamepad input and no
game loop. `genengine.swapchain_select` only holds the selection rules; it
talks to no graphics API. `genengine.errors` defines the errors but nothing in
the package raises `WindowingError` or `GraphicsError`.

## Tests

```
pip install .[test]
pytest
```