# rcutil

A small library of general-purpose utilities built on the standard library
alone.

## Modules

- `rcutil.errors`: exceptions and a per-thread "last error" record.
  - `RcutilsError` is the base class. `InvalidArgumentError` derives from it
    and from `ValueError`. `BadAllocError` derives from it and from
    `MemoryError`.
  - `ErrorState(message, file, line_number)` is a frozen dataclass.
    `ErrorState.format()` gives `"<message>, at <file>:<line>"`. Long parts are
    cut to fixed maximum sizes, with a notice written to stderr.
  - `set_error_state(error_string, file, line_number)`, `error_is_set()`,
    `get_error_state()`, `get_error_string()` (returns `"error not set"` when
    no error is set), `reset_error()` and
    `initialize_error_handling_thread_local_storage(allocator)`.
  - Setting a different error while one is already recorded writes a warning
    to stderr.
- `rcutil.allocator`: allocators that hand out `bytearray` buffers.
  - `Allocator(allocate, deallocate, reallocate, zero_allocate, state)` has
    `is_valid()`.
  - `get_default_allocator()`, `get_zero_initialized_allocator()` (an
    allocator with no functions, which is not valid) and
    `reallocf(buffer, size, allocator)`. On failure `reallocf` releases the
    buffer and raises `BadAllocError`.
- `rcutil.array_list`: `ArrayList(initial_capacity, data_size, allocator)`.
  - It holds fixed-size binary records and doubles its capacity when full.
  - Methods: `add`, `set`, `remove`, `get`, `len()`, iteration and `close()`.
  - It can be used as a context manager.
- `rcutil.char_array`: `CharArray(buffer_capacity, allocator)`.
  - A growable NUL-terminated buffer with `resize`, `expand_as_needed`,
    `sprintf` (`%`-style formatting), `memcpy`, `strcpy`, `strncat`, `strcat`,
    `value()` and `close()`.
- `rcutil.uint8_array`: `Uint8Array(buffer_capacity, allocator)`.
  - A resizable byte buffer with `resize`, `close` and `len()`.
- `rcutil.string_array`: `StringArray(size, allocator)`.
  - It holds `size` string slots, each initially `None`, and supports
    indexing and iteration.
  - `compare(other)` returns -1, 0 or 1 in lexicographic order. It raises
    `InvalidArgumentError` if a slot is unset.
- `rcutil.strings`:
  - `find`, `findn`, `find_last` and `find_lastn` return a character index,
    or `NOT_FOUND` (-1).
  - `repl_str(string, old, new)` raises `InvalidArgumentError` for an empty
    `old`.
  - `format_string_limit(allocator, limit, format_string, *args)` cuts the
    result to at most `limit - 1` bytes.
- `rcutil.format_string`: `format_string(allocator, format_string, *args)`, with
  a limit of `DEFAULT_LIMIT` (2048).
- `rcutil.filesystem`:
  - `get_cwd`, `exists`, `is_file` and `is_directory`.
  - `is_readable`, `is_writable` and `is_readable_and_writable`. These check
    the owner permission bits.
  - `join_path` and `to_native_path`. Both use `os.sep`.
- `rcutil.environment`:
  - `get_env(name)` returns `""` when the variable is unset.
  - `get_home_dir()` uses `HOME`, and `USERPROFILE` on Windows. It returns
    `None` otherwise.
  - `cli_option_exist(args, option)` looks for an exact match.
  - `cli_get_option(args, option)` returns the argument after the first one
    that starts with `option`.
- `rcutil.atomics`: `AtomicValue(value)`.
  - A lock-protected value with `load`, `store`, `exchange`,
    `compare_exchange_strong` and `fetch_add`.
  - `compare_exchange_strong` returns a `(success, value)` pair.

## Examples

```python
from rcutil.allocator import get_default_allocator
from rcutil.array_list import ArrayList
from rcutil.strings import find, repl_str, format_string_limit
from rcutil.filesystem import join_path
from rcutil.environment import cli_get_option
from rcutil.atomics import AtomicValue

allocator = get_default_allocator()

with ArrayList(2, 4, allocator) as items:
    items.add(b"\x01\x00\x00\x00")
    assert len(items) == 1
    assert items.get(0) == b"\x01\x00\x00\x00"

assert find("hello/world", "/") == 5
assert repl_str("a/b/c", "/", "-") == "a-b-c"
assert format_string_limit(allocator, 3, "%s", "test") == "te"

print(join_path("foo", "bar"))                    # foo/bar on POSIX
print(cli_get_option(["--name", "x"], "--name"))  # x

counter = AtomicValue(28)
assert counter.exchange(42) == 28
assert counter.load() == 42
```

## Errors

Errors are raised as exceptions, not returned as codes:

- An invalid argument raises `InvalidArgumentError`.
- A failed allocation raises `BadAllocError`.
- A formatting failure raises `RcutilsError`.

The per-thread error record in `rcutil.errors` is separate from these
exceptions. Use it only through its own functions.

## What it does not do

This package has no logging facility. It has no clocks or time formatting. It
has no hash maps or string maps. It has no process information, such as the
process id or the executable name. It has no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```