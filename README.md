# log4kit

Small building blocks for logging libraries:

- `log4kit.locking`: a non-recursive `Mutex`, a `ScopedLock` context
  manager, a per-thread `ThreadLocalDataHolder`, and `get_thread_id()`.
- `log4kit.cspec` and `log4kit.cformat`: a C99-style printf formatter
  supporting the `s`, `c`, `d`, `i`, `u`, `o`, `x`, `X` and `p` conversions
  (plus the `D`, `U`, `O` synonyms) and `%%`, the `-`, `+`, space, `0` and
  `#` flags (a `'` flag is accepted and ignored), field width and precision
  (including `*`), and the `h`, `l`, `ll` length modifiers (`ll` is treated
  as `l`). An unknown conversion is replaced by its conversion character
  alone.

## Installation

```
pip install log4kit
```

## Locking

```python
from log4kit.locking import Mutex, ScopedLock, ThreadLocalDataHolder, get_thread_id

mutex = Mutex()
with ScopedLock(mutex):
    ...  # critical section

with mutex:
    ...  # a Mutex is a context manager too

holder = ThreadLocalDataHolder()
holder.reset(["context"])   # value seen only by this thread
holder.get()                # ['context']
holder.release()            # returns the value and clears it
print(get_thread_id())      # the calling thread's identifier, as a string
```

`Mutex.unlock()` on a mutex that is not held raises `RuntimeError`.

## Formatting

```python
from log4kit.cformat import vformat, snprintf, asprintf, asnprintf

vformat("This contains %d %s", (2, "variable arguments"))
# 'This contains 2 variable arguments'

asprintf("%#x|%-5s|%05d", 255, "ab", -42)
# '0xff|ab   |-0042'

snprintf(6, "%s", "truncated")
# ('trunc', 9): the text that fits in a buffer of 6 (one slot is the
# terminator) and the length the full result would have
```

`asnprintf(size, fmt, *args)` behaves like `snprintf`, except that with
`size == 0` it returns `None` instead of text. A negative `size` raises
`ValueError`. A `None` format is formatted as the empty string; surplus
arguments are ignored, and too few arguments raise `TypeError`.

Integer arguments are read as the matching C type would read them:
32 bits without a length modifier, 64 bits with `l`, narrowed to 16 bits
with `h`. `%p` takes an integer address or `None` and prints `0x...`, or
`(nil)` for zero.

Lower-level access is available through `log4kit.cspec.iter_format`,
which yields `Literal` and `ConversionSpec` pieces (`parse_conversion`
parses a single one), and `log4kit.cformat.render`, which renders one
piece.

## What this package does not do

log4kit is not a logging framework. It has no loggers or categories, no
handlers or output destinations, no layouts, and no configuration files;
it only provides the locking and formatting pieces such a framework is
built on.

## Running the tests

```
pip install -e ".[test]"
pytest
```