# ftkit

A small toolkit of everyday helpers with exact, predictable semantics.

- `ftkit.chars`: ASCII character classification and case mapping
  (`isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper`,
  `tolower`). Each function takes a one-character string or an integer
  code; `toupper` and `tolower` return the same kind they were given.
- `ftkit.conversions`: lenient number parsing and formatting
  (`atoi`, `atol`, `atod`, `itoa`, `itoa_base`). `atol` parses leading
  whitespace, an optional sign and decimal digits as a 64-bit value;
  `atoi` wraps that result to 32 bits; `itoa_base` writes a number in
  any base from 2 to 36.
- `ftkit.strings`: searching, comparing, slicing, trimming and splitting
  text (`strchr`, `strrchr`, `strcmp`, `strncmp`, `strnstr`, `strlcpy`,
  `strlcat`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`) and
  bytes (`memchr`, `memcmp`). Search functions return an index, or
  `None` when nothing is found; the end of a string behaves like a
  terminating `"\0"`.
- `ftkit.arena`: `Arena`, a fixed-size bump allocator. `alloc(size)`
  returns a writable `memoryview` aligned to 8 bytes and raises
  `MemoryError` when the block does not fit; `reset()` makes the whole
  buffer available again. `size`, `used` and `remaining` report its state.
- `ftkit.linkedlist`: `Node` and `LinkedList`, a singly linked list with
  `push_front`, `append`, `last`, `clear`, `for_each` and `map`, plus
  iteration, `len()` and truthiness.
- `ftkit.output`: `putchar`, `putstr`, `putendl` and `putnbr`, writing to
  any text stream (standard output by default).
- `ftkit.linereader`: `LineReader` and `get_next_line` for reading a text
  or binary stream one line at a time, keeping the newline.

## Installation

```
pip install ftkit
```

## Examples

```python
from ftkit.conversions import atoi, itoa_base
from ftkit.strings import split, strchr, strlcpy, strtrim

atoi("  -42abc")            # -42
itoa_base(255, 16, True)    # "FF"
split("  a b  c ", " ")     # ["a", "b", "c"]
strtrim("xxhixx", "x")      # "hi"
strchr("hello", "l")        # 2
strlcpy("hello", 3)         # ("he", 5)
```

Allocating from an arena:

```python
from ftkit.arena import Arena

arena = Arena(64)
block = arena.alloc(10)
block[:5] = b"hello"
arena.used                  # 10
arena.alloc(1)              # starts at offset 16
arena.reset()
```

Reading a file line by line:

```python
from ftkit.linereader import LineReader

with open("notes.txt") as fh:
    for line in LineReader(fh):
        print(line, end="")
```

`get_next_line(stream)` does the same one call at a time, keeping
buffered data for each stream between calls and returning `None` once
the stream is exhausted.

## What is not included

The package has no formatted-printing function: there is no
printf-style formatter with conversions, flags, width and precision.
Output is limited to the plain writers in `ftkit.output`.

## Running the tests

```
pip install "ftkit[test]"
pytest
```