# megalibft

Small utilities that follow the behaviour of the classic C string, memory and I/O routines. They work with Python types: `str`, `bytes`/`bytearray` buffers, iterators and exceptions. Positions come back as indices, or `None` when nothing is found.

The package has no dependencies beyond the standard library.

## Modules

- `megalibft.chars`: character classes and case mapping for the ASCII range: `is_alpha`, `is_digit`, `is_alnum`, `is_print`, `is_ascii`, `is_space`, `to_lower`, `to_upper`. Each function takes a one-character string or an integer code. The case converters return the same kind of value they were given.
- `megalibft.memory`: byte-buffer helpers: `bzero`, `calloc`, `memset`, `memcpy`, `memmove`, `memchr`, `memcmp`. `memmove(buf, dst, src, n)` copies between two offsets of one buffer and handles overlapping regions. `memchr` returns an offset or `None`. A negative count raises `ValueError`. A span past the end of a buffer raises `IndexError`.
- `megalibft.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strcmp`, `strnstr`, `strlcpy`, `strlcat`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`.
  - `strlcpy(src, size)` returns a `(text, length)` pair, and so does `strlcat(dest, src, size)`.
  - `striteri` works on a list of characters in place.
- `megalibft.numbers`: `atoi(text)` and `itoa(n)`.
  - `atoi` accepts leading whitespace and one sign. It returns 0 when anything follows the digits.
  - `itoa` raises `OverflowError` outside the signed 32-bit range.
- `megalibft.linked_list`: `Node` and `LinkedList`, a singly linked list. It provides `push_front`, `push_back`, `last`, `len()`, iteration, `for_each`, `map` and `clear`.
- `megalibft.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`. Each writes to the text stream passed as `out`, or to standard output when `out` is omitted.
- `megalibft.printf`: a small formatter.
  - It handles `%c %s %d %i %u %x %X %p %%`.
  - `format_string(fmt, *args)` returns the expanded text. `printf(fmt, *args)` writes that text to standard output and returns its length.
  - `format_hex`, `format_unsigned` and `format_pointer` format single values.
  - Unknown conversions produce nothing. Too few arguments raise `TypeError`.
- `megalibft.reader`: `LineReader` reads a file descriptor or a binary stream one line at a time through a buffer of fixed size (1024 bytes by default).
  - Lines come back as `bytes` and keep their newline.
  - `read_line()` returns `None` at end of input. Iterating yields lines until the input is exhausted.

## Examples

```python
from megalibft.strings import split, strtrim
from megalibft.numbers import atoi, itoa
from megalibft.printf import format_string
from megalibft.linked_list import LinkedList

split("  ls -la  /tmp ", " ")        # ['ls', '-la', '/tmp']
strtrim("xxhixx", "x")              # 'hi'
atoi("  -42")                       # -42
itoa(-2147483648)                   # '-2147483648'
format_string("%d%% of %s", 5, "x") # '5% of x'

numbers = LinkedList([1, 2, 3])
doubled = numbers.map(lambda x: x * 2)
list(doubled)                       # [2, 4, 6]
```

Reading lines from a file descriptor:

```python
import os
from megalibft.reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 1024):
    print(line.decode(), end="")
os.close(fd)
```

## What it does not do

This is a library only. It has no command-line program and no interactive prompt. Reading, splitting and printing user input is left to the code that uses it.

## Tests

```
pip install -e .[test]
pytest
```