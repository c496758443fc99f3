# ftkit

Small helpers that follow the behaviour of the classic C string, memory and
character functions. There is also a singly linked list, a doubly linked
list, a stack and a buffered line reader for file descriptors. The package
uses only the standard library.

## Install

```
pip install .
pip install ".[test]"   # adds pytest
```

## Modules

- `ftkit.memory`: functions that work on mutable byte buffers such as
  `bytearray`.
  - `bzero(buffer, n)` and `memset(buffer, c, n)` fill the first `n` bytes and
    return the buffer.
  - `calloc(nmemb, size)` returns a zeroed `bytearray`. If either argument is
    zero it returns a one-byte buffer.
  - `memchr(buffer, c, n)` returns the index of the first match, or `None`.
  - `memcmp(first, second, n)` returns the difference of the first unequal
    pair of bytes, or 0.
  - `memcpy(dest, src, n)` copies the first `n` bytes of `src` into `dest`.
  - `memmove(buffer, dest, src, n)` copies inside one buffer, from offset
    `src` to offset `dest`. The two regions may overlap.
  - A byte count that is negative or larger than the buffer raises
    `ValueError`.
- `ftkit.chars`: `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`, `is_print`,
  `is_sign`, `to_lower`, `to_upper`. Each takes an integer code or a
  one-character string. The case converters return the same kind they were
  given.
- `ftkit.conversions`:
  - `atoi(text)` and `atol(text)` parse leading whitespace, an optional sign
    and digits. They wrap to 32-bit and 64-bit signed integers.
  - `itoa(n)` returns an integer's decimal text.
  - The module also defines the constants `INT_MAX`, `INT_MIN`, `LONG_MAX`,
    `LONG_MIN` and `ULONG_MAX`.
- `ftkit.splitting`:
  - `split(s, c)` splits on one separator character and drops empty words.
  - `strtrim(s, charset)` strips characters in `charset` from both ends.
- `ftkit.text`:
  - `strchr`, `strrchr` and `strnstr` return indices, or `None` when nothing
    is found.
  - `strlcpy(src, size)` and `strlcat(dst, src, size)` return a
    `(text, length)` pair.
  - The module also has `strdup`, `striteri`, `strjoin`, `strlen`, `strmapi`,
    `strncmp` and `substr`.
- `ftkit.linked`: `ListNode` and `LinkedList`.
  - `LinkedList` is built from an iterable.
  - Its methods are `add_front`, `add_back`, `last`, `clear(delete)`,
    `iterate(f)` and `map(f, delete)`. It also supports `len()` and iteration
    over contents.
- `ftkit.dlist`: `DListNode` and `DoublyLinkedList`.
  - The methods are `push`, `push_head`, `detach` and `index`.
  - It supports `len()`, iteration and `reversed()`.
  - A node can belong to only one list at a time.
- `ftkit.stack`: `StackNode` and `Stack`.
  - The methods are `push`, `pop`, `detach`, `swap_first`, `rotate(reverse)`,
    `transfer_top(other)`, `includes(content, is_equal)`,
    `push_unique(node, is_equal)` and `destroy(delete)`.
  - Iterating a stack yields contents from the top down.
- `ftkit.line_reader`:
  - `LineReader(buffer_size=42)` reads chunks with `os.read`. It keeps the
    leftover bytes for each descriptor separately.
  - `read_line(fd)` returns the next line, with its newline, or `None` at the
    end.
  - `forget(fd)` drops the bytes kept for a descriptor.
  - The `lines(fd, buffer_size)` generator yields every remaining line.

## Examples

```python
from ftkit.splitting import split
from ftkit.conversions import atoi, itoa

split("ola eu sou o bruno", " ")   # ['ola', 'eu', 'sou', 'o', 'bruno']
atoi("  -42abc")                   # -42
itoa(-2147483648)                  # '-2147483648'
```

```python
import os
from ftkit.line_reader import lines

fd = os.open("notes.txt", os.O_RDONLY)
for line in lines(fd, 42):
    print(line, end="")
os.close(fd)
```

```python
from ftkit.stack import Stack, StackNode

stack = Stack()
stack.push(StackNode(1))
stack.push(StackNode(2))
stack.swap_first()
list(stack)                        # [1, 2]  (top first)
```

## What it does not do

The package has no helpers that write characters, strings, lines or numbers
to a file descriptor. Use `os.write` or a file object for output. It has no
command-line interface either.

## Tests

```
pytest
```