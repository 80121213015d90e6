# pylibft

A small library of the classic character, conversion, memory and string
routines, plus a doubly linked list. They work on Python values: text is
`str`, byte strings are `bytes`-like objects, writable buffers are
`bytearray` or writable `memoryview`, and the list is an iterable object.
Errors are raised as exceptions (`TypeError`, `ValueError`, `IndexError`,
`OverflowError`).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `pylibft.chars`

`isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper`,
`tolower`. Each takes a character code (`int`) or a one-character `str` and
looks only at the ASCII range. The classifiers return the character code on
a match and `0` otherwise (`isascii` returns `1` or `0`); `toupper` and
`tolower` return a character code.

### `pylibft.convert`

- `atoi(nptr)` skips leading ASCII whitespace, accepts one `+` or `-`, reads
  digits up to the first non-digit, and wraps the result to the 32-bit
  signed range. Text without digits gives `0`.
- `itoa(n)` returns the decimal text of a 32-bit signed integer and raises
  `OverflowError` outside that range.

### `pylibft.memory`

`bzero`, `memset`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc`.
A length past the end of a buffer raises `IndexError`. `memchr` returns an
offset or `None`; `memcmp` returns the difference of the first differing
bytes; `calloc(nmemb, size)` returns a zero-filled `bytearray`.

### `pylibft.search`

`strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
`strdup`. A string's content ends at its first NUL. Searches return an
index into the string or `None`. `strlcpy` and `strlcat` write into a
`bytearray` destination and return the length they tried to build.

### `pylibft.transform`

`substr`, `strjoin`, `strtrim`, `split`, `strmapi` return a new `str` for
text input and `bytes` for bytes-like input. `split` drops empty pieces.
`striteri(buf, f)` calls `f(index, byte)` for each byte of a writable
buffer and stores any non-`None` result in place.

### `pylibft.output`

`putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` write to an open file
descriptor. Text is written as UTF-8; a negative descriptor writes nothing.

### `pylibft.linked_list`

`Node` (with `content`, `next`, `prev`), `LinkedList` and `print_list`.
`LinkedList` supports iteration over contents, `len()`, `nodes()`,
`add_front`, `add_back`, `last`, `delete(node, delete)`, `clear(delete)`,
`iterate(f)`, `map(f, delete)` and `render()`. `print_list` prints a list
or the chain starting at a node.

## Examples

```python
from pylibft.convert import atoi, itoa
from pylibft.transform import split, strtrim

atoi("   -42abc")                # -42
itoa(-2147483648)                # "-2147483648"
split("^^^1^^2a,^^^^3", "^")     # ["1", "2a,", "3"]
strtrim("xxxyChickenxyx", "xy")  # "Chicken"
```

```python
from pylibft.linked_list import LinkedList, Node, print_list

lst = LinkedList(["One", "Two", "Three"])
lst.add_back(Node("Four"))
len(lst)            # 4
lst.last().content  # "Four"
print_list(lst)     # List: [One] [Two] [Three] [Four]
```

## What it does not do

This is a library only: it has no command-line tool.