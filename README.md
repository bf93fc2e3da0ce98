# ftkit

A small collection of pure-Python utilities with precise, C-library-like
semantics. It has no dependencies outside the standard library.

## Modules

- `ftkit.charclass`: ASCII character classification and case conversion.
  `isalpha`, `isdigit`, `isalnum`, `isascii` and `isprint` return a bool.
  `toupper` and `tolower` return the same kind of value they were given.
  Every function accepts a one-character string or an integer code.
- `ftkit.numbers`: integer parsing and formatting.
  - `atoi(text)` skips leading whitespace and one sign, then reads digits up
    to the first non-digit. If the value passes the 64-bit range it returns
    -1 for a positive number and 0 for a negative one. Otherwise it truncates
    the value to a signed 32-bit integer.
  - `atol(text)` and `atoll(text)` parse a whole string made of an optional
    sign and digits. They raise `ValueError` for malformed input or for a
    value out of range.
  - `absolute(n)` returns the magnitude of `n`. `itoa(n)` returns its decimal
    string.
- `ftkit.textops`: string helpers.
  - `split` splits on a character and drops empty pieces.
  - `strtrim` removes a set of characters from both ends.
  - `substr` returns a slice by start and length.
  - `find` and `find_bounded` look for a substring and return its index or
    `None`.
  - `suffix_mismatch` checks whether one string ends with another.
  - `compare` and `compare_n` compare character by character. An ended string
    counts as NUL.
  - `index_of` and `rindex_of` find a character. Searching for NUL returns
    `len(text)`.
  - `map_indexed` builds a string from `func(index, char)`.
- `ftkit.formatting`: a minimal printf supporting `%c %s %p %d %i %u %x %X`
  and `%%`.
  - `format_text(fmt, *args)` returns the rendered string.
  - `printf(fmt, *args, stream=None)` writes it to `stream` (standard output
    by default) and returns the number of characters written.
  - An unknown conversion, a trailing lone `%` or a missing argument raises
    `FormatError`, a subclass of `ValueError`.
- `ftkit.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write to a
  text stream.
- `ftkit.linereader`: `LineReader(stream, buffer_size=42)` reads a text or
  binary stream in chunks of `buffer_size`. `read_line()` returns the next line
  with its newline, or `None`. Iterating yields every line. Text after the
  final newline is discarded.
- `ftkit.colornames`: `color_by_name(name)` returns the `0xRRGGBB` value of an
  X11 colour name, ignoring ASCII case. It returns `-1` for `"none"` and `None`
  for an unknown name.
- `ftkit.xpm`: an XPM pixmap parser.
  - `load_xpm(path)`, `parse_xpm_text(text)` and `parse_xpm_lines(lines)`
    return an `XpmImage` with `width`, `height` and `pixels`. `pixels` holds one
    tuple of `0xAARRGGBB` values per row. A transparent colour becomes
    `0xFF000000`.
  - Malformed data raises `XpmError`.
  - The helpers `split_words`, `find_unquoted`, `strip_comments` and
    `text_to_rgb` are public as well.

## Installation

```
pip install .
```

## Examples

```python
from ftkit.numbers import atol, itoa
from ftkit.textops import split, strtrim
from ftkit.formatting import format_text
from ftkit.colornames import color_by_name

atol("-42")                         # -42
itoa(-7)                            # "-7"
split("  a b  c ", " ")             # ["a", "b", "c"]
strtrim("xxhixx", "x")              # "hi"
format_text("%d is %x", 255, 255)   # "255 is ff"
color_by_name("Dark Orange")        # 0xff8c00
```

Reading lines:

```python
import io
from ftkit.linereader import LineReader

for line in LineReader(io.StringIO("one\ntwo\n"), 4):
    print(repr(line))               # 'one\n', then 'two\n'
```

Loading an XPM image:

```python
from ftkit.xpm import load_xpm

image = load_xpm("texture.xpm")
print(image.width, image.height, hex(image.pixels[0][0]))
```

## What it does not do

ftkit is a library only. It installs no command, and it opens no window. It
decodes XPM images into pixel values but does not display, render or write
images.

## Running the tests

```
pip install ".[test]"
pytest
```