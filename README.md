# mystd

A small collection of general-purpose building blocks in pure Python, with no
third-party dependencies.

## What is inside

- `mystd.errors`
  - `LibraryError(text_error, error)` is an exception that carries a message
    (`text_error`, also what `str()` gives) and a numeric code (`error`).
  - `InfoException(exception, info)` wraps another exception together with
    any extra value. Both are plain attributes.
- `mystd.bits` works on bits numbered little-endian. Bit `i` is in byte
  `i // 8`, counted from the least significant bit.
  - On mutable byte buffers: `get_bit`, `set_bit`, `toggle_bit`,
    `set_line_bits(data, start, end, bit)` for the range `[start, end)`, and
    `mask(data, start, end)`, which clears everything outside the range.
  - On integers, returning a new value: `with_bit`, `with_toggled_bit`,
    `with_line_bits(value, start, end, bit, width)` and
    `masked(value, start, end, width)`.
  - An index out of range raises `IndexError`. A reversed range, or a value
    that does not fit in `width` unsigned bits, raises `ValueError`.
- `mystd.zfunction` provides `z_function(sequence)`, the Z-array of any
  indexable sequence. Entry 0 is always 0.
- `mystd.arg_parser` provides `Parser` with `add_argument(small_name,
  long_name, name, narg)`, `parse(argv)` and `len(parser)`. The first element
  of `argv` is skipped.
  - Results are read with `involved(name)`, `argument_size(name)` and
    `value(name, index)`.
  - `Nargs` sets how an argument takes values: `IMMEDIATE_OPTIONAL`,
    `DELAYED_OPTIONAL`, `DELAYED_ZERO_OR_MORE`, `IMMEDIATE_ZERO_OR_MORE`,
    `COMMAND_ONLY` and `REMAINING_ARGUMENTS`.
  - Flags may carry a value as `--flag=value`.
  - `value` raises `LibraryError` (code 5) for a missing or unknown name.
- `mystd.trie` provides `Trie`, a set of sequences of hashable keys.
  - It supports `insert`, `erase`, `in`, `len` and iteration. Iteration is
    depth-first, a sequence before its extensions, siblings in insertion
    order.
  - `find_full(prefix)` returns every stored sequence that starts with the
    prefix, as lists.
- `mystd.files` provides `exists`, `is_directory` and `is_regular_file`, and
  the abstract `File`, which is also a context manager: it opens on entry and
  closes on exit.
  - `RegularFile` creates the file and its parent directories when opened and
    reads the file whole into a buffer, returned by `data()`.
  - On `close()` it writes the buffer back.
  - `+=` appends text or bytes: to the buffer while open, to the file on disk
    otherwise.
  - `copy_of` and `assign_from` copy contents between files.
- `mystd.text_files` provides `line_to_words(line)`, `TextFile`, `SaveFile`
  and `LogFile`.
  - `TextFile` has `set_text`, `clear`, `text`, `lines`, `words` and
    `delete_comments(comment_chars="#")`.
  - `LogFile` is a `TextFile`. `SaveFile` is a plain binary `RegularFile`.
- `mystd.directory` provides `DirFile`, a directory that is created on
  construction.
  - When opened it lists its regular files, in sorted order, as `LogFile`
    (`.log`), `TextFile` (`.txt`) or `RegularFile`. Subdirectories are not
    listed.
  - `+=` appends to every listed file. `copy_of` and `assign_from` copy a
    directory's files.
- `mystd.logger` provides `Logger(path=None)`.
  - It empties its log file and writes the module start time (epoch seconds)
    as the first line. The default path is `default_log_path()`, which is
    `logs/<start time as ctime>.log`.
  - `log(message, level=0)` appends `<ctime> text: <message> <level>`.
  - `clean_logs(max_files=10, level_clean=0)` prunes the log's directory. It
    deletes every non-`.log` file and every malformed log. It keeps any log
    with a record above `level_clean`. Of the other logs it keeps only the
    `max_files` newest.
- `mystd.containers` provides `Deque` (`push_back`, `pop_back`, `back`,
  `push_front`, `pop_front`, `front`) and `Queue` (`push`, `pop`, `front`).
  Both take an initial size and fill value. Reading or popping an empty one
  raises `LibraryError`: code 4 for `Deque`, code 3 for `Queue`.
- `mystd.text_string` provides `String`, a mutable character string.
  - It supports indexing, `+`, `+=` and equality with `str`.
  - `upper`/`lower` change ASCII letters over an optional `[begin, end)`
    range. An empty or out-of-bounds range changes nothing.
  - `substr(begin, end)` clamps `end` to the length and raises `LibraryError`
    if `begin > end`.
  - `to_int()` and `to_float()` parse strictly and raise `LibraryError`
    (code 2) on bad input, or code 1 on an empty string.
  - `read_word(stream)` reads one space- or newline-delimited word from a
    text stream. A newline that ends a word is kept.

## Installation

```
pip install .
```

## Examples

```python
from mystd.zfunction import z_function
from mystd.trie import Trie

print(z_function("aabxaab"))   # [0, 1, 0, 0, 3, 1, 0]

trie = Trie()
trie.insert("car")
trie.insert("cart")
print("car" in trie)            # True
print(trie.find_full("car"))    # [['c', 'a', 'r'], ['c', 'a', 'r', 't']]
```

```python
from mystd.arg_parser import Parser, Nargs

parser = Parser()
parser.add_argument("-o", "--output", "output", Nargs.IMMEDIATE_OPTIONAL)
parser.parse(["prog", "--output=result.txt"])
print(parser.value("output", 0))  # result.txt
```

```python
from mystd.logger import Logger

logger = Logger("logs/run.log")
logger.log("started", 1)
logger.clean_logs(10, 0)   # note: removes non-.log files from logs/
```

## What it does not do

This is a library only. It installs no command-line program. The argument
parser is there for your own programs to use.

## Running the tests

```
pip install .[test]
pytest
```