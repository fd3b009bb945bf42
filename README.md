# textprint

A tiny library for writing text to a stream or a file. It also has a command
that appends words read from standard input to a log file.

## Installation

From the project directory:

```
pip install .
```

## Library use

```python
import sys
from textprint.printing import print_text

print_text("hello")              # goes to standard output
print_text("hello", sys.stderr)  # any writable text stream

with open("log.txt", "w") as out:
    print_text("hello", out)
```

`print_text(text, out=None)` writes the text to `out` exactly as given. It adds
no newline and no separator. If `out` is left out or is `None`, the text goes
to standard output.

`textprint.examples` has two ready-made helpers:

- `hello_to_stdout()` writes `hello` to standard output.
- `hello_to_file(path="log.txt")` writes `hello` to the file at `path`. The
  file is created if it does not exist, and its old contents are replaced if
  it does.

`textprint.demo.log_words(words, log_path)` takes an iterable of words and
appends each one to the file at `log_path`, one word per line. The file is
opened again for each word, so every word that has been logged is already on
disk.

## The `textprint-demo` command

`textprint-demo` reads words from standard input, split on whitespace. It
appends each word on its own line to the file named by the `LOG_PATH`
environment variable. It exits with status 0:

```
LOG_PATH=words.log textprint-demo < input.txt
```

If `LOG_PATH` is not set, the command prints
`undefined environment variable: LOG_PATH` to standard error and exits with
status 1. The command takes no options.

## Running the tests

```
pip install .[test]
pytest
```