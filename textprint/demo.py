"""Append words read from standard input to the file named by LOG_PATH."""

import os
import sys

from textprint.printing import print_text


def log_words(words, log_path):
    """Append each word to ``log_path`` on a line of its own."""
    for word in words:
        with open(log_path, "a", encoding="utf-8") as out:
            print_text(word, out)
            out.write("\n")


def main(argv=None):
    """Log standard input's words; return 1 if LOG_PATH is unset."""
    log_path = os.environ.get("LOG_PATH")
    if log_path is None:
        print("undefined environment variable: LOG_PATH", file=sys.stderr)
        return 1
    log_words((word for line in sys.stdin for word in line.split()), log_path)
    return 0