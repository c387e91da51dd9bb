"""Whitespace tokenizer over line-oriented dictionary streams."""

from __future__ import annotations

import io
from typing import IO


class DictionaryTokenizer:
    """Reads whitespace separated tokens one line at a time.

    ``next_line()`` moves to the next non-blank line and ``get_string()`` hands
    out its tokens, returning ``None`` once the line is used up. Closing the
    tokenizer closes the wrapped stream.
    """

    def __init__(self, stream: IO, encoding: str = "utf-8") -> None:
        self._raw = stream
        if isinstance(stream, io.TextIOBase):
            self._reader = stream
        else:
            self._reader = io.TextIOWrapper(stream, encoding=encoding)
        self._tokens: list[str] = []
        self._pos = 0
        self.line_number = 0
        self.closed = False

    def next_line(self) -> bool:
        while True:
            line = self._reader.readline()
            if not line:
                self._tokens = []
                self._pos = 0
                return False
            self.line_number += 1
            tokens = line.split()
            if tokens:
                self._tokens = tokens
                self._pos = 0
                return True

    def get_string(self) -> str | None:
        if self._pos >= len(self._tokens):
            return None
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        try:
            self._reader.close()
        finally:
            if self._reader is not self._raw:
                self._raw.close()

    def __enter__(self) -> DictionaryTokenizer:
        return self

    def __exit__(self, *exc) -> None:
        self.close()
