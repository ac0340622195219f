"""Plain word scanner: blank-delimited words with no special characters.

Words are separated by blanks.  A newline yields an empty word, end of input
yields an empty terminal word, and the word ``done`` ends input when a blank
or newline follows it.
"""

from __future__ import annotations

import io
from typing import Iterator, TextIO

from wordshell.lexer import STOP_WORD, Word


class SimpleLexer:
    """Reads blank-delimited words one at a time from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pushback: str | None = None

    def _getc(self) -> str:
        if self._pushback is not None:
            ch, self._pushback = self._pushback, None
            return ch
        return self._stream.read(1)

    def _ungetc(self, ch: str) -> None:
        self._pushback = ch

    @staticmethod
    def _finish(chars: list[str]) -> Word:
        text = "".join(chars)
        return Word(text, terminal=text == STOP_WORD)

    def next_word(self) -> Word:
        """Scan and return the next word from the stream."""
        chars: list[str] = []
        while True:
            ch = self._getc()
            if ch == "":
                break

            if not chars and ch == " ":
                while ch == " ":
                    ch = self._getc()
                if ch == "\n":
                    return Word("")
                if ch == "":
                    break

            if ch == "\n":
                if not chars:
                    return Word("")
                self._ungetc(ch)
                return self._finish(chars)

            if ch == " ":
                return self._finish(chars)

            chars.append(ch)

        if chars:
            return Word("".join(chars))
        return Word("", terminal=True)

    def __iter__(self) -> Iterator[Word]:
        """Yield words up to and including the terminal one."""
        while True:
            word = self.next_word()
            yield word
            if word.terminal:
                return


def tokenize_simple(text: str) -> list[Word]:
    """Scan all of ``text`` and return its words, ending with the terminal one."""
    return list(SimpleLexer(io.StringIO(text)))