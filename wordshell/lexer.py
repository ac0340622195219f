"""Word scanner for the shell's input language.

A word is either one of the metacharacters ``<``, ``>``, ``>&``, ``>>``,
``>>&``, ``|``, ``#`` and ``&``, or a run of other characters delimited by
blanks, newlines or metacharacters.  A backslash makes the next character
ordinary, so ``Null\\&void`` is the single word ``Null&void``.  Collection is
greedy: ``>>>&`` is scanned as ``>>`` followed by ``>&``.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Iterator, TextIO

MAX_WORD_LENGTH = 254
STOP_WORD = "done"
METACHARACTERS = ("<", ">", ">&", ">>", ">>&", "|", "#", "&")

_SINGLE_METACHARACTERS = frozenset("<|#&")


@dataclass(frozen=True)
class Word:
    """One scanned word.

    ``terminal`` marks the end of input, either because the stream ran out
    or because the stop word ended a line.  An empty, non-terminal word
    stands for the end of a line.
    """

    text: str
    is_meta: bool = False
    terminal: bool = False

    @property
    def end_of_line(self) -> bool:
        return not self.terminal and not self.is_meta and self.text == ""

    @property
    def code(self) -> int:
        """-1 at the end of input, 0 at the end of a line, else the length."""
        if self.terminal:
            return -1
        return len(self.text)

    def __str__(self) -> str:
        return self.text


class Lexer:
    """Reads words one at a time from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pushback: list[str] = []

    def _getc(self) -> str:
        if self._pushback:
            return self._pushback.pop()
        return self._stream.read(1)

    def _ungetc(self, text: str) -> None:
        self._pushback.extend(reversed(text))

    def _read_meta(self, first: str) -> str | None:
        """Return the longest metacharacter starting with ``first``, if any."""
        if first in _SINGLE_METACHARACTERS:
            return first
        if first != ">":
            return None
        second = self._getc()
        if second == "&":
            return ">&"
        if second != ">":
            self._ungetc(second)
            return ">"
        third = self._getc()
        if third == "&":
            return ">>&"
        self._ungetc(third)
        return ">>"

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
            if len(chars) >= MAX_WORD_LENGTH:
                self._ungetc(ch)
                return Word("".join(chars))

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

            if ch == "\\":
                escaped = self._getc()
                if escaped == "":
                    break
                if escaped == "\n":
                    if not chars:
                        return Word("")
                    self._ungetc(escaped)
                    return Word("".join(chars))
                chars.append(escaped)
                continue

            meta = self._read_meta(ch)
            if meta is not None:
                if chars:
                    self._ungetc(meta)
                    return Word("".join(chars))
                return Word(meta, is_meta=True)

            if ch == " ":
                return Word("".join(chars))

            chars.append(ch)

        text = "".join(chars)
        if text == STOP_WORD or not text:
            return Word(text, terminal=True)
        return Word(text)

    def __iter__(self) -> Iterator[Word]:
        """Yield words up to and including the terminal one."""
        while True:
            word = self.next_word()
            yield word
            if word.terminal:
                return


def tokenize(text: str) -> list[Word]:
    """Scan all of ``text`` and return its words, ending with the terminal one."""
    return list(Lexer(io.StringIO(text)))