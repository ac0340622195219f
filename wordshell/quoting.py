"""Word scanner with single-quote support.

Blanks separate words; ``<``, ``>``, ``|`` and ``&`` are one-character
metacharacter words; newline and ``;`` end a line.  A backslash makes the
next character ordinary.  Text between single quotes keeps its blanks and
metacharacters; inside quotes ``\\'`` stands for a quote and any other
backslash is kept literally.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Iterator, TextIO

MAX_WORD_LENGTH = 254
_LINE_ENDS = frozenset("\n;")
_METACHARACTERS = frozenset("<>|&")


class UnterminatedQuoteError(ValueError):
    """A quoted word reached the end of its line or of input unclosed."""

    def __init__(self, partial: str) -> None:
        super().__init__(f"unterminated quote in word {partial!r}")
        self.partial = partial


@dataclass(frozen=True)
class QuotedWord:
    """One scanned word.

    ``dollar_escaped`` is set when the word starts with an escaped ``$``.
    """

    text: str
    is_meta: bool = False
    terminal: bool = False
    dollar_escaped: bool = False

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


class QuotingLexer:
    """Reads words, honouring single quotes and backslashes."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pushback: list[str] = []

    def _getc(self) -> str:
        if self._pushback:
            return self._pushback.pop()
        return self._stream.read(1)

    def _ungetc(self, ch: str) -> None:
        self._pushback.append(ch)

    def next_word(self) -> QuotedWord:
        """Scan and return the next word.

        Raises UnterminatedQuoteError when a quote is left open.
        """
        chars: list[str] = []
        quoted = False
        dollar = False

        def word() -> QuotedWord:
            return QuotedWord("".join(chars), dollar_escaped=dollar)

        while True:
            ch = self._getc()
            if ch == "":
                break
            if len(chars) >= MAX_WORD_LENGTH:
                self._ungetc(ch)
                return word()

            escaped = False
            if ch == "\\":
                ch = self._getc()
                if ch == "":
                    break
                if ch == "$" and not chars:
                    dollar = True
                if not quoted:
                    escaped = True
                elif ch == "'":
                    chars.append(ch)
                    ch = self._getc()
                    if ch == "":
                        break
                else:
                    chars.append("\\")

            if ch == " ":
                if escaped or quoted:
                    chars.append(ch)
                elif chars:
                    return word()
            elif ch in _LINE_ENDS:
                if not chars:
                    return QuotedWord("")
                self._ungetc(ch)
                if quoted:
                    raise UnterminatedQuoteError("".join(chars))
                return word()
            elif escaped:
                chars.append(ch)
            elif ch == "'":
                quoted = not quoted
            elif ch in _METACHARACTERS:
                if quoted:
                    chars.append(ch)
                elif chars:
                    self._ungetc(ch)
                    return word()
                else:
                    return QuotedWord(ch, is_meta=True)
            else:
                chars.append(ch)

        if quoted:
            raise UnterminatedQuoteError("".join(chars))
        if chars:
            return word()
        return QuotedWord("", terminal=True)

    def __iter__(self) -> Iterator[QuotedWord]:
        """Yield words up to and including the terminal one."""
        while True:
            word = self.next_word()
            yield word
            if word.terminal:
                return


def tokenize_quoted(text: str) -> list[QuotedWord]:
    """Scan all of ``text`` and return its words, ending with the terminal one."""
    return list(QuotingLexer(io.StringIO(text)))