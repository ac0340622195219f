"""Command that prints every word it scans from its input."""

from __future__ import annotations

import argparse
import contextlib
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Protocol, TextIO

from wordshell.lexer import Lexer
from wordshell.quoting import QuotingLexer, UnterminatedQuoteError
from wordshell.simple import SimpleLexer


class _Scanned(Protocol):
    @property
    def code(self) -> int: ...

    @property
    def text(self) -> str: ...


@dataclass(frozen=True)
class _Unterminated:
    text: str
    code: int = -2


def format_word(word: _Scanned) -> str:
    """Render a word as ``n=<code>, s=[<text>]``."""
    return f"n={word.code}, s=[{word.text}]"


def dump_words(words: Iterable[_Scanned], out: TextIO) -> int:
    """Write one line per word, stopping after the first with code -1.

    Returns the number of lines written.
    """
    count = 0
    for word in words:
        out.write(format_word(word) + "\n")
        count += 1
        if word.code == -1:
            break
    return count


def _quoted_words(lexer: QuotingLexer) -> Iterator[_Scanned]:
    while True:
        try:
            word = lexer.next_word()
        except UnterminatedQuoteError as exc:
            yield _Unterminated(exc.partial)
            continue
        yield word
        if word.terminal:
            return


def _words(mode: str, stream: TextIO) -> Iterable[_Scanned]:
    if mode == "simple":
        return SimpleLexer(stream)
    if mode == "quoted":
        return _quoted_words(QuotingLexer(stream))
    return Lexer(stream)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wordshell-words", description="Print the words scanned from input."
    )
    parser.add_argument(
        "--mode",
        choices=("simple", "meta", "quoted"),
        default="meta",
        help="which word scanner to use",
    )
    parser.add_argument("file", nargs="?", help="input file (default: stdin)")
    args = parser.parse_args(argv)

    with contextlib.ExitStack() as stack:
        if args.file is None:
            stream = sys.stdin
        else:
            stream = stack.enter_context(open(args.file, encoding="utf-8"))
        dump_words(_words(args.mode, stream), sys.stdout)
    return 0