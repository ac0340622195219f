"""Turns one line of scanned words into a command description.

A line is read word by word from a :class:`~wordshell.lexer.Lexer`.  ``<``
names the input file with the next ordinary word, ``>`` and ``>&`` name the
output file the same way, and a trailing ``&`` runs the command in the
background.  The word ``!!`` at the start of a line asks for the previous
command again.  Other metacharacters are dropped from the argument list.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from wordshell.lexer import Lexer

REPEAT_WORD = "!!"


class ParseError(ValueError):
    """A line could not be turned into a command."""


@dataclass
class Command:
    """A parsed command line.

    ``words`` holds every word of the line in order, metacharacters
    included; ``argv`` holds only the program and its arguments.
    """

    words: list[str] = field(default_factory=list)
    argv: list[str] = field(default_factory=list)
    input_file: str | None = None
    output_file: str | None = None
    background: bool = False
    repeat: bool = False

    def is_empty(self) -> bool:
        """True for a blank line."""
        return not self.words


def _drain_line(lexer: Lexer) -> None:
    """Discard the rest of the current line."""
    while True:
        word = lexer.next_word()
        if word.end_of_line or word.terminal:
            return


def parse_line(lexer: Lexer) -> Command | None:
    """Read one line of words and return its command.

    Returns None at the end of input.  Raises ParseError for a repeated
    redirection or a redirection without a file; the rest of the offending
    line is discarded first.
    """
    command = Command()
    wants_input = False
    wants_output = False

    while True:
        word = lexer.next_word()
        if word.end_of_line:
            break
        if word.terminal:
            if not command.words:
                return None
            break

        if not command.words and not word.is_meta and word.text == REPEAT_WORD:
            _drain_line(lexer)
            return Command(words=[REPEAT_WORD], repeat=True)

        command.words.append(word.text)
        command.background = False

        if word.is_meta:
            if word.text == "<":
                if wants_input:
                    _drain_line(lexer)
                    raise ParseError(
                        "Multiple input redirections detected. Cannot continue."
                    )
                wants_input = True
            elif word.text in (">", ">&"):
                if wants_output:
                    _drain_line(lexer)
                    raise ParseError(
                        "Multiple output redirections detected. Cannot continue."
                    )
                wants_output = True
                command.background = word.text == ">&"
            elif word.text == "&":
                command.background = True
                command.argv.append(word.text)
            continue

        if wants_output and command.output_file is None:
            command.output_file = word.text
        elif wants_input and command.input_file is None:
            command.input_file = word.text
        else:
            command.argv.append(word.text)

    if command.background and command.words[-1] == "&":
        command.argv.pop()
    if wants_output and command.output_file is None:
        raise ParseError("No location specified for output redirection.")
    if wants_input and command.input_file is None:
        raise ParseError("No location specified for input redirection.")
    return command