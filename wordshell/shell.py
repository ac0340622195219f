"""A small interactive shell built on the word scanner and line parser."""

from __future__ import annotations

import contextlib
import os
import subprocess
import sys
from typing import TextIO

from wordshell.lexer import Lexer
from wordshell.parser import Command, ParseError, parse_line

PROMPT = "%1% "
FAREWELL = "p2 terminated."


def _fileno(stream: TextIO) -> int | None:
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None


class Shell:
    """Reads commands from ``stdin`` and runs them until end of input or ``done``."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self._stdin = sys.stdin if stdin is None else stdin
        self._stdout = sys.stdout if stdout is None else stdout
        self._stderr = sys.stderr if stderr is None else stderr
        self._lexer = Lexer(self._stdin)
        self._last: Command | None = None
        self._background: list[subprocess.Popen] = []

    def _error(self, message: str) -> None:
        self._stderr.write(message + "\n")
        self._stderr.flush()

    def run(self) -> int:
        """Run the read-execute loop; return the exit status."""
        while True:
            self._stdout.write(PROMPT)
            self._stdout.flush()
            try:
                command = parse_line(self._lexer)
            except ParseError as exc:
                self._error(str(exc))
                continue
            if command is None:
                break
            if command.repeat:
                if self._last is None:
                    continue
                command = self._last
            elif not command.is_empty():
                self._last = command
            if command.is_empty():
                continue

            name = command.words[0]
            if name == "cd":
                self.change_directory(command)
            elif name == "done":
                break
            else:
                self.execute(command)

        for process in self._background:
            if process.poll() is None:
                process.terminate()
                process.wait()
        self._stdout.write(FAREWELL + "\n")
        self._stdout.flush()
        return 0

    def change_directory(self, command: Command) -> bool:
        """Change to the named directory, or to HOME without one."""
        args = command.argv[1:]
        if len(args) > 1:
            self._error("Too many arguments to CD.")
            return False
        target = args[0] if args else os.environ.get("HOME")
        if not target or not os.path.isdir(target):
            self._error("CD failed.")
            return False
        try:
            os.chdir(target)
        except OSError:
            self._error("CD failed.")
            return False
        return True

    def _child_stdin(self, command: Command):
        if command.background:
            return subprocess.DEVNULL
        if self._stdin is sys.stdin and _fileno(self._stdin) is not None:
            return None
        return subprocess.DEVNULL

    def _child_output(self, stream: TextIO, background: bool):
        fd = _fileno(stream)
        if fd is not None:
            stream.flush()
            return fd
        return subprocess.DEVNULL if background else subprocess.PIPE

    def execute(self, command: Command) -> int | None:
        """Run an external program.

        Returns its exit status when run in the foreground, otherwise None.
        """
        if not command.argv:
            self._stdout.write("Unknown command\n")
            return None

        with contextlib.ExitStack() as stack:
            if command.output_file is not None:
                try:
                    out_file = stack.enter_context(open(command.output_file, "xb"))
                except FileExistsError:
                    self._error("File exists")
                    return None
                except OSError:
                    self._error("Existing file. Cannot overwrite.")
                    return None
                child_out = child_err = out_file
            else:
                child_out = self._child_output(self._stdout, command.background)
                child_err = self._child_output(self._stderr, command.background)

            if command.input_file is not None:
                try:
                    child_in = stack.enter_context(open(command.input_file, "rb"))
                except OSError:
                    self._error("Cannot read input.")
                    return None
            else:
                child_in = self._child_stdin(command)

            try:
                process = subprocess.Popen(
                    command.argv, stdin=child_in, stdout=child_out, stderr=child_err
                )
            except OSError:
                self._stdout.write("Unknown command\n")
                return None

            if command.background:
                self._background.append(process)
                self._stdout.write(f"{command.argv[0]} [{process.pid}]\n")
                self._stdout.flush()
                return None

            out, err = process.communicate()
            if out:
                self._stdout.write(out.decode(errors="replace"))
            if err:
                self._stderr.write(err.decode(errors="replace"))
            return process.returncode


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) > 1:
        sys.stderr.write("Too many command line arguments.\n")
        return 9
    if args:
        try:
            script = open(args[0], encoding="utf-8")
        except OSError as exc:
            sys.stderr.write(f"{args[0]}: {exc.strerror}\n")
            return 1
        with script:
            return Shell(script, sys.stdout, sys.stderr).run()
    return Shell(sys.stdin, sys.stdout, sys.stderr).run()