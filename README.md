# wordshell

A small interactive command shell together with the word scanners it is built on.

Install with `pip install .`, or `pip install .[test]` to get pytest for the test suite.

## Word scanners

### `wordshell.lexer`

`Lexer(stream)` reads words from a text stream; `next_word()` returns one
`Word` at a time and iterating over the lexer yields words up to and including
the terminal one. `tokenize(text)` does the same for a string and returns a list.

- words are separated by blanks; leading blanks are skipped;
- the metacharacters `<`, `>`, `>&`, `>>`, `>>&`, `|`, `#` and `&` are words
  of their own, read greedily (`>>>&` gives `>>` then `>&`); such words have
  `is_meta` set;
- a backslash makes the following character ordinary, so `Null\&void` is the
  one word `Null&void` and `Null\ void` is `Null void`; a backslash before a
  newline does not change the meaning of the newline;
- a newline yields an empty word (`end_of_line` is true);
- end of input yields an empty word with `terminal` set; the word `done` at the
  end of a line or of input is also terminal;
- a word longer than 254 characters is split, the rest coming back as the next word.

`Word.code` is `-1` for a terminal word and otherwise the length of the text
(so `0` at the end of a line).

```python
from wordshell.lexer import tokenize

for word in tokenize("Hi there&\n"):
    print(word.code, repr(word.text))
```

### `wordshell.simple`

`SimpleLexer` and `tokenize_simple(text)` split on blanks only, with no
metacharacters or backslashes. Newlines, end of input and `done` behave as above.

### `wordshell.quoting`

`QuotingLexer` and `tokenize_quoted(text)` return `QuotedWord` values:

- `<`, `>`, `|` and `&` are one-character metacharacter words;
- newline and `;` both end a line;
- text between single quotes keeps its blanks and metacharacters; inside
  quotes `\'` stands for a quote and any other backslash is kept;
- outside quotes a backslash makes the next character ordinary;
- `dollar_escaped` is set when a word starts with `\$`;
- a quote left open at the end of a line or of input raises
  `UnterminatedQuoteError`, whose `partial` holds the text read so far.

## Showing the words of some input

```
wordshell-words [--mode simple|meta|quoted] [file]
```

reads the file, or standard input without one, and prints each word as
`n=<code>, s=[<text>]`, stopping after the first word whose code is `-1`.
`--mode` picks the scanner (`meta`, the default, is `wordshell.lexer`). In
`quoted` mode an unclosed quote is printed with code `-2`.

The same output is available from `wordshell.cli.format_word(word)` and
`wordshell.cli.dump_words(words, out)`.

## The shell

```
wordshell
wordshell script.txt
```

With no argument the shell prompts with `%1% ` and reads commands from
standard input; with one file argument it reads commands from that file. More
than one argument is an error (exit status 9).

Each line is read with `wordshell.parser.parse_line(lexer)`, which returns a
`Command` (`words`, `argv`, `input_file`, `output_file`, `background`,
`repeat`), `None` at the end of input, or raises `ParseError` for a repeated
redirection or a redirection with no file name. The shell supports:

- running programs found on `PATH`, with arguments; `Unknown command` is
  printed when the program cannot be started;
- `< file` to read standard input from a file;
- `> file` or `>& file` to send both standard output and standard error to a
  new file; an existing file is never overwritten (`File exists`);
- a trailing `&` to run a command in the background with standard input from
  the null device, printing `name [pid]`; background commands still running
  when the shell leaves are terminated;
- `!!` at the start of a line to run the previous command again;
- `cd` with one directory, or with none to go to `$HOME`;
- `done` or end of input to leave, printing `p2 terminated.`

`Shell(stdin, stdout, stderr)` can be driven directly: `run()` runs the loop,
`execute(command)` starts one program and `change_directory(command)` does `cd`.

## What the shell does not do

There are no pipelines: `|` is recognised by the scanner but dropped from the
command, as are `#`, `>>` and `>>&`, so there are no comments and no appending
redirection. There are no variables, globbing, quoting in the shell itself
(the quoting scanner is separate), job control or command history beyond `!!`.