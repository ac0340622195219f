import io

from wordshell.simple import SimpleLexer, tokenize_simple


def _codes(words):
    return [w.code for w in words]


def _texts(words):
    return [w.text for w in words]


def test_line_with_newline_then_eof():
    words = tokenize_simple("Hi there\n")
    assert _texts(words) == ["Hi", "there", "", ""]
    assert _codes(words) == [2, 5, 0, -1]


def test_extra_blanks_give_same_words():
    assert _texts(tokenize_simple("   Hi   there  \n")) == _texts(
        tokenize_simple("Hi there\n")
    )


def test_empty_input_is_terminal():
    words = tokenize_simple("")
    assert len(words) == 1
    assert words[0].terminal
    assert words[0].code == -1


def test_trailing_blanks_then_eof():
    words = tokenize_simple("word   ")
    assert _texts(words) == ["word", ""]
    assert words[-1].terminal


def test_stop_word_before_blank_ends_input():
    words = tokenize_simple("a done b\n")
    assert _texts(words) == ["a", "done"]
    assert words[-1].code == -1


def test_stop_word_before_newline_ends_input():
    words = tokenize_simple("done\nmore\n")
    assert _texts(words) == ["done"]
    assert words[0].terminal


def test_stop_word_at_eof_is_ordinary():
    words = tokenize_simple("done")
    assert _texts(words) == ["done", ""]
    assert _codes(words) == [4, -1]


def test_metacharacters_are_ordinary():
    words = tokenize_simple("a&b<c\n")
    assert words[0].text == "a&b<c"
    assert not words[0].is_meta


def test_blank_line_gives_end_of_line():
    lexer = SimpleLexer(io.StringIO("   \nx"))
    first = lexer.next_word()
    assert first.end_of_line
    assert lexer.next_word().text == "x"


def test_words_never_contain_blanks_or_newlines():
    for word in tokenize_simple("one two\nthree  four five\n\nsix"):
        assert " " not in word.text
        assert "\n" not in word.text