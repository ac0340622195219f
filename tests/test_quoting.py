import io

import pytest

from wordshell.quoting import QuotingLexer, UnterminatedQuoteError, tokenize_quoted


def _texts(words):
    return [w.text for w in words]


def test_metacharacter_splits_words():
    words = tokenize_quoted("Null&void")
    assert _texts(words) == ["Null", "&", "void", ""]
    assert words[1].is_meta


def test_escaped_metacharacter_joins_word():
    words = tokenize_quoted("Null\\&void")
    assert words[0].text == "Null&void"
    assert words[0].code == 9


def test_escaped_blank_joins_word():
    words = tokenize_quoted("Null\\ void")
    assert words[0].text == "Null void"
    assert words[0].code == 9


def test_documented_example_codes():
    words = tokenize_quoted("Hi there&  ")
    assert [w.code for w in words] == [2, 5, 1, -1]


def test_quotes_keep_blanks_and_metacharacters():
    words = tokenize_quoted("echo 'a < b | c'\n")
    assert words[1].text == "a < b | c"
    assert not words[1].is_meta


def test_escaped_quote_inside_quotes():
    words = tokenize_quoted("'it\\'s'")
    assert words[0].text == "it's"


def test_other_backslash_inside_quotes_is_kept():
    words = tokenize_quoted("'a\\b'")
    assert words[0].text == "a\\b"


def test_unterminated_quote_at_eof_raises():
    with pytest.raises(UnterminatedQuoteError) as info:
        tokenize_quoted("'abc")
    assert info.value.partial == "abc"


def test_unterminated_quote_at_newline_leaves_line_end():
    lexer = QuotingLexer(io.StringIO("'abc\nnext"))
    with pytest.raises(UnterminatedQuoteError):
        lexer.next_word()
    assert lexer.next_word().end_of_line
    assert lexer.next_word().text == "next"


def test_semicolon_ends_line():
    words = tokenize_quoted("a;b")
    assert _texts(words) == ["a", "", "b", ""]
    assert words[1].end_of_line


def test_redirections_are_single_characters():
    words = tokenize_quoted(">>")
    assert _texts(words) == [">", ">", ""]
    assert all(w.is_meta for w in words[:2])


def test_escaped_dollar_is_flagged():
    words = tokenize_quoted("\\$HOME x")
    assert words[0].text == "$HOME"
    assert words[0].dollar_escaped
    assert not words[1].dollar_escaped


def test_long_word_is_split_without_loss():
    text = "x" * 300
    words = tokenize_quoted(text)
    assert len(words[0].text) == 254
    assert "".join(w.text for w in words) == text


def test_backslash_newline_keeps_newline():
    words = tokenize_quoted("ab\\\ncd")
    assert _texts(words) == ["ab", "", "cd", ""]


def test_empty_input_is_terminal():
    words = tokenize_quoted("   ")
    assert len(words) == 1
    assert words[0].terminal