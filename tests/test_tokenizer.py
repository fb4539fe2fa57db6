import pytest

from shellx.tokenizer import Token, TokenType, tokenize


def _pairs(tokens):
    return [(token.value, token.type) for token in tokens]


def test_token_type_numbers_follow_declaration_order():
    tokens = tokenize("w | < > << >>")
    assert [int(t.type) for t in tokens] == [0, 1, 2, 3, 4, 5]
    assert [t.value for t in tokens] == ["w", "|", "<", ">", "<<", ">>"]


def test_simple_pipeline():
    assert _pairs(tokenize("ls -l | wc")) == [
        ("ls", TokenType.WORD),
        ("-l", TokenType.WORD),
        ("|", TokenType.PIPE),
        ("wc", TokenType.WORD),
    ]


def test_operators_without_spaces():
    assert _pairs(tokenize("cat<in>out")) == [
        ("cat", TokenType.WORD),
        ("<", TokenType.REDIR_IN),
        ("in", TokenType.WORD),
        (">", TokenType.REDIR_OUT),
        ("out", TokenType.WORD),
    ]


def test_double_operators():
    assert _pairs(tokenize("cat << EOF >> log")) == [
        ("cat", TokenType.WORD),
        ("<<", TokenType.HEREDOC),
        ("EOF", TokenType.WORD),
        (">>", TokenType.APPEND),
        ("log", TokenType.WORD),
    ]


def test_mixed_angle_pair_is_two_tokens():
    assert _pairs(tokenize("<>")) == [
        ("<", TokenType.REDIR_IN),
        (">", TokenType.REDIR_OUT),
    ]


def test_quoted_words_keep_spaces_and_metachars():
    tokens = tokenize("echo \"a | b\" 'c > d'")
    assert _pairs(tokens) == [
        ("echo", TokenType.WORD),
        ("a | b", TokenType.WORD),
        ("c > d", TokenType.WORD),
    ]


def test_unterminated_quote_runs_to_end():
    assert tokenize("echo 'abc def") == [
        Token("echo", TokenType.WORD),
        Token("abc def", TokenType.WORD),
    ]


def test_quote_splits_adjacent_word():
    assert [t.value for t in tokenize("ab\"cd\"ef")] == ["ab", "cd", "ef"]


def test_empty_quotes_give_empty_word():
    assert tokenize("''") == [Token("", TokenType.WORD)]


@pytest.mark.parametrize("text", ["", "    "])
def test_blank_input_has_no_tokens(text):
    assert tokenize(text) == []


def test_tab_is_not_a_separator():
    assert [t.value for t in tokenize("a\tb c")] == ["a\tb", "c"]


def test_unquoted_words_reassemble_input():
    text = "grep -n foo | sort -r | uniq"
    tokens = tokenize(text)
    assert " ".join(t.value for t in tokens) == text
    assert sum(t.type is TokenType.PIPE for t in tokens) == text.count("|")