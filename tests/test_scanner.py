from datalogue.scanner import Scanner, scan
from datalogue.tokens import Token, TokenType


def kinds(tokens):
    return [token.type for token in tokens]


def test_empty_input_gives_only_eof():
    assert scan("") == [Token(TokenType.ENDOF, "", 1)]


def test_punctuation():
    tokens = scan(",.?()*+")
    assert kinds(tokens) == [
        TokenType.COMMA,
        TokenType.PERIOD,
        TokenType.Q_MARK,
        TokenType.LEFT_PAREN,
        TokenType.RIGHT_PAREN,
        TokenType.MULTIPLY,
        TokenType.ADD,
        TokenType.ENDOF,
    ]
    assert "".join(token.value for token in tokens) == ",.?()*+"


def test_colon_and_colon_dash():
    tokens = scan(":-:")
    assert kinds(tokens) == [TokenType.COLON_DASH, TokenType.COLON, TokenType.ENDOF]
    assert tokens[0].value == ":-"


def test_keywords():
    tokens = scan("Schemes: Facts: Rules: Queries:")
    assert kinds(tokens) == [
        TokenType.SCHEMES, TokenType.COLON,
        TokenType.FACTS, TokenType.COLON,
        TokenType.RULES, TokenType.COLON,
        TokenType.QUERIES, TokenType.COLON,
        TokenType.ENDOF,
    ]
    assert [t.value for t in tokens[0:8:2]] == ["Schemes", "Facts", "Rules", "Queries"]


def test_keyword_at_end_of_input():
    assert kinds(scan("Queries")) == [TokenType.QUERIES, TokenType.ENDOF]


def test_keyword_prefix_is_identifier():
    tokens = scan("Schemesx Factual")
    assert tokens[:2] == [
        Token(TokenType.ID, "Schemesx", 1),
        Token(TokenType.ID, "Factual", 1),
    ]


def test_identifiers_and_undefined():
    tokens = scan("abc123 1x $")
    assert tokens[:-1] == [
        Token(TokenType.ID, "abc123", 1),
        Token(TokenType.UNDEFINED, "1", 1),
        Token(TokenType.ID, "x", 1),
        Token(TokenType.UNDEFINED, "$", 1),
    ]


def test_string_token():
    text = "'hello world'"
    assert scan(text)[0] == Token(TokenType.STRING, text, 1)


def test_doubled_quote_gives_two_strings():
    tokens = scan("'I''m'")
    assert [t.value for t in tokens[:-1]] == ["'I'", "'m'"]
    assert all(t.type is TokenType.STRING for t in tokens[:-1])


def test_unterminated_string_consumes_rest():
    text = "'abc\n\ndef"
    tokens = scan(text)
    assert tokens[0] == Token(TokenType.UNDEFINED, text, 1)
    assert tokens[1] == Token(TokenType.ENDOF, "", 1 + text.count("\n"))
    assert len(tokens) == 2


def test_comments_dropped_by_default():
    assert kinds(scan("# note\nx")) == [TokenType.ID, TokenType.ENDOF]


def test_comments_kept_on_request():
    tokens = scan("# note\nx", keep_comments=True)
    assert tokens[0] == Token(TokenType.COMMENT, "# note", 1)
    assert tokens[1] == Token(TokenType.ID, "x", 2)


def test_line_numbers_follow_newlines():
    tokens = scan("a\n\nb\nc")
    assert [t.line for t in tokens] == [1, 3, 4, 4]


def test_newlines_inside_string_do_not_advance_line():
    tokens = scan("'a\nb' x")
    assert tokens[1] == Token(TokenType.ID, "x", 1)


def test_whitespace_skipped():
    assert kinds(scan(" \t\r x \f")) == [TokenType.ID, TokenType.ENDOF]


def test_starting_line_is_used():
    tokens = Scanner("a\nb", line=5).scan()
    assert [t.line for t in tokens] == [5, 6, 6]


def test_scan_is_repeatable():
    scanner = Scanner("Schemes: snap(S,N)")
    expected = [
        Token(TokenType.SCHEMES, "Schemes", 1),
        Token(TokenType.COLON, ":", 1),
        Token(TokenType.ID, "snap", 1),
        Token(TokenType.LEFT_PAREN, "(", 1),
        Token(TokenType.ID, "S", 1),
        Token(TokenType.COMMA, ",", 1),
        Token(TokenType.ID, "N", 1),
        Token(TokenType.RIGHT_PAREN, ")", 1),
        Token(TokenType.ENDOF, "", 1),
    ]
    assert scanner.scan() == expected
    assert scanner.scan() == expected


def test_small_program():
    tokens = scan("Schemes:\n  snap(S,N)\n")
    assert [str(t) for t in tokens] == [
        '(SCHEMES,"Schemes",1)',
        '(COLON,":",1)',
        '(ID,"snap",2)',
        '(LEFT_PAREN,"(",2)',
        '(ID,"S",2)',
        '(COMMA,",",2)',
        '(ID,"N",2)',
        '(RIGHT_PAREN,")",2)',
        '(EOF,"",3)',
    ]