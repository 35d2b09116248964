from simcg.token_kind import TokenKind
from simcg.tokens import TOKEN_EOF, Token, TokenSet


def _tok(kind, start, stop, source=b"foo bar"):
    return Token(kind=kind, pos_start=start, pos_stop=stop, source=source)


def test_token_value_slices_source():
    tk = _tok(TokenKind.ID, 4, 7)
    assert tk.value() == b"bar"
    assert tk.text() == "bar"


def test_token_without_source_is_empty():
    tk = Token(kind=TokenKind.ID, pos_start=0, pos_stop=3)
    assert tk.value() == b""
    assert tk.text() == ""


def test_eof_token_kind():
    eof = TokenSet().peek(1)
    assert eof.kind is TokenKind.INVALID
    assert eof.value() == b""


def test_peek_on_empty_set_returns_eof():
    ts = TokenSet()
    assert ts.peek(1) == TOKEN_EOF
    assert ts.peek(0) == TOKEN_EOF
    assert ts.peek(-5) == TOKEN_EOF


def test_push_then_peek():
    ts = TokenSet()
    a = _tok(TokenKind.ID, 0, 3)
    b = _tok(TokenKind.ID, 4, 7)
    ts.push(a)
    ts.push(b)
    assert len(ts) == 2
    assert ts.peek(1) == a
    assert ts.peek(2) == b
    assert ts.peek(3) == TOKEN_EOF
    assert list(ts) == [a, b]


def test_adv_moves_cursor_and_stops_at_end():
    a = _tok(TokenKind.ID, 0, 3)
    b = _tok(TokenKind.ID, 4, 7)
    ts = TokenSet([a, b])
    ts.adv()
    assert ts.peek(0) == a
    assert ts.peek(1) == b
    ts.adv()
    before = ts.snap()
    ts.adv()
    assert ts.snap() == before
    assert ts.peek(0) == b


def test_snap_and_revert():
    tokens = [_tok(TokenKind.ID, 0, 3), _tok(TokenKind.NUM, 4, 7)]
    ts = TokenSet(tokens)
    snap = ts.snap()
    ts.adv()
    ts.adv()
    assert ts.peek(1) == TOKEN_EOF
    ts.revert(snap)
    assert ts.peek(1) == tokens[0]