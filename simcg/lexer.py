"""Byte-level tokenizer for action priority list text."""

from __future__ import annotations

from simcg.token_kind import TokenKind, resolve_kind
from simcg.tokens import Token, TokenSet

BYTE_EOF = 0
_NEWLINE = ord("\n")
_DOT = ord(".")
_HASH = ord("#")
_UNDERSCORE = ord("_")
_SPACES = frozenset(b"\t \n\r\f")
_DISCARDS = frozenset(b"., \t\r\n\f")


class LexError(ValueError):
    """Raised when the input holds a byte no token can start with."""

    def __init__(self, message: str, line: int, col: int) -> None:
        super().__init__(f"{message} at line {line}, column {col}")
        self.line = line
        self.col = col


class Tokenizer:
    """A cursor over raw bytes that tracks line and column."""

    def __init__(self, data: bytes | str) -> None:
        self.data = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        self.pos = -1
        self.line = 1
        self.col = 1

    def adv(self) -> None:
        """Consume one byte, unless at the end."""
        nxt = self.peek(1)
        if nxt == BYTE_EOF:
            return
        self.pos += 1
        if nxt == _NEWLINE:
            self.line += 1
            self.col = 1
        else:
            self.col += 1

    def peek(self, i: int) -> int:
        """Return the byte ``i`` places after the cursor, or 0 past either end."""
        index = self.pos + i
        if index < 0 or index >= len(self.data):
            return BYTE_EOF
        return self.data[index]

    def snapshot(self) -> tuple[int, int, int]:
        """Capture the cursor state."""
        return (self.pos, self.line, self.col)

    def revert(self, snap: tuple[int, int, int]) -> None:
        """Restore a state captured by :meth:`snapshot`."""
        self.pos, self.line, self.col = snap


def _is_alpha(b: int) -> bool:
    return 0x41 <= b <= 0x5A or 0x61 <= b <= 0x7A


def _is_num(b: int) -> bool:
    return 0x30 <= b <= 0x39


def _is_alnum(b: int) -> bool:
    return _is_alpha(b) or _is_num(b) or b == _UNDERSCORE


def _is_space(b: int) -> bool:
    return b in _SPACES


def _is_symbol(b: int) -> bool:
    return not (_is_alnum(b) or _is_space(b))


def _make_token(t: Tokenizer, kind: TokenKind, sy: int, sx: int, start: int) -> Token:
    return Token(
        kind=kind,
        sy=sy,
        sx=sx,
        ey=t.line,
        ex=t.col,
        pos_start=start,
        pos_stop=t.pos + 1,
        source=t.data,
    )


def tokenize(data: bytes | str) -> TokenSet:
    """Split ``data`` into a token set; raises LexError on unknown input."""
    t = Tokenizer(data)
    tokens = TokenSet()
    while t.peek(1) != BYTE_EOF:
        if try_discard(t):
            continue
        token = try_word(t) or try_num(t) or try_symbol(t)
        if token is not None:
            tokens.push(token)
        elif not try_line_comment(t):
            raise LexError(f"unexpected byte {chr(t.peek(1))!r}", t.line, t.col)
    return tokens


def try_word(t: Tokenizer) -> Token | None:
    """Consume an identifier or keyword."""
    if not _is_alpha(t.peek(1)):
        return None
    sy, sx, start = t.line, t.col, t.pos + 1
    while _is_alnum(t.peek(1)):
        t.adv()
    kind = resolve_kind(t.data[start:t.pos + 1]) or TokenKind.ID
    return _make_token(t, kind, sy, sx, start)


def try_num(t: Tokenizer) -> Token | None:
    """Consume an integer or a decimal number with a single fractional part."""
    if not _is_num(t.peek(1)):
        return None
    sy, sx, start = t.line, t.col, t.pos + 1
    found_dot = False
    while True:
        nxt = t.peek(1)
        if not (_is_num(nxt) or nxt == _DOT):
            break
        if nxt == _DOT:
            if found_dot or not _is_num(t.peek(2)):
                break
            found_dot = True
        t.adv()
    return _make_token(t, TokenKind.NUM, sy, sx, start)


def try_symbol(t: Tokenizer) -> Token | None:
    """Consume the longest known symbol of up to three bytes."""
    if not _is_symbol(t.peek(1)):
        return None
    sy, sx, start = t.line, t.col, t.pos + 1
    candidate = bytes(t.peek(k) for k in (1, 2, 3))
    for length in (3, 2, 1):
        kind = resolve_kind(candidate[:length])
        if kind is not None:
            for _ in range(length):
                t.adv()
            return _make_token(t, kind, sy, sx, start)
    return None


def try_line_comment(t: Tokenizer) -> bool:
    """Skip a ``#`` comment up to the end of the line or input."""
    if t.peek(1) != _HASH:
        return False
    while t.peek(1) not in (_NEWLINE, BYTE_EOF):
        t.adv()
    return True


def try_discard(t: Tokenizer) -> bool:
    """Skip whitespace, periods and commas."""
    if t.peek(1) not in _DISCARDS:
        return False
    while t.peek(1) in _DISCARDS:
        t.adv()
    return True


def try_space(t: Tokenizer) -> bool:
    """Skip whitespace."""
    if not _is_space(t.peek(1)):
        return False
    while _is_space(t.peek(1)):
        t.adv()
    return True