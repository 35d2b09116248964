"""Tokens and the cursor-based token sequence consumed by the parser."""

from __future__ import annotations

from dataclasses import dataclass, field

from simcg.token_kind import TokenKind


@dataclass(frozen=True)
class Token:
    """A lexical token referring to a span of its source bytes."""

    kind: TokenKind = TokenKind.INVALID
    sy: int = 0
    sx: int = 0
    ey: int = 0
    ex: int = 0
    pos_start: int = 0
    pos_stop: int = 0
    source: bytes = field(default=b"", repr=False)

    def value(self) -> bytes:
        """The bytes of source this token covers."""
        if not self.source:
            return b""
        return self.source[self.pos_start:self.pos_stop]

    def text(self) -> str:
        """The token's source text."""
        return self.value().decode("utf-8", errors="replace")


TOKEN_EOF = Token()


class TokenSet:
    """An ordered list of tokens with a read cursor."""

    def __init__(self, tokens: list[Token] | None = None) -> None:
        self.pos = -1
        self.tokens: list[Token] = list(tokens) if tokens else []

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self):
        return iter(self.tokens)

    def adv(self) -> None:
        """Move the cursor forward one token, unless at the end."""
        if self.peek(1).kind == TokenKind.INVALID:
            return
        self.pos += 1

    def peek(self, i: int) -> Token:
        """Return the token ``i`` places after the cursor, or the EOF token."""
        index = self.pos + i
        if index < 0 or index >= len(self.tokens):
            return TOKEN_EOF
        return self.tokens[index]

    def push(self, token: Token) -> None:
        """Append a token."""
        self.tokens.append(token)

    def snap(self) -> int:
        """Capture the cursor position."""
        return self.pos

    def revert(self, snap: int) -> None:
        """Restore a cursor position captured by :meth:`snap`."""
        self.pos = snap