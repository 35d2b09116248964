"""Backtracking parser combinators over a token set."""

from __future__ import annotations

from typing import Callable, Iterator

from simcg.node import Node, NodeKind
from simcg.token_kind import TokenKind
from simcg.tokens import TokenSet

NodeProducer = Iterator[Node]
Combinator = Callable[[TokenSet], NodeProducer]


class NoMatch(Exception):
    """Raised when a parser cannot match at the current token."""

    def __init__(self, message: str = "no match") -> None:
        super().__init__(message)


def join(tokens: TokenSet, *args: Combinator) -> NodeProducer:
    """Run each parser in turn, yielding every node they produce."""
    for parser in args:
        yield from parser(tokens)


def seq(kind: NodeKind, *args: Combinator) -> Combinator:
    """Match all parsers in order, collecting their nodes under one branch."""

    def parser(tokens: TokenSet) -> NodeProducer:
        snap = tokens.snap()
        branch = Node(kind=kind)
        try:
            for leaf in join(tokens, *args):
                branch.push(leaf)
        except NoMatch:
            tokens.revert(snap)
            raise
        yield branch

    return parser


def one_of(*args: Combinator) -> Combinator:
    """Yield the first node produced by the first parser that matches."""

    def parser(tokens: TokenSet) -> NodeProducer:
        snap = tokens.snap()
        for candidate in args:
            produced = candidate(tokens)
            try:
                node = next(produced, None)
            except NoMatch:
                tokens.revert(snap)
                continue
            finally:
                produced.close()
            if node is not None:
                yield node
                return
        raise NoMatch()

    return parser


def lazy(kind: NodeKind, *args: Combinator) -> Combinator:
    """Match the sequence zero or more times, yielding a branch per match."""

    def parser(tokens: TokenSet) -> NodeProducer:
        while True:
            snap = tokens.snap()
            branch = Node(kind=kind)
            try:
                for leaf in join(tokens, *args):
                    branch.push(leaf)
            except NoMatch:
                tokens.revert(snap)
                return
            yield branch

    return parser


def eager(kind: NodeKind, *args: Combinator) -> Combinator:
    """Match the sequence one or more times, yielding a branch per match."""

    def parser(tokens: TokenSet) -> NodeProducer:
        count = 0
        while True:
            snap = tokens.snap()
            branch = Node(kind=kind)
            try:
                for leaf in join(tokens, *args):
                    branch.push(leaf)
            except NoMatch:
                tokens.revert(snap)
                if count:
                    return
                raise
            yield branch
            count += 1

    return parser


def maybe(*args: Combinator) -> Combinator:
    """Match the sequence once if possible; otherwise yield nothing."""

    def parser(tokens: TokenSet) -> NodeProducer:
        snap = tokens.snap()
        branch = Node()
        try:
            for leaf in join(tokens, *args):
                branch.push(leaf)
        except NoMatch:
            tokens.revert(snap)
            return
        yield branch

    return parser


def terminal(kind: NodeKind, *args: TokenKind) -> Combinator:
    """Consume one token of the given kinds as a leaf node of ``kind``."""
    accepted = frozenset(args)

    def parser(tokens: TokenSet) -> NodeProducer:
        nxt = tokens.peek(1)
        if nxt.kind not in accepted:
            raise NoMatch()
        tokens.adv()
        yield Node(
            kind=kind,
            sy=nxt.sy,
            sx=nxt.sx,
            ey=nxt.ey,
            ex=nxt.ex,
            pos_start=nxt.pos_start,
            pos_stop=nxt.pos_stop,
            source=nxt.source,
        )

    return parser


def discard(*args: TokenKind) -> Combinator:
    """Consume one token of the given kinds, producing a node that is not kept."""
    accepted = frozenset(args)

    def parser(tokens: TokenSet) -> NodeProducer:
        if tokens.peek(1).kind not in accepted:
            raise NoMatch()
        tokens.adv()
        yield Node(kind=NodeKind.NONE)

    return parser