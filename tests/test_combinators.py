import pytest

from simcg.combinators import (
    NoMatch,
    discard,
    eager,
    join,
    lazy,
    maybe,
    one_of,
    seq,
    terminal,
)
from simcg.lexer import tokenize
from simcg.node import NodeKind
from simcg.token_kind import TokenKind

ID = terminal(NodeKind.ID, TokenKind.ID)
NUM = terminal(NodeKind.NUM, TokenKind.NUM)
OR = terminal(NodeKind.OR, TokenKind.LOGICAL_OR)
NAME = discard(TokenKind.NAME)
ASSIGN = discard(TokenKind.ASSIGN)


def test_no_match_message():
    assert str(NoMatch()) == "no match"


def test_terminal_matches_and_copies_token():
    tokens = tokenize("foo")
    token = tokens.peek(1)
    (node,) = list(ID(tokens))
    assert node.kind is NodeKind.ID
    assert node.text() == "foo"
    assert (node.sy, node.sx, node.pos_start, node.pos_stop) == (
        token.sy,
        token.sx,
        token.pos_start,
        token.pos_stop,
    )
    assert tokens.pos == 0


def test_terminal_mismatch_raises_and_keeps_cursor():
    tokens = tokenize("foo")
    with pytest.raises(NoMatch):
        list(NUM(tokens))
    assert tokens.pos == -1


def test_terminal_at_end_raises():
    tokens = tokenize("")
    with pytest.raises(NoMatch):
        list(ID(tokens))


def test_discard_yields_unkept_node():
    tokens = tokenize("name")
    (node,) = list(NAME(tokens))
    assert node.kind is NodeKind.NONE
    assert tokens.pos == 0


def test_join_chains_parsers():
    tokens = tokenize("a 1")
    assert [n.kind for n in join(tokens, ID, NUM)] == [NodeKind.ID, NodeKind.NUM]


def test_join_propagates_failure():
    tokens = tokenize("a b")
    with pytest.raises(NoMatch):
        list(join(tokens, ID, NUM))


def test_seq_collects_kept_children():
    tokens = tokenize("name=foo")
    (branch,) = list(seq(NodeKind.VAR_NAME, NAME, ASSIGN, ID)(tokens))
    assert branch.kind is NodeKind.VAR_NAME
    assert [c.text() for c in branch.children] == ["foo"]
    assert tokens.pos == len(tokens) - 1


def test_seq_failure_reverts():
    tokens = tokenize("name=5")
    with pytest.raises(NoMatch):
        list(seq(NodeKind.VAR_NAME, NAME, ASSIGN, ID)(tokens))
    assert tokens.pos == -1


def test_one_of_picks_first_match():
    tokens = tokenize("foo")
    (node,) = list(one_of(NUM, ID)(tokens))
    assert node.kind is NodeKind.ID


def test_one_of_skips_empty_alternatives():
    tokens = tokenize("foo")
    (node,) = list(one_of(lazy(NodeKind.LOGICAL, NUM), ID)(tokens))
    assert node.kind is NodeKind.ID


def test_one_of_all_failing_raises_and_reverts():
    tokens = tokenize("foo")
    with pytest.raises(NoMatch):
        list(one_of(NUM, OR)(tokens))
    assert tokens.pos == -1


def test_lazy_repeats_until_failure():
    tokens = tokenize("|a|b|")
    branches = list(lazy(NodeKind.LOGICAL, OR, ID)(tokens))
    assert len(branches) == 2
    assert [[c.kind for c in b] for b in branches] == [[NodeKind.OR, NodeKind.ID]] * 2
    assert tokens.peek(1).kind is TokenKind.LOGICAL_OR
    assert tokens.pos == len(tokens) - 2


def test_lazy_zero_matches_yields_nothing():
    tokens = tokenize("foo")
    assert list(lazy(NodeKind.LOGICAL, OR, ID)(tokens)) == []
    assert tokens.pos == -1


def test_eager_requires_one_match():
    tokens = tokenize("foo")
    with pytest.raises(NoMatch):
        list(eager(NodeKind.EXPR, NUM)(tokens))
    assert tokens.pos == -1


def test_eager_repeats():
    tokens = tokenize("a b 1")
    branches = list(eager(NodeKind.EXPR, ID)(tokens))
    assert [b.children[0].text() for b in branches] == ["a", "b"]
    assert tokens.peek(1).kind is TokenKind.NUM


def test_maybe_success_and_failure():
    tokens = tokenize("foo")
    (branch,) = list(maybe(ID)(tokens))
    assert branch.kind is NodeKind.NONE
    assert [c.text() for c in branch] == ["foo"]

    tokens = tokenize("foo")
    assert list(maybe(NUM)(tokens)) == []
    assert tokens.pos == -1


def test_seq_drops_maybe_branch_but_consumes():
    tokens = tokenize("foo")
    (branch,) = list(seq(NodeKind.VAR, maybe(ID))(tokens))
    assert branch.children == []
    assert tokens.pos == 0