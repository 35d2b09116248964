# simcg

`simcg` reads SimulationCraft action priority lists (APLs) and turns them into
a syntax tree. It works in two stages:

- a **tokenizer** (`simcg.lexer`) that splits APL text into `Token`s
  (keywords, identifiers, numbers and operators such as `+=/`, `>=` or `%%`).
  It drops whitespace, dots, commas and `#` line comments;
- a **parser** (`simcg.grammar`) built from small combinators
  (`simcg.combinators`: `seq`, `one_of`, `lazy`, `eager`, `maybe`,
  `terminal`, `discard`). It assembles the tokens into a tree of `Node`
  objects that follows the APL grammar.

## Usage

To parse a whole list in one step:

```python
from simcg.grammar import parse_text

apl = parse_text(
    b"actions=auto_attack\n"
    b"actions+=/execute,if=buff.sudden_death.up&rage>=40\n"
)
print(apl.render())
```

`parse_text` accepts `bytes` or `str` and returns the root node. The root's
kind is `NodeKind.APL`, and each child is one instruction. Errors are raised
as follows:

- Text that holds a byte no token can start with raises `simcg.lexer.LexError`.
- An instruction that does not fit the grammar raises `simcg.grammar.ParseError`.

Both carry `line` and `col` attributes.

You can also run the two stages separately:

```python
from simcg.lexer import tokenize
from simcg.grammar import parse

tokens = tokenize(b"actions+=/bloodthirst,if=cooldown.recklessness.remains>5")
for token in tokens:
    print(token.kind.name, token.text())

tree = parse(tokens)
```

`tokenize` returns a `TokenSet`. This is a list of tokens with a read cursor,
which has the methods `peek`, `adv`, `snap` and `revert`.

Each `Node` holds:

- `kind`, a `NodeKind`;
- `children`;
- its position in the source: `sx`, `sy`, `ex`, `ey`, `pos_start` and `pos_stop`.

A `Node` also provides these methods:

- `Node.text()` returns the token text a leaf was made from.
- `Node.source_line()` returns the whole line the leaf came from.
- `Node.render()` returns a table of the node and all its descendants.

The grammar rules in `simcg.grammar` are public, so you can apply any one of
them to a `TokenSet`. They include `instruction`, `statement`, `expr`,
`command`, `builtin` and `leaf_cmd`.

## Building your own grammar rules

The combinators work on a `TokenSet` and yield nodes, so you can compose new
rules from existing ones:

```python
from simcg.combinators import discard, one_of, seq, terminal
from simcg.node import NodeKind
from simcg.token_kind import TokenKind

on_off = one_of(
    terminal(NodeKind.ON, TokenKind.ON),
    terminal(NodeKind.OFF, TokenKind.OFF),
)
switch = seq(NodeKind.TOGGLE, discard(TokenKind.ASSIGN), on_off)
```

A parser that cannot match raises `NoMatch`. When a rule fails, the token set
is left where it was before the attempt, so you can try alternatives one
after another.

## What it does not do

`simcg` only tokenizes and parses. It does not:

- evaluate expressions;
- turn the tree into executable actions;
- simulate anything;
- provide a command-line tool.