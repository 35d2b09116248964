"""Parse tree nodes and their kinds."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, auto
from typing import Iterator

_HEADER = "   {:<20}  {:<20}  {:<20}  {:<20}\n"
_ROW = "{:<2d} {:<20}  {:<20}  {:<20d}  {:<20d}\n"


class NodeKind(IntEnum):
    """Kinds of parse tree nodes; NONE marks nodes that are not kept."""

    NONE = 0
    APL = auto()
    INSTRUCTION = auto()
    STATEMENT = auto()

    RUN_ACTION_LIST = auto()
    CALL_ACTION_LIST = auto()
    INVOKE_EXTERNAL_BUFF = auto()

    USE_ITEM = auto()
    ITEM = auto()

    VAR = auto()
    VAR_NAME = auto()
    VAR_SET_IF = auto()
    VAR_VALUE = auto()
    VAR_VALUE_ELSE = auto()
    VAR_COND = auto()

    VAR_REF = auto()

    EXECUTOR = auto()

    TOGGLE = auto()

    TARGET_IF = auto()

    CONDITIONALS = auto()

    EXPR = auto()
    EXPR_GROUP = auto()
    EXPR_PREFIX = auto()
    LOGICAL = auto()
    COMPARE = auto()
    ARITHMETIC1 = auto()
    ARITHMETIC2 = auto()

    GROUPED_EXPR = auto()

    BUILTIN = auto()
    ACTIVE_ENEMIES = auto()
    TIME = auto()
    FIGHT_REMAINS = auto()
    SNAPSHOT_STATS = auto()

    RAGE = auto()

    COMMAND = auto()

    TRINKET_CMD = auto()

    STATS = auto()

    CMD_COOLDOWN = auto()
    CMD_VARIABLE = auto()
    CMD_DOT = auto()
    CMD_BUFF = auto()
    CMD_DEBUFF = auto()
    CMD_TALENT = auto()
    CMD_MOVEMENT = auto()
    CMD_RAID_EVENT = auto()
    CMD_EQUIPPED = auto()
    CMD_TARGET = auto()
    CMD_GCD = auto()

    HEALTH = auto()
    TRINKET = auto()
    CASTING = auto()
    PROC = auto()
    DISTANCE = auto()
    ADDS = auto()
    HAS_BUFF = auto()
    HAS_STAT = auto()
    REACT = auto()
    IS = auto()
    MIN = auto()
    AUTO_ATTACK = auto()
    REMAINS = auto()
    REMAINS_EXPECTED = auto()
    DURATION = auto()
    STACK = auto()
    ENABLED = auto()
    RANK = auto()
    READY = auto()
    UP = auto()
    DOWN = auto()
    PCT = auto()
    IN = auto()
    EXISTS = auto()
    TTD = auto()
    CAST_TIME = auto()
    HAS_USE_BUFF = auto()
    HAS_COOLDOWN = auto()
    ANY_DPS = auto()
    STRENGTH = auto()
    TRINKET1 = auto()
    TRINKET2 = auto()
    MAIN_HAND = auto()
    NEGATE = auto()
    OR = auto()
    AND = auto()
    ON = auto()
    OFF = auto()
    GE = auto()
    GT = auto()
    LE = auto()
    LT = auto()
    MOD = auto()
    MULT = auto()
    DIV = auto()
    ADD = auto()
    SUB = auto()
    PAREN_L = auto()
    PAREN_R = auto()
    OCTOTHORPE = auto()
    COLON = auto()
    COMMA = auto()
    ACCESSOR = auto()
    NUM = auto()
    ID = auto()

    BASE = auto()


@dataclass
class Node:
    """A parse tree node, optionally pointing at a span of source bytes."""

    kind: NodeKind = NodeKind.NONE
    sy: int = 0
    sx: int = 0
    ey: int = 0
    ex: int = 0
    pos_start: int = 0
    pos_stop: int = 0
    source: bytes = field(default=b"", repr=False)
    parent: Node | None = field(default=None, repr=False, compare=False)
    children: list[Node] = field(default_factory=list)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.children)

    def __str__(self) -> str:
        return self.render()

    def value(self) -> bytes:
        """The bytes of source this node covers."""
        if not self.source:
            return b""
        return self.source[self.pos_start:self.pos_stop]

    def text(self) -> str:
        """The node's source text."""
        return self.value().decode("utf-8", errors="replace")

    def source_line(self) -> bytes:
        """The whole source line on which this node lies."""
        if not self.source:
            return b""
        newline = self.source.rfind(b"\n", 1, self.pos_start + 1)
        line_start = newline + 1 if newline != -1 else 0
        line_stop = self.source.find(b"\n", self.pos_stop)
        if line_stop == -1:
            line_stop = len(self.source)
        return self.source[line_start:line_stop]

    def push(self, *args: Node) -> None:
        """Append the given nodes as children, skipping those of kind NONE."""
        for leaf in args:
            if leaf.kind > 0:
                leaf.parent = self
                self.children.append(leaf)

    def render(self) -> str:
        """A table of this node and its descendants, one row per node."""
        rows = [_HEADER.format("KIND", "VALUE", "SX", "SY")]
        self._render(rows, 0)
        return "".join(rows)

    def _render(self, rows: list[str], depth: int) -> None:
        rows.append(_ROW.format(depth, self.kind.name, self.text(), self.sx, self.sy))
        for child in self.children:
            child._render(rows, depth + 1)