"""Grammar for action priority lists, built from parser combinators."""

from __future__ import annotations

from simcg.combinators import (
    NodeProducer,
    NoMatch,
    discard,
    eager,
    lazy,
    maybe,
    one_of,
    seq,
    terminal,
)
from simcg.lexer import tokenize
from simcg.node import Node, NodeKind
from simcg.token_kind import TokenKind as T
from simcg.tokens import TokenSet

K = NodeKind


class ParseError(ValueError):
    """Raised when an instruction cannot be parsed."""

    def __init__(self, message: str, line: int, col: int) -> None:
        super().__init__(f"{message} at line {line}, column {col}")
        self.line = line
        self.col = col


# Terminals ------------------------------------------------------------------

_ACTIONS = discard(T.ACTIONS)

_RUN_ACTION_LIST = discard(T.RUN_ACTION_LIST)
_CALL_ACTION_LIST = discard(T.CALL_ACTION_LIST)
_INVOKE_EXTERNAL_BUFF = discard(T.INVOKE_EXTERNAL_BUFF)

_ACTIVE_ENEMIES = terminal(K.ACTIVE_ENEMIES, T.ACTIVE_ENEMIES)
_TIME = terminal(K.TIME, T.TIME)
_FIGHT_REMAINS = terminal(K.FIGHT_REMAINS, T.FIGHT_REMAINS)
_TOGGLE = discard(T.TOGGLE)
_SNAPSHOT_STATS = terminal(K.SNAPSHOT_STATS, T.SNAPSHOT_STATS)
_RAGE = terminal(K.RAGE, T.RAGE)

_BUFF = discard(T.BUFF)
_DEBUFF = discard(T.DEBUFF)
_COOLDOWN = discard(T.COOLDOWN)
_TALENT = discard(T.TALENT)
_TARGET = discard(T.TARGET)
_DOT = discard(T.DOT)
_RAID_EVENT = discard(T.RAID_EVENT)
_MOVEMENT = discard(T.MOVEMENT)
_EQUIPPED = discard(T.EQUIPPED)
_GCD = discard(T.GCD)
_TRINKET = discard(T.TRINKET)

_IF = discard(T.IF)
_TARGET_IF = discard(T.TARGET_IF)
_NAME = discard(T.NAME)
_VALUE = discard(T.VALUE)
_CONDITION = discard(T.CONDITION)
_VALUE_ELSE = discard(T.VALUE_ELSE)
_SLOT = discard(T.SLOT)
_OP = discard(T.OP)

_USE_ITEM = discard(T.USE_ITEM)
_VARIABLE = discard(T.VARIABLE)

_HEALTH = terminal(K.HEALTH, T.HEALTH)
_CASTING = terminal(K.CASTING, T.CASTING)
_PROC = terminal(K.PROC, T.PROC)
_ADDS = terminal(K.ADDS, T.ADDS)
_HAS_BUFF = terminal(K.HAS_BUFF, T.HAS_BUFF)
_HAS_STAT = terminal(K.HAS_STAT, T.HAS_STAT)

_DISTANCE = terminal(K.DISTANCE, T.DISTANCE)
_REACT = terminal(K.REACT, T.REACT)
_IS = terminal(K.IS, T.IS)
_MIN = terminal(K.MIN, T.MIN)
_AUTO_ATTACK = terminal(K.AUTO_ATTACK, T.AUTO_ATTACK)
_REMAINS = terminal(K.REMAINS, T.REMAINS)
_REMAINS_EXPECTED = terminal(K.REMAINS_EXPECTED, T.REMAINS_EXPECTED)
_DURATION = terminal(K.DURATION, T.DURATION)
_STACK = terminal(K.STACK, T.STACK)
_ENABLED = terminal(K.ENABLED, T.ENABLED)
_RANK = terminal(K.RANK, T.RANK)
_READY = terminal(K.READY, T.READY)
_UP = terminal(K.UP, T.UP)
_DOWN = terminal(K.DOWN, T.DOWN)
_PCT = terminal(K.PCT, T.PCT)
_IN = terminal(K.IN, T.IN)
_EXISTS = terminal(K.EXISTS, T.EXISTS)
_TTD = terminal(K.TTD, T.TTD)
_CAST_TIME = terminal(K.CAST_TIME, T.CAST_TIME)
_HAS_USE_BUFF = terminal(K.HAS_USE_BUFF, T.HAS_USE_BUFF)
_HAS_COOLDOWN = terminal(K.HAS_COOLDOWN, T.HAS_COOLDOWN)

_ANY_DPS = terminal(K.ANY_DPS, T.ANY_DPS)
_STRENGTH = terminal(K.STRENGTH, T.STRENGTH)

_TRINKET_1 = discard(T.TRINKET1)
_TRINKET_2 = discard(T.TRINKET2)
_MAIN_HAND = discard(T.MAIN_HAND)

_ON = terminal(K.ON, T.ON)
_OFF = terminal(K.OFF, T.OFF)
_SET_IF = discard(T.SET_IF)

_NEGATE = terminal(K.NEGATE, T.NOT)
_OR = terminal(K.OR, T.LOGICAL_OR)
_AND = terminal(K.AND, T.LOGICAL_AND)

_GE = terminal(K.GE, T.GE)
_GT = terminal(K.GT, T.GT)
_LE = terminal(K.LE, T.LE)
_LT = terminal(K.LT, T.LT)

_MOD = terminal(K.MOD, T.MOD)
_MULT = terminal(K.MULT, T.MULT)
_DIV = terminal(K.DIV, T.DIV)
_ADD = terminal(K.ADD, T.ADD)
_SUB = terminal(K.SUB, T.SUB)

_ASSIGN = discard(T.ASSIGN)
_ADD_ASSIGN = discard(T.ADD_ASSIGN)

_PAREN_L = discard(T.PAREN_L)
_PAREN_R = discard(T.PAREN_R)
_COLON = terminal(K.COLON, T.COLON)

_NUM = terminal(K.NUM, T.NUM)
_ID = terminal(K.ID, T.ID)


# Entry points ---------------------------------------------------------------


def parse(tokens: TokenSet) -> Node:
    """Parse every instruction in ``tokens`` into an APL tree."""
    apl = Node(kind=K.APL)
    while tokens.peek(1).kind != T.INVALID:
        try:
            for node in instruction(tokens):
                apl.push(node)
        except NoMatch as exc:
            token = tokens.peek(1)
            raise ParseError(f"failed parse: {exc}", token.sy, token.sx) from exc
    return apl


def parse_text(data: bytes | str) -> Node:
    """Tokenize and parse action priority list text."""
    return parse(tokenize(data))


# Non-terminals --------------------------------------------------------------


def instruction(tokens: TokenSet) -> NodeProducer:
    """``actions[.list]=`` or ``+=/`` followed by a statement."""
    return one_of(
        seq(K.INSTRUCTION, _ACTIONS, one_of(_ASSIGN, _ADD_ASSIGN), statement),
        seq(K.INSTRUCTION, _ACTIONS, _ID, one_of(_ASSIGN, _ADD_ASSIGN), statement),
    )(tokens)


def statement(tokens: TokenSet) -> NodeProducer:
    """The body of an instruction."""
    return one_of(
        run_action_list,
        call_action_list,
        invoke_external_buff,
        use_item,
        var,
        executor,
        toggle,
        _ID,
        _SNAPSHOT_STATS,
        _AUTO_ATTACK,
    )(tokens)


def run_action_list(tokens: TokenSet) -> NodeProducer:
    """``run_action_list,name=ID`` with optional target_if and conditions."""
    return seq(
        K.RUN_ACTION_LIST,
        _RUN_ACTION_LIST,
        _NAME,
        _ASSIGN,
        _ID,
        maybe(target_if),
        maybe(conditional),
    )(tokens)


def call_action_list(tokens: TokenSet) -> NodeProducer:
    """``call_action_list,name=ID`` with optional conditions."""
    return seq(
        K.CALL_ACTION_LIST,
        _CALL_ACTION_LIST, _NAME, _ASSIGN, _ID, maybe(conditional),
    )(tokens)


def invoke_external_buff(tokens: TokenSet) -> NodeProducer:
    """``invoke_external_buff,name=ID`` with optional conditions."""
    return seq(
        K.INVOKE_EXTERNAL_BUFF,
        _INVOKE_EXTERNAL_BUFF, _NAME, _ASSIGN, _ID, maybe(conditional),
    )(tokens)


def use_item(tokens: TokenSet) -> NodeProducer:
    """``use_item`` by slot or by name, with a condition."""
    return one_of(
        seq(K.USE_ITEM, _USE_ITEM, _SLOT, _ASSIGN, item, _IF, _ASSIGN, expr),
        seq(K.USE_ITEM, _USE_ITEM, _NAME, _ASSIGN, _ID, _IF, _ASSIGN, expr),
    )(tokens)


def item(tokens: TokenSet) -> NodeProducer:
    """An equipment slot."""
    return one_of(_MAIN_HAND, _TRINKET_1, _TRINKET_2)(tokens)


def var(tokens: TokenSet) -> NodeProducer:
    """A ``variable`` assignment statement."""
    return seq(
        K.VAR,
        _VARIABLE,
        _var_name,
        maybe(_var_set_if),
        _var_value,
        maybe(_var_value_else),
        maybe(_var_cond),
    )(tokens)


def _var_name(tokens: TokenSet) -> NodeProducer:
    return seq(K.VAR_NAME, _NAME, _ASSIGN, _ID)(tokens)


def _var_set_if(tokens: TokenSet) -> NodeProducer:
    return seq(K.VAR_SET_IF, _OP, _ASSIGN, _SET_IF)(tokens)


def _var_value(tokens: TokenSet) -> NodeProducer:
    return seq(K.VAR_VALUE, _VALUE, _ASSIGN, expr)(tokens)


def _var_value_else(tokens: TokenSet) -> NodeProducer:
    return seq(K.VAR_VALUE_ELSE, _VALUE_ELSE, _ASSIGN, expr)(tokens)


def _var_cond(tokens: TokenSet) -> NodeProducer:
    return seq(K.VAR_COND, _CONDITION, _ASSIGN, expr)(tokens)


def executor(tokens: TokenSet) -> NodeProducer:
    """An action with an ``if=`` condition."""
    return seq(K.EXECUTOR, _ID, _IF, _ASSIGN, expr)(tokens)


def toggle(tokens: TokenSet) -> NodeProducer:
    """An action with ``toggle=on`` or ``toggle=off``."""
    return seq(K.TOGGLE, _ID, _TOGGLE, _ASSIGN, one_of(_ON, _OFF))(tokens)


def target_if(tokens: TokenSet) -> NodeProducer:
    """A ``target_if=`` expression."""
    return seq(K.TARGET_IF, _TARGET_IF, _ASSIGN, expr)(tokens)


def conditional(tokens: TokenSet) -> NodeProducer:
    """One or more ``if=`` expressions."""
    return eager(K.CONDITIONALS, _IF, _ASSIGN, expr)(tokens)


def expr(tokens: TokenSet) -> NodeProducer:
    """One or more consecutive expressions."""
    return eager(K.EXPR, _expr_or)(tokens)


def _expr_or(tokens: TokenSet) -> NodeProducer:
    return seq(K.LOGICAL, _expr_and, lazy(K.LOGICAL, _OR, _expr_and))(tokens)


def _expr_and(tokens: TokenSet) -> NodeProducer:
    return seq(K.LOGICAL, _expr_compare, lazy(K.LOGICAL, _AND, _expr_compare))(tokens)


def _expr_compare(tokens: TokenSet) -> NodeProducer:
    return seq(
        K.COMPARE,
        _expr_mult,
        lazy(K.COMPARE, one_of(_ASSIGN, _GE, _LE, _GT, _LT), _expr_mult),
    )(tokens)


def _expr_mult(tokens: TokenSet) -> NodeProducer:
    return seq(
        K.ARITHMETIC1,
        _expr_add,
        lazy(K.ARITHMETIC1, one_of(_MOD, _MULT, _DIV), _expr_add),
    )(tokens)


def _expr_add(tokens: TokenSet) -> NodeProducer:
    return seq(
        K.ARITHMETIC2,
        _expr_prefix,
        lazy(K.ARITHMETIC2, one_of(_ADD, _SUB), _expr_prefix),
    )(tokens)


def _expr_prefix(tokens: TokenSet) -> NodeProducer:
    return seq(K.EXPR_PREFIX, maybe(_NEGATE), prime_expr)(tokens)


def prime_expr(tokens: TokenSet) -> NodeProducer:
    """A grouped expression, builtin, command or plain value."""
    return one_of(grouped_expr, builtin, command, primary_value)(tokens)


def grouped_expr(tokens: TokenSet) -> NodeProducer:
    """A parenthesised expression."""
    return seq(K.GROUPED_EXPR, _PAREN_L, expr, _PAREN_R)(tokens)


def builtin(tokens: TokenSet) -> NodeProducer:
    """A built-in value or the ``min:`` builtin."""
    return one_of(
        seq(K.BUILTIN, _MIN, _COLON, prime_expr),
        seq(K.BUILTIN, _TIME),
        seq(K.BUILTIN, _FIGHT_REMAINS),
        seq(K.BUILTIN, _RAGE),
        seq(K.BUILTIN, _TOGGLE),
        seq(K.BUILTIN, _SNAPSHOT_STATS),
        seq(K.BUILTIN, _ACTIVE_ENEMIES),
    )(tokens)


def command(tokens: TokenSet) -> NodeProducer:
    """A data-table lookup such as ``buff.NAME.up``."""
    return one_of(
        _trinket_cmd,
        _cooldown_cmd,
        _variable_cmd,
        _dot_cmd,
        _buff_cmd,
        _debuff_cmd,
        _talent_cmd,
        _movement_cmd,
        _raid_event_cmd,
        _equipped_cmd,
        _target_cmd,
        _gcd_cmd,
    )(tokens)


def _trinket_cmd(tokens: TokenSet) -> NodeProducer:
    kind = K.TRINKET_CMD
    return one_of(
        seq(kind, _TRINKET, _NUM, _IS, _ID),
        seq(kind, _TRINKET, _NUM, _CAST_TIME),
        seq(kind, _TRINKET, _NUM, _HAS_USE_BUFF),
        seq(kind, _TRINKET, _NUM, _HAS_COOLDOWN),
        seq(kind, _TRINKET, _NUM, _HAS_BUFF, stats),
        seq(kind, _TRINKET, _NUM, _COOLDOWN, leaf_cmd),
        seq(kind, _TRINKET, _NUM, _HAS_STAT, stats),
        seq(kind, _TRINKET, _NUM, _PROC, stats, leaf_cmd),
    )(tokens)


def _cooldown_cmd(tokens: TokenSet) -> NodeProducer:
    return seq(K.CMD_COOLDOWN, _COOLDOWN, _ID, leaf_cmd)(tokens)


def _variable_cmd(tokens: TokenSet) -> NodeProducer:
    return seq(K.CMD_VARIABLE, _VARIABLE, _ID)(tokens)


def _dot_cmd(tokens: TokenSet) -> NodeProducer:
    return seq(K.CMD_DOT, _DOT, _ID, leaf_cmd)(tokens)


def _buff_cmd(tokens: TokenSet) -> NodeProducer:
    return seq(K.CMD_BUFF, _BUFF, _ID, leaf_cmd)(tokens)


def _debuff_cmd(tokens: TokenSet) -> NodeProducer:
    return one_of(
        seq(K.CMD_DEBUFF, _DEBUFF, _ID, leaf_cmd),
        seq(K.CMD_DEBUFF, _DEBUFF, _CASTING, leaf_cmd),
    )(tokens)


def _talent_cmd(tokens: TokenSet) -> NodeProducer:
    return one_of(
        seq(K.CMD_TALENT, _TALENT, _ID, leaf_cmd),
        seq(K.CMD_TALENT, _TALENT, _ID),
    )(tokens)


def _movement_cmd(tokens: TokenSet) -> NodeProducer:
    return seq(K.CMD_MOVEMENT, _MOVEMENT, _DISTANCE)(tokens)


def _raid_event_cmd(tokens: TokenSet) -> NodeProducer:
    return seq(K.CMD_RAID_EVENT, _RAID_EVENT, _ADDS, leaf_cmd)(tokens)


def _equipped_cmd(tokens: TokenSet) -> NodeProducer:
    return seq(K.CMD_EQUIPPED, _EQUIPPED, _ID)(tokens)


def _target_cmd(tokens: TokenSet) -> NodeProducer:
    return one_of(
        seq(K.CMD_TARGET, _TARGET, leaf_cmd),
        seq(K.CMD_TARGET, _TARGET, _debuff_cmd),
        seq(K.CMD_TARGET, _TARGET, _HEALTH, leaf_cmd),
    )(tokens)


def _gcd_cmd(tokens: TokenSet) -> NodeProducer:
    return one_of(
        seq(K.CMD_GCD, _GCD, leaf_cmd),
        seq(K.CMD_GCD, _GCD),
    )(tokens)


def leaf_cmd(tokens: TokenSet) -> NodeProducer:
    """The property read at the end of a command."""
    return one_of(
        _DURATION,
        _REMAINS,
        _REMAINS_EXPECTED,
        _UP,
        _DOWN,
        _STACK,
        _READY,
        _ENABLED,
        _REACT,
        _IN,
        _EXISTS,
        _TTD,
        _PCT,
    )(tokens)


def primary_value(tokens: TokenSet) -> NodeProducer:
    """A number or identifier."""
    return seq(K.BASE, one_of(_NUM, _ID))(tokens)


def stats(tokens: TokenSet) -> NodeProducer:
    """A stat name."""
    return one_of(_ANY_DPS, _STRENGTH)(tokens)