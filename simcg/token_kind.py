"""Token kinds and keyword/symbol resolution."""

from __future__ import annotations

from enum import IntEnum, auto


class TokenKind(IntEnum):
    """Kinds of lexical tokens in an action priority list."""

    INVALID = 0

    ACTIONS = 2

    # Composite actions
    RUN_ACTION_LIST = auto()
    CALL_ACTION_LIST = auto()
    INVOKE_EXTERNAL_BUFF = auto()

    # Globals
    ACTIVE_ENEMIES = auto()
    TIME = auto()
    FIGHT_REMAINS = auto()
    TOGGLE = auto()
    SNAPSHOT_STATS = auto()

    RAGE = auto()

    # Data tables
    BUFF = auto()
    DEBUFF = auto()
    COOLDOWN = auto()
    TALENT = auto()
    TARGET = auto()
    DOT = auto()
    RAID_EVENT = auto()
    MOVEMENT = auto()
    EQUIPPED = auto()
    GCD = auto()
    TRINKET = auto()

    IF = auto()
    TARGET_IF = auto()
    NAME = auto()
    VALUE = auto()
    CONDITION = auto()
    VALUE_ELSE = auto()
    SLOT = auto()
    OP = auto()

    USE_ITEM = auto()
    VARIABLE = auto()

    HEALTH = auto()
    CASTING = auto()
    PROC = auto()
    ADDS = auto()
    HAS_BUFF = auto()
    HAS_STAT = auto()

    DISTANCE = auto()
    REACT = auto()
    IS = auto()
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

    ON = auto()
    OFF = auto()
    SET_IF = auto()

    ANY_DPS = auto()
    STRENGTH = auto()

    # Equipment
    TRINKET1 = auto()
    TRINKET2 = auto()
    MAIN_HAND = auto()
    OFF_HAND = auto()

    # Builtins
    MIN = auto()
    FLOOR = auto()
    CEIL = auto()

    # Logic operators
    NOT = auto()
    LOGICAL_OR = auto()
    LOGICAL_AND = auto()

    # Comparison operators
    GE = auto()
    GT = auto()
    LE = auto()
    LT = auto()
    NE = auto()

    # Arithmetic operators
    MOD = auto()
    MULT = auto()
    DIV = auto()
    ADD = auto()
    SUB = auto()
    ABS = auto()
    MATH_MAX = auto()
    MATH_MIN = auto()

    # Bitwise operators
    XOR = auto()

    # Assignment operators
    ASSIGN = auto()
    ADD_ASSIGN = auto()

    # Misc symbols
    PAREN_L = auto()
    PAREN_R = auto()
    OCTOTHORPE = auto()
    COLON = auto()
    COMMA = auto()
    ACCESSOR = auto()

    # Base values
    NUM = auto()
    ID = auto()


WORDS: dict[str, TokenKind] = {
    "actions": TokenKind.ACTIONS,
    "run_action_list": TokenKind.RUN_ACTION_LIST,
    "call_action_list": TokenKind.CALL_ACTION_LIST,
    "invoke_external_buff": TokenKind.INVOKE_EXTERNAL_BUFF,
    "active_enemies": TokenKind.ACTIVE_ENEMIES,
    "time": TokenKind.TIME,
    "fight_remains": TokenKind.FIGHT_REMAINS,
    "rage": TokenKind.RAGE,
    "toggle": TokenKind.TOGGLE,
    "snapshot_stats": TokenKind.SNAPSHOT_STATS,
    "buff": TokenKind.BUFF,
    "debuff": TokenKind.DEBUFF,
    "cooldown": TokenKind.COOLDOWN,
    "talent": TokenKind.TALENT,
    "target": TokenKind.TARGET,
    "dot": TokenKind.DOT,
    "raid_event": TokenKind.RAID_EVENT,
    "movement": TokenKind.MOVEMENT,
    "equipped": TokenKind.EQUIPPED,
    "gcd": TokenKind.GCD,
    "trinket": TokenKind.TRINKET,
    "if": TokenKind.IF,
    "target_if": TokenKind.TARGET_IF,
    "name": TokenKind.NAME,
    "value": TokenKind.VALUE,
    "condition": TokenKind.CONDITION,
    "value_else": TokenKind.VALUE_ELSE,
    "slot": TokenKind.SLOT,
    "op": TokenKind.OP,
    "use_item": TokenKind.USE_ITEM,
    "variable": TokenKind.VARIABLE,
    "health": TokenKind.HEALTH,
    "casting": TokenKind.CASTING,
    "proc": TokenKind.PROC,
    "adds": TokenKind.ADDS,
    "has_buff": TokenKind.HAS_BUFF,
    "has_stat": TokenKind.HAS_STAT,
    "distance": TokenKind.DISTANCE,
    "react": TokenKind.REACT,
    "is": TokenKind.IS,
    "min": TokenKind.MIN,
    "auto_attack": TokenKind.AUTO_ATTACK,
    "remains": TokenKind.REMAINS,
    "remains_expected": TokenKind.REMAINS_EXPECTED,
    "duration": TokenKind.DURATION,
    "stack": TokenKind.STACK,
    "enabled": TokenKind.ENABLED,
    "ready": TokenKind.READY,
    "up": TokenKind.UP,
    "down": TokenKind.DOWN,
    "pct": TokenKind.PCT,
    "in": TokenKind.IN,
    "exists": TokenKind.EXISTS,
    "time_to_die": TokenKind.TTD,
    "cast_time": TokenKind.CAST_TIME,
    "has_use_buff": TokenKind.HAS_USE_BUFF,
    "has_cooldown": TokenKind.HAS_COOLDOWN,
    "any_dps": TokenKind.ANY_DPS,
    "strength": TokenKind.STRENGTH,
    "trinket1": TokenKind.TRINKET1,
    "trinket2": TokenKind.TRINKET2,
    "main_hand": TokenKind.MAIN_HAND,
    "on": TokenKind.ON,
    "off": TokenKind.OFF,
    "setif": TokenKind.SET_IF,
    "rank": TokenKind.RANK,
    "floor": TokenKind.FLOOR,
    "ceil": TokenKind.CEIL,
}

SYMBOLS: dict[str, TokenKind] = {
    "%%": TokenKind.MOD,
    "*": TokenKind.MULT,
    "%": TokenKind.DIV,
    "+": TokenKind.ADD,
    "-": TokenKind.SUB,
    "!": TokenKind.NOT,
    "|": TokenKind.LOGICAL_OR,
    "&": TokenKind.LOGICAL_AND,
    ">=": TokenKind.GE,
    "<=": TokenKind.LE,
    ">": TokenKind.GT,
    "<": TokenKind.LT,
    "?>": TokenKind.MATH_MIN,
    "?<": TokenKind.MATH_MAX,
    "(": TokenKind.PAREN_L,
    ")": TokenKind.PAREN_R,
    "=": TokenKind.ASSIGN,
    "+=/": TokenKind.ADD_ASSIGN,
    ":": TokenKind.COLON,
    ".": TokenKind.ACCESSOR,
    ",": TokenKind.COMMA,
    "@": TokenKind.ABS,
    "^": TokenKind.XOR,
}


def resolve_kind(data: bytes | str) -> TokenKind | None:
    """Return the keyword or symbol kind spelled by ``data``, or None."""
    if not data:
        return None
    text = data if isinstance(data, str) else bytes(data).decode("latin-1")
    return WORDS.get(text, SYMBOLS.get(text))