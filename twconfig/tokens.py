from enum import Enum
from typing import NamedTuple, Any

from twconfig.error import LexicalError


INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class LexingError(Enum):
    NUMBER_PARSE_ERROR = 0
    OTHER = 1


# Member values are the terminal names used by the grammars. Terminals with a
# leading underscore are filtered out of the parse tree by lark.
class HeaderTokenKind(Enum):
    MACRO_CONFIG_INT = '_MACRO_CONFIG_INT'
    MACRO_CONFIG_STR = '_MACRO_CONFIG_STR'
    MACRO_CONFIG_COL = '_MACRO_CONFIG_COL'

    FLAG_SAVE = 'CFGFLAG_SAVE'
    FLAG_CLIENT = 'CFGFLAG_CLIENT'
    FLAG_SERVER = 'CFGFLAG_SERVER'
    FLAG_INSENSITIVE = 'CFGFLAG_INSENSITIVE'
    FLAG_NONTEEHISTORIC = 'CFGFLAG_NONTEEHISTORIC'
    FLAG_MASTER = 'CFGFLAG_MASTER'
    FLAG_ECON = 'CFGFLAG_ECON'
    FLAG_GAME = 'CFGFLAG_GAME'
    FLAG_COLALPHA = 'CFGFLAG_COLALPHA'
    FLAG_COLLIGHT = 'CFGFLAG_COLLIGHT'

    LPAREN = '_LPAREN'
    RPAREN = '_RPAREN'
    COMMA = '_COMMA'
    PIPE = '_PIPE'
    SEMICOLON = '_SEMICOLON'

    MAX_CLIENTS = 'MAX_CLIENTS'
    SERVERINFO_LEVEL_MIN = 'SERVERINFO_LEVEL_MIN'
    SERVERINFO_LEVEL_MAX = 'SERVERINFO_LEVEL_MAX'

    IDENTIFIER = 'IDENTIFIER'
    STRING = 'STRING'
    INTEGER = 'INTEGER'

    @property
    def keyword(self):
        return self.value.lstrip('_')


HEADER_KEYWORDS = {kind.keyword: kind for kind in (
    HeaderTokenKind.MACRO_CONFIG_INT,
    HeaderTokenKind.MACRO_CONFIG_STR,
    HeaderTokenKind.MACRO_CONFIG_COL,
    HeaderTokenKind.FLAG_SAVE,
    HeaderTokenKind.FLAG_CLIENT,
    HeaderTokenKind.FLAG_SERVER,
    HeaderTokenKind.FLAG_INSENSITIVE,
    HeaderTokenKind.FLAG_NONTEEHISTORIC,
    HeaderTokenKind.FLAG_MASTER,
    HeaderTokenKind.FLAG_ECON,
    HeaderTokenKind.FLAG_GAME,
    HeaderTokenKind.FLAG_COLALPHA,
    HeaderTokenKind.FLAG_COLLIGHT,
    HeaderTokenKind.MAX_CLIENTS,
    HeaderTokenKind.SERVERINFO_LEVEL_MIN,
    HeaderTokenKind.SERVERINFO_LEVEL_MAX,
)}

HEADER_PUNCTUATION = {
    '(': HeaderTokenKind.LPAREN,
    ')': HeaderTokenKind.RPAREN,
    ',': HeaderTokenKind.COMMA,
    '|': HeaderTokenKind.PIPE,
    ';': HeaderTokenKind.SEMICOLON,
}


class ConfigTokenKind(Enum):
    IDENTIFIER = 'IDENTIFIER'
    STRING = 'STRING'
    INTEGER = 'INTEGER'
    IP = 'IP'
    ENDLINE = '_NEWLINE'


class Token(NamedTuple):
    kind: Enum
    value: Any


def parse_integer(text, span):
    """Converts a decimal or ``0x`` hex literal, ignoring digit separators."""
    digits = text.replace('_', '')
    try:
        if digits.startswith('0x'):
            value = int(digits[2:], 16)
        else:
            value = int(digits, 10)
    except ValueError:
        raise LexicalError(LexingError.NUMBER_PARSE_ERROR, span)

    if not INT64_MIN <= value <= INT64_MAX:
        raise LexicalError(LexingError.NUMBER_PARSE_ERROR, span)

    return value
