import logging
from functools import lru_cache

from lark import Lark, Transformer, Token as LarkToken
from lark.exceptions import UnexpectedEOF, UnexpectedInput, UnexpectedToken as LarkUnexpectedToken
from lark.lexer import Lexer

from twconfig.error import (
    ExtraTokenAfterComplete, InvalidEntry, InvalidTokenAt, LexicalError, LexicalFailure, UnexpectedEndOfInput,
    UnexpectedToken,
)
from twconfig.grammar import CONFIG_GRAMMAR, HEADER_GRAMMAR
from twconfig.lexer import ConfigLexer, HeaderLexer
from twconfig.objects import (
    CfgFlags, ColorType, ConfigEntry, ConfigLine, IPValue, IntType, IntValue, KeyValue, Sentinel, StrType,
    StringValue,
)
from twconfig.tokens import ConfigTokenKind, HeaderTokenKind, Token


log = logging.getLogger(__name__)


FLAG_TERMINALS = {
    'CFGFLAG_SAVE': CfgFlags.SAVE,
    'CFGFLAG_CLIENT': CfgFlags.CLIENT,
    'CFGFLAG_SERVER': CfgFlags.SERVER,
    'CFGFLAG_INSENSITIVE': CfgFlags.INSENSITIVE,
    'CFGFLAG_NONTEEHISTORIC': CfgFlags.NONTEEHISTORIC,
    'CFGFLAG_MASTER': CfgFlags.MASTER,
    'CFGFLAG_ECON': CfgFlags.ECON,
    'CFGFLAG_GAME': CfgFlags.GAME,
    'CFGFLAG_COLALPHA': CfgFlags.COLALPHA,
    'CFGFLAG_COLLIGHT': CfgFlags.COLLIGHT,
}

VALUE_TERMINALS = {
    'INTEGER': IntValue,
    'STRING': StringValue,
    'IP': IPValue,
    'IDENTIFIER': KeyValue,
}


def _lark_tokens(lexer):
    for start, token, end in lexer:
        yield LarkToken(token.kind.value, token.value, start_pos=start, end_pos=end)


class HeaderLarkLexer(Lexer):
    def __init__(self, lexer_conf):
        pass

    def lex(self, data):
        return _lark_tokens(HeaderLexer(data))


class ConfigLarkLexer(Lexer):
    def __init__(self, lexer_conf):
        pass

    def lex(self, data):
        return _lark_tokens(ConfigLexer(data))


def _span(token):
    return token.start_pos, token.end_pos


def _bound(token):
    if token.type == 'INTEGER':
        return token.value
    return Sentinel(token.type)


class HeaderTransformer(Transformer):
    def start(self, args):
        return args

    def entry(self, args):
        return args[0]

    def int_entry(self, args):
        symbol, name, default, minimum, maximum, flags, description = args
        entry_type = IntType(max=_bound(maximum), min=_bound(minimum), default=_bound(default))

        if entry_type.is_literal and not entry_type.min <= entry_type.default <= entry_type.max:
            raise InvalidEntry('default %d of %s is outside [%d, %d]'
                               % (entry_type.default, symbol.value, entry_type.min, entry_type.max),
                               _span(default))

        return ConfigEntry(description.value, entry_type, flags, name.value, symbol.value)

    def str_entry(self, args):
        symbol, name, max_length, default, flags, description = args

        if max_length.value < 0:
            raise InvalidEntry('negative max length for %s' % symbol.value, _span(max_length))

        if len(default.value.encode('utf-8')) > max_length.value:
            raise InvalidEntry('default of %s is longer than %d bytes' % (symbol.value, max_length.value),
                               _span(default))

        entry_type = StrType(max_length=max_length.value, default=default.value)
        return ConfigEntry(description.value, entry_type, flags, name.value, symbol.value)

    def color_entry(self, args):
        symbol, name, default, flags, description = args
        entry_type = ColorType(default=_bound(default))
        return ConfigEntry(description.value, entry_type, flags, name.value, symbol.value)

    def flags(self, args):
        flags = CfgFlags(0)
        for token in args:
            flags |= FLAG_TERMINALS[token.type]
        return flags


class ConfigTransformer(Transformer):
    def start(self, args):
        return args

    def line(self, args):
        name = args.pop(0)
        values = tuple(VALUE_TERMINALS[token.type](token.value) for token in args)
        return ConfigLine(name.value, values)


@lru_cache(maxsize=None)
def header_parser(start='start', debug=False):
    # Each start symbol gets its own LALR table.
    return Lark(HEADER_GRAMMAR, start=start, debug=debug, parser='lalr', lexer=HeaderLarkLexer,
                transformer=HeaderTransformer())


@lru_cache(maxsize=None)
def config_parser(debug=False):
    return Lark(CONFIG_GRAMMAR, start='start', debug=debug, parser='lalr', lexer=ConfigLarkLexer,
                transformer=ConfigTransformer())


def _expected(names, kinds):
    return frozenset(kinds(name) for name in names if name != '$END')


def _translate(error, kinds, source, single=False):
    if isinstance(error, UnexpectedEOF):
        return UnexpectedEndOfInput(len(source), _expected(error.expected, kinds))

    if not isinstance(error, LarkUnexpectedToken):
        return InvalidTokenAt(getattr(error, 'pos_in_stream', None) or 0)

    token = error.token
    expected = _expected(error.expected, kinds)

    if token.type == '$END':
        location = token.end_pos if token.end_pos is not None else len(source)
        return UnexpectedEndOfInput(location, expected)

    spanned = (token.start_pos, Token(kinds(token.type), token.value), token.end_pos)
    if single and '$END' in error.expected:
        return ExtraTokenAfterComplete(spanned)

    return UnexpectedToken(spanned, expected)


def _parse(parser, source, kinds, single=False):
    try:
        return parser.parse(source)
    except LexicalError as e:
        raise LexicalFailure(e) from e
    except UnexpectedInput as e:
        raise _translate(e, kinds, source, single) from e


def parse_config_variables(header_source, debug=False):
    """Parses the ``MACRO_CONFIG_*`` declarations of a header.

    Usually ``src/engine/shared/config_variables.h``. Returns the entries in
    source order; raises a :class:`~twconfig.error.ParseFailure` at the first
    problem.
    """
    entries = _parse(header_parser('start', debug), header_source, HeaderTokenKind)
    log.debug('parsed %d config variables', len(entries))
    return entries


def parse_config_variable(source, debug=False):
    """Parses exactly one ``MACRO_CONFIG_*`` declaration."""
    return _parse(header_parser('entry', debug), source, HeaderTokenKind, single=True)


def parse_config(config_source, debug=False):
    """Parses a settings file into one :class:`ConfigLine` per non-blank line."""
    lines = _parse(config_parser(debug), config_source, ConfigTokenKind)
    log.debug('parsed %d config lines', len(lines))
    return lines
