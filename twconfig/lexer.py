import re

from twconfig.error import LexicalError
from twconfig.tokens import (
    HEADER_KEYWORDS, HEADER_PUNCTUATION, ConfigTokenKind, HeaderTokenKind, LexingError, Token, parse_integer,
)


HEX_LITERAL = re.compile(r'0x[0-9a-fA-F][_0-9a-fA-F]*')
DEC_LITERAL = re.compile(r'-?[0-9][_0-9]*')
IDENTIFIER = re.compile(r'[_a-zA-Z][_0-9a-zA-Z]*')
IP_LITERAL = re.compile(r'[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}:[0-9]+')

HEADER_WHITESPACE = re.compile(r'[ \t\r\n\f]+')
LINE_COMMENT = re.compile(r'(?:#|//)[^\n]*\n?')
CONFIG_WHITESPACE = re.compile(r'[ \t\f]+')
ENDLINE = re.compile(r'\r?\n')


class BaseLexer:
    """Lazily turns source text into ``(start, Token, end)`` triples.

    Iterating raises :class:`LexicalError` at the first input that no rule
    recognises; nothing is yielded after that.
    """

    integer_kind = None
    string_kind = None

    def __init__(self, source):
        self.source = source

    def __iter__(self):
        position = 0
        length = len(self.source)

        while True:
            position = self.skip_trivia(position)
            if position >= length:
                return

            token, end = self.next_token(position)
            yield position, token, end
            position = end

    def skip_trivia(self, position):
        raise NotImplementedError

    def next_token(self, position):
        raise NotImplementedError

    def error(self, reason, start, end):
        return LexicalError(reason, (start, end))

    def scan_number(self, position):
        """Longest integer literal at ``position``, or ``None``."""
        best = None
        for pattern in (HEX_LITERAL, DEC_LITERAL):
            match = pattern.match(self.source, position)
            if match and (best is None or match.end() > best.end()):
                best = match

        if best is None:
            return None

        value = parse_integer(best.group(), best.span())
        return Token(self.integer_kind, value), best.end()

    def scan_string(self, position):
        # A quote preceded by a backslash may be either content or the closing
        # delimiter; the longest candidate wins.
        source = self.source
        candidate = None
        i = position + 1
        while i < len(source):
            if source[i] == '"':
                if source[i - 1] == '\\':
                    candidate = i + 1
                else:
                    return Token(self.string_kind, source[position + 1:i]), i + 1
            i += 1

        if candidate is None:
            raise self.error(LexingError.OTHER, position, position + 1)

        return Token(self.string_kind, source[position + 1:candidate - 1]), candidate


class HeaderLexer(BaseLexer):
    """Tokenizer for ``MACRO_CONFIG_*`` declarations in C++ headers."""

    integer_kind = HeaderTokenKind.INTEGER
    string_kind = HeaderTokenKind.STRING

    def skip_trivia(self, position):
        source = self.source
        while True:
            match = HEADER_WHITESPACE.match(source, position) or LINE_COMMENT.match(source, position)
            if match:
                position = match.end()
                continue

            if source.startswith('/*', position):
                close = source.find('*/', position + 2)
                if close == -1:
                    raise self.error(LexingError.OTHER, position, position + 2)
                position = close + 2
                continue

            return position

    def next_token(self, position):
        source = self.source
        char = source[position]

        if char in HEADER_PUNCTUATION:
            return Token(HEADER_PUNCTUATION[char], char), position + 1

        if char == '"':
            return self.scan_string(position)

        number = self.scan_number(position)
        if number is not None:
            return number

        match = IDENTIFIER.match(source, position)
        if match:
            text = match.group()
            kind = HEADER_KEYWORDS.get(text, HeaderTokenKind.IDENTIFIER)
            return Token(kind, text), match.end()

        raise self.error(LexingError.OTHER, position, position + 1)


class ConfigLexer(BaseLexer):
    """Tokenizer for settings files; line breaks are emitted as tokens."""

    integer_kind = ConfigTokenKind.INTEGER
    string_kind = ConfigTokenKind.STRING

    def skip_trivia(self, position):
        match = CONFIG_WHITESPACE.match(self.source, position)
        return match.end() if match else position

    def next_token(self, position):
        source = self.source

        match = ENDLINE.match(source, position)
        if match:
            return Token(ConfigTokenKind.ENDLINE, match.group()), match.end()

        if source[position] == '"':
            return self.scan_string(position)

        match = IP_LITERAL.match(source, position)
        if match:
            return Token(ConfigTokenKind.IP, match.group()), match.end()

        number = self.scan_number(position)
        if number is not None:
            return number

        match = IDENTIFIER.match(source, position)
        if match:
            return Token(ConfigTokenKind.IDENTIFIER, match.group()), match.end()

        raise self.error(LexingError.OTHER, position, position + 1)
