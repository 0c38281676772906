class TwConfigError(Exception):
    pass


class LexicalError(TwConfigError):
    """Raised by a lexer in place of the next token at unrecognised input."""

    def __init__(self, reason, span):
        self.reason = reason
        self.span = span
        super().__init__('invalid token (%s) at %d..%d' % (reason.name, span[0], span[1]))


class ParseFailure(TwConfigError):
    """Base class for everything a parse call can raise.

    Every failure carries ``span``, a half-open ``(start, end)`` range into the
    parsed text.
    """

    def __init__(self, message, span):
        self.span = span
        super().__init__(message)


class InvalidTokenAt(ParseFailure):
    def __init__(self, location):
        self.location = location
        super().__init__('invalid token at %d' % location, (location, location))


class UnexpectedEndOfInput(ParseFailure):
    def __init__(self, location, expected):
        self.location = location
        self.expected = frozenset(expected)
        super().__init__('unexpected end of input at %d, expected one of: %s'
                         % (location, _format_kinds(self.expected)), (location, location))


class UnexpectedToken(ParseFailure):
    def __init__(self, token, expected):
        self.token = token
        self.expected = frozenset(expected)
        start, tok, end = token
        super().__init__('unexpected %s at %d..%d, expected one of: %s'
                         % (tok.kind.name, start, end, _format_kinds(self.expected)), (start, end))


class ExtraTokenAfterComplete(ParseFailure):
    def __init__(self, token):
        self.token = token
        start, tok, end = token
        super().__init__('extra %s at %d..%d after a complete declaration' % (tok.kind.name, start, end),
                         (start, end))


class LexicalFailure(ParseFailure):
    def __init__(self, error):
        self.error = error
        super().__init__(str(error), error.span)


class InvalidEntry(ParseFailure):
    """A well-formed declaration whose values contradict each other."""

    def __init__(self, reason, span):
        self.reason = reason
        super().__init__('%s at %d..%d' % (reason, span[0], span[1]), span)


def _format_kinds(kinds):
    return ', '.join(sorted(kind.name for kind in kinds))
