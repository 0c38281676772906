from twconfig.error import (
    TwConfigError, LexicalError, ParseFailure, InvalidTokenAt, UnexpectedEndOfInput, UnexpectedToken,
    ExtraTokenAfterComplete, LexicalFailure, InvalidEntry,
)
from twconfig.objects import (
    CfgFlags, Sentinel, StrType, IntType, ColorType, ConfigEntry, IntValue, StringValue, IPValue, KeyValue,
    ConfigLine, map_with_names,
)
from twconfig.parser import parse_config_variables, parse_config_variable, parse_config
