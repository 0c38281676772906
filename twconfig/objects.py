from enum import Enum, IntFlag

from dataclasses import dataclass
from dataslots import dataslots
from typing import Optional, Tuple, Union


class CfgFlags(IntFlag):
    SAVE = 1 << 0
    CLIENT = 1 << 1
    SERVER = 1 << 2
    INSENSITIVE = 1 << 3
    NONTEEHISTORIC = 1 << 4
    MASTER = 1 << 5
    ECON = 1 << 6
    GAME = 1 << 7
    COLALPHA = 1 << 8
    COLLIGHT = 1 << 9


class Sentinel(Enum):
    """Engine constants a header may use in place of a numeric literal.

    They are kept symbolic; resolving them to numbers depends on how the
    engine was built.
    """
    MAX_CLIENTS = 'MAX_CLIENTS'
    SERVERINFO_LEVEL_MIN = 'SERVERINFO_LEVEL_MIN'
    SERVERINFO_LEVEL_MAX = 'SERVERINFO_LEVEL_MAX'


Bound = Union[int, Sentinel]


def is_literal(bound):
    return not isinstance(bound, Sentinel)


@dataslots
@dataclass(frozen=True)
class StrType:
    max_length: int
    default: str
    value: Optional[str] = None


@dataslots
@dataclass(frozen=True)
class IntType:
    max: Bound
    min: Bound
    default: Bound
    value: Optional[int] = None

    @property
    def is_literal(self):
        """True when no bound refers to a sentinel."""
        return all(is_literal(bound) for bound in (self.min, self.default, self.max))


@dataslots
@dataclass(frozen=True)
class ColorType:
    default: Bound
    value: Optional[int] = None


EntryType = Union[StrType, IntType, ColorType]


@dataslots
@dataclass(frozen=True)
class ConfigEntry:
    description: str
    entry_type: EntryType
    flags: CfgFlags
    # Name used in config files and the console.
    name: str
    # Name of the variable in the engine source.
    symbol: str


@dataslots
@dataclass(frozen=True)
class IntValue:
    value: int


@dataslots
@dataclass(frozen=True)
class StringValue:
    value: str


@dataslots
@dataclass(frozen=True)
class IPValue:
    value: str


@dataslots
@dataclass(frozen=True)
class KeyValue:
    value: str


Value = Union[IntValue, StringValue, IPValue, KeyValue]


@dataslots
@dataclass(frozen=True)
class ConfigLine:
    name: str
    values: Tuple[Value, ...] = ()


def map_with_names(entries):
    """Indexes entries by their config name; a later duplicate replaces an earlier one."""
    return {entry.name: entry for entry in entries}
