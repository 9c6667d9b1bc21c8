#!/usr/bin/env python3
"""
Constants, enums and protocols shared across clopts.

"""
# ruff: noqa:

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import enum
import logging as logmod
from importlib.metadata import version
# ##-- end stdlib imports

# ##-- types
# isort: off
from typing import TYPE_CHECKING, Final
# Protocols:
from typing import Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Any

# isort: on
# ##-- end types

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Vars:
__version__ : Final[str] = version("clopts")

PRINTER_NAME        : Final[str]        = "clopts._printer"
LOG_FORMAT          : Final[str]        = "{levelname:<8} : {message}"
PRINT_FORMAT        : Final[str]        = "{message}"

HELP_SHORT          : Final[str]        = "-h"
HELP_LONG           : Final[str]        = "--help"
FLAG_PREFIX         : Final[str]        = "-"
SHORT_SEP           : Final[str]        = ","
USAGE_INDENT        : Final[str]        = "   "
USAGE_HEAD          : Final[str]        = "Usage:"
USAGE_ARG_FMT       : Final[str]        = "{short} arg_{idx}"
USAGE_OPTIONS       : Final[str]        = "[options]"
USAGE_OPTIONS_HEAD  : Final[str]        = "Options:"

NON_DEFAULT_KEY     : Final[str]        = "_non_default"

INT_MIN             : Final[int]        = -(2 ** 31)
INT_MAX             : Final[int]        = (2 ** 31) - 1

CONFIG_ENV          : Final[str]        = "CLOPTS_CONFIG"
LOG_LEVEL_ENV       : Final[str]        = "CLOPTS_LOG_LEVEL"

class _NotSet:
    """ Sentinel for a flag registered without a default value """

    def __repr__(self):
        return "<NOT_SET>"

    def __bool__(self):
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

NOT_SET : Final[_NotSet] = _NotSet()

##--|
class FlagKind_e(enum.Enum):
    """ The closed set of flag kinds """
    STRING   = enum.auto()
    INTEGER  = enum.auto()
    FLOAT    = enum.auto()
    DOUBLE   = enum.auto()
    SWITCH   = enum.auto()

    @classmethod
    def value_kinds(cls) -> frozenset[FlagKind_e]:
        return frozenset({cls.STRING, cls.INTEGER, cls.FLOAT, cls.DOUBLE})

@runtime_checkable
class Flag_p(Protocol):
    """ What the registry needs from a flag """

    short : str
    long  : str
    desc  : str

    def describe(self) -> tuple[str, str, str]:
        pass

    def find(self, tokens:list[str]) -> int:
        pass
