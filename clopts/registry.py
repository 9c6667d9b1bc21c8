#!/usr/bin/env python3
"""
The FlagRegistry: owns flags, scans argv for them, and reports the results.

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING, Any

# ##-- end stdlib imports

# ##-- 3rd party imports
import more_itertools as mitz
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from clopts import errors
from clopts._interface import NON_DEFAULT_KEY, PRINTER_NAME
from clopts._structs.flag_spec import FlagSpec
from clopts.usage import UsageFormatter
from clopts.utils.env import basename
from clopts.utils.log_config import ensure_printer

# ##-- end 1st party imports

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from typing import Self

##-- logging
logging = logmod.getLogger(__name__)
printer = logmod.getLogger(PRINTER_NAME)
##-- end logging

class FlagRegistry:
    """
    Turns argv into a TomlGuard of flag values by:
    letting each flag, in scan order, find and consume its tokens,
    then failing if anything is left over.

    Scan order is help switches first, then registration order.
    """

    def __init__(self, flags:None|Iterable[FlagSpec]=None, *, lenient:bool=False):
        self.app_name  : str                  = ""
        self.tokens    : list[str]            = []
        self.flags     : dict[str, FlagSpec]  = {}
        self.lenient   : bool                 = lenient
        self.register(*(flags or []))

    def __contains__(self, key:str) -> bool:
        return any(x == key for x in self.flags.values())

    def __getitem__(self, key:str) -> FlagSpec:
        match [x for x in self.flags.values() if x == key]:
            case [x]:
                return x
            case _:
                raise KeyError(key)

    def __len__(self) -> int:
        return len(self.flags)

    def register(self, *flags:FlagSpec) -> Self:
        """ Add flags, keyed by their short name """
        for flag in flags:
            names = {flag.short, flag.long}
            match [x for x in self.flags.values() if names & {x.short, x.long}]:
                case []:
                    logging.debug("Registering: %r", flag)
                    self.flags[flag.short] = flag
                case [x, *_]:
                    raise errors.DuplicateFlagError("Flag %s, %s clashes with a registered flag: %r", flag.short, flag.long, x)
        else:
            return self

    def scan_order(self) -> list[FlagSpec]:
        rest, helps = mitz.partition(lambda x: x.is_help, self.flags.values())
        return [*helps, *rest]

    def load_tokens(self, argv:Sequence[str]) -> None:
        match list(argv):
            case []:
                self.app_name = ""
                self.tokens   = []
            case [head, *rest]:
                self.app_name = basename(head)
                self.tokens   = rest

    def parse(self, argv:Sequence[str]) -> TomlGuard:
        """
          Parse a full argv (including the program path) against the registered flags.
          Errors propagate to the caller, nothing is printed.
        """
        logging.debug("Parsing args: %s", argv)
        self.load_tokens(argv)
        for flag in self.flags.values():
            flag.reset()

        for flag in self.scan_order():
            consumed = flag.find(self.tokens, lenient=self.lenient)
            logging.debug("%r consumed %s, remaining: %s", flag, consumed, self.tokens)

        if bool(self.tokens):
            raise errors.UnknownFlagError(self.tokens[0], self.tokens)

        return self.report()

    def values(self) -> dict[str, Any]:
        return {x.name : x.value for x in self.flags.values()}

    def report(self) -> TomlGuard:
        data = {
            "name"          : self.app_name,
            "args"          : self.values(),
            NON_DEFAULT_KEY : [x.name for x in self.flags.values() if x.value != x.default],
        }
        return TomlGuard(data)

    def usage(self) -> str:
        return str(UsageFormatter(self.app_name, self.flags.values()))

    def print_usage(self) -> None:
        ensure_printer()
        printer.info(self.usage())
