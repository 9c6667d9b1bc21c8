#!/usr/bin/env python3
"""
Formats the usage block for a set of flags:

Usage: prog -i arg_1 [options]

Options:
   -b, --boolean : Set a boolean value to true
   ...

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING, Final

# ##-- end stdlib imports

# ##-- 1st party imports
from clopts._interface import (USAGE_ARG_FMT, USAGE_HEAD, USAGE_INDENT,
                               USAGE_OPTIONS, USAGE_OPTIONS_HEAD, Flag_p)

# ##-- end 1st party imports

if TYPE_CHECKING:
    from collections.abc import Iterable

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class UsageFormatter:
    """ Builds usage text from an app name and flags.
      Flags are shown sorted by short name.
    """

    def __init__(self, app_name:str, flags:Iterable[Flag_p]):
        self.app_name = app_name
        self.flags    = sorted(flags, key=lambda x: x.short)

    def widths(self) -> tuple[int, int, int]:
        described = [x.describe() for x in self.flags]
        return (max((len(x[0]) for x in described), default=0),
                max((len(x[1]) for x in described), default=0),
                max((len(x[2]) for x in described), default=0))

    def synopsis(self) -> str:
        parts = [USAGE_HEAD, self.app_name]
        required = [x for x in self.flags if getattr(x, "required", False)]
        for idx, flag in enumerate(required, start=1):
            parts.append(USAGE_ARG_FMT.format(short=flag.short, idx=idx))
        else:
            parts.append(USAGE_OPTIONS)

        return " ".join(parts)

    def rows(self) -> list[str]:
        short_w, long_w, desc_w = self.widths()
        result = []
        for short, long, desc in (x.describe() for x in self.flags):
            result.append(f"{USAGE_INDENT}{short:<{short_w}} {long:<{long_w}} : {desc:<{desc_w}}")
        else:
            return result

    def lines(self) -> list[str]:
        return [self.synopsis(), "", USAGE_OPTIONS_HEAD, *self.rows(), ""]

    def __str__(self):
        return "\n".join(self.lines())
