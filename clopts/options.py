#!/usr/bin/env python3
"""
The reference flag set, and the typed Options it resolves to.

parse(argv) is pure: it builds a fresh registry for each call.
init/get/print_usage keep a single parse process-wide,
for programs that parse once at startup and read options anywhere.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import TYPE_CHECKING, Final

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from clopts import errors
from clopts._interface import HELP_LONG, HELP_SHORT, FlagKind_e
from clopts._structs.flag_spec import FlagSpec
from clopts.registry import FlagRegistry

# ##-- end 1st party imports

if TYPE_CHECKING:
    from collections.abc import Sequence

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

def reference_flags() -> list[FlagSpec]:
    """ string, integer (required), float, double, boolean, and help """
    return [
        FlagSpec.valued("-s", "--string",  "Set a string value", FlagKind_e.STRING, ""),
        FlagSpec.valued("-i", "--integer", "Set an integer value", FlagKind_e.INTEGER),
        FlagSpec.valued("-f", "--float",   "Set a float value [default=1.25]", FlagKind_e.FLOAT, 1.25),
        FlagSpec.valued("-d", "--double",  "Set a double value [default=3.0]", FlagKind_e.DOUBLE, 3.0),
        FlagSpec.switch("-b", "--boolean", "Set a boolean value to true"),
        FlagSpec.switch(HELP_SHORT, HELP_LONG, "Print this help"),
    ]

def reference_registry(*, lenient:bool=False) -> FlagRegistry:
    return FlagRegistry(reference_flags(), lenient=lenient)

class Options(BaseModel, frozen=True):
    """ The resolved values of the reference flags """

    app_name        : str    = ""
    string_example  : str
    int_example     : int
    float_example   : float
    double_example  : float
    bool_example    : bool

    @classmethod
    def build(cls, report:TomlGuard) -> Options:
        args = report["args"]
        return cls(app_name=report["name"],
                   string_example=args["string"],
                   int_example=args["integer"],
                   float_example=args["float"],
                   double_example=args["double"],
                   bool_example=args["boolean"],
                   )

def parse(argv:Sequence[str], *, lenient:bool=False) -> Options:
    """ Parse a full argv against the reference flags """
    return Options.build(reference_registry(lenient=lenient).parse(argv))

##--| process-wide

class _OptionsState:
    """ Holds the registry and options of the one startup parse """

    def __init__(self):
        self.registry : None|FlagRegistry = None
        self.options  : None|Options      = None

    def clear(self) -> None:
        self.registry = None
        self.options  = None

_state : Final[_OptionsState] = _OptionsState()

def init(argv:Sequence[str], *, lenient:bool=False) -> Options:
    """ Parse argv once, keeping the result for get() """
    if _state.options is not None:
        logging.warning("Options are being parsed a second time")

    _state.options  = None
    _state.registry = reference_registry(lenient=lenient)
    _state.options  = Options.build(_state.registry.parse(argv))
    return _state.options

def get() -> Options:
    match _state.options:
        case None:
            raise errors.StateError("Options have not been parsed yet")
        case x:
            return x

def print_usage() -> None:
    """ Print usage for the registry of the last init, or the reference flags """
    match _state.registry:
        case None:
            reference_registry().print_usage()
        case x:
            x.print_usage()

def reset() -> None:
    """ Forget any stored parse """
    _state.clear()
