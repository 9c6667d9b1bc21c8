#!/usr/bin/env python3
"""
Text to value conversion for each FlagKind_e.

Strict by default: the whole token must be a number of the right form.
When lenient, the longest leading numeric prefix is used and anything after
it is ignored, as C-style stream extraction does.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import math
import re
import struct
from typing import TYPE_CHECKING, Any, Final

# ##-- end stdlib imports

# ##-- 1st party imports
from clopts import errors
from clopts._interface import INT_MAX, INT_MIN, FlagKind_e

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

INT_PATTERN   : Final[re.Pattern] = re.compile(r"[+-]?[0-9]+", flags=re.ASCII)
FLOAT_PATTERN : Final[re.Pattern] = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?", flags=re.ASCII)

def to_single(val:float) -> float:
    """ round a python float to 32-bit precision """
    return struct.unpack("f", struct.pack("f", val))[0]

def _numeric_text(pattern:re.Pattern, text:str, *, lenient:bool) -> None|str:
    stripped = text.strip()
    if lenient:
        match pattern.match(stripped):
            case None:
                return None
            case x:
                return x.group(0)

    match pattern.fullmatch(stripped):
        case None:
            return None
        case x:
            return x.group(0)

def convert(kind:FlagKind_e, text:str, *, flag:str="", lenient:bool=False) -> Any:
    """ Convert a single command line token to the value of a flag kind.
      raises ConversionError when the token isn't usable
    """
    logging.debug("Converting %r to %s (lenient=%s)", text, kind.name, lenient)
    match kind:
        case FlagKind_e.STRING:
            return text
        case FlagKind_e.SWITCH:
            raise TypeError("Switches do not take a value", flag)
        case FlagKind_e.INTEGER:
            number = _numeric_text(INT_PATTERN, text, lenient=lenient)
        case FlagKind_e.FLOAT | FlagKind_e.DOUBLE:
            number = _numeric_text(FLOAT_PATTERN, text, lenient=lenient)
        case x:
            raise TypeError("Unknown flag kind", x)

    if number is None:
        raise errors.ConversionError(flag, kind.name.lower(), text)

    match kind:
        case FlagKind_e.INTEGER:
            result = int(number)
            if not (INT_MIN <= result <= INT_MAX):
                raise errors.ConversionError(flag, kind.name.lower(), text)
            return result
        case FlagKind_e.FLOAT:
            try:
                result = to_single(float(number))
            except OverflowError:
                raise errors.ConversionError(flag, kind.name.lower(), text) from None
        case _:
            result = float(number)

    if not math.isfinite(result):
        raise errors.ConversionError(flag, kind.name.lower(), text)

    return result

def coerce_default(kind:FlagKind_e, val:Any, *, flag:str="") -> Any:
    """ Convert a registered default to its flag kind, with the same limits as convert.
      raises ValueError, so model validation can report it
    """
    match kind, val:
        case FlagKind_e.SWITCH, _:
            return bool(val)
        case FlagKind_e.STRING, _:
            return str(val)
        case _, bool():
            raise ValueError("Numeric flag defaults can't be booleans", flag, val)
        case _, str():
            try:
                return convert(kind, val, flag=flag)
            except errors.ConversionError as err:
                raise ValueError(str(err)) from None
        case FlagKind_e.INTEGER, float() if val.is_integer():
            result = int(val)
        case FlagKind_e.INTEGER, int():
            result = val
        case FlagKind_e.FLOAT | FlagKind_e.DOUBLE, int() | float():
            try:
                result = float(val)
                if kind is FlagKind_e.FLOAT:
                    result = to_single(result)
            except OverflowError:
                raise ValueError("Flag default out of range", flag, val) from None
        case _:
            raise ValueError("Flag default doesn't suit its kind", flag, kind.name.lower(), val)

    match result:
        case int() if not (INT_MIN <= result <= INT_MAX):
            raise ValueError("Flag default out of range", flag, val)
        case float() if not math.isfinite(result):
            raise ValueError("Flag default is not finite", flag, val)
        case _:
            return result
