#!/usr/bin/env python3
"""
Errors raised while scanning a command line.

MissingValueError, MissingRequiredError and UnknownFlagError
carry the same messages the usage printer shows to a user.
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

from ._base import CloptsError, EarlyExit, StructError

class ParseError(CloptsError):
    """ In the course of parsing CLI input, a failure occurred. """
    general_msg = "Clopts CLI Parsing Failure:"
    pass

class MissingValueError(ParseError):
    """ A value flag was matched, but nothing followed it """

    def __init__(self, short:str, long:str):
        super().__init__("Value of argument %s, %s is missing", short, long)
        self.short = short
        self.long  = long

class MissingRequiredError(ParseError):
    """ A flag registered without a default never appeared """

    def __init__(self, short:str, long:str):
        super().__init__("Argument %s, %s is needed", short, long)
        self.short = short
        self.long  = long

class UnknownFlagError(ParseError):
    """ Tokens were left over after every flag had been scanned """

    def __init__(self, token:str, remaining:list[str]|None=None):
        super().__init__("Unknown flag: %s", token)
        self.token     = token
        self.remaining = list(remaining or [token])

class ConversionError(ParseError):
    """ A value token could not be converted to its flag's kind """

    def __init__(self, flag:str, kind:str, text:str):
        super().__init__("Value of argument %s is not a valid %s: %r", flag, kind, text)
        self.flag = flag
        self.kind = kind
        self.text = text

class DuplicateFlagError(StructError):
    """ Two flags share a short or long name """
    pass

class HelpRequested(EarlyExit):
    """ The help switch was found. Carries no message. """

    def __str__(self):
        return ""
