#!/usr/bin/env python3
"""
Base classes for clopts errors.

"""
# Import:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import (TYPE_CHECKING, Any, ClassVar, Final)

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

# Body:
class CloptsError(Exception):
    """
      The base class for all clopts errors.
      str() will try to % format the first argument with the remaining args
    """
    general_msg : ClassVar[str] = "Non-Specific Clopts Error:"

    def __str__(self):
        match self.args:
            case ():
                return ""
            case (str() as fmt, *rest):
                try:
                    return fmt % tuple(rest)
                except TypeError:
                    return " ".join(str(x) for x in self.args)
            case _:
                return str(self.args)

class StructError(CloptsError):
    """ A clopts structure was built or combined incorrectly """
    general_msg = "Clopts Struct Error:"
    pass

class StateError(CloptsError):
    """ Process-wide option state was accessed before it was ready """
    general_msg = "Clopts State Error:"
    pass

class ConfigError(CloptsError):
    """ A settings file could not be read, or its format was incorrect """
    general_msg = "Clopts Config Error:"
    pass

class EarlyExit(Exception):
    """ Parsing was instructed to stop before producing options """
    pass
