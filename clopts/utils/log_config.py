#!/usr/bin/env python3
"""
Logging setup for clopts.

Two loggers are configured:
- 'clopts', for diagnostics, written to stderr as "LEVEL : message"
- 'clopts._printer', which replaces print(x) for user facing text
  (usage, parse errors). Also written to stderr, message only.

"""

# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
from typing import Final

# ##-- end stdlib imports

# ##-- 1st party imports
from clopts._interface import LOG_FORMAT, PRINT_FORMAT, PRINTER_NAME
from clopts._structs.logger_spec import LoggerSpec

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

PACKAGE_LOGGER : Final[str] = "clopts"

def printer_spec() -> LoggerSpec:
    """ The printer replaces 'print(x)': message only, on stderr """
    return LoggerSpec.build({"name"      : PRINTER_NAME,
                             "level"     : "INFO",
                             "target"    : "stderr",
                             "format"    : PRINT_FORMAT,
                             "propagate" : False,
                             })

class CloptsLogConfig:
    """ Utility class to setup stderr logging, and the printer.
      Applying it again replaces the handlers it added before,
      so the current sys.stderr is always the target.
    """

    def __init__(self, level:int|str="WARNING"):
        self.stream_spec  = LoggerSpec.build({"name"      : PACKAGE_LOGGER,
                                              "level"     : level,
                                              "target"    : "stderr",
                                              "format"    : LOG_FORMAT,
                                              "propagate" : False,
                                              })
        # EXCEPT this, which replaces 'print(x)'
        self.printer_spec = printer_spec()

    def setup(self) -> None:
        self.stream_spec.apply()
        self.printer_spec.apply()
        logging.debug("Post Log Setup")

    def set_level(self, level:int|str) -> None:
        self.stream_spec.set_level(level)

    def clear(self) -> None:
        self.stream_spec.clear()
        self.printer_spec.clear()

_config  : None|CloptsLogConfig = None
# Printer only, for library use without setup_logging
_printer : None|LoggerSpec      = None

def _clear_printer() -> None:
    global _printer
    if _printer is not None:
        _printer.clear()
    _printer = None

def setup_logging(level:int|str="WARNING") -> CloptsLogConfig:
    """ (Re)apply the clopts logging config.
      For entry points: this takes over the 'clopts' logger.
    """
    global _config
    _clear_printer()
    if _config is not None:
        _config.clear()

    _config = CloptsLogConfig(level)
    _config.setup()
    return _config

def ensure_printer() -> logmod.Logger:
    """ Make sure the printer has somewhere to write to.
      Only the printer is touched, the 'clopts' logger is left as the application set it.
    """
    global _printer
    printer = logmod.getLogger(PRINTER_NAME)
    if not bool(printer.handlers):
        _printer = printer_spec()
        _printer.apply()
    return printer

def clear_logging() -> None:
    """ Remove every handler clopts added """
    global _config
    _clear_printer()
    if _config is not None:
        _config.clear()
    _config = None
