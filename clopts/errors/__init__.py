#!/usr/bin/env python3
"""
These are the clopts specific errors that can occur
"""
# Imports:
from __future__ import annotations

# ##-- 1st party imports
from ._base import CloptsError, ConfigError, EarlyExit, StateError, StructError
from .parse import (ConversionError, DuplicateFlagError, HelpRequested,
                    MissingRequiredError, MissingValueError, ParseError,
                    UnknownFlagError)

# ##-- end 1st party imports
