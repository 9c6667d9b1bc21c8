#!/usr/bin/env python3
"""
Clopts : a minimal command line flag parser.

Typed value flags and boolean switches, scanned out of argv,
with usage text and a small error hierarchy.
"""
# Imports:
from __future__ import annotations

from ._interface import __version__, NOT_SET, FlagKind_e
from ._structs.flag_spec import FlagSpec
from .registry import FlagRegistry
from .options import Options, parse, init, get, print_usage
from . import errors
