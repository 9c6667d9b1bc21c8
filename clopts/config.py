#!/usr/bin/env python3
"""
Reading clopts settings and flag declarations from toml.

[settings]
lenient_numbers = false
error_exit_code = 0
help_exit_code  = 0
log_level       = "WARNING"

[[flags]]
short   = "-n"
long    = "--name"
desc    = "A name"
type    = "str"
default = "bob"

"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import pathlib as pl
import tomllib
from typing import TYPE_CHECKING

# ##-- end stdlib imports

# ##-- 3rd party imports
from pydantic import BaseModel, ValidationError, field_validator
from tomlguard import TomlGuard

# ##-- end 3rd party imports

# ##-- 1st party imports
from clopts import errors
from clopts._interface import CONFIG_ENV, LOG_LEVEL_ENV
from clopts._structs.flag_spec import FlagSpec
from clopts._structs.logger_spec import level_of
from clopts.registry import FlagRegistry
from clopts.utils.env import get_env_var

# ##-- end 1st party imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

class Settings(BaseModel, extra="forbid"):
    """ Behaviour switches for parsing and the entry point """

    lenient_numbers   : bool  = False
    error_exit_code   : int   = 0
    help_exit_code    : int   = 0
    log_level         : str   = "WARNING"

    @field_validator("log_level")
    def _validate_level(cls, val):
        level_of(val)
        return val.upper()

def read_config(path:pl.Path|str) -> TomlGuard:
    """ Load a toml file into a TomlGuard """
    path = pl.Path(path)
    logging.debug("Reading Config: %s", path)
    try:
        with path.open("rb") as f:
            return TomlGuard(tomllib.load(f))
    except FileNotFoundError:
        raise errors.ConfigError("Config file not found: %s", path) from None
    except OSError as err:
        raise errors.ConfigError("Config file could not be read: %s : %s", path, err) from None
    except tomllib.TOMLDecodeError as err:
        raise errors.ConfigError("Config file is not valid toml: %s : %s", path, err) from None

def load_settings(data:None|TomlGuard=None) -> Settings:
    """ Build Settings from the [settings] table of a loaded config.
      CLOPTS_LOG_LEVEL, if set, overrides the log level.
    """
    table = {}
    try:
        if data is not None:
            table = dict(data.on_fail({}).settings())
    except (TypeError, ValueError) as err:
        raise errors.ConfigError("The settings table is not a table: %s", err) from None

    if bool(level := get_env_var(LOG_LEVEL_ENV)):
        table["log_level"] = level

    try:
        return Settings.model_validate(table)
    except ValidationError as err:
        raise errors.ConfigError("Invalid settings: %s", err) from None

def load_flags(data:TomlGuard) -> list[FlagSpec]:
    """ Build flag specs from the [[flags]] array of a loaded config """
    try:
        return [FlagSpec.build(x) for x in data.on_fail([], list).flags()]
    except (ValidationError, TypeError) as err:
        raise errors.ConfigError("Invalid flag declaration: %s", err) from None

def registry_from_config(data:TomlGuard) -> FlagRegistry:
    settings = load_settings(data)
    return FlagRegistry(load_flags(data), lenient=settings.lenient_numbers)

def load_env_settings() -> Settings:
    """ Settings from the file named by CLOPTS_CONFIG, or defaults """
    match get_env_var(CONFIG_ENV):
        case "":
            return load_settings()
        case path:
            return load_settings(read_config(path))
