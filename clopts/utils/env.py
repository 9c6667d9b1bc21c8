#!/usr/bin/env python3
"""
Small environment and path helpers
"""
# Imports:
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod
import os

# ##-- end stdlib imports

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

env : dict = os.environ

def get_env_var(name:str) -> str:
    """ The value of an environment variable, or an empty string if it is unset """
    return env.get(name, "")

def basename(path:str) -> str:
    """ Everything after the last '/' """
    return path[path.rfind("/") + 1:]
