#!/usr/bin/env python3
"""
The clopts demo runner.
Parses the reference flags and prints their values.
"""
# Imports:
from __future__ import annotations

import logging as logmod
import sys

##-- logging
logging         = logmod.getLogger("clopts")
##-- end logging

def format_options(opts) -> list[str]:
    return [
        "Argument of this program are :",
        f" string  value = {opts.string_example}",
        f" integer value = {opts.int_example}",
        f" float   value = {opts.float_example:g}",
        f" double  value = {opts.double_example:g}",
        f" boolean value = {'true' if opts.bool_example else 'false'}",
    ]

def main(argv:None|list[str]=None) -> None:
    from clopts import errors, options
    from clopts._interface import PRINTER_NAME
    from clopts.config import load_env_settings
    from clopts.utils.log_config import setup_logging

    printer = logmod.getLogger(PRINTER_NAME)
    setup_logging()
    try:
        settings = load_env_settings()
    except errors.ConfigError as err:
        printer.error(str(err))
        sys.exit(1)

    setup_logging(settings.log_level)
    logging.debug("Settings: %s", settings)
    try:
        opts = options.init(sys.argv if argv is None else argv, lenient=settings.lenient_numbers)
    except errors.HelpRequested:
        options.print_usage()
        sys.exit(settings.help_exit_code)
    except errors.ParseError as err:
        # error_exit_code defaults to 0
        printer.error(str(err))
        options.print_usage()
        sys.exit(settings.error_exit_code)

    logging.debug("Parsed: %r", opts)
    for line in format_options(opts):
        print(line)

if __name__ == "__main__":
    main()
