#!/usr/bin/env python3
"""

"""
# ruff: noqa: ANN201, ARG001, ANN001, ARG002, ANN202, B011

# Imports
from __future__ import annotations

# ##-- stdlib imports
import logging as logmod

# ##-- end stdlib imports

# ##-- 3rd party imports
import pytest
from tomlguard import TomlGuard

# ##-- end 3rd party imports

from clopts import errors
from clopts._interface import NON_DEFAULT_KEY
from clopts._structs.flag_spec import FlagSpec
from clopts.options import reference_flags, reference_registry
from clopts.registry import FlagRegistry
from clopts.utils.log_config import clear_logging, setup_logging

##-- logging
logging = logmod.getLogger(__name__)
##-- end logging

@pytest.fixture
def registry():
    return reference_registry()

class TestFlagRegistry:

    def test_sanity(self):
        assert(True is not False)

    def test_initial(self):
        obj = FlagRegistry()
        assert(isinstance(obj, FlagRegistry))
        assert(len(obj) == 0)

    def test_register(self):
        obj = FlagRegistry()
        obj.register(FlagSpec.switch("-b", "--boolean", "a switch"))
        assert(len(obj) == 1)
        assert("-b" in obj)
        assert("--boolean" in obj)
        assert(obj["--boolean"].short == "-b")

    def test_missing_key(self):
        obj = FlagRegistry()
        with pytest.raises(KeyError):
            obj["-x"]

    def test_register_duplicate_short(self):
        obj = FlagRegistry([FlagSpec.switch("-b", "--boolean", "a switch")])
        with pytest.raises(errors.DuplicateFlagError):
            obj.register(FlagSpec.switch("-b", "--bool", "another switch"))

    def test_register_duplicate_long(self):
        obj = FlagRegistry([FlagSpec.switch("-b", "--boolean", "a switch")])
        with pytest.raises(errors.DuplicateFlagError):
            obj.register(FlagSpec.switch("-o", "--boolean", "another switch"))

    def test_scan_order_help_first(self, registry):
        assert([x.short for x in registry.scan_order()] == ["-h", "-s", "-i", "-f", "-d", "-b"])

    def test_app_name_is_basename(self, registry):
        result = registry.parse(["/usr/local/bin/prog", "-i", "1"])
        assert(registry.app_name == "prog")
        assert(result["name"] == "prog")

    def test_empty_argv(self):
        obj = FlagRegistry([FlagSpec.switch("-b", "--boolean", "a switch")])
        result = obj.parse([])
        assert(obj.app_name == "")
        assert(result["args"]["boolean"] is False)

    def test_report(self, registry):
        result = registry.parse(["prog", "-i", "42", "-b"])
        assert(isinstance(result, TomlGuard))
        assert(result["args"]["integer"] == 42)
        assert(result["args"]["boolean"] is True)
        assert(sorted(result[NON_DEFAULT_KEY]) == ["boolean", "integer"])

    def test_argv_is_not_mutated(self, registry):
        argv = ["prog", "-i", "42"]
        registry.parse(argv)
        assert(argv == ["prog", "-i", "42"])

    def test_reparse_resets_flags(self, registry):
        registry.parse(["prog", "-i", "1", "-b", "-s", "first"])
        result = registry.parse(["prog", "-i", "2"])
        assert(result["args"]["boolean"] is False)
        assert(result["args"]["string"] == "")
        assert(result["args"]["integer"] == 2)

class TestFlagRegistryScenarios:

    def test_required_only(self, registry):
        args = registry.parse(["prog", "-i", "42"])["args"]
        assert(args["integer"] == 42)
        assert(args["string"] == "")
        assert(args["float"] == 1.25)
        assert(args["double"] == 3.0)
        assert(args["boolean"] is False)
        assert(args["help"] is False)

    def test_switch_set(self, registry):
        args = registry.parse(["prog", "-i", "7", "-b"])["args"]
        assert(args["integer"] == 7)
        assert(args["boolean"] is True)

    def test_all_long(self, registry):
        args = registry.parse(["prog", "--double", "0.5", "--integer", "-3", "--string", "hi", "--float", "2.5", "--boolean"])["args"]
        assert(args["integer"] == -3)
        assert(args["string"] == "hi")
        assert(args["float"] == 2.5)
        assert(args["double"] == 0.5)
        assert(args["boolean"] is True)

    def test_missing_required(self, registry):
        with pytest.raises(errors.MissingRequiredError) as ctx:
            registry.parse(["prog", "-s", "hello", "-f", "2.5"])

        assert(ctx.value.short == "-i")

    def test_unknown_flag(self, registry):
        with pytest.raises(errors.UnknownFlagError) as ctx:
            registry.parse(["prog", "-i", "5", "-x"])

        assert(ctx.value.token == "-x")
        assert(str(ctx.value) == "Unknown flag: -x")

    def test_unknown_names_first_leftover(self, registry):
        with pytest.raises(errors.UnknownFlagError) as ctx:
            registry.parse(["prog", "-y", "-i", "5", "-x"])

        assert(ctx.value.token == "-y")
        assert(ctx.value.remaining == ["-y", "-x"])

    def test_help(self, registry):
        with pytest.raises(errors.HelpRequested) as ctx:
            registry.parse(["prog", "-h"])

        assert(str(ctx.value) == "")

    def test_help_beats_other_errors(self, registry):
        with pytest.raises(errors.HelpRequested):
            registry.parse(["prog", "-x", "-i", "--help"])

    def test_missing_value(self, registry):
        with pytest.raises(errors.MissingValueError):
            registry.parse(["prog", "-i"])

    def test_repeated_flag_is_unknown(self, registry):
        with pytest.raises(errors.UnknownFlagError) as ctx:
            registry.parse(["prog", "-i", "1", "-i", "2"])

        assert(ctx.value.remaining == ["-i", "2"])

    def test_earlier_flag_claims_ambiguous_token(self, registry):
        # -s is scanned before -i, so takes "-i" as its value
        with pytest.raises(errors.MissingRequiredError):
            registry.parse(["prog", "-s", "-i", "3"])

        args = registry.parse(["prog", "-s", "-i", "-i", "3"])["args"]
        assert(args["string"] == "-i")
        assert(args["integer"] == 3)

    def test_lenient_registry(self):
        obj  = reference_registry(lenient=True)
        args = obj.parse(["prog", "-i", "42abc"])["args"]
        assert(args["integer"] == 42)

    def test_strict_registry(self, registry):
        with pytest.raises(errors.ConversionError):
            registry.parse(["prog", "-i", "42abc"])

    def test_unrelated_flags_untouched(self):
        flag_a = FlagSpec.valued("-a", "--alpha", "a", "int")
        flag_b = FlagSpec.valued("-z", "--zeta", "z", "str")
        tokens = ["-z", "-a", "-a", "1"]
        flag_b.find(tokens)
        assert(tokens == ["-a", "1"])
        flag_a.find(tokens)
        assert(flag_a.value == 1)
        assert(flag_b.value == "-a")

class TestFlagRegistryUsage:

    @pytest.fixture(autouse=True)
    def logs(self):
        yield
        clear_logging()

    def test_usage(self, registry):
        registry.parse(["prog", "-i", "1"])
        lines = registry.usage().split("\n")
        assert(lines[0] == "Usage: prog -i arg_1 [options]")
        assert(lines[1] == "")
        assert(lines[2] == "Options:")
        assert(lines[3].rstrip() == "   -b, --boolean : Set a boolean value to true")
        assert(lines[-1] == "")

    def test_usage_has_every_flag_once(self, registry):
        rows = registry.usage().split("\n")[3:-1]
        assert(len(rows) == len(reference_flags()))
        found = set()
        for row in rows:
            columns       = row.split(" : ", 1)
            short, long   = columns[0].split()
            found.add((short.removesuffix(","), long, columns[1].rstrip()))

        assert(found == {(x.short, x.long, x.desc) for x in reference_flags()})

    def test_print_usage(self, registry, capsys):
        setup_logging()
        registry.print_usage()
        captured = capsys.readouterr()
        assert(captured.out == "")
        assert("Usage:" in captured.err)
        assert("--integer" in captured.err)

    def test_print_usage_without_setup(self, registry, capsys):
        clear_logging()
        registry.print_usage()
        captured = capsys.readouterr()
        assert("Options:" in captured.err)

    def test_print_usage_leaves_package_logger(self, registry, capsys):
        clear_logging()
        package  = logmod.getLogger("clopts")
        before   = (package.propagate, package.level, list(package.handlers))
        registry.print_usage()
        assert((package.propagate, package.level, list(package.handlers)) == before)
        assert("Usage:" in capsys.readouterr().err)
