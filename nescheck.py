#!/usr/bin/env python3
"""
nescheck — NES CPU conformance oracle CLI

Usage:
    python nescheck.py <module:Class> [--test nestest] [--list]
                                      [--verbose] [--log-file nescheck.log]

The implementation is named as an import path plus class, e.g.
`mynes.cpu:Cpu`. The class must provide run_ines_rom() and memory_read()
(see nes_conformance/contract.py).

Exit codes:
    0  all selected tests passed
    1  a test failed (diagnosed defect, CpuError, or crash)
    2  the implementation could not be imported, or a bundled ROM is unusable

Examples:
    python nescheck.py mynes.cpu:Cpu
    python nescheck.py mynes.cpu:Cpu --test nestest -v
    python nescheck.py --list
"""

import argparse
import importlib
import logging
import os
import sys

# Fix stdout encoding on Windows (check marks in the report)
if sys.stdout.encoding and sys.stdout.encoding.lower() not in ('utf-8', 'utf8'):
    sys.stdout.reconfigure(encoding='utf-8', errors='replace')

# Allow running from project root without installing
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from nes_conformance import __version__
from nes_conformance.config import CONFORMANCE_TESTS
from nes_conformance.log import setup_logging
from nes_conformance.rom import RomError
from nes_conformance.suite import ConformanceFailure, run_test


class ImplementationImportError(Exception):
    pass


def load_implementation(target: str):
    """Import `package.module:ClassName` and return the class."""
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ImplementationImportError(
            f"expected <module>:<Class>, got {target!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ImplementationImportError(f"cannot import {module_name}: {e}") from e

    obj = module
    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise ImplementationImportError(
                f"{module_name} has no attribute {attr!r}") from None
    return obj


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="nescheck",
        description="NES CPU conformance oracle",
        epilog="Tests: " + ", ".join(CONFORMANCE_TESTS.keys()),
    )
    parser.add_argument("implementation", nargs="?",
                        help="CPU class to test, as module:Class")
    parser.add_argument("--test", "-t", action="append",
                        choices=list(CONFORMANCE_TESTS.keys()),
                        help="Run only this test (repeatable, default: all)")
    parser.add_argument("--list", action="store_true",
                        help="List bundled conformance tests and exit")
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="More console logging (-v info, -vv debug)")
    parser.add_argument("--log-file", default=None,
                        help="Also write a DEBUG log to this file")
    parser.add_argument("--version", action="version",
                        version=f"nescheck {__version__}")

    args = parser.parse_args(argv)

    if args.list:
        for name, test in CONFORMANCE_TESTS.items():
            print(f"{name:12s} {test.rom:16s} {test.cycles:>8d} cycles  {test.description}")
        return 0

    if not args.implementation:
        parser.error("the implementation argument is required (module:Class)")

    console_level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    log = setup_logging(console_level=console_level, log_file=args.log_file)

    try:
        cpu_cls = load_implementation(args.implementation)
    except ImplementationImportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    selected = args.test or list(CONFORMANCE_TESTS.keys())
    log.info("Testing %s against %s", args.implementation, ", ".join(selected))

    for name in selected:
        try:
            run_test(cpu_cls, name)
        except ConformanceFailure as e:
            print(f"  ✗ {e}")
            return 1
        except RomError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        print(f"  ✓ {name}: passed")

    return 0


if __name__ == "__main__":
    sys.exit(main())
