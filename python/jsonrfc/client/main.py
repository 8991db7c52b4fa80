import argparse
import importlib
import os
import sys
from typing import List, Optional

from jsonrfc.constants import CLIENT_NAME, VERSION
from jsonrfc.logging import LOG_LEVELS, LogTarget, start_logging

from .command import CommandArgs, install_commands_parsers


def auto_import_commands() -> None:
    prefix = f"{'.'.join(__name__.split('.')[:-1])}.commands."
    for module_name in sorted(os.listdir(os.path.dirname(__file__) + "/commands")):
        if module_name[-3:] != ".py" or module_name == "__init__.py":
            continue
        importlib.import_module(f"{prefix}{module_name[:-3]}")


def create_main_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        CLIENT_NAME,
        description="Command-line utility to evaluate JSON pointers (RFC 6901)"
        " and apply JSON patches (RFC 6902) to JSON or YAML documents.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=VERSION,
        help="Get version",
    )
    parser.add_argument(
        "--loglevel",
        default="warning",
        choices=LOG_LEVELS,
        help="Logging level.",
    )
    parser.add_argument(
        "--logtarget",
        default=LogTarget.STDERR.value,
        choices=[t.value for t in LogTarget],
        help="Logging target.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    auto_import_commands()
    parser = create_main_argument_parser()
    install_commands_parsers(parser)

    namespace = parser.parse_args(sys.argv[1:] if argv is None else argv)
    if not hasattr(namespace, "command"):
        parser.print_help()
        sys.exit(1)

    start_logging(namespace.loglevel, namespace.logtarget)

    args = CommandArgs(namespace, parser)
    command = args.command(namespace)
    command.run(args)
