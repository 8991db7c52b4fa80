import argparse
import sys
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple, Type, TypeVar

from jsonrfc.errors import BaseJsonRfcError, DataParsingError, ErrorKind, PatchError
from jsonrfc.logging import get_logger
from jsonrfc.parsing import DataFormat, try_to_parse

T = TypeVar("T", bound=Type["Command"])

logger = get_logger(__name__)

_registered_commands: List[Type["Command"]] = []


def register_command(cls: T) -> T:
    _registered_commands.append(cls)
    return cls


def install_commands_parsers(parser: argparse.ArgumentParser) -> None:
    subparsers = parser.add_subparsers(help="command type")
    for command in _registered_commands:
        subparser, typ = command.register_args_subparser(subparsers)
        subparser.set_defaults(command=typ, subparser=subparser)


def add_format_arguments(parser: argparse.ArgumentParser, default: DataFormat) -> None:
    parser.set_defaults(format=default)
    formats = parser.add_mutually_exclusive_group()
    formats.add_argument(
        "--json",
        help="Print the output data in JSON format." + (" Default." if default is DataFormat.JSON else ""),
        const=DataFormat.JSON,
        action="store_const",
        dest="format",
    )
    formats.add_argument(
        "--yaml",
        help="Print the output data in YAML format." + (" Default." if default is DataFormat.YAML else ""),
        const=DataFormat.YAML,
        action="store_const",
        dest="format",
    )


def read_document(file: str) -> Any:
    """Read a JSON or YAML document from a file, '-' reads the standard input."""
    try:
        if file == "-":
            raw = sys.stdin.read()
        else:
            with open(file, "r", encoding="utf8") as f:
                raw = f.read()
    except OSError as e:
        raise DataParsingError(f"failed to read '{file}': {e}") from e
    logger.debug("read %d characters from '%s'", len(raw), file)
    return try_to_parse(raw)


def to_patch_error(reason: Any, pointer: str = "", step: Optional[int] = None) -> PatchError:
    if isinstance(reason, ErrorKind):
        reason = reason.value.replace("_", " ")
    return PatchError(reason, pointer, step)


class CommandArgs:
    def __init__(self, namespace: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
        self.namespace = namespace
        self.parser = parser
        self.subparser: argparse.ArgumentParser = namespace.subparser
        self.command: Type["Command"] = namespace.command


class Command(ABC):
    @staticmethod
    @abstractmethod
    def register_args_subparser(
        subparser: "argparse._SubParsersAction[argparse.ArgumentParser]",
    ) -> Tuple[argparse.ArgumentParser, "Type[Command]"]:
        raise NotImplementedError()

    @abstractmethod
    def __init__(self, namespace: argparse.Namespace) -> None:  # pylint: disable=[unused-argument]
        super().__init__()

    @abstractmethod
    def execute(self, args: CommandArgs) -> None:
        raise NotImplementedError()

    def run(self, args: CommandArgs) -> None:
        try:
            self.execute(args)
        except BaseJsonRfcError as e:
            print(e, file=sys.stderr)
            sys.exit(1)
