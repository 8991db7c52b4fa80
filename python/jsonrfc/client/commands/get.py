import argparse
from typing import Tuple, Type

from jsonrfc.client.command import (
    Command,
    CommandArgs,
    add_format_arguments,
    read_document,
    register_command,
    to_patch_error,
)
from jsonrfc.parsing import DataFormat
from jsonrfc.pointer import fetch


@register_command
class GetCommand(Command):
    def __init__(self, namespace: argparse.Namespace) -> None:
        super().__init__(namespace)
        self.path: str = namespace.path
        self.file: str = namespace.file
        self.format: DataFormat = namespace.format

    @staticmethod
    def register_args_subparser(
        subparser: "argparse._SubParsersAction[argparse.ArgumentParser]",
    ) -> Tuple[argparse.ArgumentParser, "Type[Command]"]:
        get = subparser.add_parser("get", help="Print the value a JSON pointer refers to.")
        path_help = "Optional, JSON pointer (RFC 6901) to the value. By default, the entire document is selected."

        get.add_argument("-p", "--path", help=path_help, action="store", type=str, default="")

        get.add_argument(
            "file",
            help="Path to the JSON or YAML document, '-' reads the standard input.",
            type=str,
        )
        add_format_arguments(get, DataFormat.JSON)
        return get, GetCommand

    def execute(self, args: CommandArgs) -> None:
        document = read_document(self.file)

        res = fetch(document, self.path)
        if res.is_err():
            raise to_patch_error(res.unwrap_err(), self.path)
        print(self.format.dict_dump(res.unwrap(), indent=4))
