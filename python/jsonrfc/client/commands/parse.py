import argparse
import json
from typing import Tuple, Type

from jsonrfc.client.command import Command, CommandArgs, register_command, to_patch_error
from jsonrfc.pointer import parse


@register_command
class ParseCommand(Command):
    def __init__(self, namespace: argparse.Namespace) -> None:
        super().__init__(namespace)
        self.pointer: str = namespace.pointer

    @staticmethod
    def register_args_subparser(
        subparser: "argparse._SubParsersAction[argparse.ArgumentParser]",
    ) -> Tuple[argparse.ArgumentParser, "Type[Command]"]:
        parse_ = subparser.add_parser("parse", help="Print the path segments of a JSON pointer as a JSON list.")
        parse_.add_argument("pointer", help="JSON pointer (RFC 6901).", type=str)
        return parse_, ParseCommand

    def execute(self, args: CommandArgs) -> None:
        res = parse(self.pointer)
        if res.is_err():
            raise to_patch_error(res.unwrap_err(), self.pointer)
        print(json.dumps(list(res.unwrap())))
