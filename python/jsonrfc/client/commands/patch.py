import argparse
from typing import Any, Tuple, Type

from jsonrfc.client.command import (
    Command,
    CommandArgs,
    add_format_arguments,
    read_document,
    register_command,
    to_patch_error,
)
from jsonrfc.errors import DataParsingError
from jsonrfc.logging import get_logger
from jsonrfc.parsing import DataFormat
from jsonrfc.patch import Op, evaluate, operation_from_dict
from jsonrfc.pointer import fetch

logger = get_logger(__name__)


def failed_pointer(document: Any, op: Op) -> str:
    """Name the pointer a failed operation tripped over."""
    record = op.to_dict()
    # move and copy read their source before touching the target
    if "from" in record and fetch(document, record["from"]).is_err():
        return record["from"]
    return record["path"]


@register_command
class PatchCommand(Command):
    def __init__(self, namespace: argparse.Namespace) -> None:
        super().__init__(namespace)
        self.file: str = namespace.file
        self.patch_file: str = namespace.patch_file
        self.format: DataFormat = namespace.format

    @staticmethod
    def register_args_subparser(
        subparser: "argparse._SubParsersAction[argparse.ArgumentParser]",
    ) -> Tuple[argparse.ArgumentParser, "Type[Command]"]:
        patch = subparser.add_parser(
            "patch", help="Apply a JSON patch (RFC 6902) to a document and print the result."
        )
        patch.add_argument(
            "file",
            help="Path to the JSON or YAML document, '-' reads the standard input.",
            type=str,
        )
        patch.add_argument(
            "patch_file",
            help="Path to the list of patch operations in JSON or YAML format.",
            type=str,
        )
        add_format_arguments(patch, DataFormat.JSON)
        return patch, PatchCommand

    def execute(self, args: CommandArgs) -> None:
        document = read_document(self.file)
        records = read_document(self.patch_file)
        if not isinstance(records, list):
            records = [records]

        # map every record first, a malformed patch is rejected before anything is applied
        ops = []
        for i, record in enumerate(records):
            op = operation_from_dict(record)
            if op.is_err():
                raise DataParsingError(
                    f"operation {i} is not a valid JSON patch operation: {record}", self.patch_file
                )
            ops.append(op.unwrap())

        for i, op in enumerate(ops):
            res = evaluate(document, op)
            if res.is_err():
                raise to_patch_error(res.unwrap_err(), failed_pointer(document, op), i)
            document = res.unwrap()
        logger.notice("applied %d patch operations", len(ops))

        print(self.format.dict_dump(document, indent=4))
