import json
from enum import Enum, auto
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml
from yaml.constructor import ConstructorError
from yaml.nodes import MappingNode

from .errors import DataParsingError, DataSerializationError


# custom hook for 'json.loads()' to detect duplicate keys in data
# source: https://stackoverflow.com/q/14902299/12858520
def _json_raise_duplicates(pairs: List[Tuple[Any, Any]]) -> Optional[Any]:
    dict_out: Dict[Any, Any] = {}
    for key, val in pairs:
        if key in dict_out:
            raise DataParsingError(f"duplicate attribute key detected: {key}")
        dict_out[key] = val
    return dict_out


class _RaiseDuplicatesLoader(yaml.SafeLoader):
    """
    Custom YAML Loader for 'yaml.load()'.
    - detects duplicate keys in the data
    - rejects keys that are not strings, documents are addressed by JSON pointers
    - keeps timestamps as the text they were written as, JSON has no date type
    - rejects binary scalars
    """

    # custom constructor to detect duplicate keys in data
    # source: https://gist.github.com/pypt/94d747fe5180851196eb
    def construct_mapping(self, node: Union[MappingNode, Any], deep: bool = False) -> Dict[Any, Any]:
        if not isinstance(node, MappingNode):
            raise ConstructorError(None, None, f"expected a mapping node, but found {node.id}", node.start_mark)
        mapping: Dict[Any, Any] = {}
        for key_node, value_node in node.value:
            key = self.construct_object(key_node, deep=deep)  # type: ignore
            if not isinstance(key, str):
                raise DataParsingError(f"non-string key '{key}' detected: {key_node.start_mark}")

            # check for duplicate keys
            if key in mapping:
                raise DataParsingError(f"duplicate key detected: {key_node.start_mark}")
            value = self.construct_object(value_node, deep=deep)  # type: ignore
            mapping[key] = value
        return mapping

    def construct_timestamp_text(self, node: Any) -> str:
        return str(self.construct_scalar(node))

    def construct_binary_rejected(self, node: Any) -> Any:
        raise DataParsingError(f"binary value cannot be part of a JSON document: {node.start_mark}")


_RaiseDuplicatesLoader.add_constructor(
    "tag:yaml.org,2002:timestamp", _RaiseDuplicatesLoader.construct_timestamp_text
)
_RaiseDuplicatesLoader.add_constructor("tag:yaml.org,2002:binary", _RaiseDuplicatesLoader.construct_binary_rejected)


class DataFormat(Enum):
    YAML = auto()
    JSON = auto()

    def parse_to_dict(self, text: str) -> Any:
        if self is DataFormat.YAML:
            # _RaiseDuplicatesLoader extends yaml.SafeLoader, so this should be safe
            # https://python.land/data-processing/python-yaml#PyYAML_safe_load_vs_load
            return yaml.load(text, Loader=_RaiseDuplicatesLoader)  # type: ignore
        if self is DataFormat.JSON:
            return json.loads(text, object_pairs_hook=_json_raise_duplicates)
        raise NotImplementedError(f"Parsing of format '{self}' is not implemented")

    def dict_dump(self, data: Any, indent: Optional[int] = None) -> str:
        if self is DataFormat.YAML:
            try:
                return yaml.safe_dump(data, indent=indent)  # type: ignore
            except yaml.YAMLError as e:
                raise DataSerializationError(str(e)) from e
        if self is DataFormat.JSON:
            # NaN and Infinity are not valid JSON, although YAML can express them
            try:
                return json.dumps(data, indent=indent, allow_nan=False)
            except (TypeError, ValueError) as e:
                raise DataSerializationError(str(e)) from e
        raise NotImplementedError(f"Exporting to '{self}' format is not implemented")


def parse_yaml(data: str) -> Any:
    return DataFormat.YAML.parse_to_dict(data)


def parse_json(data: str) -> Any:
    return DataFormat.JSON.parse_to_dict(data)


def try_to_parse(data: str) -> Any:
    """Attempt to parse the data as a JSON or YAML string."""

    try:
        return parse_json(data)
    except json.JSONDecodeError as je:
        try:
            return parse_yaml(data)
        except yaml.YAMLError as ye:
            # We do not raise-from here because there are two possible causes
            # and we may not know which one is the actual one.
            raise DataParsingError(  # pylint: disable=raise-missing-from
                f"failed to parse data, JSON: {je}, YAML: {ye}"
            ) from ye
