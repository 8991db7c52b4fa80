import pytest
from pytest import raises

from jsonrfc.errors import DataParsingError, DataSerializationError
from jsonrfc.parsing import DataFormat, parse_json, parse_yaml, try_to_parse


def test_parse_json():
    assert parse_json('{"a": [1, 2, {"b": null}]}') == {"a": [1, 2, {"b": None}]}


def test_parse_yaml():
    assert parse_yaml("a:\n  - 1\n  - b: ~\n") == {"a": [1, {"b": None}]}


@pytest.mark.parametrize(
    "data,res",
    [
        ('{"key": "value"}', {"key": "value"}),
        ("key: value", {"key": "value"}),
        ("[1, 2]", [1, 2]),
        ("- 1\n- 2\n", [1, 2]),
    ],
)
def test_try_to_parse(data, res):
    assert try_to_parse(data) == res


@pytest.mark.parametrize(
    "data",
    [
        '{"key": 1, "key": 2}',
        "key: 1\nkey: 2\n",
        "outer:\n  key: 1\n  key: 2\n",
        "1: value\n",
        "{",
    ],
)
def test_try_to_parse_invalid(data):
    with raises(DataParsingError):
        try_to_parse(data)


def test_dict_dump():
    data = {"a": [1, "x"]}
    assert DataFormat.JSON.dict_dump(data) == '{"a": [1, "x"]}'
    assert DataFormat.YAML.parse_to_dict(DataFormat.YAML.dict_dump(data)) == data


def test_yaml_timestamps_stay_text():
    data = parse_yaml("when: 2020-01-01\nat: 2001-12-14t21:59:43.10-05:00\n2021-02-03: key\n")
    assert data == {"when": "2020-01-01", "at": "2001-12-14t21:59:43.10-05:00", "2021-02-03": "key"}
    assert DataFormat.JSON.dict_dump(data) == (
        '{"when": "2020-01-01", "at": "2001-12-14t21:59:43.10-05:00", "2021-02-03": "key"}'
    )


def test_yaml_binary_rejected():
    with raises(DataParsingError):
        parse_yaml("data: !!binary aGVsbG8=\n")


@pytest.mark.parametrize("data", [{"a": {1, 2}}, {"a": float("nan")}, {"a": float("inf")}, {"a": object()}])
def test_json_dump_invalid(data):
    with raises(DataSerializationError):
        DataFormat.JSON.dict_dump(data)


def test_yaml_dump_invalid():
    with raises(DataSerializationError):
        DataFormat.YAML.dict_dump({"a": object()})
