import copy

import pytest

from jsonrfc.errors import ErrorKind
from jsonrfc.pointer import Direct, OnContainer, transform
from jsonrfc.utils.functional import Result


def test_transform_direct():
    assert transform({"foo": [1, 2, 3]}, "/foo/0", lambda x: x + 1) == Result.ok({"foo": [2, 2, 3]})


def test_transform_deep():
    doc = {"foo": {"bar": [15]}}
    assert transform(doc, "/foo/bar/0", lambda v: v * 100) == Result.ok({"foo": {"bar": [1500]}})


def test_transform_root():
    assert transform(5, "", lambda v: v * 2) == Result.ok(10)
    assert transform({"a": 1}, [], lambda v: [v]) == Result.ok([{"a": 1}])


def test_transform_on_container():
    doc = {"foo": {"bar": 3}}
    res = transform(doc, "/foo/bar", lambda c, k: {n: v for n, v in c.items() if n != k})
    assert res == Result.ok({"foo": {}})


def test_transform_on_container_receives_parent_and_segment():
    seen = []

    def update(container, segment):
        seen.append((container, segment))
        return container

    doc = {"foo": [1, {"bar": 2}]}
    assert transform(doc, "/foo/1/bar", update) == Result.ok(doc)
    assert seen == [({"bar": 2}, "bar")]

    seen.clear()
    assert transform(doc, "/foo/-", update).is_ok()
    assert seen == [([1, {"bar": 2}], "-")]


def test_transform_on_container_empty_path():
    assert transform({"a": 1}, "", lambda c, k: c) == Result.err(ErrorKind.INVALID_PATH)


def test_transform_explicit_wrappers():
    doc = {"foo": [1, 2]}
    assert transform(doc, "/foo/1", Direct(lambda v, scale=10: v * scale)) == Result.ok({"foo": [1, 20]})
    assert transform(doc, "/foo/0", OnContainer(lambda c, i: c[i:])) == Result.ok({"foo": [1, 2]})


def test_transform_callback_results():
    doc = {"foo": [1]}
    assert transform(doc, "/foo/0", lambda _: Result.err("a")) == Result.err("a")
    assert transform(doc, "/foo/0", lambda _: Result.ok(7)) == Result.ok({"foo": [7]})
    assert transform(doc, "/foo", lambda c, k: Result.err({"custom": k})) == Result.err({"custom": "foo"})


def test_transform_bad_pointer():
    assert transform({}, "bad/path", lambda x: x + 1) == Result.err(ErrorKind.INVALID_POINTER)


@pytest.mark.parametrize(
    "pointer",
    ["/foo/1/cat/8", "/foo/3", "/foo/-", "/bar", "/foo/0/x", "/foo/1/dog"],
)
def test_transform_bad_path(pointer):
    doc = {"foo": [0, {"cat": [0, 1, 2]}, 2]}
    assert transform(doc, pointer, lambda x: x + 1) == Result.err(ErrorKind.INVALID_PATH)


def test_transform_integer_key_in_object():
    assert transform({"0": 1}, "/0", lambda v: v + 1) == Result.ok({"0": 2})
    assert transform({"a": {"12": "x"}}, ["a", 12], lambda v: v * 2) == Result.ok({"a": {"12": "xx"}})


def test_transform_does_not_mutate():
    doc = {"foo": [1, {"bar": [1, 2]}], "baz": {"qux": 1}}
    original = copy.deepcopy(doc)

    res = transform(doc, "/foo/1/bar/0", lambda v: v + 100)
    assert res == Result.ok({"foo": [1, {"bar": [101, 2]}], "baz": {"qux": 1}})
    assert doc == original


def test_transform_shares_untouched_subtrees():
    doc = {"foo": [{"a": 1}, {"b": 2}], "baz": {"qux": 1}}
    new = transform(doc, "/foo/1/b", lambda v: v + 1).unwrap()

    assert new is not doc
    assert new["foo"] is not doc["foo"]
    assert new["foo"][1] is not doc["foo"][1]
    assert new["baz"] is doc["baz"]
    assert new["foo"][0] is doc["foo"][0]


def test_transform_failure_leaves_document_intact():
    doc = {"foo": [1, 2], "bar": {"x": 1}}
    original = copy.deepcopy(doc)
    assert transform(doc, "/foo/1", lambda _: Result.err("boom")) == Result.err("boom")
    assert doc == original


def test_transform_builtin_callables():
    doc = {"a": 5, "b": ["7"]}
    assert transform(doc, "/a", str) == Result.ok({"a": "5", "b": ["7"]})
    assert transform(doc, "/b/0", int) == Result.ok({"a": 5, "b": [7]})
    assert transform(doc, "/a", float) == Result.ok({"a": 5.0, "b": ["7"]})
    assert transform(doc, "/b", len) == Result.ok({"a": 5, "b": 1})


def test_transform_variadic_callable_is_direct():
    assert transform({"a": [1, 2]}, "/a", lambda *args: args) == Result.ok({"a": ([1, 2],)})
    assert transform({"a": 1}, "/a", lambda v, *rest: v + len(rest)) == Result.ok({"a": 1})
    assert transform({"a": 1}, "/a", lambda v=0: v + 1) == Result.ok({"a": 2})
    assert transform({"a": 1}, "/a", lambda v, scale=3: v * scale) == Result.ok({"a": 3})


def test_transform_invalid_callback():
    with pytest.raises(TypeError):
        transform({"a": 1}, "/a", lambda: 1)
    with pytest.raises(TypeError):
        transform({"a": 1}, "/a", lambda a, b, c: 1)
