import pytest

from dockhand.filters import (
    Args,
    BadFormatError,
    InvalidFilterError,
    KeyValuePair,
    arg,
    from_json,
    from_param,
    parse_flag,
    to_json,
    to_param,
    to_param_with_version,
)


def make(fields):
    return Args(*(arg(k, v) for k, values in fields.items() for v in values))


def test_arg_builds_pair():
    assert arg("label", "x") == KeyValuePair("label", "x")


def test_parse_args():
    args = Args()
    for flag in ["created=today", "image.name=ubuntu*", "image.name=*untu"]:
        args = parse_flag(flag, args)
    assert len(args.get("created")) == 1
    assert len(args.get("image.name")) == 2


def test_parse_args_edge_case():
    args = parse_flag("", Args())
    assert len(args) == 0
    with pytest.raises(BadFormatError):
        parse_flag("anything", args)


def test_parse_flag_trims_and_lowercases():
    args = parse_flag(" Created = today ", Args())
    assert args.get("created") == ["today"]


def test_to_json():
    a = make({"created": ["today"], "image.name": ["ubuntu*", "*untu"]})
    encoded = to_json(a)
    assert from_json(encoded) == a
    assert to_param(a) == encoded


def test_to_param_with_version():
    a = make({"created": ["today"], "image.name": ["ubuntu*", "*untu"]})
    str1 = to_param_with_version("1.21", a)
    str2 = to_param_with_version("1.22", a)
    assert str1 in (
        '{"created":["today"],"image.name":["*untu","ubuntu*"]}',
        '{"created":["today"],"image.name":["ubuntu*","*untu"]}',
    )
    assert str2 in (
        '{"created":{"today":true},"image.name":{"*untu":true,"ubuntu*":true}}',
        '{"created":{"today":true},"image.name":{"ubuntu*":true,"*untu":true}}',
    )


@pytest.mark.parametrize(
    "invalid", ["anything", "['a','list']", "{'key': 'value'}", '{"key": "value"}']
)
def test_from_json_invalid(invalid):
    with pytest.raises(ValueError):
        from_json(invalid)


@pytest.mark.parametrize(
    "fields, texts",
    [
        ({"key": ["value"]}, ['{"key": ["value"]}', '{"key": {"value": true}}']),
        (
            {"key": ["value1", "value2"]},
            ['{"key": ["value1", "value2"]}', '{"key": {"value1": true, "value2": true}}'],
        ),
        (
            {"key1": ["value1"], "key2": ["value2"]},
            [
                '{"key1": ["value1"], "key2": ["value2"]}',
                '{"key1": {"value1": true}, "key2": {"value2": true}}',
            ],
        ),
    ],
)
def test_from_json_valid(fields, texts):
    expected = make(fields)
    for text in texts:
        args = from_json(text)
        assert len(args) == len(expected)
        for key, values in fields.items():
            assert sorted(args.get(key)) == sorted(values)
        assert from_param(text) == expected


def test_empty():
    a = Args()
    encoded = to_json(a)
    assert encoded == ""
    assert len(from_json(encoded)) == len(a)


def test_match_kv_list_empty_sources():
    assert Args().match_kv_list("created", {})
    assert not make({"created": ["today"]}).match_kv_list("created", {})


def test_match_kv_list():
    sources = {"key1": "value1", "key2": "value2", "key3": "value3"}
    matches = [
        (Args(), "field"),
        (make({"created": ["today"], "labels": ["key1"]}), "labels"),
        (make({"created": ["today"], "labels": ["key1=value1"]}), "labels"),
    ]
    for args, field in matches:
        assert args.match_kv_list(field, sources)
    differs = [
        (make({"created": ["today"]}), "created"),
        (make({"created": ["today"], "labels": ["key4"]}), "labels"),
        (make({"created": ["today"], "labels": ["key1=value3"]}), "labels"),
    ]
    for args, field in differs:
        assert not args.match_kv_list(field, sources)


def test_match_kv_list_example():
    args = Args(arg("label", "image=foo"), arg("label", "state=running"))
    assert args.match_kv_list("bogus", None)
    assert not args.match_kv_list("label", None)
    assert args.match_kv_list("label", {"image": "foo", "state": "running"})
    assert not args.match_kv_list("label", {"image": "other"})


def test_match():
    source = "today"
    matches = [
        (Args(), "field"),
        (make({"created": ["today"]}), "today"),
        (make({"created": ["to*"]}), "created"),
        (make({"created": ["to(.*)"]}), "created"),
        (make({"created": ["tod"]}), "created"),
        (make({"created": ["anything", "to*"]}), "created"),
    ]
    for args, field in matches:
        assert args.match(field, source), field
    differs = [
        (make({"created": ["tomorrow"]}), "created"),
        (make({"created": ["to(day"]}), "created"),
        (make({"created": ["tom(.*)"]}), "created"),
        (make({"created": ["tom"]}), "created"),
        (make({"created": ["today1"], "labels": ["today"]}), "created"),
    ]
    for args, field in differs:
        assert not args.match(field, source), field


def test_add():
    f = Args()
    f.add("status", "running")
    assert f.get("status") == ["running"]
    f.add("status", "paused")
    assert sorted(f.get("status")) == ["paused", "running"]


def test_del():
    f = Args()
    f.add("status", "running")
    f.delete("status", "running")
    assert "running" not in f.get("status")
    assert "status" not in f


def test_len():
    f = Args()
    assert len(f) == 0
    f.add("status", "running")
    assert len(f) == 1


def test_exact_match():
    f = Args()
    assert f.exact_match("status", "running")
    f.add("status", "running")
    f.add("status", "pause*")
    assert f.exact_match("status", "running")
    assert not f.exact_match("status", "paused")


def test_only_one_exact_match():
    f = Args()
    assert f.unique_exact_match("status", "running")
    f.add("status", "running")
    assert f.unique_exact_match("status", "running")
    assert not f.unique_exact_match("status", "paused")
    f.add("status", "pause")
    assert not f.unique_exact_match("status", "running")


def test_contains():
    f = Args()
    assert not f.contains("status")
    assert "status" not in f
    f.add("status", "running")
    assert f.contains("status")
    assert "status" in f


def test_include():
    f = Args()
    assert not f.include("status")
    f.add("status", "running")
    assert f.include("status")


def test_validate():
    f = Args()
    f.add("status", "running")
    valid = {"status": True, "dangling": True}
    f.validate(valid)
    assert f.get("status") == ["running"]
    f.add("bogus", "running")
    with pytest.raises(InvalidFilterError) as info:
        f.validate(valid)
    assert info.value.name == "bogus"
    assert str(info.value) == "Invalid filter 'bogus'"


def test_walk_values():
    f = Args()
    f.add("status", "running")
    f.add("status", "paused")
    seen = []
    f.walk_values("status", seen.append)
    assert sorted(seen) == ["paused", "running"]

    def fail(value):
        raise RuntimeError("return")

    with pytest.raises(RuntimeError):
        f.walk_values("status", fail)

    calls = []
    f.walk_values("foo", calls.append)
    assert calls == []


@pytest.mark.parametrize(
    "source, expected",
    [("foo", True), ("foobar", True), ("barfoo", False), ("bar", False)],
)
def test_fuzzy_match(source, expected):
    f = Args()
    f.add("container", "foo")
    assert f.fuzzy_match("container", source) is expected