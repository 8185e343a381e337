import pytest

from dockhand.operations import (
    ContainerChangeResponseItem,
    ContainerCreateCreatedBody,
    ContainerTopOKBody,
    ContainerUpdateOKBody,
    ContainerWaitOKBody,
    ContainerWaitOKBodyError,
)


def test_change_item_from_dict():
    item = ContainerChangeResponseItem.from_dict({"Kind": 2, "Path": "/etc/hosts"})
    assert item == ContainerChangeResponseItem(kind=2, path="/etc/hosts")


def test_change_item_defaults():
    item = ContainerChangeResponseItem.from_dict({})
    assert (item.kind, item.path) == (0, "")


@pytest.mark.parametrize("kind", [-1, 256])
def test_change_item_kind_out_of_range(kind):
    with pytest.raises(ValueError):
        ContainerChangeResponseItem.from_dict({"Kind": kind, "Path": "/"})


def test_create_body_from_dict():
    body = ContainerCreateCreatedBody.from_dict({"Id": "abc123", "Warnings": ["low memory"]})
    assert body.id == "abc123"
    assert body.warnings == ["low memory"]


def test_create_body_null_warnings():
    body = ContainerCreateCreatedBody.from_dict({"Id": "abc123", "Warnings": None})
    assert body.warnings == []


def test_top_body_from_dict_copies_rows():
    rows = [["root", "1", "sh"], ["root", "7", "sleep"]]
    body = ContainerTopOKBody.from_dict({"Processes": rows, "Titles": ["UID", "PID", "CMD"]})
    assert body.processes == rows
    assert body.titles == ["UID", "PID", "CMD"]
    rows[0].append("extra")
    assert body.processes[0] == ["root", "1", "sh"]


def test_update_body_from_dict():
    body = ContainerUpdateOKBody.from_dict({"Warnings": ["w1", "w2"]})
    assert body.warnings == ["w1", "w2"]


def test_wait_body_with_error():
    body = ContainerWaitOKBody.from_dict({"Error": {"Message": "boom"}, "StatusCode": 137})
    assert body.error == ContainerWaitOKBodyError(message="boom")
    assert body.status_code == 137


def test_wait_body_without_error():
    body = ContainerWaitOKBody.from_dict({"Error": None, "StatusCode": 0})
    assert body.error is None
    assert body.status_code == 0


def test_wait_body_empty_error_message():
    body = ContainerWaitOKBody.from_dict({"Error": {}, "StatusCode": 1})
    assert body.error == ContainerWaitOKBodyError(message="")