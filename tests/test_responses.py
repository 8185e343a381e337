import pytest

from dockhand.responses import (
    ErrorResponse,
    GraphDriverData,
    IDResponse,
    ImageDeleteResponseItem,
    Port,
    ServiceUpdateResponse,
)


def test_error_response_reads_message():
    assert ErrorResponse.from_dict({"message": "boom"}).message == "boom"
    assert ErrorResponse.from_dict({}) == ErrorResponse()


def test_graph_driver_round_trip():
    original = GraphDriverData(data={"MergedDir": "/merged"}, name="overlay2")
    encoded = original.to_dict()
    assert set(encoded) == {"Data", "Name"}
    assert GraphDriverData.from_dict(encoded) == original


def test_id_response_uses_id_key():
    assert IDResponse.from_dict({"Id": "abc"}).id == "abc"


def test_image_delete_item_omits_empty_fields():
    assert ImageDeleteResponseItem().to_dict() == {}
    item = ImageDeleteResponseItem(untagged="busybox:latest")
    assert item.to_dict() == {"Untagged": "busybox:latest"}
    assert ImageDeleteResponseItem.from_dict(item.to_dict()) == item


def test_port_omits_empty_optional_fields():
    port = Port(private_port=5432, type="tcp")
    assert set(port.to_dict()) == {"PrivatePort", "Type"}


def test_port_round_trip():
    port = Port(private_port=5432, type="tcp", ip="0.0.0.0", public_port=5433)
    encoded = port.to_dict()
    assert encoded["IP"] == "0.0.0.0"
    assert Port.from_dict(encoded) == port


def test_port_out_of_range():
    with pytest.raises(ValueError):
        Port(private_port=-1, type="tcp")
    with pytest.raises(ValueError):
        Port.from_dict({"PrivatePort": 80, "PublicPort": 70000, "Type": "tcp"})


def test_service_update_warnings():
    response = ServiceUpdateResponse.from_dict({"Warnings": ["careful"]})
    assert response.warnings == ["careful"]
    assert ServiceUpdateResponse.from_dict({"Warnings": None}).warnings == []