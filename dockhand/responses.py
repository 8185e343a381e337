"""Small response bodies returned by the engine API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ErrorResponse:
    """An error reported by the engine."""

    message: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ErrorResponse:
        return cls(message=data.get("message") or "")


@dataclass
class GraphDriverData:
    """Information about a container's graph driver."""

    data: dict[str, str] = field(default_factory=dict)
    name: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GraphDriverData:
        return cls(data=dict(data.get("Data") or {}), name=data.get("Name") or "")

    def to_dict(self) -> dict[str, Any]:
        return {"Data": dict(self.data), "Name": self.name}


@dataclass
class IDResponse:
    """Response to a call that returns only an id."""

    id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IDResponse:
        return cls(id=data.get("Id") or "")


@dataclass
class ImageDeleteResponseItem:
    """One image deleted or untagged by an image removal."""

    deleted: str = ""
    untagged: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ImageDeleteResponseItem:
        return cls(deleted=data.get("Deleted") or "", untagged=data.get("Untagged") or "")

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.deleted:
            result["Deleted"] = self.deleted
        if self.untagged:
            result["Untagged"] = self.untagged
        return result


def _check_port(name: str, value: int) -> None:
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"{name} {value} is out of range for a port")


@dataclass
class Port:
    """An open port on a container."""

    private_port: int = 0
    type: str = ""
    ip: str = ""
    public_port: int = 0

    def __post_init__(self) -> None:
        _check_port("private port", self.private_port)
        _check_port("public port", self.public_port)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Port:
        return cls(
            private_port=int(data.get("PrivatePort") or 0),
            type=data.get("Type") or "",
            ip=data.get("IP") or "",
            public_port=int(data.get("PublicPort") or 0),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.ip:
            result["IP"] = self.ip
        result["PrivatePort"] = self.private_port
        if self.public_port:
            result["PublicPort"] = self.public_port
        result["Type"] = self.type
        return result


@dataclass
class ServiceUpdateResponse:
    """Response to a service update."""

    warnings: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ServiceUpdateResponse:
        return cls(warnings=list(data.get("Warnings") or []))