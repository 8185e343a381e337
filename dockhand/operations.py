"""Response bodies of container operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ContainerChangeResponseItem:
    """One filesystem change reported for a container."""

    kind: int = 0
    path: str = ""

    def __post_init__(self) -> None:
        if not 0 <= self.kind <= 0xFF:
            raise ValueError(f"change kind {self.kind} does not fit in a byte")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ContainerChangeResponseItem:
        return cls(kind=int(data.get("Kind") or 0), path=data.get("Path") or "")


@dataclass
class ContainerCreateCreatedBody:
    """Response to creating a container."""

    id: str = ""
    warnings: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ContainerCreateCreatedBody:
        return cls(id=data.get("Id") or "", warnings=list(data.get("Warnings") or []))


@dataclass
class ContainerTopOKBody:
    """Processes running in a container, with the ps column titles."""

    processes: list[list[str]] = field(default_factory=list)
    titles: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ContainerTopOKBody:
        return cls(
            processes=[list(row or []) for row in data.get("Processes") or []],
            titles=list(data.get("Titles") or []),
        )


@dataclass
class ContainerUpdateOKBody:
    """Response to updating a container."""

    warnings: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ContainerUpdateOKBody:
        return cls(warnings=list(data.get("Warnings") or []))


@dataclass
class ContainerWaitOKBodyError:
    """Error reported while waiting for a container."""

    message: str = ""


@dataclass
class ContainerWaitOKBody:
    """Response to waiting for a container."""

    error: ContainerWaitOKBodyError | None = None
    status_code: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ContainerWaitOKBody:
        raw_error = data.get("Error")
        error = (
            None
            if raw_error is None
            else ContainerWaitOKBodyError(message=raw_error.get("Message") or "")
        )
        return cls(error=error, status_code=int(data.get("StatusCode") or 0))