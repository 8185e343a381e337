"""Namespace, isolation, restart and wait modes of a container."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


def _container_part(value: str) -> str | None:
    """Return the name after ``container:``, or None if ``value`` has no such prefix."""
    kind, sep, rest = value.partition(":")
    if sep and kind == "container":
        return rest
    return None


def _after_colon(value: str) -> str:
    _, sep, rest = value.partition(":")
    return rest if sep else ""


class Isolation(str):
    """Isolation technology of a container, with the rules of a Linux daemon."""

    __slots__ = ()

    def is_default(self) -> bool:
        """Whether this is the daemon's default isolation."""
        return self.lower() == "default" or self == ""

    def is_hyperv(self) -> bool:
        """Whether a Hyper-V partition is used."""
        return self.lower() == "hyperv"

    def is_process(self) -> bool:
        """Whether process isolation is used."""
        return self.lower() == "process"

    def is_valid(self) -> bool:
        """Whether the daemon accepts this isolation."""
        return self.is_default()


class WindowsIsolation(Isolation):
    """Isolation technology of a container, with the rules of a Windows daemon."""

    __slots__ = ()

    def is_valid(self) -> bool:
        return self.is_default() or self.is_hyperv() or self.is_process()


ISOLATION_EMPTY = Isolation("")
ISOLATION_DEFAULT = Isolation("default")
ISOLATION_PROCESS = Isolation("process")
ISOLATION_HYPERV = Isolation("hyperv")


class IpcMode(str):
    """IPC namespace of a container."""

    __slots__ = ()

    def is_private(self) -> bool:
        return self == "private"

    def is_host(self) -> bool:
        return self == "host"

    def is_shareable(self) -> bool:
        return self == "shareable"

    def is_container(self) -> bool:
        return _container_part(self) is not None

    def is_none(self) -> bool:
        return self == "none"

    def is_empty(self) -> bool:
        return self == ""

    def valid(self) -> bool:
        return (
            self.is_empty()
            or self.is_none()
            or self.is_private()
            or self.is_host()
            or self.is_shareable()
            or self.is_container()
        )

    def container(self) -> str:
        """Name of the container whose IPC namespace is shared, or ``""``."""
        return _container_part(self) or ""


class NetworkMode(str):
    """Network stack of a container, with the rules of a Linux daemon."""

    __slots__ = ()

    def is_none(self) -> bool:
        return self == "none"

    def is_default(self) -> bool:
        return self == "default"

    def is_private(self) -> bool:
        return not (self.is_host() or self.is_container())

    def is_container(self) -> bool:
        return _container_part(self) is not None

    def connected_container(self) -> str:
        """Id of the container whose network is joined, or ``""``."""
        return _after_colon(self)

    def user_defined(self) -> str:
        """The network name if it is user-defined, else ``""``."""
        return str(self) if self.is_user_defined() else ""

    def is_bridge(self) -> bool:
        return self == "bridge"

    def is_host(self) -> bool:
        return self == "host"

    def is_user_defined(self) -> bool:
        return not (
            self.is_default()
            or self.is_bridge()
            or self.is_host()
            or self.is_none()
            or self.is_container()
        )

    def network_name(self) -> str:
        """Name of the network stack."""
        if self.is_bridge():
            return "bridge"
        if self.is_host():
            return "host"
        if self.is_container():
            return "container"
        if self.is_none():
            return "none"
        if self.is_default():
            return "default"
        if self.is_user_defined():
            return self.user_defined()
        return ""


class WindowsNetworkMode(NetworkMode):
    """Network stack of a container, with the rules of a Windows daemon."""

    __slots__ = ()

    def is_bridge(self) -> bool:
        return self == "nat"

    def is_host(self) -> bool:
        return False

    def is_user_defined(self) -> bool:
        return not (
            self.is_default() or self.is_none() or self.is_bridge() or self.is_container()
        )

    def network_name(self) -> str:
        if self.is_default():
            return "default"
        if self.is_bridge():
            return "nat"
        if self.is_none():
            return "none"
        if self.is_container():
            return "container"
        if self.is_user_defined():
            return self.user_defined()
        return ""


class UsernsMode(str):
    """User namespace of a container."""

    __slots__ = ()

    def is_host(self) -> bool:
        return self == "host"

    def is_private(self) -> bool:
        return not self.is_host()

    def valid(self) -> bool:
        return self.split(":")[0] in ("", "host")


class CgroupSpec(str):
    """Cgroup used by a container."""

    __slots__ = ()

    def is_container(self) -> bool:
        return _container_part(self) is not None

    def valid(self) -> bool:
        return self.is_container() or self == ""

    def container(self) -> str:
        """Name of the container whose cgroup is used, or ``""``."""
        return _after_colon(self)


class UTSMode(str):
    """UTS namespace of a container."""

    __slots__ = ()

    def is_private(self) -> bool:
        return not self.is_host()

    def is_host(self) -> bool:
        return self == "host"

    def valid(self) -> bool:
        return self.split(":")[0] in ("", "host")


class PidMode(str):
    """PID namespace of a container."""

    __slots__ = ()

    def is_private(self) -> bool:
        return not (self.is_host() or self.is_container())

    def is_host(self) -> bool:
        return self == "host"

    def is_container(self) -> bool:
        return _container_part(self) is not None

    def valid(self) -> bool:
        parts = self.split(":")
        mode = parts[0]
        if mode in ("", "host"):
            return True
        if mode == "container":
            return len(parts) == 2 and parts[1] != ""
        return False

    def container(self) -> str:
        """Name of the container whose PID namespace is used, or ``""``."""
        return _after_colon(self)


@dataclass
class RestartPolicy:
    """Restart policy of a container."""

    name: str = ""
    maximum_retry_count: int = 0

    def is_none(self) -> bool:
        return self.name in ("no", "")

    def is_always(self) -> bool:
        return self.name == "always"

    def is_on_failure(self) -> bool:
        return self.name == "on-failure"

    def is_unless_stopped(self) -> bool:
        return self.name == "unless-stopped"

    def is_same(self, other: RestartPolicy) -> bool:
        return (
            self.name == other.name
            and self.maximum_retry_count == other.maximum_retry_count
        )


class LogMode(str, Enum):
    """How log messages are handled when they pile up."""

    UNSET = ""
    BLOCKING = "blocking"
    NON_BLOCK = "non-blocking"


class WaitCondition(str, Enum):
    """Container state to wait for."""

    NOT_RUNNING = "not-running"
    NEXT_EXIT = "next-exit"
    REMOVED = "removed"