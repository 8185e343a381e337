"""Network settings of containers and networks."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass
class Address:
    """An IP address with its prefix length."""

    addr: str = ""
    prefix_len: int = 0


@dataclass
class IPAMConfig:
    """One IP address management configuration."""

    subnet: str = ""
    ip_range: str = ""
    gateway: str = ""
    aux_address: dict[str, str] | None = None


@dataclass
class IPAM:
    """IP address management of a network."""

    driver: str = ""
    options: dict[str, str] | None = None
    config: list[IPAMConfig] | None = None


@dataclass
class EndpointIPAMConfig:
    """IP address management configuration of an endpoint."""

    ipv4_address: str = ""
    ipv6_address: str = ""
    link_local_ips: list[str] | None = None

    def copy(self) -> EndpointIPAMConfig:
        """Return a copy with its own list of link-local addresses."""
        return replace(self, link_local_ips=list(self.link_local_ips or []))

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.ipv4_address:
            out["IPv4Address"] = self.ipv4_address
        if self.ipv6_address:
            out["IPv6Address"] = self.ipv6_address
        if self.link_local_ips:
            out["LinkLocalIPs"] = list(self.link_local_ips)
        return out

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> EndpointIPAMConfig:
        ips = data.get("LinkLocalIPs")
        return cls(
            ipv4_address=data.get("IPv4Address") or "",
            ipv6_address=data.get("IPv6Address") or "",
            link_local_ips=None if ips is None else list(ips),
        )


@dataclass
class PeerInfo:
    """One peer of an overlay network."""

    name: str = ""
    ip: str = ""


def _optional_list(value: Any) -> list[str] | None:
    return None if value is None else list(value)


@dataclass
class EndpointSettings:
    """Details of a network endpoint."""

    ipam_config: EndpointIPAMConfig | None = None
    links: list[str] | None = None
    aliases: list[str] | None = None
    network_id: str = ""
    endpoint_id: str = ""
    gateway: str = ""
    ip_address: str = ""
    ip_prefix_len: int = 0
    ipv6_gateway: str = ""
    global_ipv6_address: str = ""
    global_ipv6_prefix_len: int = 0
    mac_address: str = ""
    driver_opts: dict[str, str] | None = None

    def copy(self) -> EndpointSettings:
        """Return a copy with its own IPAM config, links and aliases."""
        return replace(
            self,
            ipam_config=None if self.ipam_config is None else self.ipam_config.copy(),
            links=_optional_list(self.links),
            aliases=_optional_list(self.aliases),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "IPAMConfig": None if self.ipam_config is None else self.ipam_config._to_dict(),
            "Links": _optional_list(self.links),
            "Aliases": _optional_list(self.aliases),
            "NetworkID": self.network_id,
            "EndpointID": self.endpoint_id,
            "Gateway": self.gateway,
            "IPAddress": self.ip_address,
            "IPPrefixLen": self.ip_prefix_len,
            "IPv6Gateway": self.ipv6_gateway,
            "GlobalIPv6Address": self.global_ipv6_address,
            "GlobalIPv6PrefixLen": self.global_ipv6_prefix_len,
            "MacAddress": self.mac_address,
            "DriverOpts": None if self.driver_opts is None else dict(self.driver_opts),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EndpointSettings:
        ipam = data.get("IPAMConfig")
        opts = data.get("DriverOpts")
        return cls(
            ipam_config=None if ipam is None else EndpointIPAMConfig._from_dict(ipam),
            links=_optional_list(data.get("Links")),
            aliases=_optional_list(data.get("Aliases")),
            network_id=data.get("NetworkID") or "",
            endpoint_id=data.get("EndpointID") or "",
            gateway=data.get("Gateway") or "",
            ip_address=data.get("IPAddress") or "",
            ip_prefix_len=int(data.get("IPPrefixLen") or 0),
            ipv6_gateway=data.get("IPv6Gateway") or "",
            global_ipv6_address=data.get("GlobalIPv6Address") or "",
            global_ipv6_prefix_len=int(data.get("GlobalIPv6PrefixLen") or 0),
            mac_address=data.get("MacAddress") or "",
            driver_opts=None if opts is None else dict(opts),
        )


@dataclass
class Task:
    """One backend task of a service."""

    name: str = ""
    endpoint_id: str = ""
    endpoint_ip: str = ""
    info: dict[str, str] | None = None


@dataclass
class ServiceInfo:
    """Parameters of a service with the list of its tasks."""

    vip: str = ""
    ports: list[str] | None = None
    local_lb_index: int = 0
    tasks: list[Task] | None = None


@dataclass
class NetworkingConfig:
    """Endpoint configuration of a container for each network it joins."""

    endpoints_config: dict[str, EndpointSettings | None] = field(default_factory=dict)


@dataclass
class ConfigReference:
    """The network that provides another network's configuration."""

    network: str = ""