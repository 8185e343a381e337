"""Container configuration: portable settings, host settings and resources."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Callable

from dockhand.modes import (
    CgroupSpec,
    IpcMode,
    Isolation,
    NetworkMode,
    PidMode,
    RestartPolicy,
    UsernsMode,
    UTSMode,
)

# Smallest duration a user should configure, in nanoseconds (one millisecond).
MINIMUM_DURATION = 1_000_000

_Codec = tuple[Callable[[Any], Any], Callable[[Any], Any]]

# Omit the key only when the value is None (a pointer that is not set).
_NIL = "nil"


def _json(
    key: str,
    default: Any = None,
    *,
    factory: Callable[[], Any] | None = None,
    omitempty: bool | str = False,
    codec: _Codec | None = None,
) -> Any:
    metadata = {"json": key, "omitempty": omitempty, "codec": codec}
    if factory is not None:
        return field(default_factory=factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def _plain(value: Any) -> Any:
    if isinstance(value, list):
        return list(value)
    if isinstance(value, dict):
        return dict(value)
    if isinstance(value, str):
        return str(value)
    return value


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (bool, int, float, str, list, dict, set, tuple)):
        return not value
    return False


def _encode(obj: Any) -> dict[str, Any]:
    """Encode a dataclass whose fields carry JSON metadata."""
    out: dict[str, Any] = {}
    for f in fields(obj):
        md = f.metadata
        if "json" not in md:
            continue
        value = getattr(obj, f.name)
        omit = md["omitempty"]
        if omit == _NIL and value is None:
            continue
        if omit is True and _is_empty(value):
            continue
        if value is None:
            out[md["json"]] = None
            continue
        codec = md["codec"]
        out[md["json"]] = codec[0](value) if codec else _plain(value)
    return out


def _decode(cls: type, data: dict[str, Any]) -> Any:
    """Build a dataclass from JSON data; null or missing keys keep their defaults."""
    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        md = f.metadata
        if "json" not in md:
            continue
        raw = data.get(md["json"])
        if raw is None:
            continue
        codec = md["codec"]
        kwargs[f.name] = codec[1](raw) if codec else _plain(raw)
    return cls(**kwargs)


def _nested(cls: type) -> _Codec:
    return (_encode, lambda raw: _decode(cls, raw))


def _nested_list(cls: type) -> _Codec:
    return (
        lambda items: [_encode(item) for item in items],
        lambda raw: [_decode(cls, item) for item in raw],
    )


def _mode(kind: type) -> _Codec:
    return (str, kind)


_STR_SLICE: _Codec = (list, lambda raw: [raw] if isinstance(raw, str) else list(raw))
_STRING_SET: _Codec = (lambda items: {item: {} for item in sorted(items)}, lambda raw: set(raw))
_CONSOLE_SIZE: _Codec = (list, lambda raw: tuple(raw))
_RESTART_POLICY: _Codec = (
    lambda rp: {"Name": rp.name, "MaximumRetryCount": rp.maximum_retry_count},
    lambda raw: RestartPolicy(
        name=raw.get("Name") or "", maximum_retry_count=int(raw.get("MaximumRetryCount") or 0)
    ),
)


@dataclass
class WeightDevice:
    """A device and its block IO weight."""

    path: str = _json("Path", "")
    weight: int = _json("Weight", 0)

    def __post_init__(self) -> None:
        if not 0 <= self.weight <= 0xFFFF:
            raise ValueError(f"weight {self.weight} is out of range")

    def __str__(self) -> str:
        return f"{self.path}:{self.weight}"


@dataclass
class ThrottleDevice:
    """A device and its rate limit per second."""

    path: str = _json("Path", "")
    rate: int = _json("Rate", 0)

    def __post_init__(self) -> None:
        if not 0 <= self.rate < 2**64:
            raise ValueError(f"rate {self.rate} is out of range")

    def __str__(self) -> str:
        return f"{self.path}:{self.rate}"


@dataclass
class DeviceMapping:
    """A device mapped from the host into the container."""

    path_on_host: str = _json("PathOnHost", "")
    path_in_container: str = _json("PathInContainer", "")
    cgroup_permissions: str = _json("CgroupPermissions", "")


@dataclass
class PortBinding:
    """A host address and port that a container port is published on."""

    host_ip: str = _json("HostIp", "")
    host_port: str = _json("HostPort", "")


_PORT_MAP: _Codec = (
    lambda port_map: {
        port: None if bindings is None else [_encode(b) for b in bindings]
        for port, bindings in sorted(port_map.items())
    },
    lambda raw: {
        port: None if bindings is None else [_decode(PortBinding, b) for b in bindings]
        for port, bindings in raw.items()
    },
)


@dataclass
class LogConfig:
    """Logging driver and its options."""

    type: str = _json("Type", "")
    config: dict[str, str] | None = _json("Config")


@dataclass
class HealthConfig:
    """Settings of the health check; durations are in nanoseconds."""

    test: list[str] | None = _json("Test", omitempty=True)
    interval: int = _json("Interval", 0, omitempty=True)
    timeout: int = _json("Timeout", 0, omitempty=True)
    start_period: int = _json("StartPeriod", 0, omitempty=True)
    retries: int = _json("Retries", 0, omitempty=True)

    def to_dict(self) -> dict[str, Any]:
        return _encode(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HealthConfig:
        return _decode(cls, data)


@dataclass
class Config:
    """Portable configuration of a container."""

    hostname: str = _json("Hostname", "")
    domainname: str = _json("Domainname", "")
    user: str = _json("User", "")
    attach_stdin: bool = _json("AttachStdin", False)
    attach_stdout: bool = _json("AttachStdout", False)
    attach_stderr: bool = _json("AttachStderr", False)
    exposed_ports: set[str] | None = _json("ExposedPorts", omitempty=True, codec=_STRING_SET)
    tty: bool = _json("Tty", False)
    open_stdin: bool = _json("OpenStdin", False)
    stdin_once: bool = _json("StdinOnce", False)
    env: list[str] | None = _json("Env")
    cmd: list[str] | None = _json("Cmd", codec=_STR_SLICE)
    healthcheck: HealthConfig | None = _json(
        "Healthcheck", omitempty=_NIL, codec=_nested(HealthConfig)
    )
    args_escaped: bool = _json("ArgsEscaped", False, omitempty=True)
    image: str = _json("Image", "")
    volumes: set[str] | None = _json("Volumes", codec=_STRING_SET)
    working_dir: str = _json("WorkingDir", "")
    entrypoint: list[str] | None = _json("Entrypoint", codec=_STR_SLICE)
    network_disabled: bool = _json("NetworkDisabled", False, omitempty=True)
    mac_address: str = _json("MacAddress", "", omitempty=True)
    on_build: list[str] | None = _json("OnBuild")
    labels: dict[str, str] | None = _json("Labels")
    stop_signal: str = _json("StopSignal", "", omitempty=True)
    stop_timeout: int | None = _json("StopTimeout", omitempty=_NIL)
    shell: list[str] | None = _json("Shell", omitempty=True, codec=_STR_SLICE)

    def to_dict(self) -> dict[str, Any]:
        return _encode(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        return _decode(cls, data)


@dataclass
class Resources:
    """Resource limits of a container (cgroups, ulimits and the like)."""

    cpu_shares: int = _json("CpuShares", 0)
    memory: int = _json("Memory", 0)
    nano_cpus: int = _json("NanoCpus", 0)
    cgroup_parent: str = _json("CgroupParent", "")
    blkio_weight: int = _json("BlkioWeight", 0)
    blkio_weight_device: list[WeightDevice] | None = _json(
        "BlkioWeightDevice", codec=_nested_list(WeightDevice)
    )
    blkio_device_read_bps: list[ThrottleDevice] | None = _json(
        "BlkioDeviceReadBps", codec=_nested_list(ThrottleDevice)
    )
    blkio_device_write_bps: list[ThrottleDevice] | None = _json(
        "BlkioDeviceWriteBps", codec=_nested_list(ThrottleDevice)
    )
    blkio_device_read_iops: list[ThrottleDevice] | None = _json(
        "BlkioDeviceReadIOps", codec=_nested_list(ThrottleDevice)
    )
    blkio_device_write_iops: list[ThrottleDevice] | None = _json(
        "BlkioDeviceWriteIOps", codec=_nested_list(ThrottleDevice)
    )
    cpu_period: int = _json("CpuPeriod", 0)
    cpu_quota: int = _json("CpuQuota", 0)
    cpu_realtime_period: int = _json("CpuRealtimePeriod", 0)
    cpu_realtime_runtime: int = _json("CpuRealtimeRuntime", 0)
    cpuset_cpus: str = _json("CpusetCpus", "")
    cpuset_mems: str = _json("CpusetMems", "")
    devices: list[DeviceMapping] | None = _json("Devices", codec=_nested_list(DeviceMapping))
    device_cgroup_rules: list[str] | None = _json("DeviceCgroupRules")
    disk_quota: int = _json("DiskQuota", 0)
    kernel_memory: int = _json("KernelMemory", 0)
    memory_reservation: int = _json("MemoryReservation", 0)
    memory_swap: int = _json("MemorySwap", 0)
    memory_swappiness: int | None = _json("MemorySwappiness")
    oom_kill_disable: bool | None = _json("OomKillDisable")
    pids_limit: int = _json("PidsLimit", 0)
    ulimits: list[dict[str, Any]] | None = _json("Ulimits")
    cpu_count: int = _json("CpuCount", 0)
    cpu_percent: int = _json("CpuPercent", 0)
    io_maximum_iops: int = _json("IOMaximumIOps", 0)
    io_maximum_bandwidth: int = _json("IOMaximumBandwidth", 0)


@dataclass
class UpdateConfig:
    """Attributes of a container that can be changed while it runs."""

    resources: Resources = field(default_factory=Resources)
    restart_policy: RestartPolicy = field(default_factory=RestartPolicy)


@dataclass
class HostConfig:
    """Configuration of a container that depends on the host it runs on."""

    binds: list[str] | None = _json("Binds")
    container_id_file: str = _json("ContainerIDFile", "")
    log_config: LogConfig = _json("LogConfig", factory=LogConfig, codec=_nested(LogConfig))
    network_mode: NetworkMode = _json(
        "NetworkMode", NetworkMode(""), codec=_mode(NetworkMode)
    )
    port_bindings: dict[str, list[PortBinding] | None] | None = _json(
        "PortBindings", codec=_PORT_MAP
    )
    restart_policy: RestartPolicy = _json(
        "RestartPolicy", factory=RestartPolicy, codec=_RESTART_POLICY
    )
    auto_remove: bool = _json("AutoRemove", False)
    volume_driver: str = _json("VolumeDriver", "")
    volumes_from: list[str] | None = _json("VolumesFrom")
    cap_add: list[str] | None = _json("CapAdd", codec=_STR_SLICE)
    cap_drop: list[str] | None = _json("CapDrop", codec=_STR_SLICE)
    dns: list[str] | None = _json("Dns")
    dns_options: list[str] | None = _json("DnsOptions")
    dns_search: list[str] | None = _json("DnsSearch")
    extra_hosts: list[str] | None = _json("ExtraHosts")
    group_add: list[str] | None = _json("GroupAdd")
    ipc_mode: IpcMode = _json("IpcMode", IpcMode(""), codec=_mode(IpcMode))
    cgroup: CgroupSpec = _json("Cgroup", CgroupSpec(""), codec=_mode(CgroupSpec))
    links: list[str] | None = _json("Links")
    oom_score_adj: int = _json("OomScoreAdj", 0)
    pid_mode: PidMode = _json("PidMode", PidMode(""), codec=_mode(PidMode))
    privileged: bool = _json("Privileged", False)
    publish_all_ports: bool = _json("PublishAllPorts", False)
    readonly_rootfs: bool = _json("ReadonlyRootfs", False)
    security_opt: list[str] | None = _json("SecurityOpt")
    storage_opt: dict[str, str] | None = _json("StorageOpt", omitempty=True)
    tmpfs: dict[str, str] | None = _json("Tmpfs", omitempty=True)
    uts_mode: UTSMode = _json("UTSMode", UTSMode(""), codec=_mode(UTSMode))
    userns_mode: UsernsMode = _json("UsernsMode", UsernsMode(""), codec=_mode(UsernsMode))
    shm_size: int = _json("ShmSize", 0)
    sysctls: dict[str, str] | None = _json("Sysctls", omitempty=True)
    runtime: str = _json("Runtime", "", omitempty=True)
    console_size: tuple[int, int] = _json("ConsoleSize", (0, 0), codec=_CONSOLE_SIZE)
    isolation: Isolation = _json("Isolation", Isolation(""), codec=_mode(Isolation))
    resources: Resources = field(default_factory=Resources)
    mounts: list[dict[str, Any]] | None = _json("Mounts", omitempty=True)
    init: bool | None = _json("Init", omitempty=_NIL)

    def to_dict(self) -> dict[str, Any]:
        out = _encode(self)
        tail = {key: out.pop(key) for key in ("Mounts", "Init") if key in out}
        out.update(_encode(self.resources))
        out.update(tail)
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HostConfig:
        host = _decode(cls, data)
        host.resources = _decode(Resources, data)
        return host