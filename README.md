# dockhand

dockhand holds typed models of the Docker Engine API and small helpers for
working with it. You can use them to build container and network settings,
read the daemon's JSON responses, encode `filters` query parameters and
compare API versions. The package uses only the standard library.

## Installing

```
pip install dockhand
```

To run the package's own tests, install the `test` extra:

```
pip install "dockhand[test]"
pytest
```

## Filters

`dockhand.filters.Args` maps each key to a set of values. This is the form
the Engine API uses for `filters` query parameters.

```python
from dockhand.filters import Args, arg, from_json, parse_flag, to_json

args = Args(arg("label", "image=foo"), arg("label", "state=running"))

args.match_kv_list("bogus", None)                                  # True
args.match_kv_list("label", None)                                  # False
args.match_kv_list("label", {"image": "foo", "state": "running"})  # True
args.match_kv_list("label", {"image": "other"})                    # False

args = parse_flag("status=running", Args())
"status" in args                        # True
args.exact_match("status", "running")   # True
args.fuzzy_match("status", "runningX")  # True, "running" is a prefix

same = from_json(to_json(args))
```

The methods of `Args` are:

- `add`, `delete` and `get` change and read the values stored under a key.
- `len(args)` and `key in args` work as on a mapping. `contains` and
  `include` do the same job as `in`.
- `exact_match`, `unique_exact_match`, `fuzzy_match` and `match` test a
  source string against the values. `match` also treats each value as a
  regular expression. Patterns that do not compile are skipped. When a key
  has no values, every matcher returns `True`.
- `match_kv_list(key, sources)` checks that each `k` or `k=v` value under
  `key` is present in the `sources` mapping.
- `validate(accepted)` raises `InvalidFilterError` for the first key that is
  not accepted.
- `walk_values(field, op)` calls `op` on each value under `field`. If `op`
  raises, the walk stops and the exception passes through.

To convert filters to and from text:

- `parse_flag` reads a `key=value` string. It lowercases and strips the key
  and strips the value. A string without `=` raises `BadFormatError`.
- `to_json` writes the set form (`{"key":{"value":true}}`). Empty filters give
  an empty string.
- `to_param_with_version("1.21", args)` writes the legacy list form
  (`{"key":["value"]}`) for API versions below 1.22.
- `from_json` accepts both forms. It raises `ValueError` for anything else.
- `to_param` and `from_param` are other names for `to_json` and `from_json`.

## Versions

`dockhand.versions` compares dotted API version strings field by field. A
field that is missing or is not an integer counts as 0.

```python
from dockhand import versions

versions.compare("1.0.0", "1")        # 0
versions.compare("1.0.1", "1")        # 1
versions.less_than("1.1", "1.1.1")    # True
```

The module also has `less_than_or_equal_to`, `greater_than`,
`greater_than_or_equal_to` and `equal`.

## String-or-list values

The Engine API sends `Cmd`, `Entrypoint` and `Shell` either as a single
string or as a list of strings. `dockhand.strslice` handles both shapes:

- `decode_str_slice('"echo"')` gives `["echo"]`.
- `decode_str_slice('["/bin/sh","-c","echo"]')` gives the list.
- `decode_str_slice("", default)` returns `default` unchanged.
- `decode_str_slice("null")` gives `None`.
- `encode_str_slice(None)` gives `"null"`, and `encode_str_slice([])` gives
  `"[]"`.

## Container modes

`dockhand.modes` holds string types with predicates:

- `NetworkMode` has `is_bridge`, `is_host`, `is_container`,
  `connected_container`, `is_user_defined` and `network_name`.
- `IpcMode`, `PidMode`, `UTSMode`, `UsernsMode` and `CgroupSpec` each have a
  `valid()` check. Where they apply, they also have `is_host()`,
  `is_container()` and `container()`.
- `Isolation` has `is_default`, `is_hyperv`, `is_process` and `is_valid`.

`NetworkMode` and `Isolation` follow the Linux daemon's rules.
`WindowsNetworkMode` and `WindowsIsolation` follow the Windows rules. Under
those rules `"nat"` is the bridge, host networking does not exist, and Hyper-V
and process isolation are valid.

```python
from dockhand.modes import NetworkMode, PidMode, WindowsNetworkMode

NetworkMode("container:web").connected_container()  # "web"
NetworkMode("mynet").network_name()                 # "mynet"
WindowsNetworkMode("nat").network_name()            # "nat"
PidMode("container:").valid()                       # False
```

The module also has three more types. `RestartPolicy` is a dataclass with
`is_none`, `is_always`, `is_on_failure`, `is_unless_stopped` and `is_same`.
`LogMode` and `WaitCondition` are enums.

## API models

Each of these dataclasses reads the daemon's JSON keys with `from_dict`.
Where the model defines `to_dict`, it also writes them.

- `dockhand.container` holds the container models.
  - `Config` and `HostConfig` have both `from_dict` and `to_dict`.
    `HostConfig.to_dict` merges its `Resources` into the same object, as the
    API expects.
  - `Config` accepts `Cmd`, `Entrypoint` and `Shell` either as a string or as
    a list.
  - `Config` holds `ExposedPorts` and `Volumes` as sets.
  - `HealthConfig` takes durations in nanoseconds. `MINIMUM_DURATION` is one
    millisecond.
  - The module also has `Resources`, `UpdateConfig`, `PortBinding`,
    `DeviceMapping` and `LogConfig`. `WeightDevice` and `ThrottleDevice`
    format as `path:value`.
- `dockhand.network` holds the network models.
  - `EndpointSettings` has `from_dict`, `to_dict` and a deep `copy()`.
    `EndpointIPAMConfig.copy()` copies its link-local list.
  - The module also has `IPAM`, `IPAMConfig`, `Address`, `PeerInfo`, `Task`,
    `ServiceInfo`, `NetworkingConfig` and `ConfigReference`.
- `dockhand.responses` holds small response bodies: `ErrorResponse`,
  `GraphDriverData`, `IDResponse`, `ImageDeleteResponseItem`, `Port` and
  `ServiceUpdateResponse`. `Port` rejects port numbers outside 0–65535.
- `dockhand.operations` holds the response bodies of container operations:
  `ContainerChangeResponseItem`, `ContainerCreateCreatedBody`,
  `ContainerTopOKBody`, `ContainerUpdateOKBody` and `ContainerWaitOKBody`.

```python
from dockhand.container import Config, HostConfig

config = Config.from_dict({"Image": "postgres:9.5", "Cmd": "postgres"})
config.cmd                      # ["postgres"]

host = HostConfig.from_dict({"ShmSize": 1048576, "NetworkMode": "bridge"})
host.network_mode.is_bridge()   # True
host.to_dict()["ShmSize"]       # 1048576
```

## What dockhand does not do

dockhand does not talk to a Docker daemon. It does not start, build, inspect
or remove containers, and it does not retry or wait for services to come up.
It only describes the data those calls send and receive. There are no models
for mounts, volumes, images, system information, inspect results or seccomp
profiles, and there is no list of signal numbers. It has no command-line
program.