"""VinylDNS API entities.

Field names are snake_case in Python and camelCase on the wire. Fields
without a default must be present in a response body.
"""

import dataclasses
import types
import typing
from typing import Any, Self


def _camel(name: str) -> str:
    first, *rest = name.split("_")
    return first + "".join(part.title() for part in rest)


def _json_name(field: dataclasses.Field) -> str:
    return field.metadata.get("json", _camel(field.name))


def _decode_value(tp: Any, value: Any) -> Any:
    if value is None:
        return None
    origin = typing.get_origin(tp)
    if origin in (typing.Union, types.UnionType):
        args = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        return _decode_value(args[0], value)
    if origin is list:
        if not isinstance(value, list):
            raise TypeError(f"expected a list, got {type(value).__name__}")
        (item_type,) = typing.get_args(tp)
        return [_decode_value(item_type, item) for item in value]
    if isinstance(tp, type) and issubclass(tp, Model):
        return tp.from_dict(value)
    if tp in (str, int, bool):
        # bool is a subclass of int
        if not isinstance(value, tp) or (tp is int and isinstance(value, bool)):
            raise TypeError(f"expected {tp.__name__}, got {type(value).__name__}")
    return value


def _encode_value(value: Any) -> Any:
    if isinstance(value, Model):
        return value.to_dict()
    if isinstance(value, list):
        return [_encode_value(item) for item in value]
    return value


class Model:
    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        if not isinstance(data, dict):
            raise TypeError(f"expected an object for {cls.__name__}")
        hints = typing.get_type_hints(cls)
        kwargs = {}
        for field in dataclasses.fields(cls):
            key = _json_name(field)
            if key in data:
                kwargs[field.name] = _decode_value(hints[field.name], data[key])
            elif (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING
            ):
                raise KeyError(f"{cls.__name__} is missing field {key!r}")
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {
            _json_name(field): _encode_value(getattr(self, field.name))
            for field in dataclasses.fields(self)
            if getattr(self, field.name) is not None
        }


@dataclasses.dataclass
class ZoneConnection(Model):
    name: str
    key_name: str
    key: str
    primary_server: str


@dataclasses.dataclass
class ACLRule(Model):
    access_level: str
    description: str | None = None
    user_id: str | None = None
    group_id: str | None = None
    record_mask: str | None = None
    record_types: list[str] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class ZoneACL(Model):
    rules: list[ACLRule] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class Zone(Model):
    name: str
    email: str
    admin_group_id: str
    id: str | None = None
    status: str | None = None
    created: str | None = None
    updated: str | None = None
    latest_sync: str | None = None
    is_test: bool | None = None
    shared: bool | None = None
    connection: ZoneConnection | None = None
    transfer_connection: ZoneConnection | None = None
    acl: ZoneACL | None = None


@dataclasses.dataclass
class Zones(Model):
    zones: list[Zone]
    start_from: str | None = None
    next_id: str | None = None
    max_items: int | None = None
    name_filter: str | None = None


@dataclasses.dataclass
class ZoneResponse(Model):
    zone: Zone


@dataclasses.dataclass
class ZoneChange(Model):
    zone: Zone
    user_id: str
    change_type: str
    status: str
    created: str
    id: str


@dataclasses.dataclass
class ZoneChanges(Model):
    zone_changes: list[ZoneChange]
    zone_id: str | None = None
    next_id: str | None = None


@dataclasses.dataclass
class Record(Model):
    address: str | None = None
    cname: str | None = None
    preference: int | None = None
    exchange: str | None = None
    nsdname: str | None = None
    ptrdname: str | None = None
    mname: str | None = None
    rname: str | None = None
    serial: int | None = None
    refresh: int | None = None
    retry: int | None = None
    expire: int | None = None
    minimum: int | None = None
    text: str | None = None
    priority: int | None = None
    weight: int | None = None
    port: int | None = None
    target: str | None = None
    algorithm: int | None = None
    type: int | None = None
    fingerprint: str | None = None


@dataclasses.dataclass
class RecordSet(Model):
    zone_id: str
    name: str
    type: str
    ttl: int
    records: list[Record] = dataclasses.field(default_factory=list)
    id: str | None = None
    status: str | None = None
    created: str | None = None
    updated: str | None = None
    account: str | None = None
    owner_group_id: str | None = None


@dataclasses.dataclass
class RecordSetResponse(Model):
    record_set: RecordSet


@dataclasses.dataclass
class RecordSets(Model):
    record_sets: list[RecordSet]
    next_id: str | None = None
    start_from: str | None = None
    max_items: int | None = None
    record_name_filter: str | None = None


@dataclasses.dataclass
class RecordSetChange(Model):
    zone: Zone
    record_set: RecordSet
    user_id: str
    change_type: str
    status: str
    created: str
    id: str
    updates: RecordSet | None = None


@dataclasses.dataclass
class RecordSetChanges(Model):
    record_set_changes: list[RecordSetChange]
    zone_id: str | None = None
    next_id: str | None = None


@dataclasses.dataclass
class RecordSetUpdateResponse(Model):
    zone: Zone
    record_set: RecordSet
    id: str
    status: str
    change_type: str | None = None
    user_id: str | None = None
    created: str | None = None


@dataclasses.dataclass
class User(Model):
    id: str
    user_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    created: str | None = None


@dataclasses.dataclass
class Group(Model):
    name: str
    email: str
    members: list[User] = dataclasses.field(default_factory=list)
    admins: list[User] = dataclasses.field(default_factory=list)
    id: str | None = None
    description: str | None = None
    status: str | None = None
    created: str | None = None


@dataclasses.dataclass
class Groups(Model):
    groups: list[Group]
    start_from: str | None = None
    next_id: str | None = None
    max_items: int | None = None


@dataclasses.dataclass
class GroupAdmins(Model):
    admins: list[User]


@dataclasses.dataclass
class GroupMembers(Model):
    members: list[User]
    start_from: str | None = None
    next_id: str | None = None


@dataclasses.dataclass
class GroupChange(Model):
    user_id: str
    created: str
    change_type: str
    new_group: Group
    old_group: Group | None = None
    id: str | None = None


@dataclasses.dataclass
class GroupChanges(Model):
    changes: list[GroupChange]
    start_from: str | None = None
    next_id: str | None = None


@dataclasses.dataclass
class RecordData(Model):
    address: str | None = None
    cname: str | None = None
    ptrdname: str | None = None


@dataclasses.dataclass
class RecordChange(Model):
    change_type: str
    input_name: str
    type: str
    id: str | None = None
    status: str | None = None
    record_name: str | None = None
    ttl: int | None = None
    zone_name: str | None = None
    zone_id: str | None = None
    record_set_id: str | None = None
    record_change_id: str | None = None
    data: RecordData | None = None
    system_message: str | None = None


@dataclasses.dataclass
class BatchChange(Model):
    id: str
    user_id: str
    user_name: str
    status: str
    created_timestamp: str
    changes: list[RecordChange]
    comments: str | None = None
    owner_group_id: str | None = None


@dataclasses.dataclass
class BatchChangeSummary(Model):
    id: str
    user_id: str
    user_name: str
    status: str
    created_timestamp: str
    total_changes: int
    comments: str | None = None
    owner_group_id: str | None = None


@dataclasses.dataclass
class BatchChanges(Model):
    batch_changes: list[BatchChangeSummary]
    start_from: int | None = None
    next_id: int | None = None
    max_items: int | None = None
