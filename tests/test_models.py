import pytest

from vinyldns_client.models import (
    ACLRule,
    Group,
    Record,
    RecordSet,
    RecordSets,
    User,
    Zone,
    ZoneACL,
    ZoneResponse,
)


def test_zone_from_dict():
    zone = Zone.from_dict(
        {
            "name": "ok.",
            "email": "test@test.com",
            "adminGroupId": "group-1",
            "id": "zone-1",
            "status": "Active",
            "isTest": True,
            "acl": {"rules": [{"accessLevel": "Read", "recordTypes": ["A"]}]},
            "unknownField": "ignored",
        }
    )
    assert zone.admin_group_id == "group-1"
    assert zone.is_test is True
    assert zone.acl == ZoneACL(rules=[ACLRule(access_level="Read", record_types=["A"])])
    assert zone.connection is None


def test_nested_response():
    response = ZoneResponse.from_dict(
        {"zone": {"name": "ok.", "email": "a@b.c", "adminGroupId": "g"}}
    )
    assert response.zone.name == "ok."


def test_missing_required_field():
    with pytest.raises(KeyError, match="adminGroupId"):
        Zone.from_dict({"name": "ok.", "email": "a@b.c"})


def test_wrong_shape():
    with pytest.raises(TypeError):
        RecordSets.from_dict({"recordSets": {"not": "a list"}})
    with pytest.raises(TypeError):
        Zone.from_dict(["not", "an", "object"])


@pytest.mark.parametrize(
    "model, data",
    [
        (Zone, {"name": 123, "email": "a@b.c", "adminGroupId": "g1"}),
        (Zone, {"name": "ok.", "email": ["a@b.c"], "adminGroupId": "g1"}),
        (Zone, {"name": "ok.", "email": "a@b.c", "adminGroupId": {"a": 1}}),
        (Zone, {"name": "ok.", "email": "a@b.c", "adminGroupId": "g1", "isTest": 1}),
        (RecordSet, {"zoneId": "z1", "name": "www", "type": "A", "ttl": "300"}),
        (RecordSet, {"zoneId": "z1", "name": "www", "type": "A", "ttl": True}),
        (Record, {"preference": 10.5}),
    ],
)
def test_wrong_scalar_type(model, data):
    with pytest.raises(TypeError):
        model.from_dict(data)


def test_optional_scalar_accepts_null():
    zone = Zone.from_dict(
        {"name": "ok.", "email": "a@b.c", "adminGroupId": "g1", "isTest": None}
    )
    assert zone.is_test is None


def test_to_dict_uses_camel_case_and_skips_none():
    zone = Zone(name="ok.", email="a@b.c", admin_group_id="g", is_test=True)
    assert zone.to_dict() == {
        "name": "ok.",
        "email": "a@b.c",
        "adminGroupId": "g",
        "isTest": True,
    }


def test_record_set_to_dict():
    record_set = RecordSet(
        zone_id="zone-1",
        name="www",
        type="A",
        ttl=300,
        records=[Record(address="10.1.1.1")],
    )
    assert record_set.to_dict() == {
        "zoneId": "zone-1",
        "name": "www",
        "type": "A",
        "ttl": 300,
        "records": [{"address": "10.1.1.1"}],
    }


def test_group_round_trip():
    data = {
        "id": "g1",
        "name": "ok-group",
        "email": "test@test.com",
        "members": [{"id": "u1"}],
        "admins": [{"id": "u1", "userName": "ok"}],
    }
    group = Group.from_dict(data)
    assert group.admins == [User(id="u1", user_name="ok")]
    assert Group.from_dict(group.to_dict()) == group
