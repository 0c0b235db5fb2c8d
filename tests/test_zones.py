import json

import pytest

from vinyldns_client.exceptions import DecodeError, VinylDNSNotFoundError
from vinyldns_client.models import Zone

ZONE = {
    "id": "zone-1",
    "name": "ok.",
    "email": "test@test.com",
    "adminGroupId": "group-1",
    "status": "Active",
    "created": "2019-01-01T00:00:00Z",
}

ZONE_CHANGE = {
    "zone": ZONE,
    "userId": "user-1",
    "changeType": "Create",
    "status": "Pending",
    "created": "2019-01-01T00:00:00Z",
    "id": "change-1",
}


@pytest.mark.asyncio
async def test_list_zones(mock_client):
    mock_client.add_response(json.dumps({"zones": [ZONE], "maxItems": 100}))

    result = await mock_client.list_zones()

    assert mock_client.requests == [
        {"method": "GET", "path": "/zones", "params": {}, "data": None}
    ]
    assert [zone.name for zone in result.zones] == ["ok."]
    assert result.max_items == 100
    assert result.next_id is None


@pytest.mark.asyncio
async def test_list_zones_with_filters(mock_client):
    mock_client.add_response(json.dumps({"zones": []}))

    await mock_client.list_zones(name_filter="ok", start_from="abc", max_items=5)

    assert mock_client.requests[0]["params"] == {
        "nameFilter": "ok",
        "startFrom": "abc",
        "maxItems": "5",
    }


@pytest.mark.asyncio
async def test_get_zone(mock_client):
    mock_client.add_response(json.dumps({"zone": ZONE}))

    zone = await mock_client.get_zone("zone-1")

    assert mock_client.requests[0]["path"] == "/zones/zone-1"
    assert zone.id == "zone-1"
    assert zone.admin_group_id == "group-1"


@pytest.mark.asyncio
async def test_get_zone_not_found(mock_client):
    mock_client.add_response(VinylDNSNotFoundError("Zone with id zone-2 not found"))

    with pytest.raises(VinylDNSNotFoundError):
        await mock_client.get_zone("zone-2")


@pytest.mark.asyncio
async def test_create_zone(mock_client):
    mock_client.add_response(json.dumps(ZONE_CHANGE))
    zone = Zone(name="ok.", email="test@test.com", admin_group_id="group-1")

    change = await mock_client.create_zone(zone)

    request = mock_client.requests[0]
    assert request["method"] == "POST"
    assert request["path"] == "/zones"
    assert json.loads(request["data"]) == {
        "name": "ok.",
        "email": "test@test.com",
        "adminGroupId": "group-1",
    }
    assert change.change_type == "Create"
    assert change.zone.id == "zone-1"


@pytest.mark.asyncio
async def test_update_zone(mock_client):
    mock_client.add_response(json.dumps({**ZONE_CHANGE, "changeType": "Update"}))
    zone = Zone(
        name="ok.", email="new@test.com", admin_group_id="group-1", id="zone-1"
    )

    change = await mock_client.update_zone("zone-1", zone)

    request = mock_client.requests[0]
    assert request["method"] == "PUT"
    assert request["path"] == "/zones/zone-1"
    assert json.loads(request["data"])["email"] == "new@test.com"
    assert change.change_type == "Update"


@pytest.mark.asyncio
async def test_delete_zone(mock_client):
    mock_client.add_response(json.dumps({**ZONE_CHANGE, "changeType": "Delete"}))

    change = await mock_client.delete_zone("zone-1")

    assert mock_client.requests[0]["method"] == "DELETE"
    assert mock_client.requests[0]["data"] is None
    assert change.change_type == "Delete"


@pytest.mark.asyncio
async def test_list_zone_changes(mock_client):
    mock_client.add_response(
        json.dumps({"zoneId": "zone-1", "zoneChanges": [ZONE_CHANGE]})
    )

    changes = await mock_client.list_zone_changes("zone-1")

    assert mock_client.requests[0]["path"] == "/zones/zone-1/changes"
    assert [change.id for change in changes] == ["change-1"]


@pytest.mark.asyncio
async def test_decode_error_keeps_body(mock_client):
    mock_client.add_response('{"zone": {"name": "ok."}}')

    with pytest.raises(DecodeError) as exc_info:
        await mock_client.get_zone("zone-1")

    assert exc_info.value.raw_body == '{"zone": {"name": "ok."}}'
