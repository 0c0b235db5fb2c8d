from .base import _VinylDNSClientBase
from .models import Zone, ZoneChange, ZoneChanges, ZoneResponse, Zones


class _ZoneOperations(_VinylDNSClientBase):
    async def list_zones(
        self,
        name_filter: str | None = None,
        start_from: str | None = None,
        max_items: int | None = None,
    ) -> Zones:
        params = {}
        if name_filter:
            params["nameFilter"] = name_filter
        if start_from:
            params["startFrom"] = start_from
        if max_items is not None:
            params["maxItems"] = str(max_items)
        return await self._request_model(Zones, "GET", "/zones", params=params)

    async def get_zone(self, zone_id: str) -> Zone:
        response = await self._request_model(ZoneResponse, "GET", f"/zones/{zone_id}")
        return response.zone

    async def create_zone(self, zone: Zone) -> ZoneChange:
        return await self._request_model(ZoneChange, "POST", "/zones", body=zone)

    async def update_zone(self, zone_id: str, zone: Zone) -> ZoneChange:
        return await self._request_model(
            ZoneChange, "PUT", f"/zones/{zone_id}", body=zone
        )

    async def delete_zone(self, zone_id: str) -> ZoneChange:
        return await self._request_model(ZoneChange, "DELETE", f"/zones/{zone_id}")

    async def list_zone_changes(self, zone_id: str) -> list[ZoneChange]:
        changes = await self._request_model(
            ZoneChanges, "GET", f"/zones/{zone_id}/changes"
        )
        return changes.zone_changes
