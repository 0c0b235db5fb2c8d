from collections.abc import AsyncIterator

from .base import _VinylDNSClientBase
from .models import (
    RecordSet,
    RecordSetChange,
    RecordSetChanges,
    RecordSetResponse,
    RecordSets,
    RecordSetUpdateResponse,
)


class _RecordSetOperations(_VinylDNSClientBase):
    async def list_record_sets(
        self,
        zone_id: str,
        record_name_filter: str | None = None,
        start_from: str | None = None,
        max_items: int | None = None,
    ) -> RecordSets:
        params = {}
        if record_name_filter:
            params["recordNameFilter"] = record_name_filter
        if start_from:
            params["startFrom"] = start_from
        if max_items is not None:
            params["maxItems"] = str(max_items)
        return await self._request_model(
            RecordSets, "GET", f"/zones/{zone_id}/recordsets", params=params
        )

    async def iter_record_sets(
        self,
        zone_id: str,
        record_name_filter: str | None = None,
        max_items: int | None = None,
    ) -> AsyncIterator[RecordSet]:
        """Yield every record set in the zone, following ``nextId`` pages."""
        start_from = None
        while True:
            page = await self.list_record_sets(
                zone_id,
                record_name_filter=record_name_filter,
                start_from=start_from,
                max_items=max_items,
            )
            for record_set in page.record_sets:
                yield record_set
            if not page.next_id:
                return
            start_from = page.next_id

    async def get_record_set(self, zone_id: str, record_set_id: str) -> RecordSet:
        response = await self._request_model(
            RecordSetResponse, "GET", f"/zones/{zone_id}/recordsets/{record_set_id}"
        )
        return response.record_set

    async def create_record_set(
        self, zone_id: str, record_set: RecordSet
    ) -> RecordSetUpdateResponse:
        return await self._request_model(
            RecordSetUpdateResponse,
            "POST",
            f"/zones/{zone_id}/recordsets",
            body=record_set,
        )

    async def update_record_set(
        self, zone_id: str, record_set_id: str, record_set: RecordSet
    ) -> RecordSetUpdateResponse:
        return await self._request_model(
            RecordSetUpdateResponse,
            "PUT",
            f"/zones/{zone_id}/recordsets/{record_set_id}",
            body=record_set,
        )

    async def delete_record_set(
        self, zone_id: str, record_set_id: str
    ) -> RecordSetUpdateResponse:
        return await self._request_model(
            RecordSetUpdateResponse,
            "DELETE",
            f"/zones/{zone_id}/recordsets/{record_set_id}",
        )

    async def list_record_set_changes(self, zone_id: str) -> list[RecordSetChange]:
        changes = await self._request_model(
            RecordSetChanges, "GET", f"/zones/{zone_id}/recordsetchanges"
        )
        return changes.record_set_changes

    async def get_record_set_change(
        self, zone_id: str, record_set_id: str, change_id: str
    ) -> RecordSetChange:
        return await self._request_model(
            RecordSetChange,
            "GET",
            f"/zones/{zone_id}/recordsets/{record_set_id}/changes/{change_id}",
        )
