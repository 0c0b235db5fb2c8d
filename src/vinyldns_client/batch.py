from .base import _VinylDNSClientBase
from .models import BatchChange, BatchChanges, BatchChangeSummary


class _BatchChangeOperations(_VinylDNSClientBase):
    async def list_batch_changes(self) -> list[BatchChangeSummary]:
        response = await self._request_model(
            BatchChanges, "GET", "/zones/batchrecordchanges"
        )
        return response.batch_changes

    async def get_batch_change(self, batch_change_id: str) -> BatchChange:
        return await self._request_model(
            BatchChange, "GET", f"/zones/batchrecordchanges/{batch_change_id}"
        )
