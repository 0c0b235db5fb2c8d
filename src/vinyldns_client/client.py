from .batch import _BatchChangeOperations
from .groups import _GroupOperations
from .recordsets import _RecordSetOperations
from .zones import _ZoneOperations


class VinylDNSClient(
    _ZoneOperations, _RecordSetOperations, _GroupOperations, _BatchChangeOperations
):
    pass
