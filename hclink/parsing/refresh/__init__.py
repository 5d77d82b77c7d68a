from hclink.parsing.refresh.decode import decode_change_set, decode_inventory, decode_refresh_status
from hclink.parsing.refresh.model import ChangeSet, ChangesResponse, DeviceChange, RefreshStatus

__all__ = [
    "ChangeSet",
    "ChangesResponse",
    "DeviceChange",
    "RefreshStatus",
    "decode_change_set",
    "decode_inventory",
    "decode_refresh_status",
]
