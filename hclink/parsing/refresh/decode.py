from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from hclink.exceptions import ProtocolError
from hclink.parsing.refresh.model import ChangeSet, ChangesResponse, DeviceChange, RefreshStatus

_LOGGER = logging.getLogger(__name__)


def decode_inventory(payload: Any) -> list[Any]:
    if not isinstance(payload, list):
        raise ProtocolError(f"Expected a list of devices, got {type(payload).__name__}")
    return payload


def decode_refresh_status(payload: Any) -> RefreshStatus:
    if not isinstance(payload, dict):
        raise ProtocolError(f"Expected a refresh status object, got {type(payload).__name__}")
    try:
        return RefreshStatus.model_validate(payload)
    except PydanticValidationError as exc:
        raise ProtocolError(f"Malformed refresh status: {exc}") from exc


def decode_change_set(payload: Any) -> ChangeSet:
    """
    Decode an incremental refresh response.

    Entries lacking an integer ``id`` or a numeric ``value`` are skipped; only
    a missing or non-list ``changes`` field fails the whole response.
    """
    if not isinstance(payload, dict):
        raise ProtocolError(f"Expected a change-set object, got {type(payload).__name__}")
    try:
        response = ChangesResponse.model_validate(payload)
    except PydanticValidationError as exc:
        raise ProtocolError(f"Malformed change-set: {exc}") from exc

    changes: list[DeviceChange] = []
    skipped = 0
    for entry in response.changes:
        try:
            changes.append(DeviceChange.model_validate(entry))
        except PydanticValidationError:
            skipped += 1
            _LOGGER.debug("Skipping malformed change entry: %r", entry)
    return ChangeSet(changes=changes, skipped=skipped, last=response.last)
