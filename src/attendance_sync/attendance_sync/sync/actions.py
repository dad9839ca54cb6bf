from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from ..common.validators import require_mapping, require_string
from ..core.enums import SyncAction
from ..core.exceptions import ValidationError
from .model import AttendanceRecord, SessionInfo


@dataclass(frozen=True)
class SetSession:
    session: SessionInfo
    kind = SyncAction.SET_SESSION


@dataclass(frozen=True)
class AddRecord:
    record: AttendanceRecord
    kind = SyncAction.ADD_RECORD


@dataclass(frozen=True)
class DeleteRecord:
    record_id: str
    kind = SyncAction.DELETE_RECORD


@dataclass(frozen=True)
class ClearRecords:
    kind = SyncAction.CLEAR_RECORDS


@dataclass(frozen=True)
class ClearSession:
    kind = SyncAction.CLEAR_SESSION


Action = Union[SetSession, AddRecord, DeleteRecord, ClearRecords, ClearSession]


def parse_action(body: Any) -> Action:
    """Turn a `{action, payload}` request body into a typed action.

    Unknown names and payloads of the wrong shape raise ValidationError.
    """

    body = require_mapping(body, "body")
    name = require_string(body.get("action"), "action")
    try:
        kind = SyncAction(name)
    except ValueError:
        raise ValidationError(f"Unknown action: {name}") from None

    payload = body.get("payload")
    if kind is SyncAction.SET_SESSION:
        return SetSession(SessionInfo.from_dict(payload))
    if kind is SyncAction.ADD_RECORD:
        return AddRecord(AttendanceRecord.from_dict(payload))
    if kind is SyncAction.DELETE_RECORD:
        return DeleteRecord(require_string(payload, "payload"))
    if kind is SyncAction.CLEAR_RECORDS:
        return ClearRecords()
    return ClearSession()
