from __future__ import annotations

import csv
import io
import secrets
import string
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Callable, Iterable, Optional

from ..common.datetime_utils import now_utc, to_iso, try_parse_iso, weekday_name
from ..common.validators import require_non_empty, require_string
from ..sync.actions import AddRecord
from ..sync.model import AttendanceRecord, Database
from ..sync.service import SyncService

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
CSV_HEADERS = ["Week", "Day", "Time", "Student Name", "Student ID", "Session Name"]

_ID_ALPHABET = string.ascii_lowercase + string.digits
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def new_record_id(length: int = 7) -> str:
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))


@dataclass(frozen=True)
class CheckInResult:
    record: AttendanceRecord
    added: bool
    db: Database


class RecordService:
    """Use case: student check-in plus the read-side views of the log."""

    def __init__(
        self,
        sync: SyncService,
        *,
        clock: Callable[[], datetime] = now_utc,
        tz: Optional[tzinfo] = None,
    ):
        self._sync = sync
        self._clock = clock
        # Zone for weekday/week/time shown to people; None is server local time.
        self._tz = tz

    def check_in(
        self,
        *,
        student_name: str,
        student_id: str,
        session_id: str,
        session_name: str,
        now: Optional[datetime] = None,
    ) -> CheckInResult:
        now = now or self._clock()
        record = AttendanceRecord(
            id=new_record_id(),
            student_name=require_non_empty(student_name, "studentName"),
            student_id=require_non_empty(student_id, "studentId"),
            timestamp=to_iso(now),
            day=weekday_name(now.astimezone(self._tz)),
            session_id=require_non_empty(session_id, "sessionId"),
            session_name=require_string(session_name or "", "sessionName"),
        )
        db = self._sync.apply(AddRecord(record))
        added = any(r.id == record.id for r in db.records)
        return CheckInResult(record=record, added=added, db=db)

    def grouped_by_day(self, db: Optional[Database] = None) -> dict[str, list[dict]]:
        if db is None:
            db = self._sync.snapshot()
        groups: dict[str, list[dict]] = {}
        for r in db.records:
            groups.setdefault(r.day, []).append(r.to_dict())
        order = {d: i for i, d in enumerate(WEEKDAYS)}
        return dict(sorted(groups.items(), key=lambda kv: order.get(kv[0], len(WEEKDAYS))))

    def export_csv(self, records: Optional[Iterable[AttendanceRecord]] = None) -> str:
        """Weekly log export, oldest first."""
        if records is None:
            records = self._sync.snapshot().records
        # Unparseable timestamps sort first and export with blank week/time.
        stamped = [(try_parse_iso(r.timestamp), r) for r in records]
        stamped.sort(key=lambda pair: (pair[0] is not None, pair[0] or _EPOCH))

        out = io.StringIO()
        writer = csv.writer(out, lineterminator="\n")
        writer.writerow(CSV_HEADERS)
        for ts, r in stamped:
            if ts is not None:
                ts = ts.astimezone(self._tz)
            writer.writerow([
                f"Week {ts.isocalendar()[1]}" if ts else "",
                r.day,
                ts.strftime("%H:%M:%S") if ts else "",
                r.student_name,
                r.student_id,
                r.session_name,
            ])
        return out.getvalue()
