from __future__ import annotations

import logging

from .actions import Action, AddRecord, ClearRecords, ClearSession, DeleteRecord, SetSession
from .model import Database

logger = logging.getLogger(__name__)


class MutationRouter:
    """Apply one action to an in-memory snapshot. No I/O."""

    def apply(self, action: Action, db: Database) -> Database:
        if isinstance(action, SetSession):
            return db.with_session(action.session)

        if isinstance(action, AddRecord):
            rec = action.record
            if db.has_record_for(student_id=rec.student_id, session_id=rec.session_id):
                logger.info("Duplicate check-in ignored: student=%s session=%s", rec.student_id, rec.session_id)
                return db
            return db.with_records((rec, *db.records))

        if isinstance(action, DeleteRecord):
            return db.with_records(r for r in db.records if r.id != action.record_id)

        if isinstance(action, ClearRecords):
            logger.warning("Attempt to clear records blocked for safety (%d records kept)", len(db.records))
            return db

        if isinstance(action, ClearSession):
            return db.with_session(None)

        raise TypeError(f"Unhandled action type: {type(action)!r}")
