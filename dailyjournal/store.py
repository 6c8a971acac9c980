import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, List

from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError

from .models.competency import Competency
from .models.entry import Entry, EntryCompetency

logger = logging.getLogger(__name__)


class EntryNotFound(Exception):
    """No entry matches both the id and the owner."""

    def __init__(self, entry_id: int):
        super().__init__(f"Entry {entry_id} not found")
        self.entry_id = entry_id


class UnknownCompetency(ValueError):
    def __init__(self, missing: List[int]):
        super().__init__(f"Unknown competency ids: {', '.join(map(str, missing))}")
        self.missing = missing


class PersistenceError(Exception):
    """Raised after a database failure has been rolled back."""


@dataclass
class EntryRecord:
    id: int
    text: str
    created_at: datetime
    competencies: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "text": self.text,
            "createdAt": self.created_at.isoformat() + "Z",
            "competencies": list(self.competencies),
        }


class EntryStore:
    """
    Journal entries and their competency tags for one database session.

    Every mutation runs as a single transaction: it either commits as a whole
    or is rolled back and surfaces as PersistenceError. Callers pass the
    owner's identity explicitly; rows owned by someone else behave exactly
    like rows that do not exist.
    """

    def __init__(self, session):
        self.session = session

    @contextmanager
    def _transaction(self, action: str, **context):
        try:
            yield
            self.session.commit()
        except (EntryNotFound, UnknownCompetency):
            self.session.rollback()
            raise
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception(f"Entry {action} failed {context}: {e}")
            raise PersistenceError(f"Entry {action} failed") from e

    # ---------- reads ----------

    def list_for_owner(self, owner: str) -> List[EntryRecord]:
        """All entries of `owner`, newest first, with their competency ids."""
        try:
            rows = (
                self.session.query(Entry, EntryCompetency.competency_id)
                .outerjoin(EntryCompetency, EntryCompetency.entry_id == Entry.id)
                .filter(Entry.owner == owner)
                .order_by(Entry.created_at.desc(), Entry.id.desc(), EntryCompetency.competency_id)
                .all()
            )
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception(f"Entry listing failed for {owner}: {e}")
            raise PersistenceError("Entry listing failed") from e

        records: Dict[int, EntryRecord] = {}
        for entry, competency_id in rows:
            record = records.get(entry.id)
            if record is None:
                record = records[entry.id] = EntryRecord(entry.id, entry.text, entry.created_at)
            # The outer join yields a single NULL for untagged entries
            if competency_id is not None:
                record.competencies.append(competency_id)
        return list(records.values())

    def _check_competencies(self, competency_ids: List[int]) -> None:
        if not competency_ids:
            return
        known = {
            cid
            for (cid,) in self.session.query(Competency.id).filter(Competency.id.in_(competency_ids))
        }
        missing = [cid for cid in competency_ids if cid not in known]
        if missing:
            raise UnknownCompetency(missing)

    def _link(self, entry_id: int, competency_ids: Iterable[int]) -> None:
        rows = [{"entry_id": entry_id, "competency_id": cid} for cid in competency_ids]
        if rows:
            self.session.execute(insert(EntryCompetency), rows)

    # ---------- writes ----------

    def create(self, owner: str, text: str, competency_ids: List[int]) -> EntryRecord:
        with self._transaction("create", owner=owner):
            self._check_competencies(competency_ids)
            entry = Entry(owner=owner, text=text)
            self.session.add(entry)
            self.session.flush()
            self._link(entry.id, competency_ids)
            record = EntryRecord(entry.id, entry.text, entry.created_at, list(competency_ids))
        logger.info(f"Created entry {record.id} for {owner} with competencies {competency_ids}")
        return record

    def update(self, owner: str, entry_id: int, text: str, competency_ids: List[int]) -> None:
        """Overwrite the text and replace the whole competency set. Last write wins."""
        with self._transaction("update", owner=owner, entry_id=entry_id):
            self._check_competencies(competency_ids)
            matched = (
                self.session.query(Entry)
                .filter(Entry.id == entry_id, Entry.owner == owner)
                .update({Entry.text: text})
            )
            if matched == 0:
                raise EntryNotFound(entry_id)
            self.session.query(EntryCompetency).filter(
                EntryCompetency.entry_id == entry_id
            ).delete()
            self._link(entry_id, competency_ids)
        logger.info(f"Updated entry {entry_id} for {owner} with competencies {competency_ids}")

    def delete(self, owner: str, entry_id: int) -> None:
        with self._transaction("delete", owner=owner, entry_id=entry_id):
            self.session.query(EntryCompetency).filter(
                EntryCompetency.entry_id == entry_id
            ).delete()
            deleted = (
                self.session.query(Entry)
                .filter(Entry.id == entry_id, Entry.owner == owner)
                .delete()
            )
            # Rolling back also restores the tags removed above
            if deleted == 0:
                raise EntryNotFound(entry_id)
        logger.info(f"Deleted entry {entry_id} for {owner}")
