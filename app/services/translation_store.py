"""Translation history persistence.

Append-only: records are never updated or deleted once stored.
"""
import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import datetime, timezone
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import PersistenceError
from app.models.internal_models import TranslationRecord
from app.models.translation import Translation

logger = logging.getLogger(__name__)


class TranslationStore(ABC):
    @abstractmethod
    def append(self, record: TranslationRecord) -> TranslationRecord:
        """Store ``record`` and return it with ``id`` and ``created_at`` set."""

    @abstractmethod
    def list_recent(self, limit: int = 10) -> List[TranslationRecord]:
        """Most-recent-first records, at most ``limit``."""

    def health_check(self) -> bool:
        return True


class InMemoryTranslationStore(TranslationStore):
    def __init__(self):
        self._records: List[TranslationRecord] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def append(self, record: TranslationRecord) -> TranslationRecord:
        with self._lock:
            stored = replace(record, id=self._next_id, created_at=datetime.now(timezone.utc))
            self._next_id += 1
            self._records.append(stored)
        return stored

    def list_recent(self, limit: int = 10) -> List[TranslationRecord]:
        if limit <= 0:
            return []
        with self._lock:
            return list(reversed(self._records[-limit:]))


class SqlTranslationStore(TranslationStore):
    def __init__(self, session_factory):
        self._session_factory = session_factory

    def append(self, record: TranslationRecord) -> TranslationRecord:
        try:
            with self._session_factory() as session:
                row = Translation(
                    banjara_text=record.source_text,
                    telugu_text=record.target_text_a,
                    english_text=record.target_text_b,
                    created_at=datetime.now(timezone.utc),
                )
                session.add(row)
                session.flush()
                return _to_record(row)
        except SQLAlchemyError as e:
            logger.error(f"Failed to store translation: {e}")
            raise PersistenceError("append", details={"reason": str(e)}) from e

    def list_recent(self, limit: int = 10) -> List[TranslationRecord]:
        if limit <= 0:
            return []
        try:
            with self._session_factory() as session:
                stmt = select(Translation).order_by(Translation.id.desc()).limit(limit)
                return [_to_record(r) for r in session.execute(stmt).scalars()]
        except SQLAlchemyError as e:
            logger.error(f"Failed to read translation history: {e}")
            raise PersistenceError("read", details={"reason": str(e)}) from e

    def health_check(self) -> bool:
        try:
            self.list_recent(1)
            return True
        except PersistenceError:
            return False


def _to_record(row: Translation) -> TranslationRecord:
    created_at = row.created_at
    # SQLite drops tzinfo; stored values are always UTC
    if created_at is not None and created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return TranslationRecord(
        id=row.id,
        source_text=row.banjara_text,
        target_text_a=row.telugu_text,
        target_text_b=row.english_text,
        created_at=created_at,
    )
