"""Translation History - append-only, in-memory list of session results."""

from datetime import datetime
from typing import Iterator, List, Optional, Tuple, Union

from .history_record import GrammarCheckRecord, TranslationRecord

HistoryRecord = Union[TranslationRecord, GrammarCheckRecord]


class TranslationHistory:
    """
    Chronological record of everything translated or checked in this session.

    Records are only ever appended; display order (newest first) is derived
    with newest_first() at render time. Nothing is persisted.
    """

    def __init__(self):
        self._records: List[HistoryRecord] = []

    def append(self, record: HistoryRecord) -> None:
        """
        Add a record to the end of the history.

        Raises:
            ValueError: If the record is older than the last one appended.
        """
        last = self.last_timestamp
        if last is not None and record.timestamp < last:
            raise ValueError(
                f"History timestamps must not decrease ({record.timestamp} < {last})"
            )
        self._records.append(record)

    def next_timestamp(self) -> datetime:
        """Timestamp for a record completing now, never earlier than the last one."""
        now = datetime.now()
        last = self.last_timestamp
        if last is not None and now < last:
            return last
        return now

    @property
    def last_timestamp(self) -> Optional[datetime]:
        return self._records[-1].timestamp if self._records else None

    @property
    def records(self) -> Tuple[HistoryRecord, ...]:
        """All records in insertion (chronological) order."""
        return tuple(self._records)

    def newest_first(self) -> List[HistoryRecord]:
        return list(reversed(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[HistoryRecord]:
        return iter(tuple(self._records))
