"""
Audit Logger.

Responsibility boundaries:
- Handles structured event logging for pickers.
- Writes immutable records, in emission order, for audit and replay.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional


@dataclass(frozen=True)
class AuditRecord:
    """
    A single immutable audit entry.
    """
    sequence: int
    event_type: str
    data: Mapping[str, Any] = field(default_factory=dict)


class AuditLogger:
    """
    A centralized logger for audit and replay purposes.
    """

    def __init__(self) -> None:
        self._records: List[AuditRecord] = []

    def log_event(self, event_type: str, data: Dict[str, Any]) -> None:
        """
        Log a specific event.

        Args:
            event_type: The category of the event.
            data: The event payload. Copied, so later caller mutation has no effect.
        """
        record = AuditRecord(len(self._records), event_type, MappingProxyType(dict(data)))
        self._records.append(record)

    @property
    def records(self) -> List[AuditRecord]:
        return list(self._records)

    def events(self, event_type: Optional[str] = None) -> List[AuditRecord]:
        """Records of one category, or all of them."""
        if event_type is None:
            return self.records
        return [r for r in self._records if r.event_type == event_type]

    def clear(self) -> None:
        self._records = []

    def __len__(self) -> int:
        return len(self._records)
