"""
EditLedger: In-memory record of every text edit applied to a source file.

Lets callers (and tests) see exactly which edits a manipulation issued.
"""

import time
from collections import Counter
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from tsedit.logging_config import get_logger
from .config import MANIPULATION_CONFIG

logger = get_logger("manipulation")


class TextEdit(BaseModel):
    """
    One applied text edit.
    """
    timestamp: float
    operation: str  # "insert", "remove", "replace"
    file_path: str
    start: int  # Byte offset in the text before the edit
    end: int
    old_text: str
    new_text: str


class EditLedger:
    """
    Track the edits applied to one source file.

    Entries beyond ledger_max_entries are dropped oldest first.
    """

    def __init__(self, file_path: str, config: Optional[Dict[str, Any]] = None):
        """
        Initialize edit ledger.

        Args:
            file_path: Path of the owning source file
            config: Optional config overrides (merges with MANIPULATION_CONFIG)
        """
        self.file_path = file_path
        self.config = {**MANIPULATION_CONFIG, **(config or {})}
        self._edits: List[TextEdit] = []
        self._total = 0

    def record_edit(
        self,
        operation: str,
        start: int,
        end: int,
        old_text: str,
        new_text: str
    ) -> Optional[TextEdit]:
        """
        Record an edit.

        Returns:
            The recorded TextEdit, or None if the ledger is disabled
        """
        if not self.config["ledger_enabled"]:
            return None

        edit = TextEdit(
            timestamp=time.time(),
            operation=operation,
            file_path=self.file_path,
            start=start,
            end=end,
            old_text=old_text,
            new_text=new_text,
        )
        self._edits.append(edit)
        self._total += 1

        max_entries = self.config["ledger_max_entries"]
        if max_entries and len(self._edits) > max_entries:
            del self._edits[: len(self._edits) - max_entries]

        logger.debug(f"Ledger recorded {operation} [{start}:{end}] in {self.file_path}")
        return edit

    def get_recent_edits(self, limit: int = 10) -> List[TextEdit]:
        """Most recent edits, newest first."""
        return list(reversed(self._edits[-limit:]))

    def get_edits(self) -> List[TextEdit]:
        return list(self._edits)

    def get_statistics(self) -> Dict[str, Any]:
        """
        Aggregate statistics.

        Returns:
            Dictionary with total edits, counts by operation and bytes
            inserted/removed over the retained entries
        """
        by_operation = Counter(edit.operation for edit in self._edits)
        return {
            "total_edits": self._total,
            "retained_edits": len(self._edits),
            "by_operation": dict(by_operation),
            "bytes_inserted": sum(len(e.new_text.encode("utf-8")) for e in self._edits),
            "bytes_removed": sum(len(e.old_text.encode("utf-8")) for e in self._edits),
        }

    def __len__(self):
        return self._total
