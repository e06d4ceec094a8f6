"""
Audit Logger for easy-io.

Provides append-only logging of filesystem operations with timestamps,
targets, and results for auditing and debugging.
"""

import json
from dataclasses import dataclass, asdict
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional, Dict, Any

from .config import get_settings


class ActionType(Enum):
    """Types of actions that can be logged."""
    READ = "read"
    WRITE = "write"
    DELETE = "delete"
    COPY = "copy"
    MODIFY = "modify"
    CHDIR = "chdir"


class ActionStatus(Enum):
    """Status of an action execution."""
    EXECUTED = "executed"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class AuditEntry:
    """Represents a single audit log entry."""
    timestamp: str
    action_type: str
    action_description: str
    target: Optional[str]
    status: str
    result: Optional[str]
    metadata: Dict[str, Any]

    @classmethod
    def create(
        cls,
        action_type: ActionType,
        action_description: str,
        target: Optional[str] = None,
        status: ActionStatus = ActionStatus.EXECUTED,
        result: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> "AuditEntry":
        """Factory method to create an audit entry with current timestamp."""
        return cls(
            timestamp=datetime.now().isoformat(),
            action_type=action_type.value,
            action_description=action_description,
            target=target,
            status=status.value,
            result=result,
            metadata=metadata or {}
        )

    def to_json(self) -> str:
        """Convert entry to JSON string."""
        return json.dumps(asdict(self), ensure_ascii=False)

    @classmethod
    def from_json(cls, json_str: str) -> "AuditEntry":
        """Create entry from JSON string."""
        data = json.loads(json_str)
        return cls(**data)


class AuditLogger:
    """
    Append-only audit logger for easy-io.

    Operations are logged to a JSONL file, one entry per line.
    """

    def __init__(self, log_path: str = "data/audit_log.jsonl"):
        """
        Initialize the audit logger.

        Args:
            log_path: Path to the JSONL log file
        """
        # Absolute so that a later chdir does not move the log
        self.log_path = Path(log_path).absolute()
        self._ensure_log_directory()

    def _ensure_log_directory(self) -> None:
        """Create the log directory and file if they don't exist."""
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        if not self.log_path.exists():
            self.log_path.touch()

    def log(self, entry: AuditEntry) -> None:
        """
        Append an audit entry to the log.

        Args:
            entry: The AuditEntry to log
        """
        with open(self.log_path, "a", encoding="utf-8") as f:
            f.write(entry.to_json() + "\n")

    def log_action(
        self,
        action_type: ActionType,
        description: str,
        target: Optional[str] = None,
        status: ActionStatus = ActionStatus.EXECUTED,
        result: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> AuditEntry:
        """
        Convenience method to create and log an entry in one call.

        Returns the created AuditEntry.
        """
        entry = AuditEntry.create(
            action_type=action_type,
            action_description=description,
            target=target,
            status=status,
            result=result,
            metadata=metadata
        )
        self.log(entry)
        return entry

    def _read_entries(self) -> List[AuditEntry]:
        entries = []

        if not self.log_path.exists():
            return entries

        with open(self.log_path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line:
                    try:
                        entries.append(AuditEntry.from_json(line))
                    except (json.JSONDecodeError, TypeError):
                        continue

        return entries

    def get_recent(self, limit: int = 100) -> List[AuditEntry]:
        """
        Get the most recent audit entries.

        Args:
            limit: Maximum number of entries to return

        Returns:
            List of AuditEntry objects, most recent first
        """
        return list(reversed(self._read_entries()[-limit:]))

    def get_by_action_type(self, action_type: ActionType, limit: int = 100) -> List[AuditEntry]:
        """
        Get audit entries filtered by action type, oldest first.

        Args:
            action_type: The ActionType to filter by
            limit: Maximum number of entries to return
        """
        matches = [e for e in self._read_entries() if e.action_type == action_type.value]
        return matches[:limit]

    def get_failed(self, limit: int = 50) -> List[AuditEntry]:
        """
        Get actions that failed.

        Useful for reviewing which files a bulk replace could not touch.
        """
        matches = [e for e in self._read_entries() if e.status == ActionStatus.FAILED.value]
        return matches[:limit]

    def clear(self, confirm: bool = False) -> bool:
        """
        Clear the audit log.

        The current log is renamed to a timestamped backup first.

        Args:
            confirm: Must be True to actually clear the log

        Returns:
            True if cleared, False otherwise
        """
        if not confirm:
            return False

        if self.log_path.exists():
            backup_path = self.log_path.with_suffix(f".backup.{datetime.now().strftime('%Y%m%d_%H%M%S')}.jsonl")
            self.log_path.rename(backup_path)
            self.log_path.touch()
            return True

        return False


_audit_logger: Optional[AuditLogger] = None


def get_audit_logger() -> Optional[AuditLogger]:
    """
    Get the process-wide audit logger.

    Returns:
        The configured AuditLogger, or None when auditing is disabled
    """
    global _audit_logger
    if _audit_logger is None:
        settings = get_settings()
        if not settings.audit_enabled:
            return None
        _audit_logger = AuditLogger(log_path=settings.audit_log_path)
    return _audit_logger


def set_audit_logger(logger: Optional[AuditLogger]) -> None:
    """Replace the process-wide audit logger. ``None`` falls back to the settings."""
    global _audit_logger
    _audit_logger = logger


def record_action(
    action_type: ActionType,
    description: str,
    target: Optional[str] = None,
    status: ActionStatus = ActionStatus.EXECUTED,
    result: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None
) -> Optional[AuditEntry]:
    """Log an action through the process-wide audit logger, if there is one."""
    logger = get_audit_logger()
    if logger is None:
        return None
    return logger.log_action(
        action_type=action_type,
        description=description,
        target=target,
        status=status,
        result=result,
        metadata=metadata
    )
