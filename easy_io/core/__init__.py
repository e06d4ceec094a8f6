# easy-io - Core Module
"""
Core infrastructure for easy-io.
Configuration and audit logging shared by every filesystem operation.
"""

from .config import Settings, load_settings, save_settings, get_settings, set_settings
from .logger import (
    AuditLogger,
    AuditEntry,
    ActionType,
    ActionStatus,
    get_audit_logger,
    set_audit_logger,
    record_action,
)

__all__ = [
    "Settings",
    "load_settings",
    "save_settings",
    "get_settings",
    "set_settings",
    "AuditLogger",
    "AuditEntry",
    "ActionType",
    "ActionStatus",
    "get_audit_logger",
    "set_audit_logger",
    "record_action",
]
