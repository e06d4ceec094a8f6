"""
Shared fixtures for the easy-io tests.
"""

import pytest

from easy_io.core.config import Settings, set_settings
from easy_io.core.logger import AuditLogger, set_audit_logger


@pytest.fixture(autouse=True)
def default_settings():
    """Run every test with default settings and no audit logger."""
    set_settings(Settings())
    set_audit_logger(None)
    yield
    set_settings(None)
    set_audit_logger(None)


@pytest.fixture
def audit_logger(tmp_path_factory):
    """Enable auditing into a log file outside the test's tmp_path."""
    log_dir = tmp_path_factory.mktemp("audit")
    logger = AuditLogger(log_path=str(log_dir / "audit_log.jsonl"))
    set_audit_logger(logger)
    return logger
