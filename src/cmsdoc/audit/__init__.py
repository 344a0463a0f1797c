"""Audit logging for conversion runs.

Main Components
---------------
- AuditLogger: JSONL event writer with stage brackets
- generate_run_id: run identifier factory
"""

from cmsdoc.audit.helpers import generate_run_id, get_dependency_versions, get_package_version
from cmsdoc.audit.logger import AuditLogger
from cmsdoc.audit.models import Level, LogEvent

__all__ = [
    "AuditLogger",
    "Level",
    "LogEvent",
    "generate_run_id",
    "get_dependency_versions",
    "get_package_version",
]
