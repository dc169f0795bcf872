"""
Migration module exports
"""

from .exceptions import MigrationError, IndexAlreadyExists, InvalidAliasName, IndexNotFound
from .models import EngineNamingSnapshot, MigrationPlan, MigrationResult, GenerationStatus
from .naming import default_prefix, index_name, parse_version, parse_versions
from .planner import MigrationPlanner, migrate, plan_migration, read_snapshot
from .status import generation_status, point_alias

__all__ = [
    "MigrationError",
    "IndexAlreadyExists",
    "InvalidAliasName",
    "IndexNotFound",
    "EngineNamingSnapshot",
    "MigrationPlan",
    "MigrationResult",
    "GenerationStatus",
    "default_prefix",
    "index_name",
    "parse_version",
    "parse_versions",
    "MigrationPlanner",
    "migrate",
    "plan_migration",
    "read_snapshot",
    "generation_status",
    "point_alias",
]
