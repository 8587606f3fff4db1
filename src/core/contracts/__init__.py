"""
Contracts

JSON Schema контракт наблюдаемого состояния калькулятора (engine_snapshot).
"""

from .validators import (
    ENGINE_SNAPSHOT_SCHEMA,
    ContractValidator,
    EngineSnapshotValidator,
    SchemaLoader,
    get_engine_snapshot_validator,
    validate_engine_snapshot,
)

__all__ = [
    "ENGINE_SNAPSHOT_SCHEMA",
    "SchemaLoader",
    "ContractValidator",
    "EngineSnapshotValidator",
    "get_engine_snapshot_validator",
    "validate_engine_snapshot",
]
