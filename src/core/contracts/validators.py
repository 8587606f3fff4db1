"""
Snapshot Contract — проверка наблюдаемого состояния по JSON Schema

Контракт engine_snapshot.json фиксирует то, что хост читает из движка
(дисплей, режим углов, error state). EngineSnapshot (pydantic) строит
данные, jsonschema проверяет их формой, не зависящей от Python.

Схемы лежат в schema/ рядом с модулем и проходят meta-проверку
Draft 2020-12 при первой загрузке.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Iterator, List, Mapping, Optional

from jsonschema import Draft202012Validator, SchemaError, ValidationError

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"
ENGINE_SNAPSHOT_SCHEMA: Final[str] = "engine_snapshot"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Чтение схем из каталога с кэшем по имени"""

    def __init__(self, schema_dir: Optional[Path] = None):
        self.schema_dir = Path(schema_dir) if schema_dir is not None else SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    def available(self) -> List[str]:
        """Имена схем в каталоге (без .json)"""
        return sorted(path.stem for path in self.schema_dir.glob("*.json"))

    def load_schema(self, name: str) -> Dict[str, Any]:
        """
        Загрузка и meta-проверка схемы.

        Raises:
            FileNotFoundError: Схемы с таким именем нет
            ValueError: Файл не является валидной JSON Schema
        """
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        path = self.schema_dir / f"{name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as exc:
            raise ValueError(f"Invalid JSON Schema in {name}.json: {exc.message}") from exc

        self._cache[name] = schema
        return schema


@lru_cache(maxsize=1)
def default_loader() -> SchemaLoader:
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка JSON-ready данных против одной схемы"""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or default_loader()).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Mapping[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Наиболее релевантное нарушение
        """
        self._validator.validate(data)

    def is_valid(self, data: Mapping[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Mapping[str, Any]) -> Iterator[ValidationError]:
        """Все нарушения в порядке пути до поля"""
        return iter(sorted(self._validator.iter_errors(data), key=lambda e: list(e.path)))

    def describe(self, data: Mapping[str, Any]) -> List[str]:
        """
        Нарушения в читаемом виде "path: message" (для логов и отладки).

        Корневые нарушения (например, лишнее поле) имеют путь "$".
        """
        messages = []
        for error in self.iter_errors(data):
            path = ".".join(str(part) for part in error.path) or "$"
            messages.append(f"{path}: {error.message}")
        return messages


class EngineSnapshotValidator(ContractValidator):
    """Валидатор контракта engine_snapshot"""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(ENGINE_SNAPSHOT_SCHEMA, loader)


@lru_cache(maxsize=1)
def get_engine_snapshot_validator() -> EngineSnapshotValidator:
    return EngineSnapshotValidator()


def validate_engine_snapshot(data: Mapping[str, Any]) -> None:
    """
    Проверка снапшота движка.

    Raises:
        jsonschema.ValidationError: Снапшот нарушает контракт
    """
    get_engine_snapshot_validator().validate(data)
