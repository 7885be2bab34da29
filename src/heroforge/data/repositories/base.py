"""Base repository implementation for JSON definition tables."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Generic, List, Mapping, TypeVar

from heroforge.data import paths
from heroforge.data.errors import DataValidationError
from heroforge.data.json_loader import load_json

T = TypeVar("T")

# Descriptive keys tolerated on every definition and otherwise ignored.
DESCRIPTIVE_FIELDS = frozenset({"description", "icon"})


class RepositoryBase(Generic[T]):
    """Common caching and loading behavior for repositories."""

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[str, T] | None = None
        self._preloaded = False

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def preloaded(self) -> bool:
        return self._preloaded

    def _get_file_path(self) -> Path:
        definitions_dir = paths.get_definitions_path(self._base_path)
        return definitions_dir / self._filename

    def _load_raw(self) -> dict[str, object]:
        file_path = self._get_file_path()
        raw = load_json(file_path)
        if not isinstance(raw, dict):
            raise DataValidationError(f"Expected top-level object in {file_path}")
        return raw

    def _build(self, raw: dict[str, object]) -> Dict[str, T]:
        """Convert a raw dict into typed definitions."""
        raise NotImplementedError

    def _ensure_loaded(self) -> None:
        if self._definitions is None:
            raw = self._load_raw()
            self._definitions = self._build(raw)

    def exists(self) -> bool:
        """Return True when the table has a source (payload or file on disk)."""
        return self._preloaded or self._get_file_path().is_file()

    def load_payload(self, raw: object) -> None:
        """Replace the table with an already-loaded raw payload."""
        if not isinstance(raw, dict):
            raise DataValidationError(f"Expected top-level object for {self._filename}")
        self._definitions = self._build(raw)
        self._preloaded = True

    def reload(self) -> None:
        """Re-read the table from disk; the cached table is kept if that fails."""
        if self._preloaded:
            return
        self._definitions = self._build(self._load_raw())

    def as_mapping(self) -> Mapping[str, T]:
        """Return a shallow copy of the table in source order."""
        self._ensure_loaded()
        assert self._definitions is not None
        return dict(self._definitions)

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be an object/dict.")
        return value

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_int(value: object, context: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise DataValidationError(f"{context} must be an integer.")
        return value

    @staticmethod
    def _require_number(value: object, context: str) -> int | float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DataValidationError(f"{context} must be a number.")
        return value

    @staticmethod
    def _require_str_list(value: object, context: str) -> List[str]:
        if not isinstance(value, list):
            raise DataValidationError(f"{context} must be a list.")
        result: List[str] = []
        for entry in value:
            if not isinstance(entry, str):
                raise DataValidationError(f"{context} entries must be strings.")
            result.append(entry)
        return result

    @staticmethod
    def _assert_exact_fields(
        payload: dict[str, object],
        expected_keys: set[str],
        context: str,
        *,
        optional_fields: set[str] | None = None,
    ) -> None:
        actual_keys = set(payload.keys())
        optional = (optional_fields or set()) | DESCRIPTIVE_FIELDS
        missing = expected_keys - actual_keys
        unknown = actual_keys - expected_keys - optional
        if missing or unknown:
            msg_parts = []
            if missing:
                msg_parts.append(f"missing fields: {sorted(missing)}")
            if unknown:
                msg_parts.append(f"unknown fields: {sorted(unknown)}")
            raise DataValidationError(f"{context} has schema issues ({'; '.join(msg_parts)}).")
