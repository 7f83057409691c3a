from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from .provider import SynonymProvider


class UnknownRolePresetError(LookupError):
    def __init__(self, label: str):
        super().__init__(f"Unknown role preset '{label}'.")
        self.label = label


def _freeze_synonym_map(raw: Any, source: Path) -> Mapping[str, tuple[str, ...]]:
    if not isinstance(raw, dict):
        raise RuntimeError(f"Invalid synonym map in '{source}': expected an object.")
    frozen: dict[str, tuple[str, ...]] = {}
    for key, values in raw.items():
        canonical = str(key).strip().lower()
        if not canonical:
            continue
        if not isinstance(values, list):
            raise RuntimeError(f"Invalid synonym list for '{canonical}' in '{source}': expected an array.")
        frozen[canonical] = tuple(str(value).strip().lower() for value in values if str(value).strip())
    return MappingProxyType(frozen)


class LocalTaxonomy(SynonymProvider):
    def __init__(
        self,
        synonyms_path: str | Path | None = None,
        presets_path: str | Path | None = None,
    ) -> None:
        synonyms_file = Path(synonyms_path) if synonyms_path else Path(__file__).with_name("synonyms.json")
        presets_file = Path(presets_path) if presets_path else Path(__file__).with_name("role_presets.json")
        self._synonyms = _freeze_synonym_map(self._load_json(synonyms_file), synonyms_file)
        self._presets = self._load_presets(presets_file)
        self._presets_by_label = MappingProxyType({preset["label"]: preset for preset in self._presets})

    @staticmethod
    def _load_json(path: Path) -> Any:
        try:
            with path.open("r", encoding="utf-8") as handle:
                return json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            raise RuntimeError(f"Failed to load taxonomy file '{path}': {exc}") from exc

    def _load_presets(self, path: Path) -> tuple[Mapping[str, Any], ...]:
        raw = self._load_json(path)
        if not isinstance(raw, list):
            raise RuntimeError(f"Invalid role presets in '{path}': expected an array.")
        presets: list[Mapping[str, Any]] = []
        for item in raw:
            if not isinstance(item, dict) or not str(item.get("label") or "").strip():
                continue
            presets.append(
                MappingProxyType(
                    {
                        "label": str(item["label"]).strip(),
                        "description": str(item.get("description") or ""),
                        "synonyms": _freeze_synonym_map(item.get("synonyms") or {}, path),
                    }
                )
            )
        return tuple(presets)

    def synonyms(self) -> Mapping[str, Sequence[str]]:
        return self._synonyms

    def role_presets(self) -> Sequence[Mapping[str, Any]]:
        return self._presets

    def preset_synonyms(self, label: str) -> Mapping[str, Sequence[str]]:
        preset = self._presets_by_label.get(label.strip())
        if preset is None:
            raise UnknownRolePresetError(label)
        return preset["synonyms"]


@lru_cache(maxsize=1)
def get_default_taxonomy_provider() -> SynonymProvider:
    return LocalTaxonomy()
