from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol


class SynonymProvider(Protocol):
    def synonyms(self) -> Mapping[str, Sequence[str]]:
        """Return the read-only canonical term -> synonyms map."""

    def role_presets(self) -> Sequence[Mapping[str, object]]:
        """Return role presets as read-only label/description/synonyms records."""

    def preset_synonyms(self, label: str) -> Mapping[str, Sequence[str]]:
        """Return the extra synonym map of a preset, raising for unknown labels."""
