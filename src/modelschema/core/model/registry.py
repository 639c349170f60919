#!/usr/bin/env python3
"""
Purpose:
    Implements the ModelRegistry, which discovers, loads and deduplicates
    model definition files from given roots and provides query access to them.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional

from modelschema.core.constants import SUPPORTED_MODEL_EXT
from modelschema.core.formatting import format_pydantic_errors_simple
from modelschema.core.model.model_definition import ModelDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelEntry:
    """
    Lightweight record for a model definition discovered on disk.
    - name: model name (lowercase if valid; otherwise derived from filename stem)
    - path: absolute path to the file
    - valid: whether this is the selected, usable definition
    - reason: diagnostic text for invalid entries (parse error, duplicate dropped, etc.)
    """
    name: str
    path: Path
    valid: bool
    reason: Optional[str] = None


_Candidate = tuple[Path, ModelDefinition]


class ModelRegistry:
    """
    Loads `ModelDefinition` objects from one or more roots and exposes
    entries (valid + invalid) for UX.

    Duplicate policy: newest mtime wins; older duplicates are marked invalid.
    """

    def __init__(self, roots: Iterable[Path]):
        self._roots = [Path(r) for r in roots]
        self._models: Dict[str, ModelDefinition] = {}
        self._entries: List[ModelEntry] = []
        self._loaded: bool = False

    # --- Loading --- #

    def load(self, *, clear: bool = True) -> None:
        """
        Scan roots for model files, parse, and apply duplicate resolution.

        Args:
            clear: if True, clears prior state before loading.
        """
        if clear:
            self._models.clear()
            self._entries.clear()

        candidates: dict[str, list[_Candidate]] = {}
        for p in self._iter_model_files():
            try:
                model = ModelDefinition.from_file(p)
            except Exception as e:
                reason = "; ".join(format_pydantic_errors_simple(e))
                logger.debug("Skipping invalid model file %s: %s", p, reason)
                self._entries.append(ModelEntry(name=p.stem.lower(), path=p.resolve(), valid=False, reason=reason))
                continue
            candidates.setdefault(model.name, []).append((p.resolve(), model))

        for name, items in candidates.items():
            self._resolve_duplicates(name, items)
        self._loaded = True
        logger.debug("Loaded %d model(s) from %d root(s)", len(self._models), len(self._roots))

    # --- Query API --- #

    def get(self, name: str) -> Optional[ModelDefinition]:
        """Return a loaded (valid) model by name (case-insensitive), or None."""
        return self._models.get(name.strip().lower())

    def require(self, name: str) -> ModelDefinition:
        """Return a loaded model by name or raise LookupError if not found/invalid."""
        m = self.get(name)
        if not m:
            raise LookupError(f"Model {name!r} not found")
        return m

    def names(self) -> list[str]:
        """Sorted names of valid models."""
        return sorted(self._models.keys())

    def entries(self) -> List[ModelEntry]:
        """All scanned entries (valid + invalid)."""
        return list(self._entries)

    def valid_entries(self) -> List[ModelEntry]:
        """Only valid entries (winners)."""
        return [e for e in self._entries if e.valid]

    def invalid_entries(self) -> List[ModelEntry]:
        """Only invalid entries (parse errors, duplicates dropped)."""
        return [e for e in self._entries if not e.valid]

    @property
    def loaded(self) -> bool:
        """True if a load() has completed."""
        return self._loaded

    @property
    def roots(self) -> List[Path]:
        """Roots scanned by this registry."""
        return list(self._roots)

    # --- Loading Helpers --- #

    def _iter_model_files(self) -> Iterator[Path]:
        for root in self._roots:
            if not root.exists():
                continue
            for p in sorted(root.rglob("*")):
                if p.is_file() and p.suffix.lower() in SUPPORTED_MODEL_EXT:
                    yield p

    def _resolve_duplicates(self, name: str, items: list[_Candidate]) -> None:
        # newest mtime wins; tie-break by path for stability
        items.sort(key=lambda t: (t[0].stat().st_mtime, str(t[0])), reverse=True)
        (win_path, win_model), losers = items[0], items[1:]

        self._models[name] = win_model
        self._entries.append(ModelEntry(name=name, path=win_path, valid=True, reason="kept"))
        for loser_path, _ in losers:
            self._entries.append(ModelEntry(name=name, path=loser_path, valid=False, reason="duplicate-dropped"))
