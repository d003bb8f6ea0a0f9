"""Status display helpers: glyph lookup and decorated status labels.

The glyph table is built once per process (``load_status_glyphs``) and handed
to the report formatter explicitly. Overrides can be supplied as YAML::

    glyphs:
      In Progress: "👩🏻‍💻"
      Blocked: "🧱"
    fallback: ":shrug:"
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

import yaml

from .config import DEFAULT_FALLBACK_GLYPH, DEFAULT_STATUS_GLYPHS, UNKNOWN_STATUS

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StatusGlyphs:
    glyphs: Mapping[str, str] = field(default_factory=lambda: MappingProxyType(dict(DEFAULT_STATUS_GLYPHS)))
    fallback: str = DEFAULT_FALLBACK_GLYPH

    def glyph_for(self, status: str) -> str:
        return self.glyphs.get(status, self.fallback)

    def decorate(self, status: str) -> str:
        """Return the group heading for ``status``, e.g. ``"🎉 *Closed*"``."""
        return f"{self.glyph_for(status)} *{status}*"


def display_status(value: str | None) -> str:
    """Status name as shown in the report; ``Unknown Status`` when absent."""
    if not value:
        return UNKNOWN_STATUS
    return value


def _defaults() -> StatusGlyphs:
    return StatusGlyphs()


def load_status_glyphs(path: str | Path | None = None) -> StatusGlyphs:
    """Build the glyph table, merging optional YAML overrides over the defaults.

    A missing or unreadable file falls back to the built-in table.
    """
    if path is None:
        return _defaults()
    yaml_path = Path(path)
    if not yaml_path.exists():
        logger.warning("Status glyph file %s not found; using defaults", yaml_path)
        return _defaults()
    try:
        data = yaml.safe_load(yaml_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Could not read status glyph file %s: %s", yaml_path, exc)
        return _defaults()
    if not isinstance(data, dict):
        logger.warning("Status glyph file %s is not a mapping; using defaults", yaml_path)
        return _defaults()
    merged = dict(DEFAULT_STATUS_GLYPHS)
    overrides = data.get("glyphs") or {}
    if isinstance(overrides, dict):
        merged.update({str(k): str(v) for k, v in overrides.items()})
    fallback = str(data.get("fallback") or DEFAULT_FALLBACK_GLYPH)
    return StatusGlyphs(glyphs=MappingProxyType(merged), fallback=fallback)
