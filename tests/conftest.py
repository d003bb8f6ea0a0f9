"""Shared pytest setup for the debrief test suite.

Puts the project root on sys.path so `import debrief_app` resolves from a plain
checkout, without `pip install -e .`.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
