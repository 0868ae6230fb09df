"""Pytest bootstrap for local source imports.

Lets ``import lazytodo`` resolve to this checkout when the ``pytest`` console
script runs without the repository root on ``sys.path``.
"""

from __future__ import annotations

import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parent.parent

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
