"""Make ``import stagetree`` resolve to this checkout during test runs.

Lets the suite run from a plain clone, before ``pip install -e .``.
"""

from __future__ import annotations

import sys
from pathlib import Path


REPO_ROOT = Path(__file__).resolve().parent.parent

if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))
