"""Put the checkout root on ``sys.path`` so tests import the local ``dirlist``.

Lets the suite run from a plain checkout without ``pip install -e .``.
"""

from __future__ import annotations

import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parent.parent
PROJECT_ROOT_STR = str(PROJECT_ROOT)

if PROJECT_ROOT_STR not in sys.path:
    sys.path.insert(0, PROJECT_ROOT_STR)
