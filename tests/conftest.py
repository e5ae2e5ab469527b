from __future__ import annotations

import sys
from pathlib import Path

# `import src...` needs the repo root on sys.path when the package is not installed.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))
