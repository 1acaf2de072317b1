from __future__ import annotations

import os
import tempfile

# Settings are read once at import time; point them at a throwaway store first.
_TMP_DIR = tempfile.mkdtemp(prefix="chirpy-tests-")
os.environ["DB_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'chirpy.db')}"
os.environ["ASSETS_DIR"] = os.path.join(_TMP_DIR, "assets")
os.environ.setdefault("LOG_LEVEL", "WARNING")
