from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
API_DIR = ROOT / "API"
if str(API_DIR) not in sys.path:
    sys.path.insert(0, str(API_DIR))

# Test-mode runtime guards:
# - throwaway SQLite database instead of Postgres
# - reset endpoint enabled
# - cheap password hashing
_TMP_DIR = Path(tempfile.mkdtemp(prefix="chirpy-tests-"))
STATIC_ROOT = _TMP_DIR / "static"
STATIC_ROOT.mkdir()
(STATIC_ROOT / "index.html").write_text("<html><body>Welcome to Chirpy</body></html>", encoding="utf-8")

os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_TMP_DIR / 'chirpy.db'}")
os.environ.setdefault("PLATFORM", "dev")
os.environ.setdefault("FILEPATH_ROOT", str(STATIC_ROOT))
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "1000")

from app.main import app  # noqa: E402


@pytest.fixture(scope="session")
def client() -> TestClient:
    with TestClient(app) as tc:
        yield tc
