"""Root conftest: shared test configuration."""

import os

# Settings() must build without a real deployment environment
os.environ.setdefault("API_KEY", "test-api-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
