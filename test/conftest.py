from __future__ import annotations

import os
from pathlib import Path

# Load dotenv files early so the application settings pick them up
from dotenv import load_dotenv

TEST_ROOT = Path(__file__).resolve().parent
load_dotenv(TEST_ROOT / ".env", override=False)

# Settings are read when the application modules are first imported, so the
# test environment has to be in place before any ``todo_api`` import.
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

os.environ["DATABASE__URL"] = TEST_DATABASE_URL
os.environ["TODO_API_ENABLE_FILE_LOGGING"] = "false"
os.environ["LOGFIRE__ENABLED"] = "false"
