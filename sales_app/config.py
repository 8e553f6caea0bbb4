"""Runtime configuration defaults for persistence, session and logging."""

from __future__ import annotations

import os

DB_PATH = os.environ.get("SALES_APP_DB_PATH", "data/sales.db")

# Serialized user record for the restored login session.
SESSION_PATH = os.environ.get("SALES_APP_SESSION_PATH", "data/boxi-user.json")

DEBUG_LOG_PATH = os.environ.get("SALES_APP_DEBUG_LOG", "/tmp/sales-app-debug.log")

# Simulated latency of the mock auth backend, in seconds.
AUTH_DELAY_SECONDS = float(os.environ.get("SALES_APP_AUTH_DELAY", "1.0"))

ORDER_NUMBER_SUFFIX_DIGITS = 6
