"""
Runtime configuration, read from environment variables.
"""

import os

LEDGER_DATABASE_PATH = os.getenv("LEDGER_DATABASE_PATH", "database1.txt")

# Upper bound on declared transactions accepted by the pipeline
MAX_TRANSACTIONS = int(os.getenv("MAX_TRANSACTIONS", "1000000"))

# Text listings above this many vertices are omitted from API responses
RENDER_MAX_VERTICES = int(os.getenv("RENDER_MAX_VERTICES", "1000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
