# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
See src/seqflow/config.py for parsing rules; malformed values fall back to the defaults below.

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "SEQFLOW_APP_NAME": "App display name (default: seqflow).",
    "SEQFLOW_LOG_LEVEL": "Console logging level for the CLI (default: INFO).",
    "SEQFLOW_LOG_DIR": "Directory for the log file (default: .local/seqflow).",
    "SEQFLOW_LOG_TO_FILE": "Also write full DEBUG logs to <log dir>/seqflow.log (true/false, default: false).",
    # Runner defaults
    "SEQFLOW_DEFAULT_DELAY_MS": "Default wait/sleep interval in milliseconds (default: 1000).",
    "SEQFLOW_TIMER": "Timer backend for delay steps: thread | asyncio (default: thread).",
    "SEQFLOW_TS_FORMAT": "strftime pattern for timestamp steps (default: %Y-%m-%d %H:%M:%S).",
}
