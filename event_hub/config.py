"""
Event Hub — Centralized configuration
Environment-driven defaults and pattern constants in a single place.
"""

import os

# ── Logging ───────────────────────────────────────────────────────────────────

# New sinks start enabled unless EVENT_HUB_LOG=0
LOG_ENABLED = os.getenv("EVENT_HUB_LOG", "1") == "1"
LOGGER_NAME = os.getenv("EVENT_HUB_LOGGER", "event_hub")
LOG_PREFIX = os.getenv("EVENT_HUB_LOG_PREFIX", "[event-hub]")

# ── Patterns ──────────────────────────────────────────────────────────────────

SEGMENT_SEPARATOR = "."
SEGMENT_WILDCARD = "*"
WILDCARD_MARKER = SEGMENT_SEPARATOR + SEGMENT_WILDCARD  # ".*"

# One run of non-separator characters
SEGMENT_REGEX = "[^.]+"

# ── Version ───────────────────────────────────────────────────────────────────

VERSION = "1.0.0"
