# Andy Zhao
"""
Runtime switches read from the environment.

CORNERCV_DEBUG=1 -> detectors / extractors log per-call counts at DEBUG level.
"""
from __future__ import annotations

import os

DEBUG = os.environ.get("CORNERCV_DEBUG", "0") == "1"
