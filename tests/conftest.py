"""
tests/conftest.py
Logging silencioso durante la suite: solo WARNING o superior, sin cache de
loggers para que structlog.testing.capture_logs funcione.
"""
from zeropoint_core.logs import configure_logging

configure_logging("zeropoint-tests", level="WARNING", cache=False)
