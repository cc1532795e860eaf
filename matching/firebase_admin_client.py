"""Firebase Admin app bootstrap with test-safe behaviors."""

import logging
import os
import sys

import firebase_admin
from firebase_admin import credentials

logger = logging.getLogger(__name__)


def _is_mock(obj) -> bool:
    """Return True when obj is a unittest.mock sentinel."""
    return "unittest.mock" in type(obj).__module__


def _env_truthy(name: str, default: str = "false") -> bool:
    """Return True when env var is set to a truthy value."""
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def _is_running_tests():
    """Return True when Django or pytest is executing the test suite."""
    return any(arg in sys.argv for arg in ["test", "pytest"]) or "pytest" in sys.modules


def _should_skip_app_init() -> bool:
    """Skip Firebase init during tests unless explicitly enabled or mocked."""
    if not _is_running_tests():
        return False
    if _env_truthy("FIREBASE_ALLOW_TEST_APP"):
        return False
    return not _is_mock(firebase_admin.initialize_app)


def _load_credential():
    cred_path = os.getenv("FIREBASE_SERVICE_ACCOUNT_FILE")
    if not cred_path or not os.path.exists(cred_path):
        logger.warning("FIREBASE_SERVICE_ACCOUNT_FILE not found. Token authentication disabled.")
        return None
    return credentials.Certificate(cred_path)


_app = None


def get_app():
    """
    Lazily initialise the Firebase Admin app.
    Returns None if credentials are missing or invalid, preventing crashes.
    """
    global _app
    if _app:
        return _app
    if firebase_admin._apps:
        _app = firebase_admin.get_app()
        return _app
    if _should_skip_app_init():
        return None

    cred = _load_credential()
    if not cred:
        return None
    try:
        _app = firebase_admin.initialize_app(cred)
    except ValueError as e:
        logger.error("Failed to initialize Firebase: %s", e)
        return None
    return _app

