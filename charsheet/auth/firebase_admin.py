"""Firebase Admin SDK initialization."""

import firebase_admin
from firebase_admin import credentials

from charsheet.config import get_settings
from charsheet.utils.logging import get_logger

logger = get_logger(__name__)

_initialized = False


def initialize_firebase() -> bool:
    """Initialize the Firebase Admin SDK once.

    Returns:
        True if the SDK is ready, False if no credentials file was found
        (local development and tests run without one).
    """
    global _initialized
    if _initialized:
        return True

    settings = get_settings()

    try:
        cred = credentials.Certificate(settings.firebase_credentials_path)
        firebase_admin.initialize_app(cred)
        _initialized = True
    except FileNotFoundError:
        logger.warning(
            f"Firebase credentials not found at {settings.firebase_credentials_path}; "
            "token verification will fail"
        )
    except ValueError:
        # Already initialized
        _initialized = True
    return _initialized
