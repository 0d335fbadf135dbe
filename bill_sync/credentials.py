"""
Credential input validation
"""

from .errors import ValidationError
from .models import Credentials

MISSING_CREDENTIALS_MESSAGE = "Please enter both Session ID and Developer Key."


def read_credentials(session_id: str | None, dev_key: str | None) -> Credentials:
    """Trim and validate the session id and developer key.

    :param session_id: Session id as entered or configured
    :type session_id: str | None
    :param dev_key: Developer key as entered or configured
    :type dev_key: str | None
    :return: Trimmed credentials
    :rtype: Credentials
    :raises ValidationError: If either value is missing or blank
    """
    session_id = (session_id or "").strip()
    dev_key = (dev_key or "").strip()

    if not session_id or not dev_key:
        raise ValidationError(MISSING_CREDENTIALS_MESSAGE)

    return Credentials(session_id=session_id, dev_key=dev_key)
