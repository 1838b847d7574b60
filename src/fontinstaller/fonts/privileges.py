"""Administrator/root detection."""

import ctypes
import logging
import os
import platform

logger = logging.getLogger(__name__)


def is_administrator(system: str | None = None) -> bool:
    """
    Check whether the current process may write to system font locations.

    On Windows this asks shell32 whether the token holds the administrator
    role; elsewhere the effective user id must be 0. Any failure to find out
    counts as not privileged.
    """
    system = (system or platform.system()).lower()
    try:
        if system == "windows":
            return bool(ctypes.WinDLL("shell32").IsUserAnAdmin())
        return os.geteuid() == 0
    except Exception as e:
        logger.debug(f"Could not determine privileges: {e}")
        return False
