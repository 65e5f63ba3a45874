"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract user identity information from an HTTP or WebSocket request."""
    if request_obj is None:
        from flask import request as request_obj

    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None),
    }


def normalize_name(name) -> str:
    """Uppercase and strip an animal name or guess; non-strings become ''."""
    if not isinstance(name, str):
        return ''
    return name.strip().upper()
