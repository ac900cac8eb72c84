"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional
from flask import request


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    return {
        'user_ip': getattr(request_obj, 'remote_addr', None) or 'unknown',
        'session_id': getattr(request_obj, 'sid', None)
    }


def serialize_state(session) -> Dict:
    """Client view of a game session; the answer only appears once the game is over."""
    data = session.state.to_dict()
    data['answer'] = session.answer
    return data
