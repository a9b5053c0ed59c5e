"""
Core utilities and modules.

Public API:
    - SessionToken: Identity of one form session
    - SessionTask: One-shot background task bound to a session

Usage:
    from core.session_task import SessionTask, SessionToken

    token = SessionToken()
    task = SessionTask("Fetch", token, work, on_success)
    task.start()
"""

from core.session_task import SessionTask, SessionToken

__all__ = [
    "SessionTask",
    "SessionToken",
]
