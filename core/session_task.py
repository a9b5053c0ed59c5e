"""
Session Task

One-shot background work bound to a form session.

A SessionToken identifies one form session. A SessionTask runs a single
blocking call on a daemon thread and resolves exactly once, either with a
value or with an exception. Its callbacks receive the token the task was
started with, so the receiver can ignore results whose session has ended.

Usage:
    token = SessionToken()
    task = SessionTask(
        name="SettingsFetch",
        token=token,
        work=lookup.get_default_visibility,
        on_success=lambda tok, value: ...,
        on_failure=lambda tok, error: ...,
    )
    task.start()
    token.cancel()  # late results are now stale
"""

import logging
import threading
from typing import Any, Callable, Optional
from uuid import uuid4


class SessionToken:
    """
    Identity of one form session.

    Cancelling is one-way: once cancelled, a token stays cancelled.
    """

    def __init__(self):
        self.session_id = uuid4().hex
        self._cancelled = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        self._cancelled.set()

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "active"
        return f"SessionToken({self.session_id[:8]}, {state})"


class SessionTask:
    """
    Runs `work()` once on a daemon thread.

    Exactly one of on_success / on_failure is called, from the worker thread.
    There is no retry.
    """

    def __init__(
        self,
        name: str,
        token: SessionToken,
        work: Callable[[], Any],
        on_success: Callable[[SessionToken, Any], None],
        on_failure: Optional[Callable[[SessionToken, Exception], None]] = None,
    ):
        self.logger = logging.getLogger(__name__)
        self.name = name
        self.token = token
        self._work = work
        self._on_success = on_success
        self._on_failure = on_failure

        self._thread: Optional[threading.Thread] = None
        self._done = threading.Event()

    @property
    def started(self) -> bool:
        return self._thread is not None

    @property
    def done(self) -> bool:
        return self._done.is_set()

    def start(self) -> None:
        """Start the worker thread (only once)"""
        if self._thread is not None:
            raise RuntimeError(f"Task {self.name} already started")

        self._thread = threading.Thread(
            target=self._run,
            daemon=True,
            name=self.name,
        )
        self._thread.start()
        self.logger.debug(f"Task {self.name} started for {self.token}")

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the task has resolved and its callback has returned.

        Returns:
            True if resolved within timeout
        """
        if self._thread is None:
            return False
        return self._done.wait(timeout)

    def _run(self) -> None:
        try:
            try:
                result = self._work()
            except Exception as e:
                self.logger.debug(f"Task {self.name} failed: {e}")
                if self._on_failure:
                    self._on_failure(self.token, e)
                return

            self._on_success(self.token, result)

        except Exception as e:
            # Callback errors must not kill the thread silently
            self.logger.error(f"Error in {self.name} callback: {e}")

        finally:
            self._done.set()
