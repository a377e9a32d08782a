"""
Self‑registration with the Super App directory.

At startup the service announces its name, capabilities and callback
URL to the directory.  The directory may not be up yet, so
registration is retried a bounded number of times with a fixed pause
between attempts.  Registration is best effort: whatever happens, the
API keeps serving requests.

The handshake is a small state machine::

    idle -> attempting -> registered
                       -> gave_up

It runs once per process.  Calling :meth:`RegistrationHandshake.run`
again after a terminal state performs no further attempts.  When the
server begins shutting down the remaining attempts are abandoned and the
handshake ends in ``gave_up``.
"""

import asyncio
import logging
import threading
import time
from enum import Enum
from typing import Any, Callable, Dict, Optional, Protocol, Sequence, Tuple

logger = logging.getLogger(__name__)


class RegistrationState(str, Enum):
    IDLE = "idle"
    ATTEMPTING = "attempting"
    REGISTERED = "registered"
    GAVE_UP = "gave_up"


class DirectoryClient(Protocol):
    def register(
        self, name: str, capabilities: Sequence[str], callback_url: str
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        ...


class RegistrationHandshake:
    """Bounded, fixed‑interval retry of the directory registration call."""

    def __init__(
        self,
        client: DirectoryClient,
        *,
        service_name: str,
        capabilities: Sequence[str],
        callback_url: str,
        max_attempts: int = 5,
        retry_interval: float = 2.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.client = client
        self.service_name = service_name
        self.capabilities = list(capabilities)
        self.callback_url = callback_url
        self.max_attempts = max_attempts
        self.retry_interval = retry_interval
        self._sleep = sleep
        self._lock = threading.Lock()
        self.state = RegistrationState.IDLE
        self.attempts = 0
        self.last_error: Optional[str] = None

    def run(self, should_stop: Optional[Callable[[], bool]] = None) -> RegistrationState:
        """Register with the directory, retrying on failure.

        Blocks the calling thread for at most
        ``max_attempts * (request timeout + retry_interval)``.  Never
        raises because of directory failures.  ``should_stop`` is checked
        before and after each pause; once it returns true no further
        attempt is made.
        """
        with self._lock:
            if self.state is not RegistrationState.IDLE:
                logger.debug("Registration already %s, not retrying", self.state.value)
                return self.state
            self.state = RegistrationState.ATTEMPTING

        while True:
            self.attempts += 1
            logger.info(
                "Attempting to register %s with Super App (attempt %d/%d)",
                self.service_name,
                self.attempts,
                self.max_attempts,
            )
            error = self._attempt()
            if error is None:
                self.state = RegistrationState.REGISTERED
                logger.info("%s registered successfully", self.service_name)
                return self.state

            self.last_error = error
            logger.warning("Registration attempt %d failed: %s", self.attempts, error)
            if self.attempts >= self.max_attempts:
                self.state = RegistrationState.GAVE_UP
                logger.warning(
                    "All %d registration attempts failed, continuing without registration",
                    self.max_attempts,
                )
                return self.state

            if self._stopping(should_stop):
                return self.state
            logger.info("Waiting %.1fs before retry", self.retry_interval)
            self._sleep(self.retry_interval)
            if self._stopping(should_stop):
                return self.state

    def _stopping(self, should_stop: Optional[Callable[[], bool]]) -> bool:
        if should_stop is None or not should_stop():
            return False
        self.state = RegistrationState.GAVE_UP
        logger.info("Shutting down, abandoning registration after %d attempt(s)", self.attempts)
        return True

    def _attempt(self) -> Optional[str]:
        """Perform one registration call and return an error message, or ``None`` on success."""
        try:
            _, error = self.client.register(self.service_name, self.capabilities, self.callback_url)
        except Exception as exc:
            # Registration failures must never reach the request path.
            return f"{type(exc).__name__}: {exc}"
        if error:
            status = error.get("status_code")
            message = error.get("message") or "unknown error"
            return f"HTTP {status}: {message}" if status else message
        return None

    def status(self) -> Dict[str, Any]:
        return {
            "state": self.state.value,
            "attempts": self.attempts,
            "max_attempts": self.max_attempts,
            "last_error": self.last_error,
        }


async def register_when_listening(
    server: Any, handshake: RegistrationHandshake, poll_interval: float = 0.1
) -> RegistrationState:
    """Run the handshake once ``server`` reports it is accepting connections.

    ``server`` is a ``uvicorn.Server`` (or anything with ``started`` and
    ``should_exit`` attributes).  The blocking handshake runs on a worker
    thread so the event loop keeps serving requests in the meantime.  If
    the server shuts down before it started listening, no attempt is made;
    if it shuts down during the handshake, retries stop at the next pause.
    """
    while not server.started:
        if server.should_exit:
            logger.info("Server stopped before listening, skipping registration")
            return handshake.state
        await asyncio.sleep(poll_interval)
    return await asyncio.to_thread(handshake.run, lambda: server.should_exit)
