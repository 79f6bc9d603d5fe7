"""
Execution client - Submit learner code to the remote execution service.

Provides:
- ExecutionClient: HTTP wrapper for POST /api/execute and GET /health
- CodeRunner: drives a LessonSession through one run, synchronously or
  on a background worker

Every failure of the exchange (connection error, timeout, HTTP error
without a usable body, malformed JSON) becomes a failed ExecutionResult
with a generic message; nothing here raises into the caller.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional

import requests
from pydantic import ValidationError

from rustbook.schemas import (
    Course,
    ExecutionRequest,
    ExecutionResponse,
    ExecutionResult,
    ServiceHealth,
)
from rustbook.utils import Settings

from .session import LessonSession


logger = logging.getLogger(__name__)

EXECUTE_PATH = "/api/execute"
HEALTH_PATH = "/health"
HEALTH_TIMEOUT = 5

EXECUTION_FAILED_MESSAGE = "Failed to execute code"
CONNECTION_FAILED_MESSAGE = "Failed to connect to execution service"
NOT_EXECUTABLE_MESSAGE = (
    "Solana code samples are for reference only. Running them requires "
    "a Node.js environment with the Solana dependencies installed."
)


# -----------------------------------------------------------------------------
# HTTP client
# -----------------------------------------------------------------------------

class ExecutionClient:
    """Wrapper for the execution service API."""

    def __init__(self, base_url: str, timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "ExecutionClient":
        return cls(settings.execute_url, timeout=settings.execute_timeout)

    def execute(self, code: str) -> ExecutionResult:
        """
        Run code on the service.

        A hung request is cut off after self.timeout seconds and reported
        like any other transport failure.
        """
        payload = ExecutionRequest(code=code)
        logger.info(f"Executing {len(code)} chars at {self.base_url}{EXECUTE_PATH}")

        try:
            response = requests.post(
                f"{self.base_url}{EXECUTE_PATH}",
                json=payload.model_dump(),
                timeout=self.timeout,
            )
            body = ExecutionResponse.model_validate(response.json())
        except requests.RequestException as e:
            # includes a body that is not JSON
            logger.warning(f"Execution request failed: {e}")
            return ExecutionResult.failed(CONNECTION_FAILED_MESSAGE)
        except ValidationError as e:
            logger.warning(f"Malformed execution response: {e}")
            return ExecutionResult.failed(CONNECTION_FAILED_MESSAGE)

        if body.success:
            return ExecutionResult.succeeded(body.output)
        return ExecutionResult.failed(body.error or EXECUTION_FAILED_MESSAGE)

    def health(self) -> Optional[ServiceHealth]:
        """Check the service health endpoint. Returns None if unreachable."""
        try:
            response = requests.get(f"{self.base_url}{HEALTH_PATH}", timeout=HEALTH_TIMEOUT)
            response.raise_for_status()
            return ServiceHealth.model_validate(response.json())
        except requests.RequestException as e:
            logger.warning(f"Health check failed: {e}")
            return None
        except ValidationError as e:
            logger.warning(f"Malformed health response: {e}")
            return None


# -----------------------------------------------------------------------------
# Run orchestration
# -----------------------------------------------------------------------------

class CodeRunner:
    """
    Run a session's code against the service.

    The session's ticket decides whether a result still applies; the runner
    never checks which lesson is current itself.
    """

    def __init__(self, client: ExecutionClient, max_workers: int = 2):
        self.client = client
        self._pool = ThreadPoolExecutor(max_workers=max_workers)

    def _execute_for(self, course: Course, code: str) -> ExecutionResult:
        if not course.language.executable:
            return ExecutionResult.succeeded(NOT_EXECUTABLE_MESSAGE)
        return self.client.execute(code)

    def run(self, session: LessonSession, course: Course) -> bool:
        """
        Run synchronously.

        Returns:
            True if a run happened and its result was applied, False if a run
            was already in flight
        """
        ticket = session.begin_execution()
        if ticket is None:
            return False
        result = self._execute_for(course, session.code)
        return session.complete_execution(ticket, result)

    def submit(self, session: LessonSession, course: Course) -> Optional[Future]:
        """
        Run on a background worker; the result is applied when it arrives.

        Returns:
            Future resolving to whether the result was applied, or None if a
            run was already in flight
        """
        ticket = session.begin_execution()
        if ticket is None:
            return None

        code = session.code
        future = self._pool.submit(self._execute_for, course, code)
        applied: Future = Future()

        def _apply(done: Future):
            error = done.exception()
            if error is not None:
                logger.error(f"Run for {ticket.lesson} crashed: {error}")
                result = ExecutionResult.failed(EXECUTION_FAILED_MESSAGE)
            else:
                result = done.result()
            applied.set_result(session.complete_execution(ticket, result))

        future.add_done_callback(_apply)
        return applied

    def shutdown(self):
        self._pool.shutdown(wait=True)
