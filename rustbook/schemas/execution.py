"""
Execution service schemas for RustBook.

Wire models for the remote code-execution endpoint:
- POST /api/execute request and response bodies
- GET /health response
- ExecutionResult, the normalized outcome applied to a session
"""

from typing import Literal, Optional

from pydantic import BaseModel


class ExecutionRequest(BaseModel):
    code: str
    mode: Literal["debug"] = "debug"


class ExecutionResponse(BaseModel):
    """Body returned by the execution service."""
    success: bool
    output: str = ""
    error: Optional[str] = None


class ServiceHealth(BaseModel):
    status: str
    version: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


class ExecutionResult(BaseModel):
    """Outcome of one run: either output (success) or an error message."""
    success: bool
    output: str = ""
    error: Optional[str] = None

    @classmethod
    def succeeded(cls, output: str) -> "ExecutionResult":
        return cls(success=True, output=output)

    @classmethod
    def failed(cls, error: str) -> "ExecutionResult":
        return cls(success=False, error=error)
