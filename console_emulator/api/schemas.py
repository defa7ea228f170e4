"""
Pydantic models for API requests and responses.
"""

from typing import List

from pydantic import BaseModel, Field


class ExecuteRequest(BaseModel):
    """Schema for a command execution request."""

    command: str = Field(..., description="Command line to execute, e.g. 'ls /tmp'")


class ExecuteResponse(BaseModel):
    """Schema for a command execution response."""

    output: str = Field(..., description="Raw output of the command")
    content: str = Field(
        ..., description="Rendered history followed by the current prompt"
    )


class ContentResponse(BaseModel):
    """Schema for the rendered console content."""

    content: str = Field(
        ..., description="Rendered history followed by the current prompt"
    )
    prompt: str = Field(..., description="Current prompt, e.g. 'user@android:/$ '")

    @classmethod
    def from_console(cls, console):
        """Create a ContentResponse from a ConsoleEmulator."""
        return cls(content=console.get_content(), prompt=console.prompt)


class SetUserRequest(BaseModel):
    """Schema for changing the session user."""

    user: str = Field(..., min_length=1, description="New user name")


class HistoryResponse(BaseModel):
    """Schema for the raw history entries."""

    entries: List[str] = Field(
        default_factory=list, description="History entries, oldest first"
    )
    capacity: int = Field(..., description="Maximum number of entries kept")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
