"""
Pydantic models for API requests and responses.
"""

from pydantic import BaseModel, Field


class CommandRequest(BaseModel):
    """Schema for a submitted command line."""

    line: str = Field(..., description="Raw command line, e.g. 'ls /projects'")


class CommandResponse(BaseModel):
    """Schema for the result of a command line."""

    output: str = Field(..., description="Text output of the command")
    cwd: str = Field(..., description="Current directory after the command ran")
    clear: bool = Field(
        False, description="If true, the client should wipe its displayed history"
    )


class CwdResponse(BaseModel):
    """Schema for the current directory."""

    cwd: str = Field(..., description="Absolute path of the current directory")


class StatusResponse(BaseModel):
    """Schema for a simple status acknowledgement."""

    status: str = Field(..., description="Operation status")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
