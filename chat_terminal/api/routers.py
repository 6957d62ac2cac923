"""
FastAPI router definitions for the terminal endpoints.
"""

import asyncio

from fastapi import APIRouter, HTTPException

from chat_terminal.api.dependencies import get_command_dispatcher, get_file_system
from chat_terminal.api.schemas import (
    CommandRequest,
    CommandResponse,
    CwdResponse,
    ErrorResponse,
    StatusResponse,
)
from chat_terminal.utils.ansi import CLEAR_SENTINEL

router = APIRouter()

# One command at a time for the single session.
_command_lock = asyncio.Lock()


@router.post("/commands", response_model=CommandResponse)
async def run_command(body: CommandRequest):
    """
    Run a command line against the session.

    Args:
        body: Request body containing the command line

    Returns:
        CommandResponse: Output text, current directory and clear flag
    """
    dispatcher = get_command_dispatcher()
    async with _command_lock:
        output = await dispatcher.process_command(body.line)
        cwd = get_file_system().pwd()

    if output == CLEAR_SENTINEL:
        return CommandResponse(output="", cwd=cwd, clear=True)
    return CommandResponse(output=output, cwd=cwd)


@router.get("/cwd", response_model=CwdResponse)
def current_directory():
    """Return the current directory of the session."""
    return CwdResponse(cwd=get_file_system().pwd())


@router.post(
    "/storage/save",
    response_model=StatusResponse,
    responses={500: {"model": ErrorResponse}},
)
async def save_storage():
    """
    Persist the filesystem.

    Raises:
        HTTPException: If the storage cannot be written
    """
    try:
        await get_file_system().save_to_storage()
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
    return StatusResponse(status="ok")
