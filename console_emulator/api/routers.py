"""
FastAPI router definitions for the console endpoints.
"""

from fastapi import APIRouter, HTTPException

from console_emulator.api.dependencies import get_console, get_console_lock
from console_emulator.api.schemas import (
    ContentResponse,
    ErrorResponse,
    ExecuteRequest,
    ExecuteResponse,
    HistoryResponse,
    SetUserRequest,
)
from console_emulator.exceptions import ConsoleInitializationError

router = APIRouter(prefix="/console")


@router.post(
    "/execute",
    response_model=ExecuteResponse,
    responses={500: {"model": ErrorResponse}},
)
def execute_command(body: ExecuteRequest):
    """
    Execute a command line in the shared console.

    Args:
        body: Request body containing the command line

    Returns:
        ExecuteResponse: Command output and the updated console content

    Raises:
        HTTPException: If the console cannot be created
    """
    try:
        with get_console_lock():
            console = get_console()
            output = console.execute(body.command)
            return ExecuteResponse(output=output, content=console.get_content())
    except ConsoleInitializationError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get(
    "/content",
    response_model=ContentResponse,
    responses={500: {"model": ErrorResponse}},
)
def get_content():
    """
    Get the rendered history followed by the current prompt.

    Returns:
        ContentResponse: Console content and prompt
    """
    try:
        with get_console_lock():
            return ContentResponse.from_console(get_console())
    except ConsoleInitializationError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.put(
    "/user",
    response_model=ContentResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def set_user(body: SetUserRequest):
    """
    Change the session user.

    Args:
        body: Request body containing the new user name

    Returns:
        ContentResponse: Console content rendered with the new prompt

    Raises:
        HTTPException: If the user name is blank or the console cannot be created
    """
    try:
        with get_console_lock():
            console = get_console()
            console.set_user(body.user)
            return ContentResponse.from_console(console)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ConsoleInitializationError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get(
    "/history",
    response_model=HistoryResponse,
    responses={500: {"model": ErrorResponse}},
)
def get_history():
    """
    Get the raw history entries.

    Returns:
        HistoryResponse: Entries (oldest first) and buffer capacity
    """
    try:
        with get_console_lock():
            console = get_console()
            return HistoryResponse(
                entries=list(console.history), capacity=console.history_capacity
            )
    except ConsoleInitializationError as e:
        raise HTTPException(status_code=500, detail=str(e))
