"""Board API routes."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, File, HTTPException, Request, UploadFile
from pydantic import BaseModel

from ..errors import BoardNotFoundError, StoreError
from ..services import BoardService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


class BoardCreate(BaseModel):
    """Request body for creating a board."""

    name: str | None = None


def get_board_service(request: Request) -> BoardService:
    """Get the board service built at startup."""
    return request.app.state.board_service


def _server_error(message: str, error: StoreError) -> HTTPException:
    logger.error("%s: %s", message, error)
    return HTTPException(status_code=500, detail=message)


def _not_found(error: BoardNotFoundError) -> HTTPException:
    logger.debug("Not found: %s", error)
    return HTTPException(status_code=404, detail=str(error))


@router.get("/files")
def list_files(service: BoardService = Depends(get_board_service)) -> list[str]:
    try:
        return service.list_filenames()
    except StoreError as e:
        raise _server_error("Failed to read files", e) from e


@router.get("/boards")
def list_boards(service: BoardService = Depends(get_board_service)) -> list[Any]:
    try:
        return service.list_boards()
    except StoreError as e:
        raise _server_error("Failed to read boards", e) from e


@router.post("/boards", status_code=201)
def create_board(
    payload: BoardCreate,
    service: BoardService = Depends(get_board_service),
) -> dict[str, Any]:
    try:
        _, board = service.create_board(payload.name)
    except StoreError as e:
        raise _server_error("Failed to create board", e) from e
    return board.to_document()


@router.get("/boards/{file_name}")
def get_board(file_name: str, service: BoardService = Depends(get_board_service)) -> Any:
    try:
        return service.get_board(file_name)
    except BoardNotFoundError as e:
        raise _not_found(e) from e
    except StoreError as e:
        raise _server_error("Failed to read board", e) from e


@router.put("/boards/{file_name}")
def update_board(
    file_name: str,
    candidate: Any = Body(None),
    service: BoardService = Depends(get_board_service),
) -> dict[str, Any]:
    try:
        board = service.update_board(file_name, candidate)
    except StoreError as e:
        raise _server_error("Failed to update board", e) from e
    return board.to_document()


@router.get("/validate/{file_name}")
def validate_board(
    file_name: str,
    service: BoardService = Depends(get_board_service),
) -> dict[str, bool]:
    try:
        return {"isValid": service.validate_file(file_name)}
    except BoardNotFoundError as e:
        raise _not_found(e) from e
    except StoreError as e:
        raise _server_error("Failed to validate board", e) from e


@router.post("/import", status_code=201)
def import_board(
    file: UploadFile = File(...),
    service: BoardService = Depends(get_board_service),
) -> dict[str, Any]:
    content = file.file.read()
    try:
        _, board = service.import_board(file.filename, content)
    except StoreError as e:
        raise _server_error("Failed to import board", e) from e
    return board.to_document()
