"""Notes API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import ErrorResponse, MessageResponse
from ..core.schemas.notes import (
    NoteCreate,
    NoteCreatedResponse,
    NoteEnvelope,
    NoteListEnvelope,
    NoteResponse,
    NoteUpdate,
)
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import get_current_username

router = APIRouter(
    tags=["notes"],
    responses={401: {"model": ErrorResponse}},
)


@router.post("/postNote", response_model=NoteCreatedResponse, responses={400: {"model": ErrorResponse}})
async def post_note(
    request: NoteCreate,
    current_user: str = Depends(get_current_username),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note."""
    note_service = NoteService(session)
    note_id = await note_service.create(current_user, request.title, request.content)
    return NoteCreatedResponse(response="Note added successfully.", insertedId=note_id)


@router.get(
    "/getNote/{note_id}",
    response_model=NoteEnvelope,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_note(
    note_id: str,
    current_user: str = Depends(get_current_username),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific note."""
    note_service = NoteService(session)
    note = await note_service.get(current_user, note_id)
    return NoteEnvelope(response=NoteResponse.from_model(note))


@router.get("/getAllNotes", response_model=NoteListEnvelope)
async def get_all_notes(
    current_user: str = Depends(get_current_username),
    session: AsyncSession = Depends(get_db_session),
):
    """List all notes of the current user."""
    note_service = NoteService(session)
    notes = await note_service.list_all(current_user)
    return NoteListEnvelope(response=[NoteResponse.from_model(note) for note in notes])


@router.patch(
    "/editNote/{note_id}",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def edit_note(
    note_id: str,
    request: NoteUpdate,
    current_user: str = Depends(get_current_username),
    session: AsyncSession = Depends(get_db_session),
):
    """Update the title and/or content of a note."""
    note_service = NoteService(session)
    return MessageResponse(response=await note_service.edit(current_user, note_id, request))


@router.delete(
    "/deleteNote/{note_id}",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_note(
    note_id: str,
    current_user: str = Depends(get_current_username),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note."""
    note_service = NoteService(session)
    return MessageResponse(response=await note_service.delete(current_user, note_id))
