import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Query, Response
from sqlmodel import Session

from session_catalog.database import get_session
from session_catalog.errors import NotFoundError
from session_catalog.models.session import ConferenceSession
from session_catalog.repository import SessionStore, SqlSessionStore
from session_catalog.schemas import SessionCreated, SessionPayload, SessionResponse
from session_catalog.validation import require_valid_payload

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 10

# Range a 64-bit SQL INTEGER can bind; anything outside is a 400
SQL_INT_MAX = 2**63 - 1
SQL_INT_MIN = -(2**63)

SessionId = Annotated[int, Path(ge=SQL_INT_MIN, le=SQL_INT_MAX, description="Session ID")]


def get_store(session: Session = Depends(get_session)) -> SessionStore:
    return SqlSessionStore(session)


def require_existing_session(store: SessionStore, session_id: int, action: str) -> ConferenceSession:
    """Existence check shared by update and delete.

    The log line names the action and id; the client only sees the action.
    """
    existing = store.find_by_id(session_id)
    if existing is None:
        logger.warning("Failed to %s. Session with ID %s not found.", action, session_id)
        raise NotFoundError(f"Session not found for {action}")
    return existing


@router.post("/sessions", response_model=SessionCreated, status_code=201)
def create_session(payload: SessionPayload, store: SessionStore = Depends(get_store)):
    """Create a session; the store assigns the id"""
    require_valid_payload(payload)
    record = payload.to_record()
    record.id = None
    new_id = store.insert(record)
    logger.info("Created session with ID: %s", new_id)
    return {"id": new_id}


@router.get("/sessions/{session_id}", response_model=SessionResponse)
def get_session_by_id(session_id: SessionId, store: SessionStore = Depends(get_store)):
    """Get a session by ID"""
    logger.debug("Fetching session with ID: %s", session_id)
    found = store.find_by_id(session_id)
    if found is None:
        raise NotFoundError(f"Session not found for ID: {session_id}")
    return found


@router.get("/sessions", response_model=List[SessionResponse])
def list_sessions(
    offset: int = Query(DEFAULT_OFFSET, ge=0, le=SQL_INT_MAX, description="Number of sessions to skip"),
    limit: int = Query(DEFAULT_LIMIT, ge=0, le=SQL_INT_MAX, description="Maximum number of sessions to return"),
    store: SessionStore = Depends(get_store),
):
    """List sessions ordered by ID"""
    logger.debug("Fetching sessions with offset: %s, limit: %s", offset, limit)
    return store.find_paginated(offset, limit)


@router.put("/sessions/{session_id}")
def update_session(session_id: SessionId, payload: SessionPayload, store: SessionStore = Depends(get_store)):
    """Replace every field of an existing session; the path ID always wins"""
    require_valid_payload(payload)
    require_existing_session(store, session_id, "update")

    record = payload.to_record()
    record.id = session_id
    store.update(record)
    logger.info("Session with ID %s updated successfully.", session_id)
    return Response(status_code=200)


@router.delete("/sessions/{session_id}", status_code=204)
def delete_session(session_id: SessionId, store: SessionStore = Depends(get_store)):
    """Delete a session by ID"""
    require_existing_session(store, session_id, "delete")
    store.delete(session_id)
    logger.info("Session with ID %s deleted successfully.", session_id)
    return Response(status_code=204)
