from __future__ import annotations

from fastapi import APIRouter, Depends, status

from app.core.config import settings
from app.core.logging import bind_session, get_logger
from app.apis.deps import current_gate, current_session_id, http_error
from app.modules.flashcards.credentials import CredentialGate
from app.modules.flashcards.errors import FlashcardsError
from app.modules.flashcards.generator import FlashcardGenerator
from app.modules.flashcards.models.flashcards import (
    EXAMPLE_FLASHCARDS,
    Flashcard,
    FlashcardDeck,
)
from app.modules.flashcards.state import in_flight
from .schemas import (
    ApiKeyRequest,
    ErrorDetail,
    GenerateRequest,
    SessionStateResponse,
)


router = APIRouter()
logger = get_logger(__name__)

_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorDetail},
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorDetail},
    status.HTTP_409_CONFLICT: {"model": ErrorDetail},
    422: {"model": ErrorDetail},
    status.HTTP_502_BAD_GATEWAY: {"model": ErrorDetail},
}


def _session_state(gate: CredentialGate) -> SessionStateResponse:
    has_key = gate.has_credential()
    return SessionStateResponse(
        has_credential=has_key,
        rejected=gate.rejected,
        examples=[] if has_key else list(EXAMPLE_FLASHCARDS),
    )


@router.get(
    f"/{settings.app.version}/session",
    response_model=SessionStateResponse,
    tags=["session"],
)
async def get_session_state(
    gate: CredentialGate = Depends(current_gate),
) -> SessionStateResponse:
    return _session_state(gate)


@router.put(
    f"/{settings.app.version}/session/key",
    response_model=SessionStateResponse,
    responses=_ERRORS,
    tags=["session"],
)
async def set_api_key(
    req: ApiKeyRequest,
    gate: CredentialGate = Depends(current_gate),
    sid: str = Depends(current_session_id),
) -> SessionStateResponse:
    log = bind_session(logger, sid)
    try:
        gate.activate(req.api_key)
    except FlashcardsError as e:
        log.info("API key not accepted: %s", e.code)
        raise http_error(e) from e
    log.info("API key set for session")
    return _session_state(gate)


@router.delete(
    f"/{settings.app.version}/session/key",
    response_model=SessionStateResponse,
    tags=["session"],
)
async def clear_api_key(
    gate: CredentialGate = Depends(current_gate),
    sid: str = Depends(current_session_id),
) -> SessionStateResponse:
    gate.clear()
    bind_session(logger, sid).info("API key cleared for session")
    return _session_state(gate)


@router.get(
    f"/{settings.app.version}/flashcards/examples",
    response_model=list[Flashcard],
    tags=["flashcards"],
)
async def get_example_flashcards() -> list[Flashcard]:
    return list(EXAMPLE_FLASHCARDS)


@router.post(
    f"/{settings.app.version}/flashcards/generate",
    response_model=FlashcardDeck,
    responses=_ERRORS,
    status_code=status.HTTP_200_OK,
    tags=["flashcards"],
)
async def generate_flashcards(
    req: GenerateRequest,
    gate: CredentialGate = Depends(current_gate),
    sid: str = Depends(current_session_id),
) -> FlashcardDeck:
    generator = FlashcardGenerator(gate, session_id=sid, registry=in_flight)
    try:
        cards = await generator.generate(req.topic)
    except FlashcardsError as e:
        bind_session(logger, sid).info("Generation failed: %s", e.code)
        raise http_error(e) from e
    return FlashcardDeck(topic=req.topic.strip(), flashcards=cards)
