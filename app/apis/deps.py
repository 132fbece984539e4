from __future__ import annotations

from fastapi import Depends, HTTPException, Request, status

from app.modules.flashcards.client import build_completion_client
from app.modules.flashcards.credentials import (
    ClientFactory,
    CookieSessionStore,
    CredentialGate,
)
from app.modules.flashcards.errors import (
    CredentialInvalid,
    EmptyResponse,
    EmptySecret,
    EmptyTopic,
    FlashcardsError,
    GenerationInProgress,
    InitError,
    NoValidFlashcards,
    NotInitialized,
    UpstreamError,
)
from app.modules.flashcards.state import new_session_id

SESSION_ID_KEY = "sid"

_STATUS_BY_ERROR: dict[type[FlashcardsError], int] = {
    EmptyTopic: 422,
    EmptySecret: 422,
    NoValidFlashcards: 422,
    NotInitialized: status.HTTP_401_UNAUTHORIZED,
    CredentialInvalid: status.HTTP_401_UNAUTHORIZED,
    InitError: status.HTTP_400_BAD_REQUEST,
    UpstreamError: status.HTTP_502_BAD_GATEWAY,
    EmptyResponse: status.HTTP_502_BAD_GATEWAY,
    GenerationInProgress: status.HTTP_409_CONFLICT,
}


def http_error(exc: FlashcardsError) -> HTTPException:
    """Map a flashcards error onto an HTTPException the page can display."""
    code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(
        status_code=code, detail={"code": exc.code, "message": exc.message}
    )


def current_session_id(request: Request) -> str:
    """Stable id for this browser session, created on first use."""
    sid = request.session.get(SESSION_ID_KEY)
    if not sid:
        sid = new_session_id()
        request.session[SESSION_ID_KEY] = sid
    return sid


def get_client_factory() -> ClientFactory:
    return build_completion_client


def current_gate(
    request: Request,
    client_factory: ClientFactory = Depends(get_client_factory),
) -> CredentialGate:
    """Gate for this request, re-activated from the session cookie if possible."""
    gate = CredentialGate(
        CookieSessionStore(request.session), client_factory=client_factory
    )
    gate.restore()
    return gate
