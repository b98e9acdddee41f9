"""Carousel API routes.

These routes load a session's landing page, report its carousel state, and
feed it input events.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.api.dependencies import AppState, CarouselSession, get_carousel_host
from src.api.schemas import (
    CarouselView,
    ClickInput,
    ErrorResponse,
    InputRequest,
    InputResponse,
    ItemView,
    KeyInput,
    TouchInput,
    WheelInput,
)
from src.core.errors import CarouselError, ErrorCategory
from src.core.input_adapters import Signal
from src.core.logging import bind_contextvars, clear_contextvars, get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/sessions", tags=["carousel"])

_STATUS_FOR_CATEGORY = {
    ErrorCategory.INVALID_INPUT: 422,
    ErrorCategory.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCategory.STATE_CORRUPTION: status.HTTP_409_CONFLICT,
}


def status_for(category: ErrorCategory) -> int:
    return _STATUS_FOR_CATEGORY.get(category, status.HTTP_500_INTERNAL_SERVER_ERROR)


def http_error(ex: CarouselError) -> HTTPException:
    """Translate a carousel error into an HTTP error."""
    return HTTPException(status_code=status_for(ex.category), detail=str(ex))


def build_view(session_id: str, session: CarouselSession) -> CarouselView:
    """Snapshot a session's carousel for the response."""
    engine = session.controller.engine
    items = []
    for item, element in zip(engine.model.items, engine.elements):
        role = engine.role_of(item.id)
        items.append(
            ItemView(
                id=item.id,
                label=item.label,
                text=element.text,
                classes=list(session.container.get(item.id).classes),
                role=role.value if role else None,
            )
        )
    return CarouselView(
        session_id=session_id,
        active_index=engine.active_index,
        active_item=engine.model.active_item.id,
        state=engine.engine_state.value,
        pointer_events=session.container.pointer_events,
        items=items,
    )


def _require_carousel(host: AppState, session_id: str) -> CarouselSession:
    session = host.get_carousel(session_id)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No carousel loaded for session {session_id}",
        )
    return session


@router.put(
    "/{session_id}/carousel",
    response_model=CarouselView,
    responses={200: {"description": "Landing page loaded"}},
)
async def load_carousel(
    session_id: str,
    host: AppState = Depends(get_carousel_host),
) -> CarouselView:
    """Load (or reload) the landing page for a session.

    The carousel starts on the biome the session visited last, or on the
    first biome.
    """
    bind_contextvars(session_id=session_id)
    try:
        try:
            session = host.load_carousel(session_id)
        except CarouselError as ex:
            logger.error("carousel_load_failed", error=str(ex), category=ex.category.name)
            raise http_error(ex) from ex

        logger.info(
            "carousel_loaded",
            active_item=session.controller.engine.model.active_item.id,
        )
        return build_view(session_id, session)
    finally:
        clear_contextvars()


@router.get(
    "/{session_id}/carousel",
    response_model=CarouselView,
    responses={404: {"model": ErrorResponse, "description": "No carousel loaded"}},
)
async def get_carousel(
    session_id: str,
    host: AppState = Depends(get_carousel_host),
) -> CarouselView:
    """Get the current state of a session's carousel."""
    return build_view(session_id, _require_carousel(host, session_id))


@router.post(
    "/{session_id}/carousel/input",
    response_model=InputResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Unknown session or element"},
        409: {"model": ErrorResponse, "description": "Carousel state corrupted"},
    },
)
async def send_input(
    session_id: str,
    request: InputRequest,
    host: AppState = Depends(get_carousel_host),
) -> InputResponse:
    """Deliver one input event to a session's carousel.

    Events arriving while the carousel is settling after a transition are
    accepted but have no effect.
    """
    session = _require_carousel(host, session_id)
    controller = session.controller
    engine = controller.engine
    event = request.event

    bind_contextvars(session_id=session_id, channel=event.channel)
    try:
        transitions_before = engine.transitions
        navigations_before = len(session.navigator.history)
        signal: Signal | None = None

        try:
            if isinstance(event, ClickInput):
                if session.container.get(event.element_id) is None:
                    raise HTTPException(
                        status_code=status.HTTP_404_NOT_FOUND,
                        detail=f"Element not found: {event.element_id}",
                    )
                signal = controller.on_click(event.element_id)
            elif isinstance(event, WheelInput):
                signal = controller.on_wheel(event.delta_x, event.delta_y)
            elif isinstance(event, KeyInput):
                signal = controller.on_key(event.key)
            elif isinstance(event, TouchInput):
                if event.phase == "start":
                    controller.on_touch_start(event.x, event.y)
                elif event.phase == "move":
                    controller.on_touch_move(event.x, event.y)
                else:
                    signal = controller.on_touch_end(event.x, event.y)
        except CarouselError as ex:
            logger.error("input_failed", error=str(ex), category=ex.category.name)
            raise http_error(ex) from ex

        navigate_to = None
        if len(session.navigator.history) > navigations_before:
            navigate_to = session.navigator.location

        return InputResponse(
            signal=signal.value if signal else None,
            transitioned=engine.transitions > transitions_before,
            navigate_to=navigate_to,
            carousel=build_view(session_id, session),
        )
    finally:
        clear_contextvars()


@router.delete(
    "/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse, "description": "Unknown session"}},
)
async def end_session(
    session_id: str,
    host: AppState = Depends(get_carousel_host),
) -> Response:
    """End a browser session: drop its carousel and session storage."""
    if not host.end_session(session_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown session {session_id}",
        )
    logger.info("session_ended", session_id=session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
