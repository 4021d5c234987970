"""HTTP and websocket endpoints. Thin: all decisions are made by the MatchService."""

import logging
from uuid import uuid4

from fastapi import APIRouter, Depends, Request, WebSocket, WebSocketDisconnect, status
from pydantic import ValidationError

from src.api.connections import ConnectionManager
from src.api.models import (
    GameStateResponse,
    LegalMovesResponse,
    MoveRequest,
    RejectionMessage,
    StateMessage,
)
from src.core.exceptions import InvalidRequestError, MatchFullError
from src.services.match_service import MatchService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_match_service(request: Request) -> MatchService:
    return request.app.state.match_service


@router.get("/state", response_model=GameStateResponse)
def get_state(service: MatchService = Depends(get_match_service)) -> GameStateResponse:
    """Polling alternative to the websocket."""
    return service.game_state()


@router.get("/moves/{slot}", response_model=LegalMovesResponse)
def get_legal_moves(
    slot: int, service: MatchService = Depends(get_match_service)
) -> LegalMovesResponse:
    return service.legal_moves(slot)


@router.websocket("/ws")
async def play(websocket: WebSocket) -> None:
    """
    One read loop per player.
    ----

    1. accept and assign a slot (refuse when the match already has two players)
    2. send the current state
    3. read moves until the client leaves: accepted moves are broadcast to everyone, rejections only go back to the sender
    """
    service: MatchService = websocket.app.state.match_service
    connections: ConnectionManager = websocket.app.state.connections
    connection_id = str(uuid4())

    await websocket.accept()
    try:
        slot = service.connect(connection_id)
    except MatchFullError as exc:
        logger.info("Refused connection %s: %s", connection_id, exc)
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION, reason=str(exc))
        return

    connections.add(connection_id, websocket)
    try:
        await connections.send(
            connection_id, StateMessage(slot=slot, state=service.game_state())
        )
        while True:
            payload = await websocket.receive_text()
            try:
                request = MoveRequest.model_validate_json(payload)
            except (InvalidRequestError, ValidationError) as exc:
                await connections.send(
                    connection_id,
                    RejectionMessage(reason="malformed request", detail=str(exc)),
                )
                continue

            response = service.make_move(slot, request)
            if response.accepted:
                await connections.broadcast(StateMessage(state=response.state))
            else:
                # for the type checker: a rejected response always carries its reason
                assert response.reason is not None and response.detail is not None
                await connections.send(
                    connection_id,
                    RejectionMessage(
                        reason=response.reason.value, detail=response.detail
                    ),
                )
    except WebSocketDisconnect:
        pass
    finally:
        connections.remove(connection_id)
        service.disconnect(connection_id)
