"""
Notification routes, including the real-time notification stream.
"""
import asyncio
import contextlib
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, WebSocket, WebSocketDisconnect, status
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.websockets import WebSocketState

from jobportal.api.deps import get_session
from jobportal.core.cancellation import CancellationToken, OperationCancelled, run_guarded
from jobportal.core.database import get_db
from jobportal.core.exceptions import UnauthorizedException
from jobportal.core.logging import get_logger
from jobportal.core.session import SessionContext, SessionEvent, SIGNED_OUT, session_hub
from jobportal.schemas.base import MessageResponse
from jobportal.schemas.notification import NotificationListResponse, NotificationResponse
from jobportal.services.auth_service import AuthService
from jobportal.services.notification_service import NotificationService

logger = get_logger(__name__)

router = APIRouter(prefix="/notifications", tags=["notifications"])

notification_service = NotificationService()
auth_service = AuthService()


@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    unread_only: bool = Query(False),
    session: SessionContext = Depends(get_session),
    db: AsyncSession = Depends(get_db),
):
    """The current user's notifications, newest first."""
    return await notification_service.list_notifications(
        db,
        session.user_id,
        unread_only=unread_only,
    )


@router.patch("/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_read(
    notification_id: UUID,
    session: SessionContext = Depends(get_session),
    db: AsyncSession = Depends(get_db),
):
    return await notification_service.mark_read(db, session.user_id, notification_id)


@router.delete("/{notification_id}", response_model=MessageResponse)
async def delete_notification(
    notification_id: UUID,
    session: SessionContext = Depends(get_session),
    db: AsyncSession = Depends(get_db),
):
    return await notification_service.delete(db, session.user_id, notification_id)


async def _watch_disconnect(websocket: WebSocket, token: CancellationToken) -> None:
    """Cancel the stream's token once the client goes away."""
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.debug("notification_stream_client_left", token=token.name)
    except Exception as e:
        logger.warning("notification_stream_receive_failed", token=token.name, error=repr(e))
    finally:
        token.cancel()


@router.websocket("/stream")
async def notification_stream(
    websocket: WebSocket,
    token: str = Query(..., description="Access token"),
    db: AsyncSession = Depends(get_db),
):
    """
    Push new notifications to the signed-in user as they are inserted.

    The current unread notifications are sent first as a snapshot. The
    stream ends when the client disconnects or the user signs out.
    """
    try:
        session = await auth_service.resolve_session(db, token)
    except UnauthorizedException:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await websocket.accept()

    cancel_token = CancellationToken(f"notification_stream:{session.user_id}")
    subscription = notification_service.subscribe(session.user_id)
    cancel_token.on_cancel(subscription.unsubscribe)

    def on_session_change(event: SessionEvent) -> None:
        if event.event == SIGNED_OUT and event.user_id == session.user_id:
            cancel_token.cancel()

    detach_session = session_hub.subscribe(on_session_change)
    watcher: Optional[asyncio.Task] = None
    logger.info("notification_stream_opened", user_id=str(session.user_id))

    try:
        snapshot = await run_guarded(
            cancel_token,
            notification_service.list_notifications(db, session.user_id, unread_only=True),
        )
        # Release the connection; the stream itself doesn't query
        await db.close()
        await run_guarded(
            cancel_token,
            websocket.send_json({"event": "snapshot", **snapshot.model_dump(mode="json")}),
        )

        watcher = asyncio.create_task(_watch_disconnect(websocket, cancel_token))
        async for event in subscription:
            await run_guarded(cancel_token, websocket.send_json(event.to_message()))
    except (OperationCancelled, WebSocketDisconnect):
        pass
    finally:
        detach_session()
        cancel_token.cancel()
        if watcher is not None:
            watcher.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await watcher
        logger.info("notification_stream_closed", user_id=str(session.user_id))

    if websocket.client_state == WebSocketState.CONNECTED:
        await websocket.close()
