"""
Cancellation tokens for in-flight work tied to a consumer's lifetime.

A token is cancelled when its owner (a stream connection, a request) goes
away. Results that resolve after that point are discarded by run_guarded
instead of being applied to state nobody is looking at anymore.
"""
import inspect
from typing import Awaitable, Callable, List, TypeVar

from jobportal.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class OperationCancelled(Exception):
    """Raised when work finishes after its token was cancelled."""


class CancellationToken:
    def __init__(self, name: str = "operation"):
        self.name = name
        self._cancelled = False
        self._callbacks: List[Callable[[], None]] = []

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()
        logger.debug("token_cancelled", token=self.name)

    def on_cancel(self, callback: Callable[[], None]) -> None:
        """Run callback on cancel, immediately if already cancelled."""
        if self._cancelled:
            callback()
        else:
            self._callbacks.append(callback)

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise OperationCancelled(self.name)


async def run_guarded(token: CancellationToken, operation: Awaitable[T]) -> T:
    """
    Await an operation and hand back its result only if the token is still live.

    Raises:
        OperationCancelled: if the token was cancelled before or during the await.
    """
    if token.cancelled:
        if inspect.iscoroutine(operation):
            operation.close()
        raise OperationCancelled(token.name)
    result = await operation
    if token.cancelled:
        logger.info("stale_result_discarded", token=token.name)
        raise OperationCancelled(token.name)
    return result
