"""Callable relay: a relay value that can also be invoked as a function."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any, Generic, TypeVar, overload

from nanorelay.config.schema import RelayConfig
from nanorelay.relay.base import Listener, Relay
from nanorelay.relay.variants import Channel, Signal

T = TypeVar("T")


class CallableRelay(Generic[T]):
    """Wraps an owned :class:`Relay` and overloads ``__call__`` on arity.

    * ``relay(callback)`` subscribes and returns the unsubscribe handle.
    * ``relay()`` returns a future for the next dispatched value.

    Every other operation is forwarded to the owned relay.
    """

    def __init__(self, relay: Relay[T]) -> None:
        self.relay = relay

    @overload
    def __call__(self) -> asyncio.Future[T]: ...

    @overload
    def __call__(self, callback: Listener) -> Callable[[], None]: ...

    def __call__(self, callback: Listener | None = None) -> Any:
        if callback is not None:
            return self.subscribe(callback)
        return self.once()

    def subscribe(self, callback: Listener) -> Callable[[], None]:
        return self.relay.add_listener(callback)

    def once(self) -> asyncio.Future[T]:
        """Future for the next dispatch, served by a self-removing listener.

        Unlike :meth:`next`, this does not go through the waiter queue: the
        future is resolved synchronously inside ``dispatch``, alongside the
        persistent listeners.
        """
        future: asyncio.Future[T] = asyncio.get_running_loop().create_future()

        def _once(*args: Any) -> None:
            self.relay.remove_listener(_once)
            if not future.done():
                future.set_result(args[0] if args else None)

        self.relay.add_listener(_once)
        # Cancelled or timed-out awaits must not leave _once registered.
        future.add_done_callback(lambda _: self.relay.remove_listener(_once))
        return future

    # -- pass-through ------------------------------------------------------

    def add_listener(self, callback: Listener) -> Callable[[], None]:
        return self.relay.add_listener(callback)

    def remove_listener(self, callback: Listener) -> None:
        self.relay.remove_listener(callback)

    def dispatch(self, *args: Any) -> None:
        """Forward to the owned relay.

        Arity is not checked statically here; the owned :class:`Signal` or
        :class:`Channel` raises ``TypeError`` on a wrong payload count.
        """
        self.relay.dispatch(*args)

    def dispose(self) -> None:
        self.relay.dispose()

    def next(self) -> asyncio.Future[T]:
        return self.relay.next()

    def then(
        self,
        resolve: Callable[[T], Any],
        reject: Callable[[BaseException], Any] | None = None,
    ) -> None:
        self.relay.then(resolve, reject)

    @property
    def name(self) -> str:
        return self.relay.name

    @property
    def listener_count(self) -> int:
        return self.relay.listener_count

    @property
    def pending_count(self) -> int:
        return self.relay.pending_count

    def __repr__(self) -> str:
        return f"<CallableRelay {self.relay!r}>"


# -----------------------------------------------------------------------
# Factories
# -----------------------------------------------------------------------

def create_signal(config: RelayConfig | None = None) -> CallableRelay[None]:
    """Create a callable relay whose dispatch carries no payload."""
    return CallableRelay(Signal(config))


def create_channel(config: RelayConfig | None = None) -> CallableRelay[Any]:
    """Create a callable relay whose dispatch requires a payload."""
    return CallableRelay(Channel(config))


def create_relay(
    config: RelayConfig | None = None, *, payload: bool = True
) -> CallableRelay[Any]:
    """Create a fresh, empty callable relay.

    Args:
        config: Optional relay configuration (name, tracing, leak warning).
        payload: ``True`` for a :class:`Channel`, ``False`` for a :class:`Signal`.
    """
    return create_channel(config) if payload else create_signal(config)
