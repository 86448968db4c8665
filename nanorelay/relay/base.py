"""Relay core: persistent listeners plus one-shot waiters behind one object.

See :mod:`nanorelay.relay` package docstring for the payload variants and
the callable wrapper.
"""

from __future__ import annotations

import abc
import asyncio
import inspect
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from loguru import logger

from nanorelay.config.schema import RelayConfig

T = TypeVar("T")

Listener = Callable[..., Any]


def _same_listener(registered: Listener, callback: Listener) -> bool:
    if registered is callback:
        return True
    return inspect.ismethod(registered) and registered == callback


# -----------------------------------------------------------------------
# Relay
# -----------------------------------------------------------------------

class Relay(abc.ABC, Generic[T]):
    """Broadcasts a value to every registered listener and pending waiter.

    Two independent collections are kept:

    * **listeners** – persistent callbacks, called on every dispatch in
      registration order until removed.
    * **waiters** – one-shot futures created by :meth:`then` / :meth:`next`,
      resolved by the next dispatch (last registered first) and then dropped.

    There is no open/closed state.  :meth:`dispose` empties both collections
    and the relay keeps working afterwards like a fresh one.
    """

    def __init__(self, config: RelayConfig | None = None) -> None:
        self.config = config or RelayConfig()
        self._listeners: list[Listener] = []
        self._waiters: list[asyncio.Future[T]] = []

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    @property
    def pending_count(self) -> int:
        return len(self._waiters)

    def add_listener(self, callback: Listener) -> Callable[[], None]:
        """Register *callback* for every future dispatch.

        Returns a zero-argument handle that removes the callback.  Calling the
        handle more than once has no further effect.
        """
        self._listeners.append(callback)
        limit = self.config.max_listeners
        if limit and len(self._listeners) > limit:
            logger.warning(
                f"Relay {self.name}: {len(self._listeners)} listeners registered "
                f"(max_listeners={limit}), possible leak"
            )
        return lambda: self.remove_listener(callback)

    def remove_listener(self, callback: Listener) -> None:
        """Drop every registration of *callback* (matched by reference).

        Bound methods are the one exception: ``obj.method`` builds a new object
        on each access, so they match when they wrap the same function and
        instance.
        """
        # Rebuild rather than mutate: a dispatch may be iterating the old list.
        self._listeners = [cb for cb in self._listeners if not _same_listener(cb, callback)]

    @abc.abstractmethod
    def dispatch(self, *args: Any) -> None:
        """Broadcast a payload.

        Each variant narrows the signature: :class:`Signal` takes nothing,
        :class:`Channel` takes exactly one value.
        """
        ...

    def _fan_out(self, args: tuple[Any, ...]) -> None:
        """Call listeners with *args*, then drain the waiter queue."""
        if self.config.trace:
            logger.debug(
                f"Relay {self.name}: dispatch to {len(self._listeners)} listeners, "
                f"{len(self._waiters)} waiters"
            )

        for callback in list(self._listeners):
            try:
                callback(*args)
            except Exception as e:
                logger.debug(f"Relay {self.name}: listener {callback!r} raised: {e!r}")
                raise

        value = args[0] if args else None
        while self._waiters:
            waiter = self._waiters.pop()
            if not waiter.done():  # cancelled by its awaiter
                waiter.set_result(value)

    def dispose(self) -> None:
        """Forget all listeners and waiters.

        Pending waiters are neither resolved nor cancelled; whoever awaits
        them keeps waiting.
        """
        if self._listeners or self._waiters:
            logger.debug(
                f"Relay {self.name}: disposed {len(self._listeners)} listeners, "
                f"abandoned {len(self._waiters)} waiters"
            )
        self._listeners = []
        self._waiters = []

    def next(self) -> asyncio.Future[T]:
        """Return a future resolved with the payload of the next dispatch.

        Must be called with an event loop running.
        """
        waiter: asyncio.Future[T] = asyncio.get_running_loop().create_future()
        self._waiters.append(waiter)
        return waiter

    def then(
        self,
        resolve: Callable[[T], Any],
        reject: Callable[[BaseException], Any] | None = None,
    ) -> None:
        """Awaitable hook: deliver the next dispatched value to *resolve*.

        *reject* only fires when the waiter future is cancelled or fails from
        outside; the relay itself never rejects.
        """
        waiter = self.next()

        def _settle(fut: asyncio.Future[T]) -> None:
            if fut.cancelled():
                if reject is not None:
                    reject(asyncio.CancelledError())
                return
            exc = fut.exception()
            if exc is not None:
                if reject is not None:
                    reject(exc)
                return
            resolve(fut.result())

        waiter.add_done_callback(_settle)

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} {self.name!r} "
            f"listeners={self.listener_count} pending={self.pending_count}>"
        )
