"""Payload policies: relays without a payload and relays that require one."""

from __future__ import annotations

from typing import TypeVar

from nanorelay.relay.base import Relay

T = TypeVar("T")


class Signal(Relay[None]):
    """Relay with no payload.

    Listeners are called without arguments and waiters resolve to ``None``.
    """

    def dispatch(self) -> None:  # type: ignore[override]
        self._fan_out(())


class Channel(Relay[T]):
    """Relay carrying a value of type ``T``.

    The payload must always be supplied.  ``None`` is an ordinary value and is
    passed through to listeners and waiters unchanged.
    """

    def dispatch(self, data: T) -> None:  # type: ignore[override]
        self._fan_out((data,))
