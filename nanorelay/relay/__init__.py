"""Relay: broadcast a value to persistent listeners and one-shot waiters.

Architecture
------------
Relay (abstract core, :mod:`nanorelay.relay.base`)
  ├── Signal        – dispatch() carries no payload
  └── Channel[T]    – dispatch(data) requires a payload, ``None`` included
CallableRelay       – owns a Relay; ``relay(cb)`` subscribes, ``relay()``
                      returns a future for the next value
"""

from nanorelay.relay.base import Relay
from nanorelay.relay.variants import Channel, Signal
from nanorelay.relay.wrapper import CallableRelay, create_channel, create_relay, create_signal

__all__ = [
    "Relay",
    "Signal",
    "Channel",
    "CallableRelay",
    "create_relay",
    "create_signal",
    "create_channel",
]
