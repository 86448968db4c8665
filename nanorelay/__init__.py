"""
nanorelay - broadcast values to listeners and awaiters through one object.
"""

__version__ = "0.1.0"

from nanorelay.config import RelayConfig, load_config
from nanorelay.relay import (
    CallableRelay,
    Channel,
    Relay,
    Signal,
    create_channel,
    create_relay,
    create_signal,
)

__all__ = [
    "RelayConfig",
    "load_config",
    "Relay",
    "Signal",
    "Channel",
    "CallableRelay",
    "create_relay",
    "create_signal",
    "create_channel",
]
