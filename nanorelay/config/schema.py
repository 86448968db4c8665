"""Configuration schema using Pydantic."""

from pydantic import BaseModel, Field


class RelayConfig(BaseModel):
    """Per-relay settings. All fields are optional."""

    name: str = "relay"  # label used in log lines
    trace: bool = False  # log every dispatch at debug level
    max_listeners: int = Field(default=0, ge=0)  # leak warning threshold, 0 disables
