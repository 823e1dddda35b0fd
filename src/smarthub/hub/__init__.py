"""Hub composition: the single control surface callers use."""

from smarthub.hub.factory import create_hub_from_config
from smarthub.hub.hub import Hub

__all__ = [
    "Hub",
    "create_hub_from_config",
]
