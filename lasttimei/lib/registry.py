from types import MappingProxyType
from typing import Dict, Optional

# One entry per deployed button, keyed by the device serial number (DSN).
ACTION_REGISTRY = MappingProxyType({
    "G030MD027383CRCB": "ACTION_WASHED_KIDS_BED_SHEETS",
})


def resolve(serial_number: str) -> Optional[str]:
    """Action name for a button serial number, or None when the button is unregistered."""
    return ACTION_REGISTRY.get(serial_number)


def registered_actions() -> Dict[str, str]:
    return dict(ACTION_REGISTRY)
