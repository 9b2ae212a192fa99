"""
Behaviors registry.

A behavior is attached to every widget subtree added to a page and detached
from every subtree about to be removed or serialized. The editor attachment
controller is one behavior among others.

Example:
    attach_behaviors(page, settings)          # after building the page
    detach_behaviors(form, settings, "serialize")  # before reading values
    detach_behaviors(panel, settings)          # before deleting a panel
"""

import logging
from typing import Any, Dict, Mapping, Optional, Protocol

logger = logging.getLogger(__name__)


class Behavior(Protocol):
    """Protocol for page behaviors."""

    def attach(self, context: Any, settings: Optional[Mapping[str, Any]]) -> None:
        ...

    def detach(self, context: Any, settings: Optional[Mapping[str, Any]],
               trigger: Optional[str] = None) -> None:
        ...


# Maps behavior name -> behavior
BEHAVIORS: Dict[str, Behavior] = {}


def register_behavior(name: str, behavior: Behavior) -> None:
    if name in BEHAVIORS and BEHAVIORS[name] is not behavior:
        logger.warning(f"Behavior '{name}' overwritten by {type(behavior).__name__}")
    BEHAVIORS[name] = behavior


def attach_behaviors(context: Any, settings: Optional[Mapping[str, Any]] = None) -> None:
    """Run every registered behavior's attach() on context, in registration order."""
    for name, behavior in list(BEHAVIORS.items()):
        logger.debug(f"Attaching behavior '{name}'")
        behavior.attach(context, settings)


def detach_behaviors(context: Any, settings: Optional[Mapping[str, Any]] = None,
                     trigger: Optional[str] = None) -> None:
    """Run every registered behavior's detach() on context, in registration order."""
    for name, behavior in list(BEHAVIORS.items()):
        logger.debug(f"Detaching behavior '{name}' (trigger={trigger})")
        behavior.detach(context, settings, trigger)
