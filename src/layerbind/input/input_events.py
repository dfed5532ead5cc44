"""
Input Events

Events delivered by an input source to the router, and the callback pair
a binding invokes for them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional

from .input_ids import InputId


Callback = Callable[[], None]


class InputAction(Enum):
    """Transition kind of an input event."""

    BEGIN = auto()   # Input activated (key down, button down)
    END = auto()     # Input deactivated (key up, button up)


@dataclass(frozen=True)
class InputEvent:
    """
    One input transition.

    Attributes:
        input: Input that changed
        action: BEGIN or END
        consumed: True if another system already handled this event
    """

    input: InputId
    action: InputAction
    consumed: bool = False


@dataclass(frozen=True)
class CallbackPair:
    """
    Actions of a binding. Either may be absent.

    Attributes:
        began: Called when the bound input begins
        ended: Called when the bound input ends
    """

    began: Optional[Callback] = None
    ended: Optional[Callback] = None

    def __post_init__(self):
        for label, action in (("began", self.began), ("ended", self.ended)):
            if action is not None and not callable(action):
                raise TypeError(f"{label} must be callable or None")

    def for_action(self, action: InputAction) -> Optional[Callback]:
        """Get the callback for an event kind (None if not set)"""
        return self.began if action is InputAction.BEGIN else self.ended
