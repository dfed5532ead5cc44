"""
Input Identifiers

Value type for physical inputs (keyboard keys, mouse buttons) and the
readable names reported when enumerating bindings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Optional, Union

from moderngl_window.context.base.keys import BaseKeys

from ..config import settings


class InputDevice(Enum):
    """Device class an input identifier belongs to."""

    KEYBOARD = auto()
    MOUSE_BUTTON = auto()


@dataclass(frozen=True)
class InputId:
    """
    A distinguishable physical input signal.

    Attributes:
        device: Device class of the input
        code: Key code (moderngl_window constant) or mouse button number
    """

    device: InputDevice
    code: int

    @classmethod
    def key(cls, code: int) -> InputId:
        return cls(InputDevice.KEYBOARD, code)

    @classmethod
    def mouse(cls, button: int) -> InputId:
        return cls(InputDevice.MOUSE_BUTTON, button)


InputLike = Union[InputId, int]


def to_input_id(value: InputLike) -> InputId:
    """
    Normalize an input argument.

    A bare int is taken as a keyboard key code.

    Raises:
        TypeError: If value is neither an InputId nor an int
    """
    if isinstance(value, InputId):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Input must be an InputId or key code, got {type(value).__name__}")
    return InputId.key(value)


class InputNamer:
    """
    Turns input identifiers into readable names such as "Keyboard.SPACE".

    Key names come from the window backend's key constants, so the same
    code gets the name the backend uses for it.
    """

    def __init__(self, keys: Optional[BaseKeys] = None):
        """
        Args:
            keys: Key constants (e.g. ``wnd.keys``). Without it keys are
                  reported by code.
        """
        self.keys = keys
        self._key_names: Dict[int, str] = self._build_key_names(keys) if keys is not None else {}

    @staticmethod
    def _build_key_names(keys: BaseKeys) -> Dict[int, str]:
        """Reverse lookup code -> constant name (first name wins for aliases)"""
        names: Dict[int, str] = {}
        for attr in dir(keys):
            if not attr.isupper() or attr.startswith("ACTION_"):
                continue
            value = getattr(keys, attr, None)
            if isinstance(value, int) and not isinstance(value, bool):
                names.setdefault(value, attr)
        return names

    def name_of(self, input_id: InputId) -> str:
        if input_id.device is InputDevice.MOUSE_BUTTON:
            label = settings.MOUSE_BUTTON_NAMES.get(input_id.code, str(input_id.code))
            return f"{settings.MOUSE_LABEL}.{label}"

        label = self._key_names.get(input_id.code, str(input_id.code))
        return f"{settings.KEYBOARD_LABEL}.{label}"
