"""
Input System - Layer-Scoped Bindings

Named begin/end bindings per input layer, routed from window events.
"""

from .binding_store import BindingStore
from .errors import BinderAlreadyInitializedError, BinderNotInitializedError, InputBindingError
from .input_binder import BinderState, InputBinder, get_input_binder, reset_input_binder
from .input_events import CallbackPair, InputAction, InputEvent
from .input_ids import InputDevice, InputId, InputNamer
from .input_layers import InputLayer, LayerRegistry
from .input_router import InputRouter
from .layer_state import LayerState
from .window_source import InputEventSource, WindowEventSource, window_has_input

__all__ = [
    "BindingStore",
    "InputBinder",
    "BinderState",
    "get_input_binder",
    "reset_input_binder",
    "CallbackPair",
    "InputAction",
    "InputEvent",
    "InputDevice",
    "InputId",
    "InputNamer",
    "InputLayer",
    "LayerRegistry",
    "InputRouter",
    "LayerState",
    "InputEventSource",
    "WindowEventSource",
    "window_has_input",
    "InputBindingError",
    "BinderNotInitializedError",
    "BinderAlreadyInitializedError",
]
