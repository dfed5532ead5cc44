"""
layerbind - Layer-Scoped Input Bindings

Maps keys and mouse buttons to named begin/end actions that are only
active in specific input layers (default, debug, air, ragdoll, ...).
"""

# Configuration
from .config.settings import *

# Input
from .input import (
    BindingStore,
    CallbackPair,
    InputAction,
    InputBinder,
    InputEvent,
    InputId,
    InputLayer,
    InputRouter,
    LayerState,
    WindowEventSource,
    get_input_binder,
    window_has_input,
)
from .input.errors import BinderAlreadyInitializedError, BinderNotInitializedError, InputBindingError

__version__ = "0.1.0"
__all__ = [
    # Config (exported via *)
    # Input
    "InputBinder",
    "get_input_binder",
    "BindingStore",
    "LayerState",
    "InputRouter",
    "InputLayer",
    "InputId",
    "InputEvent",
    "InputAction",
    "CallbackPair",
    "WindowEventSource",
    "window_has_input",
    # Errors
    "InputBindingError",
    "BinderNotInitializedError",
    "BinderAlreadyInitializedError",
]
