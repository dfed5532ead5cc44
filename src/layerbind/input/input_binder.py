"""
Input Binder

Public entry point of the input binding system. Owns the binding store,
the layer state and the router, and gates them behind initialize().
"""

from __future__ import annotations

import logging
import threading
from enum import Enum, auto
from typing import Callable, Dict, Iterable, List, Optional, Union

from moderngl_window.context.base.keys import BaseKeys

from ..config import settings
from .binding_store import BindingStore
from .errors import BinderAlreadyInitializedError, BinderNotInitializedError
from .input_events import Callback, CallbackPair
from .input_ids import InputLike, InputNamer
from .input_layers import LayerLike, LayerRegistry, layer_names
from .input_router import InputRouter
from .layer_state import LayerChangeCallback, LayerState
from .window_source import InputEventSource


logger = logging.getLogger(__name__)

Layers = Union[LayerLike, Iterable[LayerLike]]


class BinderState(Enum):
    """Lifecycle of an InputBinder."""

    UNINITIALIZED = auto()   # initialize() not called yet
    ACTIVE = auto()          # Subscribed and dispatching
    INERT = auto()           # Refused or shut down; every operation is a no-op


class InputBinder:
    """
    Layer-scoped input bindings.

    Features:
    - bind/unbind/rebind named actions per layer
    - One active layer (set/push/pop)
    - Begin/end dispatch from a window event source
    - Inert operation when the process can't take input

    Usage:
        binder = InputBinder(self.wnd.keys)
        binder.initialize(WindowEventSource(self.wnd.keys), window_has_input(self.wnd))
        binder.bind(keys.SPACE, [InputLayer.DEFAULT], "Jump", began=player.jump)
        binder.set_layer(InputLayer.AIR)
    """

    def __init__(self, keys: Optional[BaseKeys] = None, default_layer: LayerLike = settings.DEFAULT_LAYER):
        """
        Args:
            keys: Key constants used for readable key names (``wnd.keys``)
            default_layer: Layer active after initialization
        """
        self._lock = threading.RLock()
        self._state = BinderState.UNINITIALIZED

        self.registry = LayerRegistry()
        self.store = BindingStore(InputNamer(keys))
        self.layer_state = LayerState(self.registry.register(default_layer))
        self.router = InputRouter(self.store, self.layer_state, lock=self._lock)

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def initialize(
        self,
        source: InputEventSource,
        input_capable: Union[bool, Callable[[], bool]] = True,
    ) -> bool:
        """
        Run the initialization gate and subscribe to the event source.

        Args:
            source: Input event source to subscribe to
            input_capable: Whether this process can take input (or a check
                           returning it). If False, nothing is subscribed and
                           the binder stays inert.

        Returns:
            True if the binder is active

        Raises:
            BinderAlreadyInitializedError: If called twice
        """
        with self._lock:
            if self._state is not BinderState.UNINITIALIZED:
                raise BinderAlreadyInitializedError("InputBinder is already initialized")

            capable = input_capable() if callable(input_capable) else input_capable
            if not capable:
                logger.warning("Input binder disabled: no input-capable context")
                self._state = BinderState.INERT
                return False

            self.router.attach(source)
            self._state = BinderState.ACTIVE
            logger.debug("Input binder initialized (layer %r)", self.layer_state.get_layer())
            return True

    def shutdown(self) -> None:
        """Unsubscribe from the source; every later operation is a no-op"""
        with self._lock:
            if self._state is BinderState.ACTIVE:
                self.router.detach()
            self._state = BinderState.INERT

    @property
    def state(self) -> BinderState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is BinderState.ACTIVE

    def _check_active(self) -> bool:
        if self._state is BinderState.UNINITIALIZED:
            raise BinderNotInitializedError("InputBinder.initialize() must be called first")
        return self._state is BinderState.ACTIVE

    # ========================================================================
    # Bindings
    # ========================================================================

    def bind(
        self,
        input_id: InputLike,
        layers: Layers,
        name: str,
        callbacks: Optional[CallbackPair] = None,
        *,
        began: Optional[Callback] = None,
        ended: Optional[Callback] = None,
    ) -> None:
        """
        Bind a named action to an input in the given layers.

        Args:
            input_id: Input to bind (InputId or key code)
            layers: Layer or layers to bind in
            name: Binding name (e.g. "Jump")
            callbacks: Began/ended actions as a CallbackPair
            began: Shorthand for CallbackPair(began=...)
            ended: Shorthand for CallbackPair(ended=...)

        Example:
            binder.bind(keys.SPACE, [InputLayer.DEFAULT], "Jump", began=player.jump)
        """
        if callbacks is not None and (began is not None or ended is not None):
            raise ValueError("Pass either callbacks or began/ended, not both")
        if callbacks is None:
            callbacks = CallbackPair(began=began, ended=ended)

        with self._lock:
            if not self._check_active():
                return
            names = layer_names(layers)
            for layer in names:
                self.registry.register(layer)
            self.store.bind(input_id, names, name, callbacks)

    def unbind(self, name: str, layers: Optional[Layers] = None) -> None:
        """
        Remove a named binding.

        Args:
            name: Binding name
            layers: Layers to remove it from (default: all)
        """
        with self._lock:
            if self._check_active():
                self.store.unbind(name, layers)

    def rebind(self, name: str, new_input: InputLike) -> None:
        """
        Move a named binding to a new input in every layer it is bound in.

        Args:
            name: Binding name
            new_input: New input (InputId or key code)
        """
        with self._lock:
            if self._check_active():
                self.store.rebind(name, new_input)

    def get_layer_binds(self, layer: LayerLike) -> Dict[str, str]:
        """
        Get the bindings of a layer.

        Returns:
            Dict of binding name -> readable input name (a copy)
        """
        with self._lock:
            if not self._check_active():
                return {}
            return self.store.get_layer_binds(layer)

    def layers_for(self, name: str) -> List[str]:
        """Get the layers a binding name is currently bound in"""
        with self._lock:
            if not self._check_active():
                return []
            return self.store.layers_for(name)

    # ========================================================================
    # Layers
    # ========================================================================

    def set_layer(self, layer: LayerLike) -> None:
        with self._lock:
            if self._check_active():
                self.layer_state.set_layer(self.registry.register(layer))

    def get_layer(self) -> Optional[str]:
        """Get the active layer (None while inert)"""
        with self._lock:
            if not self._check_active():
                return None
            return self.layer_state.get_layer()

    def is_layer(self, layer: LayerLike) -> bool:
        with self._lock:
            if not self._check_active():
                return False
            return self.layer_state.is_layer(layer)

    def push_layer(self, layer: LayerLike) -> None:
        """Activate a layer temporarily; pop_layer() returns to the previous one"""
        with self._lock:
            if self._check_active():
                self.layer_state.push_layer(self.registry.register(layer))

    def pop_layer(self) -> Optional[str]:
        with self._lock:
            if not self._check_active():
                return None
            return self.layer_state.pop_layer()

    def register_layer_change_callback(self, callback: LayerChangeCallback) -> None:
        with self._lock:
            if self._check_active():
                self.layer_state.register_layer_change_callback(callback)

    def known_layers(self) -> List[str]:
        """Built-in layers plus every custom layer used so far"""
        with self._lock:
            if not self._check_active():
                return []
            return self.registry.known_layers()


# ============================================================================
# Process-wide binder
# ============================================================================

_input_binder: Optional[InputBinder] = None


def get_input_binder(keys: Optional[BaseKeys] = None) -> InputBinder:
    """
    Get the process-wide binder, creating it on first use.

    Args:
        keys: Key constants, only used when the binder is created
    """
    global _input_binder
    if _input_binder is None:
        _input_binder = InputBinder(keys)
    return _input_binder


def reset_input_binder() -> None:
    """Shut down and drop the process-wide binder (for tests)"""
    global _input_binder
    if _input_binder is not None:
        _input_binder.shutdown()
    _input_binder = None
