"""
Input Router

Routes begin/end input events to the bindings of the active layer.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Optional, Set

from ..config import settings
from .binding_store import BindingStore
from .input_events import InputAction, InputEvent
from .input_ids import InputId, InputLike, to_input_id
from .layer_state import LayerState

if TYPE_CHECKING:
    from .window_source import InputEventSource


logger = logging.getLogger(__name__)


class InputRouter:
    """
    Dispatches input events to bindings.

    Responsibilities:
    - Subscribe to an input event source
    - Skip events already consumed by another system
    - Look up (active layer, input) in the binding store
    - Invoke each match's began/ended action
    - Track which inputs are held down

    Events are ignored until the router is attached to a source.

    Usage:
        router = InputRouter(store, layer_state)
        router.attach(source)
        router.on_key_press(keys.SPACE)
    """

    def __init__(
        self,
        store: BindingStore,
        layer_state: LayerState,
        lock: Optional[threading.RLock] = None,
    ):
        """
        Args:
            store: Bindings to route to
            layer_state: Active layer
            lock: Lock shared with whoever mutates store/layer_state
        """
        self.store = store
        self.layer_state = layer_state
        self._lock = lock or threading.RLock()
        self._source: Optional[InputEventSource] = None

        # Currently held inputs
        self.pressed_inputs: Set[InputId] = set()

    # ========================================================================
    # Source subscription
    # ========================================================================

    def attach(self, source: InputEventSource) -> None:
        """
        Subscribe to an input event source.

        Args:
            source: Source delivering InputEvents
        """
        if self._source is source:
            return
        self.detach()
        source.subscribe(self.handle_event)
        self._source = source

    def detach(self) -> None:
        """Unsubscribe from the current source and forget held inputs"""
        if self._source is not None:
            self._source.unsubscribe(self.handle_event)
            self._source = None
        self.clear_pressed()

    @property
    def is_attached(self) -> bool:
        return self._source is not None

    # ========================================================================
    # Dispatch
    # ========================================================================

    def handle_event(self, event: InputEvent) -> int:
        """
        Route one event to the bindings of the active layer.

        The active layer is read when the event arrives, so an END is routed
        to whatever layer is active at release time, which can differ from
        the layer that saw the BEGIN.

        Matching bindings are collected before any callback runs. Callbacks
        may bind, unbind, rebind or change layer; that affects later events
        only.

        Args:
            event: Input event

        Returns:
            Number of callbacks invoked
        """
        if self._source is None:
            return 0

        ignored = event.consumed and settings.IGNORE_CONSUMED_EVENTS

        with self._lock:
            # Releases always clear held state
            if event.action is InputAction.BEGIN and not ignored:
                self.pressed_inputs.add(event.input)
            else:
                self.pressed_inputs.discard(event.input)

            if ignored:
                return 0

            layer = self.layer_state.get_layer()
            matches = self.store.lookup(layer, event.input)

        invoked = 0
        for name, callbacks in matches:
            action = callbacks.for_action(event.action)
            if action is None:
                continue
            if settings.LOG_DISPATCH:
                logger.debug("Dispatching %s %r in layer %r", event.action.name, name, layer)
            action()
            invoked += 1

        return invoked

    def on_key_press(self, key: int, consumed: bool = False) -> int:
        """
        Handle key press event.

        Args:
            key: Key code (moderngl_window constant)
            consumed: True if another system already handled the key
        """
        return self.handle_event(InputEvent(InputId.key(key), InputAction.BEGIN, consumed))

    def on_key_release(self, key: int, consumed: bool = False) -> int:
        """
        Handle key release event.

        Args:
            key: Key code (moderngl_window constant)
            consumed: True if another system already handled the key
        """
        return self.handle_event(InputEvent(InputId.key(key), InputAction.END, consumed))

    def on_mouse_button_press(self, button: int, consumed: bool = False) -> int:
        """
        Handle mouse button press.

        Args:
            button: Mouse button (1=left, 2=right, 3=middle)
        """
        return self.handle_event(InputEvent(InputId.mouse(button), InputAction.BEGIN, consumed))

    def on_mouse_button_release(self, button: int, consumed: bool = False) -> int:
        return self.handle_event(InputEvent(InputId.mouse(button), InputAction.END, consumed))

    # ========================================================================
    # Held input state
    # ========================================================================

    def is_pressed(self, input_id: InputLike) -> bool:
        return to_input_id(input_id) in self.pressed_inputs

    def clear_pressed(self) -> None:
        """Forget all held inputs (useful when the window loses focus)"""
        self.pressed_inputs.clear()
