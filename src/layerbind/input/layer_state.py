"""
Layer State

Holds the currently active input layer.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..config import settings
from .input_layers import LayerLike, layer_name


logger = logging.getLogger(__name__)

LayerChangeCallback = Callable[[str, str], None]


class LayerState:
    """
    Current-layer cell shared by the binder and the router.

    Features:
    - Set/get/compare the active layer (any string accepted)
    - Layer stack for temporary layers (push/pop)
    - Layer change callbacks
    """

    def __init__(self, initial_layer: LayerLike = settings.DEFAULT_LAYER):
        """
        Args:
            initial_layer: Layer active until the first set_layer()
        """
        self.current_layer = layer_name(initial_layer)
        self.layer_stack: List[str] = [self.current_layer]

        self._on_layer_changed: List[LayerChangeCallback] = []

    def register_layer_change_callback(self, callback: LayerChangeCallback) -> None:
        """
        Register a callback for layer changes.

        Args:
            callback: Called as callback(old_layer, new_layer)
        """
        self._on_layer_changed.append(callback)

    def set_layer(self, layer: LayerLike) -> None:
        """
        Set the active layer directly (clears the stack).

        Args:
            layer: Layer to activate
        """
        name = layer_name(layer)
        self.layer_stack = [name]
        self._change(name)

    def get_layer(self) -> str:
        return self.current_layer

    def is_layer(self, layer: LayerLike) -> bool:
        """Check whether a layer is the active one (value equality)"""
        if not isinstance(layer, str):
            return False
        return layer_name(layer) == self.current_layer

    def push_layer(self, layer: LayerLike) -> None:
        """
        Activate a layer on top of the current one.

        Use pop_layer() to return to the previous layer.
        """
        name = layer_name(layer)
        self.layer_stack.append(name)
        self._change(name)

    def pop_layer(self) -> Optional[str]:
        """
        Leave the top layer and return to the previous one.

        Returns:
            The popped layer, or None if only one layer is on the stack
        """
        if len(self.layer_stack) <= 1:
            return None

        popped = self.layer_stack.pop()
        self._change(self.layer_stack[-1])
        return popped

    def get_layer_stack(self) -> List[str]:
        """Get the full layer stack (for debugging)"""
        return self.layer_stack.copy()

    def _change(self, new_layer: str) -> None:
        old_layer = self.current_layer
        self.current_layer = new_layer
        if old_layer == new_layer:
            return

        logger.debug("Input layer changed: %r -> %r", old_layer, new_layer)
        for callback in list(self._on_layer_changed):
            callback(old_layer, new_layer)
