"""
Input Layers

Built-in layer identifiers and the registry of layers an application uses.

A layer is a plain string. The built-ins are provided as an enum for
convenience; any other string is a valid custom layer.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Union


class InputLayer(str, Enum):
    """
    Built-in input layers.

    Exactly one layer is active at a time. Bindings only fire while the
    layer they were registered in is active.
    """

    DEFAULT = "Default"    # Normal gameplay
    DEBUG = "Debug"        # Debug camera / developer tools
    AIR = "Air"            # Character is airborne
    RAGDOLL = "Ragdoll"    # Character is ragdolled


LayerLike = Union[InputLayer, str]


def layer_name(layer: LayerLike) -> str:
    """
    Normalize a layer to its plain string value.

    Args:
        layer: An InputLayer member or any string

    Returns:
        The layer's string value

    Raises:
        TypeError: If layer is not a string
    """
    if isinstance(layer, InputLayer):
        return layer.value
    if not isinstance(layer, str):
        raise TypeError(f"Layer must be a string, got {type(layer).__name__}")
    return layer


def layer_names(layers: Union[LayerLike, Iterable[LayerLike]]) -> List[str]:
    """
    Normalize one layer or a collection of layers to a list of strings.

    Duplicates are dropped, first occurrence order is kept.
    """
    if isinstance(layers, str):
        return [layer_name(layers)]

    names: List[str] = []
    for layer in layers:
        name = layer_name(layer)
        if name not in names:
            names.append(name)
    return names


class LayerRegistry:
    """
    Known layer identifiers: the built-in set plus custom layers seen so far.
    """

    def __init__(self):
        self._custom_layers: List[str] = []

    def register(self, layer: LayerLike) -> str:
        """
        Record a layer as known.

        Args:
            layer: Built-in or custom layer

        Returns:
            The normalized layer name
        """
        name = layer_name(layer)
        if not self.is_builtin(name) and name not in self._custom_layers:
            self._custom_layers.append(name)
        return name

    @staticmethod
    def is_builtin(layer: LayerLike) -> bool:
        name = layer_name(layer)
        return any(builtin.value == name for builtin in InputLayer)

    def is_known(self, layer: LayerLike) -> bool:
        name = layer_name(layer)
        return self.is_builtin(name) or name in self._custom_layers

    def known_layers(self) -> List[str]:
        """Built-in layers first, then custom layers in registration order"""
        return [builtin.value for builtin in InputLayer] + list(self._custom_layers)
