"""
Binding Store

Owns the layer -> input -> name -> callbacks tables behind bind, unbind
and rebind.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .input_events import CallbackPair
from .input_ids import InputId, InputLike, InputNamer, to_input_id
from .input_layers import LayerLike, layer_name, layer_names


logger = logging.getLogger(__name__)

LayerTable = Dict[InputId, Dict[str, CallbackPair]]


def _check_name(name: str) -> str:
    if not isinstance(name, str) or not name:
        raise ValueError("Binding name must be a non-empty string")
    return name


class BindingStore:
    """
    Named bindings per layer.

    Features:
    - One input per (layer, name); binding again replaces it
    - Rebind a name to a new input across every layer it is in
    - Readable per-layer enumeration

    Empty tables are pruned as bindings are removed.
    """

    def __init__(self, namer: Optional[InputNamer] = None):
        """
        Args:
            namer: Produces readable input names (default: names keys by code)
        """
        self.namer = namer or InputNamer()
        self._layers: Dict[str, LayerTable] = {}

    # ========================================================================
    # Mutation
    # ========================================================================

    def bind(
        self,
        input_id: InputLike,
        layers: Union[LayerLike, Iterable[LayerLike]],
        name: str,
        callbacks: CallbackPair,
    ) -> None:
        """
        Bind a name to an input in each of the given layers.

        Replaces the name's previous input and callbacks in those layers.
        Layers not listed are left alone.

        Args:
            input_id: Input to bind (InputId or key code)
            layers: Layer or layers to bind in (unknown layers are created)
            name: Binding name (e.g. "Jump")
            callbacks: Actions to run on begin/end
        """
        input_id = to_input_id(input_id)
        _check_name(name)
        if not isinstance(callbacks, CallbackPair):
            raise TypeError("callbacks must be a CallbackPair")

        for layer in layer_names(layers):
            self._remove_name(layer, name)
            table = self._layers.setdefault(layer, {})
            table.setdefault(input_id, {})[name] = callbacks
            logger.debug("Bound %r to %s in layer %r", name, self.namer.name_of(input_id), layer)

    def unbind(self, name: str, layers: Optional[Union[LayerLike, Iterable[LayerLike]]] = None) -> None:
        """
        Remove a binding.

        Args:
            name: Binding name
            layers: Layers to remove it from (default: every layer holding it)
        """
        _check_name(name)
        targets = layer_names(layers) if layers is not None else list(self._layers)

        for layer in targets:
            if self._remove_name(layer, name) is not None:
                logger.debug("Unbound %r from layer %r", name, layer)

    def rebind(self, name: str, new_input: InputLike) -> None:
        """
        Move a name to a new input in every layer that holds it.

        Each layer keeps its own callbacks. Layers without the name are
        unaffected.

        Args:
            name: Binding name
            new_input: Input to move to
        """
        _check_name(name)
        new_input = to_input_id(new_input)

        for layer in list(self._layers):
            old_input = self._find_input(layer, name)
            if old_input is None or old_input == new_input:
                continue

            callbacks = self._remove_name(layer, name)
            table = self._layers.setdefault(layer, {})
            table.setdefault(new_input, {})[name] = callbacks
            logger.debug(
                "Rebound %r in layer %r: %s -> %s",
                name, layer, self.namer.name_of(old_input), self.namer.name_of(new_input),
            )

    def clear(self, layer: Optional[LayerLike] = None) -> None:
        """Remove every binding in a layer, or everything"""
        if layer is None:
            self._layers.clear()
        else:
            self._layers.pop(layer_name(layer), None)

    # ========================================================================
    # Queries
    # ========================================================================

    def lookup(self, layer: LayerLike, input_id: InputLike) -> List[Tuple[str, CallbackPair]]:
        """
        Get the bindings for an exact (layer, input) pair.

        Returns:
            A new list of (name, callbacks); empty if nothing is bound
        """
        table = self._layers.get(layer_name(layer), {})
        return list(table.get(to_input_id(input_id), {}).items())

    def get_layer_binds(self, layer: LayerLike) -> Dict[str, str]:
        """
        Get every binding in a layer as name -> readable input name.

        Returns:
            A new dict (empty for unknown layers)
        """
        table = self._layers.get(layer_name(layer), {})
        return {
            name: self.namer.name_of(input_id)
            for input_id, names in table.items()
            for name in names
        }

    def get_input(self, name: str, layer: LayerLike) -> Optional[InputId]:
        """Get the input a name is bound to in a layer, or None"""
        return self._find_input(layer_name(layer), name)

    def layers_for(self, name: str) -> List[str]:
        """Get the layers that currently hold a name"""
        return [layer for layer in self._layers if self._find_input(layer, name) is not None]

    def layers(self) -> List[str]:
        """Get the layers that currently hold any binding"""
        return list(self._layers)

    # ========================================================================
    # Internals
    # ========================================================================

    def _find_input(self, layer: str, name: str) -> Optional[InputId]:
        for input_id, names in self._layers.get(layer, {}).items():
            if name in names:
                return input_id
        return None

    def _remove_name(self, layer: str, name: str) -> Optional[CallbackPair]:
        """Remove a name from a layer, pruning empty tables. Returns its callbacks."""
        input_id = self._find_input(layer, name)
        if input_id is None:
            return None

        table = self._layers[layer]
        callbacks = table[input_id].pop(name)
        if not table[input_id]:
            del table[input_id]
        if not table:
            del self._layers[layer]
        return callbacks
