#!/usr/bin/env python3
"""
Layer Demo

Minimal window showing layer-scoped bindings.
The background color shows the active layer.

Controls:
    SPACE - Jump (Default layer), enters the Air layer
    W     - Jump again while in the Air layer
    L     - Land (Air layer), back to Default
    F2    - Toggle the Debug layer
    R     - Rebind "Jump" to E in every layer
"""

import logging

import moderngl_window as mglw

from layerbind import InputBinder, InputLayer, WindowEventSource, window_has_input


logger = logging.getLogger(__name__)

LAYER_COLORS = {
    InputLayer.DEFAULT.value: (0.1, 0.1, 0.15),
    InputLayer.AIR.value: (0.15, 0.25, 0.45),
    InputLayer.DEBUG.value: (0.35, 0.15, 0.15),
}


class LayerDemo(mglw.WindowConfig):
    """Window driven by an InputBinder"""

    gl_version = (3, 3)
    title = "Input Layer Demo"
    window_size = (960, 540)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        keys = self.wnd.keys

        # Input system
        self.input_source = WindowEventSource(keys)
        self.binder = InputBinder(keys)
        self.binder.initialize(self.input_source, window_has_input(self.wnd))
        self.binder.register_layer_change_callback(self._on_layer_changed)

        self.binder.bind(keys.SPACE, [InputLayer.DEFAULT], "Jump", began=self._jump)
        self.binder.bind(keys.W, [InputLayer.AIR], "Jump", began=self._double_jump)
        self.binder.bind(keys.L, [InputLayer.AIR], "Land", began=self._land)
        self.binder.bind(keys.F2, [InputLayer.DEFAULT, InputLayer.DEBUG], "Debug", began=self._toggle_debug)
        self.binder.bind(
            keys.R,
            [InputLayer.DEFAULT, InputLayer.AIR],
            "RebindJump",
            began=lambda: self.binder.rebind("Jump", keys.E),
        )

    def _jump(self):
        logger.info("Jump")
        self.binder.set_layer(InputLayer.AIR)

    def _double_jump(self):
        logger.info("Double jump")

    def _land(self):
        self.binder.set_layer(InputLayer.DEFAULT)

    def _toggle_debug(self):
        if self.binder.is_layer(InputLayer.DEBUG):
            self.binder.pop_layer()
        else:
            self.binder.push_layer(InputLayer.DEBUG)

    def _on_layer_changed(self, old_layer, new_layer):
        logger.info("Layer %s -> %s: %s", old_layer, new_layer, self.binder.get_layer_binds(new_layer))

    def on_render(self, time, frametime):
        self.ctx.clear(*LAYER_COLORS.get(self.binder.get_layer(), (0.0, 0.0, 0.0)))

    def on_key_event(self, key, action, modifiers):
        self.input_source.on_key_event(key, action, modifiers)

    def on_mouse_press_event(self, x, y, button):
        self.input_source.on_mouse_press_event(x, y, button)

    def on_mouse_release_event(self, x, y, button):
        self.input_source.on_mouse_release_event(x, y, button)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    LayerDemo.run()
