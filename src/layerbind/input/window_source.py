"""
Window Event Source

Adapts moderngl_window key and mouse callbacks into input events.

The application's WindowConfig forwards its on_key_event,
on_mouse_press_event and on_mouse_release_event calls here. Events are
flagged consumed while ImGui wants the keyboard or mouse.
"""

from __future__ import annotations

from typing import Any, Callable, List, Protocol, runtime_checkable

from imgui_bundle import imgui
from moderngl_window.context.base.keys import BaseKeys

from .input_events import InputAction, InputEvent
from .input_ids import InputId


EventCallback = Callable[[InputEvent], Any]
CaptureCheck = Callable[[], bool]


@runtime_checkable
class InputEventSource(Protocol):
    """
    Minimal interface the router needs from an event source.
    """
    def subscribe(self, callback: EventCallback) -> None:
        ...

    def unsubscribe(self, callback: EventCallback) -> None:
        ...


def imgui_wants_keyboard() -> bool:
    """True if ImGui has keyboard focus (False without an ImGui context)"""
    if imgui.get_current_context() is None:
        return False
    return bool(imgui.get_io().want_capture_keyboard)


def imgui_wants_mouse() -> bool:
    """True if ImGui has the mouse (False without an ImGui context)"""
    if imgui.get_current_context() is None:
        return False
    return bool(imgui.get_io().want_capture_mouse)


def window_has_input(wnd: Any) -> bool:
    """
    Check whether a window can deliver input.

    Args:
        wnd: moderngl_window window (or None)

    Returns:
        False for no window or the headless backend
    """
    if wnd is None:
        return False
    return getattr(wnd, "name", None) != "headless"


class WindowEventSource:
    """
    Input event source fed by a moderngl_window WindowConfig.

    Usage:
        self.input_source = WindowEventSource(self.wnd.keys)

        def on_key_event(self, key, action, modifiers):
            self.input_source.on_key_event(key, action, modifiers)
    """

    def __init__(
        self,
        keys: BaseKeys,
        keyboard_captured: CaptureCheck = imgui_wants_keyboard,
        mouse_captured: CaptureCheck = imgui_wants_mouse,
    ):
        """
        Args:
            keys: Key constants of the window (``wnd.keys``)
            keyboard_captured: Returns True while key events belong to another system
            mouse_captured: Returns True while mouse events belong to another system
        """
        self.keys = keys
        self.keyboard_captured = keyboard_captured
        self.mouse_captured = mouse_captured
        self._subscribers: List[EventCallback] = []

    def subscribe(self, callback: EventCallback) -> None:
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: EventCallback) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def emit(self, event: InputEvent) -> None:
        """Deliver an event to every subscriber"""
        for callback in list(self._subscribers):
            callback(event)

    def on_key_event(self, key: int, action: Any, modifiers: Any = None) -> None:
        """
        Handle keyboard events.

        Args:
            key: Key code
            action: Action (press, release; repeats are ignored)
            modifiers: Modifier keys (unused)
        """
        if action == self.keys.ACTION_PRESS:
            kind = InputAction.BEGIN
        elif action == self.keys.ACTION_RELEASE:
            kind = InputAction.END
        else:
            return

        self.emit(InputEvent(InputId.key(key), kind, consumed=self.keyboard_captured()))

    def on_mouse_press_event(self, x: int, y: int, button: int) -> None:
        self.emit(InputEvent(InputId.mouse(button), InputAction.BEGIN, consumed=self.mouse_captured()))

    def on_mouse_release_event(self, x: int, y: int, button: int) -> None:
        self.emit(InputEvent(InputId.mouse(button), InputAction.END, consumed=self.mouse_captured()))
