"""Tests for InputRouter dispatch"""

import pytest

from layerbind.config import settings
from layerbind.input import CallbackPair, InputAction, InputEvent, InputId, InputRouter

from conftest import Counter, FakeKeys


def begin(key, consumed=False):
    return InputEvent(InputId.key(key), InputAction.BEGIN, consumed)


def end(key, consumed=False):
    return InputEvent(InputId.key(key), InputAction.END, consumed)


def test_begin_runs_began_in_active_layer(store, layer_state, source, router):
    """Jump fires in Default and not in Air"""
    jumps = Counter()
    store.bind(FakeKeys.SPACE, ["Default"], "Jump", CallbackPair(began=jumps))

    layer_state.set_layer("Default")
    source.emit(begin(FakeKeys.SPACE))
    assert jumps.count == 1

    layer_state.set_layer("Air")
    source.emit(begin(FakeKeys.SPACE))
    assert jumps.count == 1


def test_end_runs_ended(store, router):
    """END runs ended, BEGIN runs began"""
    began, ended = Counter(), Counter()
    store.bind(FakeKeys.W, ["Default"], "Forward", CallbackPair(began=began, ended=ended))

    router.on_key_press(FakeKeys.W)
    router.on_key_release(FakeKeys.W)

    assert (began.count, ended.count) == (1, 1)


def test_missing_actions_are_skipped(store, router):
    """Bindings without an action for the event kind are skipped"""
    ended = Counter()
    store.bind(FakeKeys.W, ["Default"], "Forward", CallbackPair(ended=ended))

    assert router.on_key_press(FakeKeys.W) == 0
    assert router.on_key_release(FakeKeys.W) == 1
    assert ended.count == 1


def test_all_names_on_input_are_invoked(store, router):
    """Every binding on the input in the layer runs"""
    jump, wave, other_layer = Counter(), Counter(), Counter()
    store.bind(FakeKeys.SPACE, ["Default"], "Jump", CallbackPair(began=jump))
    store.bind(FakeKeys.SPACE, ["Default"], "Wave", CallbackPair(began=wave))
    store.bind(FakeKeys.SPACE, ["Air"], "Glide", CallbackPair(began=other_layer))

    assert router.on_key_press(FakeKeys.SPACE) == 2
    assert (jump.count, wave.count, other_layer.count) == (1, 1, 0)


def test_rebind_scenario(store, layer_state, router):
    """After rebind only the new input triggers, in every layer"""
    jumps = Counter()
    store.bind(FakeKeys.SPACE, ["Default"], "Jump", CallbackPair(began=jumps))
    store.bind(FakeKeys.W, ["Air"], "Jump", CallbackPair(began=jumps))

    store.rebind("Jump", FakeKeys.E)

    for layer in ("Default", "Air"):
        layer_state.set_layer(layer)
        router.on_key_press(FakeKeys.SPACE)
        router.on_key_press(FakeKeys.W)
    assert jumps.count == 0

    for layer in ("Default", "Air"):
        layer_state.set_layer(layer)
        router.on_key_press(FakeKeys.E)
    assert jumps.count == 2


def test_mouse_buttons(store, router):
    """Mouse buttons are separate inputs from key codes"""
    fire = Counter()
    store.bind(InputId.mouse(1), ["Default"], "Fire", CallbackPair(began=fire))

    router.on_key_press(1)
    router.on_mouse_button_press(1)

    assert fire.count == 1


def test_consumed_events_are_ignored(store, router):
    """Events another system handled do not dispatch"""
    jumps = Counter()
    store.bind(FakeKeys.SPACE, ["Default"], "Jump", CallbackPair(began=jumps))

    assert router.handle_event(begin(FakeKeys.SPACE, consumed=True)) == 0
    assert jumps.count == 0
    assert not router.is_pressed(FakeKeys.SPACE)


def test_consumed_events_dispatch_when_configured(store, router, monkeypatch):
    """IGNORE_CONSUMED_EVENTS = False routes consumed events too"""
    monkeypatch.setattr(settings, "IGNORE_CONSUMED_EVENTS", False)
    jumps = Counter()
    store.bind(FakeKeys.SPACE, ["Default"], "Jump", CallbackPair(began=jumps))

    router.handle_event(begin(FakeKeys.SPACE, consumed=True))
    assert jumps.count == 1


def test_unattached_router_ignores_events(store, layer_state):
    """Nothing is routed before the router is attached"""
    jumps = Counter()
    store.bind(FakeKeys.SPACE, ["Default"], "Jump", CallbackPair(began=jumps))
    router = InputRouter(store, layer_state)

    assert router.handle_event(begin(FakeKeys.SPACE)) == 0
    assert jumps.count == 0


def test_detach_unsubscribes(store, source, router):
    """After detach the source no longer reaches the router"""
    jumps = Counter()
    store.bind(FakeKeys.SPACE, ["Default"], "Jump", CallbackPair(began=jumps))

    router.detach()
    source.emit(begin(FakeKeys.SPACE))

    assert source.subscribers == []
    assert jumps.count == 0
    assert not router.is_attached


def test_end_routes_to_layer_active_at_release(store, layer_state, router):
    """An END goes to the layer active when it arrives, not the one at BEGIN"""
    calls = []
    store.bind(FakeKeys.SPACE, ["Default"], "Jump", CallbackPair(
        began=lambda: calls.append("jump began"),
        ended=lambda: calls.append("jump ended"),
    ))
    store.bind(FakeKeys.SPACE, ["Air"], "Glide", CallbackPair(
        ended=lambda: calls.append("glide ended"),
    ))

    router.on_key_press(FakeKeys.SPACE)
    layer_state.set_layer("Air")
    router.on_key_release(FakeKeys.SPACE)

    assert calls == ["jump began", "glide ended"]


def test_callback_unbinding_sibling_still_runs_sibling(store, router):
    """Matches are snapshotted before callbacks run"""
    calls = []
    store.bind(FakeKeys.SPACE, ["Default"], "First", CallbackPair(
        began=lambda: (calls.append("first"), store.unbind("Second")),
    ))
    store.bind(FakeKeys.SPACE, ["Default"], "Second", CallbackPair(
        began=lambda: calls.append("second"),
    ))

    assert router.on_key_press(FakeKeys.SPACE) == 2
    assert calls == ["first", "second"]

    calls.clear()
    router.on_key_press(FakeKeys.SPACE)
    assert calls == ["first"]


def test_callback_binding_new_name_waits_for_next_event(store, router):
    """A binding added during dispatch runs from the next event on"""
    late = Counter()
    store.bind(FakeKeys.SPACE, ["Default"], "Adder", CallbackPair(
        began=lambda: store.bind(FakeKeys.SPACE, ["Default"], "Late", CallbackPair(began=late)),
    ))

    router.on_key_press(FakeKeys.SPACE)
    assert late.count == 0

    router.on_key_press(FakeKeys.SPACE)
    assert late.count == 1


def test_callback_changing_layer(store, layer_state, router):
    """A callback may switch layers; the current pass is unaffected"""
    landed = Counter()
    store.bind(FakeKeys.SPACE, ["Default"], "Jump", CallbackPair(began=lambda: layer_state.set_layer("Air")))
    store.bind(FakeKeys.L, ["Air"], "Land", CallbackPair(began=landed))

    router.on_key_press(FakeKeys.SPACE)
    router.on_key_press(FakeKeys.L)

    assert layer_state.get_layer() == "Air"
    assert landed.count == 1


def test_callback_errors_propagate(store, router):
    """Exceptions from callbacks reach the caller; bindings stay"""
    def explode():
        raise RuntimeError("boom")

    store.bind(FakeKeys.SPACE, ["Default"], "Jump", CallbackPair(began=explode))

    with pytest.raises(RuntimeError):
        router.on_key_press(FakeKeys.SPACE)
    assert store.get_layer_binds("Default") == {"Jump": "Keyboard.SPACE"}


def test_pressed_inputs(router):
    """Held inputs are tracked regardless of bindings"""
    router.on_key_press(FakeKeys.W)
    router.on_mouse_button_press(2)
    assert router.is_pressed(FakeKeys.W)
    assert router.is_pressed(InputId.mouse(2))

    router.on_key_release(FakeKeys.W)
    assert not router.is_pressed(FakeKeys.W)

    router.clear_pressed()
    assert router.pressed_inputs == set()
