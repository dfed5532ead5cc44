"""Shared fixtures for input binding tests"""

import pytest
from moderngl_window.context.base.keys import BaseKeys

from layerbind.input import BindingStore, InputBinder, InputNamer, InputRouter, LayerState
from layerbind.input.input_binder import reset_input_binder


class FakeKeys(BaseKeys):
    """Key constants with concrete codes, no window needed"""

    ACTION_PRESS = "ACTION_PRESS"
    ACTION_RELEASE = "ACTION_RELEASE"

    SPACE = 32
    E = 69
    L = 76
    Q = 81
    W = 87
    F2 = 291


class FakeSource:
    """Input event source that delivers events only when told to"""

    def __init__(self):
        self.subscribers = []

    def subscribe(self, callback):
        self.subscribers.append(callback)

    def unsubscribe(self, callback):
        self.subscribers.remove(callback)

    def emit(self, event):
        for callback in list(self.subscribers):
            callback(event)


class Counter:
    """Zero-argument callable that counts its calls"""

    def __init__(self):
        self.count = 0

    def __call__(self):
        self.count += 1


@pytest.fixture
def keys():
    return FakeKeys


@pytest.fixture
def store():
    return BindingStore(InputNamer(FakeKeys))


@pytest.fixture
def layer_state():
    return LayerState()


@pytest.fixture
def source():
    return FakeSource()


@pytest.fixture
def router(store, layer_state, source):
    router = InputRouter(store, layer_state)
    router.attach(source)
    return router


@pytest.fixture
def binder(source):
    binder = InputBinder(FakeKeys)
    binder.initialize(source)
    return binder


@pytest.fixture(autouse=True)
def _reset_process_binder():
    yield
    reset_input_binder()
