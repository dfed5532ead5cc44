"""Exceptions raised by the input binder."""


class InputBindingError(Exception):
    """Base class for input binding errors."""


class BinderNotInitializedError(InputBindingError):
    """A binder operation was called before initialize()."""


class BinderAlreadyInitializedError(InputBindingError):
    """initialize() was called on a binder that already ran it."""
