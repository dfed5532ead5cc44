"""
Input Binding Configuration

All configuration constants for the layer-scoped input binder.
Modify these values to change dispatch behavior.
"""

# ============================================================================
# Layers
# ============================================================================

# Layer that is active right after a binder is created
DEFAULT_LAYER = "Default"

# ============================================================================
# Dispatch
# ============================================================================

# Skip events another system (e.g. ImGui) already handled
IGNORE_CONSUMED_EVENTS = True

# Log every dispatched callback at DEBUG level (noisy, off by default)
LOG_DISPATCH = False

# ============================================================================
# Readable Input Names (used by get_layer_binds)
# ============================================================================

KEYBOARD_LABEL = "Keyboard"
MOUSE_LABEL = "Mouse"

# moderngl_window mouse buttons: 1=left, 2=right, 3=middle
MOUSE_BUTTON_NAMES = {
    1: "LEFT",
    2: "RIGHT",
    3: "MIDDLE",
}
