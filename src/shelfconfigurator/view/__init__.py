"""
The VIEW layer: Qt widgets and the PyVista preview. Views read the session's
state and call its operations; they never mutate the model directly.
"""
