"""
The CONTROLLER layer owns the editing session and its side effects
(local storage, change notifications). It writes to the model; views only
listen to its signals.
"""
