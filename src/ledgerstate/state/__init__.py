"""State layer.

Pure functions over an immutable application-state tree. Every operation
takes a snapshot and returns a new one (or the same object for a no-op);
nothing here holds or mutates shared state.
"""
