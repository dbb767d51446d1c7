"""
Exception types raised while assembling the tool catalog.
"""


class DuplicateToolError(ValueError):
    """Two tools in one catalog share a name."""

    def __init__(self, name: str):
        super().__init__(f"Tool '{name}' is already registered")
        self.name = name


__all__ = ["DuplicateToolError"]
