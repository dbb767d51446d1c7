"""
pwt_agent: a Playwright test-authoring agent driven by a hosted chat model.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
