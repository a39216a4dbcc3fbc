"""
namecase: Personal Name Declension Library

Declines given names, family names and patronymics of Slavic languages into
every grammatical case, inferring grammatical gender when it is not given.
"""

__version__ = "0.1.0"

__all__ = ["NameCaseEngine"]

def __getattr__(name):
    """Lazy import to keep `import namecase` light."""
    if name == "NameCaseEngine":
        from .engine import NameCaseEngine
        return NameCaseEngine
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
