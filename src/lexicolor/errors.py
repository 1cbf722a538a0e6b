"""Exception classes for lexicolor.

Tokenization itself never raises: unrecognized input becomes UNKNOWN
tokens. These exceptions cover misuse of the surrounding API.
"""

from __future__ import annotations


class LexicolorError(Exception):
    """Base exception for all lexicolor errors.
    
    Subclass this for specific error categories.
    """

    pass


class ClassifierTableError(LexicolorError):
    """Error when building or editing a classifier table.
    
    Raised for empty tables, duplicate entry names, or operations that
    name an entry the table does not contain.
    """

    def __init__(self, message: str, entry: str | None = None) -> None:
        """Initialize table error.
        
        Args:
            message: Description of the problem
            entry: Name of the classifier entry involved (optional)
        """
        self.entry = entry
        prefix = f"Classifier '{entry}': " if entry else ""
        super().__init__(f"{prefix}{message}")


class ThemeError(LexicolorError):
    """Error when a color theme does not cover the category set.
    
    Every Category must map to exactly one color.
    """

    pass
