"""
Custom exception hierarchy for copper-substrate.

Provides consistent error handling with context, suggestions, and actionable guidance.
All exceptions include:
- Context information (footprint, pad number, config file, etc.)
- Suggestions for how to fix the issue
- Clear, formatted error messages

Serializing a footprint never raises these: the serializer is total over
whatever a component returns. They are raised by the opt-in validator, the
configuration loader and the concrete component builders.

Example::

    from copper_substrate.exceptions import ComponentError, ValidationError

    raise ComponentError(
        "Unknown chip size",
        context={"size": "0304", "available": "0201, 0402, 0603"},
        suggestions=["Use one of the standard imperial chip sizes"]
    )

    errors = ["Bounding box is inverted", "Duplicate identity token"]
    raise ValidationError(errors, context={"footprint": "R_0805_2012Metric"})
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class CopperSubstrateError(Exception):
    """
    Base exception for all copper-substrate errors.

    Provides consistent formatting with context and suggestions.

    Attributes:
        context: Dictionary of contextual information (footprint, file, etc.)
        suggestions: List of actionable suggestions for fixing the error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context and suggestions."""
        parts = [self.message]

        if self.context:
            parts.append("\n\nContext:")
            for key, value in self.context.items():
                parts.append(f"\n  {key}: {value}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class ValidationError(CopperSubstrateError):
    """
    Descriptor validation failed with one or more errors.

    Collects all validation errors instead of failing on the first one,
    providing a complete list of issues to fix.

    Attributes:
        errors: List of individual validation error messages
    """

    def __init__(
        self,
        errors: List[str],
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.errors = errors
        message = f"Validation failed with {len(errors)} error(s):\n"
        message += "\n".join(f"  {i + 1}. {e}" for i, e in enumerate(errors))
        super().__init__(message, context, suggestions)


class ComponentError(CopperSubstrateError):
    """
    Component construction error.

    Raised when a concrete component cannot be built from the data it was
    given: unknown chip sizes, malformed record data, unknown keywords.
    """

    pass


class ConfigurationError(CopperSubstrateError):
    """
    Configuration or settings error.

    Raised when a configuration file is unreadable, is not valid TOML, or
    holds values of the wrong type.
    """

    pass


__all__ = [
    "CopperSubstrateError",
    "ValidationError",
    "ComponentError",
    "ConfigurationError",
]
