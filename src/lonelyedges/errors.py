from __future__ import annotations


class InvalidGraphInput(ValueError):
    """A graph6 line could not be decoded or does not fit the set capacity."""


class ConfigurationConflict(ValueError):
    """Mutually exclusive options were combined, or an option value is out of range."""


class UnrecognizedOption(ValueError):
    """An unknown command-line flag was given."""


class NotCubicError(ValueError):
    """A triangle blow-up was requested at a vertex whose degree is not 3."""
