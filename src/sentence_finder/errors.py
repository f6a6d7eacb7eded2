# sentence_finder/errors.py
"""Exceptions raised by the finder. Both are raised before any state changes."""


class FinderError(Exception):
    """Base class for finder errors."""


class InvalidInputError(FinderError, TypeError):
    """initialize() was given something other than a sequence of strings."""


class InvalidArgumentError(FinderError, TypeError):
    """merge() was given an object that is not a compatible index."""
