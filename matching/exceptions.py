#!/usr/bin/env python3
"""
Custom exceptions for the matching engine.

Missing optional data is never an error: evaluators resolve it to
neutral defaults instead of raising.
"""


class MatchingException(Exception):
    """Base exception for matching engine errors."""
    pass


class InvalidInputError(MatchingException, ValueError):
    """Raised when a required job or candidate is missing or malformed."""
    pass


class ExternalScorerUnavailableError(MatchingException):
    """Raised when the external semantic scorer fails or returns garbage."""
    pass


class JobNotFoundError(MatchingException):
    """Raised when a job id does not resolve."""
    pass


class CandidateNotFoundError(MatchingException):
    """Raised when a candidate id does not resolve."""
    pass
