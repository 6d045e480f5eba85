"""
Error taxonomy.

Responsibility: exception types only. Nothing here is caught internally;
every error propagates to the caller.
"""


class WitnessSieveError(Exception):
    """Base class for all witness sieve errors."""


class ConfigurationError(WitnessSieveError, ValueError):
    """Invalid bound or configuration value, rejected before any work."""


class ResourceExhaustion(WitnessSieveError, MemoryError):
    """The witness table could not be allocated for the requested bound."""


class DomainError(WitnessSieveError, ValueError):
    """A query fell outside the table's domain [2, max_range)."""
