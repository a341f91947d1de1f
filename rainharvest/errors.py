"""Exceptions raised by the harvesting pipeline."""


class HarvestingError(Exception):
    """Base class for all calculator errors."""


class InvalidInputError(HarvestingError, ValueError):
    """Raised when user input is rejected before any estimation runs.

    Covers empty or whitespace-only addresses and out-of-range coordinates.
    """


class ConfigurationError(HarvestingError):
    """Raised when a component is constructed without a required collaborator.

    These are startup failures (e.g. an estimator built without a random
    generator), never per-call failures.
    """
