from __future__ import annotations


class EncodingError(ValueError):
    """Fitted estimator state cannot be encoded as a nearest neighbor model."""


class MissingAttributeError(EncodingError):
    """A required hyperparameter or learned array is absent."""


class InvalidConfigurationError(EncodingError):
    """A hyperparameter or learned array has the wrong type or value."""


class ShapeMismatchError(EncodingError):
    """Training matrix, target vector and field list do not line up."""


class DuplicateFieldError(EncodingError):
    """Two column keys of the training instance table collide."""


class UnsupportedMetricError(EncodingError):
    """Distance metric outside the Minkowski family."""


class UnsupportedWeightingError(EncodingError):
    """Neighbor weighting other than uniform averaging."""
