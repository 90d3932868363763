"""Exception types raised by gencov."""


class GencovError(ValueError):
    """Base class for invalid inputs to covariance generation and sampling."""


class InvalidDimension(GencovError):
    """A requested matrix or vector size is not a positive integer."""


class DimensionMismatch(GencovError):
    """A mean vector does not match the covariance matrix dimension."""


class NotPositiveSemiDefinite(GencovError):
    """Cholesky factorization failed on a covariance matrix.

    Args:
        pivot: Zero-based index of the first pivot that could not be factored.
    """

    def __init__(self, pivot: int):
        self.pivot = pivot
        super().__init__(
            f"Covariance matrix is not positive definite (failed at pivot {pivot})"
        )
