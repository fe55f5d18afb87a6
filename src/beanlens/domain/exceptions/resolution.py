"""Resolution exceptions."""

from beanlens.domain.exceptions.base import BeanLensError


class ResolutionError(BeanLensError):
    """Resolver was used with input it cannot index."""
