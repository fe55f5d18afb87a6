"""Base exceptions for beanlens domain."""


class BeanLensError(Exception):
    """Root exception for all beanlens errors.

    All domain exceptions inherit from this.
    Allows catching all beanlens-specific errors.
    """
