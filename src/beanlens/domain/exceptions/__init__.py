"""Domain exceptions."""

from beanlens.domain.exceptions.base import BeanLensError
from beanlens.domain.exceptions.parsing import DeclarationError, ParsingError
from beanlens.domain.exceptions.resolution import ResolutionError

__all__ = [
    "BeanLensError",
    "DeclarationError",
    "ParsingError",
    "ResolutionError",
]
