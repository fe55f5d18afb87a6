"""Shared helpers for class member value objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from beanlens.domain.model.annotation import Annotation
    from beanlens.domain.model.enums import AnnotationKind


def find_annotation(
    annotations: tuple[Annotation, ...],
    kind: AnnotationKind,
) -> Annotation | None:
    """Find first annotation of kind.

    Args:
        annotations: Annotations to search
        kind: Kind to look for

    Returns:
        First matching annotation or None
    """
    for annotation in annotations:
        if annotation.kind is kind:
            return annotation
    return None


def has_annotation(annotations: tuple[Annotation, ...], kind: AnnotationKind) -> bool:
    """Check whether any annotation has the given kind."""
    return find_annotation(annotations, kind) is not None
