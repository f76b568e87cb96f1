"""Validate scheme step lists into descent plans."""

from __future__ import annotations

from ctsextract.extraction.models import DepthMode, PathStep, SchemeDescriptor


class SchemeConfigurationError(ValueError):
    """Raised when the static scheme table is malformed."""


def compile_plan(descriptor: SchemeDescriptor) -> tuple[PathStep, ...]:
    """Return the descriptor's steps once they form a walkable plan.

    A plan has at least one step, ends in its only terminal step, and uses an
    arbitrary-descendant step only as that terminal step.
    """

    steps = descriptor.steps
    if not steps:
        raise SchemeConfigurationError(f"Scheme {descriptor.id!r} has no steps")

    for index, step in enumerate(steps):
        is_last = index == len(steps) - 1
        if not step.element_name:
            raise SchemeConfigurationError(f"Scheme {descriptor.id!r} step {index} has no element name")
        if step.is_terminal != is_last:
            raise SchemeConfigurationError(
                f"Scheme {descriptor.id!r} must end in exactly one terminal step (step {index})"
            )
        if step.depth_mode is DepthMode.ARBITRARY_DESCENDANT and not is_last:
            raise SchemeConfigurationError(
                f"Scheme {descriptor.id!r} descends to arbitrary depth before its terminal step (step {index})"
            )

    return steps
