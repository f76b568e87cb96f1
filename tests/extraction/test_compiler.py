from __future__ import annotations

import pytest

from ctsextract.extraction.compiler import SchemeConfigurationError, compile_plan
from ctsextract.extraction.models import DepthMode, PathStep, SchemeDescriptor


def _descriptor(*steps: PathStep) -> SchemeDescriptor:
    return SchemeDescriptor(id="probe", steps=steps)


def test_compile_plan_returns_steps_of_a_valid_descriptor() -> None:
    steps = (
        PathStep("div"),
        PathStep("div", captures_number=True),
        PathStep("l", depth_mode=DepthMode.ARBITRARY_DESCENDANT, captures_number=True, is_terminal=True),
    )

    assert compile_plan(_descriptor(*steps)) == steps
    assert _descriptor(*steps).depth == 2


def test_compile_plan_rejects_empty_descriptor() -> None:
    with pytest.raises(SchemeConfigurationError, match="no steps"):
        compile_plan(_descriptor())


def test_compile_plan_rejects_unnamed_step() -> None:
    with pytest.raises(SchemeConfigurationError, match="no element name"):
        compile_plan(_descriptor(PathStep("", is_terminal=True)))


def test_compile_plan_requires_terminal_last_step() -> None:
    with pytest.raises(SchemeConfigurationError, match="terminal"):
        compile_plan(_descriptor(PathStep("div"), PathStep("p", captures_number=True)))

    with pytest.raises(SchemeConfigurationError, match="terminal"):
        compile_plan(_descriptor(PathStep("div", is_terminal=True), PathStep("p", is_terminal=True)))


def test_compile_plan_rejects_intermediate_descendant_step() -> None:
    steps = (
        PathStep("div", depth_mode=DepthMode.ARBITRARY_DESCENDANT),
        PathStep("p", captures_number=True, is_terminal=True),
    )

    with pytest.raises(SchemeConfigurationError, match="arbitrary depth"):
        compile_plan(_descriptor(*steps))


def test_scheme_configuration_error_is_a_value_error() -> None:
    assert issubclass(SchemeConfigurationError, ValueError)
