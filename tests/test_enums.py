"""Domain enum tests: member values, string equality, and exhaustive member count."""

from __future__ import annotations

import pytest

from callable_demo.domain.enums import CallableKind


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_value"),
    [
        (CallableKind.BLOCK, "block"),
        (CallableKind.STORED, "stored"),
        (CallableKind.STRICT, "strict"),
    ],
)
def test_callable_kind_member_values(member: CallableKind, expected_value: str) -> None:
    """Each CallableKind member must have the expected string value."""
    assert member.value == expected_value
    assert member == expected_value


@pytest.mark.os_agnostic
def test_callable_kind_round_trips_from_its_value() -> None:
    assert CallableKind("strict") is CallableKind.STRICT


@pytest.mark.os_agnostic
def test_callable_kind_member_count() -> None:
    """CallableKind must have exactly 3 members."""
    assert len(CallableKind) == 3
