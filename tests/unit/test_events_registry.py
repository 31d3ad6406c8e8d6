"""Unit tests for the event variant registry and shapes."""

from __future__ import annotations

import pytest

from ghwebhooks import (
    CheckRunEvent,
    CreateEvent,
    PushEvent,
    TeamEvent,
    UnknownEventNameError,
    event_name_of,
    event_names,
    event_type_for,
    shape_of,
)
from ghwebhooks.actions import Check, Created
from ghwebhooks.actions import TeamEvent as TeamAction
from tests.helpers.payloads import EVENT_NAMES

DOCUMENTED_EVENTS = (
    "check_run",
    "check_suite",
    "commit_comment",
    "create",
    "delete",
    "deployment",
    "deployment_status",
    "fork",
    "github_app_authorization",
    "gollum",
    "installation",
    "installation_repositories",
    "issue_comment",
    "issues",
    "label",
    "member",
    "membership",
    "milestone",
    "organization",
    "org_block",
    "page_build",
    "project_card",
    "project_column",
    "project",
    "public",
    "pull_request",
    "pull_request_review",
    "pull_request_review_comment",
    "push",
    "release",
    "repository",
    "repository_import",
    "repository_vulnerability_alert",
    "security_advisory",
    "status",
    "team",
    "team_add",
    "watch",
)


def test_registry_covers_every_documented_event() -> None:
    """Every documented webhook event has exactly one registered variant."""
    assert set(event_names()) == set(DOCUMENTED_EVENTS)
    assert len(event_names()) == len(DOCUMENTED_EVENTS)
    assert set(EVENT_NAMES) == set(DOCUMENTED_EVENTS), "sample payloads missing"


@pytest.mark.parametrize("event_name", DOCUMENTED_EVENTS)
def test_event_name_round_trips_through_registry(event_name: str) -> None:
    """event_name_of inverts event_type_for."""
    assert event_name_of(event_type_for(event_name)) == event_name


def test_event_type_for_rejects_unknown_names() -> None:
    """Unregistered names raise UnknownEventNameError."""
    with pytest.raises(UnknownEventNameError) as excinfo:
        event_type_for("ping")

    assert excinfo.value.event_name == "ping"


def test_check_run_shape() -> None:
    """The check_run shape requires its discriminating keys only."""
    shape = shape_of(CheckRunEvent)

    assert shape.event_name == "check_run"
    assert shape.required == frozenset({"action", "check_run"})
    assert {"repository", "sender", "organization", "installation"} <= shape.declared
    assert shape.action_kind is Check


def test_optional_action_is_still_detected() -> None:
    """Variants with an optional action still expose their action kind."""
    assert shape_of(event_type_for("deployment")).action_kind is Created


def test_team_variant_uses_team_action_kind() -> None:
    """The team variant's action is constrained by the TeamEvent action kind."""
    assert shape_of(TeamEvent).action_kind is TeamAction


def test_variants_without_action_have_no_action_kind() -> None:
    """Push events carry no action enumeration and accept no action value."""
    shape = shape_of(PushEvent)

    assert shape.action_kind is None
    assert not shape.accepts_action("created")


def test_accepts_action_uses_the_action_kind() -> None:
    """Action-bearing variants accept exactly their documented values."""
    shape = shape_of(CheckRunEvent)

    assert shape.accepts_action("requested_action")
    assert not shape.accepts_action("auto_merge_enabled")
    assert not shape.accepts_action(None)


def test_undeclared_reports_extra_keys() -> None:
    """undeclared() lists document keys the variant does not know."""
    shape = shape_of(CreateEvent)

    assert shape.undeclared({"ref", "ref_type", "zen", "hook_id"}) == frozenset(
        {"zen", "hook_id"}
    )


@pytest.mark.parametrize("event_name", DOCUMENTED_EVENTS)
def test_every_variant_declares_the_envelope(event_name: str) -> None:
    """The shared envelope fields are declared on every variant."""
    declared = shape_of(event_type_for(event_name)).declared

    assert {"sender", "repository", "organization", "installation"} <= declared


@pytest.mark.parametrize(
    ("event_name", "envelope_key"),
    [
        pytest.param("public", "repository", id="public"),
        pytest.param("watch", "repository", id="watch"),
        pytest.param("org_block", "organization", id="org_block"),
        pytest.param("installation", "installation", id="installation"),
    ],
)
def test_variants_can_require_envelope_fields(
    event_name: str, envelope_key: str
) -> None:
    """Variants that always carry an envelope field redeclare it as required."""
    assert envelope_key in shape_of(event_type_for(event_name)).required
    assert "repository" not in shape_of(event_type_for("team_add")).required
