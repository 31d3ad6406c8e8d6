"""Action-kind enumerations for webhook events.

Most webhook events carry an ``action`` string narrowing what happened. Each
enumeration below holds exactly the values GitHub documents for the events
that use it; anything else is rejected. Wire values are snake_case and
matched case-sensitively.

Example:
>>> from ghwebhooks.actions import Check
>>> Check.parse("requested_action").render()
'requested_action'

"""

from __future__ import annotations

import enum
import typing as typ

from .errors import InvalidActionValueError

_ACTION_PATH = "action"


class ActionKind(enum.StrEnum):
    """Base for closed action enumerations with a parse/render pair."""

    @classmethod
    def parse(cls, value: str) -> typ.Self:
        """Return the member whose wire value is exactly ``value``.

        Raises
        ------
        InvalidActionValueError
            If ``value`` is not one of the documented values.

        """
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidActionValueError(
                _ACTION_PATH, value, allowed=cls.values()
            ) from exc

    @classmethod
    def values(cls) -> tuple[str, ...]:
        """Return the documented wire values in declaration order."""
        return tuple(member.value for member in cls)

    @classmethod
    def accepts(cls, value: object) -> bool:
        """Report whether ``value`` is a legal wire value for this kind."""
        return isinstance(value, str) and value in cls._value2member_map_

    def render(self) -> str:
        """Return the wire value."""
        return self.value


class Check(ActionKind):
    """Check run actions."""

    CREATED = "created"
    REREQUESTED = "rerequested"
    REQUESTED_ACTION = "requested_action"
    COMPLETED = "completed"


class CheckSuiteAction(ActionKind):
    """Check suite actions."""

    COMPLETED = "completed"
    REQUESTED = "requested"
    REREQUESTED = "rerequested"


class Created(ActionKind):
    """Actions of events that only report creation."""

    CREATED = "created"


class Revoked(ActionKind):
    """GitHub App authorization actions."""

    REVOKED = "revoked"


class Started(ActionKind):
    """Watch actions; GitHub only reports starring."""

    STARTED = "started"


class CreatedDeleted(ActionKind):
    """Installation actions."""

    CREATED = "created"
    DELETED = "deleted"


class CreatedEdited(ActionKind):
    """Wiki page actions reported by gollum events."""

    CREATED = "created"
    EDITED = "edited"


class CrEdDel(ActionKind):
    """Created, edited or deleted; shared by comment and label events."""

    CREATED = "created"
    EDITED = "edited"
    DELETED = "deleted"


class AddedRemoved(ActionKind):
    """Membership and installation repository actions."""

    ADDED = "added"
    REMOVED = "removed"


class BlockedUnblocked(ActionKind):
    """Organization block actions."""

    BLOCKED = "blocked"
    UNBLOCKED = "unblocked"


class TeamEvent(ActionKind):
    """Team lifecycle and repository access actions."""

    CREATED = "created"
    DELETED = "deleted"
    EDITED = "edited"
    ADDED_TO_REPOSITORY = "added_to_repository"
    REMOVED_FROM_REPOSITORY = "removed_from_repository"


class IssuesAction(ActionKind):
    """Issue actions."""

    OPENED = "opened"
    EDITED = "edited"
    DELETED = "deleted"
    TRANSFERRED = "transferred"
    PINNED = "pinned"
    UNPINNED = "unpinned"
    CLOSED = "closed"
    REOPENED = "reopened"
    ASSIGNED = "assigned"
    UNASSIGNED = "unassigned"
    LABELED = "labeled"
    UNLABELED = "unlabeled"
    LOCKED = "locked"
    UNLOCKED = "unlocked"
    MILESTONED = "milestoned"
    DEMILESTONED = "demilestoned"


class MemberAction(ActionKind):
    """Repository collaborator actions."""

    ADDED = "added"
    REMOVED = "removed"
    EDITED = "edited"


class MilestoneAction(ActionKind):
    """Milestone actions."""

    CREATED = "created"
    CLOSED = "closed"
    OPENED = "opened"
    EDITED = "edited"
    DELETED = "deleted"


class OrganizationAction(ActionKind):
    """Organization lifecycle and membership actions."""

    DELETED = "deleted"
    RENAMED = "renamed"
    MEMBER_ADDED = "member_added"
    MEMBER_REMOVED = "member_removed"
    MEMBER_INVITED = "member_invited"


class ProjectAction(ActionKind):
    """Project board actions."""

    CREATED = "created"
    EDITED = "edited"
    CLOSED = "closed"
    REOPENED = "reopened"
    DELETED = "deleted"


class ProjectCardAction(ActionKind):
    """Project card actions."""

    CREATED = "created"
    EDITED = "edited"
    MOVED = "moved"
    CONVERTED = "converted"
    DELETED = "deleted"


class ProjectColumnAction(ActionKind):
    """Project column actions."""

    CREATED = "created"
    EDITED = "edited"
    MOVED = "moved"
    DELETED = "deleted"


class PullRequestAction(ActionKind):
    """Pull request actions, including draft and lock transitions."""

    OPENED = "opened"
    EDITED = "edited"
    CLOSED = "closed"
    REOPENED = "reopened"
    ASSIGNED = "assigned"
    UNASSIGNED = "unassigned"
    REVIEW_REQUESTED = "review_requested"
    REVIEW_REQUEST_REMOVED = "review_request_removed"
    READY_FOR_REVIEW = "ready_for_review"
    CONVERTED_TO_DRAFT = "converted_to_draft"
    LABELED = "labeled"
    UNLABELED = "unlabeled"
    SYNCHRONIZE = "synchronize"
    LOCKED = "locked"
    UNLOCKED = "unlocked"


class PullRequestReviewAction(ActionKind):
    """Pull request review actions."""

    SUBMITTED = "submitted"
    EDITED = "edited"
    DISMISSED = "dismissed"


class ReleaseAction(ActionKind):
    """Release actions."""

    PUBLISHED = "published"
    UNPUBLISHED = "unpublished"
    CREATED = "created"
    EDITED = "edited"
    DELETED = "deleted"
    PRERELEASED = "prereleased"
    RELEASED = "released"


class RepositoryAction(ActionKind):
    """Repository lifecycle and visibility actions."""

    CREATED = "created"
    DELETED = "deleted"
    ARCHIVED = "archived"
    UNARCHIVED = "unarchived"
    EDITED = "edited"
    RENAMED = "renamed"
    TRANSFERRED = "transferred"
    PUBLICIZED = "publicized"
    PRIVATIZED = "privatized"


class VulnerabilityAlertAction(ActionKind):
    """Repository vulnerability alert actions."""

    CREATE = "create"
    DISMISS = "dismiss"
    RESOLVE = "resolve"


class SecurityAdvisoryAction(ActionKind):
    """Global security advisory actions."""

    PUBLISHED = "published"
    UPDATED = "updated"
    PERFORMED = "performed"


__all__ = [
    "ActionKind",
    "AddedRemoved",
    "BlockedUnblocked",
    "Check",
    "CheckSuiteAction",
    "CrEdDel",
    "Created",
    "CreatedDeleted",
    "CreatedEdited",
    "IssuesAction",
    "MemberAction",
    "MilestoneAction",
    "OrganizationAction",
    "ProjectAction",
    "ProjectCardAction",
    "ProjectColumnAction",
    "PullRequestAction",
    "PullRequestReviewAction",
    "ReleaseAction",
    "RepositoryAction",
    "Revoked",
    "SecurityAdvisoryAction",
    "Started",
    "TeamEvent",
    "VulnerabilityAlertAction",
]
