"""Webhook event variants and the registry keyed by event name.

Each variant is registered under the name GitHub sends in the
``X-GitHub-Event`` delivery header. The registry also exposes the structural
shape of every variant (required and declared top-level keys, plus the action
enumeration) so the decoder can match documents delivered without that
header.

Example:
>>> from ghwebhooks.events import event_type_for, shape_of
>>> sorted(shape_of(event_type_for("check_run")).required)
['action', 'check_run']

"""

from __future__ import annotations

import dataclasses
import functools
import typing as typ

import msgspec

from .actions import (
    ActionKind,
    AddedRemoved,
    BlockedUnblocked,
    Check,
    CheckSuiteAction,
    CrEdDel,
    Created,
    CreatedDeleted,
    IssuesAction,
    MemberAction,
    MilestoneAction,
    OrganizationAction,
    ProjectAction,
    ProjectCardAction,
    ProjectColumnAction,
    PullRequestAction,
    PullRequestReviewAction,
    ReleaseAction,
    RepositoryAction,
    Revoked,
    SecurityAdvisoryAction,
    Started,
    VulnerabilityAlertAction,
)
from .actions import TeamEvent as TeamAction
from .errors import UnknownEventNameError
from .records import (
    Actor,
    CheckRun,
    CheckSuite,
    Comment,
    Deployment,
    DeploymentStatus,
    GitActor,
    Installation,
    InstallationRepository,
    Issue,
    Label,
    Milestone,
    OpaqueValue,
    Organization,
    OrganizationMembership,
    PageBuild,
    Project,
    ProjectCard,
    ProjectColumn,
    PullRequest,
    PushCommit,
    Release,
    Repository,
    RequestedAction,
    Review,
    SecurityAdvisory,
    StatusBranch,
    StatusCommit,
    Team,
    VulnerabilityAlert,
    WikiPage,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

EventT = typ.TypeVar("EventT", bound="WebhookEvent")

_registry: dict[str, type[WebhookEvent]] = {}
_names: dict[type[WebhookEvent], str] = {}


class WebhookEvent(msgspec.Struct, kw_only=True, frozen=True):
    """Base for every webhook event variant.

    Declares the envelope fields most deliveries share. ``sender`` is the
    account that triggered the event; some older payload revisions omit it.
    ``repository``, ``organization`` and ``installation`` are present when the
    event happened in a repository, an organization or through a GitHub App
    installation. Variants that always carry one redeclare it as required.
    """

    sender: Actor | None = None
    repository: Repository | None = None
    organization: Organization | None = None
    installation: Installation | None = None


def register(event_name: str) -> typ.Callable[[type[EventT]], type[EventT]]:
    """Register an event variant under its delivery header name."""

    def _inner(event_type: type[EventT]) -> type[EventT]:
        _registry[event_name] = event_type
        _names[event_type] = event_name
        return event_type

    return _inner


def event_names() -> tuple[str, ...]:
    """Return every registered event name in registration order."""
    return tuple(_registry)


def event_type_for(event_name: str) -> type[WebhookEvent]:
    """Return the variant registered under ``event_name``.

    Raises
    ------
    UnknownEventNameError
        If no variant is registered under that name.

    """
    try:
        return _registry[event_name]
    except KeyError as exc:
        raise UnknownEventNameError(event_name) from exc


def event_name_of(event: WebhookEvent | type[WebhookEvent]) -> str:
    """Return the registered event name for a variant or variant instance."""
    event_type = event if isinstance(event, type) else type(event)
    return _names[event_type]


@dataclasses.dataclass(frozen=True, slots=True)
class EventShape:
    """Top-level structure of one event variant.

    Attributes
    ----------
    event_name
        Registered delivery header name.
    event_type
        The variant struct.
    required
        Top-level keys a document must contain to be this variant.
    declared
        Every top-level key the variant knows about.
    action_kind
        Enumeration constraining ``action``, if the variant has one.

    """

    event_name: str
    event_type: type[WebhookEvent]
    required: frozenset[str]
    declared: frozenset[str]
    action_kind: type[ActionKind] | None

    def matches(self, keys: cabc.Set[str]) -> bool:
        """Report whether ``keys`` holds every required key."""
        return self.required <= keys

    def undeclared(self, keys: cabc.Set[str]) -> frozenset[str]:
        """Return the keys of ``keys`` this variant does not declare."""
        return frozenset(keys) - self.declared

    def accepts_action(self, value: object) -> bool:
        """Report whether this variant's action enumeration accepts ``value``.

        Variants without an action enumeration accept no action value.
        """
        if self.action_kind is None:
            return False
        return self.action_kind.accepts(value)


@functools.cache
def shape_of(event_type: type[WebhookEvent]) -> EventShape:
    """Compute the structural shape of an event variant."""
    fields = msgspec.structs.fields(event_type)
    action_kind = next(
        (_action_kind(field.type) for field in fields if field.name == "action"),
        None,
    )
    return EventShape(
        event_name=event_name_of(event_type),
        event_type=event_type,
        required=frozenset(field.encode_name for field in fields if field.required),
        declared=frozenset(field.encode_name for field in fields),
        action_kind=action_kind,
    )


def shapes() -> tuple[EventShape, ...]:
    """Return the shape of every registered variant."""
    return tuple(shape_of(event_type) for event_type in _registry.values())


def _action_kind(annotation: object) -> type[ActionKind] | None:
    """Pull the action enumeration out of ``Kind`` or ``Kind | None``."""
    for candidate in (annotation, *typ.get_args(annotation)):
        if isinstance(candidate, type) and issubclass(candidate, ActionKind):
            return candidate
    return None


@register("check_run")
class CheckRunEvent(WebhookEvent, kw_only=True, frozen=True):
    """A check run was created, rerequested, completed or had an action requested.

    ``requested_action`` is set only for the ``requested_action`` action.
    """

    action: Check
    check_run: CheckRun
    requested_action: RequestedAction | None = None


@register("check_suite")
class CheckSuiteEvent(WebhookEvent, kw_only=True, frozen=True):
    """A check suite was requested, rerequested or completed."""

    action: CheckSuiteAction
    check_suite: CheckSuite


@register("commit_comment")
class CommitCommentEvent(WebhookEvent, kw_only=True, frozen=True):
    """A commit comment was created."""

    action: Created
    comment: Comment


@register("create")
class CreateEvent(WebhookEvent, kw_only=True, frozen=True):
    """A branch or tag was created.

    ``ref`` is ``None`` when only a repository was created; ``ref_type`` is
    ``repository``, ``branch`` or ``tag``.
    """

    ref: str | None
    ref_type: str
    master_branch: str
    pusher_type: str
    description: OpaqueValue = None


@register("delete")
class DeleteEvent(WebhookEvent, kw_only=True, frozen=True):
    """A branch or tag was deleted."""

    ref: str
    ref_type: str
    pusher_type: str


@register("deployment")
class DeploymentEvent(WebhookEvent, kw_only=True, frozen=True):
    """A deployment was created."""

    deployment: Deployment
    action: Created | None = None


@register("deployment_status")
class DeploymentStatusEvent(WebhookEvent, kw_only=True, frozen=True):
    """A deployment reported a new status."""

    deployment_status: DeploymentStatus
    deployment: Deployment
    action: Created | None = None


@register("fork")
class ForkEvent(WebhookEvent, kw_only=True, frozen=True):
    """A user forked a repository; ``forkee`` is the new fork."""

    forkee: Repository


@register("github_app_authorization")
class GitHubAppAuthorizationEvent(WebhookEvent, kw_only=True, frozen=True):
    """A user revoked their authorization of a GitHub App."""

    action: Revoked


@register("gollum")
class GollumEvent(WebhookEvent, kw_only=True, frozen=True):
    """Wiki pages were created or updated."""

    pages: list[WikiPage]


@register("installation")
class InstallationEvent(WebhookEvent, kw_only=True, frozen=True):
    """A GitHub App was installed or uninstalled."""

    action: CreatedDeleted
    installation: Installation
    repositories: list[InstallationRepository] = msgspec.field(default_factory=list)
    requester: Actor | None = None


@register("installation_repositories")
class InstallationRepositoriesEvent(WebhookEvent, kw_only=True, frozen=True):
    """Repositories were added to or removed from an installation."""

    action: AddedRemoved
    installation: Installation
    repository_selection: str
    repositories_added: list[InstallationRepository]
    repositories_removed: list[InstallationRepository]
    requester: Actor | None = None


@register("issue_comment")
class IssueCommentEvent(WebhookEvent, kw_only=True, frozen=True):
    """A comment on an issue or pull request changed."""

    action: CrEdDel
    issue: Issue
    comment: Comment
    changes: OpaqueValue = None


@register("issues")
class IssuesEvent(WebhookEvent, kw_only=True, frozen=True):
    """Issue activity.

    ``label``, ``assignee`` and ``milestone`` accompany the matching
    (un)labeled, (un)assigned and (de)milestoned actions; ``changes`` holds the
    previous values for ``edited``.
    """

    action: IssuesAction
    issue: Issue
    changes: OpaqueValue = None
    label: Label | None = None
    assignee: OpaqueValue = None
    milestone: Milestone | None = None


@register("label")
class LabelEvent(WebhookEvent, kw_only=True, frozen=True):
    """A repository label was created, edited or deleted."""

    action: CrEdDel
    label: Label
    changes: OpaqueValue = None


@register("member")
class MemberEvent(WebhookEvent, kw_only=True, frozen=True):
    """A collaborator was added to, removed from or changed on a repository."""

    action: MemberAction
    member: Actor
    changes: OpaqueValue = None


@register("membership")
class MembershipEvent(WebhookEvent, kw_only=True, frozen=True):
    """A user was added to or removed from a team."""

    action: AddedRemoved
    scope: str
    member: Actor
    team: Team


@register("milestone")
class MilestoneEvent(WebhookEvent, kw_only=True, frozen=True):
    """A milestone changed."""

    action: MilestoneAction
    milestone: Milestone
    changes: OpaqueValue = None


@register("organization")
class OrganizationEvent(WebhookEvent, kw_only=True, frozen=True):
    """Organization membership or lifecycle change."""

    action: OrganizationAction
    organization: Organization
    membership: OrganizationMembership | None = None
    invitation: OpaqueValue = None


@register("org_block")
class OrgBlockEvent(WebhookEvent, kw_only=True, frozen=True):
    """An organization blocked or unblocked a user."""

    action: BlockedUnblocked
    blocked_user: Actor
    organization: Organization


@register("page_build")
class PageBuildEvent(WebhookEvent, kw_only=True, frozen=True):
    """A GitHub Pages build was attempted."""

    id: int
    build: PageBuild


@register("project_card")
class ProjectCardEvent(WebhookEvent, kw_only=True, frozen=True):
    """A project card changed."""

    action: ProjectCardAction
    project_card: ProjectCard
    changes: OpaqueValue = None


@register("project_column")
class ProjectColumnEvent(WebhookEvent, kw_only=True, frozen=True):
    """A project column changed."""

    action: ProjectColumnAction
    project_column: ProjectColumn
    changes: OpaqueValue = None


@register("project")
class ProjectEvent(WebhookEvent, kw_only=True, frozen=True):
    """A project board changed."""

    action: ProjectAction
    project: Project
    changes: OpaqueValue = None


@register("public")
class PublicEvent(WebhookEvent, kw_only=True, frozen=True):
    """A private repository was made public."""

    repository: Repository


@register("pull_request")
class PullRequestEvent(WebhookEvent, kw_only=True, frozen=True):
    """Pull request activity.

    ``before``/``after`` accompany ``synchronize``; ``requested_reviewer`` or
    ``requested_team`` accompany review request actions.
    """

    action: PullRequestAction
    number: int
    pull_request: PullRequest
    changes: OpaqueValue = None
    label: Label | None = None
    assignee: OpaqueValue = None
    requested_reviewer: Actor | None = None
    requested_team: Team | None = None
    before: str | None = None
    after: str | None = None


@register("pull_request_review")
class PullRequestReviewEvent(WebhookEvent, kw_only=True, frozen=True):
    """A pull request review was submitted, edited or dismissed."""

    action: PullRequestReviewAction
    review: Review
    pull_request: PullRequest
    changes: OpaqueValue = None


@register("pull_request_review_comment")
class PullRequestReviewCommentEvent(WebhookEvent, kw_only=True, frozen=True):
    """A comment on a pull request's unified diff changed."""

    action: CrEdDel
    comment: Comment
    pull_request: PullRequest
    changes: OpaqueValue = None


@register("push")
class PushEvent(WebhookEvent, kw_only=True, frozen=True):
    """Commits were pushed to a branch or tag.

    ``head_commit`` is ``None`` when the push deleted the ref.
    """

    ref: str
    before: str
    after: str
    pusher: GitActor
    created: bool | None = None
    deleted: bool | None = None
    forced: bool | None = None
    base_ref: str | None = None
    compare: str | None = None
    commits: list[PushCommit] = msgspec.field(default_factory=list)
    head_commit: PushCommit | None = None


@register("release")
class ReleaseEvent(WebhookEvent, kw_only=True, frozen=True):
    """Release activity."""

    action: ReleaseAction
    release: Release
    changes: OpaqueValue = None


@register("repository")
class RepositoryEvent(WebhookEvent, kw_only=True, frozen=True):
    """Repository lifecycle or visibility change."""

    action: RepositoryAction
    repository: Repository
    changes: OpaqueValue = None


@register("repository_import")
class RepositoryImportEvent(WebhookEvent, kw_only=True, frozen=True):
    """A repository import finished; ``status`` is success, cancelled or failure."""

    status: str


@register("repository_vulnerability_alert")
class RepositoryVulnerabilityAlertEvent(WebhookEvent, kw_only=True, frozen=True):
    """A vulnerability alert was created, dismissed or resolved."""

    action: VulnerabilityAlertAction
    alert: VulnerabilityAlert


@register("security_advisory")
class SecurityAdvisoryEvent(WebhookEvent, kw_only=True, frozen=True):
    """A security advisory was published, updated or withdrawn."""

    action: SecurityAdvisoryAction
    security_advisory: SecurityAdvisory


@register("status")
class StatusEvent(WebhookEvent, kw_only=True, frozen=True):
    """The status of a commit changed."""

    id: int
    sha: str
    state: str
    context: str
    name: str | None = None
    target_url: str | None = None
    description: str | None = None
    commit: StatusCommit | None = None
    branches: list[StatusBranch] = msgspec.field(default_factory=list)
    created_at: str | None = None
    updated_at: str | None = None


@register("team")
class TeamEvent(WebhookEvent, kw_only=True, frozen=True):
    """A team was changed, or its access to a repository was."""

    action: TeamAction
    team: Team
    changes: OpaqueValue = None


@register("team_add")
class TeamAddEvent(WebhookEvent, kw_only=True, frozen=True):
    """A repository was added to a team."""

    team: Team


@register("watch")
class WatchEvent(WebhookEvent, kw_only=True, frozen=True):
    """A user starred a repository."""

    action: Started
    repository: Repository


Event: typ.TypeAlias = (
    CheckRunEvent
    | CheckSuiteEvent
    | CommitCommentEvent
    | CreateEvent
    | DeleteEvent
    | DeploymentEvent
    | DeploymentStatusEvent
    | ForkEvent
    | GitHubAppAuthorizationEvent
    | GollumEvent
    | InstallationEvent
    | InstallationRepositoriesEvent
    | IssueCommentEvent
    | IssuesEvent
    | LabelEvent
    | MemberEvent
    | MembershipEvent
    | MilestoneEvent
    | OrganizationEvent
    | OrgBlockEvent
    | PageBuildEvent
    | ProjectCardEvent
    | ProjectColumnEvent
    | ProjectEvent
    | PublicEvent
    | PullRequestEvent
    | PullRequestReviewEvent
    | PullRequestReviewCommentEvent
    | PushEvent
    | ReleaseEvent
    | RepositoryEvent
    | RepositoryImportEvent
    | RepositoryVulnerabilityAlertEvent
    | SecurityAdvisoryEvent
    | StatusEvent
    | TeamEvent
    | TeamAddEvent
    | WatchEvent
)


__all__ = [
    "CheckRunEvent",
    "CheckSuiteEvent",
    "CommitCommentEvent",
    "CreateEvent",
    "DeleteEvent",
    "DeploymentEvent",
    "DeploymentStatusEvent",
    "Event",
    "EventShape",
    "ForkEvent",
    "GitHubAppAuthorizationEvent",
    "GollumEvent",
    "InstallationEvent",
    "InstallationRepositoriesEvent",
    "IssueCommentEvent",
    "IssuesEvent",
    "LabelEvent",
    "MemberEvent",
    "MembershipEvent",
    "MilestoneEvent",
    "OrgBlockEvent",
    "OrganizationEvent",
    "PageBuildEvent",
    "ProjectCardEvent",
    "ProjectColumnEvent",
    "ProjectEvent",
    "PublicEvent",
    "PullRequestEvent",
    "PullRequestReviewCommentEvent",
    "PullRequestReviewEvent",
    "PushEvent",
    "ReleaseEvent",
    "RepositoryEvent",
    "RepositoryImportEvent",
    "RepositoryVulnerabilityAlertEvent",
    "SecurityAdvisoryEvent",
    "StatusEvent",
    "TeamAddEvent",
    "TeamEvent",
    "WatchEvent",
    "WebhookEvent",
    "event_name_of",
    "event_names",
    "event_type_for",
    "register",
    "shape_of",
    "shapes",
]
