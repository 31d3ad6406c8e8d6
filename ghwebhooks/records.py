"""Typed records nested inside webhook event payloads.

Records are immutable msgspec structs. Field names mirror GitHub's webhook
JSON exactly; fields GitHub always sends are required, while fields that come
and go between API revisions default to ``None`` (or an empty list) so older
and newer payloads decode under one schema. Unknown fields are ignored.

Every actor-shaped object (owner, sender, creator, user, assignee, ...)
decodes into the single :class:`Actor` record.
"""

from __future__ import annotations

import typing as typ

import msgspec

from .actions import CreatedEdited

OpaqueValue: typ.TypeAlias = (
    bool | int | float | str | list[typ.Any] | dict[str, typ.Any] | None
)
"""Any JSON value, kept exactly as decoded.

Used for fields whose shape is heterogeneous or undocumented (descriptions,
``changes`` blocks, deployment payloads). Re-encoding reproduces the same JSON
value.
"""


class Actor(msgspec.Struct, kw_only=True, frozen=True):
    """A GitHub user, bot or organisation account.

    Attributes
    ----------
    login : str
        Account handle.
    id : int
        Numeric account identifier.
    type : str, optional
        ``User``, ``Bot`` or ``Organization``.
    site_admin : bool, optional
        Whether the account is a GitHub staff administrator.

    The remaining attributes are the API URLs GitHub attaches to every
    account object.

    """

    login: str
    id: int
    node_id: str | None = None
    avatar_url: str | None = None
    gravatar_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    followers_url: str | None = None
    following_url: str | None = None
    gists_url: str | None = None
    starred_url: str | None = None
    subscriptions_url: str | None = None
    organizations_url: str | None = None
    repos_url: str | None = None
    events_url: str | None = None
    received_events_url: str | None = None
    type: str | None = None
    site_admin: bool | None = None


class GitActor(msgspec.Struct, kw_only=True, frozen=True):
    """Git author, committer or pusher identity."""

    name: str
    email: str | None
    username: str | None = None
    date: str | None = None


class Repository(msgspec.Struct, kw_only=True, frozen=True):
    """Repository the event happened in.

    Installation and push payloads report ``created_at``/``pushed_at`` as
    epoch seconds while other events use ISO-8601 strings, so both are
    accepted.
    """

    id: int
    name: str
    full_name: str
    node_id: str | None = None
    owner: Actor | None = None
    private: bool | None = None
    html_url: str | None = None
    description: OpaqueValue = None
    fork: bool | None = None
    url: str | None = None
    forks_url: str | None = None
    keys_url: str | None = None
    collaborators_url: str | None = None
    teams_url: str | None = None
    hooks_url: str | None = None
    issue_events_url: str | None = None
    events_url: str | None = None
    assignees_url: str | None = None
    branches_url: str | None = None
    tags_url: str | None = None
    blobs_url: str | None = None
    git_tags_url: str | None = None
    git_refs_url: str | None = None
    trees_url: str | None = None
    statuses_url: str | None = None
    languages_url: str | None = None
    stargazers_url: str | None = None
    contributors_url: str | None = None
    subscribers_url: str | None = None
    subscription_url: str | None = None
    commits_url: str | None = None
    git_commits_url: str | None = None
    comments_url: str | None = None
    issue_comment_url: str | None = None
    contents_url: str | None = None
    compare_url: str | None = None
    merges_url: str | None = None
    archive_url: str | None = None
    downloads_url: str | None = None
    issues_url: str | None = None
    pulls_url: str | None = None
    milestones_url: str | None = None
    notifications_url: str | None = None
    labels_url: str | None = None
    releases_url: str | None = None
    deployments_url: str | None = None
    created_at: int | str | None = None
    updated_at: str | None = None
    pushed_at: int | str | None = None
    git_url: str | None = None
    ssh_url: str | None = None
    clone_url: str | None = None
    svn_url: str | None = None
    homepage: OpaqueValue = None
    size: int | None = None
    stargazers_count: int | None = None
    watchers_count: int | None = None
    language: OpaqueValue = None
    has_issues: bool | None = None
    has_projects: bool | None = None
    has_downloads: bool | None = None
    has_wiki: bool | None = None
    has_pages: bool | None = None
    forks_count: int | None = None
    mirror_url: OpaqueValue = None
    archived: bool | None = None
    open_issues_count: int | None = None
    license: OpaqueValue = None
    forks: int | None = None
    open_issues: int | None = None
    watchers: int | None = None
    default_branch: str | None = None
    public: bool | None = None


class Organization(msgspec.Struct, kw_only=True, frozen=True):
    """Organization the event happened in."""

    login: str
    id: int
    node_id: str | None = None
    url: str | None = None
    repos_url: str | None = None
    events_url: str | None = None
    hooks_url: str | None = None
    issues_url: str | None = None
    members_url: str | None = None
    public_members_url: str | None = None
    avatar_url: str | None = None
    description: str | None = None


class Installation(msgspec.Struct, kw_only=True, frozen=True):
    """GitHub App installation.

    Most events only carry ``{"id": ...}``; installation events carry the full
    record, including the account, granted permissions and subscribed events.
    """

    id: int
    node_id: str | None = None
    account: Actor | None = None
    repository_selection: str | None = None
    access_tokens_url: str | None = None
    repositories_url: str | None = None
    html_url: str | None = None
    app_id: int | None = None
    target_id: int | None = None
    target_type: str | None = None
    permissions: dict[str, str] | None = None
    events: list[str] | None = None
    created_at: int | str | None = None
    updated_at: int | str | None = None
    single_file_name: str | None = None


class InstallationRepository(msgspec.Struct, kw_only=True, frozen=True):
    """Repository summary listed by installation events."""

    id: int
    name: str
    full_name: str
    node_id: str | None = None
    private: bool | None = None


class App(msgspec.Struct, kw_only=True, frozen=True):
    """GitHub App that owns a check suite or run."""

    id: int
    name: str
    node_id: str | None = None
    owner: Actor | None = None
    description: OpaqueValue = None
    external_url: str | None = None
    html_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class CheckSuite(msgspec.Struct, kw_only=True, frozen=True):
    """Suite of check runs for one commit.

    ``conclusion`` stays ``None`` until the suite completes, and
    ``head_branch`` is ``None`` when GitHub cannot attribute the commit to a
    branch (``pull_requests`` is then empty).
    """

    id: int
    head_sha: str
    head_branch: str | None = None
    node_id: str | None = None
    status: str | None = None
    conclusion: str | None = None
    url: str | None = None
    before: str | None = None
    after: str | None = None
    pull_requests: list[OpaqueValue] = msgspec.field(default_factory=list)
    app: App | None = None
    created_at: str | None = None
    updated_at: str | None = None


class CheckRunOutput(msgspec.Struct, kw_only=True, frozen=True):
    """Title, summary and text reported by a check run."""

    title: str | None = None
    summary: str | None = None
    text: str | None = None
    annotations_count: int = 0
    annotations_url: str | None = None


class RequestedAction(msgspec.Struct, kw_only=True, frozen=True):
    """Button identifier a user clicked on a check run."""

    identifier: str


class CheckRun(msgspec.Struct, kw_only=True, frozen=True):
    """A single check run; ``status`` is queued, in_progress or completed."""

    id: int
    name: str
    head_sha: str
    status: str
    node_id: str | None = None
    external_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    details_url: str | None = None
    conclusion: str | None = None
    started_at: str | None = None
    completed_at: str | None = None
    output: CheckRunOutput | None = None
    check_suite: CheckSuite | None = None
    app: App | None = None
    pull_requests: list[OpaqueValue] = msgspec.field(default_factory=list)


class Comment(msgspec.Struct, kw_only=True, frozen=True):
    """Commit, issue or pull request review comment.

    Commit comments set ``commit_id``/``position``/``line``/``path``; review
    comments add the diff anchors; issue comments set ``issue_url``.
    """

    id: int
    user: Actor
    body: str
    url: str | None = None
    html_url: str | None = None
    node_id: str | None = None
    position: OpaqueValue = None
    line: OpaqueValue = None
    path: OpaqueValue = None
    commit_id: str | None = None
    original_commit_id: str | None = None
    original_position: int | None = None
    diff_hunk: str | None = None
    pull_request_review_id: int | None = None
    in_reply_to_id: int | None = None
    issue_url: str | None = None
    pull_request_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    author_association: str | None = None


class Deployment(msgspec.Struct, kw_only=True, frozen=True):
    """Deployment of a commit to an environment."""

    id: int
    sha: str
    ref: str
    environment: str
    url: str | None = None
    node_id: str | None = None
    task: str | None = None
    payload: OpaqueValue = None
    description: OpaqueValue = None
    creator: Actor | None = None
    created_at: str | None = None
    updated_at: str | None = None
    statuses_url: str | None = None
    repository_url: str | None = None


class DeploymentStatus(msgspec.Struct, kw_only=True, frozen=True):
    """Status of a deployment: pending, success, failure or error."""

    id: int
    state: str
    url: str | None = None
    node_id: str | None = None
    creator: Actor | None = None
    description: str | None = None
    target_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    deployment_url: str | None = None
    repository_url: str | None = None


class WikiPage(msgspec.Struct, kw_only=True, frozen=True):
    """Wiki page touched by a gollum event."""

    page_name: str
    title: str
    action: CreatedEdited
    sha: str | None = None
    html_url: str | None = None
    summary: OpaqueValue = None


class Label(msgspec.Struct, kw_only=True, frozen=True):
    """Issue or pull request label."""

    name: str
    color: str
    id: int | None = None
    node_id: str | None = None
    url: str | None = None
    default: bool | None = None
    description: str | None = None


class Milestone(msgspec.Struct, kw_only=True, frozen=True):
    """Milestone grouping issues and pull requests."""

    id: int
    number: int
    title: str
    state: str
    url: str | None = None
    html_url: str | None = None
    labels_url: str | None = None
    node_id: str | None = None
    description: str | None = None
    creator: Actor | None = None
    open_issues: int | None = None
    closed_issues: int | None = None
    created_at: str | None = None
    updated_at: str | None = None
    due_on: str | None = None
    closed_at: str | None = None


class Issue(msgspec.Struct, kw_only=True, frozen=True):
    """Issue, or the issue half of a pull request.

    ``pull_request`` is present only when the issue backs a pull request.
    """

    id: int
    number: int
    title: str
    state: str
    user: Actor
    url: str | None = None
    repository_url: str | None = None
    labels_url: str | None = None
    comments_url: str | None = None
    events_url: str | None = None
    html_url: str | None = None
    node_id: str | None = None
    labels: list[Label] = msgspec.field(default_factory=list)
    locked: bool | None = None
    assignee: Actor | None = None
    assignees: list[Actor] = msgspec.field(default_factory=list)
    milestone: Milestone | None = None
    comments: int | None = None
    created_at: str | None = None
    updated_at: str | None = None
    closed_at: str | None = None
    author_association: str | None = None
    body: str | None = None
    pull_request: OpaqueValue = None


class Team(msgspec.Struct, kw_only=True, frozen=True):
    """Organization team."""

    id: int
    name: str
    node_id: str | None = None
    slug: str | None = None
    description: str | None = None
    privacy: str | None = None
    url: str | None = None
    html_url: str | None = None
    members_url: str | None = None
    repositories_url: str | None = None
    permission: str | None = None


class OrganizationMembership(msgspec.Struct, kw_only=True, frozen=True):
    """Membership of a user in an organisation."""

    state: str
    role: str
    user: Actor
    url: str | None = None
    organization_url: str | None = None


class Project(msgspec.Struct, kw_only=True, frozen=True):
    """Project board."""

    id: int
    name: str
    state: str
    owner_url: str | None = None
    url: str | None = None
    html_url: str | None = None
    columns_url: str | None = None
    node_id: str | None = None
    body: str | None = None
    number: int | None = None
    creator: Actor | None = None
    created_at: str | None = None
    updated_at: str | None = None


class ProjectCard(msgspec.Struct, kw_only=True, frozen=True):
    """Project board card; ``note`` is ``None`` for issue-backed cards."""

    id: int
    column_id: int
    url: str | None = None
    project_url: str | None = None
    column_url: str | None = None
    content_url: str | None = None
    node_id: str | None = None
    note: str | None = None
    archived: bool | None = None
    creator: Actor | None = None
    created_at: str | None = None
    updated_at: str | None = None
    after_id: int | None = None


class ProjectColumn(msgspec.Struct, kw_only=True, frozen=True):
    """Column of a project board."""

    id: int
    name: str
    url: str | None = None
    project_url: str | None = None
    cards_url: str | None = None
    node_id: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    after_id: int | None = None


class PullRequestRef(msgspec.Struct, kw_only=True, frozen=True):
    """Head or base of a pull request.

    ``repo`` is ``None`` when the head repository has been deleted.
    """

    ref: str
    sha: str
    label: str | None = None
    user: Actor | None = None
    repo: Repository | None = None


class PullRequest(msgspec.Struct, kw_only=True, frozen=True):
    """Pull request, with its head and base refs."""

    id: int
    number: int
    state: str
    title: str
    user: Actor
    head: PullRequestRef
    base: PullRequestRef
    url: str | None = None
    node_id: str | None = None
    html_url: str | None = None
    diff_url: str | None = None
    patch_url: str | None = None
    issue_url: str | None = None
    commits_url: str | None = None
    review_comments_url: str | None = None
    review_comment_url: str | None = None
    comments_url: str | None = None
    statuses_url: str | None = None
    locked: bool | None = None
    body: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    closed_at: str | None = None
    merged_at: str | None = None
    merge_commit_sha: str | None = None
    assignee: Actor | None = None
    assignees: list[Actor] = msgspec.field(default_factory=list)
    requested_reviewers: list[Actor] = msgspec.field(default_factory=list)
    requested_teams: list[Team] = msgspec.field(default_factory=list)
    labels: list[Label] = msgspec.field(default_factory=list)
    milestone: Milestone | None = None
    author_association: str | None = None
    draft: bool | None = None
    merged: bool | None = None
    mergeable: bool | None = None
    rebaseable: bool | None = None
    mergeable_state: str | None = None
    merged_by: Actor | None = None
    comments: int | None = None
    review_comments: int | None = None
    maintainer_can_modify: bool | None = None
    commits: int | None = None
    additions: int | None = None
    deletions: int | None = None
    changed_files: int | None = None


class Review(msgspec.Struct, kw_only=True, frozen=True):
    """Pull request review; ``state`` is approved, commented, and so on."""

    id: int
    user: Actor
    state: str
    node_id: str | None = None
    body: str | None = None
    commit_id: str | None = None
    submitted_at: str | None = None
    html_url: str | None = None
    pull_request_url: str | None = None
    author_association: str | None = None


class ReleaseAsset(msgspec.Struct, kw_only=True, frozen=True):
    """File attached to a release."""

    id: int
    name: str
    url: str | None = None
    browser_download_url: str | None = None
    node_id: str | None = None
    label: str | None = None
    state: str | None = None
    content_type: str | None = None
    size: int | None = None
    download_count: int | None = None
    uploader: Actor | None = None
    created_at: str | None = None
    updated_at: str | None = None


class Release(msgspec.Struct, kw_only=True, frozen=True):
    """Release of a tagged commit."""

    id: int
    tag_name: str
    url: str | None = None
    assets_url: str | None = None
    upload_url: str | None = None
    html_url: str | None = None
    node_id: str | None = None
    target_commitish: str | None = None
    name: str | None = None
    draft: bool | None = None
    author: Actor | None = None
    prerelease: bool | None = None
    created_at: str | None = None
    published_at: str | None = None
    assets: list[ReleaseAsset] = msgspec.field(default_factory=list)
    tarball_url: str | None = None
    zipball_url: str | None = None
    body: str | None = None


class PushCommit(msgspec.Struct, kw_only=True, frozen=True):
    """Commit listed in a push event."""

    id: str
    message: str
    author: GitActor
    committer: GitActor
    tree_id: str | None = None
    distinct: bool | None = None
    timestamp: str | None = None
    url: str | None = None
    added: list[str] = msgspec.field(default_factory=list)
    removed: list[str] = msgspec.field(default_factory=list)
    modified: list[str] = msgspec.field(default_factory=list)


class PageBuildError(msgspec.Struct, kw_only=True, frozen=True):
    """Error reported by a failed Pages build."""

    message: str | None = None


class PageBuild(msgspec.Struct, kw_only=True, frozen=True):
    """GitHub Pages build attempt."""

    status: str
    url: str | None = None
    error: PageBuildError | None = None
    pusher: Actor | None = None
    commit: str | None = None
    duration: int | None = None
    created_at: str | None = None
    updated_at: str | None = None


class StatusCommit(msgspec.Struct, kw_only=True, frozen=True):
    """Commit a status was posted against.

    The nested git ``commit`` object is kept opaque.
    """

    sha: str
    node_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    comments_url: str | None = None
    commit: OpaqueValue = None
    author: Actor | None = None
    committer: Actor | None = None
    parents: list[OpaqueValue] = msgspec.field(default_factory=list)


class BranchCommit(msgspec.Struct, kw_only=True, frozen=True):
    """Commit at the tip of a branch listed in a status event."""

    sha: str
    url: str | None = None


class StatusBranch(msgspec.Struct, kw_only=True, frozen=True):
    """Branch containing the commit whose status changed."""

    name: str
    commit: BranchCommit
    protected: bool | None = None


class VulnerabilityAlert(msgspec.Struct, kw_only=True, frozen=True):
    """Security vulnerability alert raised against a dependency."""

    id: int
    affected_range: str
    affected_package_name: str
    external_reference: str | None = None
    external_identifier: str | None = None
    fixed_in: str | None = None
    dismisser: Actor | None = None
    dismiss_reason: str | None = None
    dismissed_at: str | None = None


class AdvisoryIdentifier(msgspec.Struct, kw_only=True, frozen=True):
    """Identifier of a security advisory, such as a GHSA or CVE ID."""

    value: str
    type: str


class AdvisoryReference(msgspec.Struct, kw_only=True, frozen=True):
    """Link to more information about an advisory."""

    url: str


class AdvisoryPackage(msgspec.Struct, kw_only=True, frozen=True):
    """Package affected by an advisory."""

    ecosystem: str
    name: str


class AdvisoryPatchedVersion(msgspec.Struct, kw_only=True, frozen=True):
    """First version of a package containing the fix."""

    identifier: str


class AdvisoryVulnerability(msgspec.Struct, kw_only=True, frozen=True):
    """Affected version range of one package."""

    package: AdvisoryPackage
    severity: str
    vulnerable_version_range: str
    first_patched_version: AdvisoryPatchedVersion | None = None


class SecurityAdvisory(msgspec.Struct, kw_only=True, frozen=True):
    """GitHub security advisory as published to the advisory database."""

    ghsa_id: str
    summary: str
    severity: str
    description: str | None = None
    identifiers: list[AdvisoryIdentifier] = msgspec.field(default_factory=list)
    references: list[AdvisoryReference] = msgspec.field(default_factory=list)
    published_at: str | None = None
    updated_at: str | None = None
    withdrawn_at: str | None = None
    vulnerabilities: list[AdvisoryVulnerability] = msgspec.field(
        default_factory=list
    )


__all__ = [
    "Actor",
    "AdvisoryIdentifier",
    "AdvisoryPackage",
    "AdvisoryPatchedVersion",
    "AdvisoryReference",
    "AdvisoryVulnerability",
    "App",
    "BranchCommit",
    "CheckRun",
    "CheckRunOutput",
    "CheckSuite",
    "Comment",
    "Deployment",
    "DeploymentStatus",
    "GitActor",
    "Installation",
    "InstallationRepository",
    "Issue",
    "Label",
    "Milestone",
    "OpaqueValue",
    "Organization",
    "OrganizationMembership",
    "PageBuild",
    "PageBuildError",
    "Project",
    "ProjectCard",
    "ProjectColumn",
    "PullRequest",
    "PullRequestRef",
    "PushCommit",
    "Release",
    "ReleaseAsset",
    "Repository",
    "RequestedAction",
    "Review",
    "SecurityAdvisory",
    "StatusBranch",
    "StatusCommit",
    "Team",
    "VulnerabilityAlert",
    "WikiPage",
]
