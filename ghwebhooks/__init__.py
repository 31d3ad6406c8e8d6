"""Typed GitHub webhook payloads and the decoder that selects them.

The package spans three slices:

* **Records & events** - immutable msgspec structs for every webhook event
  variant and the records nested inside them, plus the action-kind
  enumerations in :mod:`ghwebhooks.actions`.
* **Decoder** - turns a delivery body into exactly one event variant, either
  guided by the ``X-GitHub-Event`` header value or by matching the document's
  top-level keys.
* **Errors** - a small taxonomy of decode failures, each naming the dotted
  path of the offending field.

Quick examples
--------------

Decode a delivery with its event header::

    >>> from ghwebhooks import decode_with_hint
    >>> event = decode_with_hint(body, request.headers["X-GitHub-Event"])

Decode without the header, letting the payload's shape decide::

    >>> from ghwebhooks import PushEvent, decode
    >>> match decode(body):
    ...     case PushEvent(ref=ref, commits=commits):
    ...         print(ref, len(commits))

Re-encode a decoded event::

    >>> from ghwebhooks import encode
    >>> encode(event)
"""

from __future__ import annotations

from .config import DecoderConfig, DecoderConfigError
from .decoder import (
    EventDecoder,
    decode,
    decode_with_hint,
    default_decoder,
    encode,
    select_shape,
)
from .errors import (
    AmbiguousShapeError,
    DecodeErrorReason,
    EventDecodeError,
    InvalidActionValueError,
    MalformedDocumentError,
    MissingRequiredFieldError,
    TypeMismatchError,
    UnknownEventNameError,
)
from .events import (
    CheckRunEvent,
    CheckSuiteEvent,
    CommitCommentEvent,
    CreateEvent,
    DeleteEvent,
    DeploymentEvent,
    DeploymentStatusEvent,
    Event,
    EventShape,
    ForkEvent,
    GitHubAppAuthorizationEvent,
    GollumEvent,
    InstallationEvent,
    InstallationRepositoriesEvent,
    IssueCommentEvent,
    IssuesEvent,
    LabelEvent,
    MemberEvent,
    MembershipEvent,
    MilestoneEvent,
    OrganizationEvent,
    OrgBlockEvent,
    PageBuildEvent,
    ProjectCardEvent,
    ProjectColumnEvent,
    ProjectEvent,
    PublicEvent,
    PullRequestEvent,
    PullRequestReviewCommentEvent,
    PullRequestReviewEvent,
    PushEvent,
    ReleaseEvent,
    RepositoryEvent,
    RepositoryImportEvent,
    RepositoryVulnerabilityAlertEvent,
    SecurityAdvisoryEvent,
    StatusEvent,
    TeamAddEvent,
    TeamEvent,
    WatchEvent,
    WebhookEvent,
    event_name_of,
    event_names,
    event_type_for,
    shape_of,
)
from .records import Actor, OpaqueValue, Repository

__all__ = [
    "Actor",
    "AmbiguousShapeError",
    "CheckRunEvent",
    "CheckSuiteEvent",
    "CommitCommentEvent",
    "CreateEvent",
    "DecodeErrorReason",
    "DecoderConfig",
    "DecoderConfigError",
    "DeleteEvent",
    "DeploymentEvent",
    "DeploymentStatusEvent",
    "Event",
    "EventDecodeError",
    "EventDecoder",
    "EventShape",
    "ForkEvent",
    "GitHubAppAuthorizationEvent",
    "GollumEvent",
    "InstallationEvent",
    "InstallationRepositoriesEvent",
    "InvalidActionValueError",
    "IssueCommentEvent",
    "IssuesEvent",
    "LabelEvent",
    "MalformedDocumentError",
    "MemberEvent",
    "MembershipEvent",
    "MilestoneEvent",
    "MissingRequiredFieldError",
    "OpaqueValue",
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
    "Repository",
    "RepositoryEvent",
    "RepositoryImportEvent",
    "RepositoryVulnerabilityAlertEvent",
    "SecurityAdvisoryEvent",
    "StatusEvent",
    "TeamAddEvent",
    "TeamEvent",
    "TypeMismatchError",
    "UnknownEventNameError",
    "WatchEvent",
    "WebhookEvent",
    "decode",
    "decode_with_hint",
    "default_decoder",
    "encode",
    "event_name_of",
    "event_names",
    "event_type_for",
    "select_shape",
    "shape_of",
]
