# -*- coding: utf-8 -*-
"""
Form submissions discriminated by their `intent` field.

Each intent is a frozen dataclass carrying only the fields that intent
accepts, validated by its own DRF serializer. An IntentSchema groups the
intents one route understands:

    submission = ISSUES_SCHEMA.parse(request.data)
    if not submission.ok:
        return validation_errors(submission.errors)
    payload = submission.payload      # CreateIssue | DeleteIssue | UpdateIssue

The same schemas are used by `tracker.reconcile` to read pending submissions,
so a submission the server would reject is never applied optimistically.
"""
from dataclasses import dataclass
from typing import ClassVar, Dict, Mapping, Optional, Tuple, Type

from tracker.serializers.comment import CommentCreateSerializer, CommentDeleteSerializer
from tracker.serializers.issue import (
    IssueCreateSerializer,
    IssueDeleteCurrentSerializer,
    IssueDeleteSerializer,
    IssueDescriptionSerializer,
    IssueFieldsSerializer,
    IssueTitleSerializer,
    IssueUpdateSerializer,
)
from tracker.serializers.project import (
    MemberAddSerializer,
    MemberRemoveSerializer,
    MemberRoleSerializer,
    ProjectCreateSerializer,
    ProjectDeleteSerializer,
    ProjectSettingsUpdateSerializer,
    ProjectUpdateSerializer,
)

INVALID_INTENT = "Invalid intent"
INVALID_DATA = "Invalid data"


class Intent:
    intent: ClassVar[str]


# ---- /app/projects
@dataclass(frozen=True)
class CreateProject(Intent):
    intent: ClassVar[str] = "create_project"
    name: str
    id: Optional[str] = None


@dataclass(frozen=True)
class DeleteProject(Intent):
    intent: ClassVar[str] = "delete_project"
    id: str


@dataclass(frozen=True)
class UpdateProject(Intent):
    intent: ClassVar[str] = "update_project"
    id: str
    name: Optional[str] = None


# ---- /app/projects/<id>
@dataclass(frozen=True)
class UpdateProjectDetails(Intent):
    intent: ClassVar[str] = "update_project"
    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class AddNewMember(Intent):
    intent: ClassVar[str] = "add_new_member"
    user_id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


@dataclass(frozen=True)
class UpdateMemberRole(Intent):
    intent: ClassVar[str] = "update_member_role"
    user_id: str
    role: str


@dataclass(frozen=True)
class RemoveMember(Intent):
    intent: ClassVar[str] = "remove_member"
    user_id: str


# ---- /app/issues
@dataclass(frozen=True)
class CreateIssue(Intent):
    intent: ClassVar[str] = "create_issue"
    project_id: str
    status: int
    priority: int
    title: str
    id: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class DeleteIssue(Intent):
    intent: ClassVar[str] = "delete_issue"
    project_id: str
    id: str


@dataclass(frozen=True)
class UpdateIssue(Intent):
    intent: ClassVar[str] = "update_issue"
    id: str
    project_id: str
    priority: Optional[int] = None
    status: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None


# ---- /app/issues/<id>
@dataclass(frozen=True)
class DeleteCurrentIssue(Intent):
    intent: ClassVar[str] = "delete_issue"


@dataclass(frozen=True)
class UpdateTitle(Intent):
    intent: ClassVar[str] = "update_title"
    title: str


@dataclass(frozen=True)
class UpdateDescription(Intent):
    intent: ClassVar[str] = "update_description"
    description: Optional[str] = None


@dataclass(frozen=True)
class CreateComment(Intent):
    intent: ClassVar[str] = "create_comment"
    content: str
    id: Optional[str] = None


@dataclass(frozen=True)
class DeleteComment(Intent):
    intent: ClassVar[str] = "delete_comment"
    id: str


@dataclass(frozen=True)
class UpdateIssueFields(Intent):
    intent: ClassVar[str] = "update_issue"
    status: Optional[int] = None
    priority: Optional[int] = None
    project_id: Optional[str] = None


@dataclass(frozen=True)
class Submission:
    payload: Optional[Intent] = None
    errors: Optional[dict] = None

    @property
    def ok(self) -> bool:
        return self.errors is None


class IntentSchema:
    """Dispatch table from intent name to (payload class, serializer class)."""

    def __init__(self, *variants: Tuple[Type[Intent], type]):
        self.variants: Dict[str, Tuple[Type[Intent], type]] = {}
        for payload_class, serializer_class in variants:
            if payload_class.intent in self.variants:
                raise ValueError(f"Duplicate intent '{payload_class.intent}'")
            self.variants[payload_class.intent] = (payload_class, serializer_class)

    def parse(self, data: Mapping) -> Submission:
        if not isinstance(data, Mapping):
            return Submission(errors={"non_field_errors": [INVALID_DATA]})

        intent = data.get("intent")
        if not isinstance(intent, str) or intent not in self.variants:
            return Submission(errors={"intent": [INVALID_INTENT]})

        # an empty form field counts as not supplied
        data = {key: value for key, value in data.items() if value != ""}

        payload_class, serializer_class = self.variants[intent]
        serializer = serializer_class(data=data)
        if not serializer.is_valid():
            return Submission(errors=dict(serializer.errors))
        return Submission(payload=payload_class(**serializer.validated_data))


PROJECTS_SCHEMA = IntentSchema(
    (CreateProject, ProjectCreateSerializer),
    (DeleteProject, ProjectDeleteSerializer),
    (UpdateProject, ProjectUpdateSerializer),
)

PROJECT_SETTINGS_SCHEMA = IntentSchema(
    (UpdateProjectDetails, ProjectSettingsUpdateSerializer),
    (AddNewMember, MemberAddSerializer),
    (UpdateMemberRole, MemberRoleSerializer),
    (RemoveMember, MemberRemoveSerializer),
)

ISSUES_SCHEMA = IntentSchema(
    (CreateIssue, IssueCreateSerializer),
    (DeleteIssue, IssueDeleteSerializer),
    (UpdateIssue, IssueUpdateSerializer),
)

ISSUE_DETAIL_SCHEMA = IntentSchema(
    (DeleteCurrentIssue, IssueDeleteCurrentSerializer),
    (UpdateTitle, IssueTitleSerializer),
    (UpdateDescription, IssueDescriptionSerializer),
    (CreateComment, CommentCreateSerializer),
    (DeleteComment, CommentDeleteSerializer),
    (UpdateIssueFields, IssueFieldsSerializer),
)
