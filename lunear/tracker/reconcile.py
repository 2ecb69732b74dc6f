# -*- coding: utf-8 -*-
"""
Optimistic view of a resource list.

`reconcile` merges the rows a loader returned with submissions that are still
in flight. Submissions are parsed with the same IntentSchema the action uses
and ignored when they would be rejected. Accepted ones are applied, in the
order given, by a per-resource `apply(acc, payload, viewer)` function:

    rows = reconcile(
        loader_data["projects"],
        pending_form_datas,
        schema=PROJECTS_SCHEMA,
        apply=apply_project,
        viewer=request.user,
    )

Untouched rows keep server order. Created rows are appended after them and are
not sorted back in until the loader runs again. Rows are never modified in
place: every merge builds a new dict.
"""
from typing import Any, Callable, Dict, Iterable, List, Mapping

from django.utils import timezone

from tracker.intents import (
    AddNewMember,
    CreateComment,
    CreateIssue,
    CreateProject,
    DeleteComment,
    DeleteIssue,
    DeleteProject,
    Intent,
    IntentSchema,
    RemoveMember,
    UpdateIssue,
    UpdateMemberRole,
    UpdateProject,
)

Row = Dict[str, Any]
Accumulator = Dict[str, Row]
Applier = Callable[[Accumulator, Intent, Any], None]


def reconcile(
    confirmed: Iterable[Mapping],
    submissions: Iterable[Mapping],
    *,
    schema: IntentSchema,
    apply: Applier,
    key: str = "id",
    viewer=None,
) -> List[Row]:
    acc: Accumulator = {row[key]: dict(row) for row in confirmed}

    for raw in submissions:
        submission = schema.parse(raw)
        if not submission.ok:
            continue
        apply(acc, submission.payload, viewer)

    return list(acc.values())


def _full_name(viewer) -> str:
    return f"{viewer.first_name} {viewer.last_name}"


def _merge(acc: Accumulator, key: str, changes: Mapping) -> None:
    row = acc.get(key)
    if row is None:
        return
    acc[key] = {**row, **changes}


def apply_project(acc: Accumulator, payload: Intent, viewer) -> None:
    if isinstance(payload, CreateProject):
        if payload.id:
            acc[payload.id] = {
                "id": payload.id,
                "createdBy": viewer.pk,
                "name": payload.name,
                "description": "",
                "role": "ADMIN",
                "doneIssuesCount": 0,
                "totalIssuesCount": 0,
            }
    elif isinstance(payload, DeleteProject):
        acc.pop(payload.id, None)
    elif isinstance(payload, UpdateProject):
        if payload.name:
            _merge(acc, payload.id, {"name": payload.name})


def apply_issue(acc: Accumulator, payload: Intent, viewer) -> None:
    if isinstance(payload, CreateIssue):
        if payload.id:
            acc[payload.id] = {
                "id": payload.id,
                "createdAt": timezone.now().isoformat(),
                "creator": _full_name(viewer),
                "projectId": payload.project_id,
                "status": payload.status,
                "priority": payload.priority,
                "title": payload.title,
            }
    elif isinstance(payload, DeleteIssue):
        acc.pop(payload.id, None)
    elif isinstance(payload, UpdateIssue):
        changes = {
            "projectId": payload.project_id,
            "priority": payload.priority,
            "status": payload.status,
            "title": payload.title,
            "description": payload.description,
        }
        _merge(acc, payload.id, {k: v for k, v in changes.items() if v is not None})


def apply_member(acc: Accumulator, payload: Intent, viewer) -> None:
    """Members are keyed by `userId`."""
    if isinstance(payload, AddNewMember):
        if payload.first_name and payload.last_name:
            acc[payload.user_id] = {
                "role": "MEMBER",
                "userId": payload.user_id,
                "user": {
                    "firstName": payload.first_name,
                    "lastName": payload.last_name,
                },
            }
    elif isinstance(payload, UpdateMemberRole):
        _merge(acc, payload.user_id, {"role": payload.role})
    elif isinstance(payload, RemoveMember):
        acc.pop(payload.user_id, None)


def apply_comment(acc: Accumulator, payload: Intent, viewer) -> None:
    if isinstance(payload, CreateComment):
        if payload.id:
            acc[payload.id] = {
                "id": payload.id,
                "createdBy": viewer.pk,
                "creator": _full_name(viewer),
                "content": payload.content,
            }
    elif isinstance(payload, DeleteComment):
        acc.pop(payload.id, None)
