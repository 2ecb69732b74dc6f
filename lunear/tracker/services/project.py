# ============================================
# tracker/services/project.py
# ============================================
import logging
from typing import Optional

from django.core.exceptions import PermissionDenied, ValidationError
from django.db import transaction

from accounts.models import generate_id
from lunear.results import returns_result
from tracker.models import Project, ProjectMember
from tracker.selectors.project import ProjectSelector
from tracker.services.membership import require_admin

logger = logging.getLogger(__name__)


class ProjectService:

    @staticmethod
    @returns_result
    @transaction.atomic
    def create_project(
        *,
        user,
        name: str,
        id: Optional[str] = None,
        description: str = ''
    ) -> Project:
        """Create a project and make its creator an ADMIN, both or neither"""

        project = Project.objects.create(
            id=id or generate_id(),
            name=name,
            description=description,
            created_by=user
        )
        ProjectMember.objects.create(
            project=project,
            user=user,
            role=ProjectMember.Role.ADMIN,
            invited_by=None
        )
        logger.info("[project] created id=%s by=%s", project.pk, user.pk)
        return project

    @staticmethod
    @returns_result
    @transaction.atomic
    def update_project(
        *,
        user,
        project_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None
    ) -> Project:
        """Update name and/or description, admins only"""

        membership = require_admin(project_id=project_id, user=user)
        project = membership.project

        update_fields = []
        if name is not None:
            project.name = name
            update_fields.append('name')
        if description is not None:
            project.description = description
            update_fields.append('description')

        if update_fields:
            project.save(update_fields=update_fields + ['updated_at'])
        return project

    @staticmethod
    @returns_result
    @transaction.atomic
    def delete_project(*, user, project_id: str) -> None:
        """Delete project with its issues and memberships, creator only"""

        project = ProjectSelector.get_project_by_id(project_id)
        if project is None:
            raise ValidationError("Project not found")

        if project.created_by_id != user.pk:
            raise PermissionDenied("Only the project creator can delete the project")

        project.delete()
        logger.info("[project] deleted id=%s by=%s", project_id, user.pk)
