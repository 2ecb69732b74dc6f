# ============================================
# tracker/services/membership.py
# ============================================
import logging

from django.core.exceptions import PermissionDenied, ValidationError
from django.db import transaction

from accounts.selectors.user import UserSelector
from lunear.results import returns_result
from tracker.models import ProjectMember
from tracker.selectors.membership import MembershipSelector

logger = logging.getLogger(__name__)


def require_member(*, project_id: str, user) -> ProjectMember:
    """Caller's membership in the project, or PermissionDenied"""
    membership = MembershipSelector.get_membership(project_id=project_id, user_id=user.pk)
    if membership is None:
        raise PermissionDenied("Unauthorized")
    return membership


def require_admin(*, project_id: str, user) -> ProjectMember:
    membership = require_member(project_id=project_id, user=user)
    if not membership.is_admin:
        raise PermissionDenied("Unauthorized")
    return membership


class MembershipService:

    @staticmethod
    def _check_can_manage(caller: ProjectMember, target: ProjectMember) -> None:
        """
        The creator's own membership is fixed. Admins other than the creator
        may only manage plain members.
        """
        creator_id = caller.project.created_by_id
        if target.user_id == creator_id:
            raise PermissionDenied("The project creator's membership cannot be changed")
        if caller.user_id != creator_id and target.is_admin:
            raise PermissionDenied("Only the project creator can manage admins")

    @staticmethod
    @returns_result
    @transaction.atomic
    def add_member(
        *,
        user,
        project_id: str,
        member_id: str,
        role: str = ProjectMember.Role.MEMBER
    ) -> ProjectMember:
        """Add an existing user to the project"""

        require_admin(project_id=project_id, user=user)

        member = UserSelector.get_user_by_id(member_id)
        if member is None:
            raise ValidationError("User not found")

        if ProjectMember.objects.filter(project_id=project_id, user=member).exists():
            raise ValidationError("User is already a member of this project")

        membership = ProjectMember.objects.create(
            project_id=project_id,
            user=member,
            role=role,
            invited_by=user
        )
        logger.info("[member] added user=%s project=%s by=%s", member.pk, project_id, user.pk)
        return membership

    @staticmethod
    @returns_result
    @transaction.atomic
    def update_member_role(
        *,
        user,
        project_id: str,
        member_id: str,
        role: str
    ) -> ProjectMember:
        """Change a member's role"""

        caller = require_admin(project_id=project_id, user=user)

        target = MembershipSelector.get_membership(project_id=project_id, user_id=member_id)
        if target is None:
            raise ValidationError("Member not found")

        MembershipService._check_can_manage(caller, target)

        target.role = role
        target.save(update_fields=['role'])
        logger.info("[member] role of user=%s in project=%s set to %s", member_id, project_id, role)
        return target

    @staticmethod
    @returns_result
    @transaction.atomic
    def remove_member(*, user, project_id: str, member_id: str) -> None:
        """Remove a member from the project"""

        caller = require_admin(project_id=project_id, user=user)

        target = MembershipSelector.get_membership(project_id=project_id, user_id=member_id)
        if target is None:
            raise ValidationError("Member not found")

        MembershipService._check_can_manage(caller, target)

        target.delete()
        logger.info("[member] removed user=%s from project=%s", member_id, project_id)
