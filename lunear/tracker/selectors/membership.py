# ============================================
# tracker/selectors/membership.py
# ============================================
from typing import Optional
from tracker.models import ProjectMember


class MembershipSelector:

    @staticmethod
    def get_membership(*, project_id: str, user_id: str) -> Optional[ProjectMember]:
        """The user's membership row in a project, if any"""
        try:
            return ProjectMember.objects.select_related('project').get(
                project_id=project_id,
                user_id=user_id
            )
        except ProjectMember.DoesNotExist:
            return None
