# ============================================
# tracker/selectors/user.py
# ============================================
from django.db.models import Exists, OuterRef, QuerySet
from accounts.models import User
from accounts.selectors.user import UserSelector
from tracker.models import ProjectMember


class MemberCandidateSelector:

    @staticmethod
    def filter_users(*, q: str, project_id: str = None) -> QuerySet:
        """
        Users whose first name contains `q`, minus the members of
        `project_id` when given. Empty `q` matches nobody.
        """
        if not q:
            return User.objects.none()

        queryset = UserSelector.search_users(q)
        if project_id:
            queryset = queryset.exclude(
                Exists(ProjectMember.objects.filter(project_id=project_id, user=OuterRef('pk')))
            )
        return queryset
