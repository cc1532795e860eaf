"""Repository helpers for person likes and the like counters they maintain."""

from typing import Optional
from django.db.models import F, QuerySet
from django.db.models.functions import Greatest

from matching.db_accessor import DB_Accessor
from matching.models import JobPost, Like, Video


class LikesRepo(DB_Accessor):
    """Repository wrapper for Like rows addressed by (user, target_type, target_id)."""

    # target types that keep a denormalised like_count
    COUNTED_TARGETS = {
        Like.TARGET_JOB_POST: JobPost,
        Like.TARGET_VIDEO: Video,
    }

    def __init__(self) -> None:
        """Initialise with the Like model."""
        super().__init__(Like)

    def _key(self, *, user_id, target_type: str, target_id) -> dict:
        return {"user_id": user_id, **Like.target_lookup(target_type, target_id)}

    def find_like(self, *, user_id, target_type: str, target_id) -> Optional[Like]:
        """Return the user's like on the target, or None."""
        return self.find(**self._key(user_id=user_id, target_type=target_type, target_id=target_id))

    def add_like(self, *, user_id, target_type: str, target_id, source: str = "") -> Like:
        """Insert a like, raising Conflict when the user already liked the target."""
        return self.insert_unique(
            self._key(user_id=user_id, target_type=target_type, target_id=target_id),
            "Already liked.",
            source=source or "",
        )

    def remove_like(self, *, user_id, target_type: str, target_id) -> int:
        """Delete the user's like on the target; return number of likes removed."""
        return self.delete(**self._key(user_id=user_id, target_type=target_type, target_id=target_id))

    def adjust_like_count(self, *, target_type: str, target_id, delta: int) -> int:
        """Shift the target's like_count by delta, floored at zero; return rows updated."""
        model = self.COUNTED_TARGETS[target_type]
        return model.objects.filter(pk=target_id).update(
            like_count=Greatest(F("like_count") + delta, 0)
        )

    def latest_job_like_for_company(self, *, user_id, company_id) -> Optional[Like]:
        """Most recent like by the user on any job post owned by the company."""
        return (
            Like.objects.filter(
                user_id=user_id,
                target_type=Like.TARGET_JOB_POST,
                job_post__company_id=company_id,
            )
            .order_by("-created_at")
            .first()
        )

    def for_user(self, user_id) -> QuerySet:
        """All likes of a user, newest first, with target summaries joined."""
        return (
            Like.objects.filter(user_id=user_id)
            .select_related("company", "job_post__company", "video__company")
            .order_by("-created_at")
        )

    def direct_company_likes(self, company_id) -> QuerySet:
        return (
            Like.objects.filter(target_type=Like.TARGET_COMPANY, company_id=company_id)
            .select_related("user")
            .order_by("-created_at")
        )

    def job_likes_without_direct_like(self, company_id) -> QuerySet:
        """Job-post likes on the company's posts by users who have no direct company like."""
        direct_likers = Like.objects.filter(
            target_type=Like.TARGET_COMPANY, company_id=company_id
        ).values("user_id")
        return (
            Like.objects.filter(target_type=Like.TARGET_JOB_POST, job_post__company_id=company_id)
            .exclude(user_id__in=direct_likers)
            .select_related("user", "job_post")
            .order_by("-created_at")
        )
