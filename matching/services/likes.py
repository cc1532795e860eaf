"""Service for a person's likes on companies, job posts and videos."""

import logging

from django.db import transaction

from matching.exceptions import NotFound
from matching.models import Company, JobPost, Like, Match, Video
from matching.repos import CompanyLikesRepo, LikesRepo, MatchesRepo
from .match_engine import MatchEngine

logger = logging.getLogger(__name__)


class LikeService:
    """Record and remove person likes; complete a match when the company already liked back."""

    def __init__(self, likes_repo=None, company_likes_repo=None, matches_repo=None, match_engine=None):
        self.likes = likes_repo or LikesRepo()
        self.company_likes = company_likes_repo or CompanyLikesRepo()
        self.matches = matches_repo or MatchesRepo()
        self.engine = match_engine or MatchEngine(self.matches)

    def _match_if_reciprocated(self, user_id, company_id, job_post_id=None):
        company_like = self.company_likes.find_for_pair(company_id=company_id, user_id=user_id)
        if company_like is None:
            return {"liked": True, "matched": False}
        self.engine.create_match(
            user_id,
            company_id,
            Match.INITIATED_BY_USER,
            job_post_id or company_like.job_post_id,
        )
        return {"liked": True, "matched": True}

    def _adjust_counter(self, target_type, target_id, delta):
        updated = self.likes.adjust_like_count(target_type=target_type, target_id=target_id, delta=delta)
        if not updated:
            logger.warning(
                "like_count update (%+d) matched no %s with id %s", delta, target_type, target_id
            )

    def like_company(self, user_id, company_id, source=None):
        """Like a company directly.

        The like is committed before the reciprocal lookup, so of two opposite
        likes racing each other at least one sees the other and creates the match.
        """
        if not Company.objects.filter(pk=company_id).exists():
            raise NotFound("Company not found.")
        with transaction.atomic():
            self.likes.add_like(
                user_id=user_id, target_type=Like.TARGET_COMPANY, target_id=company_id, source=source
            )
        logger.debug("User %s liked company %s (source=%s)", user_id, company_id, source)
        return self._match_if_reciprocated(user_id, company_id)

    def like_job(self, user_id, job_post_id, source=None):
        """Like a job post; a resulting match carries this job post."""
        job = JobPost.objects.filter(pk=job_post_id).values("company_id").first()
        if job is None:
            raise NotFound("Job post not found.")
        with transaction.atomic():
            self.likes.add_like(
                user_id=user_id, target_type=Like.TARGET_JOB_POST, target_id=job_post_id, source=source
            )
            self._adjust_counter(Like.TARGET_JOB_POST, job_post_id, +1)
        logger.debug("User %s liked job post %s (source=%s)", user_id, job_post_id, source)
        return self._match_if_reciprocated(user_id, job["company_id"], job_post_id)

    @transaction.atomic
    def like_video(self, user_id, video_id):
        """Like a video. Videos never take part in matching."""
        if not Video.objects.filter(pk=video_id).exists():
            raise NotFound("Video not found.")
        self.likes.add_like(user_id=user_id, target_type=Like.TARGET_VIDEO, target_id=video_id)
        self._adjust_counter(Like.TARGET_VIDEO, video_id, +1)
        return {"liked": True}

    def _unlike(self, user_id, target_type, target_id):
        removed = self.likes.remove_like(user_id=user_id, target_type=target_type, target_id=target_id)
        if not removed:
            raise NotFound("Like not found.")
        logger.debug("User %s removed like on %s %s", user_id, target_type, target_id)

    @transaction.atomic
    def unlike_company(self, user_id, company_id):
        self._unlike(user_id, Like.TARGET_COMPANY, company_id)
        return {"unliked": True}

    @transaction.atomic
    def unlike_job(self, user_id, job_post_id):
        self._unlike(user_id, Like.TARGET_JOB_POST, job_post_id)
        self._adjust_counter(Like.TARGET_JOB_POST, job_post_id, -1)
        return {"unliked": True}

    @transaction.atomic
    def unlike_video(self, user_id, video_id):
        self._unlike(user_id, Like.TARGET_VIDEO, video_id)
        self._adjust_counter(Like.TARGET_VIDEO, video_id, -1)
        return {"unliked": True}

    def get_user_likes(self, user_id):
        """Every like of the user, newest first."""
        return list(self.likes.for_user(user_id))

    def get_user_liked_jobs(self, user_id):
        """Liked job posts with a flag telling whether an active match carries the job."""
        matched_job_ids = self.matches.active_job_post_ids_for_user(user_id)
        return [
            {
                "liked_at": like.created_at,
                "is_match": like.job_post_id in matched_job_ids,
                "job_post": like.job_post,
            }
            for like in self.likes.for_user(user_id).filter(target_type=Like.TARGET_JOB_POST)
            if like.job_post is not None
        ]
