"""Service for a company's likes and passes on candidates."""

import logging

from django.contrib.auth import get_user_model
from django.db import transaction

from matching.exceptions import NotFound
from matching.models import JobPost, Like, Match
from matching.repos import CompanyLikesRepo, LikesRepo
from .match_engine import MatchEngine

logger = logging.getLogger(__name__)
User = get_user_model()


class CompanyLikeService:
    """Record company interest in a person and complete a match when the person liked first."""

    def __init__(self, likes_repo=None, company_likes_repo=None, match_engine=None):
        self.likes = likes_repo or LikesRepo()
        self.company_likes = company_likes_repo or CompanyLikesRepo()
        self.engine = match_engine or MatchEngine()

    def _reciprocal_like(self, user_id, company_id):
        """The user's direct like on the company, else their latest like on one of its job posts."""
        direct = self.likes.find_like(
            user_id=user_id, target_type=Like.TARGET_COMPANY, target_id=company_id
        )
        return direct or self.likes.latest_job_like_for_company(user_id=user_id, company_id=company_id)

    def company_like_user(self, company_id, user_id, liked_by_id, job_post_id=None, note=None):
        """Like a candidate on behalf of a company, optionally for one of its job posts.

        A like on any of the company's job posts counts as the candidate's
        interest just like a direct company like. The company like is
        committed before that lookup runs.
        """
        if not User.objects.filter(pk=user_id).exists():
            raise NotFound("Candidate not found.")
        if job_post_id and not JobPost.objects.filter(pk=job_post_id, company_id=company_id).exists():
            raise NotFound("Job post not found.")

        with transaction.atomic():
            self.company_likes.add_like(
                company_id=company_id,
                user_id=user_id,
                liked_by_id=liked_by_id,
                job_post_id=job_post_id,
                note=note,
            )
        logger.debug("Company %s liked user %s (by %s)", company_id, user_id, liked_by_id)

        user_like = self._reciprocal_like(user_id, company_id)
        if user_like is None:
            return {"liked": True, "matched": False}
        self.engine.create_match(
            user_id,
            company_id,
            Match.INITIATED_BY_COMPANY,
            job_post_id or user_like.job_post_id,
        )
        return {"liked": True, "matched": True}

    def company_pass_user(self, company_id, user_id):
        """Acknowledge a pass. Passes are not stored."""
        logger.info("Company %s passed on user %s", company_id, user_id)
        return {"passed": True}
