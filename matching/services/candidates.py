"""Builds a company's candidate list from direct and job-post likes."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional

from matching.repos import CompanyLikesRepo, LikesRepo, MatchesRepo


@dataclass
class Candidate:
    """A person who showed interest in a company, seen from the company's side."""
    user: Any
    like_source: str
    liked_at: datetime
    company_liked: bool
    matched: bool
    job_post: Optional[Any] = None


class CandidateAggregator:
    """Merge direct and job-scoped likes into one entry per user.

    A direct company like always wins over a job-post like from the same
    user. Among several job-post likes the newest one is kept.
    """

    SOURCE_COMPANY = "company"
    SOURCE_JOB = "job"

    def __init__(self, likes_repo=None, company_likes_repo=None, matches_repo=None):
        self.likes = likes_repo or LikesRepo()
        self.company_likes = company_likes_repo or CompanyLikesRepo()
        self.matches = matches_repo or MatchesRepo()

    def get_company_candidates(self, company_id) -> List[Candidate]:
        liked_user_ids = self.company_likes.liked_user_ids(company_id)
        matched_user_ids = self.matches.active_user_ids_for_company(company_id)

        candidates = {}
        for like in self.likes.direct_company_likes(company_id):
            candidates[like.user_id] = Candidate(
                user=like.user,
                like_source=self.SOURCE_COMPANY,
                liked_at=like.created_at,
                company_liked=like.user_id in liked_user_ids,
                matched=like.user_id in matched_user_ids,
            )

        for like in self.likes.job_likes_without_direct_like(company_id):
            if like.user_id in candidates:
                continue
            candidates[like.user_id] = Candidate(
                user=like.user,
                like_source=self.SOURCE_JOB,
                liked_at=like.created_at,
                company_liked=like.user_id in liked_user_ids,
                matched=like.user_id in matched_user_ids,
                job_post=like.job_post,
            )

        return list(candidates.values())
