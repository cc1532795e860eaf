"""Repository helpers for company likes on persons."""

from typing import Optional, Set

from matching.db_accessor import DB_Accessor
from matching.models import CompanyLike


class CompanyLikesRepo(DB_Accessor):
    """Repository wrapper for CompanyLike rows keyed by (company, user)."""

    def __init__(self) -> None:
        """Initialise with the CompanyLike model."""
        super().__init__(CompanyLike)

    def find_for_pair(self, *, company_id, user_id) -> Optional[CompanyLike]:
        return self.find(company_id=company_id, user_id=user_id)

    def add_like(self, *, company_id, user_id, liked_by_id=None, job_post_id=None, note: str = "") -> CompanyLike:
        """Insert a company like, raising Conflict when the company already liked the user."""
        return self.insert_unique(
            {"company_id": company_id, "user_id": user_id},
            "Candidate already liked.",
            liked_by_id=liked_by_id,
            job_post_id=job_post_id,
            note=note or "",
        )

    def liked_user_ids(self, company_id) -> Set:
        """Ids of every user this company has liked."""
        return set(CompanyLike.objects.filter(company_id=company_id).values_list("user_id", flat=True))
