"""Model representing a company's one-sided interest in a person."""

from django.conf import settings
from django.db import models

from matching.utils.ids import new_row_id
from .company import Company
from .job_post import JobPost


class CompanyLike(models.Model):
    """Company like on a person, optionally scoped to one of its job posts."""
    id = models.UUIDField(primary_key=True, default=new_row_id, editable=False)
    company = models.ForeignKey(
        Company,
        on_delete=models.CASCADE,
        related_name="candidate_likes",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="company_likes",
    )
    # staff member who acted
    liked_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    job_post = models.ForeignKey(
        JobPost,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="company_likes",
    )
    note = models.TextField(max_length=2000, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Enforce one like per company/user pair."""
        db_table = "company_like"
        constraints = [
            models.UniqueConstraint(fields=["company", "user"], name="uniq_company_like_company_user"),
        ]

    def __str__(self) -> str:
        return f"CompanyLike({self.company_id} → {self.user_id})"
