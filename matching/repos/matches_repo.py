"""Repository helpers for matches and their chats."""

from typing import Optional, Set
from django.db.models import Prefetch, QuerySet

from matching.db_accessor import DB_Accessor
from matching.models import Match, Video


class MatchesRepo(DB_Accessor):
    """Repository wrapper for Match rows, unique per (user, company)."""

    def __init__(self) -> None:
        """Initialise with the Match model."""
        super().__init__(Match)

    def with_relations(self) -> QuerySet:
        """Matches joined with chat, company, user and job post summaries."""
        return Match.objects.select_related("chat", "company", "user", "job_post")

    def find_for_pair(self, *, user_id, company_id) -> Optional[Match]:
        """Return the match for the user/company pair, whatever its status."""
        return self.with_relations().filter(user_id=user_id, company_id=company_id).first()

    def load(self, match_id) -> Match:
        return self.with_relations().get(pk=match_id)

    def find_detail(self, match_id) -> Optional[Match]:
        """Match with full company, job post (profession, active videos), user and chat."""
        return (
            Match.objects.select_related("company", "job_post__profession", "user", "chat")
            .prefetch_related(
                Prefetch(
                    "job_post__videos",
                    queryset=Video.objects.filter(status=Video.STATUS_ACTIVE).order_by("created_at"),
                    to_attr="active_videos",
                )
            )
            .filter(pk=match_id)
            .first()
        )

    def find_for_update(self, match_id) -> Optional[Match]:
        """Lock the match row for a state transition."""
        return Match.objects.select_for_update().filter(pk=match_id).first()

    def active_for_user(self, user_id) -> QuerySet:
        return self.with_relations().filter(user_id=user_id, status=Match.STATUS_ACTIVE).order_by("-matched_at")

    def active_for_company(self, company_id) -> QuerySet:
        return self.with_relations().filter(company_id=company_id, status=Match.STATUS_ACTIVE).order_by("-matched_at")

    def active_user_ids_for_company(self, company_id) -> Set:
        return set(
            Match.objects.filter(company_id=company_id, status=Match.STATUS_ACTIVE)
            .values_list("user_id", flat=True)
        )

    def active_job_post_ids_for_user(self, user_id) -> Set:
        """Job post ids carried by the user's active matches."""
        return set(
            Match.objects.filter(user_id=user_id, status=Match.STATUS_ACTIVE, job_post__isnull=False)
            .values_list("job_post_id", flat=True)
        )
