"""Creates a Match and its Chat once interest has become mutual."""

import logging

from django.db import IntegrityError, transaction

from matching.models import Chat, Match
from matching.repos import MatchesRepo

logger = logging.getLogger(__name__)


class MatchEngine:
    """Idempotent match creation, safe against both sides completing a pair at once.

    The (user, company) unique constraint on Match is the only lock. A caller
    that loses the insert race gets the winner's match back instead of an
    error.
    """

    def __init__(self, matches_repo=None):
        self.matches = matches_repo or MatchesRepo()

    def _find_existing(self, user_id, company_id):
        return self.matches.find_for_pair(user_id=user_id, company_id=company_id)

    def create_match(self, user_id, company_id, initiated_by, job_post_id=None) -> Match:
        """Return the pair's match, creating it together with its chat when absent."""
        existing = self._find_existing(user_id, company_id)
        if existing:
            logger.warning(
                "Match already exists between user %s and company %s", user_id, company_id
            )
            return existing

        try:
            with transaction.atomic():
                match = Match.objects.create(
                    user_id=user_id,
                    company_id=company_id,
                    job_post_id=job_post_id,
                    initiated_by=initiated_by,
                    status=Match.STATUS_ACTIVE,
                )
                Chat.objects.create(match=match, user_id=user_id, company_id=company_id)
        except IntegrityError:
            existing = self._find_existing(user_id, company_id)
            if existing is None:
                raise
            logger.info(
                "Concurrent match creation for user %s and company %s; kept match %s",
                user_id,
                company_id,
                existing.pk,
            )
            return existing

        logger.info(
            "Match created between user %s and company %s (initiated by %s)",
            user_id,
            company_id,
            initiated_by,
        )
        return self.matches.load(match.pk)
