"""Read views over matches and the ACTIVE → DECLINED transition."""

import logging

from django.core.exceptions import ObjectDoesNotExist
from django.db import transaction

from matching.exceptions import Forbidden, NotFound
from matching.models import Chat, Match
from matching.repos import MatchesRepo

logger = logging.getLogger(__name__)


def _chat_or_none(match):
    try:
        return match.chat
    except ObjectDoesNotExist:
        return None


class MatchService:
    """Match listings for both sides, match detail, and person-side decline."""

    def __init__(self, matches_repo=None):
        self.matches = matches_repo or MatchesRepo()

    def _ensure_participant(self, match, user_id):
        if match is None:
            raise NotFound("Match not found.")
        # only the person side of a match may open or decline it
        if str(match.user_id) != str(user_id):
            raise Forbidden("You can only access your own matches.")
        return match

    def get_user_matches(self, user_id):
        return list(self.matches.active_for_user(user_id))

    def get_company_matches(self, company_id):
        return list(self.matches.active_for_company(company_id))

    def get_match_detail(self, match_id, user_id):
        """Return the match with company profile, job post, user and chat; read-only."""
        return self._ensure_participant(self.matches.find_detail(match_id), user_id)

    @transaction.atomic
    def delete_match(self, match_id, user_id):
        """Decline a match and deactivate its chat. Declining twice is a no-op."""
        match = self._ensure_participant(self.matches.find_for_update(match_id), user_id)
        if match.status == Match.STATUS_DECLINED:
            logger.info("Match %s already declined", match.pk)
            return {"deleted": True}

        match.status = Match.STATUS_DECLINED
        match.save(update_fields=["status"])
        chat = _chat_or_none(match)
        if chat is not None:
            Chat.objects.filter(pk=chat.pk).update(is_active=False)
        logger.info("Match %s declined by user %s", match.pk, user_id)
        return {"deleted": True}
