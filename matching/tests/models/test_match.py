from django.db import IntegrityError, transaction
from django.test import TestCase

from matching.models import Chat, CompanyLike, Match
from matching.tests.helpers import make_company, make_job_post, make_user


class MatchModelTestCase(TestCase):
    def setUp(self):
        self.user = make_user(username="candidate")
        self.company = make_company()

    def test_new_match_defaults_to_active(self):
        match = Match.objects.create(user=self.user, company=self.company, initiated_by=Match.INITIATED_BY_USER)

        self.assertEqual(match.status, Match.STATUS_ACTIVE)
        self.assertTrue(match.is_active)
        self.assertIsNotNone(match.matched_at)

    def test_one_match_per_user_company_pair(self):
        Match.objects.create(user=self.user, company=self.company, initiated_by=Match.INITIATED_BY_USER)

        with self.assertRaises(IntegrityError), transaction.atomic():
            Match.objects.create(
                user=self.user,
                company=self.company,
                initiated_by=Match.INITIATED_BY_COMPANY,
                job_post=make_job_post(self.company),
            )

    def test_one_chat_per_match(self):
        match = Match.objects.create(user=self.user, company=self.company, initiated_by=Match.INITIATED_BY_USER)
        Chat.objects.create(match=match, user=self.user, company=self.company)

        with self.assertRaises(IntegrityError), transaction.atomic():
            Chat.objects.create(match=match, user=self.user, company=self.company)

    def test_chat_defaults(self):
        match = Match.objects.create(user=self.user, company=self.company, initiated_by=Match.INITIATED_BY_USER)
        chat = Chat.objects.create(match=match, user=self.user, company=self.company)

        self.assertTrue(chat.is_active)
        self.assertEqual(chat.user_unread_count, 0)
        self.assertEqual(chat.company_unread_count, 0)
        self.assertEqual(match.chat, chat)

    def test_one_company_like_per_pair(self):
        CompanyLike.objects.create(company=self.company, user=self.user)

        with self.assertRaises(IntegrityError), transaction.atomic():
            CompanyLike.objects.create(company=self.company, user=self.user, note="again")
