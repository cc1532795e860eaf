from django.db import IntegrityError, transaction
from django.test import TestCase

from matching.models import CompanyMember
from matching.tests.helpers import make_company, make_staff, make_user


class UserModelTestCase(TestCase):
    def test_email_must_be_unique(self):
        make_user(username="anna", email="anna@example.org")

        with self.assertRaises(IntegrityError), transaction.atomic():
            make_user(username="anna2", email="anna@example.org")

    def test_full_name(self):
        user = make_user(first_name="Anna", last_name="Berg")
        self.assertEqual(user.full_name(), "Anna Berg")

    def test_avatar_url_falls_back_to_gravatar(self):
        user = make_user()
        self.assertIn("gravatar.com", user.avatar_url)

    def test_profile_lists_default_empty(self):
        user = make_user()
        self.assertEqual(user.interests, [])
        self.assertEqual(user.strengths, [])
        self.assertEqual(user.preferred_professions, [])

    def test_company_membership_for_staff(self):
        company = make_company()
        staff = make_staff(company, role=CompanyMember.ROLE_ADMIN)

        membership = staff.company_membership()

        self.assertEqual(membership.company, company)
        self.assertEqual(membership.role, CompanyMember.ROLE_ADMIN)

    def test_company_membership_for_person_is_none(self):
        self.assertIsNone(make_user().company_membership())
