from unittest.mock import patch

from django.db import IntegrityError
from django.test import TestCase

from matching.db_accessor import DB_Accessor
from matching.exceptions import Conflict
from matching.models import CompanyLike
from matching.tests.helpers import make_company, make_user


class DBAccessorTestCase(TestCase):
    def setUp(self):
        self.accessor = DB_Accessor(CompanyLike)
        self.company = make_company()
        self.user = make_user()
        self.key = {"company_id": self.company.id, "user_id": self.user.id}

    def test_insert_unique_creates_row(self):
        row = self.accessor.insert_unique(self.key, "taken", note="hello")

        self.assertEqual(row.note, "hello")
        self.assertEqual(self.accessor.find(**self.key), row)

    def test_insert_unique_raises_conflict_for_existing_key(self):
        self.accessor.insert_unique(self.key, "taken")

        with self.assertRaises(Conflict) as ctx:
            self.accessor.insert_unique(self.key, "taken")
        self.assertEqual(str(ctx.exception.detail), "taken")

    def test_insert_race_reported_as_conflict(self):
        self.accessor.insert_unique(self.key, "taken")

        with patch.object(self.accessor, "exists", side_effect=[False, True]):
            with self.assertRaises(Conflict):
                self.accessor.insert_unique(self.key, "taken")
        self.assertEqual(CompanyLike.objects.count(), 1)

    def test_unrelated_integrity_error_propagates(self):
        with patch.object(CompanyLike.objects, "create", side_effect=IntegrityError("fk")):
            with self.assertRaises(IntegrityError):
                self.accessor.insert_unique(self.key, "taken")

    def test_delete_returns_count(self):
        self.accessor.insert_unique(self.key, "taken")

        self.assertEqual(self.accessor.delete(**self.key), 1)
        self.assertEqual(self.accessor.delete(**self.key), 0)
