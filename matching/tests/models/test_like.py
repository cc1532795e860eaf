from django.db import IntegrityError, transaction
from django.test import TestCase

from matching.models import Like
from matching.tests.helpers import make_company, make_job_post, make_user, make_video


class LikeModelTestCase(TestCase):
    def setUp(self):
        self.user = make_user(username="usera")
        self.company = make_company()
        self.job = make_job_post(self.company)
        self.video = make_video(self.company)

    def test_user_can_like_each_target_type(self):
        Like.objects.create(user=self.user, target_type=Like.TARGET_COMPANY, company=self.company)
        Like.objects.create(user=self.user, target_type=Like.TARGET_JOB_POST, job_post=self.job)
        Like.objects.create(user=self.user, target_type=Like.TARGET_VIDEO, video=self.video)

        self.assertEqual(Like.objects.filter(user=self.user).count(), 3)

    def test_target_resolves_from_discriminator(self):
        like = Like.objects.create(user=self.user, target_type=Like.TARGET_JOB_POST, job_post=self.job)

        self.assertEqual(like.target, self.job)
        self.assertEqual(like.target_id, self.job.id)

    def test_target_lookup_builds_filter_for_type(self):
        lookup = Like.target_lookup(Like.TARGET_VIDEO, self.video.id)

        self.assertEqual(lookup, {"target_type": "video", "video_id": self.video.id})

    def test_duplicate_company_like_not_allowed(self):
        Like.objects.create(user=self.user, target_type=Like.TARGET_COMPANY, company=self.company)

        with self.assertRaises(IntegrityError), transaction.atomic():
            Like.objects.create(user=self.user, target_type=Like.TARGET_COMPANY, company=self.company)

    def test_duplicate_job_like_not_allowed(self):
        Like.objects.create(user=self.user, target_type=Like.TARGET_JOB_POST, job_post=self.job)

        with self.assertRaises(IntegrityError), transaction.atomic():
            Like.objects.create(user=self.user, target_type=Like.TARGET_JOB_POST, job_post=self.job)

    def test_two_targets_on_one_row_rejected(self):
        with self.assertRaises(IntegrityError), transaction.atomic():
            Like.objects.create(
                user=self.user,
                target_type=Like.TARGET_COMPANY,
                company=self.company,
                job_post=self.job,
            )

    def test_target_must_match_discriminator(self):
        with self.assertRaises(IntegrityError), transaction.atomic():
            Like.objects.create(user=self.user, target_type=Like.TARGET_VIDEO, company=self.company)

    def test_string_representation(self):
        like = Like.objects.create(user=self.user, target_type=Like.TARGET_COMPANY, company=self.company)
        self.assertIn("company:", str(like))
