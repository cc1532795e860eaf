import uuid

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from matching.models import CompanyLike, JobPost, Like, Match
from matching.tests.helpers import make_company, make_job_post, make_user, make_video


class LikeViewsTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = make_user(username="anna")
        self.client.force_authenticate(user=self.user)
        self.company = make_company()
        self.job = make_job_post(self.company)
        self.video = make_video(self.company, job_post=self.job)

    def test_like_company_returns_flags(self):
        url = reverse("like_company", args=[self.company.id])

        response = self.client.post(url, {"source": "feed"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"liked": True, "matched": False})
        self.assertEqual(Like.objects.get(user=self.user).source, "feed")

    def test_like_company_without_body(self):
        response = self.client.post(reverse("like_company", args=[self.company.id]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(Like.objects.get(user=self.user).source, "")

    def test_duplicate_like_returns_409(self):
        url = reverse("like_job", args=[self.job.id])
        self.client.post(url, format="json")

        response = self.client.post(url, format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["code"], "conflict")
        self.assertEqual(JobPost.objects.get(pk=self.job.pk).like_count, 1)

    def test_like_unknown_job_returns_404(self):
        response = self.client.post(reverse("like_job", args=[uuid.uuid4()]), format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_overlong_source_is_rejected(self):
        response = self.client.post(
            reverse("like_company", args=[self.company.id]), {"source": "x" * 51}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Like.objects.exists())

    def test_reciprocated_job_like_reports_match(self):
        CompanyLike.objects.create(company=self.company, user=self.user)

        response = self.client.post(reverse("like_job", args=[self.job.id]), format="json")

        self.assertEqual(response.data, {"liked": True, "matched": True})
        self.assertEqual(Match.objects.get(user=self.user).job_post_id, self.job.id)

    def test_like_and_unlike_video(self):
        url = reverse("like_video", args=[self.video.id])

        liked = self.client.post(url, format="json")
        unliked = self.client.delete(url)

        self.assertEqual(liked.data, {"liked": True})
        self.assertEqual(unliked.data, {"unliked": True})
        self.assertFalse(Like.objects.exists())

    def test_unlike_without_like_returns_404(self):
        response = self.client.delete(reverse("like_company", args=[self.company.id]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_liked_jobs_lists_job_with_company(self):
        self.client.post(reverse("like_job", args=[self.job.id]), format="json")
        self.client.post(reverse("like_company", args=[self.company.id]), format="json")

        response = self.client.get(reverse("liked_jobs"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        entry = response.data[0]
        self.assertFalse(entry["is_match"])
        self.assertEqual(entry["job_post"]["title"], self.job.title)
        self.assertEqual(entry["job_post"]["company"]["name"], self.company.name)

    def test_all_likes_lists_every_target_type(self):
        self.client.post(reverse("like_company", args=[self.company.id]), format="json")
        self.client.post(reverse("like_job", args=[self.job.id]), format="json")
        self.client.post(reverse("like_video", args=[self.video.id]), format="json")

        response = self.client.get(reverse("all_likes"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            sorted(item["target_type"] for item in response.data),
            ["company", "job_post", "video"],
        )

    def test_requires_authentication(self):
        anonymous = APIClient()

        response = anonymous.post(reverse("like_company", args=[self.company.id]), format="json")

        self.assertIn(response.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))
        self.assertFalse(Like.objects.exists())
