from unittest.mock import patch

from django.test import TestCase
from django.urls import reverse
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.test import APIClient, APIRequestFactory

from matching import firebase_admin_client
from matching.authentication import FirebaseAuthentication
from matching.tests.helpers import make_user


class FirebaseAuthenticationTestCase(TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()
        self.backend = FirebaseAuthentication()
        self.user = make_user(username="firebase-uid-1")

    def _request(self, token="valid-token"):
        return self.factory.get("/api/matches/", HTTP_AUTHORIZATION=f"Bearer {token}")

    def test_no_header_is_anonymous(self):
        self.assertIsNone(self.backend.authenticate(self.factory.get("/api/matches/")))

    def test_other_scheme_is_ignored(self):
        request = self.factory.get("/api/matches/", HTTP_AUTHORIZATION="Basic abc")
        self.assertIsNone(self.backend.authenticate(request))

    @patch("matching.authentication.get_app", return_value=None)
    def test_unconfigured_firebase_fails(self, _get_app):
        with self.assertRaises(AuthenticationFailed):
            self.backend.authenticate(self._request())

    @patch("matching.authentication.auth.verify_id_token", return_value={"uid": "firebase-uid-1"})
    @patch("matching.authentication.get_app", return_value=object())
    def test_valid_token_resolves_user(self, _get_app, _verify):
        user, decoded = self.backend.authenticate(self._request())

        self.assertEqual(user, self.user)
        self.assertEqual(decoded["uid"], "firebase-uid-1")

    @patch("matching.authentication.auth.verify_id_token", side_effect=ValueError("bad token"))
    @patch("matching.authentication.get_app", return_value=object())
    def test_invalid_token_fails(self, _get_app, _verify):
        with self.assertRaises(AuthenticationFailed):
            self.backend.authenticate(self._request("garbage"))

    @patch("matching.authentication.auth.verify_id_token", return_value={"uid": "unknown-uid"})
    @patch("matching.authentication.get_app", return_value=object())
    def test_unknown_uid_fails(self, _get_app, _verify):
        with self.assertRaises(AuthenticationFailed):
            self.backend.authenticate(self._request())

    @patch("matching.authentication.auth.verify_id_token", return_value={"uid": "firebase-uid-1"})
    @patch("matching.authentication.get_app", return_value=object())
    def test_inactive_user_fails(self, _get_app, _verify):
        self.user.is_active = False
        self.user.save()

        with self.assertRaises(AuthenticationFailed):
            self.backend.authenticate(self._request())

    @patch("matching.authentication.auth.verify_id_token", return_value={"uid": "firebase-uid-1"})
    @patch("matching.authentication.get_app", return_value=object())
    def test_bearer_token_authenticates_api_request(self, _get_app, _verify):
        response = APIClient().get(reverse("user_matches"), HTTP_AUTHORIZATION="Bearer valid-token")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data, [])



class FirebaseAppBootstrapTestCase(TestCase):
    def test_app_is_not_initialised_during_tests(self):
        self.assertTrue(firebase_admin_client._is_running_tests())
        self.assertTrue(firebase_admin_client._should_skip_app_init())

    @patch.dict("os.environ", {"FIREBASE_ALLOW_TEST_APP": "1", "FIREBASE_SERVICE_ACCOUNT_FILE": "/nonexistent.json"})
    @patch.object(firebase_admin_client, "_app", None)
    def test_missing_credentials_disable_token_auth(self):
        with self.assertLogs("matching.firebase_admin_client", level="WARNING"):
            self.assertIsNone(firebase_admin_client.get_app())
