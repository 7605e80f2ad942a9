import hashlib
import hmac
import json
import unittest
from pathlib import Path
from unittest.mock import MagicMock

from oppiabot.config import Settings
from oppiabot.dispatcher import Dispatcher
from oppiabot.server import create_app, verify_signature

SECRET = "webhook-secret"
PAYLOAD_PATH = Path(__file__).parent / "fixtures" / "pull_request_payload.json"


def sign(body: bytes, secret: str = SECRET) -> str:
    return "sha256=" + hmac.new(secret.encode(), body, hashlib.sha256).hexdigest()


class TestVerifySignature(unittest.TestCase):
    def test_accepts_matching_signature(self):
        self.assertTrue(verify_signature(SECRET, b"{}", sign(b"{}")))

    def test_rejects_tampered_body(self):
        self.assertFalse(verify_signature(SECRET, b'{"a": 1}', sign(b"{}")))

    def test_rejects_missing_or_malformed_header(self):
        self.assertFalse(verify_signature(SECRET, b"{}", None))
        self.assertFalse(verify_signature(SECRET, b"{}", "sha1=abc"))


class TestWebhook(unittest.TestCase):
    def setUp(self):
        self.body = PAYLOAD_PATH.read_bytes()
        self.issues_client = MagicMock()
        self.client_factory = MagicMock(return_value=self.issues_client)
        self.dispatcher = MagicMock()
        self.dispatcher.dispatch.return_value = 1
        app = create_app(
            Settings(webhook_secret=SECRET),
            client_factory=self.client_factory,
            dispatcher=self.dispatcher,
        )
        self.http = app.test_client()

    def post(self, body, event="pull_request", signature=None):
        return self.http.post(
            "/webhook",
            data=body,
            headers={
                "X-GitHub-Event": event,
                "X-Hub-Signature-256": signature or sign(body),
                "Content-Type": "application/json",
            },
        )

    def test_dispatches_pull_request_event(self):
        response = self.post(self.body)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"status": "ok", "checks": 1})
        self.client_factory.assert_called_once_with(2065)
        self.dispatcher.dispatch.assert_called_once_with(
            "pull_request", json.loads(self.body), self.issues_client
        )

    def test_rejects_bad_signature(self):
        response = self.post(self.body, signature=sign(self.body, "wrong-secret"))
        self.assertEqual(response.status_code, 401)
        self.dispatcher.dispatch.assert_not_called()

    def test_ping(self):
        response = self.post(b"{}", event="ping")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"status": "pong"})
        self.dispatcher.dispatch.assert_not_called()

    def test_rejects_non_object_payload(self):
        response = self.post(b"[1, 2, 3]")
        self.assertEqual(response.status_code, 400)
        self.dispatcher.dispatch.assert_not_called()

    def test_authentication_failure(self):
        self.client_factory.side_effect = ValueError("No valid credentials found")
        response = self.post(self.body)
        self.assertEqual(response.status_code, 500)
        self.dispatcher.dispatch.assert_not_called()

    def test_ignored_event_skips_authentication(self):
        """Events no check cares about are acknowledged without an App token request."""
        self.dispatcher.wants.return_value = False
        response = self.post(self.body, event="issues")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"status": "ok", "checks": 0})
        self.client_factory.assert_not_called()
        self.dispatcher.dispatch.assert_not_called()

    def test_ignored_action_survives_auth_failure(self):
        self.client_factory.side_effect = ValueError("No valid credentials found")
        app = create_app(Settings(), client_factory=self.client_factory, dispatcher=Dispatcher([]))
        payload = dict(json.loads(self.body), action="closed")
        response = app.test_client().post(
            "/webhook", json=payload, headers={"X-GitHub-Event": "pull_request"}
        )
        self.assertEqual(response.status_code, 200)
        self.client_factory.assert_not_called()

    def test_unsigned_deliveries_accepted_without_secret(self):
        app = create_app(
            Settings(), client_factory=self.client_factory, dispatcher=self.dispatcher
        )
        response = app.test_client().post(
            "/webhook", data=self.body, headers={"X-GitHub-Event": "pull_request"}
        )
        self.assertEqual(response.status_code, 200)
        self.dispatcher.dispatch.assert_called_once()

    def test_health(self):
        response = self.http.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"status": "ok"})


if __name__ == "__main__":
    unittest.main()
