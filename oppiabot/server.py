"""
Flask Server Entrypoint for Oppiabot Webhooks.
"""

import hashlib
import hmac
import os
import sys

from flask import Flask, jsonify, request

from .auth import get_github_client
from .config import Settings, read_port
from .dispatcher import Dispatcher
from .github_api import IssuesClient

SIGNATURE_HEADER = "X-Hub-Signature-256"
EVENT_HEADER = "X-GitHub-Event"


def verify_signature(secret: str, body: bytes, signature_header: str | None) -> bool:
    """Check GitHub's sha256 HMAC of the raw request body."""
    if not signature_header or not signature_header.startswith("sha256="):
        return False
    expected = "sha256=" + hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()
    return hmac.compare_digest(expected, signature_header)


def create_app(settings: Settings | None = None, client_factory=None, dispatcher=None) -> Flask:
    """
    Build the webhook app.

    `client_factory(installation_id)` returns the issues client used by the
    checks; by default it authenticates as the App installation.
    """
    settings = settings or Settings.from_env()
    dispatcher = dispatcher or Dispatcher()

    if client_factory is None:

        def client_factory(installation_id):
            gh = get_github_client(
                app_id=settings.app_id,
                private_key=settings.private_key,
                token=settings.token,
                installation_id=installation_id,
            )
            return IssuesClient(gh)

    if not settings.webhook_secret:
        print("  [WARN] No webhook secret configured; deliveries are not verified.")

    app = Flask(__name__)

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/webhook", methods=["POST"])
    def webhook():
        """
        Handle GitHub Webhooks.
        """
        body = request.get_data()
        if settings.webhook_secret and not verify_signature(
            settings.webhook_secret, body, request.headers.get(SIGNATURE_HEADER)
        ):
            print("  [WARN] Rejected delivery with a bad signature.")
            return jsonify({"status": "error", "error": "bad signature"}), 401

        event = request.headers.get(EVENT_HEADER, "ping")
        print(f"Received event: {event}")
        if event == "ping":
            return jsonify({"status": "pong"})

        payload = request.get_json(force=True, silent=True)
        if not isinstance(payload, dict):
            return jsonify({"status": "error", "error": "invalid payload"}), 400

        if not dispatcher.wants(event, payload):
            print(f"  [SKIP] Ignoring '{event}' event (action: {payload.get('action')}).")
            return jsonify({"status": "ok", "checks": 0})

        installation_id = (payload.get("installation") or {}).get("id")
        try:
            client = client_factory(installation_id)
        except ValueError as e:
            print(f"Authentication Error: {e}")
            return jsonify({"status": "error", "error": "authentication failed"}), 500

        completed = dispatcher.dispatch(event, payload, client)
        return jsonify({"status": "ok", "checks": completed})

    return app


def main():
    settings = Settings.from_env()
    try:
        port = read_port(os.getenv("PORT"))
    except ValueError as e:
        print(f"Configuration Error: {e}")
        sys.exit(1)
    create_app(settings).run(port=port)


if __name__ == "__main__":
    main()
