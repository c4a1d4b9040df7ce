"""HTTP tests for /summarize, /share, /transcripts and /catalog."""

from __future__ import annotations

from unittest.mock import patch

from meeting_notes.errors import EmailDeliveryError


class TestSummarize:
    def test_returns_summary(self, client, sample_transcript):
        r = client.post(
            "/summarize",
            json={"transcript": sample_transcript, "prompt": "Summarize", "model": "groq", "template": "standup"},
        )
        assert r.status_code == 200
        summary = r.json()["summary"]
        assert summary.startswith("**Meeting Summary** (Generated with groq)")
        assert "**Yesterday's Accomplishments:**\n• Alice: shipped the login page" in summary
        assert "Frank" not in summary

    def test_requires_transcript_and_prompt(self, client):
        r = client.post("/summarize", json={"transcript": "", "prompt": "p"})
        assert r.status_code == 400
        assert r.json() == {"error": "Transcript and prompt are required"}
        assert client.post("/summarize", json={"transcript": "t"}).status_code == 400

    def test_unexpected_failure_is_500(self, client):
        with patch("meeting_notes.routers.summarize.summarize", side_effect=RuntimeError("boom")):
            r = client.post("/summarize", json={"transcript": "t", "prompt": "p"})
        assert r.status_code == 500
        assert r.json() == {"error": "Failed to generate summary"}

    def test_malformed_body_is_400(self, client):
        r = client.post("/summarize", content=b"not json", headers={"Content-Type": "application/json"})
        assert r.status_code == 400
        assert "error" in r.json()


class TestShare:
    def test_sends_email(self, client, settings):
        r = client.post(
            "/share",
            json={"recipients": ["a@b.co", "c@d.io"], "format": "markdown", "summary": "**S**"},
        )
        assert r.status_code == 200
        assert r.json() == {
            "success": True,
            "message": "Email sent successfully to 2 recipient(s)",
            "recipients": 2,
            "format": "markdown",
        }
        assert len(list(settings.outbox_dir.glob("*.eml"))) == 1

    def test_unknown_format_is_echoed(self, client, settings):
        r = client.post("/share", json={"recipients": ["a@b.co"], "format": "rich", "summary": "s"})
        assert r.status_code == 200
        assert r.json()["format"] == "rich"
        assert len(list(settings.outbox_dir.glob("*.eml"))) == 1

    def test_recipients_checked_before_format(self, client):
        r = client.post("/share", json={"recipients": [], "format": "rich", "summary": "s"})
        assert r.status_code == 400
        assert r.json() == {"error": "At least one recipient is required"}

    def test_empty_recipients(self, client):
        r = client.post("/share", json={"recipients": [], "summary": "s"})
        assert r.status_code == 400
        assert r.json()["error"] == "At least one recipient is required"

    def test_missing_body_and_summary(self, client):
        r = client.post("/share", json={"recipients": ["a@b.co"]})
        assert r.status_code == 400
        assert r.json()["error"] == "Summary or message body is required"

    def test_invalid_addresses_listed(self, client):
        r = client.post("/share", json={"recipients": ["a@b.co", "nope", "x@y"], "summary": "s"})
        assert r.status_code == 400
        assert r.json()["error"] == "Invalid email addresses: nope, x@y"

    def test_transport_failure_is_500(self, client):
        with patch("meeting_notes.services.emailer.send_email", side_effect=EmailDeliveryError("SMTP down")):
            r = client.post("/share", json={"recipients": ["a@b.co"], "summary": "s"})
        assert r.status_code == 500
        assert r.json() == {"error": "SMTP down"}

    def test_compose(self, client):
        r = client.post("/share/compose", json={"template": "casual", "summary": "S", "date": "2/3/2026"})
        assert r.status_code == 200
        assert r.json() == {
            "template": "casual",
            "subject": "Meeting Notes from 2/3/2026",
            "body": "Hey!\n\nHere are the notes from our meeting:\n\nS\n\nThanks!",
        }

    def test_compose_unknown_template(self, client):
        r = client.post("/share/compose", json={"template": "haiku", "summary": "S"})
        assert r.status_code == 400


class TestTranscripts:
    def test_upload_text(self, client):
        r = client.post("/transcripts/upload", files={"file": ("call.txt", b"Alice: hi\nBob: hey", "text/plain")})
        assert r.status_code == 200
        body = r.json()
        assert body["transcript"] == "Alice: hi\nBob: hey"
        assert body["parsed"] is True
        assert body["filename"] == "call.txt"

    def test_upload_pdf_placeholder(self, client):
        r = client.post("/transcripts/upload", files={"file": ("m.pdf", b"%PDF", "application/pdf")})
        assert r.status_code == 200
        assert r.json()["parsed"] is False

    def test_upload_rejected(self, client):
        r = client.post("/transcripts/upload", files={"file": ("a.png", b"\x89PNG", "image/png")})
        assert r.status_code == 400
        assert r.json()["error"].startswith("Please upload a valid document file")

    def test_upload_too_large(self, client, settings):
        settings.max_upload_mb = 1
        r = client.post("/transcripts/upload", files={"file": ("a.txt", b"x" * (1024 * 1024 + 1), "text/plain")})
        assert r.status_code == 400


class TestCatalog:
    def test_templates(self, client):
        keys = [t["key"] for t in client.get("/catalog/templates").json()]
        assert keys == ["general", "standup", "project", "business", "custom"]

    def test_models(self, client):
        models = {m["key"]: m for m in client.get("/catalog/models").json()}
        assert models["groq"]["label"] == "Groq"
        assert models["groq"]["delay_seconds"] == 0.5

    def test_email_templates_and_formats(self, client):
        assert [t["key"] for t in client.get("/catalog/email-templates").json()] == ["professional", "casual", "detailed"]
        assert [f["key"] for f in client.get("/catalog/formats").json()] == ["html", "markdown", "plain"]

    def test_healthz(self, client):
        assert client.get("/healthz").json() == {"ok": True}

    def test_unknown_route_uses_error_shape(self, client):
        r = client.get("/nope")
        assert r.status_code == 404
        assert r.json() == {"error": "Not Found"}
