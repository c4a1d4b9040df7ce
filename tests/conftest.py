"""Shared fixtures for the meeting_notes tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from meeting_notes.config import Settings
from meeting_notes.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        summary_delay_scale=0.0,
        email_service="outbox",
        outbox_dir=tmp_path / "outbox",
        from_email="bot@example.com",
        smtp_user="",
        smtp_pass="",
        resend_api_key="",
    )


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))


@pytest.fixture
def sample_transcript() -> str:
    return "\n".join(
        [
            "Alice: shipped the login page",
            "Bob: fixed the flaky test",
            "Carol: reviewed the budget",
            "Dan: nothing new",
            "Eve: on call this week",
            "Frank: this line is past the excerpt",
        ]
    )
