# meeting_notes/config.py
import os
from functools import lru_cache
from pathlib import Path
from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()  # EMAIL_USER / EMAIL_PASS etc. may live in .env

DATA_DIR = Path(__file__).resolve().parents[1] / "data"

class Settings(BaseModel):
    app_name: str = os.getenv("APP_NAME", "Meeting Notes Assistant")
    env: str = os.getenv("ENV", "dev")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Comma-separated list: "http://localhost:3000,https://notes.example.com"
    cors_origins_csv: str = os.getenv("CORS_ORIGINS", "http://localhost:3000")
    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins_csv.split(",") if o.strip()]

    # Summaries
    summary_delay_scale: float = float(os.getenv("SUMMARY_DELAY_SCALE", "1.0"))

    # Editor
    editor_checkpoint_delta: int = int(os.getenv("EDITOR_CHECKPOINT_DELTA", "10"))
    editor_max_sessions: int = int(os.getenv("EDITOR_MAX_SESSIONS", "500"))
    editor_idle_seconds: float = float(os.getenv("EDITOR_IDLE_SECONDS", "3600"))  # 0 disables expiry

    # Uploads
    max_upload_mb: int = int(os.getenv("MAX_UPLOAD_MB", "10"))

    # Email
    email_service: str = os.getenv("EMAIL_SERVICE", "auto").lower()  # auto|resend|smtp|outbox
    resend_api_key: str = os.getenv("RESEND_API_KEY", "")
    smtp_host: str = os.getenv("SMTP_HOST", "smtp.gmail.com")
    smtp_port: int = int(os.getenv("SMTP_PORT", "587"))
    smtp_user: str = os.getenv("EMAIL_USER") or os.getenv("SMTP_USER", "")
    smtp_pass: str = os.getenv("EMAIL_PASS") or os.getenv("SMTP_PASS", "")
    from_email: str = os.getenv("EMAIL_FROM") or os.getenv("EMAIL_USER", "")
    from_name: str = os.getenv("EMAIL_FROM_NAME", "Meeting Bot")
    outbox_dir: Path = Path(os.getenv("OUTBOX_DIR", str(DATA_DIR / "outbox" / "email")))

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024

@lru_cache
def get_settings() -> Settings:
    return Settings()
