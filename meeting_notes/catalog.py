# meeting_notes/catalog.py
"""
Static configuration tables for the UI: summary templates, mock AI models,
email templates and email formats. Every table is shaped {key: {label, ...}}.
"""
import enum

# === Summary templates ===

DEFAULT_TEMPLATE = "general"

SUMMARY_TEMPLATES = {
    "general": {
        "label": "General Meeting",
        "content": "Please summarize the key points, action items, and decisions from this meeting.",
    },
    "standup": {
        "label": "Daily Standup",
        "content": (
            "Summarize this standup meeting focusing on: 1) What was accomplished yesterday, "
            "2) What's planned for today, 3) Any blockers or impediments mentioned."
        ),
    },
    "project": {
        "label": "Project Review",
        "content": (
            "Create a project review summary including: project status, milestones achieved, "
            "upcoming deadlines, risks identified, and next steps."
        ),
    },
    "business": {
        "label": "Business Meeting",
        "content": (
            "Summarize this business meeting with focus on: strategic decisions, financial discussions, "
            "market insights, and action items with owners and deadlines."
        ),
    },
    "custom": {
        "label": "Custom",
        "content": "",  # user supplies the prompt
    },
}

# === Mock AI models ===

DEFAULT_MODEL = "gpt-4"

AI_MODELS = {
    "gpt-4": {
        "label": "GPT-4",
        "description": "Most capable, best for complex analysis",
        "delay_seconds": 2.5,
    },
    "gpt-3.5": {
        "label": "GPT-3.5 Turbo",
        "description": "Fast and efficient",
        "delay_seconds": 1.5,
    },
    "claude": {
        "label": "Claude",
        "description": "Great for detailed summaries",
        "delay_seconds": 2.5,
    },
    "groq": {
        "label": "Groq",
        "description": "Ultra-fast processing",
        "delay_seconds": 0.5,
    },
}

# Models missing from the table still get a response, just the slow one
FALLBACK_DELAY_SECONDS = 2.5

# === Email ===

class EmailFormat(str, enum.Enum):
    HTML = "html"
    MARKDOWN = "markdown"
    PLAIN = "plain"

EMAIL_FORMATS = {
    EmailFormat.HTML: {"label": "HTML (Rich Text)"},
    EmailFormat.MARKDOWN: {"label": "Markdown"},
    EmailFormat.PLAIN: {"label": "Plain Text"},
}

DEFAULT_EMAIL_TEMPLATE = "professional"

EMAIL_TEMPLATES = {
    "professional": {
        "label": "Professional",
        "subject": "Meeting Summary - {date}",
        "content": "Hi there,\n\nPlease find the meeting summary below:\n\n{summary}\n\nBest regards",
    },
    "casual": {
        "label": "Casual",
        "subject": "Meeting Notes from {date}",
        "content": "Hey!\n\nHere are the notes from our meeting:\n\n{summary}\n\nThanks!",
    },
    "detailed": {
        "label": "Detailed Report",
        "subject": "Detailed Meeting Report - {date}",
        "content": (
            "Dear Team,\n\n"
            "I hope this email finds you well. Please find attached the comprehensive summary "
            "of our meeting held on {date}.\n\n"
            "{summary}\n\n"
            "Please review the action items and let me know if you have any questions or concerns.\n\n"
            "Best regards"
        ),
    },
}

def model_delay(model: str) -> float:
    return AI_MODELS.get(model, {}).get("delay_seconds", FALLBACK_DELAY_SECONDS)

def as_listing(table: dict) -> list[dict]:
    """Flatten a {key: {...}} table into [{"key": key, ...}] for JSON responses."""
    out = []
    for key, entry in table.items():
        k = key.value if isinstance(key, enum.Enum) else key
        out.append({"key": k, **entry})
    return out
