# meeting_notes/services/summarizer.py
import asyncio
import logging

from ..catalog import model_delay

logger = logging.getLogger(__name__)

PREVIEW_LINES = 5

# Per-template body; "{base}" is the bulleted transcript excerpt
TEMPLATE_BODIES = {
    "standup": (
        "**Yesterday's Accomplishments:**\n• {base}\n\n"
        "**Today's Plans:**\n• Continue with ongoing tasks\n• Address any blockers\n\n"
        "**Blockers/Impediments:**\n• None reported\n"
    ),
    "project": (
        "**Project Status:**\n• {base}\n\n"
        "**Milestones Achieved:**\n• Key deliverables completed\n\n"
        "**Upcoming Deadlines:**\n• Next milestone in 2 weeks\n\n"
        "**Risks Identified:**\n• Monitor resource allocation\n\n"
        "**Next Steps:**\n• Continue execution as planned\n"
    ),
    "business": (
        "**Strategic Decisions:**\n• {base}\n\n"
        "**Financial Discussions:**\n• Budget allocation reviewed\n\n"
        "**Market Insights:**\n• Current trends analyzed\n\n"
        "**Action Items:**\n• Follow up on key initiatives\n• Schedule next review meeting\n"
    ),
}

GENERAL_BODY = (
    "**Key Points:**\n• {base}\n\n"
    "**Action Items:**\n• Follow up on discussed topics\n• Schedule next meeting\n"
    "• Review and implement suggestions\n\n"
    "**Decisions Made:**\n• Agreed to move forward with proposed plan\n"
    "• Assigned responsibilities to team members\n\n"
    "**Next Steps:**\n• Continue monitoring progress\n• Prepare for next phase\n"
)

def transcript_excerpt(transcript: str, n: int = PREVIEW_LINES) -> str:
    return "\n• ".join(transcript.split("\n")[:n])

def build_summary(transcript: str, template: str, model: str) -> str:
    """Fill the template's fixed layout with the first few transcript lines."""
    body = TEMPLATE_BODIES.get(template, GENERAL_BODY)
    summary = f"**Meeting Summary** (Generated with {model})\n\n"
    summary += body.replace("{base}", transcript_excerpt(transcript))
    summary += f"\n*Generated using {model} with {template} template*"
    return summary

async def summarize(transcript: str, prompt: str, model: str, template: str, *, delay_scale: float = 1.0) -> str:
    # prompt only steers a real model; the mock layout ignores it
    text = build_summary(transcript, template, model)
    delay = model_delay(model) * delay_scale
    logger.info(f"Summarize: model={model} template={template} lines={len(transcript.splitlines())} delay={delay:.2f}s")
    if delay > 0:
        await asyncio.sleep(delay)
    return text
