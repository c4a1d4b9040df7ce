# meeting_notes/editor/stats.py
import re
from dataclasses import dataclass, asdict

_SECTION_RE = re.compile(r"\*\*.*?\*\*")
_ITEM_RE = re.compile(r"•.*?(?=\n|\Z)")

def word_count(text: str) -> int:
    return len((text or "").strip().split())

def char_count(text: str) -> int:
    return len(text or "")

def line_count(text: str) -> int:
    """Non-empty lines only."""
    return sum(1 for line in (text or "").split("\n") if line)

def section_count(text: str) -> int:
    return len(_SECTION_RE.findall(text or ""))

def action_item_count(text: str) -> int:
    return len(_ITEM_RE.findall(text or ""))

@dataclass(frozen=True)
class SummaryStats:
    words: int
    characters: int
    lines: int
    sections: int
    action_items: int

    def to_dict(self) -> dict:
        return asdict(self)

def summary_stats(buffer: str, summary: str | None = None) -> SummaryStats:
    """
    Word and character counts follow the live buffer; lines, sections and
    action items follow the published summary (the buffer if none is given).
    """
    published = buffer if summary is None else summary
    return SummaryStats(
        words=word_count(buffer),
        characters=char_count(buffer),
        lines=line_count(published),
        sections=section_count(published),
        action_items=action_item_count(published),
    )
