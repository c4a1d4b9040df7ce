from .history import EditHistory
from .session import EditorMode, FORMAT_PRESETS, SummaryEditor
from .stats import SummaryStats, summary_stats

__all__ = ["EditHistory", "EditorMode", "FORMAT_PRESETS", "SummaryEditor", "SummaryStats", "summary_stats"]
