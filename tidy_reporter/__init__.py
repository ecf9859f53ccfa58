from .loader import ReportInputError, load_report
from .models import NormalizedReport, Summary, TestRecord
from .normalizer import normalize, normalize_report, pass_rate, summarize
from .renderer import Renderer, TemplateError, TemplateMissingError, render

__all__ = [
    "ReportInputError", "load_report",
    "NormalizedReport", "Summary", "TestRecord",
    "normalize", "normalize_report", "pass_rate", "summarize",
    "Renderer", "TemplateError", "TemplateMissingError", "render",
]
