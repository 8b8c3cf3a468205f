"""Infrastructure layer - output formatters."""

from .formatters import JsonExporter, LayoutReportFormatter, SectionDiagramFormatter

__all__ = [
    "JsonExporter",
    "LayoutReportFormatter",
    "SectionDiagramFormatter",
]
