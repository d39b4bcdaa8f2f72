"""Post-processing of executor output."""

from .grouping import group_by
from .metadata import add_metadata, format_timestamp, result_count
from .summary import summarize

__all__ = ["add_metadata", "format_timestamp", "group_by", "result_count", "summarize"]
