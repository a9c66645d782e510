"""Task Dates — find natural-language dates in task text, shorthands included."""

from .extractor import DateExtractor, ExtractorConfig, parse_natural_date
from .shorthands import SHORTHANDS, build_table, expand
from .remap import remap
from .presentation import format_date, format_task, highlight_segments, relative_label, task_line
from .config import create_extractor, load_config, load_from_yaml
from .types import DateMatch, HighlightSegment, ParsedDate, ParseResult, RewriteRecord

__all__ = [
    "DateExtractor", "ExtractorConfig", "parse_natural_date",
    "SHORTHANDS", "build_table", "expand",
    "remap",
    "format_date", "format_task", "highlight_segments", "relative_label", "task_line",
    "create_extractor", "load_config", "load_from_yaml",
    "DateMatch", "HighlightSegment", "ParsedDate", "ParseResult", "RewriteRecord",
]
__version__ = "0.1.0"
