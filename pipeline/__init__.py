from .evaluator import ResultsEvaluator
from .intake import IntakeError, collect_files, describe_file
from .renderer import format_size, render_text_report

__all__ = ["ResultsEvaluator", "IntakeError", "collect_files", "describe_file", "format_size", "render_text_report"]
