"""Evaluation layer: per-function and per-S-box analysis with
serializable results and an aggregating report.
"""

from .function_analysis import FunctionAnalysisResult, analyze_function, covering_bound
from .sbox_analysis import SBoxAnalysisResult, analyze_sbox, analyze_all_sboxes
from .report import EvaluationReport

__all__ = [
    "FunctionAnalysisResult",
    "analyze_function",
    "covering_bound",
    "SBoxAnalysisResult",
    "analyze_sbox",
    "analyze_all_sboxes",
    "EvaluationReport",
]
