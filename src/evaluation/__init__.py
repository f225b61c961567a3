"""
Evaluation module for minefield agents.
"""
from .evaluator import Evaluator

__all__ = ["Evaluator"]
