"""VDF evaluators producing (y, proof, elapsed)."""

from .TrapdoorEvaluator import TrapdoorEvaluator
from .ParallelEvaluator import ParallelEvaluator
from .abstract.ITrapdoorEvaluator import ITrapdoorEvaluator
from .abstract.IParallelEvaluator import IParallelEvaluator

__all__ = [
    "TrapdoorEvaluator",
    "ParallelEvaluator",
    "ITrapdoorEvaluator",
    "IParallelEvaluator",
]
