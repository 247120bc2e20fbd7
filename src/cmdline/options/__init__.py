"""Declared options entities of the learner, prediction and evaluation runners."""

from .tasks import EvalMetric, Task
from .learner import (
    BoostingLearnerOptions,
    HoldoutValidatedLearnerOptions,
    HoldoutValidatedLearnerWithTaskOptions,
    LearnerOptions,
    LearnerWithTaskOptions,
)
from .evaluation import EvaluatorOptions, PredictorOptions

__all__ = [
    "BoostingLearnerOptions",
    "EvalMetric",
    "EvaluatorOptions",
    "HoldoutValidatedLearnerOptions",
    "HoldoutValidatedLearnerWithTaskOptions",
    "LearnerOptions",
    "LearnerWithTaskOptions",
    "PredictorOptions",
    "Task",
]
