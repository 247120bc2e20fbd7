"""Enumerated option values shared by learner and evaluation runners."""

from enum import Enum


class Task(Enum):
    CLASSIFICATION = "c"
    REGRESSION = "r"


class EvalMetric(Enum):
    AUC = "a"
    ERROR = "c"
    RMSE = "r"
