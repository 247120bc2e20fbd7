"""
@meta
name: cmdline_learner_options
type: options
domain: cmdline
responsibility:
  - Declare command-line options shared by learner runners
  - Compose specialized learner options from the common base
inputs:
  - Command-line tokens (via the binder)
outputs:
  - Populated learner options entities
tags:
  - options
  - cmdline
  - training
lifecycle:
  status: active
"""

"""Options entities for learner runners."""

from dataclasses import dataclass
from typing import Optional

from cmdline.fields import argument
from cmdline.options.tasks import Task


@dataclass
class LearnerOptions:
    """Training data, output model and verbosity options common to all learners."""

    attribute_path: Optional[str] = argument("-r", "attribute file path")
    train_path: Optional[str] = argument("-t", "train set path", required=True)
    output_model_path: Optional[str] = argument("-o", "output model path", default="model.out")
    verbose: bool = argument("-V", "verbose output", default=True)


@dataclass
class LearnerWithTaskOptions(LearnerOptions):
    task: Task = argument(
        "-g",
        "task between classification (c) and regression (r)",
        default=Task.REGRESSION,
    )


@dataclass
class HoldoutValidatedLearnerOptions(LearnerOptions):
    """Learner options for runners that monitor a held-out validation set."""

    valid_path: Optional[str] = argument("-v", "valid set path", required=True)
    metric: Optional[str] = argument("-e", "evaluation metric (default: default metric of task)")
    convergence_criteria: str = argument("-S", "convergence criteria", default="-1")


@dataclass
class HoldoutValidatedLearnerWithTaskOptions(HoldoutValidatedLearnerOptions):
    task: Task = argument(
        "-g",
        "task between classification (c) and regression (r)",
        default=Task.REGRESSION,
    )


@dataclass
class BoostingLearnerOptions(LearnerOptions):
    max_num_leaves: int = argument("-c", "max number of leaves", default=100)
    max_num_iters: Optional[int] = argument("-m", "maximum number of iterations", required=True)
    seed: int = argument("-s", "seed of the random number generator", default=0)
    learning_rate: float = argument("-l", "learning rate", default=0.01)
