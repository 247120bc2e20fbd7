"""Options entities for prediction and evaluation runners."""

from dataclasses import dataclass
from typing import Optional

from cmdline.fields import argument
from cmdline.options.tasks import EvalMetric, Task


@dataclass
class PredictorOptions:
    attribute_path: Optional[str] = argument("-r", "attribute file path")
    data_path: Optional[str] = argument("-d", "data set path", required=True)
    model_path: Optional[str] = argument("-m", "model path", required=True)
    prediction_path: Optional[str] = argument("-p", "prediction path")
    residual_path: Optional[str] = argument("-R", "residual path")
    task: Task = argument(
        "-g",
        "task between classification (c) and regression (r)",
        default=Task.REGRESSION,
    )
    output_probability: bool = argument("-P", "output probability", default=False)


@dataclass
class EvaluatorOptions:
    attribute_path: Optional[str] = argument("-r", "attribute file path")
    data_path: Optional[str] = argument("-d", "data set path", required=True)
    model_path: Optional[str] = argument("-m", "model path", required=True)
    metric: EvalMetric = argument("-e", "AUC (a), Error (c), RMSE (r)", default=EvalMetric.RMSE)
