"""Evaluation metrics and benchmark runner exports."""

from cleave.evaluation.metrics import ari_sklearn, modularity_score, nmi_sklearn
from cleave.evaluation.runner import run_evaluation

__all__ = ["ari_sklearn", "modularity_score", "nmi_sklearn", "run_evaluation"]
