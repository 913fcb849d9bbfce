from kappa.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
