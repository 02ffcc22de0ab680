from calc.evaluation.evaluator import Evaluator, force

__all__ = ["Evaluator", "force"]
