from taquin.engine.benchmark.benchmark import MethodRun, compare, run_method

__all__ = ["MethodRun", "compare", "run_method"]
