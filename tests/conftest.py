import pytest

from mceval.builtin.env_builtin import global_environment
from mceval.evaluation.evaluator import evaluate
from mceval.types.symbol import Symbol


def to_form(obj):
    """Build an expression tree from nested lists, reading strings as symbols."""
    if isinstance(obj, str):
        return Symbol(obj)
    if isinstance(obj, list):
        return [to_form(item) for item in obj]
    return obj


@pytest.fixture
def env():
    """Fresh global environment: list, arithmetic and boolean frames."""
    return global_environment()


@pytest.fixture
def run(env):
    """Evaluate each form in turn in the shared `env`; return the last value."""
    def _run(*forms):
        result = None
        for form in forms:
            result = evaluate(to_form(form), env)
        return result
    return _run
