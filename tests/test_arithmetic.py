import pytest

from mceval.errors import ArgumentTypeError


@pytest.mark.parametrize(
    "form,expected",
    [
        (["+", 1, 2], 3),
        (["-", 10, 3], 7),
        (["-", 3, 10], -7),
        (["*", 4, 5], 20),
        (["+", 1.5, 2], 3.5),
        (["+", ["*", 2, 3], ["-", 10, 4]], 12),
        ([">", 3, 2], True),
        ([">", 2, 3], False),
        ([">=", 2, 2], True),
        (["<", 3, 2], False),
        (["<", 2, 3], True),
        (["<=", 2, 2], True),
        (["<=", 3, 2], False),
        (["==", 2, 2], True),
        (["==", 2, 2.0], True),
        (["==", 2, 3], False),
        (["==", ["list", 1, 2], ["list", 1, 2]], True),
        (["==", ["list", 1, 2], ["list", 1]], False),
        (["==", "nil", "nil"], True),
        (["==", "true", 1], False),
        (["==", "true", "true"], True),
    ],
)
def test_arithmetic_and_comparison(form, expected, run):
    result = run(form)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "form",
    [
        ["+", 1, "true"],
        ["-", "nil", 1],
        ["*", ["list", 1], 2],
        ["<", 1, "false"],
        [">", ["lambda", [], 1], 1],
    ],
)
def test_non_numeric_arguments(form, run):
    with pytest.raises(ArgumentTypeError):
        run(form)
