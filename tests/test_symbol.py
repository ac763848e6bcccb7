import pickle

from mceval.printer import to_lisp
from mceval.types import Symbol


def test_symbols_are_canonical():
    assert Symbol("x") is Symbol("x")
    assert Symbol("x") == Symbol("x")
    assert Symbol("x") != Symbol("y")
    assert {Symbol("x"): 1}[Symbol("x")] == 1


def test_symbol_text():
    sym = Symbol("null?")
    assert str(sym) == "null?"
    assert repr(sym) == "Symbol('null?')"
    assert to_lisp(sym) == "null?"


def test_symbol_survives_pickling():
    assert pickle.loads(pickle.dumps(Symbol("car"))) is Symbol("car")
