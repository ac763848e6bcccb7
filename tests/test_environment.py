import pytest

from mceval.errors import ArityMismatch, UnboundVariable, UnassignedVariable
from mceval.types import Environment, Symbol, Unassigned, make_frame

x, y, z = Symbol("x"), Symbol("y"), Symbol("z")


@pytest.fixture
def chain():
    return Environment([{x: 1}, {x: 10, y: 20}])


def test_lookup_uses_first_frame(chain):
    assert chain.lookup(x) == 1
    assert chain.lookup(y) == 20


def test_lookup_unbound(chain):
    with pytest.raises(UnboundVariable) as info:
        chain.lookup(z)
    assert info.value.symbol == z


def test_find_returns_the_frame_object(chain):
    assert chain.find(y) is chain.frames[1]
    assert chain.find(x) is chain.frames[0]
    assert chain.find(z) is None


def test_extend_leaves_original_untouched(chain):
    extended = chain.extend([z], [3])
    assert extended.lookup(z) == 3
    assert len(extended) == 3
    assert len(chain) == 2
    with pytest.raises(UnboundVariable):
        chain.lookup(z)
    # Frames are shared, not copied
    assert extended.frames[1] is chain.frames[0]


def test_extend_in_place_is_seen_by_aliases(chain):
    alias = chain
    chain.extend_in_place([z], [3])
    assert alias.lookup(z) == 3
    assert len(chain) == 3


def test_frame_mutation_is_seen_through_extensions(chain):
    extended = chain.extend([z], [3])
    chain.frames[1][y] = 99
    assert extended.lookup(y) == 99


@pytest.mark.parametrize("params,args", [([x, y], [1]), ([x], [1, 2]), ([], [1])])
def test_arity_mismatch(params, args):
    with pytest.raises(ArityMismatch):
        make_frame(params, args)
    with pytest.raises(ArityMismatch):
        Environment().extend(params, args)
    with pytest.raises(ArityMismatch):
        Environment().extend_in_place(params, args)


def test_rebind_head_patches_placeholders():
    env = Environment([{y: 2}]).extend([x, z], [Unassigned, Unassigned])
    with pytest.raises(UnassignedVariable):
        env.lookup(x)
    env.rebind_head([x, z], [1, 3])
    assert env.lookup(x) == 1
    assert env.lookup(z) == 3
    assert env.lookup(y) == 2


def test_unassigned_is_an_unbound_variable():
    env = Environment([{x: Unassigned}])
    with pytest.raises(UnboundVariable):
        env.lookup(x)


def test_str_and_repr(chain):
    assert str(chain) == "{x: 1} -> ..."
    assert repr(chain) == "<Environment chain: {x: 1} -> {x: 10, y: 20}>"
    assert str(Environment()) == "{}"
