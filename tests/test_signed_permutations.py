from __future__ import annotations

import pytest

from hypersphere_engine.invariants.signed_permutations import (
    SignedPermutation,
    apply_signed_permutation,
    compose,
    generate_signed_permutations,
    generators,
    group_order,
    identity,
    inverse,
)


@pytest.mark.parametrize("n,order", [(1, 2), (2, 8), (3, 48), (4, 384)])
def test_group_order(n: int, order: int):
    group = generate_signed_permutations(n)
    assert len(group) == order == group_order(n)
    assert len(set(group)) == order


def test_apply():
    g = SignedPermutation((2, 0, 1), (1, -1, 1))
    assert apply_signed_permutation(g, (10, 20, 30)) == (30, -10, 20)


def test_compose_matches_sequential_application():
    group = generate_signed_permutations(3)
    p = (1, 2, 3)
    for a in group[::5]:
        for b in group[::7]:
            assert apply_signed_permutation(compose(a, b), p) == apply_signed_permutation(
                a, apply_signed_permutation(b, p)
            )


def test_composition_closure():
    group = set(generate_signed_permutations(3))
    for a in group:
        for b in group:
            assert compose(a, b) in group


def test_inverses():
    e = identity(3)
    for g in generate_signed_permutations(3):
        assert compose(g, inverse(g)) == e
        assert compose(inverse(g), g) == e
        assert inverse(inverse(g)) == g


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_generators_span_group(n: int):
    gens = generators(n)
    seen = {identity(n)}
    frontier = [identity(n)]
    while frontier:
        nxt = []
        for g in frontier:
            for s in gens:
                h = compose(s, g)
                if h not in seen:
                    seen.add(h)
                    nxt.append(h)
        frontier = nxt
    assert len(seen) == group_order(n)


def test_invalid_elements():
    with pytest.raises(ValueError):
        SignedPermutation((0, 0), (1, 1))
    with pytest.raises(ValueError):
        SignedPermutation((0, 1), (1, 2))
    with pytest.raises(ValueError):
        SignedPermutation((0, 1), (1,))
    with pytest.raises(ValueError):
        apply_signed_permutation(identity(2), (1, 2, 3))
    with pytest.raises(ValueError):
        generate_signed_permutations(0)
