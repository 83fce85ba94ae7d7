from __future__ import annotations

import itertools
import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SignedPermutation:
    """Element of the hyperoctahedral group B_n.

    Maps point p to q with q[i] = signs[i] * p[perm[i]].
    """

    perm: tuple[int, ...]
    signs: tuple[int, ...]

    def __post_init__(self) -> None:
        n = len(self.perm)
        if len(self.signs) != n:
            raise ValueError("perm and signs length mismatch")
        if sorted(self.perm) != list(range(n)):
            raise ValueError("perm must be a permutation of range(n)")
        if any(s not in (1, -1) for s in self.signs):
            raise ValueError("signs must be +1 or -1")


def apply_signed_permutation(g: SignedPermutation, point: Sequence[int]) -> tuple[int, ...]:
    if len(point) != len(g.perm):
        raise ValueError("point dimension mismatch")
    return tuple(s * point[j] for j, s in zip(g.perm, g.signs))


def compose(a: SignedPermutation, b: SignedPermutation) -> SignedPermutation:
    # apply b then a
    perm = tuple(b.perm[j] for j in a.perm)
    signs = tuple(sa * b.signs[j] for j, sa in zip(a.perm, a.signs))
    return SignedPermutation(perm, signs)


def inverse(g: SignedPermutation) -> SignedPermutation:
    n = len(g.perm)
    perm = [0] * n
    signs = [1] * n
    for i, j in enumerate(g.perm):
        perm[j] = i
        signs[j] = g.signs[i]
    return SignedPermutation(tuple(perm), tuple(signs))


def identity(n: int) -> SignedPermutation:
    return SignedPermutation(tuple(range(n)), (1,) * n)


def group_order(n: int) -> int:
    return 2**n * math.factorial(n)


def generate_signed_permutations(n: int) -> list[SignedPermutation]:
    """All 2^n * n! signed permutations, lexicographically ordered."""
    if n < 1:
        raise ValueError("n must be >= 1")
    out = [
        SignedPermutation(perm, signs)
        for perm in itertools.permutations(range(n))
        for signs in itertools.product((1, -1), repeat=n)
    ]
    if len(set(out)) != group_order(n):
        raise AssertionError(f"expected {group_order(n)} signed permutations, got {len(set(out))}")
    out.sort(key=lambda g: (g.perm, g.signs))
    return out


def generators(n: int) -> list[SignedPermutation]:
    """Adjacent transpositions (i, i+1) and single-axis sign flips; these generate B_n."""
    gens: list[SignedPermutation] = []
    for i in range(n - 1):
        perm = list(range(n))
        perm[i], perm[i + 1] = perm[i + 1], perm[i]
        gens.append(SignedPermutation(tuple(perm), (1,) * n))
    for i in range(n):
        signs = [1] * n
        signs[i] = -1
        gens.append(SignedPermutation(tuple(range(n)), tuple(signs)))
    return gens
