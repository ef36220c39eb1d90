"""
Candidate-Elimination / version spaces:
Conjunctive `Hypothesis` over nominal features and the generality lattice.
"""

import enum
from typing import Any, Iterable, List, Sequence

import numpy as np

Domains = Sequence[Sequence[Any]]


class Wildcard(enum.Enum):
    """Slot values of a `Hypothesis` which are not concrete feature values.

    - `ANY` matches any value of the feature.
    - `NOTHING` matches no value at all. Only used by the bottom hypothesis
      `Hypothesis.most_specific`, before any positive example has been seen.
    """
    ANY = '?'
    NOTHING = '∅'

    def __repr__(self):
        return self.value

    __str__ = __repr__


ANY = Wildcard.ANY
NOTHING = Wildcard.NOTHING


class Hypothesis(tuple):
    """A conjunction of equality tests, one slot per feature.

    Each slot holds a concrete value (test ``feature == value``), or one of
    the `Wildcard` members. Hypotheses are immutable values, all lattice
    operations in this module return new instances.
    """

    __slots__ = ()

    def __new__(cls, slots: Iterable = ()):
        return super().__new__(cls, slots)

    @classmethod
    def most_general(cls, n_features: int) -> 'Hypothesis':
        """:return: The top of the lattice, ``<?, ..., ?>``."""
        return cls([ANY] * n_features)

    @classmethod
    def most_specific(cls, n_features: int) -> 'Hypothesis':
        """:return: The bottom of the lattice, ``<∅, ..., ∅>``."""
        return cls([NOTHING] * n_features)

    @classmethod
    def from_instance(cls, x) -> 'Hypothesis':
        """:return: The hypothesis covering exactly the instance `x`."""
        return cls(x)

    def is_bottom(self) -> bool:
        return any(slot is NOTHING for slot in self)

    def n_conditions(self) -> int:
        """:return: the number of concrete (i.e. testing) slots."""
        return sum(not isinstance(slot, Wildcard) for slot in self)

    def to_string(self,
                  feature_names: Sequence[str] = None,
                  class_name=None) -> str:
        """:return: `self` rendered as a conjunctive rule, like
            ``(sky == sunny) and (wind == strong) => yes``.
        """
        if feature_names:
            assert len(self) == len(feature_names)
        else:
            feature_names = ['feature_{}'.format(i + 1)
                             for i in range(len(self))]
        if self.is_bottom():
            body = '(false)'
        else:
            body = ' and '.join(
                '({} == {})'.format(name, slot)
                for name, slot in zip(feature_names, self)
                if slot is not ANY) or '(true)'
        if class_name is None:
            return body
        return body + ' => ' + str(class_name)

    def __str__(self):
        return '<' + ', '.join(str(slot) for slot in self) + '>'

    def __repr__(self):
        return 'Hypothesis({!r})'.format(list(self))


def covers(h: Sequence, v: Sequence) -> bool:
    """Test whether `h` is more general than or equal to `v`.

    `v` may be another hypothesis or a plain instance (sequence of feature
    values). A hypothesis containing `NOTHING` covers nothing, regardless of
    its other slots.
    """
    if any(slot is NOTHING for slot in h):
        return False
    for h_i, v_i in zip(h, v):
        if h_i is not ANY and h_i != v_i:
            return False
    return True


def is_more_general(a: Sequence, b: Sequence) -> bool:
    """:return: True iff `a` is strictly more general than `b`."""
    return covers(a, b) and not covers(b, a)


def generalize_to_fit(h: Hypothesis, x: Sequence) -> Hypothesis:
    """:return: The unique minimal generalization of `h` covering `x`.

    Every concrete slot of `h` not matching `x` is relaxed to `ANY`.
    """
    return Hypothesis(h_i if h_i is ANY or h_i == x_i else ANY
                      for h_i, x_i in zip(h, x))


def minimal_specializations(g: Hypothesis, x: Sequence,
                            domains: Domains) -> List[Hypothesis]:
    """:return: All minimal specializations of `g` not covering the negative
        instance `x`.

    Each one sets exactly one `ANY` slot of `g` to a domain value differing
    from `x`. Concrete slots of `g` are left alone. The order follows the
    feature order and then the domain order.
    """
    specializations = []
    for index, (g_i, x_i) in enumerate(zip(g, x)):
        if g_i is not ANY:
            continue
        for value in domains[index]:
            if value == x_i:
                continue
            slots = list(g)
            slots[index] = value
            specializations.append(Hypothesis(slots))
    return specializations


def prune_dominated(hypotheses: Iterable[Hypothesis],
                    keep_most_specific: bool) -> List[Hypothesis]:
    """Reduce `hypotheses` to an antichain, keeping the insertion order.

    :param keep_most_specific: bool.
        If True (used for the specific boundary), drop every hypothesis
        strictly more general than another member. Otherwise (used for the
        general boundary), drop every hypothesis strictly more specific than
        another member.
    :return: A new list without duplicates and without dominated members.
    """
    unique = list(dict.fromkeys(hypotheses))
    if keep_most_specific:
        def dominated(h, other):
            return is_more_general(h, other)
    else:
        def dominated(h, other):
            return is_more_general(other, h)
    return [h for h in unique
            if not any(dominated(h, other) for other in unique)]


def match_hypothesis(X: np.ndarray, h: Sequence) -> np.ndarray:
    """Apply `h` to all samples in `X`.

    :param X: An array of shape `(n_samples, n_features)`.
    :param h: A hypothesis of length `n_features`.
    :return: An array of shape `(n_samples,)` and type bool, telling for each
        sample whether `h` covers it.
    """
    X = np.asarray(X, dtype=object)
    if any(slot is NOTHING for slot in h):
        return np.zeros(len(X), dtype=bool)
    matches = np.ones(len(X), dtype=bool)
    for index, slot in enumerate(h):
        if slot is not ANY:
            matches &= X[:, index] == slot
    return matches
