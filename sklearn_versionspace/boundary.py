"""
Candidate-Elimination / version spaces:
The boundary sets S and G and their update per training example.
"""

import logging
from typing import Any, List, NamedTuple, Optional, Sequence

from sklearn_versionspace.hypothesis import \
    Domains, Hypothesis, covers, generalize_to_fit, minimal_specializations, \
    prune_dominated

logger = logging.getLogger(__name__)

DEFAULT_NEGATIVE_LABEL = 'no'


class TrainingResult(NamedTuple):
    """Outcome of `VersionSpace.train`.

    Attributes
    -----
    specific : list of Hypothesis
        The final specific boundary S.
    general : list of Hypothesis
        The final general boundary G.
    collapsed : bool
        True iff S or G became empty, i.e. no representable hypothesis is
        consistent with the examples.
    collapsed_at : int or None
        Index of the example which made the version space collapse.
    n_observed : int
        Count of examples that actually updated the boundaries.
    """
    specific: List[Hypothesis]
    general: List[Hypothesis]
    collapsed: bool
    collapsed_at: Optional[int]
    n_observed: int


class VersionSpace:
    """The set of conjunctive hypotheses consistent with the examples seen so
    far, represented by its specific boundary S and its general boundary G.

    Parameters
    -----
    domains : sequence of sequences
        For each feature, the ordered values it can take.
    positive_label :
        The class label of positive examples. Any other label is negative.
    negative_label :
        Returned by `classify` for instances not classified positive.

    Attributes
    -----
    specific : list of Hypothesis
        S, the maximally specific consistent hypotheses. Starts as the bottom
        hypothesis `<∅, ..., ∅>`.
    general : list of Hypothesis
        G, the maximally general consistent hypotheses. Starts as
        `<?, ..., ?>`.
    collapsed_at : int or None
        Index (in order of `observe` calls) of the example after which S or G
        was empty.
    """

    def __init__(self, domains: Domains, positive_label='yes',
                 negative_label=DEFAULT_NEGATIVE_LABEL):
        self.domains = [list(domain) for domain in domains]
        self.n_features = len(self.domains)
        self.positive_label = positive_label
        self.negative_label = negative_label
        self.specific: List[Hypothesis] = \
            [Hypothesis.most_specific(self.n_features)]
        self.general: List[Hypothesis] = \
            [Hypothesis.most_general(self.n_features)]
        self.collapsed_at: Optional[int] = None
        self.n_observed = 0

    @property
    def collapsed(self) -> bool:
        """True iff no hypothesis is consistent with the examples anymore."""
        return not self.specific or not self.general

    @property
    def converged(self) -> bool:
        """True iff exactly one hypothesis is left, i.e. S = G = {h}."""
        return (len(self.specific) == 1
                and len(self.general) == 1
                and self.specific[0] == self.general[0])

    @property
    def hypothesis(self) -> Optional[Hypothesis]:
        """The learned hypothesis if `converged`, None otherwise."""
        return self.specific[0] if self.converged else None

    def is_positive(self, label) -> bool:
        return bool(label == self.positive_label)

    def observe(self, x: Sequence, label: Any) -> bool:
        """Update the boundaries with one labeled example.

        Does nothing if the version space has already collapsed.

        :param x: The feature values of the example.
        :param label: The class label of the example.
        :return: False iff the version space is (now) collapsed.
        """
        if self.collapsed:
            return False
        x = self._check_instance(x)
        positive = self.is_positive(label)
        index = self.n_observed
        self.n_observed += 1
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("example %d: %s -> %s", index, Hypothesis(x),
                         'positive' if positive else 'negative')
            logger.debug("before:\n%s", self)

        if positive:
            self.general = [g for g in self.general if covers(g, x)]
            self._generalize_specific(x)
        else:
            self.specific = [s for s in self.specific
                             if s.is_bottom() or not covers(s, x)]
            self._specialize_general(x)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("after:\n%s", self)
        if self.collapsed:
            self.collapsed_at = index
            logger.info("version space collapsed at example %d "
                        "(|S|=%d, |G|=%d)",
                        index, len(self.specific), len(self.general))
            return False
        return True

    def _check_instance(self, x: Sequence) -> tuple:
        x = tuple(x)
        if len(x) != self.n_features:
            raise ValueError("Instance has {} features, expected {}."
                             .format(len(x), self.n_features))
        return x

    def _generalize_specific(self, x: Sequence):
        """Minimally generalize the members of S not covering positive `x`."""
        kept = []
        added = []
        for s in self.specific:
            if s.is_bottom():
                h = Hypothesis.from_instance(x)
            elif covers(s, x):
                kept.append(s)
                continue
            else:
                h = generalize_to_fit(s, x)
                if not self._below_general(h):
                    continue
            if h not in added and h not in kept:
                added.append(h)
        self.specific = prune_dominated(kept + added,
                                        keep_most_specific=True)

    def _specialize_general(self, x: Sequence):
        """Minimally specialize the members of G covering negative `x`."""
        kept = []
        added = []
        for g in self.general:
            if not covers(g, x):
                kept.append(g)
                continue
            for h in minimal_specializations(g, x, self.domains):
                if (self._above_specific(h)
                        and h not in added and h not in kept):
                    added.append(h)
        self.general = prune_dominated(kept + added,
                                       keep_most_specific=False)

    def _below_general(self, h: Hypothesis) -> bool:
        """:return: True iff some member of G is more general than `h`."""
        return any(covers(g, h) for g in self.general)

    def _above_specific(self, h: Hypothesis) -> bool:
        """:return: True iff `h` is more general than some member of S.

        The bottom hypothesis is below everything, so as long as S holds it,
        any `h` qualifies.
        """
        return any(s.is_bottom() or covers(h, s) for s in self.specific)

    def train(self, X, y) -> TrainingResult:
        """Observe all examples `zip(X, y)` in order, stopping early on
        collapse.
        """
        for x, label in zip(X, y):
            if not self.observe(x, label):
                break
        return self.result()

    def result(self) -> TrainingResult:
        """:return: The current state, as `TrainingResult`."""
        return TrainingResult(list(self.specific),
                              list(self.general),
                              self.collapsed,
                              self.collapsed_at,
                              self.n_observed)

    def classify(self, x: Sequence):
        """Predict the label of instance `x`.

        Only a converged version space commits to the positive label, namely
        for instances covered by its single hypothesis. In any other state,
        the negative label is returned.
        """
        x = self._check_instance(x)
        h = self.hypothesis
        if h is not None and covers(h, x):
            return self.positive_label
        return self.negative_label

    def to_string(self, feature_names: Sequence[str] = None) -> str:
        """:return: A diagnostic rendering of both boundaries.

        After collapse, a header is followed by whichever boundary is left.
        """
        lines = []
        if self.collapsed:
            lines.append("Empty version space (inconsistent examples): "
                         "|S|={}, |G|={}".format(len(self.specific),
                                                 len(self.general)))
        if self.specific or not self.collapsed:
            lines.append('S (most specific):')
            lines.extend('\t' + _render(h, feature_names)
                         for h in self.specific)
        if self.general or not self.collapsed:
            lines.append('G (most general):')
            lines.extend('\t' + _render(h, feature_names)
                         for h in self.general)
        return '\n'.join(lines)

    def __str__(self):
        return self.to_string()


def _render(h: Hypothesis, feature_names: Optional[Sequence[str]]) -> str:
    if feature_names:
        return h.to_string(feature_names)
    return str(h)
