"""Implementation of the Candidate-Elimination algorithm (version spaces).

Limitations / Assumptions
=====

- only nominal (categorical) features, compared with ==
- hypotheses are conjunctions of equality tests, one per feature at most
- no missing values
- no noise: a single mislabeled example makes the version space collapse
- binary problems are always solved as concept learning, i.e. one label is
  the "positive class", every other label is negative.
- examples are processed in the given order, one by one
- classification commits to the positive class only if the version space has
  converged to a single hypothesis, otherwise the negative class is predicted
"""

__all__ = ['boundary', 'datasets', 'estimator', 'extra', 'hypothesis',
           'tests']
