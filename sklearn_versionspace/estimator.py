"""
Candidate-Elimination / version spaces: scikit-learn estimator interface.
"""

import warnings
from typing import List, Type

import numpy as np

from sklearn.base import BaseEstimator, ClassifierMixin
from sklearn.multiclass import OneVsRestClassifier
from sklearn.utils import check_X_y, check_array
from sklearn.utils.multiclass import unique_labels, \
    check_classification_targets
from sklearn.utils.validation import check_is_fitted

from sklearn_versionspace.boundary import \
    DEFAULT_NEGATIVE_LABEL, VersionSpace, TrainingResult
from sklearn_versionspace.hypothesis import match_hypothesis


def build_domains(X: np.ndarray, attribute_domains=None) -> List[list]:
    """:return: A list with the ordered domain of each feature (column) of
        `X`.

    If `attribute_domains` is None, each domain is the sorted set of values
    present in `X`. Otherwise it is validated against `X`.
    """
    n_features = X.shape[1]
    if attribute_domains is None:
        return [np.unique(X[:, i]).tolist() for i in range(n_features)]

    domains = [list(domain) for domain in attribute_domains]
    if len(domains) != n_features:
        raise ValueError("attribute_domains must contain %d domains, got %d"
                         % (n_features, len(domains)))
    for i, domain in enumerate(domains):
        unknown = set(X[:, i]).difference(domain)
        if unknown:
            raise ValueError("Feature %d has values outside of its domain "
                             "%r: %r" % (i, domain, sorted(map(str, unknown))))
    return domains


# noinspection PyAttributeOutsideInit
class CandidateEliminationClassifier(BaseEstimator, ClassifierMixin):
    """Concept learning with the *Candidate-Elimination* algorithm.

    Learns a conjunction of equality tests on nominal features by maintaining
    the version space, i.e. the boundaries of all conjunctions consistent with
    the training data. The examples are processed in the order given.

    Parameters
    -----
    positive_label : default 'yes'
        The class label of the target concept. Any other label is negative.

    negative_label : optional
        The label predicted for instances not classified as positive. If None
        (the default), it is the single other class present in `y`, or
        `DEFAULT_NEGATIVE_LABEL` ('no') if `y` holds positive examples only.

    attribute_domains : None or sequence of sequences
        For each feature, the ordered set of values it can take. Used to
        specialize the general boundary. If None, the values present in the
        training data are used.

    version_space_class : subclass of VersionSpace
        Maintains the boundaries, see `version_space_`.

    Attributes
    -----
    classes_ : np.ndarray
        Class labels seen during `fit`, plus `negative_label_`.

    n_features_ : int
        The number of features in (training) data `X`.

    domains_ : list of lists
        The attribute domains actually used.

    negative_label_ :
        The resolved negative label.

    version_space_ : VersionSpace
        The trained version space.

    training_result_ : TrainingResult
        Outcome of training, including whether the version space collapsed.

    specific_boundary_, general_boundary_ : list of Hypothesis
        The final boundaries S and G.

    collapsed_ : bool
        True iff no conjunction is consistent with the training data. The
        classifier then predicts `negative_label_` for every instance.

    Notes
    -----
    Only a version space that converged to a single hypothesis classifies
    any instance as positive; otherwise all predictions are negative.
    """

    def __init__(self,
                 positive_label='yes',
                 negative_label=None,
                 attribute_domains=None,
                 version_space_class: Type[VersionSpace] = VersionSpace):
        super().__init__()
        self.positive_label = positive_label
        self.negative_label = negative_label
        self.attribute_domains = attribute_domains
        self.version_space_class = version_space_class

    def fit(self, X, y):
        """Fit to data, i.e. train the version space on the examples in order.

        :param X: array-like of shape `(n_samples, n_features)` holding
            nominal values.
        :param y: Classification labels for `X`.
        """
        X, y = check_X_y(X, y, dtype=object)
        check_classification_targets(y)

        self.n_features_ = X.shape[1]
        self.domains_ = build_domains(X, self.attribute_domains)
        self.negative_label_ = self._resolve_negative_label(y)
        self.classes_ = unique_labels(np.append(y, self.negative_label_))

        self.version_space_ = self.version_space_class(
            self.domains_, self.positive_label, self.negative_label_)
        self.training_result_: TrainingResult = self.version_space_.train(X, y)
        self.specific_boundary_ = self.training_result_.specific
        self.general_boundary_ = self.training_result_.general
        self.collapsed_ = self.training_result_.collapsed
        if self.collapsed_:
            warnings.warn("Version space collapsed at example {}, no "
                          "conjunctive hypothesis is consistent with the "
                          "training data."
                          .format(self.training_result_.collapsed_at))
        return self

    def _resolve_negative_label(self, y):
        labels = unique_labels(y).tolist()
        if self.positive_label not in labels:
            warnings.warn("positive_label {!r} not present in y, only "
                          "negative examples given."
                          .format(self.positive_label))
        if self.negative_label is not None:
            return self.negative_label
        negatives = [label for label in labels
                     if label != self.positive_label]
        if not negatives:
            return DEFAULT_NEGATIVE_LABEL
        if len(negatives) > 1:
            raise ValueError("Cannot determine negative_label from classes "
                             "{}, pass it explicitly.".format(labels))
        return negatives[0]

    def _check_X(self, X) -> np.ndarray:
        check_is_fitted(self, ['version_space_', 'n_features_'])
        X = check_array(X, dtype=object)
        n_features = X.shape[1]
        if self.n_features_ != n_features:
            raise ValueError("Number of features of the model must "
                             "match the input. Model n_features is %s and "
                             "input n_features is %s "
                             % (self.n_features_, n_features))
        return X

    def decision_function(self, X) -> np.ndarray:
        """:return: An array of shape `(n_samples,)`, 1.0 for instances
            classified positive and 0.0 otherwise.

        Used by `sklearn.multiclass.OneVsRestClassifier`.
        """
        X = self._check_X(X)
        h = self.version_space_.hypothesis
        if h is None:
            return np.zeros(len(X))
        return match_hypothesis(X, h).astype(float)

    def predict(self, X) -> np.ndarray:
        """Classify each sample in `X`, based on `decision_function`."""
        positive = self.decision_function(X) > 0
        return np.where(positive, self.positive_label, self.negative_label_)

    def export_text(self, feature_names: List[str] = None) -> str:
        """Build a text report of the learned version space.

        :param feature_names: list, optional.
            A list of length n_features containing the feature names.
            If None, generic names will be generated.
        """
        check_is_fitted(self, 'version_space_')
        if feature_names:
            if len(feature_names) != self.n_features_:
                raise ValueError(
                    "feature_names must contain %d elements, got %d"
                    % (self.n_features_, len(feature_names)))
        else:
            feature_names = ["feature_{}".format(i + 1)
                             for i in range(self.n_features_)]

        vs = self.version_space_
        if vs.converged:
            return '\n'.join([
                vs.hypothesis.to_string(feature_names, self.positive_label),
                '(true) => ' + str(self.negative_label_)])
        return vs.to_string(feature_names)


def one_version_space_per_class(n_jobs=None, **kwargs) -> OneVsRestClassifier:
    """:return: An estimator learning one concept per class label.

    Each concept ("this class" vs. "any other class") is learned by its own
    `CandidateEliminationClassifier`, independent of the others. With
    `n_jobs`, these are trained in parallel.

    :param kwargs: Passed to `CandidateEliminationClassifier`.
    """
    return OneVsRestClassifier(
        CandidateEliminationClassifier(positive_label=1, negative_label=0,
                                       **kwargs),
        n_jobs=n_jobs)
