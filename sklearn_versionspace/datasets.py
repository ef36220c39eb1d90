"""
Loading nominal datasets from ARFF files, with their declared attribute
domains.
"""

import warnings
from os.path import dirname, join
from typing import IO, Optional, Union

import arff
import numpy as np
from sklearn.utils import Bunch

DATA_DIR = join(dirname(__file__), 'data')


class Dataset(Bunch):
    """A nominal dataset.

    Attributes
    -----
    data : np.ndarray of dtype object, shape `(n_samples, n_features)`
    target : np.ndarray of dtype object, shape `(n_samples,)`
    feature_names : list of str
    attribute_domains : list of lists
        The declared values of each feature, in declaration order.
    class_name : str
    class_domain : list
        The declared values of the class attribute.
    relation : str
        Name of the ARFF relation.
    """

    def __init__(self, data, target, feature_names, attribute_domains,
                 class_name, class_domain, **kwargs):
        super().__init__(data=data, target=target,
                         feature_names=feature_names,
                         attribute_domains=attribute_domains,
                         class_name=class_name, class_domain=class_domain,
                         **kwargs)

    def estimator_params(self, positive_label='yes') -> dict:
        """:return: Parameters for `CandidateEliminationClassifier` matching
            this dataset.

        :raise ValueError: if `positive_label` is not a declared class value.
        """
        if positive_label not in self.class_domain:
            raise ValueError("positive label {!r} not in class domain {}"
                             .format(positive_label, self.class_domain))
        negatives = [c for c in self.class_domain if c != positive_label]
        return dict(positive_label=positive_label,
                    negative_label=negatives[0] if negatives else None,
                    attribute_domains=self.attribute_domains)


def load_arff(file: Union[str, IO],
              class_index: Optional[int] = -1) -> Dataset:
    """Load a dataset of nominal attributes from an ARFF file.

    :param file: A path or a file-like object.
    :param class_index: int.
        Position of the class attribute, negative values count from the end.
        The default is the last attribute. There is no guessing, so None is
        rejected.
    :return: The `Dataset`. Instances with a missing class value are dropped.
    :raise ValueError: on a missing class index, non-nominal attributes, or
        missing attribute values.
    """
    if class_index is None:
        raise ValueError("No class index given for the dataset.")
    if isinstance(file, str):
        with open(file) as fp:
            dec = arff.load(fp)
    else:
        dec = arff.load(file)

    attributes = dec['attributes']
    n_attributes = len(attributes)
    if not -n_attributes <= class_index < n_attributes:
        raise ValueError("class_index {} out of range for {} attributes"
                         .format(class_index, n_attributes))
    class_index %= n_attributes
    for name, domain in attributes:
        if not isinstance(domain, list):
            raise ValueError("Attribute {!r} is not nominal but {}"
                             .format(name, domain))
    feature_indices = [i for i in range(n_attributes) if i != class_index]

    rows = np.array(dec['data'], dtype=object).reshape(-1, n_attributes)
    has_class = np.array([value is not None
                          for value in rows[:, class_index]], dtype=bool)
    if not has_class.all():
        warnings.warn("Dropping {} instances without class value."
                      .format(np.count_nonzero(~has_class)))
        rows = rows[has_class]
    data = rows[:, feature_indices]
    if any(value is None for value in data.flat):
        raise ValueError("Missing attribute values are not supported.")

    return Dataset(data=data,
                   target=rows[:, class_index],
                   feature_names=[attributes[i][0] for i in feature_indices],
                   attribute_domains=[list(attributes[i][1])
                                      for i in feature_indices],
                   class_name=attributes[class_index][0],
                   class_domain=list(attributes[class_index][1]),
                   relation=dec['relation'])


def load_enjoysport() -> Dataset:
    """The EnjoySport training examples (Mitchell 1997, Table 2.1).

    A conjunctive concept, positive label 'yes'.
    """
    return load_arff(join(DATA_DIR, 'enjoysport.arff'))


def load_weather_nominal() -> Dataset:
    """The nominal weather dataset. Not a conjunctive concept, so the version
    space collapses.
    """
    return load_arff(join(DATA_DIR, 'weather.nominal.arff'))
