# script training Candidate-Elimination on the EnjoySport and the nominal
# weather data, printing the version spaces and evaluating on the training set

import logging

from sklearn.metrics import confusion_matrix, classification_report

from sklearn_versionspace.datasets import \
    load_enjoysport, load_weather_nominal
from sklearn_versionspace.estimator import CandidateEliminationClassifier

logging.basicConfig(format='%(asctime)s:' + logging.BASIC_FORMAT,
                    level=logging.INFO)
logging.captureWarnings(True)
# per-example boundary updates
logging.getLogger('sklearn_versionspace.boundary').setLevel(logging.DEBUG)

for dataset in (load_enjoysport(), load_weather_nominal()):
    print(flush=True)
    print("# {} #".format(dataset.relation))
    print("feature names: " + ', '.join(dataset.feature_names))

    est = CandidateEliminationClassifier(**dataset.estimator_params('yes'))
    est.fit(dataset.data, dataset.target)
    result = est.training_result_
    if result.collapsed:
        print("collapsed at example {} of {}"
              .format(result.collapsed_at, len(dataset.data)))
    print(est.export_text(dataset.feature_names))

    # classify the first example, like a single test instance
    print("first example: {} (true: {}, predicted: {})".format(
        ', '.join(dataset.data[0]), dataset.target[0],
        est.predict(dataset.data[:1])[0]))

    print("\n" + '# "evaluation" on training set #')
    pred = est.predict(dataset.data)
    labels = dataset.class_domain
    print(confusion_matrix(dataset.target, pred, labels=labels))
    print(classification_report(dataset.target, pred, labels=labels,
                                zero_division=0))
