"""pytest fixtures for the test cases in this directory."""
import itertools
from typing import FrozenSet, List, Sequence

import pytest

from sklearn_versionspace.boundary import VersionSpace
from sklearn_versionspace.datasets import \
    load_enjoysport, load_weather_nominal
from sklearn_versionspace.hypothesis import ANY, Hypothesis, covers


# pytest plugin, to print the version space on test failure
@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    default = yield
    report = default.get_result()
    if report.failed and report.user_properties:
        for name, prop in report.user_properties:
            if name == 'version_space':
                report.longrepr.addsection(name, str(prop))
                break
    return default


@pytest.fixture
def record_version_space(record_property):
    def _record(version_space: VersionSpace):
        record_property("version_space", version_space)
    return _record


def hypothesis_space(domains: Sequence[Sequence]) -> List[Hypothesis]:
    """:return: All hypotheses over `domains`, except the bottom one."""
    return [Hypothesis(slots) for slots in
            itertools.product(*[list(domain) + [ANY] for domain in domains])]


def more_general_or_equal(a: Hypothesis, b: Hypothesis) -> bool:
    """`covers`, extended by the bottom hypothesis being below anything."""
    return b.is_bottom() or covers(a, b)


def bounded(version_space: VersionSpace,
            space: Sequence[Hypothesis]) -> FrozenSet[Hypothesis]:
    """:return: The members of `space` between the boundaries."""
    return frozenset(
        h for h in space
        if any(more_general_or_equal(h, s) for s in version_space.specific)
        and any(covers(g, h) for g in version_space.general))


def consistent(examples, space: Sequence[Hypothesis],
               positive_label='yes') -> FrozenSet[Hypothesis]:
    """:return: The members of `space` consistent with all `examples`."""
    return frozenset(
        h for h in space
        if all(covers(h, x) == (label == positive_label)
               for x, label in examples))


@pytest.fixture
def sky_temp_domains():
    """Two binary features, sky and temp."""
    return [['sunny', 'rainy'], ['warm', 'cold']]


@pytest.fixture
def enjoysport():
    return load_enjoysport()


@pytest.fixture
def weather_nominal():
    return load_weather_nominal()


@pytest.fixture
def one_concept_per_value():
    """Three classes A, B, C, each defined by one value of feature `a`."""
    X = [['x', 'p'],
         ['x', 'q'],
         ['y', 'p'],
         ['y', 'q'],
         ['z', 'p'],
         ['z', 'q']]
    y = ['A', 'A', 'B', 'B', 'C', 'C']
    return X, y
