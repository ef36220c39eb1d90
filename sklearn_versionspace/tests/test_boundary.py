"""Tests for `sklearn_versionspace.boundary`."""

import logging

import pytest
from sklearn.utils import check_random_state

from sklearn_versionspace.boundary import VersionSpace
from sklearn_versionspace.hypothesis import \
    ANY, Hypothesis, covers, is_more_general
from .conftest import bounded, consistent, hypothesis_space


def test_sky_temp_scenario(sky_temp_domains, record_version_space):
    """Converge on `<sunny, ?>` within three examples."""
    vs = VersionSpace(sky_temp_domains, positive_label='yes')
    record_version_space(vs)
    assert vs.specific == [Hypothesis.most_specific(2)]
    assert vs.general == [Hypothesis.most_general(2)]

    assert vs.observe(['sunny', 'warm'], 'yes')
    assert vs.specific == [('sunny', 'warm')]
    assert vs.general == [(ANY, ANY)]

    assert vs.observe(['rainy', 'warm'], 'no')
    assert vs.specific == [('sunny', 'warm')]
    # (?, cold) does not cover the specific boundary and is dropped
    assert vs.general == [('sunny', ANY)]
    assert not vs.converged

    assert vs.observe(['sunny', 'cold'], 'yes')
    assert vs.specific == [('sunny', ANY)]
    assert vs.general == [('sunny', ANY)]
    assert vs.converged
    assert vs.hypothesis == ('sunny', ANY)

    assert vs.classify(['sunny', 'warm']) == 'yes'
    assert vs.classify(['rainy', 'warm']) == 'no'
    assert vs.n_observed == 3


def test_negatives_before_positives(sky_temp_domains):
    """While S is the bottom hypothesis, G is specialized freely."""
    vs = VersionSpace(sky_temp_domains)
    assert vs.observe(['rainy', 'warm'], 'no')
    assert vs.specific == [Hypothesis.most_specific(2)]
    assert vs.general == [('sunny', ANY), (ANY, 'cold')]

    assert vs.observe(['sunny', 'warm'], 'no')
    assert vs.general == [(ANY, 'cold')]

    assert vs.observe(['rainy', 'cold'], 'yes')
    assert vs.specific == [('rainy', 'cold')]
    assert vs.general == [(ANY, 'cold')]


def test_no_positive_example_classifies_negative(sky_temp_domains):
    vs = VersionSpace(sky_temp_domains, negative_label='nope')
    vs.train([['rainy', 'warm']], ['no'])
    assert not vs.converged
    assert vs.hypothesis is None
    assert vs.classify(['sunny', 'cold']) == 'nope'


def test_collapse(sky_temp_domains):
    """(sunny and warm) or (rainy and cold) is no conjunction."""
    vs = VersionSpace(sky_temp_domains)
    X = [['sunny', 'warm'], ['rainy', 'cold'], ['sunny', 'cold'],
         ['rainy', 'warm'], ['sunny', 'warm']]
    y = ['yes', 'yes', 'no', 'no', 'yes']
    result = vs.train(X, y)
    assert result.collapsed
    assert vs.collapsed
    # S = G = {<?, ?>} after two positives, covering the negative example
    assert result.collapsed_at == 2
    assert result.n_observed == 3
    assert result.specific == []
    assert result.general == []
    assert str(vs) == \
        "Empty version space (inconsistent examples): |S|=0, |G|=0"

    # collapse is final
    assert not vs.observe(['sunny', 'warm'], 'yes')
    assert vs.n_observed == 3
    assert vs.specific == [] and vs.general == []
    for x in X:
        assert vs.classify(x) == 'no'


def test_converged_is_stable(sky_temp_domains):
    vs = VersionSpace(sky_temp_domains)
    vs.train([['sunny', 'warm'], ['rainy', 'warm'], ['sunny', 'cold']],
             ['yes', 'no', 'yes'])
    assert vs.converged
    for x, label in [(['sunny', 'cold'], 'yes'), (['rainy', 'cold'], 'no'),
                     (['sunny', 'warm'], 'yes'), (['rainy', 'warm'], 'no')]:
        assert vs.observe(x, label)
        assert vs.specific == [('sunny', ANY)]
        assert vs.general == [('sunny', ANY)]


def test_wrong_number_of_features(sky_temp_domains):
    vs = VersionSpace(sky_temp_domains)
    with pytest.raises(ValueError):
        vs.observe(['sunny'], 'yes')
    assert vs.n_observed == 0


def test_classify_wrong_number_of_features(sky_temp_domains):
    vs = VersionSpace(sky_temp_domains)
    vs.train([['sunny', 'warm'], ['rainy', 'warm'], ['sunny', 'cold']],
             ['yes', 'no', 'yes'])
    assert vs.converged
    with pytest.raises(ValueError):
        vs.classify(['sunny'])
    with pytest.raises(ValueError):
        vs.classify(['sunny', 'warm', 'strong'])


def test_collapse_renders_remaining_boundary(sky_temp_domains):
    """A positive example outside G empties G, while S takes the example."""
    vs = VersionSpace(sky_temp_domains)
    vs.observe(['rainy', 'warm'], 'no')
    assert not vs.observe(['rainy', 'warm'], 'yes')
    assert vs.general == []
    assert vs.specific == [('rainy', 'warm')]
    assert str(vs).splitlines() == [
        'Empty version space (inconsistent examples): |S|=1, |G|=0',
        'S (most specific):',
        '\t<rainy, warm>',
    ]


def test_enjoysport(enjoysport, record_version_space):
    """Reproduce the final boundaries of (Mitchell 1997, Figure 2.7)."""
    vs = VersionSpace(enjoysport.attribute_domains)
    record_version_space(vs)
    result = vs.train(enjoysport.data, enjoysport.target)
    assert not result.collapsed
    assert result.collapsed_at is None
    assert result.n_observed == 4
    assert result.specific == [('sunny', 'warm', ANY, 'strong', ANY, ANY)]
    assert result.general == [('sunny', ANY, ANY, ANY, ANY, ANY),
                              (ANY, 'warm', ANY, ANY, ANY, ANY)]
    assert not vs.converged
    # not converged: no positive predictions, even for training positives
    assert vs.classify(enjoysport.data[0]) == 'no'

    text = vs.to_string(enjoysport.feature_names)
    assert text.splitlines() == [
        'S (most specific):',
        '\t(sky == sunny) and (airtemp == warm) and (wind == strong)',
        'G (most general):',
        '\t(sky == sunny)',
        '\t(airtemp == warm)',
    ]


def test_weather_nominal_collapses(weather_nominal):
    vs = VersionSpace(weather_nominal.attribute_domains)
    result = vs.train(weather_nominal.data, weather_nominal.target)
    assert result.collapsed
    # G = {<overcast, ?, ?, ?>} after the first positive example, which
    # does not cover the second one. Generalizing S is bounded by G, too.
    assert result.collapsed_at == 3
    assert result.general == []
    assert result.specific == []


def test_result_is_snapshot(sky_temp_domains):
    vs = VersionSpace(sky_temp_domains)
    result = vs.train([['sunny', 'warm']], ['yes'])
    vs.observe(['sunny', 'cold'], 'yes')
    assert result.specific == [('sunny', 'warm')]
    assert vs.specific == [('sunny', ANY)]


def test_logging(sky_temp_domains, caplog):
    caplog.set_level(logging.DEBUG, logger='sklearn_versionspace.boundary')
    vs = VersionSpace(sky_temp_domains)
    vs.train([['sunny', 'warm'], ['sunny', 'warm']], ['yes', 'no'])
    messages = [record.getMessage() for record in caplog.records]
    assert messages[0] == 'example 0: <sunny, warm> -> positive'
    assert any(m.startswith('version space collapsed at example 1')
               for m in messages)


def random_concept_stream(domains, n_samples, random):
    """:return: A random conjunctive target concept and examples labeled
        according to it.
    """
    target = Hypothesis(ANY if random.random_sample() < .5
                        else domain[random.randint(len(domain))]
                        for domain in domains)
    X = [[domain[random.randint(len(domain))] for domain in domains]
         for _ in range(n_samples)]
    y = ['yes' if covers(target, x) else 'no' for x in X]
    return target, X, y


@pytest.mark.parametrize('seed', range(12))
def test_version_space_invariant(seed, record_version_space):
    """Check all properties of the boundaries against the brute-forced
    hypothesis space, after every example of a noise-free stream.
    """
    random = check_random_state(seed)
    domains = [['a', 'b', 'c'], ['d', 'e'], ['f', 'g'], ['h', 'i', 'j']]
    space = hypothesis_space(domains)
    target, X, y = random_concept_stream(domains, 15, random)

    vs = VersionSpace(domains)
    record_version_space(vs)
    previous = bounded(vs, space)
    assert previous == frozenset(space)
    seen = []
    for x, label in zip(X, y):
        assert vs.observe(x, label), "collapsed on noise-free data"
        seen.append((x, label))
        positive = label == 'yes'

        for h in vs.specific + vs.general:
            assert covers(h, x) == positive
        for boundary in (vs.specific, vs.general):
            assert len(set(boundary)) == len(boundary)
            for a in boundary:
                assert not any(is_more_general(a, b) for b in boundary)

        current = bounded(vs, space)
        assert current == consistent(seen, space)
        assert current <= previous
        assert target in current
        previous = current

    if vs.converged:
        assert vs.hypothesis == target
        for x in X:
            assert vs.classify(x) == ('yes' if covers(target, x) else 'no')
