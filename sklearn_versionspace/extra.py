"""
Candidate-Elimination / version spaces:
Tracing of the boundaries while training, and plotting of such traces.
"""

import json
from typing import IO, Dict, List, MutableSequence, Optional, Sequence, \
    Tuple, Union

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure  # needed only for type hints

from sklearn_versionspace.boundary import VersionSpace
from sklearn_versionspace.hypothesis import Hypothesis, Wildcard


class Trace:
    """Trace of a `VersionSpace` training run.

    Attributes
    -----
    - `steps`: Sequence[Trace.Step]
      One item per observed example, holding the boundaries after its update.
    - `collapsed_at`: int or None
      Copied from the traced `VersionSpace`.
    """

    _JSON_DUMP_DESCRIPTION = "sklearn_versionspace.extra.Trace dump"
    _JSON_DUMP_VERSION = 1

    steps: MutableSequence['Trace.Step']
    collapsed_at: Optional[int]

    def __init__(self):
        self.steps = []
        self.collapsed_at = None

    class Step:
        """State of the boundaries after observing one example."""

        def __init__(self, index: int, positive: bool,
                     specific: Sequence[Hypothesis],
                     general: Sequence[Hypothesis]):
            self.index = index
            self.positive = positive
            self.specific = list(specific)
            self.general = list(general)

        def __eq__(self, other):
            if type(other) is type(self):
                return self.__dict__ == other.__dict__
            return NotImplemented

        def __repr__(self):
            return 'Step({index}, {sign}, |S|={s}, |G|={g})'.format(
                index=self.index, sign='+' if self.positive else '-',
                s=len(self.specific), g=len(self.general))

        @staticmethod
        def from_json(dec: Dict) -> 'Trace.Step':
            return Trace.Step(dec['index'], dec['positive'],
                              [_hypothesis_from_json(h)
                               for h in dec['specific']],
                              [_hypothesis_from_json(h)
                               for h in dec['general']])

    def __eq__(self, other):
        if type(other) is type(self):
            return self.__dict__ == other.__dict__
        return NotImplemented

    def boundary_sizes(self) -> List[Tuple[int, int]]:
        """:return: `(|S|, |G|)` after each step."""
        return [(len(step.specific), len(step.general))
                for step in self.steps]

    def plot_boundary_sizes(self, **kwargs):
        """Plot the trace, see :func:`plot_boundary_sizes`."""
        return plot_boundary_sizes(self, **kwargs)

    @staticmethod
    def _json_encoder(obj):
        """Serialize `obj` when used as `json.JSONEncoder.default` method."""
        if isinstance(obj, Wildcard):
            return {'wildcard': obj.name}
        if isinstance(obj, Trace.Step):
            return {'index': obj.index,
                    'positive': obj.positive,
                    # lists, so json does not treat Hypothesis as a tuple
                    'specific': [list(h) for h in obj.specific],
                    'general': [list(h) for h in obj.general]}
        raise TypeError

    def to_json(self) -> str:
        """:return: A string containing a JSON representation of the trace.

        Concrete feature values have to be JSON serializable.
        """
        return json.dumps({
            "description": Trace._JSON_DUMP_DESCRIPTION,
            "version": Trace._JSON_DUMP_VERSION,
            "steps": self.steps,
            "collapsed_at": self.collapsed_at,
        }, allow_nan=False, default=Trace._json_encoder)

    @staticmethod
    def from_json(dump: Union[str, IO]) -> 'Trace':
        """
        :param dump: A file-like object or string containing JSON.
        :return: The `Trace` dumped previously with `to_json`.
        """
        loader = json.loads if isinstance(dump, str) else json.load
        dec = loader(dump)

        if dec.get("description") != Trace._JSON_DUMP_DESCRIPTION:
            raise ValueError("No/invalid boundary trace json: %s" % repr(dec))
        if dec["version"] != Trace._JSON_DUMP_VERSION:
            raise ValueError("Unsupported boundary trace version: %s"
                             % dec["version"])
        trace = Trace()
        trace.steps = [Trace.Step.from_json(step) for step in dec['steps']]
        trace.collapsed_at = dec['collapsed_at']
        return trace


def _hypothesis_from_json(slots: List) -> Hypothesis:
    return Hypothesis(Wildcard[slot['wildcard']] if isinstance(slot, dict)
                      else slot
                      for slot in slots)


class TracingVersionSpace(VersionSpace):
    """`VersionSpace` recording a `Trace` of its boundaries.

    Usage
    =====
    >>> from sklearn_versionspace.estimator import \\
    ...     CandidateEliminationClassifier
    >>> est = CandidateEliminationClassifier(
    ...     version_space_class=TracingVersionSpace)
    >>> est.fit(X, y)
    >>> est.version_space_.trace.plot_boundary_sizes()
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.trace = Trace()

    def observe(self, x, label) -> bool:
        if self.collapsed:
            return False
        consistent = super().observe(x, label)
        self.trace.steps.append(Trace.Step(self.n_observed - 1,
                                           self.is_positive(label),
                                           self.specific,
                                           self.general))
        self.trace.collapsed_at = self.collapsed_at
        return consistent


def plot_boundary_sizes(trace: Trace,
                        *,
                        title: Optional[str] = None,
                        figure: Optional[Figure] = None,
                        ) -> Figure:
    """Plot the sizes of both boundaries over the training examples.

    Positive examples are marked by filled, negative ones by empty markers.
    The collapse, if any, is marked by a vertical line.

    :param trace: collected `Trace`, see `TracingVersionSpace`.
    :param title: string or None. If not None, set as figure title.
    :param figure: If None, use `plt.figure()` to create a figure, otherwise
      draw on this one.
    :return: The figure.
    """
    if figure is None:
        figure = plt.figure()
    ax: Axes = figure.add_subplot(111)
    indices = [step.index for step in trace.steps]
    positive = [step.positive for step in trace.steps]
    for boundary, sizes, color in (
            ('S', [len(step.specific) for step in trace.steps], 'tab:blue'),
            ('G', [len(step.general) for step in trace.steps], 'tab:orange')):
        ax.plot(indices, sizes, color=color, label=boundary)
        ax.scatter(indices, sizes, edgecolors=color,
                   facecolors=[color if p else 'none' for p in positive])
    if trace.collapsed_at is not None:
        ax.axvline(trace.collapsed_at, color='tab:red', linestyle='--',
                   label='collapse')
    ax.set_xlabel('example')
    ax.set_ylabel('boundary size')
    ax.legend()
    if title is not None:
        figure.suptitle(title)
    return figure
