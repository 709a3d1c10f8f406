# -*- coding: utf-8
# pylint: disable=line-too-long
"""Screening weakly connected components of the contig graph for genome-like ones"""

import fcg
import fcg.terminal as terminal
import fcg.constants as constants

from fcg.errors import ConfigError


__copyright__ = "Copyleft 2016-2026, the fcg developers"
__credits__ = []
__license__ = "GPL 3.0"
__version__ = fcg.__version__
__author__ = "Developers of fcg"
__status__ = "Development"


run = terminal.Run()
progress = terminal.Progress()
P = terminal.pluralize


class Component:
    """A weakly connected component, materialized as an induced subgraph."""

    def __init__(self, index, nodes, graph, total_length):
        self.index = index
        self.nodes = set(nodes)
        self.graph = graph
        self.total_length = total_length

    @property
    def sequence_ids(self):
        return set([node.sequence_id for node in self.nodes])

    def __len__(self):
        return len(self.nodes)

    def __repr__(self):
        return "Component(index=%d, nodes=%d, length=%d)" % (self.index, len(self.nodes), self.total_length)


class ComponentReport:
    def __init__(self, index, num_nodes, num_sequences, total_length=None, cyclic=None, homology=None, dropped_because=None):
        self.index = index
        self.num_nodes = num_nodes
        self.num_sequences = num_sequences
        self.total_length = total_length
        self.cyclic = cyclic
        self.homology = homology
        self.dropped_because = dropped_because

    @property
    def kept(self):
        return self.dropped_because is None

    def as_row(self):
        N = lambda x: '-' if x is None else x
        return [self.index, self.num_nodes, self.num_sequences, N(self.total_length), N(self.cyclic), N(self.homology), self.dropped_because or 'kept']


class ComponentAnalyzer:
    def __init__(self, store, graph, min_nodes=None, max_nodes=None, min_seq_len=None, max_seq_len=None, run=run, progress=progress):
        self.store = store
        self.graph = graph
        self.run = run
        self.progress = progress

        D = lambda value, default: default if value is None else value
        self.min_nodes = D(min_nodes, constants.MINNODES)
        self.max_nodes = D(max_nodes, constants.MAXNODES)
        self.min_seq_len = D(min_seq_len, constants.MINSEQLEN)
        self.max_seq_len = D(max_seq_len, constants.MAXSEQLEN)

        self.reports = []

        self.sanity_check()


    def sanity_check(self):
        if self.min_nodes < 1:
            raise ConfigError("The minimum number of nodes for a component must be at least 1.")

        if self.min_nodes > self.max_nodes:
            raise ConfigError(f"The minimum number of nodes ({self.min_nodes}) is larger than the maximum "
                              f"number of nodes ({self.max_nodes}). Nothing would ever pass that filter.")

        if self.min_seq_len < 0:
            raise ConfigError("The minimum sequence length can't be negative.")

        if self.min_seq_len > self.max_seq_len:
            raise ConfigError(f"The minimum sequence length ({self.min_seq_len}) is larger than the maximum "
                              f"sequence length ({self.max_seq_len}).")


    def weakly_connected_components(self):
        return self.graph.weakly_connected_components()


    def total_length(self, graph):
        """Sum of the lengths of distinct contigs in `graph`, each counted once regardless of strand."""
        return sum([self.store.get_length(sequence_id) for sequence_id in graph.sequence_ids()])


    def is_size_ok(self, num_nodes):
        return self.min_nodes <= num_nodes <= self.max_nodes


    def is_length_ok(self, total_length):
        return self.min_seq_len <= total_length <= self.max_seq_len


    def examine(self, index, nodes):
        """Returns a `Component` if `nodes` pass all filters, None otherwise.

        Either way, a report on the component is appended to `self.reports`.
        """

        num_sequences = len(set([node.sequence_id for node in nodes]))
        report = ComponentReport(index, len(nodes), num_sequences)
        self.reports.append(report)

        if not self.is_size_ok(len(nodes)):
            report.dropped_because = 'number of nodes'
            return None

        subgraph = self.graph.induced_subgraph(nodes)

        report.total_length = self.total_length(subgraph)
        if not self.is_length_ok(report.total_length):
            report.dropped_because = 'total length'
            return None

        report.cyclic = subgraph.is_cyclic()
        if not report.cyclic:
            report.dropped_because = 'not cyclic'
            return None

        return Component(index, nodes, subgraph, report.total_length)


    def screen(self):
        """Returns the components that pass the size, length, and cyclicity filters"""

        self.reports = []
        components = self.weakly_connected_components()

        self.run.info('num_components', len(components))

        survivors = []

        self.progress.new('WCC', progress_total_items=len(components))
        for index, nodes in enumerate(components):
            self.progress.update(f"{index + 1} of {len(components)} ...", increment=True)

            component = self.examine(index, nodes)
            if component:
                survivors.append(component)

        self.progress.end()

        for report in self.reports:
            if not report.kept:
                self.run.info(f"Component {report.index} ({P('node', report.num_nodes)})",
                              f"dropped ({report.dropped_because})", quiet=not fcg.DEBUG, display_only=True)

        self.run.info_single(f"{P('component', len(survivors))} out of {len(components)} passed the size, "
                             f"length, and cyclicity filters.", nl_before=1, nl_after=1)

        return survivors
