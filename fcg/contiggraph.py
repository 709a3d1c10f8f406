# -*- coding: utf-8
# pylint: disable=line-too-long
"""A strand-aware, directed graph of contigs"""

import networkx as nx

import fcg
import fcg.terminal as terminal

from fcg.errors import GraphError


__copyright__ = "Copyleft 2016-2026, the fcg developers"
__credits__ = []
__license__ = "GPL 3.0"
__version__ = fcg.__version__
__author__ = "Developers of fcg"
__status__ = "Development"


run = terminal.Run()


class ContigGraph:
    """Vertices are `OrientedNode`s, edges come from connectivity hints.

    This is a thin layer on top of a `networkx.DiGraph`, so the rest of the code
    does not have to know about networkx. A hint that shows up more than once
    still results in a single edge.
    """

    def __init__(self, G=None):
        self.G = G if G is not None else nx.DiGraph()


    @classmethod
    def build(cls, store, run=run):
        """Build the graph from the hints of a parsed `SequenceStore`.

        Every name a hint refers to must be a known sequence. If one is not, the
        connectivity may be wrong everywhere, so there is no point in continuing
        with what is left.
        """

        graph = cls()

        for hint in store.hints:
            from_node = store.resolve(hint.from_name, hint.from_rev)
            if from_node is None:
                raise GraphError(f"Unable to find the node '{hint.from_name}'. The connectivity information "
                                 f"refers to a sequence that is not in the input file.")

            graph.add_vertex(from_node)

            for target in hint.targets:
                node = store.resolve(target)
                if node is None:
                    raise GraphError(f"Unable to find the node '{target}' that is connected to '{hint.from_name}'. "
                                     f"The connectivity information refers to a sequence that is not in the input file.")

                graph.add_vertex(node)
                graph.add_edge(from_node, node)

        run.info('num_vertices', len(graph))
        run.info('num_edges', graph.G.number_of_edges())

        return graph


    def add_vertex(self, node):
        if not self.G.has_node(node):
            self.G.add_node(node)


    def add_edge(self, u, v):
        self.G.add_edge(u, v)


    def has_vertex(self, node):
        return self.G.has_node(node)


    def has_edge(self, u, v):
        return self.G.has_edge(u, v)


    def vertices(self):
        return list(self.G.nodes())


    def edges(self):
        return list(self.G.edges())


    def in_degree(self, node):
        return self.G.in_degree(node)


    def out_degree(self, node):
        return self.G.out_degree(node)


    def degree(self, node):
        """In-degree plus out-degree, a self-loop counts twice."""
        return self.G.in_degree(node) + self.G.out_degree(node)


    def sequence_ids(self):
        """Distinct contig ids of the graph, strands ignored."""
        return set([node.sequence_id for node in self.G.nodes()])


    def induced_subgraph(self, nodes):
        """A new graph with exactly `nodes` and every edge between them.

        Nodes that are not in this graph are skipped.
        """

        nodes = [node for node in nodes if self.G.has_node(node)]

        return ContigGraph(self.G.subgraph(nodes).copy())


    def weakly_connected_components(self):
        return [set(component) for component in nx.weakly_connected_components(self.G)]


    def is_cyclic(self):
        return not nx.is_directed_acyclic_graph(self.G)


    def __len__(self):
        return self.G.number_of_nodes()


    def __contains__(self, node):
        return self.G.has_node(node)


    def __str__(self):
        return ','.join(sorted(['%s-%s' % (u, v) for u, v in self.G.edges()]))
