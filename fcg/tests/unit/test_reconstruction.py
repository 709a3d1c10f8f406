# -*- coding: utf-8
# pylint: disable=line-too-long
"""Tests for stitching, circularization, and the reconstruction of a chloroplast genome"""

import random
import unittest

import fcg
import fcg.utils as utils
import fcg.constants as constants

from fcg.errors import ReconstructionError
from fcg.contiggraph import ContigGraph
from fcg.sequencestore import OrientedNode as N
from fcg.reconstruction import (ORIENTATION_ATTEMPTS, GenomeReconstructor, overlap_length, stitch, circularize,
                                rank_nodes_by_degree, select_inverted_repeat)

from fcg.tests.unit.helpers import silent_run, store_from_lines, fasta_lines, ChloroplastContigs

__copyright__ = "Copyleft 2016-2026, the fcg developers"
__credits__ = []
__license__ = "GPL 3.0"
__version__ = fcg.__version__
__author__ = "Developers of fcg"


def overlap_length_the_slow_way(a, b):
    k = 0
    for i in range(1, min(len(a), len(b)) + 1):
        if a[-i:] == b[:i]:
            k = i
    return k


def graph_from_edges(edges):
    graph = ContigGraph()
    for u, v in edges:
        graph.add_vertex(u)
        graph.add_vertex(v)
        graph.add_edge(u, v)
    return graph


class TestStitch(unittest.TestCase):
    def test_simple_overlap(self):
        self.assertEqual(overlap_length('ACGTT', 'TTGA'), 2)
        self.assertEqual(stitch('ACGTT', 'TTGA'), 'ACGTTGA')


    def test_no_overlap(self):
        self.assertEqual(overlap_length('AAAA', 'CCCC'), 0)
        self.assertEqual(stitch('AAAA', 'CCCC'), '')


    def test_empty_input(self):
        self.assertEqual(stitch('', 'ACGT'), '')
        self.assertEqual(stitch('ACGT', ''), '')


    def test_the_longest_overlap_wins(self):
        self.assertEqual(overlap_length('XAAAA', 'AAAAY'), 4)
        self.assertEqual(overlap_length('ABAB', 'ABABAB'), 4)


    def test_one_contains_the_other(self):
        self.assertEqual(stitch('ACGT', 'ACGT'), 'ACGT')
        self.assertEqual(stitch('GT', 'GTCC'), 'GTCC')
        self.assertEqual(stitch('TTGT', 'GT'), 'TTGT')


    def test_same_as_the_slow_way(self):
        rng = random.Random(7)

        for _ in range(2000):
            a = ''.join(rng.choice('AB') for _ in range(rng.randint(0, 12)))
            b = ''.join(rng.choice('AB') for _ in range(rng.randint(0, 12)))

            k = overlap_length_the_slow_way(a, b)

            self.assertEqual(overlap_length(a, b), k, msg="a=%s b=%s" % (a, b))
            self.assertEqual(stitch(a, b), a + b[k:] if k else '')


    def test_no_invented_bases(self):
        rng = random.Random(11)

        for _ in range(200):
            a = ''.join(rng.choice('ACGT') for _ in range(rng.randint(1, 30)))
            b = ''.join(rng.choice('ACGT') for _ in range(rng.randint(1, 30)))

            s = stitch(a, b)
            if s:
                self.assertTrue(s.startswith(a))
                self.assertTrue(s.endswith(b))
                self.assertEqual(len(s), len(a) + len(b) - overlap_length(a, b))


class TestCircularize(unittest.TestCase):
    def test_repeat_at_both_ends(self):
        self.assertEqual(circularize('ABCXYZABC'), ('XYZABC', 3))


    def test_nothing_to_remove(self):
        self.assertEqual(circularize('ABCD'), ('ABCD', 0))
        self.assertEqual(circularize('A'), ('A', 0))
        self.assertEqual(circularize(''), ('', 0))


    def test_the_repeat_must_be_shorter_than_the_sequence(self):
        self.assertEqual(circularize('AAAA'), ('A', 3))
        self.assertEqual(circularize('ABAB'), ('AB', 2))


class TestInvertedRepeatSelection(unittest.TestCase):
    def test_highest_degree_wins(self):
        graph = graph_from_edges([(N(0), N(1)), (N(1), N(2)), (N(1), N(3)), (N(3), N(0))])

        self.assertEqual(select_inverted_repeat(graph), 1)


    def test_ties_go_to_the_larger_string(self):
        # '9' > '10' as strings
        graph = graph_from_edges([(N(9), N(10)), (N(10), N(9))])
        self.assertEqual(select_inverted_repeat(graph), 9)

        # "3'" > '3' as strings
        graph = graph_from_edges([(N(3), N(3, True)), (N(3, True), N(3))])
        self.assertEqual(rank_nodes_by_degree(graph)[0], (2, N(3, True)))


    def test_empty_graph(self):
        with self.assertRaises(ReconstructionError):
            select_inverted_repeat(ContigGraph())


class TestOrientationAttempts(unittest.TestCase):
    def test_order(self):
        self.assertEqual([(a.lsc_reverse, a.ir_reverse) for a in ORIENTATION_ATTEMPTS],
                         [(False, False), (False, True), (True, False), (True, True)])


    def test_the_second_inverted_repeat_is_the_other_strand(self):
        self.assertEqual([a.final_ir_reverse for a in ORIENTATION_ATTEMPTS], [True, False, True, False])


    def test_string(self):
        self.assertEqual(str(ORIENTATION_ATTEMPTS[1]), 'LSC+/IR-')


class TestGenomeReconstructor(unittest.TestCase):
    def reconstruct(self, lines):
        store = store_from_lines(lines)
        graph = ContigGraph.build(store, run=silent_run)
        return store, GenomeReconstructor(store, run=silent_run).reconstruct(graph)


    def test_quadripartite_genome(self):
        contigs = ChloroplastContigs()
        store, result = self.reconstruct(contigs.lines())

        self.assertEqual(store.get_name(result.inverted_repeat), 'ir')
        self.assertEqual(store.get_name(result.lsc), 'lsc')
        self.assertEqual(store.get_name(result.ssc), 'ssc')

        self.assertEqual(result.orientation, ORIENTATION_ATTEMPTS[0])
        self.assertEqual(result.overlaps, contigs.overlaps)
        self.assertEqual(result.trimmed, contigs.trim)

        self.assertEqual(len(result), 80000 + 20000 + 15000 + 20000 - sum(result.overlaps) - result.trimmed)
        self.assertEqual(len(result), contigs.expected_length)

        # the circle starts right after the bit of IR that was trimmed from the LSC
        self.assertTrue(result.sequence.startswith(contigs.lsc[contigs.trim:]))
        self.assertTrue(result.sequence.endswith(utils.rev_comp(contigs.ir)))


    def test_fasta_record(self):
        contigs = ChloroplastContigs(seed=3)
        _, result = self.reconstruct(contigs.lines())

        header, sequence = result.as_fasta_records()[0]

        self.assertEqual(header, constants.chloroplast_header)
        self.assertEqual(sequence, result.sequence)


    def test_second_orientation(self):
        # the LSC has no G, and the IR starts with one, so LSC+/IR+ can't overlap.
        # LSC+/IR- overlap over 'AT', and everything else over two bases as well.
        records = [('lsc:ir', 'TTCACAAT'),
                   ("ir:ssc,ssc'", 'GGATCCAT'),
                   ("ssc:ir'", 'CCTTGG'),
                   ("ssc':ir'", ''),
                   ("ir':lsc", '')]

        store, result = self.reconstruct(fasta_lines(records))

        self.assertEqual(result.orientation, ORIENTATION_ATTEMPTS[1])
        self.assertEqual(result.overlaps, [2, 2, 2])
        self.assertEqual(result.trimmed, 1)
        self.assertEqual(result.sequence, 'TCACAATGGATCCTTGGATCCAT')


    def test_too_many_contigs(self):
        records = [('a:b', 'ACGT'), ('b:c', 'ACGT'), ('c:d', 'ACGT'), ('d:b', 'ACGT')]

        with self.assertRaises(ReconstructionError):
            self.reconstruct(fasta_lines(records))


    def test_nothing_overlaps(self):
        records = [('lsc:ir', 'AAAAAAAA'),
                   ("ir:ssc,ssc'", 'GGGG'),
                   ("ssc:ir'", 'TTT'),
                   ("ssc':ir'", ''),
                   ("ir':lsc", '')]

        with self.assertRaises(ReconstructionError):
            self.reconstruct(fasta_lines(records))


    def test_ssc_does_not_overlap(self):
        records = [('lsc:ir', 'AAAAAAAC'),
                   ("ir:ssc,ssc'", 'CGGGG'),
                   ("ssc:ir'", 'TTT'),
                   ("ssc':ir'", ''),
                   ("ir':lsc", '')]

        with self.assertRaises(ReconstructionError):
            self.reconstruct(fasta_lines(records))


if __name__ == '__main__':
    unittest.main()
