# -*- coding: utf-8
# pylint: disable=line-too-long
"""Tests for parsing annotated FASTA files into a SequenceStore"""

import os
import shutil
import tempfile
import unittest

import fcg
import fcg.utils as utils

from fcg.errors import FilesNPathsError, SequenceNotFoundError
from fcg.sequencestore import OrientedNode, SequenceStore, parse_header, reverse_complement

from fcg.tests.unit.helpers import silent_run, store_from_lines

__copyright__ = "Copyleft 2016-2026, the fcg developers"
__credits__ = []
__license__ = "GPL 3.0"
__version__ = fcg.__version__
__author__ = "Developers of fcg"


class TestParseHeader(unittest.TestCase):
    def test_plain_name(self):
        self.assertEqual(parse_header('contig_1'), ('contig_1', False, []))


    def test_targets_and_trailing_semicolon(self):
        self.assertEqual(parse_header("3:5',7;"), ('3', False, ["5'", '7']))


    def test_reverse_marker_on_the_name(self):
        self.assertEqual(parse_header("3':1"), ('3', True, ['1']))


    def test_empty_targets_are_ignored(self):
        self.assertEqual(parse_header("x::y,,z;"), ('x', False, ['y', 'z']))
        self.assertEqual(parse_header("x:"), ('x', False, []))


class TestSequenceStore(unittest.TestCase):
    def setUp(self):
        self.lines = ['this line comes before any header\n',
                      ">a:b,c';\n",
                      'ACGT\n',
                      'acgn\r\n',
                      '>b\n',
                      'TTTT\n',
                      ">c':a\n",
                      'GGCC\n',
                      '>a:c\n',
                      'CCCC\n']

        self.store = store_from_lines(self.lines)


    def test_ids_are_assigned_in_first_seen_order(self):
        self.assertEqual(self.store.name_to_id, {'a': 0, 'b': 1, 'c': 2})
        self.assertEqual([s.name for s in self.store], ['a', 'b', 'c'])
        self.assertEqual(len(self.store), 3)


    def test_bases_are_kept_as_they_are(self):
        self.assertEqual(self.store.get_sequence(0), 'ACGTacgn')
        self.assertEqual(self.store.get_sequence(2), 'GGCC')


    def test_repeated_header_does_not_open_a_sequence(self):
        # the second `>a` carries 'CCCC', which must go nowhere
        self.assertEqual(self.store.get_sequence(0), 'ACGTacgn')
        self.assertEqual(self.store.total_length(), 16)


    def test_hints_are_recorded_for_every_header_with_targets(self):
        hints = [(h.from_name, h.from_rev, h.targets) for h in self.store.hints]

        self.assertEqual(hints, [('a', False, ['b', "c'"]),
                                 ('c', True, ['a']),
                                 ('a', False, ['c'])])


    def test_reverse_strand(self):
        self.assertEqual(self.store.get_sequence(0, reverse=True), 'ncgtACGT')
        self.assertEqual(self.store.get_sequence_by_node(OrientedNode(1, True)), 'AAAA')


    def test_unknown_id(self):
        with self.assertRaises(SequenceNotFoundError):
            self.store.get_sequence(3)

        with self.assertRaises(SequenceNotFoundError):
            self.store.get_name(-1)


    def test_resolve(self):
        self.assertEqual(self.store.resolve("c'"), OrientedNode(2, True))
        self.assertEqual(self.store.resolve('b'), OrientedNode(1, False))
        self.assertEqual(self.store.resolve('b', reverse=True), OrientedNode(1, True))
        self.assertIsNone(self.store.resolve('nope'))


    def test_parse_returns_what_it_keeps(self):
        store = SequenceStore(run=silent_run)
        sequences, name_to_id, hints = store.parse(self.lines)

        self.assertIs(sequences, store.sequences)
        self.assertIs(name_to_id, store.name_to_id)
        self.assertIs(hints, store.hints)


class TestSequenceStoreFromFile(unittest.TestCase):
    def setUp(self):
        self.output_dir = tempfile.mkdtemp()


    def tearDown(self):
        shutil.rmtree(self.output_dir)


    def test_parse_a_file(self):
        path = os.path.join(self.output_dir, 'contigs.fa')
        with open(path, 'w') as f:
            f.write(">1:2\nAC\nGT\n>2:1'\nTTT\n")

        store = SequenceStore(run=silent_run)
        store.parse(path)

        self.assertEqual(store.get_sequence(0), 'ACGT')
        self.assertEqual(store.get_sequence(1), 'TTT')
        self.assertEqual(len(store.hints), 2)


    def test_missing_file(self):
        with self.assertRaises(FilesNPathsError):
            SequenceStore(run=silent_run).parse(os.path.join(self.output_dir, 'there_is_no_such_file.fa'))


class TestReverseComplement(unittest.TestCase):
    def test_case_is_preserved(self):
        self.assertEqual(reverse_complement('AAcg'), 'cgTT')


    def test_involution(self):
        seq = 'ACGTRYMKBDHVNacgtrymkbdhvn-*'
        self.assertEqual(reverse_complement(reverse_complement(seq)), seq)


    def test_other_characters_are_untouched(self):
        self.assertEqual(reverse_complement('N-A'), 'T-N')


    def test_same_as_utils(self):
        self.assertEqual(reverse_complement('GATTACA'), utils.rev_comp('GATTACA'))
        self.assertEqual(reverse_complement('GATTACA'), 'TGTAATC')


class TestOrientedNode(unittest.TestCase):
    def test_serialization(self):
        self.assertEqual(str(OrientedNode(3)), '3')
        self.assertEqual(str(OrientedNode(3, True)), "3'")
        self.assertEqual(OrientedNode.from_serialized("12'"), OrientedNode(12, True))
        self.assertEqual(OrientedNode.from_serialized('12'), OrientedNode(12, False))


    def test_flipped(self):
        self.assertEqual(OrientedNode(3).flipped(), OrientedNode(3, True))
        self.assertEqual(OrientedNode(3, True).flipped().flipped(), OrientedNode(3, True))


if __name__ == '__main__':
    unittest.main()
