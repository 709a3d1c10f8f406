# -*- coding: utf-8
# pylint: disable=line-too-long
"""Tests for reading and writing FASTA files"""

import os
import gzip
import shutil
import tempfile
import unittest

import fcg
import fcg.utils as utils

from fcg.fastalib import FastaOutput, SequenceSource

__copyright__ = "Copyleft 2016-2026, the fcg developers"
__credits__ = []
__license__ = "GPL 3.0"
__version__ = fcg.__version__
__author__ = "Developers of fcg"


class TestFastalib(unittest.TestCase):
    def setUp(self):
        self.output_dir = tempfile.mkdtemp()


    def tearDown(self):
        shutil.rmtree(self.output_dir)


    def test_sequences_are_stored_on_a_single_line(self):
        path = os.path.join(self.output_dir, 'out.fa')

        with FastaOutput(path) as output:
            output.store('first', 'A' * 200)
            output.store('second:with,hints', 'acgt')

        with open(path) as f:
            self.assertEqual(f.read(), '>first\n%s\n>second:with,hints\nacgt\n' % ('A' * 200))


    def test_split(self):
        path = os.path.join(self.output_dir, 'out.fa')

        with FastaOutput(path) as output:
            output.store('x', 'A' * 100, split=True)

        with open(path) as f:
            self.assertEqual(f.read().split('\n'), ['>x', 'A' * 80, 'A' * 20, ''])


    def test_read_back(self):
        path = os.path.join(self.output_dir, 'out.fa')

        with FastaOutput(path) as output:
            output.store("1:2'", 'ACGT')
            output.store('2', 'GG')

        self.assertEqual(list(SequenceSource(path)), [("1:2'", 'ACGT'), ('2', 'GG')])


    def test_compressed_input(self):
        path = os.path.join(self.output_dir, 'in.fa.gz')

        with gzip.open(path, 'wt') as f:
            f.write('>a\nAC\nGT\n>b\n\n>c\nTT\n')

        self.assertEqual(list(SequenceSource(path)), [('a', 'ACGT'), ('b', ''), ('c', 'TT')])


    def test_lines_before_the_first_defline_are_ignored(self):
        self.assertEqual(list(SequenceSource(['ACGT\n', '>a\n', 'T\n'])), [('a', 'T')])


class TestSequenceUtils(unittest.TestCase):
    def test_abbreviate_sequence(self):
        self.assertEqual(utils.abbreviate_sequence('ACGT'), 'ACGT')
        self.assertEqual(utils.abbreviate_sequence('A' * 10 + 'C' * 30 + 'G' * 10), 'A' * 10 + '[...]' + 'G' * 10)


    def test_format_cmdline(self):
        self.assertEqual(utils.format_cmdline(['tblastx', '-evalue', 1e-10]), ['tblastx', '-evalue', '1e-10'])
        self.assertEqual(utils.format_cmdline('makeblastdb -dbtype nucl'), ['makeblastdb', '-dbtype', 'nucl'])


if __name__ == '__main__':
    unittest.main()
