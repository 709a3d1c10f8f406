# -*- coding: utf-8
# pylint: disable=line-too-long
"""Things more than one test module needs"""

import random

import fcg
import fcg.utils as utils
import fcg.terminal as terminal

from fcg.homology import HitSet
from fcg.fastalib import SequenceSource
from fcg.sequencestore import SequenceStore


__copyright__ = "Copyleft 2016-2026, the fcg developers"
__credits__ = []
__license__ = "GPL 3.0"
__version__ = fcg.__version__
__author__ = "Developers of fcg"


silent_run = terminal.Run(verbose=False)
silent_progress = terminal.Progress(verbose=False)


class StubAligner:
    """Stands in for BLAST: remembers what it was asked, reports hits for `hit_ids`.

    If `hit_ids` is None, every query gets a hit. Each call to `align` appends
    the list of (query id, sequence) tuples it found in the query file to
    `self.queries`, and the path of that file to `self.paths`.
    """

    def __init__(self, hit_ids=None, extra_hits=None, exception=None):
        self.hit_ids = hit_ids
        self.extra_hits = extra_hits or []
        self.exception = exception

        self.queries = []
        self.paths = []


    def align(self, query_fasta):
        self.paths.append(query_fasta)
        self.queries.append(list(SequenceSource(query_fasta)))

        if self.exception:
            raise self.exception

        query_ids = [query_id for query_id, _ in self.queries[-1]]

        if self.hit_ids is None:
            hits = query_ids
        else:
            hits = [h for h in self.hit_ids if h in query_ids]

        return HitSet(hits + self.extra_hits, num_hits=len(hits) + len(self.extra_hits))


    @property
    def num_calls(self):
        return len(self.queries)


def random_sequence(rng, length):
    return ''.join(rng.choice('ACGT') for _ in range(length))


def store_from_lines(lines):
    store = SequenceStore(run=silent_run)
    store.parse(lines)
    return store


def fasta_lines(records):
    """Turns (defline, sequence) tuples into lines, sequence lines are split at 60 characters"""

    lines = []
    for defline, sequence in records:
        lines.append('>%s\n' % defline)
        for i in range(0, len(sequence), 60):
            lines.append(sequence[i:i + 60] + '\n')

    return lines


def write_fasta(path, records):
    with open(path, 'w') as f:
        f.write(''.join(fasta_lines(records)))


class ChloroplastContigs:
    """LSC, IR, and SSC contigs that overlap the way a real chloroplast would.

    Joining LSC+ and IR+, then SSC+, then IR- gives the circle, and the start of
    the LSC repeats the last `trim` bases of IR-.
    """

    def __init__(self, seed=42, lsc_length=80000, ir_length=20000, ssc_length=15000, overlaps=(100, 60, 80), trim=40):
        rng = random.Random(seed)

        self.overlaps = list(overlaps)
        self.trim = trim

        o1, o2, o3 = self.overlaps

        self.ir = random_sequence(rng, ir_length)
        ir_rc = utils.rev_comp(self.ir)

        self.lsc = ir_rc[-trim:] + random_sequence(rng, lsc_length - trim - o1) + self.ir[:o1]
        self.ssc = self.ir[-o2:] + random_sequence(rng, ssc_length - o2 - o3) + ir_rc[:o3]

        self.expected_length = len(self.lsc) + 2 * len(self.ir) + len(self.ssc) - sum(self.overlaps) - trim


    def records(self):
        """The contigs with the connectivity of an assembly graph in their headers.

        The IR is the most connected node: it is followed by both strands of the
        SSC, both of which are followed by the reverse complement of the IR.
        """

        return [("lsc:ir", self.lsc),
                ("ir:ssc,ssc'", self.ir),
                ("ssc:ir'", self.ssc),
                ("ssc':ir'", ''),
                ("ir':lsc;", '')]


    def lines(self):
        return fasta_lines(self.records())
