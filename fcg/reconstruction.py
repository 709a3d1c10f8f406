# -*- coding: utf-8
# pylint: disable=line-too-long
"""Turning a single cyclic component into a circular chloroplast genome.

Chloroplast genomes are quadripartite: a large single copy region (LSC), an
inverted repeat (IR), a small single copy region (SSC), and the IR again in
reverse complement before the circle closes at the LSC. Short read assemblers
collapse the two IR copies into a single contig, which is then the most
connected node of the assembly graph. Knowing the IR, the rest is a matter of
finding orientations in which the contigs overlap, stitching them together,
and removing the overlap between the start and the end of the circle.
"""

from collections import namedtuple

import fcg
import fcg.utils as utils
import fcg.terminal as terminal
import fcg.constants as constants

from fcg.errors import ReconstructionError


__copyright__ = "Copyleft 2016-2026, the fcg developers"
__credits__ = []
__license__ = "GPL 3.0"
__version__ = fcg.__version__
__author__ = "Developers of fcg"
__status__ = "Development"


run = terminal.Run()


class OrientationAttempt(namedtuple('OrientationAttempt', ['lsc_reverse', 'ir_reverse'])):
    """One way of joining the LSC to the IR.

    The IR that closes the circle after the SSC is the reverse complement of the
    IR copy that was joined to the LSC.
    """

    __slots__ = ()

    @property
    def final_ir_reverse(self):
        return not self.ir_reverse

    def __str__(self):
        S = lambda reverse: '-' if reverse else '+'
        return 'LSC%s/IR%s' % (S(self.lsc_reverse), S(self.ir_reverse))


# the order matters: the first attempt that yields an overlap wins
ORIENTATION_ATTEMPTS = [OrientationAttempt(lsc_reverse=False, ir_reverse=False),
                        OrientationAttempt(lsc_reverse=False, ir_reverse=True),
                        OrientationAttempt(lsc_reverse=True, ir_reverse=False),
                        OrientationAttempt(lsc_reverse=True, ir_reverse=True)]


def prefix_function(s):
    """pi[i] is the length of the longest proper prefix of s[:i+1] that is also its suffix"""

    pi = [0] * len(s)

    k = 0
    for i in range(1, len(s)):
        while k > 0 and s[i] != s[k]:
            k = pi[k - 1]
        if s[i] == s[k]:
            k += 1
        pi[i] = k

    return pi


def overlap_length(a, b):
    """Largest k such that the last k characters of `a` are the first k characters of `b`.

    Same answer as testing every k from 1 to min(len(a), len(b)) and keeping the
    largest one that matches, but in linear time. Returns 0 if there is no
    overlap at all.
    """

    m = min(len(a), len(b))
    if not m:
        return 0

    pattern = b[:m]
    pi = prefix_function(pattern)

    q = 0
    for ch in a[len(a) - m:]:
        if q == m:
            q = pi[q - 1]
        while q > 0 and pattern[q] != ch:
            q = pi[q - 1]
        if pattern[q] == ch:
            q += 1

    return q


def stitch(a, b, run=None):
    """Merge `b` onto the end of `a` over their longest suffix/prefix overlap.

    Returns an empty string if they do not overlap.
    """

    k = overlap_length(a, b)

    if not k:
        if run:
            run.info_single("No overlap found", level=2, mc='red', overwrite_verbose=False)
        return ''

    assembly = a + b[k:]

    if run:
        run.info_single(f"Found overlap: {utils.abbreviate_sequence(b[:k])} ({k} bp) with resulting assembly "
                        f"length of {len(assembly)} bp ({utils.abbreviate_sequence(assembly)})", level=2, mc='green')

    return assembly


def circularize(seq):
    """Remove the longest stretch at the start of `seq` that is repeated at its end.

    Returns the trimmed sequence and the number of characters removed. The
    repeat can be anything shorter than the sequence itself, i.e.,
    `circularize("ABCXYZABC")` gives `("XYZABC", 3)`.
    """

    if len(seq) < 2:
        return seq, 0

    trim = prefix_function(seq)[-1]

    return seq[trim:], trim


def rank_nodes_by_degree(graph):
    """Nodes of `graph` as (degree, node) tuples, most connected first.

    Ties are broken by the serialized node name in descending order (which
    puts `12'` before `12`, and `9` before `10`). It is not biologically
    meaningful, but it makes the choice reproducible.
    """

    return sorted([(graph.degree(node), node) for node in graph.vertices()],
                  key=lambda x: (x[0], x[1].serialized), reverse=True)


def select_inverted_repeat(graph):
    """Sequence id of the most connected node"""

    ranked = rank_nodes_by_degree(graph)

    if not ranked:
        raise ReconstructionError("An empty graph has no inverted repeat.")

    return ranked[0][1].sequence_id


class ReconstructionResult:
    def __init__(self, sequence, inverted_repeat, lsc, ssc, orientation, overlaps, trimmed):
        self.sequence = sequence
        self.inverted_repeat = inverted_repeat
        self.lsc = lsc
        self.ssc = ssc
        self.orientation = orientation
        self.overlaps = overlaps
        self.trimmed = trimmed

    @property
    def header(self):
        return constants.chloroplast_header

    def as_fasta_records(self):
        return [(self.header, self.sequence)]

    def __len__(self):
        return len(self.sequence)


class GenomeReconstructor:
    def __init__(self, store, run=run):
        self.store = store
        self.run = run


    def get(self, sequence_id, reverse=False):
        return self.store.get_sequence(sequence_id, reverse)


    def assign_regions(self, graph, inverted_repeat):
        """Returns (lsc, ssc) for the two sequences that are not the IR"""

        others = sorted(graph.sequence_ids() - set([inverted_repeat]))

        if len(others) != 2:
            raise ReconstructionError(f"Once the inverted repeat is set aside, there should be exactly two contigs "
                                      f"left for the LSC and the SSC. But there are {len(others)} here :/")

        lsc, ssc = others
        if self.store.get_length(lsc) < self.store.get_length(ssc):
            lsc, ssc = ssc, lsc

        return lsc, ssc


    def join_lsc_and_ir(self, lsc, inverted_repeat):
        """Try orientations in order, return the first (attempt, assembly) that overlaps"""

        for attempt in ORIENTATION_ATTEMPTS:
            self.run.info_single(f"Trying {attempt}", level=1, mc='cyan')

            assembly = stitch(self.get(lsc, attempt.lsc_reverse), self.get(inverted_repeat, attempt.ir_reverse), run=self.run)

            if assembly:
                return attempt, assembly

        raise ReconstructionError("None of the orientations of the LSC and the inverted repeat overlap.")


    def reconstruct(self, graph):
        """Returns a `ReconstructionResult` for the component `graph`.

        Raises `ReconstructionError` if the component does not look like
        LSC-IR-SSC-IR, or if any of the joins fails.
        """

        # find the node with the highest connectivity. This should be the inverted repeat
        inverted_repeat = select_inverted_repeat(graph)

        self.run.info('Distinct contigs', len(graph.sequence_ids()))
        self.run.info('inverted_repeat', self._describe(inverted_repeat))

        lsc, ssc = self.assign_regions(graph, inverted_repeat)

        self.run.info('lsc', self._describe(lsc))
        self.run.info('ssc', self._describe(ssc))

        attempt, assembly = self.join_lsc_and_ir(lsc, inverted_repeat)
        overlaps = [len(self.get(lsc)) + len(self.get(inverted_repeat)) - len(assembly)]

        for sequence_id, reverse in [(ssc, False), (inverted_repeat, attempt.final_ir_reverse)]:
            extended = stitch(assembly, self.get(sequence_id, reverse), run=self.run)

            if not extended:
                raise ReconstructionError(f"The LSC and the inverted repeat could be joined ({attempt}), but then the "
                                          f"contig '{self.store.get_name(sequence_id)}' did not overlap with the assembly.")

            overlaps.append(len(assembly) + len(self.get(sequence_id)) - len(extended))
            assembly = extended

        sequence, trimmed = circularize(assembly)

        if trimmed:
            self.run.info_single(f"An overlap between start/end detected and removed: length={trimmed}; "
                                 f"sequence='{utils.abbreviate_sequence(assembly[:trimmed])}'", nl_before=1)
        else:
            self.run.info_single("No overlap between start/end was detected or removed!", nl_before=1)

        self.run.info('Orientation', str(attempt))
        self.run.info('Overlaps (bp)', ', '.join([str(o) for o in overlaps]))
        self.run.info('Chloroplast genome length', len(sequence), mc='green', nl_after=1)

        return ReconstructionResult(sequence, inverted_repeat, lsc, ssc, attempt, overlaps, trimmed)


    def _describe(self, sequence_id):
        return "%s (id: %d, %s bp)" % (self.store.get_name(sequence_id), sequence_id, terminal.pretty_print(self.store.get_length(sequence_id)))
