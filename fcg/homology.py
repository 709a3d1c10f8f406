# -*- coding: utf-8
# pylint: disable=line-too-long
"""Homology as evidence that a bunch of contigs is a chloroplast genome.

The actual search is done by an aligner, which is anything that has an
`align(query_fasta_path)` method returning a `HitSet`. The only one fcg ships
is `fcg.drivers.blast.BLAST`.
"""

import fcg
import fcg.terminal as terminal
import fcg.filesnpaths as filesnpaths

from fcg.fastalib import FastaOutput


__copyright__ = "Copyleft 2016-2026, the fcg developers"
__credits__ = []
__license__ = "GPL 3.0"
__version__ = fcg.__version__
__author__ = "Developers of fcg"
__status__ = "Development"


run = terminal.Run()


class HitSet:
    """Query ids that got at least one hit, in the order they were first reported"""

    def __init__(self, query_ids=None, num_hits=0):
        self.query_ids = []
        self.num_hits = num_hits

        for query_id in (query_ids or []):
            self.add(query_id)


    @classmethod
    def from_tabular_output(cls, output):
        """Tabular BLAST output (`-outfmt 6`), where the first column is the query id"""

        hits = cls()

        for line in output.splitlines():
            if not line.strip() or line.startswith('#'):
                continue

            hits.num_hits += 1
            hits.add(line.split('\t')[0].strip())

        return hits


    def add(self, query_id):
        if query_id not in self.query_ids:
            self.query_ids.append(query_id)


    def __bool__(self):
        return len(self.query_ids) > 0


    def __len__(self):
        return len(self.query_ids)


    def __iter__(self):
        return iter(self.query_ids)


    def __contains__(self, query_id):
        return query_id in self.query_ids


def export_sequences(store, sequence_ids, output_file_path):
    """Store sequences as `>id` records, forward strand, in the order of `sequence_ids`"""

    with FastaOutput(output_file_path) as output:
        for sequence_id in sequence_ids:
            output.store('%d' % sequence_id, store.get_sequence(sequence_id))


def search(store, sequence_ids, aligner, prefix='fcg_query_', run=run):
    """Export `sequence_ids` to a temporary FASTA, run the aligner on it, clean up.

    The temporary file is removed no matter how things went.
    """

    query_fasta_path = filesnpaths.get_temp_file_path(prefix=prefix, suffix='.fa')

    try:
        export_sequences(store, sequence_ids, query_fasta_path)
        hits = aligner.align(query_fasta_path)
    finally:
        filesnpaths.remove_temp_file(query_fasta_path, run=run)

    return hits


class HomologyValidator:
    def __init__(self, store, aligner, run=run):
        self.store = store
        self.aligner = aligner
        self.run = run


    def validate(self, sequence_ids):
        """True if any of the sequences has a hit in the reference database.

        `sequence_ids` may contain plain ids or `OrientedNode`s; strands are
        irrelevant here and every contig is searched once.
        """

        unique_ids = sorted(set([getattr(s, 'sequence_id', s) for s in sequence_ids]))

        hits = search(self.store, unique_ids, self.aligner, prefix='fcg_component_', run=self.run)

        if hits:
            self.run.info('Contigs with hits', ', '.join(hits.query_ids), quiet=not fcg.DEBUG)

        return bool(hits)
