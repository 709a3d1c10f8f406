# -*- coding: utf-8
# pylint: disable=line-too-long
"""Salvaging individual contigs when no circular chloroplast genome comes out"""

import fcg
import fcg.homology as homology
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
P = terminal.pluralize


class PartialRescue:
    def __init__(self, store, aligner, min_seq_len=None, max_seq_len=None, rescue_factor=None, run=run):
        self.store = store
        self.aligner = aligner
        self.run = run

        D = lambda value, default: default if value is None else value
        self.min_seq_len = D(min_seq_len, constants.MINSEQLEN)
        self.max_seq_len = D(max_seq_len, constants.MAXSEQLEN)
        self.rescue_factor = D(rescue_factor, constants.FACTOR4RESCUE)

        self.sanity_check()

        self.min_length = self.min_seq_len / self.rescue_factor


    def sanity_check(self):
        if self.rescue_factor <= 0:
            raise ConfigError(f"The rescue factor must be a positive number (you have {self.rescue_factor}).")


    def candidates(self):
        """Ids of contigs long enough to be worth a search, in id order"""

        return [s.id for s in self.store if self.min_length <= len(s) <= self.max_seq_len]


    def rescue(self):
        """Returns (header, sequence) records for every candidate contig that has a hit"""

        candidates = self.candidates()

        self.run.warning(f"No single circular chloroplast genome could be reconstructed. fcg will now search "
                         f"{P('contig', len(candidates))} between {terminal.pretty_print(int(self.min_length))} and "
                         f"{terminal.pretty_print(self.max_seq_len)} bp individually, and report those that look "
                         f"like pieces of a chloroplast genome.", header="PARTIAL HITS", lc='yellow')

        if not candidates:
            return []

        hits = homology.search(self.store, candidates, self.aligner, prefix='fcg_rescue_', run=self.run)

        records = []
        for query_id in hits:
            try:
                sequence_id = int(query_id)
            except ValueError:
                sequence_id = None

            if sequence_id not in candidates:
                self.run.info_single(f"The aligner reported a hit for '{query_id}', which is not one of the "
                                     f"contigs fcg searched for. Skipping it.", mc='red', level=2)
                continue

            name = self.store.get_name(sequence_id)
            records.append((constants.partial_hit_header_template % name, self.store.get_sequence(sequence_id)))

        self.run.info('Partial hits', len(records), mc='green', nl_after=1)

        return records
