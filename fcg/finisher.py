# -*- coding: utf-8
# pylint: disable=line-too-long
"""Finishing chloroplast genomes from annotated assembly graphs.

    >>> import argparse
    >>> from fcg.finisher import ChloroplastFinisher
    >>> args = argparse.Namespace(infile='contigs.fa', outfile='chloroplast.fa')
    >>> ChloroplastFinisher(args).process()
"""

import fcg
import fcg.terminal as terminal
import fcg.constants as constants
import fcg.filesnpaths as filesnpaths

from fcg.drivers import get_aligner
from fcg.rescue import PartialRescue
from fcg.fastalib import FastaOutput
from fcg.contiggraph import ContigGraph
from fcg.sequencestore import SequenceStore
from fcg.homology import HomologyValidator
from fcg.components import ComponentAnalyzer
from fcg.reconstruction import GenomeReconstructor
from fcg.errors import ConfigError, ReconstructionError


__copyright__ = "Copyleft 2016-2026, the fcg developers"
__credits__ = []
__license__ = "GPL 3.0"
__version__ = fcg.__version__
__author__ = "Developers of fcg"
__status__ = "Development"


run = terminal.Run()
progress = terminal.Progress()
P = terminal.pluralize


class ChloroplastFinisher:
    def __init__(self, args, run=run, progress=progress, aligner=None):
        """Takes an `args` object with at least `infile` and `outfile`.

        Anything else missing from `args` falls back to the defaults in
        `fcg.constants`. If `aligner` is None, a BLAST driver for `args.blastdb`
        is created when it is first needed.
        """

        self.args = args
        self.run = run
        self.progress = progress

        A = lambda x: args.__dict__[x] if x in args.__dict__ else None
        D = lambda x, default: default if A(x) is None else A(x)
        self.infile = A('infile')
        self.outfile = A('outfile')
        self.blastdb = D('blastdb', fcg.D['blastdb'][1]['default'])
        self.num_threads = D('num_threads', constants.default_num_threads)
        self.min_nodes = D('min_nodes', constants.MINNODES)
        self.max_nodes = D('max_nodes', constants.MAXNODES)
        self.min_seq_len = D('min_seq_len', constants.MINSEQLEN)
        self.max_seq_len = D('max_seq_len', constants.MAXSEQLEN)
        self.rescue_factor = D('rescue_factor', constants.FACTOR4RESCUE)

        self.aligner = aligner

        self.store = SequenceStore(run=self.run)
        self.graph = None
        self.reports = []
        self.result = None
        self.records = []

        self.sanity_check()


    def sanity_check(self):
        if not self.infile:
            raise ConfigError("You must provide an input FASTA file for this to work.")

        if not self.outfile:
            raise ConfigError("You must provide an output file path, even if you are not expecting to find anything.")

        filesnpaths.is_file_readable(self.infile)
        filesnpaths.is_output_file_writable(self.outfile)

        for param, value in [('number of threads', self.num_threads), ('minimum number of nodes', self.min_nodes),
                             ('maximum number of nodes', self.max_nodes), ('maximum sequence length', self.max_seq_len),
                             ('rescue factor', self.rescue_factor)]:
            if not isinstance(value, int) or value <= 0:
                raise ConfigError(f"The {param} must be a positive integer. `{value}` is not it :/")

        if self.min_seq_len < 0:
            raise ConfigError("The minimum sequence length can't be negative.")

        if self.min_nodes > self.max_nodes:
            raise ConfigError(f"The minimum number of nodes ({self.min_nodes}) can't be larger than the maximum "
                              f"number of nodes ({self.max_nodes}).")

        if self.min_seq_len > self.max_seq_len:
            raise ConfigError(f"The minimum sequence length ({self.min_seq_len}) can't be larger than the maximum "
                              f"sequence length ({self.max_seq_len}).")


    def get_aligner(self):
        if not self.aligner:
            self.aligner = get_aligner(self.blastdb, num_threads=self.num_threads, run=self.run, progress=self.progress)

        return self.aligner


    def find_candidates(self, components):
        """Components with at least one homology hit, with their reports updated"""

        validator = HomologyValidator(self.store, self.get_aligner(), run=self.run)
        reports = dict([(r.index, r) for r in self.reports])

        candidates = []
        for component in components:
            self.run.info_single(f"Searching the {P('contig', len(component.sequence_ids))} of component "
                                 f"{component.index} for homology", mc='cyan')

            has_hits = validator.validate(component.sequence_ids)
            reports[component.index].homology = has_hits

            if has_hits:
                candidates.append(component)
            else:
                reports[component.index].dropped_because = 'no homology'

        self.run.info('num_candidates', len(candidates), nl_before=1, nl_after=1)

        return candidates


    def report_components(self):
        if not fcg.DEBUG or not self.reports:
            return

        header = ['component', 'nodes', 'contigs', 'length', 'cyclic', 'homology', 'status']
        fcg.TABULATE([r.as_row() for r in self.reports], header)


    def reconstruct(self, component):
        """A `ReconstructionResult`, or None if the component could not be turned into a circle"""

        reconstructor = GenomeReconstructor(self.store, run=self.run)

        try:
            return reconstructor.reconstruct(component.graph)
        except ReconstructionError as e:
            self.run.warning(e.clear_text(), header="RECONSTRUCTION FAILED", lc='yellow')
            return None


    def rescue(self):
        rescue = PartialRescue(self.store, self.get_aligner(), min_seq_len=self.min_seq_len, max_seq_len=self.max_seq_len,
                               rescue_factor=self.rescue_factor, run=self.run)

        return rescue.rescue()


    def store_records(self):
        with FastaOutput(self.outfile) as output:
            for header, sequence in self.records:
                output.store(header, sequence, split=False)

        self.run.info('Output file', self.outfile, mc='green')
        self.run.info('Records in output', len(self.records), mc='green')


    def process(self):
        """Does everything, and returns the list of (header, sequence) records it stored"""

        self.store.parse(self.infile)

        self.graph = ContigGraph.build(self.store, run=self.run)

        analyzer = ComponentAnalyzer(self.store, self.graph, min_nodes=self.min_nodes, max_nodes=self.max_nodes,
                                     min_seq_len=self.min_seq_len, max_seq_len=self.max_seq_len, run=self.run,
                                     progress=self.progress)
        components = analyzer.screen()
        self.reports = analyzer.reports

        candidates = self.find_candidates(components) if components else []

        self.report_components()

        if len(candidates) == 1:
            self.result = self.reconstruct(candidates[0])
        elif len(candidates) > 1:
            self.run.warning(f"There are {len(candidates)} cyclic components with homology hits. fcg can only "
                             f"reconstruct a chloroplast genome when there is exactly one of them.", lc='yellow')

        if self.result:
            self.records = self.result.as_fasta_records()
        else:
            self.records = self.rescue()

        self.store_records()

        return self.records
