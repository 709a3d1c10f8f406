# coding: utf-8
"""Interface to NCBI's BLAST."""

import os
import glob

import fcg
import fcg.utils as utils
import fcg.terminal as terminal
import fcg.constants as constants
import fcg.filesnpaths as filesnpaths

from fcg.homology import HitSet
from fcg.errors import CommandError, FilesNPathsError


__copyright__ = "Copyleft 2016-2026, the fcg developers"
__credits__ = []
__license__ = "GPL 3.0"
__version__ = fcg.__version__
__author__ = "Developers of fcg"


run = terminal.Run()
progress = terminal.Progress()


class BLAST:
    def __init__(self, target_db, search_program=constants.blast_search_program, run=run, progress=progress, num_threads=constants.default_num_threads):
        """BLAST driver.

           `target_db` is the path BLAST knows the reference database by. If you only have
           X.nhr, X.nin, and X.nsq files, set it to '/path/to/X'. If you have a FASTA file
           that was never formatted, set it to the FASTA file and the database will be
           generated next to it the first time it is needed.
        """
        self.run = run
        self.progress = progress

        self.target_db = target_db
        self.search_program = search_program
        self.num_threads = num_threads
        self.evalue = constants.blast_evalue
        self.num_alignments = constants.blast_max_alignments_per_query
        self.outfmt = '6 qseqid sseqid evalue bitscore'

        self.log_file_path = filesnpaths.get_temp_file_path(prefix='fcg_blast_log_', suffix='.txt')

        filesnpaths.is_program_exists(self.search_program)


    def is_db_formatted(self):
        return bool(glob.glob(self.target_db + '.nin') or glob.glob(self.target_db + '.*.nin') or os.path.exists(self.target_db + '.nal'))


    def check_db(self):
        if self.is_db_formatted():
            return

        if not os.path.exists(self.target_db):
            raise FilesNPathsError(f"There is no BLAST database at '{self.target_db}', and there is no FASTA file "
                                   f"fcg could turn into one either :/")

        self.makedb()


    def check_output(self, expected_output, process='blast'):
        if not len(glob.glob(expected_output)):
            self.progress.end()
            raise CommandError("Pfft. Something probably went wrong with '%s' process since one of the expected output files are missing. "
                               "Please check the log file here: '%s'" % (process, self.log_file_path))


    def makedb(self):
        self.run.warning(None, header="NCBI BLAST MAKEDB", lc="green")

        filesnpaths.is_program_exists('makeblastdb')

        if not os.access(os.path.dirname(os.path.abspath(self.target_db)), os.W_OK):
            raise FilesNPathsError(f"The BLAST database at '{self.target_db}' has not been formatted yet, and fcg "
                                   f"is not allowed to write next to it. Please run `makeblastdb -in {self.target_db} "
                                   f"-dbtype nucl` yourself, with the right permissions.")

        self.progress.new('BLAST')
        self.progress.update('creating the search database ...')

        cmd_line = ['makeblastdb',
                    '-in', self.target_db,
                    '-dbtype', 'nucl',
                    '-out', self.target_db]

        ret_val = utils.run_command(cmd_line, self.log_file_path)

        self.progress.end()

        if ret_val != 0:
            raise CommandError(f"`makeblastdb` returned with exit code {ret_val}. Please check the log file "
                               f"here: '{self.log_file_path}'")

        self.check_output(self.target_db + '*.nhr', 'makeblastdb')

        self.run.info('BLAST search db', self.target_db)


    def get_cmd_line(self, query_fasta, output_path):
        return [self.search_program,
                '-query', query_fasta,
                '-db', self.target_db,
                '-evalue', self.evalue,
                '-outfmt', self.outfmt,
                '-num_alignments', self.num_alignments,
                '-num_threads', self.num_threads,
                '-out', output_path]


    def align(self, query_fasta):
        """Search `query_fasta` against the database, and return the `HitSet`"""

        self.check_db()

        output_path = filesnpaths.get_temp_file_path(prefix='fcg_blast_hits_', suffix='.txt')
        cmd_line = self.get_cmd_line(query_fasta, output_path)

        self.run.info('NCBI %s cmd' % self.search_program, ' '.join([str(p) for p in cmd_line]), quiet=(not fcg.DEBUG), display_only=True)

        try:
            self.progress.new('BLAST')
            self.progress.update('running search (using %s with %d thread(s)) ...' % (self.search_program, self.num_threads))

            ret_val = utils.run_command(cmd_line, self.log_file_path)

            self.progress.end()

            if ret_val != 0:
                raise CommandError(f"{self.search_program} returned with exit code {ret_val}. Please check the log "
                                   f"file here: '{self.log_file_path}'")

            self.check_output(output_path, self.search_program)

            with open(output_path) as output:
                hits = HitSet.from_tabular_output(output.read())
        finally:
            filesnpaths.remove_temp_file(output_path, run=self.run)

        return hits
