# -*- coding: utf-8 -*-
# pylint: disable=line-too-long

__copyright__ = "Copyleft 2016-2026, the fcg developers"
__credits__ = []
__license__ = "GPL 3.0"
__author__ = "Developers of fcg"
__status__ = "Development"


# bounds for weakly connected components of the contig graph. a chloroplast
# genome is expected to show up as a small, cyclic component with a total
# length somewhere between these two:
MINNODES = 3
MAXNODES = 100
MINSEQLEN = 25000
MAXSEQLEN = 1000000

# when no single circular chloroplast is found, individual contigs down to
# MINSEQLEN / FACTOR4RESCUE are searched for partial hits. this is NOT the
# same lower bound as MINSEQLEN, and should stay that way.
FACTOR4RESCUE = 10

# homology search
blast_evalue = 1e-10
blast_search_program = 'tblastx'
blast_max_alignments_per_query = 1
default_num_threads = 4
default_blastdb_name = 'cds.nr98.fa'

# the character that marks the reverse complement of a contig in headers
# and in serialized graph nodes (e.g., `12'`)
reverse_marker = "'"

# FASTA headers of the things we report
chloroplast_header = 'potential_chloroplast_sequence'
partial_hit_header_template = 'potential_chloroplast_hit_original_name=%s'

complements = str.maketrans('acgtrymkbdhvACGTRYMKBDHV', 'tgcayrkmvhdbTGCAYRKMVHDB')


pretty_names = {'num_sequences': 'Number of sequences',
                'total_length': 'Total length (bp)',
                'num_hints': 'Connectivity hints',
                'num_vertices': 'Graph nodes',
                'num_edges': 'Graph edges',
                'num_components': 'Weakly connected components',
                'num_candidates': 'Cyclic components with hits',
                'inverted_repeat': 'Inverted repeat (IR)',
                'lsc': 'Large single copy (LSC)',
                'ssc': 'Small single copy (SSC)'}


def get_pretty_name(key):
    if key in pretty_names:
        return pretty_names[key]
    else:
        return key
