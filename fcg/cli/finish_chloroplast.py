#!/usr/bin/env python
# -*- coding: utf-8

import sys

import fcg
import fcg.terminal as terminal

from fcg.finisher import ChloroplastFinisher
from fcg.errors import ConfigError, FilesNPathsError, GraphError, CommandError


__copyright__ = "Copyleft 2016-2026, the fcg developers"
__credits__ = []
__license__ = "GPL 3.0"
__version__ = fcg.__version__
__author__ = "Developers of fcg"
__description__ = ("Finds a circular chloroplast genome in an assembly graph. The input is a FASTA file of contigs "
                   "whose headers describe how the contigs connect to each other. Small, cyclic groups of connected "
                   "contigs with a reasonable total length are searched against a database of chloroplast genes, and "
                   "if exactly one of them has hits, it is stitched into a single circular sequence using its "
                   "inverted repeat. Otherwise, individual contigs that look like chloroplast are reported as they are.")


@terminal.time_program
def main():
    try:
        args = get_args()

        run = terminal.Run(log_file_path=args.log_file)
        progress = terminal.Progress()

        ChloroplastFinisher(args, run=run, progress=progress).process()

        run.quit()
    except (ConfigError, GraphError, CommandError) as e:
        print(e)
        sys.exit(-1)
    except FilesNPathsError as e:
        print(e)
        sys.exit(-2)


def get_args():
    from fcg.argparse import ArgumentParser

    parser = ArgumentParser(description=__description__)

    groupA = parser.add_argument_group('INPUT', "An assembly with connectivity information in its headers (i.e., "
                                                "`>contig:next_contig,other_contig'`), and the reference database to search for chloroplast genes.")
    groupA.add_argument(*fcg.A('infile'), **fcg.K('infile'))
    groupA.add_argument(*fcg.A('blastdb'), **fcg.K('blastdb'))

    groupB = parser.add_argument_group('OUTPUT')
    groupB.add_argument(*fcg.A('outfile'), **fcg.K('outfile'))
    groupB.add_argument(*fcg.A('log-file'), **fcg.K('log-file'))

    groupC = parser.add_argument_group('FILTERS', "What a connected component of the graph must look like to be "
                                                  "considered a chloroplast genome at all.")
    groupC.add_argument(*fcg.A('min-nodes'), **fcg.K('min-nodes'))
    groupC.add_argument(*fcg.A('max-nodes'), **fcg.K('max-nodes'))
    groupC.add_argument(*fcg.A('min-seq-len'), **fcg.K('min-seq-len'))
    groupC.add_argument(*fcg.A('max-seq-len'), **fcg.K('max-seq-len'))
    groupC.add_argument(*fcg.A('rescue-factor'), **fcg.K('rescue-factor'))

    groupD = parser.add_argument_group('PERFORMANCE')
    groupD.add_argument(*fcg.A('num-threads'), **fcg.K('num-threads'))

    return parser.get_args(parser)


if __name__ == '__main__':
    main()
