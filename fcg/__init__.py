# -*- coding: utf-8
# pylint: disable=line-too-long

"""Run flags, versions, and the shared dictionary of command line parameters."""

fcg_version = '0.7.0'

major_python_version_required = 3
minor_python_version_required = 8

import sys
import platform

# make sure we are running in the right Python environment:
if not (sys.version_info.major == major_python_version_required and sys.version_info.minor >= minor_python_version_required):
    sys.stderr.write("\n========================================================\n"
                     "The environment in which you are running fcg has a Python \n"
                     "version that is not compatible with fcg. Here is a summary: \n\n"
                     f"    fcg version you have .................: {fcg_version}\n"
                     f"    Python version you have ..............: {platform.python_version()}\n"
                     f"    Python version fcg wants .............: {major_python_version_required}.{minor_python_version_required}+\n\n")
    sys.exit(-1)

import os
import copy

from tabulate import tabulate

# very handy global settings depending on sys.argv content
DEBUG = '--debug' in sys.argv
QUIET = '--quiet' in sys.argv
NO_PROGRESS = '--no-progress' in sys.argv
FORCE_OVERWRITE = '--force-overwrite' in sys.argv
DATA_PATH = os.path.join(os.path.dirname(__file__), 'data')
TMP_DIR = None

# if the user wants to use a non-default tmp directory, we set it here
if '--tmp-dir' in sys.argv:
    try:
        idx = sys.argv.index('--tmp-dir')
        TMP_DIR = os.path.abspath(sys.argv[idx + 1])

        if not os.path.exists(TMP_DIR):
            parent_dir = os.path.dirname(TMP_DIR)
            if os.access(parent_dir, os.W_OK):
                os.makedirs(TMP_DIR)
            else:
                raise OSError(f"You do not have permission to generate a directory in '{parent_dir}'")
        if not os.path.isdir(TMP_DIR):
            raise OSError(f"The path provided to --tmp-dir, {TMP_DIR}, is not a directory...")
        if not os.access(TMP_DIR, os.W_OK):
            raise OSError(f"You do not have permission to generate files in '{TMP_DIR}'")

        os.environ['TMPDIR'] = TMP_DIR
    except (OSError, IndexError) as e:
        print("OSError: ", e)
        sys.exit(-2)


def TABULATE(table, header, numalign="right", max_width=0):
    """Encoding-safe `tabulate`"""

    tablefmt = "fancy_grid" if sys.stderr.encoding == "UTF-8" else "grid"
    table = tabulate(table, headers=header, tablefmt=tablefmt, numalign=numalign)

    if max_width:
        # let's don't print everything if things need to be cut.
        prefix = " // "
        lines_in_table = table.split('\n')
        if len(lines_in_table[0]) + len(prefix) + 2 > max_width:
            table = '\n'.join([l[:max_width - len(prefix)] + prefix + l[-2:] for l in lines_in_table])

    sys.stderr.write(table + '\n')


import fcg.constants as constants


# arguments dictionary that provides easy access from programs that interface fcg modules:
D = {
    'infile': (
            ['-i', '--infile'],
            {'metavar': 'FASTA',
             'required': True,
             'help': "A FASTA file with contig sequences. Header lines may carry connectivity "
                     "information in the form `>name:target1,target2`, where an apostrophe after "
                     "a name (i.e., `name'`) refers to the reverse complement of that contig."}
                ),
    'outfile': (
            ['-o', '--outfile'],
            {'metavar': 'FASTA',
             'required': True,
             'help': "File path to store the resulting sequence(s). The file will be empty if no "
                     "chloroplast sequence could be found."}
                ),
    'blastdb': (
            ['-b', '--blastdb'],
            {'metavar': 'BLAST_DB',
             'default': os.path.join(DATA_PATH, constants.default_blastdb_name),
             'help': "A nucleotide BLAST database of chloroplast coding sequences that will be used "
                     "to decide whether a candidate is a chloroplast at all. If the path is a FASTA file "
                     "that was never formatted, `makeblastdb` will take care of it. The default is "
                     "the database that is shipped with fcg."}
                ),
    'num-threads': (
            ['-T', '--num-threads'],
            {'metavar': 'NUM_THREADS',
             'default': constants.default_num_threads,
             'type': int,
             'help': "Maximum number of threads for the homology search. The default is %(default)d."}
                ),
    'min-nodes': (
            ['--min-nodes'],
            {'metavar': 'INT',
             'default': constants.MINNODES,
             'type': int,
             'help': "Connected components with fewer nodes than this will not be considered. "
                     "The default is %(default)d."}
                ),
    'max-nodes': (
            ['--max-nodes'],
            {'metavar': 'INT',
             'default': constants.MAXNODES,
             'type': int,
             'help': "Connected components with more nodes than this will not be considered. "
                     "The default is %(default)d."}
                ),
    'min-seq-len': (
            ['--min-seq-len'],
            {'metavar': 'INT',
             'default': constants.MINSEQLEN,
             'type': int,
             'help': "Minimum total length (in bp) of the distinct contigs of a connected component. "
                     "The default is %(default)d."}
                ),
    'max-seq-len': (
            ['--max-seq-len'],
            {'metavar': 'INT',
             'default': constants.MAXSEQLEN,
             'type': int,
             'help': "Maximum total length (in bp) of the distinct contigs of a connected component. "
                     "The same limit applies to individual contigs during the search for partial "
                     "hits. The default is %(default)d."}
                ),
    'rescue-factor': (
            ['--rescue-factor'],
            {'metavar': 'INT',
             'default': constants.FACTOR4RESCUE,
             'type': int,
             'help': "When no single circular chloroplast is found, individual contigs that are at least "
                     "`--min-seq-len` divided by this factor long are searched for partial hits. "
                     "The default is %(default)d."}
                ),
    'log-file': (
            ['--log-file'],
            {'metavar': 'FILE_PATH',
             'default': None,
             'type': str,
             'help': "File path to store a copy of all messages that are printed during the run."}
                ),
}


# two functions that work with the dictionary above.
def A(param_id, exclude_param=None):
    if exclude_param:
        return [p for p in D[param_id][0] if p != exclude_param]
    else:
        return D[param_id][0]


def K(param_id, params_dict={}):
    kwargs = copy.deepcopy(D[param_id][1])
    for key in params_dict:
        kwargs[key] = params_dict[key]

    return kwargs


__version__ = fcg_version


def get_version_tuples():
    return [("fcg version", "v%s" % __version__),
            ("Python version", platform.python_version())]
