# -*- coding: utf-8 -*-
# pylint: disable=line-too-long
"""A very lightweight FASTA I/O library"""

import io
import gzip

import fcg

__copyright__ = "Copyleft 2016-2026, the fcg developers"
__credits__ = []
__license__ = "GPL 3.0"
__version__ = fcg.__version__
__author__ = "Developers of fcg"
__status__ = "Development"


class FastaOutput:
    def __init__(self, output_file_path):
        self.output_file_path = output_file_path
        self.compressed = True if self.output_file_path.endswith('.gz') else False

        if self.compressed:
            self.output_file_obj = gzip.open(output_file_path, 'wt')
        else:
            self.output_file_obj = open(output_file_path, 'w')

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def store(self, record_id, seq, split=False):
        self.write_id(record_id)
        self.write_seq(seq, split)

    def write_id(self, record_id):
        self.output_file_obj.write('>%s\n' % record_id)

    def write_seq(self, seq, split=False):
        if split:
            seq = self.split(seq)
        self.output_file_obj.write('%s\n' % seq)

    def split(self, sequence, piece_length=80):
        ticks = list(range(0, len(sequence), piece_length)) + [len(sequence)]
        return '\n'.join([sequence[ticks[x]:ticks[x + 1]] for x in range(0, len(ticks) - 1)])

    def close(self):
        self.output_file_obj.close()


class SequenceSource():
    """Iterates over `(defline, sequence)` tuples of a FASTA file.

    Unlike most FASTA readers this one does not touch the sequence: lines are
    concatenated as they are (only line terminators are removed, case is kept),
    and deflines are returned without the leading `>` but otherwise intact, so
    whatever is encoded in them can be parsed by the caller. Anything before the
    first defline is ignored. `source` is a file path or an iterable of lines.
    """

    def __init__(self, source):
        self.source = source
        self.pos = 0
        self.id = None
        self.seq = None

        if isinstance(source, str):
            self.compressed = True if source.endswith('.gz') else False
        else:
            self.compressed = False


    def _lines(self):
        if not isinstance(self.source, str):
            for line in self.source:
                yield line
            return

        if self.compressed:
            file_pointer = gzip.open(self.source, mode="rt")
        else:
            file_pointer = io.open(self.source, 'r', newline='')

        with file_pointer:
            for line in file_pointer:
                yield line


    def __iter__(self):
        self.pos = 0
        defline, pieces = None, []

        for line in self._lines():
            line = line.rstrip('\r\n')

            if line.startswith('>'):
                if defline is not None:
                    yield self._emit(defline, pieces)

                defline, pieces = line[1:], []
            elif defline is not None:
                pieces.append(line)

        if defline is not None:
            yield self._emit(defline, pieces)


    def _emit(self, defline, pieces):
        self.id = defline
        self.seq = ''.join(pieces)
        self.pos += 1

        return self.id, self.seq
