# -*- coding: utf-8
# pylint: disable=line-too-long
"""Contig sequences and the connectivity hints found in their headers.

The input is a FASTA file in which header lines may describe how contigs
connect to each other, i.e.,

    >3:5',7;
    ACGT...

says that the contig `3` is followed by the reverse complement of `5`, and by
`7`. An apostrophe after the name of the contig in the header itself (`>3'`)
means the connections are described from the point of view of its reverse
complement.
"""

from collections import namedtuple

import fcg
import fcg.utils as utils
import fcg.terminal as terminal
import fcg.constants as constants
import fcg.filesnpaths as filesnpaths

from fcg.fastalib import SequenceSource
from fcg.errors import FilesNPathsError, SequenceNotFoundError


__copyright__ = "Copyleft 2016-2026, the fcg developers"
__credits__ = []
__license__ = "GPL 3.0"
__version__ = fcg.__version__
__author__ = "Developers of fcg"
__status__ = "Development"


run = terminal.Run()
P = terminal.pluralize


class Sequence:
    def __init__(self, sequence_id, name, bases):
        self.id = sequence_id
        self.name = name
        self.bases = bases

    def __len__(self):
        return len(self.bases)

    def __repr__(self):
        return "Sequence(id=%d, name='%s', length=%d)" % (self.id, self.name, len(self.bases))


class OrientedNode(namedtuple('OrientedNode', ['sequence_id', 'reverse'])):
    """A contig with a strand. Serializes to `12` (forward) or `12'` (reverse)."""

    __slots__ = ()

    def __new__(cls, sequence_id, reverse=False):
        return super().__new__(cls, int(sequence_id), bool(reverse))

    def __str__(self):
        return self.serialized

    @property
    def serialized(self):
        return '%d%s' % (self.sequence_id, constants.reverse_marker if self.reverse else '')

    @property
    def strand(self):
        return '-' if self.reverse else '+'

    def flipped(self):
        return OrientedNode(self.sequence_id, not self.reverse)

    @classmethod
    def from_serialized(cls, serialized):
        serialized = str(serialized)
        reverse = constants.reverse_marker in serialized
        return cls(int(serialized.replace(constants.reverse_marker, '')), reverse)


class ConnectivityHint:
    """Edges declared in a single header: `from_name` (maybe reversed) -> each of `targets`.

    Targets are kept as they appear in the header (with their own reverse
    markers), since they can only be resolved once every sequence is known.
    """

    def __init__(self, from_name, from_rev, targets):
        self.from_name = from_name
        self.from_rev = from_rev
        self.targets = list(targets)

    def __repr__(self):
        return "ConnectivityHint(%s%s -> %s)" % (self.from_name, constants.reverse_marker if self.from_rev else '', ','.join(self.targets))


def strip_reverse_marker(name):
    """Returns the name without any reverse markers, and whether there was one."""

    if constants.reverse_marker in name:
        return name.replace(constants.reverse_marker, ''), True
    else:
        return name, False


def parse_header(defline):
    """Parse `name[:target1,target2,...][;]` into (name, reverse, targets)"""

    if defline.endswith(';'):
        defline = defline[:-1]

    fields = defline.split(':')
    name, reverse = strip_reverse_marker(fields[0])

    targets = []
    if len(fields) > 1:
        targets = [t for t in ','.join(fields[1:]).split(',') if t]

    return name, reverse, targets


class SequenceStore:
    def __init__(self, run=run):
        self.run = run

        self.sequences = []
        self.name_to_id = {}
        self.hints = []


    def parse(self, source):
        """Read sequences and connectivity hints from `source`.

        `source` is either a file path or an iterable of lines. Sequences get
        integer ids in the order they are first seen. A header seen for the
        second time does not open a new sequence (its lines are ignored), but
        any connectivity information it carries is still recorded.

        Returns
        =======
        (sequences, name_to_id, hints)
        """

        if isinstance(source, str):
            filesnpaths.is_file_readable(source)

        self.sequences = []
        self.name_to_id = {}
        self.hints = []

        try:
            for defline, bases in SequenceSource(source):
                name, reverse, targets = parse_header(defline)

                if targets:
                    self.hints.append(ConnectivityHint(name, reverse, targets))

                if name in self.name_to_id:
                    continue

                sequence_id = len(self.sequences)
                self.sequences.append(Sequence(sequence_id, name, bases))
                self.name_to_id[name] = sequence_id
        except (OSError, UnicodeDecodeError) as e:
            raise FilesNPathsError(f"Unable to read the input file '{source}': {e}")

        self.run.info('num_sequences', len(self.sequences))
        self.run.info('total_length', self.total_length())
        self.run.info('num_hints', len(self.hints))

        return self.sequences, self.name_to_id, self.hints


    def __len__(self):
        return len(self.sequences)


    def __iter__(self):
        return iter(self.sequences)


    def __contains__(self, sequence_id):
        return isinstance(sequence_id, int) and 0 <= sequence_id < len(self.sequences)


    def total_length(self):
        return sum([len(s) for s in self.sequences])


    def get(self, sequence_id):
        if sequence_id not in self:
            raise SequenceNotFoundError(f"There is no sequence with the id '{sequence_id}'. There are "
                                        f"{P('sequence', len(self.sequences))} in the store.")

        return self.sequences[sequence_id]


    def get_name(self, sequence_id):
        return self.get(sequence_id).name


    def get_id(self, name):
        """Returns the id for a sequence name, or None if there is no such name"""
        return self.name_to_id.get(name)


    def get_length(self, sequence_id):
        return len(self.get(sequence_id))


    def get_sequence(self, sequence_id, reverse=False):
        """Bases of a sequence as stored, or its reverse complement."""

        bases = self.get(sequence_id).bases

        if reverse:
            return reverse_complement(bases)
        else:
            return bases


    def get_sequence_by_node(self, node):
        return self.get_sequence(node.sequence_id, node.reverse)


    def resolve(self, name, reverse=False):
        """Turn a name from a header (possibly with a reverse marker) into an OrientedNode.

        Returns None if the name is not known.
        """

        name, marked = strip_reverse_marker(name)
        sequence_id = self.get_id(name)

        if sequence_id is None:
            return None

        return OrientedNode(sequence_id, reverse or marked)


def reverse_complement(seq):
    return utils.rev_comp(seq)
