# -*- coding: utf-8
# pylint: disable=line-too-long

"""Exceptions"""

import sys
import textwrap
import traceback

import fcg
from fcg.ttycolors import color_text

__copyright__ = "Copyleft 2016-2026, the fcg developers"
__credits__ = []
__license__ = "GPL 3.0"
__author__ = "Developers of fcg"
__status__ = "Development"


def remove_spaces(text):
    if not text:
        return ""

    while True:
        if text.find("  ") > -1:
            text = text.replace("  ", " ")
        else:
            break

    return text


class FCGError(Exception):
    def __init__(self, e=None):
        Exception.__init__(self)
        return

    def __str__(self):
        max_len = max([len(l) for l in textwrap.fill(textwrap.dedent(self.e), 80).split('\n')])
        error_lines = ['%s%s' % (l, ' ' * (max_len - len(l))) for l in textwrap.fill(textwrap.dedent(self.e), 80).split('\n')]

        error_message = ['%s: %s' % (color_text(self.error_type, 'red'), error_lines[0])]
        for error_line in error_lines[1:]:
            error_message.append('%s%s' % (' ' * (len(self.error_type) + 2), error_line))

        if fcg.DEBUG:
            exc_type, exc_value, exc_traceback = sys.exc_info()

            sep = color_text('=' * 80, 'red')

            print(color_text('\nTraceback for debugging', 'red'))
            print(sep)
            traceback.print_tb(exc_traceback, limit=100, file=sys.stdout)
            print(sep)

        return '\n\n' + '\n'.join(error_message) + '\n\n'


    def clear_text(self):
        return self.e


class CommandError(FCGError):
    """Use this when a command (e.g., something run with utils.run_command) fails."""

    def __init__(self, e=None):
        self.e = remove_spaces(e)
        self.error_type = 'Command Error'
        FCGError.__init__(self)


class ConfigError(FCGError):
    def __init__(self, e=None):
        self.e = remove_spaces(e)
        self.error_type = 'Config Error'
        FCGError.__init__(self)


class FilesNPathsError(FCGError):
    def __init__(self, e=None):
        self.e = remove_spaces(e)
        self.error_type = 'File/Path Error'
        FCGError.__init__(self)


class GraphError(FCGError):
    """The connectivity information can't be turned into a graph. Always fatal."""

    def __init__(self, e=None):
        self.e = remove_spaces(e)
        self.error_type = 'Graph Error'
        FCGError.__init__(self)


class SequenceNotFoundError(FCGError):
    def __init__(self, e=None):
        self.e = remove_spaces(e)
        self.error_type = 'Sequence Not Found Error'
        FCGError.__init__(self)


class ReconstructionError(FCGError):
    """A single candidate was there, but it could not be turned into a circular genome.

    Not fatal: the caller is expected to fall back to searching for partial hits.
    """

    def __init__(self, e=None):
        self.e = remove_spaces(e)
        self.error_type = 'Reconstruction Error'
        FCGError.__init__(self)


class TerminalError(FCGError):
    def __init__(self, e=None):
        self.e = remove_spaces(e)
        self.error_type = 'Terminal Error'
        FCGError.__init__(self)
