# -*- coding: utf-8
# pylint: disable=line-too-long
"""Small helpers that do not belong anywhere else"""

import os
import subprocess

import fcg
import fcg.constants as constants
import fcg.filesnpaths as filesnpaths

from fcg.terminal import Run, Progress, get_date
from fcg.errors import ConfigError


__copyright__ = "Copyleft 2016-2026, the fcg developers"
__credits__ = []
__license__ = "GPL 3.0"
__version__ = fcg.__version__
__author__ = "Developers of fcg"
__status__ = "Development"


def rev_comp(seq):
    return seq.translate(constants.complements)[::-1]


def abbreviate_sequence(seq, flank=10):
    """Returns something like `ACGTACGTAC[...]TTGACCATGA` for long sequences."""
    if len(seq) >= flank * 2:
        return seq[:flank] + '[...]' + seq[-flank:]
    else:
        return seq


def format_cmdline(cmdline):
    """Takes a cmdline for `run_command`, and makes it beautiful."""
    if not cmdline or (not isinstance(cmdline, str) and not isinstance(cmdline, list)):
        raise ConfigError("You made utils::format_cmdline upset. The parameter you sent to run kinda sucks. It should be string "
                          "or list type. Note that the parameter `shell` for subprocess.call in this `run_command` function "
                          "is always False, therefore if you send a string type, it will be split into a list prior to being "
                          "sent to subprocess.")

    if isinstance(cmdline, str):
        cmdline = [str(x) for x in cmdline.split(' ')]
    else:
        cmdline = [str(x) for x in cmdline]

    return cmdline


def run_command(cmdline, log_file_path, first_line_of_log_is_cmdline=True, remove_log_file_if_exists=True):
    """ Uses subprocess.call to run your `cmdline`

    Parameters
    ==========
    cmdline : str or list
        The command to be run, e.g. "echo hello" or ["echo", "hello"]
    log_file_path : str or Path-like
        All stdout and stderr from the command is sent to this filepath

    Raises ConfigError if ret_val < 0, or on OSError.  Does NOT raise if program terminated with exit code > 0.
    """
    cmdline = format_cmdline(cmdline)

    if fcg.DEBUG:
        Progress().reset()
        Run().info("[DEBUG] `run_command` is running", \
                   ' '.join(['%s' % (('"%s"' % str(x)) if ' ' in str(x) else ('%s' % str(x))) for x in cmdline]), \
                   nl_before=1, nl_after=1, mc='red', lc='yellow')

    filesnpaths.is_output_file_writable(log_file_path)

    if remove_log_file_if_exists and os.path.exists(log_file_path):
        os.remove(log_file_path)

    try:
        if first_line_of_log_is_cmdline:
            with open(log_file_path, "a") as log_file: log_file.write('# DATE: %s\n# CMD LINE: %s\n' % (get_date(), ' '.join(cmdline)))

        with open(log_file_path, 'a') as log_file:
            ret_val = subprocess.call(cmdline, shell=False, stdout=log_file, stderr=subprocess.STDOUT)

        # This can happen in POSIX due to signal termination (e.g., SIGKILL).
        if ret_val < 0:
            raise ConfigError("Command failed to run. What command, you say? This: '%s'" % ' '.join(cmdline))
        else:
            return ret_val
    except OSError as e:
        raise ConfigError("command was failed for the following reason: '%s' ('%s')" % (e, cmdline))
