# -*- coding: utf-8
# pylint: disable=line-too-long
"""Relations with the console output, Progress and Run classes"""

import os
import re
import sys
import time
import shutil
import datetime
import textwrap

from colored import fore, back, style
from collections import OrderedDict

import fcg
import fcg.constants as constants

from fcg.errors import TerminalError
from fcg.ttycolors import color_text as c

__copyright__ = "Copyleft 2016-2026, the fcg developers"
__credits__ = []
__license__ = "GPL 3.0"
__author__ = "Developers of fcg"
__status__ = "Development"


# clean garbage garbage:
ansi_escape = re.compile(r'\x1B\[[0-?]*[ -/]*[@-~]')
non_ascii_escape = re.compile(r'[^\x00-\x7F]+')
CLEAR = lambda line: ansi_escape.sub('', non_ascii_escape.sub('', line.strip()))


def remove_spaces(text):
    while True:
        if text.find("  ") > -1:
            text = text.replace("  ", " ")
        else:
            break

    return text


def pluralize(word, number, sfp="s", sfs=None, pfs=None, alt=None):
    """Pluralize a given word mindfully.

    >>> f"Found {pluralize('contig', 1)}"
    'Found 1 contig'
    >>> f"Found {pluralize('contig', 12000)}"
    'Found 12,000 contigs'

    Parameters
    ==========
    word: str
        The word to conditionally plurlize
    number: int
        The number of items the word intends to describe
    sfp: str, 's'
        Suffix for plural.
    sfs: str, None
        Suffix for singular.
    pfs: str, None
        Prefix for singular. `pfs` will replace `1` in the final output (e.g., `pfs="a single"`).
    alt: str, None
        If given, `word` is returned for singular and `alt` for plural and nothing else matters.
    """

    plural = number != 1

    if plural:
        if alt:
            return alt
        else:
            return f"{pretty_print(number)} {word}{sfp}"
    else:
        if alt:
            return word
        else:
            if sfs:
                return f"{pretty_print(number)} {word}{sfs}"
            else:
                if pfs:
                    return f"{pfs} {word}"
                else:
                    return f"{number} {word}"


class Progress:
    def __init__(self, verbose=True):
        self.pid = None
        self.verbose = verbose
        self.terminal_width = None
        self.is_tty = sys.stderr.isatty()

        self.get_terminal_width()

        self.msg = None
        self.current = None

        self.progress_total_items = None
        self.progress_current_item = 0
        self.t = Timer(self.progress_total_items)

        # if --no-progress or --quiet parameters were passed, OR, if we are not attached
        # to a real terminal, turn off progress outputs:
        if fcg.NO_PROGRESS or fcg.QUIET or not self.is_tty:
            self.verbose = False


    def get_terminal_width(self):
        self.terminal_width = max(get_terminal_size()[0], 60)


    def new(self, pid, discard_previous_if_exists=False, progress_total_items=None):
        if self.pid:
            if discard_previous_if_exists:
                self.end()
            else:
                raise TerminalError("Progress.new() can't be called before ending the previous one (Existing: '%s', Competing: '%s')." % (self.pid, pid))

        if not self.verbose:
            return

        self.pid = '%s %s' % (get_date(), pid)
        self.get_terminal_width()
        self.current = None
        self.progress_total_items = progress_total_items
        self.progress_current_item = 0
        self.t = Timer(self.progress_total_items)


    def increment(self, increment_to=None):
        if increment_to:
            self.progress_current_item = increment_to
        else:
            self.progress_current_item += 1

        self.t.make_checkpoint(increment_to=increment_to)


    def write(self, line):
        eta = ' ETA: %s' % str(self.t.eta()) if self.progress_total_items else ''
        surpass = self.terminal_width - len(line) - len(eta)

        if surpass < 0:
            line = line[0:-(-surpass + 6)] + ' (...)'
        else:
            self.current = line
            line += ' ' * surpass

        line += eta

        if not self.verbose:
            return

        if self.progress_total_items:
            end_point = len(line) - len(eta)
            break_point = round(end_point * self.progress_current_item / self.progress_total_items)

            sys.stderr.write(back.CYAN + fore.BLACK + line[:break_point] + \
                             back.GREY_30 + fore.WHITE + line[break_point:end_point] + \
                             back.GREY_50 + fore.LIGHT_CYAN + line[end_point:] + \
                             style.RESET)
        else:
            sys.stderr.write(back.CYAN + fore.BLACK + line + style.RESET)

        sys.stderr.flush()


    def reset(self):
        self.clear()


    def clear(self):
        if not self.verbose:
            return

        null = '\r' + ' ' * (self.terminal_width)
        sys.stderr.write(null)
        sys.stderr.write('\r')
        sys.stderr.flush()
        self.current = None


    def update(self, msg, increment=False):
        self.msg = msg

        if not self.verbose:
            return

        if not self.pid:
            raise TerminalError('Progress with null pid will not update for msg "%s"' % msg)

        if increment:
            self.increment()

        self.clear()
        self.write('\r[%s] %s' % (self.pid, msg))


    def end(self):
        self.pid = None
        if not self.verbose:
            return
        self.clear()


class Run:
    def __init__(self, log_file_path=None, verbose=True, width=45):
        self.log_file_path = log_file_path

        self.info_dict = {}
        self.verbose = verbose
        self.width = width

        self.single_line_prefixes = {0: '',
                                     1: '* ',
                                     2: '    - ',
                                     3: '        > '}

        if fcg.QUIET:
            self.verbose = False


    def log(self, line):
        if not self.log_file_path:
            self.warning("The run object got a logging request, but it was not inherited with "
                         "a log file path :(")
            return

        with open(self.log_file_path, "a") as log_file: log_file.write('[%s] %s\n' % (get_date(), CLEAR(line)))


    def write(self, line, quiet=False, overwrite_verbose=False):
        if self.log_file_path:
            self.log(line)

        if (self.verbose and not quiet) or (overwrite_verbose and not fcg.QUIET):
            sys.stderr.write(line)


    def info(self, key, value, quiet=False, display_only=False, overwrite_verbose=False, nl_before=0, nl_after=0, lc='cyan',
             mc='yellow', progress=None):
        """Print a key/value pair in the form `key ........: value`.

        PARAMETERS
        ==========
        key : str
            what to print before the dots (`constants.pretty_names` is consulted)
        value : str
            what to print after the dots
        quiet : boolean
            if True, the line only goes to the log file (if there is one)
        display_only : boolean
            if False, the key value pair is also stored in the info dictionary
        progress : Progress instance
            if there is an active progress, it is cleared first and restored after
        """
        if not display_only:
            self.info_dict[key] = value

        if value is None:
            value = "None"
        elif isinstance(value, bool) or isinstance(value, float) or isinstance(value, list):
            value = "%s" % value
        elif isinstance(value, str):
            value = remove_spaces(value)
        elif isinstance(value, int):
            value = pretty_print(value)

        label = constants.get_pretty_name(key)

        info_line = "%s%s %s: %s\n%s" % ('\n' * nl_before, c(label, lc),
                                         '.' * (self.width - len(label)),
                                         c(str(value), mc), '\n' * nl_after)

        if progress:
            progress.reset()
            self.write(info_line, quiet=quiet)
            if progress.msg and progress.pid:
                progress.update(progress.msg)
        else:
            self.write(info_line, quiet=quiet, overwrite_verbose=overwrite_verbose)


    def info_single(self, message, overwrite_verbose=False, mc='yellow', nl_before=0, nl_after=0, cut_after=80, level=1, progress=None):
        if isinstance(message, str):
            message = remove_spaces(message)

        if level not in self.single_line_prefixes:
            raise TerminalError("the `info_single` function does not know how to deal with a level of %d :/" % level)

        if cut_after:
            subsequent_indent = ' ' * len(self.single_line_prefixes[level])
            message_line = c("%s%s\n" % (self.single_line_prefixes[level], textwrap.fill(str(message), cut_after, subsequent_indent=subsequent_indent)), mc)
        else:
            message_line = c("%s%s\n" % (self.single_line_prefixes[level], str(message)), mc)

        message_line = ('\n' * nl_before) + message_line + ('\n' * nl_after)

        if progress:
            progress.reset()
            self.write(message_line, overwrite_verbose=overwrite_verbose)
            if progress.msg and progress.pid:
                progress.update(progress.msg)
        else:
            self.write(message_line, overwrite_verbose=overwrite_verbose)


    def warning(self, message, header='WARNING', lc='red', raw=False, overwrite_verbose=False, nl_before=0, nl_after=0, progress=None):
        if isinstance(message, str):
            message = remove_spaces(message)

        message_line = ''
        header_line = c("%s\n%s\n%s\n" % (('\n' * nl_before), header,
                                          '=' * (self.width + 2)), lc)
        if raw:
            message_line = c("%s\n\n%s" % ((message), '\n' * nl_after), lc)
        else:
            message_line = c("%s\n\n%s" % (textwrap.fill(str(message), 80), '\n' * nl_after), lc)

        if progress:
            progress.clear()

        self.write((header_line + message_line) if message else header_line, overwrite_verbose=overwrite_verbose)

        if progress and progress.msg and progress.pid:
            progress.update(progress.msg)


    def quit(self):
        if self.log_file_path:
            self.log('Bye.')


class Timer:
    """Keeps an ordered dictionary of checkpoints (key -> timestamp).

    >>> t = Timer(3) # 3 checkpoints expected until completion
    >>> for _ in range(3):
    >>>     time.sleep(1); t.make_checkpoint()
    >>>     print(t.eta())
    2s
    1s
    0s
    """
    def __init__(self, required_completion_score=None, initial_checkpoint_key=0, score=0):
        self.timer_start = self.timestamp()
        self.initial_checkpoint_key = initial_checkpoint_key
        self.last_checkpoint_key = self.initial_checkpoint_key
        self.checkpoints = OrderedDict([(initial_checkpoint_key, self.timer_start)])
        self.num_checkpoints = 0

        self.required_completion_score = required_completion_score
        self.score = score
        self.complete = False

        self.last_eta = None
        self.last_eta_timestamp = self.timer_start


    def timestamp(self):
        return datetime.datetime.fromtimestamp(time.time())


    def timedelta_to_checkpoint(self, timestamp, checkpoint_key=None):
        if not checkpoint_key: checkpoint_key = self.initial_checkpoint_key
        return timestamp - self.checkpoints[checkpoint_key]


    def make_checkpoint(self, checkpoint_key=None, increment_to=None):
        if not checkpoint_key:
            checkpoint_key = self.num_checkpoints + 1

        if checkpoint_key in self.checkpoints:
            raise TerminalError('Timer.make_checkpoint :: %s already exists as a checkpoint key. '
                                'All keys must be unique' % (str(checkpoint_key)))

        checkpoint = self.timestamp()

        self.checkpoints[checkpoint_key] = checkpoint
        self.last_checkpoint_key = checkpoint_key

        self.num_checkpoints += 1

        if increment_to:
            self.score = increment_to
        else:
            self.score += 1

        if self.required_completion_score and self.score >= self.required_completion_score:
            self.complete = True

        return checkpoint


    def calculate_time_remaining(self, infinite_default='?'):
        if self.complete:
            return datetime.timedelta(seconds=0)
        if not self.required_completion_score:
            return None
        if not self.score:
            return infinite_default

        time_elapsed = self.checkpoints[self.last_checkpoint_key] - self.checkpoints[self.initial_checkpoint_key]
        fraction_completed = self.score / self.required_completion_score

        return time_elapsed / fraction_completed - time_elapsed


    def eta(self):
        # if eta was called within the last half second, the previous ETA is good enough
        eta_timestamp = self.timestamp()
        if eta_timestamp - self.last_eta_timestamp < datetime.timedelta(seconds=0.5) and self.num_checkpoints > 0:
            return self.last_eta

        eta = self.calculate_time_remaining()
        eta = self.format_time(eta) if isinstance(eta, datetime.timedelta) else str(eta)

        self.last_eta = eta
        self.last_eta_timestamp = eta_timestamp

        return eta


    def time_elapsed(self):
        return self.format_time(self.timedelta_to_checkpoint(self.timestamp()))


    def format_time(self, timedelta):
        """Use the highest two non-zero units, e.g. 7260s is `2h1m`"""

        seconds = int(timedelta.total_seconds())
        if seconds < 60:
            return '%ds' % seconds

        minutes, seconds = divmod(seconds, 60)
        if minutes < 60:
            return '%dm%ds' % (minutes, seconds)

        hours, minutes = divmod(minutes, 60)
        if hours < 24:
            return '%dh%dm' % (hours, minutes)

        days, hours = divmod(hours, 24)
        return '%dd%dh' % (days, hours)


class TimeCode(object):
    """Time a block of code, and report it with `run.info_single` afterwards (see also time_program)

    >>> with terminal.TimeCode() as t:
    >>>     time.sleep(5)
    ✓ Code finished after 0:00:05.000477
    """

    def __init__(self, success_msg=None, sc='green', fc='red', failure_msg=None, run=None, quiet=False, suppress_first=0):
        self.run = run or Run()
        self.run.single_line_prefixes = {0: '✓ ', 1: '✖ '}

        self.quiet = quiet
        self.suppress_first = suppress_first
        self.sc, self.fc = sc, fc
        self.s_msg = success_msg or 'Code finished after '
        self.f_msg = failure_msg or 'Code encountered error after '


    def __enter__(self):
        self.timer = Timer()
        return self


    def __exit__(self, exception_type, exception_value, traceback):
        self.time = self.timer.timedelta_to_checkpoint(self.timer.timestamp())

        if self.quiet or self.time <= datetime.timedelta(seconds=self.suppress_first):
            return

        return_code = 0 if exception_type is None else 1

        msg, color = (self.s_msg, self.sc) if not return_code else (self.f_msg, self.fc)
        self.run.info_single(msg + str(self.time), nl_before=1, mc=color, level=return_code)


def time_program(program_method):
    """A decorator used to time fcg programs.

    >>> @terminal.time_program
    >>> def main():
    >>>     <do stuff>
    """

    import inspect
    program_name = os.path.basename(inspect.getfile(program_method))

    TimeCode_params = {
        'success_msg': '%s took ' % program_name,
        'failure_msg': '%s encountered an error after ' % program_name,
        'suppress_first': 3, # avoid clutter when program finishes or fails within 3 seconds
    }

    def wrapper(*args, **kwargs):
        with TimeCode(**TimeCode_params):
            program_method(*args, **kwargs)
    return wrapper


def pretty_print(n):
    """Pretty print function for very big integers"""
    if not isinstance(n, int):
        return n

    return '{:,}'.format(n)


def get_date():
    return time.strftime("%d %b %y %H:%M:%S", time.localtime())


def get_terminal_size():
    size = shutil.get_terminal_size(fallback=(80, 25))
    return size.columns, size.lines
