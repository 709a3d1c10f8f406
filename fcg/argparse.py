# -*- coding: utf-8
# pylint: disable=line-too-long
"""Overloading Python argparse for fcg purposes"""

import sys
import argparse
import textwrap

from colored import fg, attr
from rich_argparse import RichHelpFormatter

import fcg

from fcg.errors import ConfigError


__copyright__ = "Copyleft 2016-2026, the fcg developers"
__credits__ = []
__license__ = "GPL 3.0"
__author__ = "Developers of fcg"
__status__ = "Development"


atty = sys.stdout.isatty()


class ArgumentParser(argparse.ArgumentParser):
    def __init__(self, description="No description :/", epilog=None):
        super().__init__()

        self.description = description
        self.epilog = epilog or self.get_fcg_epilogue()

        # these are read directly from sys.argv when fcg is imported, so programs
        # do not have to declare them
        self.fcg_allowed_ad_hoc_flags = ['--debug', '--quiet', '--no-progress', '--force-overwrite', '--tmp-dir']

        self.add_argument('-v', '--version', action='version', version=self.get_version_text())


    def get_version_text(self):
        return '\n'.join(["%s: %s" % (k, v) for k, v in fcg.get_version_tuples()])


    def get_fcg_epilogue(self):
        flags = "--debug, --quiet, --no-progress, --force-overwrite, --tmp-dir DIR"

        if atty:
            return f"{attr('bold')}Flags every fcg program understands:{attr('reset')}\n\n   {fg('cyan') + flags + attr('reset')}"
        else:
            return f"Flags every fcg program understands:\n\n   {flags}"


    def format_help(self):
        """Individual formatting of sections in the help text.

        Options are rendered with `RichHelpFormatter` when there is a terminal,
        while the description and the epilog keep their own spacing.
        """

        RichHelpFormatter.styles["argparse.text"] = "italic"
        RichHelpFormatter.group_name_formatter = str.upper

        if atty:
            usage_formatter = RichHelpFormatter(self.prog)
        else:
            usage_formatter = argparse.ArgumentDefaultsHelpFormatter(self.prog)

        description_formatter = argparse.RawDescriptionHelpFormatter(self.prog)
        epilog_formatter = argparse.RawDescriptionHelpFormatter(prog=self.prog)
        separator_formatter = argparse.RawDescriptionHelpFormatter(prog=self.prog)

        usage_formatter.add_usage(self.usage, self._actions, self._mutually_exclusive_groups)

        for action_group in self._action_groups:
            usage_formatter.start_section(action_group.title)
            usage_formatter.add_text(action_group.description)
            usage_formatter.add_arguments(action_group._group_actions)
            usage_formatter.end_section()

        separator_formatter.add_text('━' * 80 + '\n')

        if atty:
            description_text = [attr('bold') + 'Program description:' + attr('reset'), '']
        else:
            description_text = ['Program description:', '']

        description_text.extend([textwrap.indent(l, '   ') for l in textwrap.wrap(" ".join(textwrap.dedent(self.description).split()), width=77)])
        description_formatter.add_text('\n'.join(description_text))

        epilog_formatter.add_text(self.epilog)

        help_text = '\n'.join([usage_formatter.format_help().replace(":\n", "\n") if atty else usage_formatter.format_help(),
                               separator_formatter.format_help(),
                               description_formatter.format_help(),
                               epilog_formatter.format_help(),
                               separator_formatter.format_help()]) + '\n'

        return help_text


    def sanity_check(self, args):
        """Simple sanity checks for global arguments"""

        if args and 'num_threads' in args:
            if args.num_threads is None or args.num_threads <= 0:
                raise ConfigError(f"The number of threads must be a positive integer. `{args.num_threads}` is not it :/")


    def get_args(self, parser):
        """Parse args the fcg way.

        Ad hoc flags such as `--debug` can be used with any fcg program even if
        the program does not declare them, yet anything else argparse does not
        expect still makes it complain.
        """

        args, unknown = parser.parse_known_args()

        self.sanity_check(args)

        if len([f for f in unknown if f not in self.fcg_allowed_ad_hoc_flags]):
            for f in self.fcg_allowed_ad_hoc_flags:
                # non-boolean flags
                if f in ['--tmp-dir']:
                    parser.add_argument(f)
                else:
                    parser.add_argument(f, action='store_true')
            parser.parse_args()

        return args
