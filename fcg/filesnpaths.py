# -*- coding: utf-8
# pylint: disable=line-too-long
"""File/Path operations"""

import os
import tempfile

import fcg

from fcg.terminal import Progress
from fcg.errors import FilesNPathsError


__copyright__ = "Copyleft 2016-2026, the fcg developers"
__credits__ = []
__license__ = "GPL 3.0"
__version__ = fcg.__version__
__author__ = "Developers of fcg"
__status__ = "Development"


def is_file_exists(file_path, dont_raise=False):
    if not file_path:
        raise FilesNPathsError("No input file is declared...")
    if not os.path.exists(os.path.abspath(file_path)):
        if dont_raise:
            return False
        else:
            Progress().reset()
            raise FilesNPathsError("No such file: '%s' :/" % file_path)
    return True


def is_file_readable(file_path):
    is_file_exists(file_path)

    if os.path.isdir(file_path):
        raise FilesNPathsError(f"The path '{file_path}' is a directory, not a file :/")
    if not os.access(file_path, os.R_OK):
        raise FilesNPathsError(f"You do not have read access to the file at '{file_path}' :/")

    return True


def is_output_file_writable(file_path, ok_if_exists=True):
    if not file_path:
        raise FilesNPathsError("No output file is declared...")
    if os.path.isdir(file_path):
        raise FilesNPathsError(f"The path you have provided for your output file ('{os.path.abspath(file_path)}') "
                               f"already is used by a directory :/")
    if not os.access(os.path.dirname(os.path.abspath(file_path)), os.W_OK):
        raise FilesNPathsError(f"It seems you are not authorized to create an output file at '{file_path}'.")
    if os.path.exists(file_path) and not os.access(file_path, os.W_OK):
        raise FilesNPathsError(f"You do not have write access to the file at '{file_path}' :/")
    if os.path.exists(file_path) and not ok_if_exists:
        if fcg.FORCE_OVERWRITE:
            try:
                os.remove(file_path)
            except OSError as e:
                raise FilesNPathsError(f"As per your instructions, fcg was trying to delete the file at '{file_path}', "
                                       f"yet it failed. Here is the error message: {e}.")
        else:
            raise FilesNPathsError(f"The output file '{file_path}' already exists. You can always use the flag "
                                   f"`--force-overwrite` to instruct fcg to delete the existing file first.")

    return True


def is_file_empty(file_path):
    return os.stat(file_path).st_size == 0


def is_program_exists(program, dont_raise=False):
    """adapted from http://stackoverflow.com/a/377028"""
    def is_exe(fpath):
        return os.path.isfile(fpath) and os.access(fpath, os.X_OK)

    fpath, fname = os.path.split(program)
    if fpath:
        if is_exe(program):
            return program
    else:
        for path in os.environ["PATH"].split(os.pathsep):
            path = path.strip('"')
            exe_file = os.path.join(path, program)
            if is_exe(exe_file):
                return exe_file

    if dont_raise:
        return False

    raise FilesNPathsError("An important program, '%s', is not found in your $PATH. The BLAST+ suite "
                           "should be installed in your environment (i.e., `conda install -c bioconda "
                           "blast`)." % program)


def get_temp_file_path(prefix=None, suffix=None, just_the_path=True):
    f = tempfile.NamedTemporaryFile(delete=False, prefix=prefix, suffix=suffix, dir=fcg.TMP_DIR)
    temp_file_name = f.name
    f.close()

    if just_the_path:
        os.remove(temp_file_name)

    return temp_file_name


def remove_temp_file(file_path, run=None):
    """Remove a temporary file without making a fuss if it is not possible.

    Returns True if the file is gone.
    """
    if not file_path or not os.path.exists(file_path):
        return True

    try:
        os.remove(file_path)
    except OSError as e:
        if run:
            run.warning(f"The temporary file '{file_path}' could not be removed ({e}). It is not "
                        f"the end of the world, but you may want to remove it yourself.")
        return False

    return True
