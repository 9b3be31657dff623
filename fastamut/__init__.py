#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2026 The Regents of the University of California
#
# This file is part of fastamut and is licensed under the MIT license: see
# LICENSE.
# -----------------------------------------------------------------------------

# Core libraries
import builtins
from gzip import open as gzopen
import sys

# Internal modules
from fastamut import sequence
from fastamut import store
from fastamut import fasta
from fastamut import config
from fastamut import vcf
from fastamut import reference
from fastamut.sequence import Contig, FastaFormatError
from fastamut.store import SequenceStore, ContigNotFoundError
from fastamut.config import MutationConfig, MutationConfigError
from fastamut.timer import Timer

# Subcommands and command-line interface
from fastamut import mutate
from fastamut import cli

__version__ = '0.1.0'

logstream = sys.stderr


def plog(*args, **kwargs):
    """Print logging output."""
    if logstream is not None:
        print(*args, **kwargs, file=logstream)


def open(filename, mode):
    if mode not in ('r', 'w'):
        raise ValueError('invalid mode "{}"'.format(mode))
    if filename in ['-', None]:
        filehandle = sys.stdin if mode == 'r' else sys.stdout
        return filehandle
    openfunc = builtins.open
    if filename.endswith('.gz'):
        openfunc = gzopen
        mode += 't'
    return openfunc(filename, mode)
