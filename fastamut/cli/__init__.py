#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# -----------------------------------------------------------------------------
# Copyright (c) 2026 The Regents of the University of California
#
# This file is part of fastamut and is licensed under the MIT license: see
# LICENSE.
# -----------------------------------------------------------------------------

import argparse
import sys
import fastamut
from . import mutate

mains = {
    'mutate': fastamut.mutate.main,
}

subparser_funcs = {
    'mutate': mutate.subparser,
}


def parser():
    bubbletext = r'''
fastamut: simulate SNPs in a reference genome

Reads a Fasta file, substitutes a random, different nucleotide at a fixed
fraction of the unambiguous positions of each sequence, and writes the mutated
genome back out in Fasta format.
'''
    subcommandstr = '", "'.join(sorted(list(mains.keys())))
    parser = argparse.ArgumentParser(
        description=bubbletext,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser._positionals.title = 'Subcommands'
    parser._optionals.title = 'Global arguments'
    parser.add_argument('-v', '--version', action='version',
                        version='fastamut v{}'.format(fastamut.__version__))
    parser.add_argument('-l', '--logfile', metavar='F', default=sys.stderr,
                        type=argparse.FileType('w'), help='log file for '
                        'diagnostic messages, warnings, and errors')
    subparsers = parser.add_subparsers(dest='cmd', metavar='cmd',
                                       help='"' + subcommandstr + '"')
    for func in subparser_funcs.values():
        func(subparsers)

    return parser


def parse_args(arglist=None):
    return parser().parse_args(arglist)
