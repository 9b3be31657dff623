#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2026 The Regents of the University of California
#
# This file is part of fastamut and is licensed under the MIT license: see
# LICENSE.
# -----------------------------------------------------------------------------


def subparser(subparsers):
    """Define the `fastamut mutate` command-line interface."""

    desc = 'Introduce random SNPs at a fixed rate into the genome provided. ' \
        'Only unambiguous nucleotides (A/C/G/T) are mutated, and no position ' \
        'is mutated more than once.'

    subparser = subparsers.add_parser('mutate', description=desc)

    mut_args = subparser.add_argument_group('Mutation parameters')
    mut_args.add_argument('-r', '--rate', type=float, metavar='R',
                          default=0.01, help='fraction of unambiguous '
                          'positions in each sequence to mutate; default is '
                          '0.01')
    mut_args.add_argument('-m', '--minimum', type=int, metavar='M',
                          default=None, help='mutate at least M positions in '
                          'each sequence, if possible')
    mut_args.add_argument('-s', '--seed', metavar='S', default=None, type=int,
                          help='seed for random number generator')
    mut_args.add_argument('-t', '--threads', type=int, metavar='T',
                          default=1, help='number of threads to use for '
                          'mutating sequences; default is 1')

    out_args = subparser.add_argument_group('Output')
    out_args.add_argument('-o', '--out', metavar='FILE',
                          help='output file; default is terminal (stdout)')
    out_args.add_argument('-f', '--force', action='store_true',
                          help='overwrite the output file if it exists')
    out_args.add_argument('-w', '--line-width', type=int, metavar='W',
                          default=70, help='wrap output sequences at W '
                          'characters per line; default is 70')
    out_args.add_argument('--preserve-wrap', action='store_true',
                          help='wrap each output sequence at the line width '
                          'observed in the input; overrides --line-width')
    out_args.add_argument('--vcf', metavar='FILE', help='write mutations to '
                          'a VCF file')

    subparser.add_argument('genome', help='genome to mutate')
