#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2026 The Regents of the University of California
#
# This file is part of fastamut and is licensed under the MIT license: see
# LICENSE.
# -----------------------------------------------------------------------------

import argparse
import fastamut


def main(arglist=None):
    """Entry point for the fastamut CLI.

    Isolated as a method so that the CLI can be called by other Python code
    (e.g. for testing), in which case the arguments are passed to the function.
    If no arguments are passed to the function, parse them from the command
    line. A pre-parsed argument namespace is also accepted.
    """
    if isinstance(arglist, argparse.Namespace):
        args = arglist
    else:
        args = fastamut.cli.parse_args(arglist)
    if args.cmd is None:  # pragma: no cover
        fastamut.cli.parser().parse_args(['-h'])

    assert args.cmd in fastamut.cli.mains
    fastamut.logstream = args.logfile
    mainmethod = fastamut.cli.mains[args.cmd]
    versionmessage = '[fastamut] running version {}'.format(
        fastamut.__version__
    )
    fastamut.plog(versionmessage)
    mainmethod(args)


if __name__ == '__main__':
    main()
