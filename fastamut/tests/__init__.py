#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2026 The Regents of the University of California
#
# This file is part of fastamut and is licensed under the MIT license: see
# LICENSE.
# -----------------------------------------------------------------------------

import os.path


datadir = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')


def data_file(basename):
    return os.path.join(datadir, basename)
