#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2026 The Regents of the University of California
#
# This file is part of fastamut and is licensed under the MIT license: see
# LICENSE.
# -----------------------------------------------------------------------------

import time
import pytest
from fastamut import Timer


def test_named_tasks():
    t = Timer()
    t.start()
    t.start('load')
    time.sleep(0.05)
    assert t.probe() > 0
    assert t.probe('load') > 0.0
    with pytest.raises(ValueError, match=r'No timer started for "mutate"'):
        t.probe('mutate')
    elapsed = t.stop('load')
    assert elapsed > 0.0
    assert t.elapsed['load'] == elapsed
    with pytest.raises(ValueError, match=r'No timer started for "load"'):
        t.stop('load')
    t.start('mutate')
    with pytest.raises(ValueError, match=r'Timer already started'):
        t.start('mutate')
    assert t.stop() >= elapsed


def test_timed():
    t = Timer()
    with t.timed('write'):
        time.sleep(0.01)
    assert t.elapsed['write'] > 0.0
    with pytest.raises(ValueError):
        t.probe('write')
