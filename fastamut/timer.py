#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2026 The Regents of the University of California
#
# This file is part of fastamut and is licensed under the MIT license: see
# LICENSE.
# -----------------------------------------------------------------------------

from contextlib import contextmanager
import time


class Timer(object):
    """Wall-clock timer for any number of named tasks.

    The unnamed task (key `None`) is typically used for total runtime.
    """

    def __init__(self):
        self._started = dict()
        self.elapsed = dict()

    def start(self, key=None):
        key = key or ''
        if key in self._started:
            raise ValueError('Timer already started for "{:s}"'.format(key))
        self._started[key] = time.perf_counter()

    def _since_start(self, key):
        if key not in self._started:
            raise ValueError('No timer started for "{:s}"'.format(key))
        return time.perf_counter() - self._started[key]

    def stop(self, key=None):
        key = key or ''
        self.elapsed[key] = self._since_start(key)
        del self._started[key]
        return self.elapsed[key]

    def probe(self, key=None):
        return self._since_start(key or '')

    @contextmanager
    def timed(self, key):
        self.start(key)
        try:
            yield self
        finally:
            self.stop(key)
