#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2026 The Regents of the University of California
#
# This file is part of fastamut and is licensed under the MIT license: see
# LICENSE.
# -----------------------------------------------------------------------------

from collections import namedtuple
import math
from numbers import Integral, Real


class MutationConfigError(ValueError):
    pass


_fields = 'mutation_rate line_width minimum seed threads'
_defaults = (0.01, 70, None, None, 1)


class MutationConfig(namedtuple('MutationConfig', _fields)):
    """Parameters for a single mutation run.

    - `mutation_rate`: fraction of eligible (A/C/G/T) positions to mutate in
      each contig, in the interval [0, 1]
    - `line_width`: output line width; None wraps each contig at the width
      observed in the input
    - `minimum`: optional per-contig floor on the number of mutations
    - `seed`: optional seed for the random number generators
    - `threads`: number of worker threads used to mutate contigs
    """
    __slots__ = ()

    def validate(self):
        rate = self.mutation_rate
        if isinstance(rate, bool) or not isinstance(rate, Real) or \
                math.isnan(rate) or not 0.0 <= rate <= 1.0:
            message = 'mutation rate must be in the interval [0, 1], ' \
                'got {!r}'.format(rate)
            raise MutationConfigError(message)
        width = self.line_width
        if width is not None:
            if isinstance(width, bool) or not isinstance(width, Integral) or \
                    width < 1:
                message = 'line width must be a positive integer, ' \
                    'got {!r}'.format(width)
                raise MutationConfigError(message)
        if self.minimum is not None:
            if not isinstance(self.minimum, Integral) or self.minimum < 0:
                message = 'minimum mutations must be a non-negative ' \
                    'integer, got {!r}'.format(self.minimum)
                raise MutationConfigError(message)
        if self.seed is not None:
            if isinstance(self.seed, bool) or \
                    not isinstance(self.seed, Integral) or self.seed < 0:
                message = 'random seed must be a non-negative integer, ' \
                    'got {!r}'.format(self.seed)
                raise MutationConfigError(message)
        if not isinstance(self.threads, Integral) or self.threads < 1:
            message = 'number of threads must be at least 1, ' \
                'got {!r}'.format(self.threads)
            raise MutationConfigError(message)
        return self


MutationConfig.__new__.__defaults__ = _defaults
