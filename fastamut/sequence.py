#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2026 The Regents of the University of California
#
# This file is part of fastamut and is licensed under the MIT license: see
# LICENSE.
# -----------------------------------------------------------------------------

import numpy


NUCLEOTIDES = 'ACGT'
AMBIGUITY_CODES = 'RYSWKMBDHVN'

# Byte lookup tables indexed by ASCII code
VALID = numpy.zeros(256, dtype=bool)
ELIGIBLE = numpy.zeros(256, dtype=bool)
for _symbol in NUCLEOTIDES + AMBIGUITY_CODES:
    VALID[ord(_symbol)] = True
    VALID[ord(_symbol.lower())] = True
for _symbol in NUCLEOTIDES:
    ELIGIBLE[ord(_symbol)] = True
    ELIGIBLE[ord(_symbol.lower())] = True
VALID.flags.writeable = False
ELIGIBLE.flags.writeable = False


class FastaFormatError(ValueError):
    """Raised when sequence input does not conform to the FASTA grammar."""
    pass


def find_invalid(bases):
    """Return the index of the first unrecognized symbol, or None."""
    bad = numpy.flatnonzero(~VALID[bases])
    if len(bad) == 0:
        return None
    return int(bad[0])


def bases_from_buffer(buffer):
    """View a bytearray as an array of base codes without copying it."""
    if len(buffer) == 0:
        return numpy.zeros(0, dtype=numpy.uint8)
    return numpy.frombuffer(buffer, dtype=numpy.uint8)


def eligibility_mask(bases):
    mask = ELIGIBLE[bases]
    mask.flags.writeable = False
    return mask


class Contig(object):
    """A named sequence with a fixed mask of mutable positions.

    The `bases` attribute is a numpy array of ASCII codes, one byte per
    nucleotide. The `mask` is computed once, when the contig is created, and is
    read-only afterwards: substitutions applied to `bases` never change which
    positions count as eligible for mutation.
    """

    def __init__(self, name, bases, description='', mask=None,
                 linewidth=None):
        if not name:
            raise FastaFormatError('contig name must not be empty')
        self.name = name
        self.description = description
        self.bases = bases
        self.linewidth = linewidth
        if mask is None:
            mask = eligibility_mask(bases)
        if len(mask) != len(bases):
            message = 'mask length {:d} does not match {:d} bases'.format(
                len(mask), len(bases)
            )
            raise ValueError(message)
        self.mask = mask

    @classmethod
    def from_string(cls, name, sequence, description='', linewidth=None):
        """Build a contig from a plain sequence string, validating symbols."""
        try:
            data = bytearray(sequence, 'ascii')
        except UnicodeEncodeError as err:
            message = 'non-ASCII character {!r} in contig "{:s}" at ' \
                'position {:d}'.format(sequence[err.start], name, err.start)
            raise FastaFormatError(message) from err
        bases = bases_from_buffer(data)
        pos = find_invalid(bases)
        if pos is not None:
            message = 'unrecognized character "{:s}" in contig "{:s}" at ' \
                'position {:d}'.format(sequence[pos], name, pos)
            raise FastaFormatError(message)
        return cls(name, bases, description=description, linewidth=linewidth)

    @property
    def sequence(self):
        return self.bases.tobytes().decode('ascii')

    @property
    def defline(self):
        if self.description:
            return '>{:s} {:s}'.format(self.name, self.description)
        return '>' + self.name

    @property
    def num_eligible(self):
        return int(numpy.count_nonzero(self.mask))

    def copy(self):
        """Copy the bases; the read-only mask is shared."""
        return Contig(self.name, self.bases.copy(),
                      description=self.description, mask=self.mask,
                      linewidth=self.linewidth)

    def __len__(self):
        return len(self.bases)

    def __str__(self):
        return self.sequence

    def __repr__(self):
        return 'Contig(name={!r}, length={:d})'.format(self.name, len(self))
