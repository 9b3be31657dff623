#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2026 The Regents of the University of California
#
# This file is part of fastamut and is licensed under the MIT license: see
# LICENSE.
# -----------------------------------------------------------------------------

import numpy
import pytest
import fastamut
from fastamut import Contig, FastaFormatError


@pytest.mark.parametrize('thestring', [
    ('GATTACA'),
    ('ATGNNNNNNNNNNNNNNNNNNNNNNNNNNNNNNNNTGA'),
    ('acgtRYSWKMBDHVNacgt'),
    ('nnnnACGTacgtNNNN'),
    (''),
])
def test_mask(thestring):
    contig = Contig.from_string('seq', thestring)
    assert len(contig) == len(thestring)
    assert len(contig.mask) == len(contig.bases)
    assert contig.sequence == thestring
    for base, eligible in zip(thestring, contig.mask):
        assert eligible == (base.upper() in 'ACGT')
    assert contig.num_eligible == sum(b in 'ACGTacgt' for b in thestring)


@pytest.mark.parametrize('thestring,badchar,position', [
    ('ACGTX', 'X', 4),
    ('-ACGT', '-', 0),
    ('ACGUACGU', 'U', 3),
    ('ACG*T', '*', 3),
    ('ACGTé', 'é', 4),
])
def test_invalid_symbols(thestring, badchar, position):
    with pytest.raises(FastaFormatError) as fe:
        Contig.from_string('chrBogus', thestring)
    message = str(fe.value)
    assert '"chrBogus"' in message
    assert 'position {:d}'.format(position) in message
    assert badchar in message


def test_empty_name():
    with pytest.raises(FastaFormatError, match=r'name must not be empty'):
        Contig.from_string('', 'ACGT')


def test_mask_is_readonly():
    contig = Contig.from_string('seq', 'ACGTNNACGT')
    with pytest.raises(ValueError):
        contig.mask[4] = True
    contig.bases[0] = ord('T')
    assert contig.sequence == 'TCGTNNACGT'
    assert contig.mask[0]


def test_mask_not_recomputed_after_mutation():
    contig = Contig.from_string('seq', 'ACGT')
    contig.bases[1] = ord('N')
    assert contig.mask.tolist() == [True, True, True, True]


def test_mask_length_mismatch():
    bases = numpy.frombuffer(bytearray(b'ACGT'), dtype=numpy.uint8)
    mask = numpy.ones(3, dtype=bool)
    with pytest.raises(ValueError, match=r'mask length 3 does not match 4'):
        Contig('seq', bases, mask=mask)


def test_copy():
    contig = Contig.from_string('seq', 'ACGTNacgt', description='yo')
    dup = contig.copy()
    assert dup.name == 'seq'
    assert dup.description == 'yo'
    assert dup.mask is contig.mask
    dup.bases[0] = ord('G')
    assert dup.sequence == 'GCGTNacgt'
    assert contig.sequence == 'ACGTNacgt'


def test_defline():
    assert Contig.from_string('chr1', 'A').defline == '>chr1'
    contig = Contig.from_string('chr1', 'A', description='GRCh38 chr 1')
    assert contig.defline == '>chr1 GRCh38 chr 1'
    assert repr(contig) == "Contig(name='chr1', length=1)"
    assert str(contig) == 'A'
