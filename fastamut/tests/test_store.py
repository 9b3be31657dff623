#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2026 The Regents of the University of California
#
# This file is part of fastamut and is licensed under the MIT license: see
# LICENSE.
# -----------------------------------------------------------------------------

import pytest
from fastamut import Contig, ContigNotFoundError, SequenceStore


@pytest.fixture
def store():
    return SequenceStore([
        Contig.from_string('chr2', 'ACGT'),
        Contig.from_string('chr10', 'GGNNCC'),
        Contig.from_string('chr1', 'T'),
    ])


def test_order(store):
    assert store.names == ['chr2', 'chr10', 'chr1']
    assert [c.name for c in store] == ['chr2', 'chr10', 'chr1']
    assert len(store) == 3
    assert store.total_length == 11


def test_lookup(store):
    assert store['chr10'].sequence == 'GGNNCC'
    assert store.get('chr1').sequence == 'T'
    assert 'chr2' in store
    assert 'chrM' not in store


def test_lookup_missing(store):
    with pytest.raises(ContigNotFoundError, match=r'contig not found: "chrM"'):
        store['chrM']
    with pytest.raises(LookupError):
        store.get('chrY')


def test_duplicate(store):
    with pytest.raises(ValueError, match=r'duplicate contig name "chr1"'):
        store.add(Contig.from_string('chr1', 'AAAA'))
    assert store['chr1'].sequence == 'T'


def test_empty():
    store = SequenceStore()
    assert len(store) == 0
    assert list(store) == []
    assert store.total_length == 0
