#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2026 The Regents of the University of California
#
# This file is part of fastamut and is licensed under the MIT license: see
# LICENSE.
# -----------------------------------------------------------------------------

import os.path

import fastamut
import pysam
from fastamut.sequence import Contig
from fastamut.store import ContigNotFoundError, SequenceStore


def autoindex(refrfile):
    if not os.path.isfile(refrfile):
        message = 'reference file {:s} does not exist'.format(refrfile)
        raise FileNotFoundError(message)

    faifile = refrfile + '.fai'
    if os.path.isfile(faifile):
        return

    message = 'WARNING: faidx index not found for "{:s}"'.format(refrfile)
    message += ', indexing now'
    fastamut.plog('[fastamut::reference]', message)
    pysam.faidx(refrfile)


class IndexedReference(object):
    """Random access to the contigs of a faidx-indexed Fasta file.

    This is an alternative to parsing the whole file with
    `fastamut.fasta.load_store`: contigs are fetched one at a time by name,
    and a store can be populated with any subset of them. The index does not
    keep deflines, so contigs loaded this way have empty descriptions.
    """

    def __init__(self, refrfile):
        autoindex(refrfile)
        self.filename = refrfile
        self._fasta = pysam.FastaFile(refrfile)

    @property
    def names(self):
        return list(self._fasta.references)

    def length(self, name):
        if name not in self._fasta:
            message = 'contig not found: "{:s}"'.format(name)
            raise ContigNotFoundError(message)
        return self._fasta.get_reference_length(name)

    def lookup_reference(self, name):
        if name not in self._fasta:
            message = 'contig not found: "{:s}"'.format(name)
            raise ContigNotFoundError(message)
        sequence = self._fasta.fetch(reference=name)
        return Contig.from_string(name, sequence)

    def load_store(self, names=None):
        if names is None:
            names = self.names
        return SequenceStore(self.lookup_reference(name) for name in names)

    def close(self):
        self._fasta.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
