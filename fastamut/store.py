#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2026 The Regents of the University of California
#
# This file is part of fastamut and is licensed under the MIT license: see
# LICENSE.
# -----------------------------------------------------------------------------


class ContigNotFoundError(LookupError):
    pass


class SequenceStore(object):
    """Ordered collection of contigs, keyed by name.

    Iteration follows insertion order, which for a store loaded from a FASTA
    file is the order of the records in the file. Once loading is finished the
    directory itself is never modified, so any number of threads can read from
    it concurrently.
    """

    def __init__(self, contigs=None):
        self._contigs = dict()
        if contigs:
            for contig in contigs:
                self.add(contig)

    def add(self, contig):
        if contig.name in self._contigs:
            message = 'duplicate contig name "{:s}"'.format(contig.name)
            raise ValueError(message)
        self._contigs[contig.name] = contig

    def get(self, name):
        try:
            return self._contigs[name]
        except KeyError:
            message = 'contig not found: "{:s}"'.format(name)
            raise ContigNotFoundError(message) from None

    def __getitem__(self, name):
        return self.get(name)

    def __contains__(self, name):
        return name in self._contigs

    def __iter__(self):
        return iter(self._contigs.values())

    def __len__(self):
        return len(self._contigs)

    @property
    def names(self):
        return list(self._contigs.keys())

    @property
    def total_length(self):
        return sum(len(c) for c in self)
