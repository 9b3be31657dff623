#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2026 The Regents of the University of California
#
# This file is part of fastamut and is licensed under the MIT license: see
# LICENSE.
# -----------------------------------------------------------------------------

import numpy
from fastamut.sequence import Contig, FastaFormatError
from fastamut.sequence import bases_from_buffer, find_invalid
from fastamut.store import SequenceStore


DEFAULT_LINE_WIDTH = 70


def parse_defline(line, lineno=None):
    """Split a header line into a contig name and description."""
    text = line[1:].rstrip()
    if not text or text[0].isspace():
        message = 'header with empty contig name'
        if lineno is not None:
            message += ' (line {:d})'.format(lineno)
        raise FastaFormatError(message)
    fields = text.split(None, 1)
    name = fields[0]
    description = fields[1].strip() if len(fields) > 1 else ''
    return name, description


def parse_fasta(data):
    """Load sequences in Fasta format.

    This generator function yields a `Contig` for each record in the Fasta
    data. The sequence of each record is accumulated directly into a single
    byte buffer, line by line, and every line is checked against the
    nucleotide alphabet as it is read, so that errors can be reported with the
    exact position of the offending character.
    """
    name, description, seq, linewidth = None, None, None, None
    for lineno, line in enumerate(data, 1):
        if line.startswith('>'):
            if name is not None:
                yield Contig(name, bases_from_buffer(seq),
                             description=description, linewidth=linewidth)
            name, description = parse_defline(line, lineno)
            seq, linewidth = bytearray(), None
            continue

        chunk = ''.join(line.split())
        if not chunk:
            continue
        if name is None:
            message = 'sequence data before first header (line {:d})'.format(
                lineno
            )
            raise FastaFormatError(message)
        if linewidth is None:
            linewidth = len(chunk)
        try:
            encoded = chunk.encode('ascii')
        except UnicodeEncodeError as err:
            pos = err.start
            encoded = None
        else:
            pos = find_invalid(numpy.frombuffer(encoded, dtype=numpy.uint8))
        if pos is not None:
            message = 'unrecognized character "{:s}" in contig "{:s}" at ' \
                'position {:d} (line {:d})'.format(
                    chunk[pos], name, len(seq) + pos, lineno
                )
            raise FastaFormatError(message)
        seq.extend(encoded)

    if name is None:
        raise FastaFormatError('no FASTA records found in input')
    yield Contig(name, bases_from_buffer(seq), description=description,
                 linewidth=linewidth)


def load_store(data):
    """Load every record from a Fasta stream into a sequence store.

    The entire input is consumed and validated before the store is returned.
    """
    store = SequenceStore()
    for contig in parse_fasta(data):
        if contig.name in store:
            message = 'duplicate contig name "{:s}"'.format(contig.name)
            raise FastaFormatError(message)
        store.add(contig)
    return store


def write_contig(contig, outstream, linewidth=DEFAULT_LINE_WIDTH):
    """Write a single contig in Fasta format.

    If `linewidth` is None, the contig is wrapped at the width observed when
    it was parsed.
    """
    width = linewidth or contig.linewidth or DEFAULT_LINE_WIDTH
    print(contig.defline, file=outstream)
    blocksize = width * 1024
    for start in range(0, len(contig), blocksize):
        block = contig.bases[start:start + blocksize].tobytes().decode('ascii')
        lines = [block[i:i + width] for i in range(0, len(block), width)]
        print('\n'.join(lines), file=outstream)


def write_fasta(store, outstream, linewidth=DEFAULT_LINE_WIDTH):
    for contig in store:
        write_contig(contig, outstream, linewidth=linewidth)
