#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2026 The Regents of the University of California
#
# This file is part of fastamut and is licensed under the MIT license: see
# LICENSE.
# -----------------------------------------------------------------------------

from datetime import date


def vcf_header(outstream, store=None, version='4.2',
               source='fastamut::mutate'):
    print('##fileformat=VCFv', version, sep='', file=outstream)
    print('##fileDate=', date.today().strftime('%Y%m%d'), sep='',
          file=outstream)
    print('##source=', source, sep='', file=outstream)
    if store is not None:
        for contig in store:
            print('##contig=<ID={:s},length={:d}>'.format(
                contig.name, len(contig)), file=outstream)
    print('#CHROM', 'POS', 'ID', 'REF', 'ALT', 'QUAL', 'FILTER', 'INFO',
          sep='\t', file=outstream)


def vcf_line(record):
    """Format a mutation record as a VCF data line (1-based position)."""
    return '{:s}\t{:d}\t.\t{:s}\t{:s}\t.\tPASS\t.'.format(
        record.contig, record.position + 1, record.original.upper(),
        record.new.upper()
    )


def write_vcf(records, outstream, store=None):
    vcf_header(outstream, store=store)
    for record in records:
        print(vcf_line(record), file=outstream)
