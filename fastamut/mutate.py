#!/usr/bin/env python
#
# -----------------------------------------------------------------------------
# Copyright (c) 2026 The Regents of the University of California
#
# This file is part of fastamut and is licensed under the MIT license: see
# LICENSE.
# -----------------------------------------------------------------------------

from collections import Counter, namedtuple
import math
import os.path
import threading

import numpy
import fastamut
from fastamut.config import MutationConfig
from fastamut.fasta import load_store, write_fasta
from fastamut.store import SequenceStore
from fastamut.vcf import write_vcf


MutationRecord = namedtuple('MutationRecord', 'contig position original new')
MutationPlan = namedtuple('MutationPlan', 'contig positions')

# Mappings for SNVs, indexed by ASCII code; -1 for anything but A/C/G/T
nucl_to_index = numpy.full(256, -1, dtype=numpy.int64)
for _index, _nucl in enumerate('ACGT'):
    nucl_to_index[ord(_nucl)] = _index
    nucl_to_index[ord(_nucl.lower())] = _index
index_to_nucl = numpy.array([ord(n) for n in 'ACGT'], dtype=numpy.uint8)
LOWERCASE_BIT = 0x20


def target_count(numeligible, rate, minimum=None):
    """Number of positions to mutate, with halves rounded up."""
    count = int(math.floor(rate * numeligible + 0.5))
    if minimum is not None:
        count = max(count, minimum)
    return max(0, min(count, numeligible))


def sample_by_rejection(mask, count, rng, numeligible=None):
    """Draw positions uniformly over the whole contig, keeping new eligible ones.

    Draws are made in batches, but only the first occurrence of each position
    is kept and positions are accepted in the order they were drawn, which is
    equivalent to drawing one position at a time and redrawing on rejection.
    """
    length = len(mask)
    if numeligible is None:
        numeligible = int(numpy.count_nonzero(mask))
    chosen = numpy.zeros(0, dtype=numpy.int64)
    while len(chosen) < count:
        need = count - len(chosen)
        batchsize = int(need * length / numeligible * 1.25) + 16
        draws = rng.integers(0, length, size=batchsize)
        draws = draws[mask[draws]]
        _, first = numpy.unique(draws, return_index=True)
        draws = draws[numpy.sort(first)]
        draws = draws[~numpy.isin(draws, chosen)]
        chosen = numpy.concatenate((chosen, draws[:need]))
    return chosen


def sample_from_pool(mask, count, rng):
    """Take a uniform random subset of the explicit eligible pool."""
    pool = numpy.flatnonzero(mask)
    return rng.choice(pool, size=count, replace=False)


def plan_mutations(contig, rate, rng, minimum=None):
    """Select the positions of a contig to be mutated.

    The number of positions is computed from the number of eligible (A/C/G/T)
    positions only. Rejection sampling is used when only a small fraction of a
    mostly-eligible contig is to be mutated, since it never materializes the
    full pool of eligible positions; otherwise positions are selected from the
    explicit pool.
    """
    numeligible = contig.num_eligible
    count = target_count(numeligible, rate, minimum=minimum)
    if count == 0:
        positions = numpy.zeros(0, dtype=numpy.int64)
    elif count == numeligible:
        positions = numpy.flatnonzero(contig.mask)
    elif count * 4 <= numeligible and numeligible * 2 >= len(contig):
        positions = sample_by_rejection(contig.mask, count, rng, numeligible)
    else:
        positions = sample_from_pool(contig.mask, count, rng)
    return MutationPlan(contig=contig.name, positions=numpy.sort(positions))


def check_plan(contig, plan):
    if plan.contig != contig.name:
        message = 'plan for contig "{:s}" applied to contig "{:s}"'.format(
            plan.contig, contig.name
        )
        raise ValueError(message)
    positions = plan.positions
    if len(positions) == 0:
        return
    outofbounds = positions[(positions < 0) | (positions >= len(contig))]
    if len(outofbounds) > 0:
        message = 'position {:d} out of bounds for contig "{:s}" ' \
            '(length {:d})'.format(int(outofbounds[0]), contig.name,
                                   len(contig))
        raise ValueError(message)
    ineligible = positions[~contig.mask[positions]]
    if len(ineligible) > 0:
        pos = int(ineligible[0])
        message = 'position {:d} of contig "{:s}" is not eligible for ' \
            'mutation (base "{:s}")'.format(pos, contig.name,
                                            chr(contig.bases[pos]))
        raise ValueError(message)
    if len(numpy.unique(positions)) != len(positions):
        message = 'duplicate positions in plan for contig "{:s}"'.format(
            contig.name
        )
        raise ValueError(message)


def apply_mutations(contig, plan, rng, inplace=True):
    """Substitute a different nucleotide at each planned position.

    Each new nucleotide is drawn uniformly from the three nucleotides other
    than the original, and takes the case of the original. With `inplace`
    false, the contig is left untouched and a mutated copy is returned.
    Returns the mutated contig and a list of `MutationRecord` objects sorted
    by position.
    """
    check_plan(contig, plan)
    target = contig if inplace else contig.copy()
    positions = numpy.sort(plan.positions)
    original = target.bases[positions]
    offsets = rng.integers(1, 4, size=len(positions))
    newindex = (nucl_to_index[original] + offsets) % 4
    newbases = index_to_nucl[newindex] | (original & LOWERCASE_BIT)
    target.bases[positions] = newbases

    records = [
        MutationRecord(contig.name, pos, chr(orig), chr(new))
        for pos, orig, new in zip(
            positions.tolist(), original.tolist(), newbases.tolist()
        )
    ]
    return target, records


def mutate_contig(contig, rate, rng, minimum=None, inplace=True):
    plan = plan_mutations(contig, rate, rng, minimum=minimum)
    return apply_mutations(contig, plan, rng, inplace=inplace)


def spawn_generators(count, seed=None):
    """Create independent random number generators, one per contig."""
    if not isinstance(seed, numpy.random.SeedSequence):
        seed = numpy.random.SeedSequence(seed)
    return [numpy.random.default_rng(child) for child in seed.spawn(count)]


def mutate_store(store, rate=0.01, minimum=None, seed=None, threads=1,
                 inplace=True):
    """Mutate every contig in the store.

    Each contig is planned and mutated with its own random number generator,
    so contigs can be processed by separate threads without sharing any state.
    With `inplace` false a new store of mutated copies is returned and the
    input store is left untouched. Returns the store and a list of all
    `MutationRecord` objects, in contig order and then position order.
    """
    if threads < 1:
        message = 'number of threads must be at least 1, got {!r}'.format(
            threads
        )
        raise ValueError(message)
    contigs = list(store)
    rngs = spawn_generators(len(contigs), seed=seed)
    results = [None] * len(contigs)
    errors = list()

    def __mutate_batch(indices):
        try:
            for i in indices:
                results[i] = mutate_contig(
                    contigs[i], rate, rngs[i], minimum=minimum,
                    inplace=inplace
                )
        except Exception as err:
            errors.append(err)

    if threads == 1:
        __mutate_batch(range(len(contigs)))
    else:
        workers = list()
        for t in range(threads):
            thread = threading.Thread(
                target=__mutate_batch,
                args=(range(t, len(contigs), threads),),
            )
            workers.append(thread)
            thread.start()
        for thread in workers:
            thread.join()
    if errors:
        raise errors[0]

    records = list()
    for contig, contigrecords in results:
        records.extend(contigrecords)
    if not inplace:
        store = SequenceStore(contig for contig, _ in results)
    return store, records


def main(args):
    linewidth = None if args.preserve_wrap else args.line_width
    config = MutationConfig(
        mutation_rate=args.rate, line_width=linewidth, minimum=args.minimum,
        seed=args.seed, threads=args.threads,
    ).validate()
    if args.out not in (None, '-') and os.path.exists(args.out):
        if not args.force:
            message = 'output file "{:s}" exists; use --force to ' \
                'overwrite'.format(args.out)
            raise FileExistsError(message)

    timer = fastamut.Timer()
    timer.start()

    timer.start('loadgenome')
    fastamut.plog('[fastamut::mutate] loading genome from', args.genome)
    instream = fastamut.open(args.genome, 'r')
    try:
        store = load_store(instream)
    finally:
        if args.genome not in (None, '-'):
            instream.close()
    elapsed = timer.stop('loadgenome')
    message = 'loaded {:d} contigs ({:d} bp) in {:.3f} seconds'.format(
        len(store), store.total_length, elapsed
    )
    fastamut.plog('[fastamut::mutate]', message)

    seedseq = numpy.random.SeedSequence(config.seed)
    if config.seed is None:
        fastamut.plog('[fastamut::mutate] using random seed', seedseq.entropy)

    timer.start('mutate')
    store, records = mutate_store(
        store, rate=config.mutation_rate, minimum=config.minimum,
        seed=seedseq, threads=config.threads,
    )
    elapsed = timer.stop('mutate')
    counts = Counter(r.contig for r in records)
    for contig in store:
        message = '    {:s}: {:d} bp, {:d} eligible, {:d} mutations'.format(
            contig.name, len(contig), contig.num_eligible, counts[contig.name]
        )
        fastamut.plog(message)
    message = 'applied {:d} mutations in {:.3f} seconds'.format(
        len(records), elapsed
    )
    fastamut.plog('[fastamut::mutate]', message)

    if args.vcf:
        vcfout = fastamut.open(args.vcf, 'w')
        write_vcf(records, vcfout, store=store)
        if args.vcf != '-':
            vcfout.close()
        fastamut.plog('[fastamut::mutate] mutations written to', args.vcf)

    with timer.timed('write'):
        outstream = fastamut.open(args.out, 'w')
        write_fasta(store, outstream, linewidth=config.line_width)
        if args.out not in (None, '-'):
            outstream.close()
    message = 'wrote mutated genome in {:.3f} seconds'.format(
        timer.elapsed['write']
    )
    fastamut.plog('[fastamut::mutate]', message)

    elapsed = timer.stop()
    message = 'done! total runtime: {:.3f} seconds'.format(elapsed)
    fastamut.plog('[fastamut::mutate]', message)
