"""Batch reductions over validation results.

All functions are pure and independent of input order, except
``masked_examples`` which lists records in input order. Reason and pair
tallies are ``Counter`` partials: tallies of disjoint shards can be added
together and finalized once.
"""

from __future__ import annotations

from collections import Counter
from itertools import combinations
from typing import Iterable, List

from pan_validation.core.enums import Status
from pan_validation.core.normalize import mask_pan
from pan_validation.core.utils import percentage
from .config import DEFAULT_MASK_CHAR, DEFAULT_MAX_EXAMPLES
from .models import MaskedExample, ReasonFrequency, ReasonPair, SummaryStats, ValidationResult


def summarize(results: Iterable[ValidationResult]) -> SummaryStats:
    """Count records per status in a single pass.

    Examples:
        >>> stats = summarize([validate_pan("BNZPM2501G"), validate_pan(None)])
        >>> stats.valid_pct, stats.missing_pct
        (50.0, 50.0)
    """
    counts = Counter(r.status for r in results)
    return SummaryStats.from_counts(
        valid=counts[Status.VALID],
        invalid=counts[Status.INVALID],
        missing=counts[Status.MISSING],
    )


def reason_counts(results: Iterable[ValidationResult]) -> Counter:
    """Tally reason occurrences across invalid records."""
    counts: Counter = Counter()
    for r in results:
        if r.is_invalid:
            counts.update(r.reasons)
    return counts


def frequencies_from_counts(counts: Counter) -> List[ReasonFrequency]:
    """Turn a reason tally into frequencies, most frequent first.

    Percentages are relative to the sum of all occurrences. Ties are ordered
    by reason name.
    """
    grand_total = sum(counts.values())
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0].value))
    return [
        ReasonFrequency(reason=reason, count=n, pct=percentage(n, grand_total))
        for reason, n in ordered
        if n > 0
    ]


def reason_frequencies(results: Iterable[ValidationResult]) -> List[ReasonFrequency]:
    """Per-reason counts and shares among invalid records."""
    return frequencies_from_counts(reason_counts(results))


def pair_counts(results: Iterable[ValidationResult]) -> Counter:
    """Tally canonical reason pairs that occur on the same invalid record."""
    counts: Counter = Counter()
    for r in results:
        if not r.is_invalid:
            continue
        codes = sorted(set(r.reasons), key=lambda code: code.value)
        counts.update(combinations(codes, 2))
    return counts


def pairs_from_counts(counts: Counter) -> List[ReasonPair]:
    """Turn a pair tally into ReasonPair rows, most frequent first."""
    ordered = sorted(
        counts.items(), key=lambda item: (-item[1], item[0][0].value, item[0][1].value)
    )
    return [ReasonPair(reason_a=a, reason_b=b, count=n) for (a, b), n in ordered if n > 0]


def reason_pairs(results: Iterable[ValidationResult]) -> List[ReasonPair]:
    """Co-occurring reason pairs among invalid records.

    Each record contributes at most once to a given pair, whichever order
    its reasons were emitted in.
    """
    return pairs_from_counts(pair_counts(results))


def masked_examples(
    results: Iterable[ValidationResult],
    limit: int = DEFAULT_MAX_EXAMPLES,
    mask_char: str = DEFAULT_MASK_CHAR,
) -> List[MaskedExample]:
    """List invalid values with their last character masked.

    One row per (record, reason), records in input order and reasons in
    emission order, stopping after ``limit`` rows.

    Raises:
        ValueError: If ``limit`` is negative.
    """
    if limit < 0:
        raise ValueError(f"Invalid limit: {limit}. Must be >= 0.")
    examples: List[MaskedExample] = []
    if limit == 0:
        return examples
    for r in results:
        if not r.is_invalid or r.cleaned is None:
            continue
        masked = mask_pan(r.cleaned, mask_char)
        for reason in r.reasons:
            examples.append(MaskedExample(reason=reason, pan_masked=masked))
            if len(examples) >= limit:
                return examples
    return examples


__all__ = [
    "summarize",
    "reason_counts",
    "frequencies_from_counts",
    "reason_frequencies",
    "pair_counts",
    "pairs_from_counts",
    "reason_pairs",
    "masked_examples",
]
