"""
History Analytics for the CoopCredit Guard dashboard.

This module reduces the history log into summary statistics:
- Totals and averages (default probability, credit score)
- Approval rate (share of Low and Medium risk)
- Risk level distribution
- Mean risk by age band, employment status, education level and loan type

The aggregator is pure and idempotent. It reads its input exactly once into
a snapshot, so an append that lands while it runs is never half-observed.
"""

from collections import OrderedDict
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from credit_guard.domain.entities import HistoryEntry
from credit_guard.service.scoring.models import RiskLevel, label_of
from credit_guard.service.scoring.risk_factors import FACTOR_WEIGHTS

from .models import AnalyticsSummary, FactorWeight, GroupBreakdown, ModelConfiguration


AGE_BANDS: Tuple[Tuple[str, Optional[int]], ...] = (
    ("18-25", 25),
    ("26-35", 35),
    ("36-45", 45),
    ("46-55", 55),
    ("56+", None),
)


def get_age_band(age: int) -> str:
    """
    Map an age to its reporting band.

    Upper bounds are inclusive; anything at or below 25 lands in 18-25.
    """
    for name, upper in AGE_BANDS:
        if upper is None or age <= upper:
            return name
    return AGE_BANDS[-1][0]


def get_factor_weights() -> Tuple[FactorWeight, ...]:
    """The nine documented factor weights, independent of any history."""
    return tuple(FactorWeight(w["name"], w["weight"]) for w in FACTOR_WEIGHTS)


def _group(
    entries: Tuple[HistoryEntry, ...],
    key: Callable[[HistoryEntry], str],
) -> "OrderedDict[str, List[int]]":
    """Collect default probabilities per group, groups in first-seen order."""
    groups: "OrderedDict[str, List[int]]" = OrderedDict()
    for entry in entries:
        groups.setdefault(key(entry), []).append(entry.result.default_probability)
    return groups


def _breakdowns(groups: "OrderedDict[str, List[int]]") -> List[GroupBreakdown]:
    return [
        GroupBreakdown(
            name=name,
            count=len(values),
            average_default_probability=sum(values) / len(values),
        )
        for name, values in groups.items()
    ]


def _by_risk_descending(breakdowns: List[GroupBreakdown]) -> Tuple[GroupBreakdown, ...]:
    # Stable: groups with the same displayed mean keep first-seen order.
    return tuple(sorted(breakdowns, key=lambda g: g.display_average, reverse=True))


def breakdown_by_age(entries: Iterable[HistoryEntry]) -> Tuple[GroupBreakdown, ...]:
    """Mean risk per present age band, in band order."""
    groups = _group(tuple(entries), lambda e: get_age_band(e.input.age))
    by_name = {g.name: g for g in _breakdowns(groups)}
    return tuple(by_name[name] for name, _ in AGE_BANDS if name in by_name)


def breakdown_by_employment(entries: Iterable[HistoryEntry]) -> Tuple[GroupBreakdown, ...]:
    groups = _group(tuple(entries), lambda e: label_of(e.input.employment_status))
    return _by_risk_descending(_breakdowns(groups))


def breakdown_by_education(entries: Iterable[HistoryEntry]) -> Tuple[GroupBreakdown, ...]:
    groups = _group(tuple(entries), lambda e: label_of(e.input.education))
    return _by_risk_descending(_breakdowns(groups))


def breakdown_by_loan_type(entries: Iterable[HistoryEntry]) -> Tuple[GroupBreakdown, ...]:
    groups = _group(tuple(entries), lambda e: label_of(e.input.loan_type))
    return _by_risk_descending(_breakdowns(groups))


def count_risk_levels(entries: Iterable[HistoryEntry]) -> Dict[RiskLevel, int]:
    """Occurrences per risk level; levels absent from the data count zero."""
    counts = {level: 0 for level in RiskLevel}
    for entry in entries:
        counts[entry.result.risk_level] += 1
    return counts


def aggregate(history: Iterable[HistoryEntry]) -> AnalyticsSummary:
    """
    Compute the analytics summary over the full history log.

    Args:
        history: History entries in chronological order (may be empty)

    Returns:
        AnalyticsSummary. For an empty log every average is None and
        every count is zero.
    """
    entries = tuple(history)
    total = len(entries)
    risk_level_counts = count_risk_levels(entries)

    if total == 0:
        return AnalyticsSummary(
            total_predictions=0,
            average_default_probability=None,
            average_credit_score=None,
            approval_rate=None,
            risk_level_counts=risk_level_counts,
            factor_weights=get_factor_weights(),
            model_configuration=ModelConfiguration(),
        )

    total_default = sum(e.result.default_probability for e in entries)
    total_credit = sum(e.result.credit_score for e in entries)
    approvable = sum(1 for e in entries if e.result.is_approvable)

    return AnalyticsSummary(
        total_predictions=total,
        average_default_probability=total_default / total,
        average_credit_score=total_credit / total,
        approval_rate=approvable / total,
        risk_level_counts=risk_level_counts,
        by_age_group=breakdown_by_age(entries),
        by_employment_status=breakdown_by_employment(entries),
        by_education_level=breakdown_by_education(entries),
        by_loan_type=breakdown_by_loan_type(entries),
        factor_weights=get_factor_weights(),
        model_configuration=ModelConfiguration(),
    )
