"""
UVS Value Engine — Value Realized
Compares projected value with observed automation activity.
Consumes run statistics already fetched and cached by the caller;
no external calls happen here.
"""
from engines.formulas import get_input
from engines.valuation import item_annual_value

# Archetypes whose inputs carry a monthly run count
RUN_COUNT_INPUTS = {
    'task_elimination': 'tasksPerMonth',
    'task_simplification': 'tasksPerMonth',
    'process_acceleration': 'processesPerMonth',
    'handoff_elimination': 'handoffsPerMonth',
}
MAX_REALIZATION = 2.0
HEALTH_THRESHOLDS = [(0.8, 'healthy'), (0.5, 'warning')]
TREND_UP, TREND_DOWN = 1.15, 0.85


def health_status(rate):
    for threshold, label in HEALTH_THRESHOLDS:
        if rate >= threshold:
            return label
    return 'at_risk'


def projected_monthly_runs(items):
    total = 0
    for it in items:
        key = RUN_COUNT_INPUTS.get(it.get('archetype'))
        if not key:
            continue
        total += get_input(it.get('inputs') or {}, key)
    return total


def detect_trend(runs):
    """Weekly run rate projected to 30 days vs the actual 30-day count."""
    if not runs:
        return 'stable'
    last30 = sum(r.get('runsLast30Days', 0) for r in runs)
    last7 = sum(r.get('runsLast7Days', 0) for r in runs)
    if last30 == 0:
        return 'stable'
    ratio = last7 * (30 / 7) / last30
    if ratio > TREND_UP:
        return 'increasing'
    if ratio < TREND_DOWN:
        return 'decreasing'
    return 'stable'


def compute_realization(use_case, items, runs):
    projected_value = sum(item_annual_value(it) for it in items)
    projected_runs = projected_monthly_runs(items)
    actual30 = sum(r.get('runsLast30Days', 0) for r in runs)
    has_runs = len(runs) > 0

    rate = 0
    monthly = 0
    if has_runs and projected_runs > 0:
        rate = min(actual30 / projected_runs, MAX_REALIZATION)
        monthly = projected_value / 12 * rate
    elif has_runs and projected_runs == 0 and actual30 > 0:
        # no run-count baseline: any activity means the automation is live
        rate = 1
        monthly = projected_value / 12

    return {
        'useCaseId': use_case.get('id'),
        'useCaseName': use_case.get('name'),
        'projectedAnnualValue': projected_value,
        'actualRunsLast30Days': actual30,
        'projectedRunsPerMonth': projected_runs,
        'realizationRate': rate,
        'realizedMonthlyValue': monthly,
        'realizedAnnualValue': monthly * 12,
        'trend': detect_trend(runs),
        'healthStatus': health_status(rate) if has_runs else 'at_risk',
        'hasRunData': has_runs,
    }


def realization_summary(use_cases, items, runs):
    """
    use_cases: [{id, name, architecture?: [{type, zapId?}]}]
    items: value items carrying useCaseId
    runs: cached run entries carrying useCaseId
    """
    has_linked = any(
        a.get('type') == 'zap' and a.get('zapId')
        for uc in use_cases for a in (uc.get('architecture') or [])
    )
    results = []
    for uc in use_cases:
        linked = [it for it in items if it.get('useCaseId') == uc.get('id')]
        uc_runs = [r for r in runs if r.get('useCaseId') == uc.get('id')]
        results.append(compute_realization(uc, linked, uc_runs))

    projected = sum(r['projectedAnnualValue'] for r in results)
    realized = sum(r['realizedAnnualValue'] for r in results)
    results.sort(key=lambda r: r['realizationRate'])
    return {
        'overallRealizationRate': realized / projected if projected > 0 else 0,
        'projectedAnnualValue': projected,
        'realizedAnnualValue': realized,
        'totalRunsLast30Days': sum(r['actualRunsLast30Days'] for r in results),
        'useCases': results,
        'hasAnyRunData': any(r['hasRunData'] for r in results),
        'hasAnyLinkedZaps': has_linked,
    }
