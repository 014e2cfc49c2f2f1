"""
UVS Value Engine — Dimension Aggregator & Hours/FTE Estimator
Buckets valuated items into the 5 fixed dimensions (always all present,
canonical order) and converts time-bearing inputs into hours saved.
"""
import logging

from engines.archetypes import DIMENSION_ORDER, DIMENSION_INFO, dimension_for
from engines.formulas import get_input
from engines.rounding import round_whole, round2
from engines.valuation import item_annual_value

MONTHLY_WORK_HOURS = 160

# Only these archetypes represent recovered labor time; the rest contribute 0 hours.
HOURS_FORMULAS = {
    'task_elimination':     lambda i: get_input(i, 'tasksPerMonth') * get_input(i, 'minutesPerTask') / 60,
    'task_simplification':  lambda i: get_input(i, 'tasksPerMonth') * get_input(i, 'minutesSavedPerTask') / 60,
    'process_acceleration': lambda i: get_input(i, 'processesPerMonth') * (get_input(i, 'timeBeforeHrs') - get_input(i, 'timeAfterHrs')),
    'handoff_elimination':  lambda i: get_input(i, 'handoffsPerMonth') * get_input(i, 'avgQueueTimeHrs'),
}


def total_annual_value(items):
    return sum(item_annual_value(it) for it in items)


def dimension_totals(items):
    """
    One entry per dimension in DIMENSION_ORDER:
      {dimension, label, color, total, itemCount, percentage}
    percentage = round(total / grandTotal × 100), 0 for every bucket when grandTotal <= 0.
    Items with an unknown archetype count toward the grand total only.
    """
    buckets = {dk: {'total': 0, 'count': 0} for dk in DIMENSION_ORDER}
    grand = 0
    for it in items:
        val = item_annual_value(it)
        grand += val
        dk = dimension_for(it.get('archetype'))
        if dk is None:
            logging.warning(f"dimension_totals: item with unknown archetype '{it.get('archetype')}' not bucketed")
            continue
        buckets[dk]['total'] += val
        buckets[dk]['count'] += 1

    result = []
    for dk in DIMENSION_ORDER:
        b = buckets[dk]
        result.append({
            'dimension': dk,
            'label': DIMENSION_INFO[dk]['label'],
            'color': DIMENSION_INFO[dk]['color'],
            'total': round_whole(b['total']),
            'itemCount': b['count'],
            'percentage': round_whole(b['total'] / grand * 100) if grand > 0 else 0,
        })
    return result


def item_hours_saved(item):
    fn = HOURS_FORMULAS.get(item.get('archetype'))
    if fn is None:
        return 0
    return fn(item.get('inputs') or {})


def hours_saved_per_month(items):
    """Monthly hours recovered across time-bearing items (manual overrides do not change hours)."""
    return sum(item_hours_saved(it) for it in items)


def fte_equivalent(hours_per_month):
    return round2(hours_per_month / MONTHLY_WORK_HOURS)
