"""
UVS Value Engine — Summary Composer
Single entry point for the full computed picture of one calculation,
plus a company-level rollup across several calculations.
"""
from engines.aggregation import dimension_totals, total_annual_value, hours_saved_per_month, fte_equivalent
from engines.archetypes import dimension_for
from engines.projection import incremental_investment, build_projection, roi_multiple
from engines.rounding import round_whole, round2
from engines.valuation import computed_value, item_annual_value, normalize_item


def calculation_summary(items, assumptions, current_spend=None, proposed_spend=None):
    """
    items: list of value items {archetype, inputs, manualAnnualValue?}
    assumptions: {projectionYears, realizationRamp, annualGrowthRate}
    Money fields are whole units; roiMultiple and fteEquivalent keep 2 decimals.
    roiMultiple is None when there is no positive incremental investment.
    """
    total = total_annual_value(items)
    hours = hours_saved_per_month(items)
    investment = incremental_investment(current_spend, proposed_spend)
    return {
        'totalAnnualValue': round_whole(total),
        'dimensionTotals': dimension_totals(items),
        'roiMultiple': roi_multiple(total, current_spend, proposed_spend),
        'hoursSavedPerMonth': round_whole(hours),
        'fteEquivalent': fte_equivalent(hours),
        'incrementalInvestment': round_whole(investment),
        'projection': build_projection(total, assumptions, investment),
        'itemCount': len(items),
    }


def valuate_items(items):
    """Items with their dimension re-derived and a 'computed' record attached."""
    out = []
    for it in items:
        n = normalize_item(it)
        n['computed'] = computed_value(it)
        out.append(n)
    return out


def _primary_dimension(dim_totals):
    primary, best = None, 0
    for dk, val in dim_totals.items():
        if val > best:
            primary, best = dk, val
    return primary


def company_summary(calculations):
    """
    Rollup across calculations [{shortId, name, items, proposedSpend?, role?}].
    ROI here is value / proposedSpend (not the incremental figure).
    """
    calc_summaries = []
    company_value = 0
    company_hours = 0
    company_spend = 0
    company_dims = {}

    for calc in calculations:
        items = calc.get('items') or []
        value = total_annual_value(items)
        hours = hours_saved_per_month(items)
        dims = {}
        for it in items:
            dk = dimension_for(it.get('archetype'))
            if dk is None:
                continue
            v = item_annual_value(it)
            dims[dk] = dims.get(dk, 0) + v
            company_dims[dk] = company_dims.get(dk, 0) + v
        spend = calc.get('proposedSpend') or 0
        company_value += value
        company_hours += hours
        company_spend += spend
        calc_summaries.append({
            'shortId': calc.get('shortId'), 'name': calc.get('name'), 'role': calc.get('role'),
            'totalAnnualValue': round_whole(value),
            'roiMultiple': round2(value / spend) if spend > 0 else None,
            'hoursSavedPerMonth': round_whole(hours),
            'proposedSpend': calc.get('proposedSpend'),
            'valueItemCount': len(items),
            'primaryDimension': _primary_dimension(dims),
        })

    return {
        'totalAnnualValue': round_whole(company_value),
        'totalROI': round2(company_value / company_spend) if company_spend > 0 else None,
        'totalHoursSavedPerMonth': round_whole(company_hours),
        'calculatorCount': len(calculations),
        'dimensionTotals': {dk: round_whole(v) for dk, v in company_dims.items()},
        'calculators': calc_summaries,
    }
