"""
UVS Value Engine — Multi-Year Projection & ROI Multiple
Realization ramp + compounding growth on the total annual value,
tracked against a constant incremental investment per year.

Ramp entries beyond the supplied list default to 1.0 (full realization).
Negative annual values propagate unclamped.
"""
from engines.rounding import round_whole, round2


def incremental_investment(current_spend=None, proposed_spend=None):
    """max(0, proposed − current); missing spends count as 0."""
    return max(0, (proposed_spend or 0) - (current_spend or 0))


def build_projection(total_annual_value, assumptions, investment):
    years = assumptions.get('projectionYears', 0)
    ramp = assumptions.get('realizationRamp') or []
    growth_rate = assumptions.get('annualGrowthRate', 0)
    investment = round_whole(investment)

    yearly = []
    cum_val = cum_inv = cum_net = 0
    for yr in range(years):
        growth = (1 + growth_rate) ** yr
        realization = ramp[yr] if yr < len(ramp) else 1.0
        value = round_whole(total_annual_value * growth * realization)
        net = round_whole(value - investment)
        cum_val += value
        cum_inv += investment
        cum_net += net
        yearly.append({
            'year': yr + 1, 'value': value, 'investment': investment, 'netValue': net,
            'cumulativeValue': cum_val, 'cumulativeInvestment': cum_inv,
            'cumulativeNetValue': cum_net,
        })
    return yearly


def roi_multiple(total_annual_value, current_spend=None, proposed_spend=None):
    """Annual value per dollar of incremental spend; None when there is no positive increment."""
    incremental = incremental_investment(current_spend, proposed_spend)
    if incremental > 0:
        return round2(total_annual_value / incremental)
    return None
