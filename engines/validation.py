"""
UVS Value Engine — Boundary Validation
Caller contract checks run before anything reaches the engines:
negative projection horizon, non-finite numbers, incomplete assumptions.
Engines themselves stay total (unknown archetype / missing input → 0).
"""
import math

from engines.aggregation import item_hours_saved
from engines.valuation import item_annual_value


class ValidationError(ValueError):
    """Caller contract violation; message names the offending field."""


def _is_number(v):
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _is_finite(value):
    try:
        return math.isfinite(value)
    except OverflowError:
        # int beyond float range
        return False


def _require_finite(value, path):
    if not _is_number(value):
        raise ValidationError(f"{path} must be a number")
    if not _is_finite(value):
        raise ValidationError(f"{path} must be finite")
    return value


def validate_assumptions(assumptions):
    if not isinstance(assumptions, dict):
        raise ValidationError('assumptions must be an object')
    for field in ('projectionYears', 'realizationRamp', 'annualGrowthRate'):
        if assumptions.get(field) is None:
            raise ValidationError(f"assumptions.{field} is required")

    years = assumptions['projectionYears']
    if isinstance(years, float) and years.is_integer():
        years = int(years)
    if isinstance(years, bool) or not isinstance(years, int):
        raise ValidationError('assumptions.projectionYears must be an integer')
    if years < 0:
        raise ValidationError('assumptions.projectionYears must not be negative')

    ramp = assumptions['realizationRamp']
    if not isinstance(ramp, (list, tuple)):
        raise ValidationError('assumptions.realizationRamp must be a list')
    ramp = [_require_finite(r, f"assumptions.realizationRamp[{i}]") for i, r in enumerate(ramp)]

    growth = _require_finite(assumptions['annualGrowthRate'], 'assumptions.annualGrowthRate')

    out = dict(assumptions)
    out.update({'projectionYears': years, 'realizationRamp': ramp, 'annualGrowthRate': growth})
    return out


def validate_items(items, prefix='items'):
    """Structural checks plus finiteness of every numeric input and of each
    item's annual value and hours. Returns shallow copies."""
    if not isinstance(items, list):
        raise ValidationError(f"{prefix} must be a list")
    result = []
    for idx, item in enumerate(items):
        path = f"{prefix}[{idx}]"
        if not isinstance(item, dict):
            raise ValidationError(f"{path} must be an object")
        if not isinstance(item.get('archetype'), str):
            raise ValidationError(f"{path}.archetype must be a string")
        inputs = item.get('inputs')
        if inputs is None:
            inputs = {}
        if not isinstance(inputs, dict):
            raise ValidationError(f"{path}.inputs must be an object")
        for key, entry in inputs.items():
            # non-numeric values are tolerated (they count as 0); numbers must be finite
            if isinstance(entry, dict) and _is_number(entry.get('value')):
                _require_finite(entry['value'], f"{path}.inputs.{key}.value")
        if item.get('manualAnnualValue') is not None:
            _require_finite(item['manualAnnualValue'], f"{path}.manualAnnualValue")
        out = dict(item)
        out['inputs'] = inputs
        # finite inputs can still multiply past the float range
        try:
            value, hours = item_annual_value(out), item_hours_saved(out)
        except OverflowError:
            raise ValidationError(f"{path} annual value is out of range") from None
        if not _is_finite(value):
            raise ValidationError(f"{path} annual value is out of range")
        if not _is_finite(hours):
            raise ValidationError(f"{path} hours saved is out of range")
        result.append(out)
    return result


def validate_investment(current_spend=None, proposed_spend=None):
    if current_spend is not None:
        _require_finite(current_spend, 'currentSpend')
    if proposed_spend is not None:
        _require_finite(proposed_spend, 'proposedSpend')
    return current_spend, proposed_spend


def validate_calculations(calculations):
    """Company rollup body: [{shortId, name, items, proposedSpend?, role?}]."""
    if not isinstance(calculations, list):
        raise ValidationError('calculations must be a list')
    result = []
    for idx, calc in enumerate(calculations):
        path = f"calculations[{idx}]"
        if not isinstance(calc, dict):
            raise ValidationError(f"{path} must be an object")
        out = dict(calc)
        out['items'] = validate_items(calc.get('items') or [], f"{path}.items")
        if calc.get('proposedSpend') is not None:
            _require_finite(calc['proposedSpend'], f"{path}.proposedSpend")
        result.append(out)
    return result
