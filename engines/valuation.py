"""
UVS Value Engine — Item Valuator
Resolves one value item's annual value. A manual override (including 0)
short-circuits the formula catalog until it is cleared.
The item's dimension is always re-derived from its archetype, never trusted.
"""
from engines.archetypes import dimension_for
from engines.formulas import compute_archetype_value, formula_trace, input_confidence


def has_manual_value(item):
    return item.get('manualAnnualValue') is not None


def item_annual_value(item):
    if has_manual_value(item):
        return item['manualAnnualValue']
    return compute_archetype_value(item.get('archetype'), item.get('inputs') or {})


def computed_value(item):
    """Annual value plus a human-readable trace and the lowest input confidence."""
    archetype = item.get('archetype')
    inputs = item.get('inputs') or {}
    if has_manual_value(item):
        value = item['manualAnnualValue']
        formula = f"Manual override = {value}"
    else:
        value = compute_archetype_value(archetype, inputs)
        formula = formula_trace(archetype, inputs)
    return {
        'annualValue': value,
        'formula': formula,
        'confidence': input_confidence(archetype, inputs),
        'isManual': has_manual_value(item),
    }


def normalize_item(item):
    """Copy of the item with its dimension recomputed from the archetype."""
    out = dict(item)
    out['dimension'] = dimension_for(item.get('archetype'))
    return out


def with_archetype(item, archetype):
    """Change an item's archetype; the dimension always follows."""
    out = dict(item)
    out['archetype'] = archetype
    out['dimension'] = dimension_for(archetype)
    return out


def set_manual_value(item, value):
    """Set (or clear, with None) the manual annual value override."""
    out = dict(item)
    if value is None:
        out.pop('manualAnnualValue', None)
    else:
        out['manualAnnualValue'] = value
    return out
