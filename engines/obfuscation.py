"""
UVS Value Engine — Rounding / Redaction for shared views
Transforms a computed calculation into an externally shareable version.
Never applied to the owner-facing summary; inputs are never mutated.

Magnitude-tiered rounding (bucket width grows with magnitude):
  |v| < 1K        → nearest 100
  1K  ≤ |v| < 10K → nearest 1,000
  10K ≤ |v| < 100K → nearest 5,000
  100K ≤ |v| < 1M → nearest 25,000
  |v| ≥ 1M        → nearest 100,000
Totals are rounded once, after aggregation, never re-summed from rounded parts.
"""
import copy

from engines.rounding import round_to_step, round_whole, round1

ROUNDING_TIERS = [
    (1_000, 100),
    (10_000, 1_000),
    (100_000, 5_000),
    (1_000_000, 25_000),
]
TOP_TIER_STEP = 100_000

DEFAULT_DESCRIPTOR = 'Enterprise Customer'
NOTE_FIELDS = ('description', 'notes', 'talkingPoints', 'internalNotes')
PROJECTION_MONEY_FIELDS = ('value', 'investment', 'netValue', 'cumulativeValue',
                           'cumulativeInvestment', 'cumulativeNetValue')


def tier_step(value):
    mag = abs(value)
    for ceiling, step in ROUNDING_TIERS:
        if mag < ceiling:
            return step
    return TOP_TIER_STEP


def obfuscate_value(value):
    return round_to_step(value, tier_step(value))


def _is_number(v):
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _letter_code(n):
    """1 → A, 26 → Z, 27 → AA."""
    code = ''
    while n > 0:
        n, rem = divmod(n - 1, 26)
        code = chr(65 + rem) + code
    return code


class DepartmentCoder:
    """Positional department labels, assigned in encounter order within one view."""

    def __init__(self):
        self._codes = {}

    def code(self, department):
        if department not in self._codes:
            self._codes[department] = f"Department {_letter_code(len(self._codes) + 1)}"
        return self._codes[department]


def obfuscate_summary(summary, round_values=True):
    out = copy.deepcopy(summary)
    if not round_values:
        return out
    if _is_number(out.get('totalAnnualValue')):
        out['totalAnnualValue'] = obfuscate_value(out['totalAnnualValue'])
    if _is_number(out.get('incrementalInvestment')):
        out['incrementalInvestment'] = obfuscate_value(out['incrementalInvestment'])
    for dt in out.get('dimensionTotals', []):
        if _is_number(dt.get('total')):
            dt['total'] = obfuscate_value(dt['total'])
    for yr in out.get('projection', []):
        for f in PROJECTION_MONEY_FIELDS:
            if _is_number(yr.get(f)):
                yr[f] = obfuscate_value(yr[f])
    if _is_number(out.get('roiMultiple')):
        out['roiMultiple'] = round1(out['roiMultiple'])
    if _is_number(out.get('hoursSavedPerMonth')):
        out['hoursSavedPerMonth'] = round_whole(out['hoursSavedPerMonth'] / 10) * 10
    if _is_number(out.get('fteEquivalent')):
        out['fteEquivalent'] = round1(out['fteEquivalent'])
    return out


def obfuscate_calculation(calc, descriptor=None, hide_notes=False, round_values=True):
    out = dict(calc)
    out['name'] = descriptor or DEFAULT_DESCRIPTOR
    if round_values:
        for f in ('currentSpend', 'proposedSpend'):
            if _is_number(out.get(f)):
                out[f] = obfuscate_value(out[f])
    if hide_notes:
        for f in NOTE_FIELDS:
            out.pop(f, None)
    return out


def obfuscate_value_items(items, hide_notes=False, round_values=True):
    result = []
    for item in items:
        out = copy.deepcopy(item)
        if round_values:
            for f in ('annualValue', 'manualAnnualValue'):
                if _is_number(out.get(f)):
                    out[f] = obfuscate_value(out[f])
            computed = out.get('computed')
            if isinstance(computed, dict) and _is_number(computed.get('annualValue')):
                computed['annualValue'] = obfuscate_value(computed['annualValue'])
                computed.pop('formula', None)
        # provenance annotations never leave the owner view
        for entry in (out.get('inputs') or {}).values():
            if isinstance(entry, dict):
                entry.pop('source', None)
                entry.pop('confidence', None)
        out.pop('confidence', None)
        out.pop('confidenceNotes', None)
        if isinstance(out.get('computed'), dict):
            out['computed'].pop('confidence', None)
        if hide_notes:
            for f in NOTE_FIELDS:
                out.pop(f, None)
        result.append(out)
    return result


def obfuscate_use_cases(use_cases, hide_notes=False, round_values=True):
    coder = DepartmentCoder()
    result = []
    for uc in use_cases:
        out = copy.deepcopy(uc)
        if hide_notes:
            if out.get('department'):
                out['department'] = coder.code(out['department'])
            for f in NOTE_FIELDS:
                out.pop(f, None)
        if round_values and isinstance(out.get('metrics'), list):
            for m in out['metrics']:
                if isinstance(m, dict) and _is_number(m.get('value')):
                    m['value'] = obfuscate_value(m['value'])
        result.append(out)
    return result


def obfuscate_full_response(response, settings=None):
    """
    response: {calculation, valueItems, useCases, summary?}
    settings: {companyDescriptor?, hideNotes=False, roundValues=True}
    """
    s = settings or {}
    descriptor = s.get('companyDescriptor')
    hide_notes = bool(s.get('hideNotes', False))
    round_values = s.get('roundValues', True) is not False

    result = {
        'calculation': obfuscate_calculation(response.get('calculation') or {}, descriptor, hide_notes, round_values),
        'valueItems': obfuscate_value_items(response.get('valueItems') or [], hide_notes, round_values),
        'useCases': obfuscate_use_cases(response.get('useCases') or [], hide_notes, round_values),
    }
    if response.get('summary') is not None:
        result['summary'] = obfuscate_summary(response['summary'], round_values)
    return result
