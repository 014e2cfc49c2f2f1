"""
UVS Value Engine — Archetype Formula Catalog
One pure function per archetype: named inputs → annual dollar value.
Missing or malformed inputs count as 0 so partially-filled items still value.
Unknown archetypes value at 0 (fail closed) and are logged.
"""
import logging
import re

from engines.archetypes import ARCHETYPE_FIELDS, ARCHETYPE_INFO

# Lowest first. An item's confidence is the lowest tier among its inputs.
CONFIDENCE_PRECEDENCE = {'custom': 0, 'estimated': 1, 'benchmarked': 2}


def get_input(inputs, key):
    """Numeric value of inputs[key], or 0 when absent or not a number."""
    if not isinstance(inputs, dict):
        return 0
    entry = inputs.get(key)
    if not isinstance(entry, dict):
        return 0
    val = entry.get('value')
    if isinstance(val, bool) or not isinstance(val, (int, float)):
        return 0
    return val


# ── Revenue Impact ──

def _pipeline_velocity(i):
    return get_input(i, 'dealsPerQuarter') * get_input(i, 'avgDealValue') * get_input(i, 'conversionLift') * 4


def _revenue_capture(i):
    return get_input(i, 'annualRevenue') * get_input(i, 'leakageRate') * get_input(i, 'captureImprovement')


def _revenue_expansion(i):
    return (get_input(i, 'customerBase') * get_input(i, 'expansionRate')
            * get_input(i, 'avgExpansionValue') * get_input(i, 'lift'))


def _time_to_revenue(i):
    return get_input(i, 'newCustomersPerYear') * get_input(i, 'revenuePerCustomer') * get_input(i, 'daysAccelerated') / 365


# ── Speed / Cycle Time ──

def _process_acceleration(i):
    saved = get_input(i, 'timeBeforeHrs') - get_input(i, 'timeAfterHrs')
    return get_input(i, 'processesPerMonth') * saved * get_input(i, 'hourlyRate') * 12


def _handoff_elimination(i):
    return get_input(i, 'handoffsPerMonth') * get_input(i, 'avgQueueTimeHrs') * get_input(i, 'hourlyRateOfWaitingParty') * 12


# ── Productivity ──

def _task_elimination(i):
    return get_input(i, 'tasksPerMonth') * get_input(i, 'minutesPerTask') * (get_input(i, 'hourlyRate') / 60) * 12


def _task_simplification(i):
    return get_input(i, 'tasksPerMonth') * get_input(i, 'minutesSavedPerTask') * (get_input(i, 'hourlyRate') / 60) * 12


def _context_surfacing(i):
    meetings = (get_input(i, 'meetingsAvoidedPerMonth') * get_input(i, 'attendeesPerMeeting')
                * get_input(i, 'meetingDurationHrs') * get_input(i, 'meetingHourlyRate') * 12)
    searches = (get_input(i, 'searchesAvoidedPerMonth') * get_input(i, 'avgSearchTimeMin')
                * (get_input(i, 'searchHourlyRate') / 60) * 12)
    return meetings + searches


# ── Cost Avoidance ──

def _labor_avoidance(i):
    return get_input(i, 'ftesAvoided') * get_input(i, 'fullyLoadedAnnualCost')


def _tool_consolidation(i):
    return get_input(i, 'toolsEliminated') * get_input(i, 'annualLicenseCostPerTool')


def _error_rework_elimination(i):
    return get_input(i, 'errorsPerMonth') * get_input(i, 'avgCostPerError') * get_input(i, 'reductionRate') * 12


# ── Risk & Quality ──

def _compliance_assurance(i):
    return get_input(i, 'expectedViolationsPerYear') * get_input(i, 'avgPenaltyPerViolation') * get_input(i, 'reductionRate')


def _data_integrity(i):
    return (get_input(i, 'recordsPerMonth') * get_input(i, 'errorRate')
            * get_input(i, 'costPerError') * get_input(i, 'reductionRate') * 12)


def _incident_prevention(i):
    return get_input(i, 'incidentsPerYear') * get_input(i, 'avgCostPerIncident') * get_input(i, 'reductionRate')


def _process_consistency(i):
    return (get_input(i, 'processesPerMonth') * get_input(i, 'defectRate')
            * get_input(i, 'costPerDefect') * get_input(i, 'reductionRate') * 12)


FORMULAS = {
    'pipeline_velocity': _pipeline_velocity,
    'revenue_capture': _revenue_capture,
    'revenue_expansion': _revenue_expansion,
    'time_to_revenue': _time_to_revenue,
    'process_acceleration': _process_acceleration,
    'handoff_elimination': _handoff_elimination,
    'task_elimination': _task_elimination,
    'task_simplification': _task_simplification,
    'context_surfacing': _context_surfacing,
    'labor_avoidance': _labor_avoidance,
    'tool_consolidation': _tool_consolidation,
    'error_rework_elimination': _error_rework_elimination,
    'compliance_assurance': _compliance_assurance,
    'data_integrity': _data_integrity,
    'incident_prevention': _incident_prevention,
    'process_consistency': _process_consistency,
}


def compute_archetype_value(archetype, inputs):
    fn = FORMULAS.get(archetype)
    if fn is None:
        logging.warning(f"compute_archetype_value: unknown archetype '{archetype}', returning 0")
        return 0
    return fn(inputs or {})


_IDENT = re.compile(r'[A-Za-z][A-Za-z0-9]*')


def _fmt_number(v):
    if float(v).is_integer():
        return str(int(v))
    return ('%.4f' % v).rstrip('0').rstrip('.')


def formula_trace(archetype, inputs):
    """Formula text with each input replaced by its value, e.g. '200 x 25000 x 0.1 x 4 = 2000000'."""
    info = ARCHETYPE_INFO.get(archetype)
    if not info:
        return f"Unknown archetype '{archetype}' = 0"
    keys = {f['key'] for f in ARCHETYPE_FIELDS[archetype]}
    text = _IDENT.sub(lambda m: _fmt_number(get_input(inputs, m.group())) if m.group() in keys else m.group(),
                      info['formulaDescription'])
    return f"{text} = {_fmt_number(compute_archetype_value(archetype, inputs))}"


def input_confidence(archetype, inputs):
    """Lowest confidence tier across the archetype's fields.

    Each field uses the tier recorded on its input, falling back to the
    field's default tier. Unknown archetypes report 'custom'.
    """
    fields = ARCHETYPE_FIELDS.get(archetype)
    if not fields:
        return 'custom'
    inputs = inputs if isinstance(inputs, dict) else {}
    tiers = []
    for f in fields:
        entry = inputs.get(f['key'])
        tier = entry.get('confidence') if isinstance(entry, dict) else None
        if tier not in CONFIDENCE_PRECEDENCE:
            tier = f['defaultConfidence']
        tiers.append(tier)
    return min(tiers, key=lambda t: CONFIDENCE_PRECEDENCE[t])
