"""
UVS Value Engine — Configuration Loader
Reads default assumptions from config/parameters.xlsx (Parameter | Value rows).
Missing workbook → built-in defaults. Unparseable rows are logged and skipped.
"""
import os, copy, logging
import openpyxl

from engines.archetypes import DEFAULT_ASSUMPTIONS

DATA_DIR = os.environ.get('VALUE_ENGINE_DATA_DIR',
                          os.path.join(os.path.dirname(os.path.dirname(__file__)), 'data'))

# Workbook label → (assumption key, rate tier or None)
PARAM_MAP = {
    'Projection Years': ('projectionYears', None),
    'Realization Ramp': ('realizationRamp', None),
    'Annual Growth Rate': ('annualGrowthRate', None),
    'Rate Admin': ('defaultRates', 'admin'),
    'Rate Operations': ('defaultRates', 'operations'),
    'Rate SalesOps': ('defaultRates', 'salesOps'),
    'Rate Engineering': ('defaultRates', 'engineering'),
    'Rate Manager': ('defaultRates', 'manager'),
    'Rate Executive': ('defaultRates', 'executive'),
}


def read_xlsx_sheet(filepath, sheet_name=None):
    wb = openpyxl.load_workbook(filepath, read_only=True, data_only=True)
    ws = wb[sheet_name] if sheet_name else wb.active
    rows = list(ws.iter_rows(values_only=True))
    wb.close()
    if len(rows) < 2:
        return []
    headers = [str(h).strip() if h else f'col_{i}' for i, h in enumerate(rows[0])]
    return [dict(zip(headers, row)) for row in rows[1:]]


def default_assumptions():
    return copy.deepcopy(DEFAULT_ASSUMPTIONS)


def _parse_ramp(val):
    if isinstance(val, (int, float)):
        return [float(val)]
    return [float(p) for p in str(val).replace(';', ',').split(',') if p.strip()]


def load_parameters(path=None):
    """Default assumptions, overlaid with any rows found in the parameters workbook."""
    path = path or os.path.join(DATA_DIR, 'config', 'parameters.xlsx')
    p = default_assumptions()
    if not os.path.exists(path):
        logging.info(f"load_parameters: no workbook at {path}, using built-in defaults")
        return p
    rows = read_xlsx_sheet(path)
    for row in rows:
        key = str(row.get('Parameter') or '').strip()
        val = row.get('Value')
        if key not in PARAM_MAP or val is None or val == '':
            continue
        field, tier = PARAM_MAP[key]
        try:
            if field == 'realizationRamp':
                p[field] = _parse_ramp(val)
            elif field == 'projectionYears':
                years = int(float(val))
                if years < 0:
                    raise ValueError('negative horizon')
                p[field] = years
            elif tier:
                p['defaultRates'][tier] = float(val)
            else:
                p[field] = float(val)
        except (ValueError, TypeError):
            logging.warning(f"load_parameters: could not parse {key}={val!r}, keeping default")
    logging.info(f"load_parameters: loaded {len(rows)} parameter rows from {path}")
    return p
