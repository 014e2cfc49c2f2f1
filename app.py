"""
UVS Value Engine — Flask API Server
Thin request layer over the value-driver engines. Stateless per request:
callers post value items + assumptions and get computed summaries back.
Only configured default assumptions are held in STATE.
"""
import io
import logging
import os
import traceback
from flask import Flask, jsonify, request, send_file
from werkzeug.exceptions import HTTPException
from engines.archetypes import archetype_catalog
from engines.data_loader import load_parameters
from engines.obfuscation import obfuscate_full_response
from engines.realization import realization_summary
from engines.rounding import NonFiniteValueError
from engines.summary import calculation_summary, company_summary, valuate_items
from engines.validation import (
    ValidationError, validate_assumptions, validate_calculations, validate_investment, validate_items,
)
from engines.valuation import computed_value, with_archetype

logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(message)s')

app = Flask(__name__)

STATE = {'defaults': None, 'loaded': False, '_load_error': None}


def _load_config():
    STATE['defaults'] = load_parameters()
    STATE['loaded'] = True


@app.before_request
def _ensure_loaded():
    if not STATE['loaded'] and not STATE.get('_load_error'):
        try:
            _load_config()
            logging.info("[OK] Value engine configuration loaded")
        except Exception as e:
            err_msg = f"{type(e).__name__}: {e}"
            STATE['_load_error'] = err_msg
            logging.error(f"[!] CONFIG LOAD FAILED, requests without assumptions will be rejected: {err_msg}")
            traceback.print_exc()


def _parse_calculation_body(body):
    """Validate a {items, assumptions?, currentSpend?, proposedSpend?} body."""
    items = validate_items(body.get('items', []))
    assumptions = body.get('assumptions')
    if assumptions is None:
        if STATE['defaults'] is None:
            raise ValidationError('assumptions are required (no configured defaults)')
        assumptions = STATE['defaults']
    assumptions = validate_assumptions(assumptions)
    current, proposed = validate_investment(body.get('currentSpend'), body.get('proposedSpend'))
    return items, assumptions, current, proposed


def _json_body():
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        raise ValidationError('request body must be a JSON object')
    return body


@app.errorhandler(ValidationError)
def _validation_failed(e):
    return jsonify({'error': str(e)}), 400


@app.errorhandler(NonFiniteValueError)
@app.errorhandler(OverflowError)
def _out_of_range(e):
    return jsonify({'error': f"result out of range: {e}"}), 400


@app.errorhandler(Exception)
def _unexpected_failure(e):
    if isinstance(e, HTTPException):
        return e
    logging.exception(f"{request.method} {request.path} failed")
    return jsonify({'error': f"{type(e).__name__}: {e}"}), 500


# ══════════════════════════════════════════════════════════════
#  ROUTES
# ══════════════════════════════════════════════════════════════

@app.route('/api/health')
def api_health():
    return jsonify({'status': 'ok', 'loaded': STATE['loaded'], 'loadError': STATE.get('_load_error')})


@app.route('/api/archetypes')
def api_archetypes():
    return jsonify(archetype_catalog())


@app.route('/api/defaults')
def api_defaults():
    if not STATE['loaded']:
        return jsonify({'error': 'Not loaded', 'reason': STATE.get('_load_error')}), 503
    return jsonify(STATE['defaults'])


@app.route('/api/summary', methods=['POST'])
def api_summary():
    """Full computed picture of one calculation."""
    items, assumptions, current, proposed = _parse_calculation_body(_json_body())
    return jsonify({
        'summary': calculation_summary(items, assumptions, current, proposed),
        'items': valuate_items(items),
    })


@app.route('/api/summary/shared', methods=['POST'])
def api_summary_shared():
    """Obfuscated (shareable) view: tiered rounding + optional redaction."""
    body = _json_body()
    items, assumptions, current, proposed = _parse_calculation_body(body)
    calculation = dict(body.get('calculation') or {})
    calculation.setdefault('currentSpend', current)
    calculation.setdefault('proposedSpend', proposed)
    response = {
        'calculation': calculation,
        'valueItems': valuate_items(items),
        'useCases': body.get('useCases') or [],
        'summary': calculation_summary(items, assumptions, current, proposed),
    }
    return jsonify(obfuscate_full_response(response, body.get('obfuscation') or {}))


@app.route('/api/item/value', methods=['POST'])
def api_item_value():
    body = _json_body()
    item = validate_items([body.get('item')])[0]
    return jsonify(computed_value(item))


@app.route('/api/item/archetype', methods=['POST'])
def api_item_archetype():
    """Archetype change; dimension is re-derived, never taken from the caller."""
    body = _json_body()
    archetype = body.get('archetype')
    if not isinstance(archetype, str):
        return jsonify({'error': 'archetype required'}), 400
    item = validate_items([body.get('item')])[0]
    return jsonify(with_archetype(item, archetype))


@app.route('/api/realization', methods=['POST'])
def api_realization():
    body = _json_body()
    items = validate_items(body.get('items', []))
    return jsonify(realization_summary(body.get('useCases') or [], items, body.get('runs') or []))


@app.route('/api/company', methods=['POST'])
def api_company():
    body = _json_body()
    calcs = validate_calculations(body.get('calculations') or [])
    return jsonify(company_summary(calcs))


@app.route('/api/export', methods=['POST'])
def api_export():
    """Export a computed calculation to Excel."""
    body = _json_body()
    items, assumptions, current, proposed = _parse_calculation_body(body)
    summary = calculation_summary(items, assumptions, current, proposed)
    try:
        wb = build_export_workbook(body.get('name') or 'Value Calculation', summary, valuate_items(items), current, proposed)
        buf = io.BytesIO()
        wb.save(buf)
        buf.seek(0)
        return send_file(buf, as_attachment=True, download_name='Value_Summary.xlsx',
                         mimetype='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet')
    except Exception as e:
        logging.exception('export failed')
        return jsonify({'error': str(e)}), 500


# ══════════════════════════════════════════════════════════════
#  HELPERS
# ══════════════════════════════════════════════════════════════

def build_export_workbook(name, summary, items, current_spend=None, proposed_spend=None):
    import openpyxl
    from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

    wb = openpyxl.Workbook()
    hf = Font(bold=True, color='FFFFFF', size=11)
    hfill = PatternFill(start_color='2E2E38', end_color='2E2E38', fill_type='solid')
    tb = Border(left=Side(style='thin'), right=Side(style='thin'),
                top=Side(style='thin'), bottom=Side(style='thin'))

    def ws_write(ws, headers, rows):
        for c, h in enumerate(headers, 1):
            cell = ws.cell(row=1, column=c, value=h)
            cell.font = hf; cell.fill = hfill; cell.alignment = Alignment(horizontal='center'); cell.border = tb
        for r, row in enumerate(rows, 2):
            for c, val in enumerate(row, 1):
                cell = ws.cell(row=r, column=c, value=val); cell.border = tb
        for col in ws.columns:
            ml = max(len(str(cell.value or '')) for cell in col)
            ws.column_dimensions[col[0].column_letter].width = min(ml + 2, 60)

    # 1. Summary
    ws = wb.active; ws.title = 'Summary'
    roi = summary['roiMultiple']
    ws_write(ws, ['Metric', 'Value'], [
        ['Calculation', name],
        ['Total Annual Value', summary['totalAnnualValue']],
        ['Current Spend', current_spend or 0],
        ['Proposed Spend', proposed_spend or 0],
        ['Incremental Investment', summary['incrementalInvestment']],
        ['ROI Multiple', roi if roi is not None else 'N/A'],
        ['Hours Saved / Month', summary['hoursSavedPerMonth']],
        ['FTE Equivalent', summary['fteEquivalent']],
        ['Value Items', summary['itemCount']],
    ])

    # 2. Dimensions
    ws2 = wb.create_sheet('Dimensions')
    ws_write(ws2, ['Dimension', 'Total', 'Items', 'Share %'], [
        [d['label'], d['total'], d['itemCount'], d['percentage']]
        for d in summary['dimensionTotals']
    ])

    # 3. Projection
    ws3 = wb.create_sheet('Projection')
    ws_write(ws3, ['Year', 'Value', 'Investment', 'Net Value', 'Cum Value', 'Cum Investment', 'Cum Net Value'], [
        [y['year'], y['value'], y['investment'], y['netValue'],
         y['cumulativeValue'], y['cumulativeInvestment'], y['cumulativeNetValue']]
        for y in summary['projection']
    ])

    # 4. Value Items
    ws4 = wb.create_sheet('Value Items')
    ws_write(ws4, ['Name', 'Archetype', 'Dimension', 'Annual Value', 'Manual', 'Confidence', 'Formula'], [
        [it.get('name', ''), it.get('archetype'), it.get('dimension') or '',
         it['computed']['annualValue'], 'Yes' if it['computed']['isManual'] else 'No',
         it['computed']['confidence'], it['computed']['formula']]
        for it in items
    ])
    return wb


if __name__ == '__main__':
    app.run(debug=False, host='0.0.0.0', port=int(os.environ.get('PORT', 5000)))
