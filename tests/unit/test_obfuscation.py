"""
Unit tests for the shared-view rounding and redaction transform.
"""
import copy

import pytest

from engines.obfuscation import (
    DepartmentCoder, obfuscate_full_response, obfuscate_summary, obfuscate_use_cases,
    obfuscate_value, obfuscate_value_items, tier_step,
)


@pytest.fixture
def summary():
    return {
        'totalAnnualValue': 2_285_000,
        'dimensionTotals': [
            {'dimension': 'revenue_impact', 'total': 2_000_000, 'itemCount': 1, 'percentage': 88},
            {'dimension': 'productivity', 'total': 240_000, 'itemCount': 1, 'percentage': 11},
            {'dimension': 'cost_avoidance', 'total': 45_000, 'itemCount': 1, 'percentage': 2},
        ],
        'roiMultiple': 4.57,
        'hoursSavedPerMonth': 437,
        'fteEquivalent': 2.73,
        'incrementalInvestment': 512_345,
        'projection': [{'year': 1, 'value': 1_142_500, 'investment': 512_345, 'netValue': 630_155,
                        'cumulativeValue': 1_142_500, 'cumulativeInvestment': 512_345, 'cumulativeNetValue': 630_155}],
        'itemCount': 3,
    }


class TestTieredRounding:

    @pytest.mark.parametrize('value,expected', [
        (449, 400), (450, 500), (0, 0),
        (1_499, 1_000), (4_500, 5_000),
        (12_400, 10_000), (12_500, 15_000),
        (112_499, 100_000), (112_500, 125_000),
        (1_250_000, 1_300_000), (2_285_000, 2_300_000),
    ])
    def test_tiers(self, value, expected):
        assert obfuscate_value(value) == expected

    def test_tier_boundaries(self):
        assert tier_step(999) == 100
        assert tier_step(1_000) == 1_000
        assert tier_step(99_999) == 5_000
        assert tier_step(1_000_000) == 100_000

    def test_sign_symmetric(self):
        assert obfuscate_value(-2_285_000) == -2_300_000
        assert obfuscate_value(-450) == -500

    def test_idempotent(self):
        for v in (0, 37, 950, 1_234, 9_999, 47_500, 312_000, 987_654, 3_456_789, -64_321):
            once = obfuscate_value(v)
            assert obfuscate_value(once) == once


class TestSummary:

    def test_totals_rounded_independently(self, summary):
        out = obfuscate_summary(summary)
        assert out['totalAnnualValue'] == 2_300_000
        assert [d['total'] for d in out['dimensionTotals']] == [2_000_000, 250_000, 45_000]
        # never re-summed from the rounded parts
        assert sum(d['total'] for d in out['dimensionTotals']) != out['totalAnnualValue']

    def test_ratios_and_hours(self, summary):
        out = obfuscate_summary(summary)
        assert out['roiMultiple'] == 4.6
        assert out['hoursSavedPerMonth'] == 440
        assert out['fteEquivalent'] == 2.7
        assert out['incrementalInvestment'] == 500_000
        assert out['projection'][0]['value'] == 1_100_000
        assert out['projection'][0]['netValue'] == 625_000
        assert out['itemCount'] == 3

    def test_no_rounding_when_disabled(self, summary):
        assert obfuscate_summary(summary, round_values=False) == summary

    def test_none_roi_passes_through(self, summary):
        summary['roiMultiple'] = None
        assert obfuscate_summary(summary)['roiMultiple'] is None

    def test_source_not_mutated(self, summary):
        before = copy.deepcopy(summary)
        obfuscate_summary(summary)
        assert summary == before


class TestValueItems:

    def test_values_rounded_and_provenance_stripped(self):
        items = [{
            'name': 'Invoice triage', 'archetype': 'task_elimination', 'notes': 'CFO pet project',
            'inputs': {'tasksPerMonth': {'value': 3000, 'confidence': 'custom', 'source': 'ops interview'}},
            'computed': {'annualValue': 240_000, 'formula': '3000 x 8 x (50 / 60) x 12 = 240000',
                         'confidence': 'custom', 'isManual': False},
        }]
        out = obfuscate_value_items(items, hide_notes=True)[0]
        assert out['computed'] == {'annualValue': 250_000, 'isManual': False}
        assert out['inputs']['tasksPerMonth'] == {'value': 3000}
        assert 'notes' not in out
        assert items[0]['inputs']['tasksPerMonth']['source'] == 'ops interview'

    def test_notes_kept_unless_hidden(self):
        out = obfuscate_value_items([{'archetype': 'x', 'notes': 'keep'}])[0]
        assert out['notes'] == 'keep'


class TestUseCases:

    def test_departments_coded_in_encounter_order(self):
        use_cases = [
            {'name': 'a', 'department': 'RevOps', 'notes': 'n'},
            {'name': 'b', 'department': 'IT'},
            {'name': 'c', 'department': 'RevOps'},
            {'name': 'd', 'department': 'Finance'},
        ]
        out = obfuscate_use_cases(use_cases, hide_notes=True)
        assert [uc['department'] for uc in out] == ['Department A', 'Department B', 'Department A', 'Department C']
        assert 'notes' not in out[0]
        assert use_cases[0]['department'] == 'RevOps'

    def test_departments_kept_without_redaction(self):
        out = obfuscate_use_cases([{'department': 'RevOps'}])
        assert out[0]['department'] == 'RevOps'

    def test_codes_roll_over_past_z(self):
        coder = DepartmentCoder()
        codes = [coder.code(f"dept-{i}") for i in range(28)]
        assert codes[25] == 'Department Z'
        assert codes[26] == 'Department AA'
        assert codes[27] == 'Department AB'

    def test_metric_values_rounded(self):
        out = obfuscate_use_cases([{'metrics': [{'label': 'saved', 'value': 12_345}]}])
        assert out[0]['metrics'][0]['value'] == 10_000


class TestFullResponse:

    def test_defaults(self, summary):
        response = {
            'calculation': {'name': 'Acme Corp', 'proposedSpend': 512_345, 'notes': 'renewal risk'},
            'valueItems': [], 'useCases': [], 'summary': summary,
        }
        out = obfuscate_full_response(response)
        assert out['calculation']['name'] == 'Enterprise Customer'
        assert out['calculation']['proposedSpend'] == 500_000
        assert out['calculation']['notes'] == 'renewal risk'
        assert out['summary']['totalAnnualValue'] == 2_300_000
        assert response['calculation']['name'] == 'Acme Corp'

    def test_descriptor_and_hidden_notes(self):
        response = {'calculation': {'name': 'Acme Corp', 'notes': 'renewal risk'}, 'valueItems': [], 'useCases': []}
        out = obfuscate_full_response(response, {'companyDescriptor': 'Fortune 500 Retailer', 'hideNotes': True,
                                                 'roundValues': False})
        assert out['calculation'] == {'name': 'Fortune 500 Retailer'}
        assert 'summary' not in out
