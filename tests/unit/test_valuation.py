"""
Unit tests for the item valuator: manual override precedence,
dimension derivation and the computed-value record.
"""
import pytest

from conftest import make_item
from engines.valuation import computed_value, item_annual_value, normalize_item, set_manual_value, with_archetype


class TestManualOverride:

    def test_formula_used_without_override(self, task_item):
        assert item_annual_value(task_item) == pytest.approx(240_000)

    def test_override_wins_over_formula(self, task_item):
        item = set_manual_value(task_item, 125_000)
        assert item_annual_value(item) == 125_000

    def test_zero_override_is_honored(self, task_item):
        item = set_manual_value(task_item, 0)
        assert item_annual_value(item) == 0

    def test_override_without_inputs(self):
        item = {'archetype': 'labor_avoidance', 'inputs': {}, 'manualAnnualValue': 500_000}
        assert item_annual_value(item) == 500_000

    def test_clearing_override_restores_formula(self, task_item):
        item = set_manual_value(set_manual_value(task_item, 1), None)
        assert 'manualAnnualValue' not in item
        assert item_annual_value(item) == pytest.approx(240_000)

    def test_set_manual_value_does_not_mutate(self, task_item):
        set_manual_value(task_item, 10)
        assert 'manualAnnualValue' not in task_item


class TestComputedValue:

    def test_formula_record(self, pipeline_item):
        rec = computed_value(pipeline_item)
        assert rec['annualValue'] == pytest.approx(2_000_000)
        assert rec['formula'].endswith('= 2000000')
        assert rec['confidence'] == 'custom'
        assert rec['isManual'] is False

    def test_manual_record(self):
        rec = computed_value(make_item('tool_consolidation', manual=9_000, toolsEliminated=3))
        assert rec == {'annualValue': 9_000, 'formula': 'Manual override = 9000', 'confidence': 'custom', 'isManual': True}

    def test_unknown_archetype(self):
        rec = computed_value({'archetype': 'mystery', 'inputs': {}})
        assert rec['annualValue'] == 0
        assert rec['isManual'] is False


class TestDimension:

    def test_dimension_rederived_from_archetype(self, task_item):
        item = dict(task_item, dimension='revenue_impact')
        assert normalize_item(item)['dimension'] == 'productivity'

    def test_archetype_change_moves_dimension(self, task_item):
        item = with_archetype(normalize_item(task_item), 'tool_consolidation')
        assert item['archetype'] == 'tool_consolidation'
        assert item['dimension'] == 'cost_avoidance'
        # inputs kept as-is; the new formula just reads what it knows
        assert item['inputs'] == task_item['inputs']
        assert item_annual_value(item) == 0

    def test_unknown_archetype_has_no_dimension(self):
        assert normalize_item({'archetype': 'mystery'})['dimension'] is None
