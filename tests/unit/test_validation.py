"""
Unit tests for boundary validation of caller-supplied calculations.
"""
import math

import pytest

from engines.validation import (
    ValidationError, validate_assumptions, validate_calculations, validate_investment, validate_items,
)


class TestAssumptions:

    def test_valid_passthrough(self, assumptions):
        assert validate_assumptions(assumptions) == assumptions

    def test_integral_float_years(self, assumptions):
        assert validate_assumptions(dict(assumptions, projectionYears=5.0))['projectionYears'] == 5

    def test_zero_years_allowed(self, assumptions):
        assert validate_assumptions(dict(assumptions, projectionYears=0))['projectionYears'] == 0

    @pytest.mark.parametrize('years', [-1, 2.5, True, '3'])
    def test_bad_years(self, assumptions, years):
        with pytest.raises(ValidationError, match='projectionYears'):
            validate_assumptions(dict(assumptions, projectionYears=years))

    @pytest.mark.parametrize('field', ['projectionYears', 'realizationRamp', 'annualGrowthRate'])
    def test_missing_field(self, assumptions, field):
        del assumptions[field]
        with pytest.raises(ValidationError, match=field):
            validate_assumptions(assumptions)

    def test_non_finite_ramp_and_growth(self, assumptions):
        with pytest.raises(ValidationError, match=r'realizationRamp\[1\]'):
            validate_assumptions(dict(assumptions, realizationRamp=[0.5, math.nan]))
        with pytest.raises(ValidationError, match='annualGrowthRate'):
            validate_assumptions(dict(assumptions, annualGrowthRate=math.inf))

    def test_not_an_object(self):
        with pytest.raises(ValidationError):
            validate_assumptions([3, [1], 0.1])


class TestItems:

    def test_valid_items_copied(self, mixed_items):
        out = validate_items(mixed_items)
        assert out == mixed_items
        assert out[0] is not mixed_items[0]

    def test_missing_inputs_default_to_empty(self):
        assert validate_items([{'archetype': 'labor_avoidance', 'manualAnnualValue': 0}])[0]['inputs'] == {}

    def test_non_numeric_input_tolerated(self):
        validate_items([{'archetype': 'task_elimination', 'inputs': {'tasksPerMonth': {'value': 'lots'}}}])

    def test_nan_input_rejected(self):
        items = [{'archetype': 'task_elimination', 'inputs': {'tasksPerMonth': {'value': math.nan}}}]
        with pytest.raises(ValidationError, match=r'items\[0\]\.inputs\.tasksPerMonth\.value'):
            validate_items(items)

    def test_infinite_manual_value_rejected(self):
        with pytest.raises(ValidationError, match='manualAnnualValue'):
            validate_items([{'archetype': 'task_elimination', 'manualAnnualValue': math.inf}])

    @pytest.mark.parametrize('items', [None, {}, [1], [{'inputs': {}}], [{'archetype': 'x', 'inputs': []}]])
    def test_structural_errors(self, items):
        with pytest.raises(ValidationError):
            validate_items(items)

    def test_unknown_archetype_accepted(self):
        # unknown archetypes are valued at 0 downstream rather than rejected
        assert validate_items([{'archetype': 'retired_archetype'}])[0]['archetype'] == 'retired_archetype'


class TestInvestment:

    def test_valid(self):
        assert validate_investment(10, None) == (10, None)

    def test_non_finite(self):
        with pytest.raises(ValidationError, match='proposedSpend'):
            validate_investment(None, math.nan)
        with pytest.raises(ValidationError, match='currentSpend'):
            validate_investment('100', 200)


class TestNumericRange:
    """Finite inputs whose values or products leave the float range."""

    def test_huge_integer_input_rejected(self):
        items = [{'archetype': 'task_elimination', 'inputs': {'tasksPerMonth': {'value': 10 ** 400}}}]
        with pytest.raises(ValidationError, match=r'tasksPerMonth\.value must be finite'):
            validate_items(items)

    def test_huge_integer_spend_rejected(self):
        with pytest.raises(ValidationError, match='currentSpend must be finite'):
            validate_investment(10 ** 400, None)

    def test_float_product_overflow_rejected(self):
        items = [{'archetype': 'labor_avoidance', 'inputs': {
            'ftesAvoided': {'value': 1e200}, 'fullyLoadedAnnualCost': {'value': 1e200}}}]
        with pytest.raises(ValidationError, match=r'items\[0\] annual value is out of range'):
            validate_items(items)

    def test_integer_product_overflow_rejected(self):
        items = [{'archetype': 'pipeline_velocity', 'inputs': {
            'dealsPerQuarter': {'value': 10 ** 200}, 'avgDealValue': {'value': 10 ** 200},
            'conversionLift': {'value': 0.1}}}]
        with pytest.raises(ValidationError, match='annual value is out of range'):
            validate_items(items)

    def test_hours_overflow_rejected(self):
        # manual value masks the dollar formula but hours still come from inputs
        items = [{'archetype': 'handoff_elimination', 'manualAnnualValue': 1, 'inputs': {
            'handoffsPerMonth': {'value': 1e200}, 'avgQueueTimeHrs': {'value': 1e200}}}]
        with pytest.raises(ValidationError, match='hours saved is out of range'):
            validate_items(items)


class TestCalculations:

    def test_valid(self, mixed_items):
        out = validate_calculations([{'shortId': 'a1', 'items': mixed_items, 'proposedSpend': 10}])
        assert out[0]['items'] == mixed_items

    @pytest.mark.parametrize('calcs', ['abc', {'items': []}, ['x'], [[1, 2]]])
    def test_structural_errors(self, calcs):
        with pytest.raises(ValidationError, match='calculations'):
            validate_calculations(calcs)

    def test_item_errors_name_the_calculation(self):
        with pytest.raises(ValidationError, match=r'calculations\[1\]\.items\[0\]\.archetype'):
            validate_calculations([{'items': []}, {'items': [{'archetype': 5}]}])

    def test_spend_checked(self):
        with pytest.raises(ValidationError, match=r'calculations\[0\]\.proposedSpend'):
            validate_calculations([{'items': [], 'proposedSpend': math.inf}])
