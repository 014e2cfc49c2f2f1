"""
Shared pytest fixtures for the value engine test suite.
"""
import pytest


def make_item(archetype, manual=None, **values):
    """Value item with every keyword turned into a {value, confidence} input."""
    item = {
        'archetype': archetype,
        'inputs': {k: {'value': v, 'confidence': 'custom'} for k, v in values.items()},
    }
    if manual is not None:
        item['manualAnnualValue'] = manual
    return item


@pytest.fixture
def assumptions():
    return {'projectionYears': 3, 'realizationRamp': [0.5, 1, 1], 'annualGrowthRate': 0.1}


@pytest.fixture
def task_item():
    # 3000 x 8 x (50/60) x 12 = 240,000 ; 400 hrs/month
    return make_item('task_elimination', tasksPerMonth=3000, minutesPerTask=8, hourlyRate=50)


@pytest.fixture
def pipeline_item():
    # 200 x 25000 x 0.10 x 4 = 2,000,000
    return make_item('pipeline_velocity', dealsPerQuarter=200, avgDealValue=25000, conversionLift=0.10)


@pytest.fixture
def tool_item():
    # 3 x 15000 = 45,000
    return make_item('tool_consolidation', toolsEliminated=3, annualLicenseCostPerTool=15000)


@pytest.fixture
def mixed_items(task_item, pipeline_item, tool_item):
    return [task_item, pipeline_item, tool_item]
