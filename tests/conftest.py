import pytest
import sys
import os

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from benefits_pricing.engine.models import (
    ContributionSpec, Employee, MedicalRate, Product, VolLifeRate,
)


@pytest.fixture
def products():
    """Sample catalog matching the packaged CSV tables."""
    return {
        'medical': Product(
            type='medical',
            costs=(
                MedicalRate(role='ee', price=19.26),
                MedicalRate(role='sp', price=2.45),
                MedicalRate(role='ch', price=1.17),
            ),
            product_id=1,
            name='Medical',
        ),
        'voluntaryLife': Product(
            type='voluntaryLife',
            costs=(
                VolLifeRate(role='ee', price=0.35, cost_divisor=1000),
                VolLifeRate(role='sp', price=0.1199, cost_divisor=1000),
            ),
            employer_contribution=ContributionSpec(mode='percentage', contribution=0.1),
            product_id=2,
            name='Voluntary Life',
        ),
        'longTermDisability': Product(
            type='longTermDisability',
            costs=(MedicalRate(role='ee', price=32.04),),
            employer_contribution=ContributionSpec(mode='dollar', contribution=10),
            product_id=3,
            name='Long Term Disability',
        ),
        'commuter': Product(
            type='commuter',
            employer_contribution=ContributionSpec(mode='dollar', contribution=75),
            product_id=4,
            name='Commuter',
        ),
    }


@pytest.fixture
def employee():
    return Employee(employee_id='1', first_name='Jane', last_name='Doe', salary=65000)
