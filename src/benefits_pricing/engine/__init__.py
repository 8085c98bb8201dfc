"""Engine subpackage - core pricing logic and models."""
from .pricing import (
    calculate_product_price,
    calculate_medical_price,
    calculate_vol_life_price,
    calculate_vol_life_price_per_role,
    calculate_ltd_price,
    get_medical_price_per_role,
    get_employer_contribution,
    format_price,
)
from .errors import (
    PricingError,
    UnknownProductType,
    LookupFailure,
    RoleNotFound,
    CoverageBandNotFound,
    MissingContribution,
    ProductNotFound,
)
from .models import (
    Product,
    MedicalRate,
    VolLifeRate,
    ContributionSpec,
    CoverageLevel,
    SelectedOptions,
    Employee,
    Quote,
    QuoteRequest,
)

__all__ = [
    'calculate_product_price', 'calculate_medical_price', 'calculate_vol_life_price',
    'calculate_vol_life_price_per_role', 'calculate_ltd_price', 'get_medical_price_per_role',
    'get_employer_contribution', 'format_price',
    'PricingError', 'UnknownProductType', 'LookupFailure', 'RoleNotFound',
    'CoverageBandNotFound', 'MissingContribution', 'ProductNotFound',
    'Product', 'MedicalRate', 'VolLifeRate', 'ContributionSpec', 'CoverageLevel',
    'SelectedOptions', 'Employee', 'Quote', 'QuoteRequest',
]
