"""
Pricing functions for benefits products.

Every function here is pure. calculate_product_price is the entry point: it
dispatches on product type to exactly one calculator, nets out the employer
contribution, and formats the result exactly once. The calculators return
unformatted prices.
"""
import logging
import math
from decimal import Decimal, InvalidOperation, ROUND_DOWN
from typing import Optional, Sequence, Union

from .errors import CoverageBandNotFound, MissingContribution, RoleNotFound, UnknownProductType
from .models import (
    EMPLOYEE, LONG_TERM_DISABILITY, MEDICAL, VOLUNTARY_LIFE,
    ContributionSpec, CoverageLevel, Employee, Product, RateEntry, SelectedOptions, VolLifeRate,
)

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def calculate_product_price(
    product: Product,
    employee: Optional[Employee],
    selected_options: SelectedOptions,
) -> float:
    """
    Price a product for an employee's selected options.

    Resolution order:
    1. Dispatch on product type to its calculator (gross price)
    2. Subtract the employer contribution, if the product has a policy
    3. Truncate to cents

    Raises UnknownProductType for a type with no calculator.
    """
    price = calculate_gross_price(product, selected_options)
    if product.employer_contribution is not None:
        contribution = get_employer_contribution(product.employer_contribution, price)
        price = calculate_net_price(price, contribution)
    return format_price(price)


def calculate_gross_price(product: Product, selected_options: SelectedOptions) -> float:
    """Unformatted price before the employer contribution."""
    logger.debug("Pricing %s product %s", product.type, product.name or product.product_id)

    if product.type == MEDICAL:
        return calculate_medical_price(product, selected_options)
    if product.type == VOLUNTARY_LIFE:
        return calculate_vol_life_price(product, selected_options)
    if product.type == LONG_TERM_DISABILITY:
        return calculate_ltd_price(product, selected_options)

    raise UnknownProductType(product.type)


def calculate_net_price(price: float, contribution: float) -> float:
    """Price left for the employee; never below zero."""
    return max(0.0, price - contribution)


def calculate_medical_price(product: Product, selected_options: SelectedOptions) -> float:
    """Sum of the flat per-role prices for every covered family member."""
    price = 0.0
    for role in selected_options.covered_roles():
        price += get_medical_price_per_role(role, product.costs)
    return price


def get_medical_price_per_role(role: str, costs: Sequence[RateEntry]) -> float:
    """Price of the first rate row for this role."""
    for cost in costs:
        if cost.role == role:
            return cost.price
    raise RoleNotFound(role)


def calculate_vol_life_price(product: Product, selected_options: SelectedOptions) -> float:
    """Sum of each covered role's price at its requested coverage amount."""
    price = 0.0
    for role in selected_options.covered_roles():
        price += calculate_vol_life_price_per_role(role, selected_options.coverage_level, product.costs)
    return price


def calculate_vol_life_price_per_role(
    role: str,
    coverage_level: Sequence[CoverageLevel],
    costs: Sequence[RateEntry],
) -> float:
    """
    Price of life coverage for one role.

    Finds the coverage requested for the role, then the first rate band for
    that role containing it, and charges price per cost_divisor dollars of
    coverage.
    """
    coverage = next((level.coverage for level in coverage_level if level.role == role), None)
    if coverage is None:
        raise RoleNotFound(role, table="coverage level")

    for cost in costs:
        if isinstance(cost, VolLifeRate) and cost.role == role and cost.covers(coverage):
            return (coverage / cost.cost_divisor) * cost.price

    raise CoverageBandNotFound(role, coverage)


def calculate_ltd_price(product: Product, selected_options: SelectedOptions) -> float:
    """
    Long term disability covers the employee only.

    Spouse and child selections are ignored; nothing is owed if the employee
    is not covered.
    """
    if not selected_options.covers(EMPLOYEE):
        return 0.0
    return get_medical_price_per_role(EMPLOYEE, product.costs)


def format_price(value: Union[float, int, str]) -> float:
    """
    Truncate a price to two decimal places (99.999 -> 99.99, never 100.00).

    Accepts numbers and numeric strings. Numbers are truncated from their
    shortest decimal repr, so a formatted price formats to itself. Input that
    does not parse returns NaN; digit grouping such as "1_000" is not a price.
    """
    if isinstance(value, str) and "_" in value:
        return math.nan

    try:
        amount = Decimal(value if isinstance(value, str) else repr(float(value)))
    except (InvalidOperation, TypeError, ValueError, OverflowError):
        return math.nan

    if amount.is_nan():
        return math.nan
    if amount.is_infinite():
        return float(amount)

    try:
        return float(amount.quantize(CENT, rounding=ROUND_DOWN))
    except InvalidOperation:
        # Too many digits to carry cents; already coarser than a cent
        return float(amount)


def get_employer_contribution(contribution_spec: Optional[ContributionSpec], price: float) -> float:
    """
    Amount of the price the employer covers.

    Dollar mode is a flat subsidy regardless of price; any other mode is a
    fraction of the price (0.1 covers 10%). A missing policy raises
    MissingContribution.
    """
    if contribution_spec is None:
        raise MissingContribution()

    if contribution_spec.is_dollar:
        return contribution_spec.contribution
    return price * contribution_spec.contribution
