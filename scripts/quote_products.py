#!/usr/bin/env python
"""
Print sample quotes with their traces for every product in the catalog.

Usage:
    python scripts/quote_products.py
"""
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from benefits_pricing.config.settings import configure_logging
from benefits_pricing.engine.errors import PricingError
from benefits_pricing.engine.models import CoverageLevel, Employee, QuoteRequest, SelectedOptions
from benefits_pricing.engine.quote_engine import QuoteEngine


SAMPLE_OPTIONS = SelectedOptions(
    family_members_to_cover=['ee', 'sp', 'ch'],
    coverage_level=[
        CoverageLevel(role='ee', coverage=200000),
        CoverageLevel(role='sp', coverage=75000),
        CoverageLevel(role='ch', coverage=10000),
    ],
)


def main():
    configure_logging()
    engine = QuoteEngine()
    employee = Employee(employee_id='1', first_name='Sample', last_name='Employee')
    
    print("=" * 60)
    print("BENEFITS PRICING SAMPLE QUOTES")
    print("=" * 60)
    
    for product in engine.catalog.products:
        # Only roles the product actually rates
        rated_roles = {cost.role for cost in product.costs}
        options = SelectedOptions(
            family_members_to_cover=[r for r in SAMPLE_OPTIONS.family_members_to_cover if r in rated_roles],
            coverage_level=SAMPLE_OPTIONS.coverage_level,
        )
        request = QuoteRequest(product_id=product.product_id, selected_options=options, employee=employee)
        
        print(f"\n--- {product.name} ({product.type}) ---")
        try:
            quote = engine.calculate(request)
        except PricingError as e:
            print(f"❌ {e}")
            continue
        
        print(quote.get_trace_text())
        for warning in quote.warnings:
            print(f"  ⚠ {warning}")
        print(f"Employee owes: ${quote.price:.2f}")


if __name__ == "__main__":
    main()
