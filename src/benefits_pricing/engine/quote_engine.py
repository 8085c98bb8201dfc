"""
Quote Engine - Catalog-backed pricing with traceability.

Wraps the pure pricing functions with:
- Product resolution from the catalog
- Structured Quote dataclass output (gross, contribution, net)
- Execution trace for every calculation step
- Warning collection for ignored selections and uncovered prices
"""
import logging
from typing import Optional

from ..config.settings import get_settings, Settings
from ..data.product_catalog import ProductCatalog
from . import pricing
from .models import EMPLOYEE, LONG_TERM_DISABILITY, Employee, Quote, QuoteRequest, SelectedOptions

logger = logging.getLogger(__name__)


class QuoteEngine:
    """
    Prices catalog products using Product → Gross → Contribution → Net pipeline.

    Resolution order:
    1. Look up the product in the catalog
    2. Dispatch on product type for the gross price
    3. Resolve the employer contribution (none if the product has no policy)
    4. Subtract it, flooring at zero
    5. Truncate to cents
    """

    def __init__(self, settings: Optional[Settings] = None, catalog: Optional[ProductCatalog] = None):
        """Initialize engine with the product catalog."""
        self.settings = settings or get_settings()
        self.catalog = catalog or ProductCatalog.from_settings(self.settings)

    def reload_data(self):
        """Reload the catalog from disk."""
        self.catalog = ProductCatalog.from_settings(self.settings)

    def calculate_price(
        self,
        product_id: int,
        selected_options: SelectedOptions,
        employee: Optional[Employee] = None,
    ) -> float:
        """Net price for a catalog product without the trace."""
        product = self.catalog.get_product(product_id)
        return pricing.calculate_product_price(product, employee, selected_options)

    def calculate(self, request: QuoteRequest) -> Quote:
        """
        Calculate a quote with full traceability.

        Args:
            request: QuoteRequest with product id, options and employee

        Returns:
            Quote with gross price, employer contribution, net price, trace
        """
        product = self.catalog.get_product(request.product_id)
        options = request.selected_options

        quote = Quote(
            product_id=product.product_id,
            product_name=product.name,
            product_type=product.type,
        )
        quote.add_trace("Product Lookup", f"Found {product.type} product in catalog", product.name)
        quote.add_trace("Coverage", "Roles to cover", ", ".join(options.covered_roles()) or "none")

        if product.type == LONG_TERM_DISABILITY:
            ignored = [r for r in options.covered_roles() if r != EMPLOYEE]
            if ignored:
                quote.add_warning(
                    f"{product.name or product.type} covers the employee only; ignored {', '.join(ignored)}"
                )

        quote.gross_price = pricing.calculate_gross_price(product, options)
        quote.add_trace("Gross Price", "Sum of covered role prices", f"${quote.gross_price:.4f}")

        net = quote.gross_price
        if product.employer_contribution is None:
            quote.add_trace("Employer Contribution", "No contribution policy, quoting full price")
            quote.add_warning(f"No employer contribution defined for {product.name or product.type}")
        else:
            spec = product.employer_contribution
            quote.employer_contribution = pricing.get_employer_contribution(spec, quote.gross_price)
            if spec.is_dollar:
                description = f"Flat ${spec.contribution:.2f} subsidy"
            else:
                description = f"{spec.contribution:.0%} of gross price"
            quote.add_trace("Employer Contribution", description, f"${quote.employer_contribution:.4f}")

            if quote.employer_contribution > quote.gross_price:
                quote.add_warning("Employer contribution exceeds the price; employee owes nothing")
            net = pricing.calculate_net_price(quote.gross_price, quote.employer_contribution)

        quote.price = pricing.format_price(net)
        quote.add_trace("Format", "Truncated to cents", f"${quote.price:.2f}")

        for warning in quote.warnings:
            logger.warning("Quote for product %s: %s", product.product_id, warning)
        logger.debug("Quoted product %s at %s", product.product_id, quote.price)

        return quote
