"""Quote engine tests: traced quotes agree with calculate_product_price."""
import pytest

from benefits_pricing.engine import pricing
from benefits_pricing.engine.errors import ProductNotFound, RoleNotFound, UnknownProductType
from benefits_pricing.engine.models import CoverageLevel, QuoteRequest, SelectedOptions
from benefits_pricing.engine.quote_engine import QuoteEngine


@pytest.fixture(scope="module")
def engine():
    """Create a single engine instance for all tests."""
    return QuoteEngine()


def test_medical_quote_without_contribution(engine, employee):
    request = QuoteRequest(
        product_id=1,
        selected_options=SelectedOptions(family_members_to_cover=['ee', 'sp', 'ch']),
        employee=employee,
    )
    quote = engine.calculate(request)

    assert quote.price == 22.88
    assert quote.employer_contribution == 0.0
    assert quote.product_name == 'Medical'
    assert any("No employer contribution" in w for w in quote.warnings)


def test_vol_life_quote_breakdown(engine, employee):
    request = QuoteRequest(
        product_id=2,
        selected_options=SelectedOptions(
            family_members_to_cover=['ee'],
            coverage_level=[CoverageLevel('ee', 125000)],
        ),
        employee=employee,
    )
    quote = engine.calculate(request)

    assert quote.gross_price == 43.75
    assert quote.employer_contribution == 4.375
    assert quote.price == 39.37
    assert quote.warnings == []
    assert [t.step for t in quote.trace] == [
        "Product Lookup", "Coverage", "Gross Price", "Employer Contribution", "Format",
    ]


def test_ltd_quote_warns_about_ignored_roles(engine, employee):
    request = QuoteRequest(
        product_id=3,
        selected_options=SelectedOptions(family_members_to_cover=['ee', 'sp', 'ch']),
        employee=employee,
    )
    quote = engine.calculate(request)

    assert quote.price == 22.04
    assert len(quote.warnings) == 1
    assert "ignored sp, ch" in quote.warnings[0]


@pytest.mark.parametrize("product_id, options", [
    (1, SelectedOptions(['ee'])),
    (1, SelectedOptions(['ee', 'sp'])),
    (2, SelectedOptions(['ee', 'sp'], [CoverageLevel('ee', 200000), CoverageLevel('sp', 75000)])),
    (3, SelectedOptions(['sp'])),
])
def test_quote_price_matches_product_price(engine, employee, product_id, options):
    quote = engine.calculate(QuoteRequest(product_id=product_id, selected_options=options))
    product = engine.catalog.get_product(product_id)

    assert quote.price == pricing.calculate_product_price(product, employee, options)
    assert quote.price == engine.calculate_price(product_id, options, employee)


def test_contribution_exceeding_price_warns(engine):
    quote = engine.calculate(QuoteRequest(product_id=3, selected_options=SelectedOptions(['sp'])))

    assert quote.price == 0.0
    assert any("exceeds" in w for w in quote.warnings)


def test_unknown_product_id(engine):
    with pytest.raises(ProductNotFound):
        engine.calculate(QuoteRequest(product_id=42, selected_options=SelectedOptions(['ee'])))


def test_commuter_quote_is_unknown_type(engine):
    with pytest.raises(UnknownProductType, match="commuter"):
        engine.calculate(QuoteRequest(product_id=4, selected_options=SelectedOptions(['ee'])))


def test_quote_lookup_failure_propagates(engine):
    with pytest.raises(RoleNotFound):
        engine.calculate(QuoteRequest(product_id=1, selected_options=SelectedOptions(['ee', 'gp'])))


def test_trace_text(engine):
    quote = engine.calculate(QuoteRequest(product_id=1, selected_options=SelectedOptions(['ee'])))
    text = quote.get_trace_text()

    assert "• Product Lookup: Found medical product in catalog = Medical" in text
    assert text.endswith("• Format: Truncated to cents = $19.26")


def test_reload_data_keeps_catalog(engine):
    engine.reload_data()
    assert len(engine.catalog) == 4


def test_percentage_contribution_trace(engine):
    options = SelectedOptions(['ee'], [CoverageLevel('ee', 125000)])
    quote = engine.calculate(QuoteRequest(product_id=2, selected_options=options))
    contribution = next(t for t in quote.trace if t.step == "Employer Contribution")

    assert contribution.description == "10% of gross price"
    assert contribution.value == "$4.3750"
