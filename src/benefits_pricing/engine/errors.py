"""
Exceptions raised by the pricing engine.

Two families: an unrecognized product type, and lookup failures where
required reference data (a rate row, a coverage band, an employer
contribution policy, a catalog product) is absent for the given key.
"""


class PricingError(Exception):
    """Base class for all pricing errors."""


class UnknownProductType(PricingError, ValueError):
    """The dispatcher has no calculator for this product type."""

    def __init__(self, product_type: str):
        self.product_type = product_type
        super().__init__(f"Unknown product type: {product_type}")


class LookupFailure(PricingError, LookupError):
    """Required reference data is absent for the given key."""


class RoleNotFound(LookupFailure):
    """No entry for a covered role."""

    def __init__(self, role: str, table: str = "rate table"):
        self.role = role
        self.table = table
        super().__init__(f"No {table} entry for role '{role}'")


class CoverageBandNotFound(RoleNotFound):
    """No rate band for the role contains the requested coverage."""

    def __init__(self, role: str, coverage: int):
        self.coverage = coverage
        super().__init__(role, table=f"rate band covering {coverage}")


class MissingContribution(LookupFailure):
    """The product defines no employer contribution policy."""

    def __init__(self):
        super().__init__("No employer contribution defined")


class ProductNotFound(LookupFailure):
    """The catalog has no product with this id."""

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found in catalog")
