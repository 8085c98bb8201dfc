"""
Product Catalog - Loads benefits products and their rate tables.

Reads two CSV files:
- products.csv: product_id, name, type, contribution_mode, contribution
- rates.csv: product_id, role, price, cost_divisor, min_coverage, max_coverage

Voluntary life products get banded VolLifeRate rows, every other product
gets flat MedicalRate rows. Rate rows keep their file order.
"""
import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from ..config.settings import get_settings, Settings
from ..engine.errors import ProductNotFound
from ..engine.models import VOLUNTARY_LIFE, ContributionSpec, MedicalRate, Product, VolLifeRate

logger = logging.getLogger(__name__)


class ProductCatalog:
    """Static product catalog keyed by product id."""

    def __init__(self, products: list[Product]):
        self._products = {p.product_id: p for p in products}

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> 'ProductCatalog':
        settings = settings or get_settings()
        return cls.load(settings.products_csv, settings.rates_csv)

    @classmethod
    def load(cls, products_csv: Path, rates_csv: Path) -> 'ProductCatalog':
        """Build the catalog from the product and rate CSV files."""
        for path in (products_csv, rates_csv):
            if not path.exists():
                raise FileNotFoundError(f"Catalog file not found at {path}.")

        products_df = _read_csv(products_csv)
        rates_df = _read_csv(rates_csv)

        products = []
        for _, row in products_df.iterrows():
            product_id = int(row['product_id'])
            product_rates = rates_df[rates_df['product_id'] == str(product_id)]
            products.append(Product(
                type=row['type'],
                costs=tuple(_to_rate(rate, row['type']) for _, rate in product_rates.iterrows()),
                employer_contribution=_to_contribution(row),
                product_id=product_id,
                name=row['name'],
            ))

        logger.info("Loaded %d products and %d rate rows from %s", len(products), len(rates_df), products_csv.parent)
        return cls(products)

    @property
    def products(self) -> list[Product]:
        return list(self._products.values())

    def get_product(self, product_id: int) -> Product:
        """Look up a product by id; raises ProductNotFound."""
        try:
            return self._products[int(product_id)]
        except (KeyError, ValueError):
            raise ProductNotFound(product_id) from None

    def find_by_type(self, product_type: str) -> Optional[Product]:
        """First product of the given type, if any."""
        for product in self._products.values():
            if product.type == product_type:
                return product
        return None

    def __len__(self) -> int:
        return len(self._products)


def _read_csv(path: Path) -> pd.DataFrame:
    df = pd.read_csv(path, dtype=str).fillna('')
    df.columns = [c.strip() for c in df.columns]
    for col in df.columns:
        df[col] = df[col].astype(str).str.strip()
    return df


def _to_contribution(row: pd.Series) -> Optional[ContributionSpec]:
    # An empty mode means the product has no employer contribution policy
    if not row.get('contribution_mode'):
        return None
    return ContributionSpec(mode=row['contribution_mode'], contribution=float(row['contribution']))


def _to_rate(row: pd.Series, product_type: str):
    if product_type != VOLUNTARY_LIFE:
        return MedicalRate(role=row['role'], price=float(row['price']))

    return VolLifeRate(
        role=row['role'],
        price=float(row['price']),
        cost_divisor=float(row['cost_divisor']) if row.get('cost_divisor') else 1000,
        min_coverage=int(row['min_coverage']) if row.get('min_coverage') else 0,
        max_coverage=int(row['max_coverage']) if row.get('max_coverage') else None,
    )
