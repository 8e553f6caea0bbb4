"""Static catalog and location data."""

from __future__ import annotations

from sales_app.constant import (
    CATALOG_SEED,
    COUNTRY_PREFIXES,
    DEFAULT_COUNTRY_PREFIX,
    LOCATION_DATA,
)
from sales_app.models import CountryCost, CountryPrice, Product


def _product_from_seed(raw: dict[str, object]) -> Product:
    effective_date = str(raw["effective_date"])
    prices: dict[str, float] = raw["prices"]  # type: ignore[assignment]
    costs: dict[str, float] = raw["costs"]  # type: ignore[assignment]
    return Product(
        code=str(raw["code"]),
        description=str(raw["description"]),
        dimension=str(raw["dimension"]),
        category=str(raw["category"]),
        subcategory=str(raw["subcategory"]),
        price_by_country={country: CountryPrice(price, effective_date) for country, price in prices.items()},
        cost_by_country={country: CountryCost(cost, effective_date) for country, cost in costs.items()},
    )


CATALOG: list[Product] = [_product_from_seed(raw) for raw in CATALOG_SEED]

COUNTRIES: list[str] = list(LOCATION_DATA)


def find_product(code: str) -> Product | None:
    """Look up a catalog entry by code."""
    for product in CATALOG:
        if product.code == code:
            return product
    return None


def search_catalog(term: str) -> list[Product]:
    """Filter the catalog by description or code (case-insensitive)."""
    needle = term.lower()
    return [
        product
        for product in CATALOG
        if needle in product.description.lower() or needle in product.code.lower()
    ]


def states_for(country: str) -> list[str]:
    """States of a country; empty for unset or unknown countries."""
    if not country:
        return []
    return list(LOCATION_DATA.get(country, {}))


def cities_for(country: str, state: str) -> list[str]:
    """Cities of a state; empty when either input is unset or unknown."""
    if not country or not state:
        return []
    return list(LOCATION_DATA.get(country, {}).get(state, []))


def country_prefix(country: str) -> str:
    return COUNTRY_PREFIXES.get(country, DEFAULT_COUNTRY_PREFIX)
