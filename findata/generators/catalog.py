"""Static table of transaction categories, merchants and amount ranges.

Amounts are in Indonesian rupiah. ``frequency`` records how often a
category shows up on a real statement; the default uniform selection mode
ignores it (see :class:`CategorySelection`).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from findata.errors import EmptyCatalogError, InvalidRangeError


class Category(str, Enum):
    # Declaration order is the sampling order.
    SALARY = "salary"
    GROCERIES = "groceries"
    UTILITIES = "utilities"
    RENT = "rent"
    ENTERTAINMENT = "entertainment"
    TRANSPORTATION = "transportation"
    DINING = "dining"
    SHOPPING = "shopping"
    HEALTHCARE = "healthcare"
    FREELANCE = "freelance"
    SUBSCRIPTIONS = "subscriptions"
    TRAVEL = "travel"


class CategorySelection(str, Enum):
    """How the transaction generator picks a category for each draw."""

    UNIFORM = "uniform"
    WEIGHTED = "weighted"


@dataclass(frozen=True)
class CategoryProfile:
    merchants: tuple[str, ...]
    amount_range: tuple[float, float]
    is_income: bool
    frequency: float
    descriptions: tuple[str, ...] = ("Transaction",)

    def __post_init__(self) -> None:
        if not self.merchants:
            raise EmptyCatalogError("category profile needs at least one merchant")
        low, high = self.amount_range
        if low < 0 or high < 0:
            raise InvalidRangeError(f"amount range must be non-negative, got {self.amount_range}")
        if low > high:
            raise InvalidRangeError(f"amount range minimum exceeds maximum: {self.amount_range}")
        if self.frequency < 0:
            raise InvalidRangeError(f"frequency must be non-negative, got {self.frequency}")
        if not self.descriptions:
            raise EmptyCatalogError("category profile needs at least one description phrase")


CATALOG: Mapping[Category, CategoryProfile] = MappingProxyType(
    {
        Category.SALARY: CategoryProfile(
            merchants=(
                "PT Tech Indonesia Payroll",
                "Digital Agency Jakarta",
                "Startup Indonesia",
                "Konsultan IT Jakarta",
                "Software House Bandung",
                "Tech Company Surabaya",
            ),
            amount_range=(8_000_000, 25_000_000),
            is_income=True,
            frequency=0.02,
            descriptions=("Monthly Salary", "Bi-weekly Paycheck", "Salary Deposit"),
        ),
        Category.GROCERIES: CategoryProfile(
            merchants=(
                "Indomaret",
                "Alfamart",
                "Superindo",
                "Ranch Market",
                "Lotte Mart",
                "Hypermart",
                "Transmart",
                "Giant",
                "Farmer's Market BSD",
                "Papaya Fresh Gallery",
                "Pasar Tradisional",
                "Toko Sayur Keliling",
                "Warung Sayur",
            ),
            amount_range=(50_000, 800_000),
            is_income=False,
            frequency=0.15,
            descriptions=("Grocery Shopping", "Weekly Groceries", "Food & Supplies"),
        ),
        Category.UTILITIES: CategoryProfile(
            merchants=(
                "PLN (Listrik)",
                "PDAM (Air)",
                "Indihome",
                "Telkomsel",
                "XL Axiata",
                "First Media",
                "Biznet Home",
            ),
            amount_range=(100_000, 1_500_000),
            is_income=False,
            frequency=0.03,
            descriptions=("Utility Bill Payment", "Monthly Service", "Utility Charge"),
        ),
        Category.RENT: CategoryProfile(
            merchants=(
                "Kost Jakarta Selatan",
                "Apartemen Jakarta",
                "Sewa Rumah Bekasi",
                "Kontrakan Depok",
            ),
            amount_range=(2_000_000, 15_000_000),
            is_income=False,
            frequency=0.03,
            descriptions=("Monthly Rent", "Rent Payment", "Housing Payment"),
        ),
        Category.ENTERTAINMENT: CategoryProfile(
            merchants=(
                "Netflix Indonesia",
                "Spotify Premium",
                "Disney+ Hotstar",
                "Vidio Premier",
                "CGV Cinemas",
                "XXI Cineplex",
                "Timezone",
                "PlayStation Store",
                "Steam",
                "Dufan",
                "Trans Studio",
                "Karaoke Inul Vizta",
                "Museum MACAN",
                "Ancol",
            ),
            amount_range=(50_000, 1_500_000),
            is_income=False,
            frequency=0.10,
            descriptions=("Subscription Service", "Entertainment Purchase", "Recreation"),
        ),
        Category.TRANSPORTATION: CategoryProfile(
            merchants=(
                "Pertamina",
                "Shell",
                "Gojek",
                "Grab",
                "TransJakarta",
                "MRT Jakarta",
                "Tol Jakarta-Cikampek",
                "Parkir Mall",
                "Blue Bird Taxi",
                "Bengkel Motor",
                "Cuci Mobil",
            ),
            amount_range=(15_000, 500_000),
            is_income=False,
            frequency=0.20,
            descriptions=("Gas Purchase", "Ride Service", "Transit Fare", "Parking"),
        ),
        Category.DINING: CategoryProfile(
            merchants=(
                "Warteg",
                "Nasi Padang Sederhana",
                "Bakso Malang",
                "Ayam Geprek Bensu",
                "McDonald's",
                "KFC",
                "Starbucks",
                "Janji Jiwa",
                "Kopi Kenangan",
                "Solaria",
                "Hoka Hoka Bento",
                "Yoshinoya",
                "Sushi Tei",
                "Warung Makan",
                "Depot Bu Rudy",
                "Bebek Bengil",
                "Sate Khas Senayan",
                "Bakmi GM",
                "Es Teler 77",
            ),
            amount_range=(15_000, 1_000_000),
            is_income=False,
            frequency=0.25,
            descriptions=("Restaurant", "Food Purchase", "Dining Out", "Takeout"),
        ),
        Category.SHOPPING: CategoryProfile(
            merchants=(
                "Tokopedia",
                "Shopee",
                "Lazada",
                "Blibli",
                "Grand Indonesia",
                "Plaza Senayan",
                "Mall Taman Anggrek",
                "Pacific Place",
                "Erafone",
                "iBox",
                "Uniqlo",
                "H&M",
                "Zara",
                "Ace Hardware",
                "IKEA Alam Sutera",
                "Gramedia",
                "Pet Shop",
                "Courts",
                "Electronic City",
            ),
            amount_range=(100_000, 10_000_000),
            is_income=False,
            frequency=0.12,
            descriptions=("Purchase", "Online Order", "Retail Purchase", "Shopping"),
        ),
        Category.HEALTHCARE: CategoryProfile(
            merchants=(
                "RS Siloam",
                "RS Pondok Indah",
                "Klinik Kimia Farma",
                "Apotek Guardian",
                "Apotek Century",
                "Halodoc",
                "Alodokter",
                "Klinik Gigi Joy Dental",
                "Lab Prodia",
            ),
            amount_range=(50_000, 5_000_000),
            is_income=False,
            frequency=0.05,
            descriptions=("Medical Payment", "Healthcare Service", "Prescription"),
        ),
        Category.FREELANCE: CategoryProfile(
            merchants=(
                "Proyek Klien Jakarta",
                "Konsultasi IT",
                "Freelance Design",
                "Upwork Payment",
                "Fiverr Income",
                "Content Creator",
                "Jasa Programming",
            ),
            amount_range=(2_000_000, 50_000_000),
            is_income=True,
            frequency=0.04,
            descriptions=("Freelance Payment", "Consulting Invoice", "Project Payment"),
        ),
        Category.SUBSCRIPTIONS: CategoryProfile(
            merchants=(
                "Adobe Creative Cloud",
                "Microsoft 365",
                "iCloud Storage",
                "Google One",
                "GitHub Pro",
                "Fitness First",
                "Celebrity Fitness",
                "Kompas Digital",
                "Tempo Digital",
            ),
            amount_range=(50_000, 1_000_000),
            is_income=False,
            frequency=0.02,
            descriptions=("Subscription Renewal", "Monthly Plan", "Membership Fee"),
        ),
        Category.TRAVEL: CategoryProfile(
            merchants=(
                "Garuda Indonesia",
                "Lion Air",
                "AirAsia",
                "Citilink",
                "Traveloka",
                "Tiket.com",
                "Agoda",
                "RedDoorz",
                "OYO",
                "Hotel Santika",
                "Rental Mobil Jogja",
                "Travel Agent",
            ),
            amount_range=(500_000, 20_000_000),
            is_income=False,
            frequency=0.02,
            descriptions=("Flight Booking", "Hotel Stay", "Travel Booking"),
        ),
    }
)


def catalog_categories(catalog: Mapping[Category, CategoryProfile]) -> list[Category]:
    """Categories present in ``catalog``, in :class:`Category` declaration order."""

    return [category for category in Category if category in catalog]


def validate_catalog(
    catalog: Mapping[Category, CategoryProfile], *, require_all: bool = False
) -> None:
    """Check that ``catalog`` can feed the transaction generator.

    ``require_all`` additionally demands a profile for every :class:`Category`.
    """

    if not catalog:
        raise EmptyCatalogError("catalog has no categories")
    unknown = [key for key in catalog if not isinstance(key, Category)]
    if unknown:
        raise EmptyCatalogError(f"catalog keys must be Category members, got {unknown!r}")
    if require_all:
        missing = [category.value for category in Category if category not in catalog]
        if missing:
            raise EmptyCatalogError(f"catalog is missing categories: {', '.join(missing)}")
    for category, profile in catalog.items():
        if not profile.merchants:
            raise EmptyCatalogError(f"category {category.value!r} has an empty merchant pool")
        if not profile.descriptions:
            raise EmptyCatalogError(f"category {category.value!r} has no description phrases")


def category_weights(catalog: Mapping[Category, CategoryProfile]) -> list[float]:
    """Frequency weights aligned with :func:`catalog_categories`."""

    return [catalog[category].frequency for category in catalog_categories(catalog)]


validate_catalog(CATALOG, require_all=True)
