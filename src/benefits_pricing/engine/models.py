"""
Data models for the pricing engine.

Uses dataclasses for structured, type-safe data representation. Medical-style
flat rate rows and life-style banded rate rows are separate types.
"""
from dataclasses import dataclass, field, asdict
from typing import Optional, Union


# Covered-person roles
EMPLOYEE = "ee"
SPOUSE = "sp"
CHILD = "ch"

# Product types
MEDICAL = "medical"
VOLUNTARY_LIFE = "voluntaryLife"
LONG_TERM_DISABILITY = "longTermDisability"
COMMUTER = "commuter"

# Employer contribution modes
DOLLAR = "dollar"
PERCENTAGE = "percentage"


@dataclass(frozen=True)
class MedicalRate:
    """Flat monthly price for covering one role."""
    role: str
    price: float


@dataclass(frozen=True)
class VolLifeRate:
    """
    Per-unit price of life coverage for one role within a coverage band.

    A role's price is (coverage / cost_divisor) * price, e.g. 0.35 per
    $1000 of coverage. The band is inclusive; max_coverage=None is open-ended.
    """
    role: str
    price: float
    cost_divisor: float = 1000
    min_coverage: int = 0
    max_coverage: Optional[int] = None

    def covers(self, coverage: int) -> bool:
        """Whether the requested coverage amount falls inside this band."""
        if coverage < self.min_coverage:
            return False
        return self.max_coverage is None or coverage <= self.max_coverage


RateEntry = Union[MedicalRate, VolLifeRate]


@dataclass(frozen=True)
class ContributionSpec:
    """Employer contribution policy: a flat dollar subsidy or a percent of price."""
    mode: str
    contribution: float

    @property
    def is_dollar(self) -> bool:
        return self.mode == DOLLAR


@dataclass(frozen=True)
class Product:
    """A benefits product and its rate table."""
    type: str
    costs: tuple[RateEntry, ...] = ()
    employer_contribution: Optional[ContributionSpec] = None

    # Catalog metadata
    product_id: Optional[int] = None
    name: str = ""


@dataclass
class Employee:
    """Employee record. Carried through pricing, not used by the rate lookups."""
    employee_id: str = ""
    first_name: str = ""
    last_name: str = ""
    salary: Optional[float] = None


@dataclass(frozen=True)
class CoverageLevel:
    """Coverage amount requested for one role."""
    role: str
    coverage: int


@dataclass
class SelectedOptions:
    """Coverage choices made by the employee."""
    family_members_to_cover: list[str] = field(default_factory=list)

    # Only voluntary life products read this
    coverage_level: list[CoverageLevel] = field(default_factory=list)

    def covered_roles(self) -> list[str]:
        """Roles to price, in order, with duplicates dropped."""
        return list(dict.fromkeys(self.family_members_to_cover))

    def covers(self, role: str) -> bool:
        return role in self.family_members_to_cover


@dataclass
class TraceStep:
    """A single step in the quote calculation trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass
class QuoteRequest:
    """A request to price one catalog product for one employee."""
    product_id: int
    selected_options: SelectedOptions
    employee: Optional[Employee] = None


@dataclass
class Quote:
    """Complete result of a traced price calculation."""
    product_id: Optional[int]
    product_name: str
    product_type: str
    gross_price: float = 0.0
    employer_contribution: float = 0.0
    price: float = 0.0
    warnings: list[str] = field(default_factory=list)
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the quote trace."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def add_warning(self, warning: str):
        """Add a quote-level warning."""
        if warning not in self.warnings:
            self.warnings.append(warning)

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"• {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"• {t.step}: {t.description}")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return asdict(self)
