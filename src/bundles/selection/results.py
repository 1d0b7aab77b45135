"""Result values returned by the bundle selection rules."""

from dataclasses import dataclass, field
from typing import Any

NOT_FOUND = "not-found"
LOOKUP_FAILED = "lookup-failed"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking a selection against a bundle's rules.

    `errors` block the purchase; `warnings` are advisories only.
    """

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class PriceBreakdown:
    """Bundle price compared with buying the selected items one by one."""

    bundle_price: float
    individual_total: float

    @property
    def savings(self) -> float:
        return self.individual_total - self.bundle_price

    def to_dict(self) -> dict:
        return {
            "bundle_price": self.bundle_price,
            "individual_total": self.individual_total,
            "savings": self.savings,
        }


@dataclass(frozen=True)
class ServiceError:
    """Why an operation could not produce a result."""

    kind: str
    message: str
    cause: BaseException | None = None


@dataclass(frozen=True)
class ServiceResult:
    """Either `data` (success) or `error` (failure), never both."""

    success: bool
    data: Any = None
    error: ServiceError | None = None

    @classmethod
    def ok(cls, data: Any) -> "ServiceResult":
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, kind: str, message: str, cause: BaseException | None = None) -> "ServiceResult":
        return cls(success=False, error=ServiceError(kind=kind, message=message, cause=cause))
