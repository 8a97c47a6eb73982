"""Exceptions raised while resolving coordinates to districts."""
from typing import List, Optional
from mgnrega.core.models import ProviderAttempt


class GeoResolutionError(Exception):
    """Base class for reverse-geocoding failures."""


class ProviderError(GeoResolutionError):
    """A single provider could not produce a usable result."""

    def __init__(self, provider: str, reason: str):
        super().__init__(f"{provider}: {reason}")
        self.provider = provider
        self.reason = reason


class ProviderUnconfigured(ProviderError):
    """The provider has no credential and was skipped."""


class ProviderTimeout(ProviderError):
    """The provider did not answer within its timeout."""


class ProviderHttpError(ProviderError):
    """Transport failure, non-2xx status or an API-level error payload."""

    def __init__(self, provider: str, reason: str, status_code: Optional[int] = None):
        super().__init__(provider, reason)
        self.status_code = status_code


class ProviderInsufficientData(ProviderError):
    """The provider answered but without both a state and a district."""


class AllProvidersExhausted(GeoResolutionError):
    """Every provider in the chain was skipped or failed."""

    def __init__(self, attempts: List[ProviderAttempt]):
        self.attempts = list(attempts)
        summary = "; ".join(
            f"{a.provider} {a.status}" + (f" ({a.reason})" if a.reason else "")
            for a in self.attempts
        ) or "no providers configured"
        super().__init__(f"Location could not be determined: {summary}")

    @property
    def attempted(self) -> List[str]:
        return [a.provider for a in self.attempts if a.status != "skipped"]

    @property
    def skipped(self) -> List[str]:
        return [a.provider for a in self.attempts if a.status == "skipped"]
