"""Coordinate to district resolution over a chain of reverse-geocoding providers."""
from typing import List, Mapping, Optional, Sequence

from mgnrega.core.config import TARGET_REGION
from mgnrega.core.errors import (
    AllProvidersExhausted,
    ProviderError,
    ProviderInsufficientData,
    ProviderUnconfigured,
)
from mgnrega.core.models import AdministrativeFields, Coordinate, GeocodeResult, ProviderAttempt
from mgnrega.core.normalization import MAHARASHTRA_DISTRICT_RULES, normalize_district_name
from mgnrega.core.security import validate_coordinates
from mgnrega.geocoders import ReverseGeocoder, build_default_providers
from mgnrega.utils.error_tracking import capture_message
from mgnrega.utils.logging import log_structured
from mgnrega.utils.timing import Timer


def is_in_region(result: Optional[GeocodeResult], region: str = TARGET_REGION) -> bool:
    """True when the result's state is exactly the region name."""
    return result is not None and result.state == region


class GeoResolver:
    """
    Resolve coordinates to state and district.

    Providers are tried one at a time in priority order. The first one
    that yields both a state and a district wins and the rest are not
    called. The resolver holds no mutable state, so one instance can
    serve concurrent callers.
    """

    def __init__(
        self,
        providers: Sequence[ReverseGeocoder],
        region: str = TARGET_REGION,
        rules: Mapping[str, str] = MAHARASHTRA_DISTRICT_RULES
    ):
        """
        Initialize resolver.

        Args:
            providers: Provider adapters in priority order
            region: State whose district names are normalized
            rules: District name correction table
        """
        self.providers = tuple(providers)
        self.region = region
        self.rules = rules

    @classmethod
    def from_config(cls) -> "GeoResolver":
        """Build a resolver with the providers configured in the environment."""
        return cls(build_default_providers())

    def resolve(self, latitude: float, longitude: float) -> GeocodeResult:
        """
        Resolve a coordinate using the first sufficient provider.

        Args:
            latitude: Latitude in [-90, 90]
            longitude: Longitude in [-180, 180]

        Returns:
            GeocodeResult of the first provider giving a state and a district

        Raises:
            ValueError: coordinates are not numeric or out of range
            AllProvidersExhausted: every provider was skipped or failed
        """
        if not validate_coordinates(latitude, longitude):
            raise ValueError(f"Invalid coordinates: {latitude}, {longitude}")

        coordinate = Coordinate(latitude=float(latitude), longitude=float(longitude))
        attempts: List[ProviderAttempt] = []

        log_structured(
            "info",
            "Reverse geocoding started",
            latitude=coordinate.latitude,
            longitude=coordinate.longitude,
            providers=[p.name for p in self.providers],
        )

        for provider in self.providers:
            timer = Timer(f"reverse_geocode.{provider.name}", quiet=True)
            try:
                with timer:
                    fields = provider.reverse_geocode(coordinate, self.region)
                    result = self._build_result(provider.name, coordinate, fields)
            except ProviderUnconfigured as e:
                attempts.append(ProviderAttempt(provider.name, "skipped", e.reason))
                log_structured("info", "Provider skipped", provider=provider.name, reason=e.reason)
                continue
            except ProviderError as e:
                attempts.append(ProviderAttempt(provider.name, "failed", e.reason, timer.elapsed or 0.0))
                log_structured(
                    "warning",
                    "Provider failed, trying next",
                    provider=provider.name,
                    error_type=type(e).__name__,
                    reason=e.reason,
                    elapsed_seconds=round(timer.elapsed or 0.0, 4),
                )
                continue

            attempts.append(ProviderAttempt(provider.name, "succeeded", None, timer.elapsed))
            log_structured(
                "info",
                "Reverse geocoding succeeded",
                provider=provider.name,
                state=result.state,
                district=result.district,
                city=result.city,
                accuracy=result.accuracy,
                elapsed_seconds=round(timer.elapsed, 4),
            )
            return result

        error = AllProvidersExhausted(attempts)
        log_structured(
            "error",
            "All geocoding providers failed",
            latitude=coordinate.latitude,
            longitude=coordinate.longitude,
            attempted=error.attempted,
            skipped=error.skipped,
            failures=[{"provider": a.provider, "reason": a.reason} for a in attempts if a.status == "failed"],
        )
        capture_message(str(error), level="warning", context={"attempts": [a.provider for a in attempts]})
        raise error

    def _build_result(
        self,
        provider_name: str,
        coordinate: Coordinate,
        fields: AdministrativeFields
    ) -> GeocodeResult:
        district = fields.district
        if fields.state and district and fields.state.lower() == self.region.lower():
            district = normalize_district_name(district, self.rules)

        if not fields.state or not district:
            missing = [name for name, value in (("state", fields.state), ("district", district)) if not value]
            raise ProviderInsufficientData(provider_name, f"response has no {' or '.join(missing)}")

        return GeocodeResult(
            state=fields.state,
            district=district,
            city=fields.city,
            country=fields.country,
            formatted_address=fields.formatted_address,
            coordinates=coordinate,
            accuracy=fields.accuracy,
            provider_name=provider_name,
        )
