"""Geoapify reverse geocoding provider."""
from typing import Any, Dict
from mgnrega.core.models import AdministrativeFields, Coordinate
from mgnrega.geocoders.base import ReverseGeocoder, first_present


class GeoapifyGeocoder(ReverseGeocoder):
    """Geoapify (OpenStreetMap based), global coverage."""

    name = "geoapify"
    endpoint = "https://api.geoapify.com/v1/geocode/reverse"
    # For India "county" carries the district, "district" only a locality
    district_fields = ("county", "state_district", "city")

    def build_params(self, coordinate: Coordinate) -> Dict[str, Any]:
        return {
            "lat": coordinate.latitude,
            "lon": coordinate.longitude,
            "apiKey": self.api_key,
            "format": "json",
            "lang": "en",
        }

    def extract_administrative_fields(self, payload: Any, region: str) -> AdministrativeFields:
        results = (payload or {}).get("results") or []
        if not results:
            return AdministrativeFields(state=None, district=None)

        result = results[0]
        state = first_present(result, ("state",))
        district = first_present(result, self.district_fields)
        city = first_present(result, ("city", "town", "village"))

        formatted = result.get("formatted") or ", ".join(
            part for part in (city, district, state) if part
        )
        return AdministrativeFields(
            state=state,
            district=district,
            city=city,
            country=result.get("country") or "India",
            formatted_address=formatted,
            accuracy=(result.get("rank") or {}).get("confidence", 0.8),
        )
