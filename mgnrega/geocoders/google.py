"""Google Geocoding API provider."""
from typing import Any, Dict, Optional
from mgnrega.core.errors import ProviderHttpError
from mgnrega.core.models import AdministrativeFields, Coordinate
from mgnrega.geocoders.base import ReverseGeocoder


class GoogleGeocoder(ReverseGeocoder):
    """Google reverse geocoding, the most accurate provider globally."""

    name = "google"
    endpoint = "https://maps.googleapis.com/maps/api/geocode/json"
    # In India administrative_area_level_3 is the district, level_2 the division
    district_fields = ("administrative_area_level_3", "administrative_area_level_2")

    def build_params(self, coordinate: Coordinate) -> Dict[str, Any]:
        return {
            "latlng": f"{coordinate.latitude},{coordinate.longitude}",
            "key": self.api_key,
            "result_type": "administrative_area_level_3|administrative_area_level_2|locality",
            "language": "en",
        }

    def extract_administrative_fields(self, payload: Any, region: str) -> AdministrativeFields:
        status = (payload or {}).get("status", "UNKNOWN")
        results = (payload or {}).get("results") or []
        if status != "OK" or not results:
            raise ProviderHttpError(self.name, f"API returned status {status}")

        state: Optional[str] = None
        district: Optional[str] = None
        city: Optional[str] = None
        country: Optional[str] = None

        # Results are ordered most to least specific; keep the first value of each type
        for result in results:
            by_type: Dict[str, str] = {}
            for component in result.get("address_components", []):
                for component_type in component.get("types", []):
                    by_type.setdefault(component_type, component.get("long_name"))

            state = state or by_type.get("administrative_area_level_1")
            city = city or by_type.get("locality")
            country = country or by_type.get("country")
            if not district:
                district = next((by_type[f] for f in self.district_fields if by_type.get(f)), None)

            if state and district:
                break

        first = results[0]
        return AdministrativeFields(
            state=state,
            district=district,
            city=city,
            country=country or "India",
            formatted_address=first.get("formatted_address", ""),
            accuracy=(first.get("geometry") or {}).get("location_type", "APPROXIMATE"),
        )
