"""LocationIQ reverse geocoding provider."""
from typing import Any, Dict, Optional
from mgnrega.core.models import AdministrativeFields, Coordinate
from mgnrega.geocoders.base import ReverseGeocoder, first_present


class LocationIQGeocoder(ReverseGeocoder):
    """
    LocationIQ (OpenStreetMap based), last resort.

    Its ``county`` field often holds a taluka rather than the district,
    so it ranks below ``state_district`` and, inside the target region,
    below ``city`` for city-districts such as Pune or Nagpur.
    """

    name = "locationiq"
    endpoint = "https://us1.locationiq.com/v1/reverse.php"
    district_fields = ("state_district", "city", "county", "district", "city_district")
    # Fields only trusted as a district when the state is the target region
    region_only_fields = ("city",)

    def build_params(self, coordinate: Coordinate) -> Dict[str, Any]:
        return {
            "key": self.api_key,
            "lat": coordinate.latitude,
            "lon": coordinate.longitude,
            "format": "json",
            "normalizecity": 1,
            "addressdetails": 1,
            "accept-language": "en",
        }

    def extract_administrative_fields(self, payload: Any, region: str) -> AdministrativeFields:
        payload = payload or {}
        address = payload.get("address") or {}

        state = first_present(address, ("state", "state_district", "region"))
        in_region = bool(state) and state.lower() == region.lower()

        district: Optional[str] = None
        for field_name in self.district_fields:
            value = first_present(address, (field_name,))
            if not value:
                continue
            # state_district sometimes repeats the state itself
            if field_name == "state_district" and value == state:
                continue
            if field_name in self.region_only_fields and not in_region:
                continue
            district = value
            break

        city = first_present(address, ("city", "town", "village", "municipality"))

        return AdministrativeFields(
            state=state,
            district=district,
            city=city,
            country=address.get("country") or "India",
            formatted_address=payload.get("display_name", ""),
            accuracy=payload.get("importance", 0.5),
        )
