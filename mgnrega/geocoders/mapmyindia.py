"""MapmyIndia reverse geocoding provider."""
from typing import Any, Dict
from mgnrega.core.errors import ProviderHttpError
from mgnrega.core.models import AdministrativeFields, Coordinate
from mgnrega.geocoders.base import ReverseGeocoder, first_present


class MapmyIndiaGeocoder(ReverseGeocoder):
    """MapmyIndia advanced maps API, accurate for Indian districts."""

    name = "mapmyindia"
    endpoint = "https://apis.mapmyindia.com/advancedmaps/v1/{key}/rev_geocode"
    district_fields = ("district", "subDistrict")

    def build_url(self) -> str:
        # The credential is part of the path for this API
        return self.endpoint.format(key=self.api_key)

    def build_params(self, coordinate: Coordinate) -> Dict[str, Any]:
        return {"lat": coordinate.latitude, "lng": coordinate.longitude}

    def extract_administrative_fields(self, payload: Any, region: str) -> AdministrativeFields:
        payload = payload or {}
        code = payload.get("responseCode")
        results = payload.get("results") or []
        if code != 200 or not results:
            raise ProviderHttpError(self.name, f"API response code {code}")

        result = results[0]
        state = first_present(result, ("state",))
        district = first_present(result, self.district_fields)
        city = first_present(result, ("city", "locality"))

        formatted = result.get("formatted_address") or ", ".join(
            part for part in (city, district, state) if part
        )
        return AdministrativeFields(
            state=state,
            district=district,
            city=city,
            country="India",
            formatted_address=formatted,
            accuracy=result.get("accuracy", "high"),
        )
