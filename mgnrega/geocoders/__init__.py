"""Reverse-geocoding provider adapters."""
from typing import Dict, List, Optional, Sequence, Type

from mgnrega.core import config
from mgnrega.geocoders.base import ReverseGeocoder
from mgnrega.geocoders.geoapify import GeoapifyGeocoder
from mgnrega.geocoders.google import GoogleGeocoder
from mgnrega.geocoders.locationiq import LocationIQGeocoder
from mgnrega.geocoders.mapmyindia import MapmyIndiaGeocoder

PROVIDER_CLASSES: Dict[str, Type[ReverseGeocoder]] = {
    cls.name: cls
    for cls in (GoogleGeocoder, MapmyIndiaGeocoder, GeoapifyGeocoder, LocationIQGeocoder)
}


def build_default_providers(order: Optional[Sequence[str]] = None) -> List[ReverseGeocoder]:
    """
    Instantiate providers from configuration in fallback order.

    Args:
        order: Provider names, defaults to PROVIDER_ORDER

    Returns:
        Provider instances; unconfigured ones are included and skipped at resolve time
    """
    settings = {
        "google": (config.GOOGLE_GEOCODING_API_KEY, config.GOOGLE_TIMEOUT),
        "mapmyindia": (config.MAPMYINDIA_API_KEY, config.MAPMYINDIA_TIMEOUT),
        "geoapify": (config.GEOAPIFY_API_KEY, config.GEOAPIFY_TIMEOUT),
        "locationiq": (config.LOCATIONIQ_API_KEY, config.LOCATIONIQ_TIMEOUT),
    }

    providers = []
    for name in order or config.PROVIDER_ORDER:
        if name not in PROVIDER_CLASSES:
            raise ValueError(f"Unknown geocoding provider: {name}")
        api_key, timeout = settings[name]
        providers.append(PROVIDER_CLASSES[name](api_key=api_key, timeout=timeout))
    return providers


__all__ = [
    "ReverseGeocoder",
    "GoogleGeocoder",
    "MapmyIndiaGeocoder",
    "GeoapifyGeocoder",
    "LocationIQGeocoder",
    "PROVIDER_CLASSES",
    "build_default_providers",
]
