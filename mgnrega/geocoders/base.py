"""Base class for reverse-geocoding providers."""
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence
import requests

from mgnrega.core.errors import (
    ProviderHttpError,
    ProviderTimeout,
    ProviderUnconfigured,
)
from mgnrega.core.models import AdministrativeFields, Coordinate


def first_present(data: Mapping[str, Any], keys: Iterable[str]) -> Optional[str]:
    """Return the first non-empty string value among keys."""
    for key in keys:
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


class ReverseGeocoder(ABC):
    """
    One external reverse-geocoding API.

    Subclasses know the endpoint, the request parameters and how to pull
    state, district, city and country out of the provider's response.
    The district field priority is plain data (``district_fields``) so it
    can be overridden per deployment.
    """

    name: str = "base"
    endpoint: str = ""
    district_fields: Sequence[str] = ()

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: float = 5.0,
        district_fields: Optional[Sequence[str]] = None
    ):
        """
        Initialize provider.

        Args:
            api_key: Provider credential; None disables the provider
            timeout: Request timeout in seconds
            district_fields: Override for the district field priority
        """
        self.api_key = api_key
        self.timeout = timeout
        if district_fields is not None:
            self.district_fields = tuple(district_fields)

    @property
    def enabled(self) -> bool:
        return self.api_key is not None

    def reverse_geocode(self, coordinate: Coordinate, region: str) -> AdministrativeFields:
        """
        Query the provider and extract administrative fields.

        Args:
            coordinate: Point to resolve
            region: Target state name, used by region-dependent field rules

        Returns:
            Extracted fields, not yet normalized

        Raises:
            ProviderUnconfigured: no credential
            ProviderTimeout: request exceeded the timeout
            ProviderHttpError: transport error, non-2xx or error payload
        """
        if not self.enabled:
            raise ProviderUnconfigured(self.name, "API key not configured")

        payload = self._get(self.build_url(), self.build_params(coordinate))
        try:
            return self.extract_administrative_fields(payload, region)
        except (AttributeError, KeyError, TypeError, IndexError) as e:
            raise ProviderHttpError(self.name, f"malformed response: {type(e).__name__}")

    def build_url(self) -> str:
        return self.endpoint

    @abstractmethod
    def build_params(self, coordinate: Coordinate) -> Dict[str, Any]:
        """Query parameters for one reverse-geocode request."""
        pass

    @abstractmethod
    def extract_administrative_fields(self, payload: Any, region: str) -> AdministrativeFields:
        """
        Pull state, district, city, country and accuracy out of a response.

        Raises:
            ProviderHttpError: the payload reports an API-level error
        """
        pass

    def _get(self, url: str, params: Dict[str, Any]) -> Any:
        try:
            response = requests.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout:
            raise ProviderTimeout(self.name, f"no response within {self.timeout}s")
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise ProviderHttpError(self.name, self._describe_status(status), status_code=status)
        except requests.exceptions.RequestException as e:
            raise ProviderHttpError(self.name, f"request failed: {type(e).__name__}")

        try:
            return response.json()
        except ValueError:
            raise ProviderHttpError(self.name, "response is not valid JSON", status_code=response.status_code)

    @staticmethod
    def _describe_status(status: Optional[int]) -> str:
        if status in (401, 403):
            return f"HTTP {status}: invalid credential"
        if status == 429:
            return "HTTP 429: rate limit exceeded"
        return f"HTTP {status}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(enabled={self.enabled}, timeout={self.timeout})"
