"""Script to resolve a coordinate to its state and district."""
import argparse
import json
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mgnrega.core.config import ENVIRONMENT, LOG_LEVEL, SENTRY_DSN
from mgnrega.core.errors import AllProvidersExhausted
from mgnrega.core.geo_resolver import GeoResolver, is_in_region
from mgnrega.core.translation import get_district_name
from mgnrega.utils.error_tracking import setup_error_tracking
from mgnrega.utils.logging import setup_logging


def main():
    parser = argparse.ArgumentParser(description="Reverse geocode a coordinate to a district")
    parser.add_argument("latitude", type=float, help="Latitude in [-90, 90]")
    parser.add_argument("longitude", type=float, help="Longitude in [-180, 180]")
    parser.add_argument("--language", choices=["en", "mr"], default="en", help="Display language")

    args = parser.parse_args()

    setup_logging(LOG_LEVEL)
    setup_error_tracking(SENTRY_DSN, ENVIRONMENT)

    resolver = GeoResolver.from_config()
    try:
        result = resolver.resolve(args.latitude, args.longitude)
    except ValueError as e:
        parser.error(str(e))
    except AllProvidersExhausted as e:
        print(str(e), file=sys.stderr)
        sys.exit(2)

    output = result.to_dict()
    output["inRegion"] = is_in_region(result, resolver.region)
    if output["inRegion"]:
        output["districtLabel"] = get_district_name(result.district, args.language)
    print(json.dumps(output, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
