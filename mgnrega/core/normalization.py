"""District name normalization for Maharashtra."""
import re
import unicodedata
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


# Raw (uppercased, suffix-stripped) names -> canonical district name.
# Every canonical value must either be absent as a key or map to itself,
# otherwise normalization stops being idempotent.
MAHARASHTRA_DISTRICT_RULES: Mapping[str, str] = MappingProxyType({
    # Official renamings
    "AURANGABAD": "CHATRAPATI SAMBHAJI NAGAR",
    "OSMANABAD": "DHARASHIV",

    # Spelling variants
    "AHMADNAGAR": "AHMEDNAGAR",
    "BULDANA": "BULDHANA",
    "GONDIYA": "GONDIA",
    "BID": "BEED",
    "CHATRAPATI SAMBHAJINAGAR": "CHATRAPATI SAMBHAJI NAGAR",
    "CHHATRAPATI SAMBHAJI NAGAR": "CHATRAPATI SAMBHAJI NAGAR",
    "CHHATRAPATI SAMBHAJINAGAR": "CHATRAPATI SAMBHAJI NAGAR",
    "SAMBHAJI NAGAR": "CHATRAPATI SAMBHAJI NAGAR",

    # Talukas returned in place of their district
    "KARVIR": "KOLHAPUR",
    "ROHA": "RAIGAD",
    "NAGPUR URBAN": "NAGPUR",
    "NAGPUR RURAL": "NAGPUR",
    "NANDGAON-KHANDESHWAR": "AKOLA",
    "PUNE CITY": "PUNE",
    "HAVELI": "PUNE",
    "MUMBAI CITY": "MUMBAI SUBURBAN",

    # Settlements and their district
    "MUMBAI": "MUMBAI SUBURBAN",
    "GREATER MUMBAI": "MUMBAI SUBURBAN",
    "BOMBAY": "MUMBAI SUBURBAN",
    "POONA": "PUNE",
})

# Canonical district names as reported in the scheme's data
MAHARASHTRA_DISTRICTS: Tuple[str, ...] = (
    "AHMEDNAGAR", "AKOLA", "AMRAVATI", "BEED", "BHANDARA", "BULDHANA",
    "CHANDRAPUR", "CHATRAPATI SAMBHAJI NAGAR", "DHARASHIV", "DHULE",
    "GADCHIROLI", "GONDIA", "HINGOLI", "JALGAON", "JALNA", "KOLHAPUR",
    "LATUR", "MUMBAI SUBURBAN", "NAGPUR", "NANDED", "NANDURBAR", "NASHIK",
    "PALGHAR", "PARBHANI", "PUNE", "RAIGAD", "RATNAGIRI", "SANGLI", "SATARA",
    "SINDHUDURG", "SOLAPUR", "THANE", "WARDHA", "WASHIM", "YAVATMAL",
)

# Administrative-unit suffixes providers append to names
ADMIN_SUFFIX_PATTERN = re.compile(r"\s+(DISTRICT|TALUKA|TALUK|TEHSIL)$", re.IGNORECASE)


def strip_admin_suffixes(name: str) -> str:
    """Remove trailing " DISTRICT", " TALUK", " TALUKA" and " TEHSIL", repeatedly."""
    previous = None
    while previous != name:
        previous = name
        name = ADMIN_SUFFIX_PATTERN.sub("", name).strip()
    return name


def normalize_district_name(
    raw: Optional[str],
    rules: Mapping[str, str] = MAHARASHTRA_DISTRICT_RULES
) -> Optional[str]:
    """
    Canonicalize a Maharashtra district name.

    Trims and uppercases, strips administrative suffixes, then applies the
    correction table. Names without a rule are returned in their stripped,
    uppercased form.

    Args:
        raw: District, taluka or settlement name from a provider
        rules: Correction table to apply

    Returns:
        Canonical uppercase name, or None for empty input
    """
    if raw is None:
        return None

    name = strip_admin_suffixes(raw.strip().upper())
    if not name:
        return None

    return rules.get(name, name)


def normalize_text(text: str) -> str:
    """
    Normalize text for matching: lowercase, strip punctuation, collapse whitespace, unicode normalize.

    Args:
        text: Input text string

    Returns:
        Normalized text string
    """
    if not text:
        return ""

    # Unicode normalization
    text = unicodedata.normalize("NFD", text)
    text = "".join(c for c in text if unicodedata.category(c) != "Mn")

    text = text.lower()

    # Hyphenated taluka names ("nandgaon-khandeshwar") compare as separate words
    text = re.sub(r'[^\w\s]', ' ', text)
    text = re.sub(r'\s+', ' ', text)

    return text.strip()
