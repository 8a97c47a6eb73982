"""Localized display names for districts and performance categories."""
from typing import Dict, Iterable, List, Optional, Union
from mgnrega.core.models import Category

SUPPORTED_LANGUAGES = ("en", "mr")

DISTRICT_NAMES_MR: Dict[str, str] = {
    "AHMEDNAGAR": "अहमदनगर",
    "AKOLA": "अकोला",
    "AMRAVATI": "अमरावती",
    "BEED": "बीड",
    "BHANDARA": "भंडारा",
    "BULDHANA": "बुलढाणा",
    "CHANDRAPUR": "चंद्रपूर",
    "CHATRAPATI SAMBHAJI NAGAR": "छत्रपती संभाजीनगर",
    "DHARASHIV": "धाराशिव",
    "DHULE": "धुळे",
    "GADCHIROLI": "गडचिरोली",
    "GONDIA": "गोंदिया",
    "HINGOLI": "हिंगोली",
    "JALGAON": "जळगाव",
    "JALNA": "जालना",
    "KOLHAPUR": "कोल्हापूर",
    "LATUR": "लातूर",
    "MUMBAI SUBURBAN": "मुंबई उपनगर",
    "NAGPUR": "नागपूर",
    "NANDED": "नांदेड",
    "NANDURBAR": "नंदुरबार",
    "NASHIK": "नाशिक",
    "PALGHAR": "पालघर",
    "PARBHANI": "परभणी",
    "PUNE": "पुणे",
    "RAIGAD": "रायगड",
    "RATNAGIRI": "रत्नागिरी",
    "SANGLI": "सांगली",
    "SATARA": "सातारा",
    "SINDHUDURG": "सिंधुदुर्ग",
    "SOLAPUR": "सोलापूर",
    "THANE": "ठाणे",
    "WARDHA": "वर्धा",
    "WASHIM": "वाशिम",
    "YAVATMAL": "यवतमाळ",
}

CATEGORY_LABELS: Dict[str, Dict[Category, str]] = {
    "en": {category: category.value for category in Category},
    "mr": {
        Category.EXCELLENT: "उत्कृष्ट",
        Category.GOOD: "चांगले",
        Category.AVERAGE: "सरासरी",
        Category.NEEDS_IMPROVEMENT: "सुधारणा आवश्यक",
    },
}


def format_district_name(district_name: Optional[str]) -> str:
    """Title-case an uppercase district name, e.g. PUNE -> Pune."""
    if not district_name:
        return ""
    return " ".join(word.capitalize() for word in district_name.lower().split())


def get_district_name(district_name: Optional[str], language: str = "en") -> str:
    """
    Display name of a district in the requested language.

    Unknown districts and unsupported languages fall back to title case.
    """
    if not district_name:
        return ""
    if language == "mr":
        translated = DISTRICT_NAMES_MR.get(district_name.strip().upper())
        if translated:
            return translated
    return format_district_name(district_name)


def translate_districts(district_names: Iterable[str], language: str = "en") -> List[str]:
    return [get_district_name(name, language) for name in district_names]


def get_category_label(category: Union[str, Category], language: str = "en") -> str:
    """Category label in the requested language, English when unsupported."""
    parsed = Category.parse(category)
    if parsed is None:
        raise ValueError(f"Unknown performance category: {category!r}")
    labels = CATEGORY_LABELS.get(language, CATEGORY_LABELS["en"])
    return labels[parsed]
