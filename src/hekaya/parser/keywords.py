"""Arabic and English keyword tables for screenplay elements.

These centralize every language-specific detection term so the rule table
never hardcodes strings. The tables are read-only: mappings are wrapped in
``MappingProxyType`` and lists are tuples, so editor tooling can import them
for autocomplete without being able to change parser behavior.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

# Arabic scene heading prefixes and their English equivalents. There is no
# standard Arabic prefix for an establishing shot; تأسيس is accepted anyway.
SCENE_HEADING_KEYWORDS_AR: Mapping[str, str] = MappingProxyType(
    {
        "داخلي": "INT",
        "خارجي": "EXT",
        "تأسيس": "EST",
        "داخلي/خارجي": "INT/EXT",
        "خارجي/داخلي": "EXT/INT",
        "د/خ": "I/E",
    }
)

# Standard Fountain scene heading prefixes.
SCENE_HEADING_KEYWORDS_EN: tuple[str, ...] = (
    "INT",
    "EXT",
    "EST",
    "INT./EXT",
    "INT/EXT",
    "EXT/INT",
    "EXT./INT",
    "I/E",
)

# Arabic title page keys mapped to canonical English keys.
TITLE_KEYS_AR: Mapping[str, str] = MappingProxyType(
    {
        "العنوان": "title",
        "المؤلف": "author",
        "المؤلفون": "authors",
        "المصدر": "source",
        "مسودة": "draft date",
        "تاريخ": "date",
        "تواصل": "contact",
        "حقوق": "copyright",
        "ملاحظات": "notes",
        "ائتمان": "credit",
        "اتجاه": "direction",
    }
)

# English title page keys (lowercase) mapped to canonical keys.
TITLE_KEYS_EN: Mapping[str, str] = MappingProxyType(
    {
        "title": "title",
        "author": "author",
        "authors": "authors",
        "source": "source",
        "draft date": "draft date",
        "date": "date",
        "contact": "contact",
        "copyright": "copyright",
        "notes": "notes",
        "credit": "credit",
        "direction": "direction",
    }
)

# Arabic transitions, written as standalone (often centered) lines with no
# ">" prefix and no trailing colon, sometimes wrapped in dashes: "- قطع -".
TRANSITION_KEYWORDS_AR: tuple[str, ...] = (
    "قطع",
    "قطع إلى",
    "قطع مفاجئ",
    "قطع متطابق",
    "اختفاء تدريجي",
    "ظهور تدريجي",
    "مزج",
    "مزج إلى",
    "ذوبان",
    "عودة للمشهد",
    "تلاشي إلى أسود",
    "تلاشي إلى",
)

# Arabic transitions mapped to the English transition they stand for.
TRANSITION_MAP_AR_EN: Mapping[str, str] = MappingProxyType(
    {
        "قطع": "CUT TO",
        "قطع إلى": "CUT TO",
        "قطع مفاجئ": "SMASH CUT TO",
        "قطع متطابق": "MATCH CUT TO",
        "اختفاء تدريجي": "FADE OUT",
        "ظهور تدريجي": "FADE IN",
        "مزج": "DISSOLVE TO",
        "مزج إلى": "DISSOLVE TO",
        "ذوبان": "DISSOLVE TO",
        "عودة للمشهد": "BACK TO",
        "تلاشي إلى أسود": "FADE TO BLACK",
        "تلاشي إلى": "FADE TO",
    }
)

# Arabic character extensions mapped to English equivalents.
CHARACTER_EXTENSIONS_AR: Mapping[str, str] = MappingProxyType(
    {
        "صوت خارجي": "V.O.",
        "ص.خ": "V.O.",
        "خارج الشاشة": "O.S.",
        "خ.ش": "O.S.",
        "تابع": "CONT'D",
    }
)

# Arabic time-of-day terms used in scene headings.
TIME_OF_DAY_AR: tuple[str, ...] = (
    "نهار",
    "ليل",
    "صباح",
    "مساء",
    "غروب",
    "فجر",
    "ظهر",
    "عصر",
)

# Arabic values accepted for the title page direction key.
DIRECTION_VALUES_AR: Mapping[str, str] = MappingProxyType(
    {
        "يمين-لليسار": "rtl",
        "يسار-لليمين": "ltr",
    }
)
