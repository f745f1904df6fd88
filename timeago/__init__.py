from .config import Config, no_max, with_max
from .duration import TimePoint, elapsed
from .language import (
    Forms,
    Gender,
    GenderedLanguage,
    Inflection,
    Language,
    Noun,
    PluralClass,
    PluralLanguage,
    TemplateLanguage,
    Tense,
    slavic_plural,
)
from .languages import (
    CHINESE,
    ENGLISH,
    FRENCH,
    GERMAN,
    LANGUAGES,
    PORTUGUESE,
    RUSSIAN,
    SPANISH,
    TURKISH,
    get_language,
)
from .steps import DEFAULT_STEPS, Step, Steps, Unit
from .util import DAY, HOUR, MINUTE, MONTH, SECOND, YEAR

__all__ = [
    "Config",
    "no_max",
    "with_max",
    "TimePoint",
    "elapsed",
    "Language",
    "TemplateLanguage",
    "GenderedLanguage",
    "PluralLanguage",
    "Forms",
    "Noun",
    "Gender",
    "Inflection",
    "PluralClass",
    "Tense",
    "slavic_plural",
    "ENGLISH",
    "FRENCH",
    "CHINESE",
    "PORTUGUESE",
    "GERMAN",
    "TURKISH",
    "RUSSIAN",
    "SPANISH",
    "LANGUAGES",
    "get_language",
    "Unit",
    "Step",
    "Steps",
    "DEFAULT_STEPS",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "MONTH",
    "YEAR",
]
