"""Predefined languages.

Every language here shares `DEFAULT_STEPS` and carries a ``default_layout``
(a ``strftime`` pattern) in the locale's conventional date order.
"""

from collections.abc import Mapping
from types import MappingProxyType

from timeago.language import (
    Forms,
    Gender,
    GenderedLanguage,
    Inflection,
    Language,
    Noun,
    PluralClass,
    PluralLanguage,
    TemplateLanguage,
)
from timeago.steps import Unit

ENGLISH = TemplateLanguage(
    name="English",
    code="en",
    default_layout="%Y-%m-%d",
    past="{} ago",
    future="in {}",
    zero="about a second",
    units={
        Unit.SECOND: Forms(one="about a second", many="{n} seconds"),
        Unit.MINUTE: Forms(one="about a minute", many="{n} minutes"),
        Unit.HOUR: Forms(one="about an hour", many="{n} hours"),
        Unit.DAY: Forms(one="one day", many="{n} days"),
        Unit.MONTH: Forms(one="one month", many="{n} months"),
        Unit.YEAR: Forms(one="one year", many="{n} years"),
    },
)

FRENCH = TemplateLanguage(
    name="French",
    code="fr",
    default_layout="%d/%m/%Y",
    past="il y a {}",
    future="dans {}",
    zero="environ une seconde",
    units={
        Unit.SECOND: Forms(one="environ une seconde", many="{n} secondes"),
        Unit.MINUTE: Forms(one="environ une minute", many="{n} minutes"),
        Unit.HOUR: Forms(one="environ une heure", many="{n} heures"),
        Unit.DAY: Forms(one="un jour", many="{n} jours"),
        Unit.MONTH: Forms(one="un mois", many="{n} mois"),
        Unit.YEAR: Forms(one="un an", many="{n} ans"),
    },
)

CHINESE = TemplateLanguage(
    name="Chinese",
    code="zh",
    default_layout="%Y-%m-%d",
    past="{}前",
    future="{}后",
    zero="1 秒",
    units={
        Unit.SECOND: Forms(one="1 秒", many="{n} 秒"),
        Unit.MINUTE: Forms(one="1 分钟", many="{n} 分钟"),
        Unit.HOUR: Forms(one="1 小时", many="{n} 小时"),
        Unit.DAY: Forms(one="1 天", many="{n} 天"),
        Unit.MONTH: Forms(one="1 个月", many="{n} 个月"),
        Unit.YEAR: Forms(one="1 年", many="{n} 年"),
    },
)

# Portuguese and Spanish state singular amounts exactly ("um minuto") and
# have a distinct "less than a second" zero phrase.
PORTUGUESE = TemplateLanguage(
    name="Portuguese",
    code="pt",
    default_layout="%d-%m-%Y",
    past="há {}",
    future="daqui a {}",
    zero="menos de um segundo",
    units={
        Unit.SECOND: Forms(one="um segundo", many="{n} segundos"),
        Unit.MINUTE: Forms(one="um minuto", many="{n} minutos"),
        Unit.HOUR: Forms(one="uma hora", many="{n} horas"),
        Unit.DAY: Forms(one="um dia", many="{n} dias"),
        Unit.MONTH: Forms(one="um mês", many="{n} meses"),
        Unit.YEAR: Forms(one="um ano", many="{n} anos"),
    },
)

SPANISH = TemplateLanguage(
    name="Spanish",
    code="es",
    default_layout="%d/%m/%Y",
    past="hace {}",
    future="dentro de {}",
    zero="menos de un segundo",
    units={
        Unit.SECOND: Forms(one="un segundo", many="{n} segundos"),
        Unit.MINUTE: Forms(one="un minuto", many="{n} minutos"),
        Unit.HOUR: Forms(one="una hora", many="{n} horas"),
        Unit.DAY: Forms(one="un día", many="{n} días"),
        Unit.MONTH: Forms(one="un mes", many="{n} meses"),
        Unit.YEAR: Forms(one="un año", many="{n} años"),
    },
)

# Both tenses take the dative in German: "vor einer Minute", "in einem Tag".
GERMAN = GenderedLanguage(
    name="German",
    code="de",
    default_layout="%d.%m.%Y",
    past="vor {}",
    future="in {}",
    articles={
        Gender.FEMININE: "einer",
        Gender.MASCULINE: "einem",
        Gender.NEUTER: "einem",
    },
    nouns={
        Unit.SECOND: Noun(gender=Gender.FEMININE, singular="Sekunde", plural="Sekunden"),
        Unit.MINUTE: Noun(gender=Gender.FEMININE, singular="Minute", plural="Minuten"),
        Unit.HOUR: Noun(gender=Gender.FEMININE, singular="Stunde", plural="Stunden"),
        Unit.DAY: Noun(gender=Gender.MASCULINE, singular="Tag", plural="Tagen"),
        Unit.MONTH: Noun(gender=Gender.MASCULINE, singular="Monat", plural="Monaten"),
        Unit.YEAR: Noun(gender=Gender.NEUTER, singular="Jahr", plural="Jahren"),
    },
)

# Turkish nouns stay singular after a numeral.
TURKISH = TemplateLanguage(
    name="Turkish",
    code="tr",
    default_layout="%d/%m/%Y",
    past="{} önce",
    future="{} içinde",
    zero="yaklaşık bir saniye",
    units={
        Unit.SECOND: Forms(one="yaklaşık bir saniye", many="{n} saniye"),
        Unit.MINUTE: Forms(one="yaklaşık bir dakika", many="{n} dakika"),
        Unit.HOUR: Forms(one="yaklaşık bir saat", many="{n} saat"),
        Unit.DAY: Forms(one="bir gün", many="{n} gün"),
        Unit.MONTH: Forms(one="bir ay", many="{n} ay"),
        Unit.YEAR: Forms(one="bir yıl", many="{n} yıl"),
    },
)


def _forms(one: str, few: str, many: str) -> dict[PluralClass, str]:
    return {PluralClass.ONE: one, PluralClass.FEW: few, PluralClass.MANY: many}


# "около" governs the genitive; "через" the accusative.
RUSSIAN = PluralLanguage(
    name="Russian",
    code="ru",
    default_layout="%d.%m.%Y",
    past=Inflection(
        template="{} назад",
        zero="около секунды",
        qualifier="около ",
        nouns={
            Unit.SECOND: _forms("секунды", "секунд", "секунд"),
            Unit.MINUTE: _forms("минуты", "минут", "минут"),
            Unit.HOUR: _forms("часа", "часов", "часов"),
            Unit.DAY: _forms("дня", "дней", "дней"),
            Unit.MONTH: _forms("месяца", "месяцев", "месяцев"),
            Unit.YEAR: _forms("года", "лет", "лет"),
        },
        single={
            Unit.SECOND: "около секунды",
            Unit.MINUTE: "около минуты",
            Unit.HOUR: "около часа",
            Unit.DAY: "один день",
            Unit.MONTH: "один месяц",
            Unit.YEAR: "один год",
        },
    ),
    future=Inflection(
        template="через {}",
        zero="секунду",
        nouns={
            Unit.SECOND: _forms("секунду", "секунды", "секунд"),
            Unit.MINUTE: _forms("минуту", "минуты", "минут"),
            Unit.HOUR: _forms("час", "часа", "часов"),
            Unit.DAY: _forms("день", "дня", "дней"),
            Unit.MONTH: _forms("месяц", "месяца", "месяцев"),
            Unit.YEAR: _forms("год", "года", "лет"),
        },
    ),
)

LANGUAGES: Mapping[str, Language] = MappingProxyType(
    {
        language.code: language
        for language in (
            ENGLISH,
            FRENCH,
            CHINESE,
            PORTUGUESE,
            GERMAN,
            TURKISH,
            RUSSIAN,
            SPANISH,
        )
    }
)


def get_language(name: str) -> Language:
    """Look up a predefined language by ISO 639-1 code or English name.

    Example:
        >>> get_language("de") is GERMAN
        True
        >>> get_language("Turkish") is TURKISH
        True
    """
    key = name.strip().lower()
    if key in LANGUAGES:
        return LANGUAGES[key]
    for language in LANGUAGES.values():
        if language.name.lower() == key:
            return language
    valid = ", ".join(f"{lang.code} ({lang.name})" for lang in LANGUAGES.values())
    raise ValueError(f"Unknown language {name!r}.\nValid languages: {valid}")
