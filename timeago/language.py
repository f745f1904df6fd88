"""Per-language phrase construction.

A `Language` turns a resolved ``(unit, count, tense)`` into a phrase. Each
rule set below is a data-driven strategy for one family of grammars:

- `TemplateLanguage`: fixed singular/plural forms wrapped in a past or future
  template (English, French, Turkish, ...)
- `GenderedLanguage`: the singular article is chosen from the noun's
  grammatical gender (German)
- `PluralLanguage`: three plural classes and a distinct noun case per tense
  (Russian)
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from string import Formatter
from types import MappingProxyType
from typing import Any

from typing_extensions import override

from timeago.steps import DEFAULT_STEPS, Steps, Unit


class Tense(Enum):
    PAST = "past"
    FUTURE = "future"

    @classmethod
    def of(cls, diff: timedelta) -> "Tense":
        """Positive differences lie in the future; zero counts as past."""
        return cls.FUTURE if diff > timedelta(0) else cls.PAST


def _frozen_table(
    owner: "Language", name: str, table: Mapping[Any, Any], keys: Any
) -> Mapping[Any, Any]:
    missing = [key for key in keys if key not in table]
    if missing:
        names = ", ".join(getattr(key, "value", str(key)) for key in missing)
        raise ValueError(
            f"Language {owner.name!r} is incomplete: {name} has no entry for {names}"
        )
    return MappingProxyType(dict(table))


def _check_template(name: str, template: str) -> None:
    """Tense templates wrap the unit phrase through exactly one ``{}`` slot."""
    try:
        slots = [
            field_name
            for _, field_name, _, _ in Formatter().parse(template)
            if field_name is not None
        ]
    except ValueError as exc:
        raise ValueError(f"Malformed {name} template {template!r}: {exc}") from exc
    if slots not in ([""], ["0"]):
        raise ValueError(
            f"{name} template needs exactly one {{}} slot.\n"
            f"Got {template!r}\n"
            f"Examples:\n"
            f"  \"{{}} ago\"\n"
            f"  \"il y a {{}}\""
        )


@dataclass(frozen=True, kw_only=True, eq=False)
class Language(ABC):
    name: str
    code: str
    default_layout: str
    steps: Steps = DEFAULT_STEPS

    @abstractmethod
    def render(self, unit: Unit, count: int, tense: Tense) -> str:
        """Return the phrase for ``count`` units (count >= 1) in ``tense``."""
        pass

    @abstractmethod
    def render_zero(self, tense: Tense) -> str:
        """Return the phrase for durations shorter than the smallest step."""
        pass

    def phrase(self, diff: timedelta) -> str:
        """Render a signed duration, negative meaning past."""
        tense = Tense.of(diff)
        if abs(diff) < self.steps.smallest:
            return self.render_zero(tense)
        step, count = self.steps.resolve(diff)
        return self.render(step.unit, count, tense)

    def __str__(self) -> str:
        return f"{self.name} ({self.code})"


@dataclass(frozen=True, kw_only=True)
class Forms:
    """Singular phrase and ``{n}`` plural pattern of one unit."""

    one: str
    many: str

    def __post_init__(self) -> None:
        if "{n}" not in self.many:
            raise ValueError(f"Plural form needs an {{n}} slot, got {self.many!r}")

    def select(self, count: int) -> str:
        return self.one if count == 1 else self.many.format(n=count)


@dataclass(frozen=True, kw_only=True, eq=False)
class TemplateLanguage(Language):
    """Unit phrases wrapped in a past or future ``{}`` template.

    The template decides word order: ``"{} ago"`` puts the marker after the
    amount, ``"il y a {}"`` before it.
    """

    past: str
    future: str
    zero: str
    units: Mapping[Unit, Forms]

    def __post_init__(self) -> None:
        self._check_templates()
        object.__setattr__(
            self, "units", _frozen_table(self, "units", self.units, Unit)
        )

    def _check_templates(self) -> None:
        _check_template(f"{self.name} past", self.past)
        _check_template(f"{self.name} future", self.future)

    def _wrap(self, body: str, tense: Tense) -> str:
        template = self.future if tense is Tense.FUTURE else self.past
        return template.format(body)

    @override
    def render(self, unit: Unit, count: int, tense: Tense) -> str:
        return self._wrap(self.units[unit].select(count), tense)

    @override
    def render_zero(self, tense: Tense) -> str:
        return self._wrap(self.zero, tense)


class Gender(Enum):
    FEMININE = "feminine"
    MASCULINE = "masculine"
    NEUTER = "neuter"


@dataclass(frozen=True, kw_only=True)
class Noun:
    gender: Gender
    singular: str
    plural: str


@dataclass(frozen=True, kw_only=True, eq=False)
class GenderedLanguage(TemplateLanguage):
    """Singular phrases are an article agreeing with the noun plus the noun.

    ``units`` and ``zero`` are derived from ``nouns`` and ``articles`` and
    cannot be passed in.
    """

    nouns: Mapping[Unit, Noun]
    articles: Mapping[Gender, str]
    zero_unit: Unit = Unit.SECOND
    units: Mapping[Unit, Forms] = field(default_factory=dict)
    zero: str = ""

    @override
    def __post_init__(self) -> None:
        if self.units or self.zero:
            raise ValueError(
                f"Language {self.name!r} derives units and zero from its nouns "
                f"and articles; pass nouns= and zero_unit= instead"
            )
        self._check_templates()
        nouns = _frozen_table(self, "nouns", self.nouns, Unit)
        articles = _frozen_table(
            self, "articles", self.articles, {noun.gender for noun in nouns.values()}
        )
        units = {
            unit: Forms(
                one=f"{articles[noun.gender]} {noun.singular}",
                many=f"{{n}} {noun.plural}",
            )
            for unit, noun in nouns.items()
        }
        object.__setattr__(self, "nouns", nouns)
        object.__setattr__(self, "articles", articles)
        object.__setattr__(self, "units", MappingProxyType(units))
        object.__setattr__(self, "zero", units[self.zero_unit].one)


class PluralClass(Enum):
    ONE = "one"
    FEW = "few"
    MANY = "many"


def slavic_plural(count: int) -> PluralClass:
    """East Slavic plural class: 1, 21, 101 are ONE; 2-4, 22-24 are FEW.

    11-14 always take MANY.
    """
    if count % 10 == 1 and count % 100 != 11:
        return PluralClass.ONE
    if 2 <= count % 10 <= 4 and not 12 <= count % 100 <= 14:
        return PluralClass.FEW
    return PluralClass.MANY


@dataclass(frozen=True, kw_only=True)
class Inflection:
    """How one tense inflects: wrapper, qualifier and noun forms by class.

    ``single`` overrides the ``count == 1`` phrase for units that have an
    idiomatic numberless form.
    """

    template: str
    zero: str
    nouns: Mapping[Unit, Mapping[PluralClass, str]]
    qualifier: str = ""
    single: Mapping[Unit, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_template("inflection", self.template)
        nouns = {
            unit: MappingProxyType(dict(forms)) for unit, forms in self.nouns.items()
        }
        object.__setattr__(self, "nouns", MappingProxyType(nouns))
        object.__setattr__(self, "single", MappingProxyType(dict(self.single)))

    def body(self, unit: Unit, count: int, plural: PluralClass) -> str:
        if count == 1 and unit in self.single:
            return self.single[unit]
        return f"{self.qualifier}{count} {self.nouns[unit][plural]}"


@dataclass(frozen=True, kw_only=True, eq=False)
class PluralLanguage(Language):
    past: Inflection
    future: Inflection
    plural: Callable[[int], PluralClass] = slavic_plural

    def __post_init__(self) -> None:
        for tense, inflection in ((Tense.PAST, self.past), (Tense.FUTURE, self.future)):
            _frozen_table(self, f"{tense.value} nouns", inflection.nouns, Unit)
            for unit, forms in inflection.nouns.items():
                _frozen_table(
                    self, f"{tense.value} {unit.value} forms", forms, PluralClass
                )

    def _inflection(self, tense: Tense) -> Inflection:
        return self.future if tense is Tense.FUTURE else self.past

    @override
    def render(self, unit: Unit, count: int, tense: Tense) -> str:
        inflection = self._inflection(tense)
        body = inflection.body(unit, count, self.plural(count))
        return inflection.template.format(body)

    @override
    def render_zero(self, tense: Tense) -> str:
        inflection = self._inflection(tense)
        return inflection.template.format(inflection.zero)
