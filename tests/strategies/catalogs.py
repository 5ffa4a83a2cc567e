"""Hypothesis strategies for catalog and identifier resolution testing.

Provides reusable strategies for generating resolution test data:
- Dot-namespaced message identifiers
- Counts, grouped by the plural category they select
- Plural configurations with custom suffixes
- Catalogs with a controlled subset of plural variants

Event-Emitting Strategies (HypoFuzz-Optimized):
- message_ids: Emits catalog_id_depth=N
- counts: Emits catalog_count_kind=int|float|decimal|str
- plural_variant_sets: Emits catalog_variants=none|partial|full

Python 3.13+.
"""

from __future__ import annotations

import string
from decimal import Decimal
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

from localekit import PluralCategory, PluralConfig

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn

_SEGMENT_FIRST_CHARS = string.ascii_lowercase
_SEGMENT_REST_CHARS = string.ascii_lowercase + string.digits

LOCALE_POOL = ["en", "fr", "es", "ca", "de", "it", "lv", "pt-BR", "en_GB"]


@st.composite
def identifier_segments(draw: DrawFn) -> str:
    """Generate one identifier segment: [a-z][a-z0-9]*"""
    first = draw(st.sampled_from(list(_SEGMENT_FIRST_CHARS)))
    rest = draw(st.text(alphabet=_SEGMENT_REST_CHARS, max_size=12))
    return first + rest


@st.composite
def message_ids(draw: DrawFn) -> str:
    """Generate dot-namespaced identifiers (e.g., 'messages.inbox').

    Events emitted:
    - catalog_id_depth=N
    """
    segments = draw(st.lists(identifier_segments(), min_size=1, max_size=4))
    event(f"catalog_id_depth={len(segments)}")
    return ".".join(segments)


_CATEGORY_RANGES: dict[PluralCategory, st.SearchStrategy[int]] = {
    PluralCategory.ZERO: st.just(0),
    PluralCategory.ONE: st.just(1),
    PluralCategory.TWO: st.just(2),
    PluralCategory.THREE: st.just(3),
    PluralCategory.FEW: st.integers(min_value=4, max_value=10),
    PluralCategory.MANY: st.integers(min_value=11, max_value=99),
    PluralCategory.OTHER: st.one_of(
        st.integers(min_value=100, max_value=10**9),
        st.integers(max_value=-1),
    ),
}


@st.composite
def counts(draw: DrawFn, category: PluralCategory) -> int | float | Decimal | str:
    """Generate a count that selects ``category``, in any accepted form.

    Events emitted:
    - catalog_count_kind=int|float|decimal|str
    """
    value = draw(_CATEGORY_RANGES[category])
    kind = draw(st.sampled_from(["int", "float", "decimal", "str"]))
    event(f"catalog_count_kind={kind}")
    match kind:
        case "float":
            return float(value)
        case "decimal":
            return Decimal(value)
        case "str":
            return str(value)
        case _:
            return value


@st.composite
def plural_configs(draw: DrawFn) -> PluralConfig:
    """Generate plural configs with unique, possibly mixed-case suffixes."""
    suffixes = draw(
        st.lists(
            identifier_segments(),
            min_size=len(PluralCategory),
            max_size=len(PluralCategory),
            unique_by=str.lower,
        )
    )
    if draw(st.booleans()):
        suffixes = [suffix.upper() for suffix in suffixes]
    return PluralConfig.from_mapping(dict(zip(PluralCategory, suffixes, strict=True)))


@st.composite
def plural_variant_sets(draw: DrawFn) -> frozenset[PluralCategory]:
    """Generate the set of categories a catalog defines for one identifier.

    Events emitted:
    - catalog_variants=none|partial|full
    """
    variants = frozenset(draw(st.sets(st.sampled_from(list(PluralCategory)))))
    label = (
        "none" if not variants
        else "full" if len(variants) == len(PluralCategory)
        else "partial"
    )
    event(f"catalog_variants={label}")
    return variants
