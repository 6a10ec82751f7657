"""Ingredient name normalization.

Provides normalize_name(name) -> str, the equality key used by every matching
step (inventory lookup, recipe coverage, suggestion search). Two ingredients
are considered the same iff their normalized keys are equal.
"""
import re

__all__ = ['normalize_name']

_PUNCTUATION = re.compile(r'[.,()]')
_WHITESPACE = re.compile(r'\s+')

# Ordered suffix rewrites applied to the whole (already collapsed) string
_SUFFIX_REWRITES = (
    ('tomatoes', 'tomato'),
    ('potatoes', 'potato'),
    ('ies', 'y'),  # berries -> berry
)


def _strip_plural_s(name: str) -> str:
    # eggs -> egg, but glass / status stay untouched
    if not name.endswith('s') or name.endswith('ss') or name.endswith('us'):
        return name
    # a lone trailing "s" word would leave a dangling space behind
    if name.endswith(' s'):
        return name
    return name[:-1]


def normalize_name(name) -> str:
    """Return the canonical matching key for an ingredient name.

    Lowercase, trim, drop . , ( ) characters, collapse whitespace, then apply
    the suffix rewrites (tomatoes, potatoes, -ies) and strip a single trailing
    's'. Multi-word names are treated as one string, so only the last word is
    singularized. Empty or non-string input yields ''.
    """
    if not name or not isinstance(name, str):
        return ''
    n = name.lower().strip()
    n = _PUNCTUATION.sub('', n)
    # "( egg )" only loses its outer spaces once the brackets are gone
    n = _WHITESPACE.sub(' ', n).strip()
    for suffix, replacement in _SUFFIX_REWRITES:
        if n.endswith(suffix):
            n = n[:-len(suffix)] + replacement
    return _strip_plural_s(n)
