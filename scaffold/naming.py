# scaffold/naming.py
"""
Name transformations matching Laravel's Str helpers closely enough for
table, class and method names: studly, camel, snake, plural, singular.

Inflection only looks at the last word, so "blog_post" -> "blog_posts" and
"BlogPost" -> "BlogPosts". The leading letter case of the input is kept.
"""
from __future__ import annotations
import re
from typing import List, Tuple

_WORD_SPLIT = re.compile(r"[\s_\-]+")
_SNAKE_BOUNDARY = re.compile(r"([^_])(?=[A-Z])")
_SNAKE_STRIP = re.compile(r"[\s\-]+")

UNCOUNTABLE = {
    "audio", "data", "equipment", "feedback", "information", "knowledge",
    "metadata", "money", "news", "rice", "series", "sheep", "species",
    "fish", "deer", "traffic", "staff", "software", "hardware",
}

# singular -> plural, matched on the trailing word
IRREGULAR: List[Tuple[str, str]] = [
    ("person", "people"),
    ("man", "men"),
    ("woman", "women"),
    ("child", "children"),
    ("tooth", "teeth"),
    ("foot", "feet"),
    ("mouse", "mice"),
    ("goose", "geese"),
    ("ox", "oxen"),
    ("criterion", "criteria"),
    ("medium", "media"),
    ("datum", "data"),
    ("movie", "movies"),
    ("cookie", "cookies"),
]

PLURAL_RULES: List[Tuple[str, str]] = [
    (r"(quiz)$", r"\1zes"),
    (r"(matr|vert|ind)(?:ix|ex)$", r"\1ices"),
    (r"(x|ch|ss|sh|zz)$", r"\1es"),
    (r"([^aeiouy]|qu)y$", r"\1ies"),
    (r"(kni|wi|li)fe$", r"\1ves"),
    (r"(wol|hal|shel|sel|el|cal|lea|loa|thie|sca)f$", r"\1ves"),
    (r"sis$", r"ses"),
    (r"(us|alias)$", r"\1es"),
    (r"(tomat|potat|her|ech)o$", r"\1oes"),
    (r"s$", r"s"),
    (r"$", r"s"),
]

SINGULAR_RULES: List[Tuple[str, str]] = [
    (r"(quiz)zes$", r"\1"),
    (r"(matr)ices$", r"\1ix"),
    (r"(vert|ind)ices$", r"\1ex"),
    (r"(alias|status|campus|bus|bonus|virus|census|corpus|radius)(es)?$", r"\1"),
    (r"(x|ch|ss|sh|zz)es$", r"\1"),
    (r"(tomat|potat|her|ech)oes$", r"\1o"),
    (r"([^aeiouy]|qu)ies$", r"\1y"),
    (r"^(kni|wi|li)ves$", r"\1fe"),
    (r"(wol|hal|shel|sel|el|cal|lea|loa|thie|sca)ves$", r"\1f"),
    (r"(analy|ba|diagno|parenthe|progno|synop|the)ses$", r"\1sis"),
    (r"(sis|ss)$", r"\1"),
    (r"s$", r""),
]

def _match_case(replacement: str, original: str) -> str:
    if original.isupper() and len(original) > 1:
        return replacement.upper()
    if original[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement

def _last_word_index(value: str) -> int:
    """Start of the trailing word in snake_case, kebab or StudlyCase input."""
    idx = max(value.rfind("_"), value.rfind("-"), value.rfind(" ")) + 1
    tail = value[idx:]
    for i in range(len(tail) - 1, 0, -1):
        if tail[i].isupper() and not tail[i - 1].isupper():
            return idx + i
    return idx

def _inflect(value: str, pairs: List[Tuple[str, str]], rules: List[Tuple[str, str]]) -> str:
    if not value:
        return value
    cut = _last_word_index(value)
    head, word = value[:cut], value[cut:]
    lower = word.lower()

    if lower in UNCOUNTABLE:
        return value

    for source, target in pairs:
        if lower == source:
            return head + _match_case(target, word)
        if lower == target:
            # already inflected
            return value

    for pattern, replacement in rules:
        if re.search(pattern, word, flags=re.IGNORECASE):
            return head + re.sub(pattern, replacement, word, count=1, flags=re.IGNORECASE)
    return value

def plural(value: str) -> str:
    return _inflect(value, IRREGULAR, PLURAL_RULES)

def singular(value: str) -> str:
    return _inflect(value, [(p, s) for s, p in IRREGULAR], SINGULAR_RULES)

def studly(value: str) -> str:
    """blog_post / blog-post / "blog post" -> BlogPost; existing capitals are kept."""
    return "".join(w[:1].upper() + w[1:] for w in _WORD_SPLIT.split(value) if w)

def camel(value: str) -> str:
    s = studly(value)
    return s[:1].lower() + s[1:]

def snake(value: str) -> str:
    """BlogPost -> blog_post. Already snake_case input is unchanged."""
    if value.islower():
        return _WORD_SPLIT.sub("_", value.strip())
    words = _SNAKE_STRIP.sub("", value)
    return _SNAKE_BOUNDARY.sub(r"\1_", words).lower()

def table_name(model: str) -> str:
    """Conventional table for a model: Post -> posts, BlogPost -> blog_posts."""
    return plural(snake(model))
