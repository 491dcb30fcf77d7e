"""Text helpers that derive article fields from titles and bodies."""

from __future__ import annotations

import math
import re
from urllib.parse import quote

EXCERPT_LENGTH = 200
META_DESCRIPTION_LENGTH = 150
WORDS_PER_MINUTE = 200
MAX_CONTENT_TAGS = 5
EDITORIAL_TAGS = ["trending", "professional"]
IMAGE_KEYWORDS = ["business", "professional", "career"]

# Checked in order; the first category with a keyword in the title wins.
CATEGORIES = {
    "Career Advice": [
        "resume", "cv", "job", "career", "interview", "linkedin", "networking",
    ],
    "Design": [
        "design", "logo", "branding", "ui", "ux", "graphic", "visual",
        "portfolio",
    ],
    "Remote Work": [
        "remote", "freelance", "productivity", "work from home",
        "digital nomad",
    ],
    "Technology": [
        "ai", "tech", "software", "app", "development", "programming",
        "github",
    ],
}
DEFAULT_CATEGORY = "Professional Development"

STOP_WORDS = {
    "the", "and", "for", "are", "but", "not", "you", "all", "can", "her",
    "was", "one", "our", "had",
}
IMAGE_STOP_WORDS = {"the", "and", "for", "are", "but", "not", "you", "all"}

IMAGE_URL_TEMPLATE = (
    "https://images.unsplash.com/800x600/?{keywords}"
    "&auto=format&fit=crop&w=800&h=600&q=80"
)

_TAG_RE = re.compile(r"<[^>]*>")
_NON_SLUG_RE = re.compile(r"[^\w\s-]", re.ASCII)
_NON_WORD_RE = re.compile(r"\W+", re.ASCII)


def create_slug(title: str) -> str:
    """Lowercase, drop punctuation and join words with single hyphens.

    Hyphens at either end are stripped too, so URLs never start or end
    with a dash.

    >>> create_slug("Top 10 Resume Tips!")
    'top-10-resume-tips'
    """
    slug = _NON_SLUG_RE.sub("", title.lower())
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip().strip("-")


def strip_markup(content: str) -> str:
    """Remove tags and collapse every whitespace run, not just newlines, to one space.

    Template bodies are heavily indented, so full collapsing keeps the
    excerpt budget for words rather than layout.
    """
    text = _TAG_RE.sub("", content)
    return re.sub(r"\s+", " ", text).strip()


def extract_excerpt(content: str, max_length: int = EXCERPT_LENGTH) -> str:
    """Plain-text summary truncated to ``max_length`` with an ellipsis."""
    clean = strip_markup(content)
    if len(clean) > max_length:
        return clean[:max_length].strip() + "..."
    return clean


def categorize_content(title: str) -> str:
    lower_title = title.lower()
    for category, keywords in CATEGORIES.items():
        if any(keyword in lower_title for keyword in keywords):
            return category
    return DEFAULT_CATEGORY


def _title_words(title: str, stop_words: set[str]) -> list[str]:
    words = _NON_WORD_RE.split(title.lower())
    return [w for w in words if len(w) > 2 and w not in stop_words]


def normalize_tags(tags: list[str]) -> list[str]:
    """Lowercase, cap at five content tags, add editorial tags, dedupe in order."""
    cleaned = [str(t).strip().lower() for t in tags if str(t).strip()]
    cleaned = list(dict.fromkeys(cleaned))[:MAX_CONTENT_TAGS]
    return list(dict.fromkeys(cleaned + EDITORIAL_TAGS))


def generate_tags(title: str) -> list[str]:
    """First five title words plus editorial tags; repeats are dropped after the cut."""
    words = _title_words(title, STOP_WORDS)[:MAX_CONTENT_TAGS]
    return list(dict.fromkeys(words + EDITORIAL_TAGS))


def calculate_read_time(content: str) -> int:
    """Minutes to read at 200 words per minute, never less than one."""
    word_count = len(content.split())
    return max(1, math.ceil(word_count / WORDS_PER_MINUTE))


def generate_seo_title(title: str, brand: str, year: int) -> str:
    if len(title) < 50:
        return f"{title} - {year} Guide | {brand}"
    return f"{title} | {brand}"


def generate_meta_description(content: str, brand: str) -> str:
    excerpt = extract_excerpt(content, META_DESCRIPTION_LENGTH)
    return f"{excerpt} Expert insights from {brand}."


def generate_fallback_image(title: str) -> str:
    """Keyword-driven stock image reference for items without a cover."""
    words = _title_words(title, IMAGE_STOP_WORDS)[:3]
    keywords = ",".join(words + IMAGE_KEYWORDS)
    return IMAGE_URL_TEMPLATE.format(keywords=quote(keywords, safe=""))
