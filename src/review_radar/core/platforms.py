"""Platform detection and URL validation."""

import re
from typing import Optional

import httpx

from review_radar.core.entities import Platform, UrlValidation

# Ordered host patterns; the domains are disjoint so order only matters for readability.
PLATFORM_PATTERNS: list[tuple[Platform, re.Pattern[str]]] = [
    (Platform.AMAZON, re.compile(r"(^|\.)amazon\.(com|in|co\.uk)$")),
    (Platform.FLIPKART, re.compile(r"(^|\.)flipkart\.com$")),
    (Platform.MEESHO, re.compile(r"(^|\.)meesho\.com$")),
    (Platform.MYNTRA, re.compile(r"(^|\.)myntra\.com$")),
    (Platform.ZOMATO, re.compile(r"(^|\.)zomato\.com$")),
    (Platform.SWIGGY, re.compile(r"(^|\.)swiggy\.com$")),
    (Platform.NYKAA, re.compile(r"(^|\.)nykaa\.com$")),
    (Platform.AJIO, re.compile(r"(^|\.)ajio\.com$")),
]

SCRAPING_INSTRUCTIONS: dict[Platform, list[str]] = {
    Platform.AMAZON: [
        "Navigate to the product page",
        "Scroll down to customer reviews section",
        'Click on "See all customer reviews"',
        "Extract review text, ratings, and helpful votes",
    ],
    Platform.FLIPKART: [
        "Go to product page",
        'Find "Ratings & Reviews" section',
        'Click "All Reviews" to see complete list',
        "Extract review content and ratings",
    ],
    Platform.MEESHO: [
        "Open product page",
        'Scroll to "Reviews & Ratings" section',
        "View all customer reviews and ratings",
        "Extract review text and star ratings",
    ],
    Platform.MYNTRA: [
        "Visit product page",
        'Navigate to "Customer Reviews" tab',
        "Read through all available reviews",
        "Collect review text and ratings data",
    ],
    Platform.ZOMATO: [
        "Go to restaurant page",
        'Click on "Reviews" tab',
        "Read customer reviews and ratings",
        "Extract review content and star ratings",
    ],
}


def supported_platforms() -> list[Platform]:
    """Platforms with a known host pattern, in table order."""
    return [platform for platform, _ in PLATFORM_PATTERNS]


def _parse_host(url: object) -> Optional[str]:
    """Return the lower-cased host of an absolute URL, or None if malformed."""
    if not isinstance(url, str) or not url.strip():
        return None
    try:
        parsed = httpx.URL(url.strip())
    except (httpx.InvalidURL, ValueError, TypeError):
        return None
    if not parsed.scheme or not parsed.host:
        return None
    return parsed.host.lower()


def detect(url: object) -> Platform:
    """Map a URL to its source platform.

    Never raises: malformed input yields ``Platform.INVALID`` and an
    unrecognized host yields ``Platform.GENERIC_ECOMMERCE``.
    """
    host = _parse_host(url)
    if host is None:
        return Platform.INVALID

    for platform, pattern in PLATFORM_PATTERNS:
        if pattern.search(host):
            return platform

    return Platform.GENERIC_ECOMMERCE


def _supported_list() -> str:
    names = [platform.value for platform in supported_platforms()]
    return f"{', '.join(names[:-1])}, or {names[-1]}"


def validate(url: object) -> UrlValidation:
    """Check that a URL is well formed and points at a supported platform."""
    platform = detect(url)

    if platform == Platform.INVALID:
        return UrlValidation(
            is_valid=False,
            platform=Platform.INVALID,
            message="Please enter a valid URL",
        )

    if platform == Platform.GENERIC_ECOMMERCE:
        return UrlValidation(
            is_valid=False,
            platform=Platform.UNKNOWN,
            message=f"Platform not supported. Please use {_supported_list()} URLs.",
        )

    return UrlValidation(
        is_valid=True,
        platform=platform,
        message=f"Ready to analyze reviews from {platform.value}",
    )


def scraping_instructions(platform: Platform) -> list[str]:
    """Manual collection steps for a platform (Amazon's steps by default)."""
    return list(SCRAPING_INSTRUCTIONS.get(platform, SCRAPING_INSTRUCTIONS[Platform.AMAZON]))
