"""Turn share links from video/audio platforms into iframe-embeddable URLs.

Patterns are tried in declaration order and the first match wins. They are
not anchored, so any string containing a recognizable link is accepted.
"""
import logging
import re
from dataclasses import dataclass
from typing import Callable
from urllib.parse import quote

logger = logging.getLogger(__name__)

UNSUPPORTED_MESSAGE = "Unsupported embed URL. Supported platforms: YouTube, Vimeo, SoundCloud"

_SOUNDCLOUD_PLAYER_PARAMS = (
    "&color=%23ff5500&auto_play=false&hide_related=false&show_comments=true"
    "&show_user=true&show_reposts=false&show_teaser=true"
)


def _encode_uri_component(value: str) -> str:
    # Same unreserved set as JavaScript's encodeURIComponent
    return quote(value, safe="!'()*")


@dataclass(frozen=True)
class EmbedPattern:
    type: str
    regex: re.Pattern
    build: Callable[[re.Match], str]


EMBED_PATTERNS: tuple[EmbedPattern, ...] = (
    EmbedPattern(
        type="youtube",
        regex=re.compile(
            r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)([^\"&?/\s]{11})"
        ),
        build=lambda m: f"https://www.youtube.com/embed/{m.group(1)}?rel=0",
    ),
    EmbedPattern(
        type="vimeo",
        regex=re.compile(r"vimeo\.com/([0-9]+)"),
        build=lambda m: f"https://player.vimeo.com/video/{m.group(1)}?title=0&byline=0&portrait=0",
    ),
    EmbedPattern(
        type="soundcloud",
        regex=re.compile(r"soundcloud\.com/([a-zA-Z0-9_-]+)/([a-zA-Z0-9_-]+)"),
        build=lambda m: (
            "https://w.soundcloud.com/player/?url="
            + _encode_uri_component("https://" + m.group(0))
            + _SOUNDCLOUD_PLAYER_PARAMS
        ),
    ),
)


@dataclass(frozen=True)
class EmbedResult:
    is_valid: bool
    embed_url: str | None = None
    type: str | None = None
    original_url: str | None = None
    error: str | None = None


def normalize_embed_url(url: str) -> EmbedResult:
    for pattern in EMBED_PATTERNS:
        match = pattern.regex.search(url or "")
        if match:
            result = EmbedResult(
                is_valid=True,
                embed_url=pattern.build(match),
                type=pattern.type,
                original_url=url,
            )
            logger.debug("%s embed validated: %s", pattern.type, result.embed_url)
            return result

    logger.debug("No embed pattern matched for URL: %s", url)
    return EmbedResult(is_valid=False, error=UNSUPPORTED_MESSAGE)


_PLAYER_PREFIXES = {
    "https://www.youtube.com/embed/": "youtube",
    "https://player.vimeo.com/video/": "vimeo",
    "https://w.soundcloud.com/player/?url=": "soundcloud",
}


def player_type(url: str) -> str | None:
    """Type tag of a URL that is already in embeddable player form, else None."""
    for prefix, embed_type in _PLAYER_PREFIXES.items():
        if url.startswith(prefix):
            return embed_type
    return None
