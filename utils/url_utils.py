import re
from enum import Enum
from typing import Optional
from urllib.parse import urlparse, urlunparse, parse_qs


class Provider(str, Enum):
    YOUTUBE = 'youtube'
    TIKTOK = 'tiktok'
    INSTAGRAM = 'instagram'


_YOUTUBE_ID = r'([A-Za-z0-9_-]{11})'
_YOUTUBE_PATH_PATTERNS = [
    re.compile(r'^/(?:shorts|embed|live|v|e)/' + _YOUTUBE_ID + r'(?:[/?#]|$)'),
]
_YOUTUBE_HOSTS = ('youtube.com', 'www.youtube.com', 'm.youtube.com', 'music.youtube.com')


def is_youtube_url(url):
    return isinstance(url, str) and ("youtube.com" in url.lower() or "youtu.be" in url.lower())


def is_ytmusic_url(url):
    return isinstance(url, str) and "music.youtube.com" in url.lower()


def is_tiktok_url(url):
    return isinstance(url, str) and "tiktok.com" in url.lower()


def is_instagram_url(url):
    return isinstance(url, str) and "instagram.com" in url.lower()


def classify(url: str) -> Optional[Provider]:
    """Return the provider for ``url``, or None when no provider matches.

    Checked in priority order, first match wins.
    """
    if is_youtube_url(url):
        return Provider.YOUTUBE
    if is_tiktok_url(url):
        return Provider.TIKTOK
    if is_instagram_url(url):
        return Provider.INSTAGRAM
    return None


def parse_provider(name: Optional[str]) -> Optional[Provider]:
    if not name:
        return None
    try:
        return Provider(name.strip().lower())
    except ValueError:
        return None


def normalize_supported_url(url):
    if not url:
        return url
    if is_ytmusic_url(url):
        parsed = urlparse(url)
        return urlunparse(parsed._replace(netloc="www.youtube.com"))
    return url


def extract_youtube_id(url: str) -> Optional[str]:
    """Video id of a watch, shorts, embed, live or youtu.be link."""
    if not isinstance(url, str) or not url.strip():
        return None
    candidate = url.strip()
    if '://' not in candidate:
        candidate = 'https://' + candidate
    parsed = urlparse(candidate)
    if parsed.scheme not in ('http', 'https'):
        return None
    host = (parsed.hostname or '').lower()

    if host in ('youtu.be', 'www.youtu.be'):
        match = re.match('^/' + _YOUTUBE_ID + r'$', parsed.path.rstrip('/'))
        return match.group(1) if match else None

    if host not in _YOUTUBE_HOSTS:
        return None

    if parsed.path.rstrip('/') == '/watch':
        values = parse_qs(parsed.query).get('v') or []
        if values and re.fullmatch(_YOUTUBE_ID, values[0]):
            return values[0]
        return None

    for pattern in _YOUTUBE_PATH_PATTERNS:
        match = pattern.match(parsed.path)
        if match:
            return match.group(1)
    return None


def sanitize_filename(title, extension):
    # ASCII only: strip [^\w\s-], trim, whitespace runs -> '_'
    cleaned = re.sub(r'[^\w\s-]', '', title or '', flags=re.ASCII).strip()
    cleaned = re.sub(r'\s+', '_', cleaned, flags=re.ASCII)
    if not re.search(r'[A-Za-z0-9]', cleaned):
        cleaned = 'video'
    return f"{cleaned}.{extension}"
