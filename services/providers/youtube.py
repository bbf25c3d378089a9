import logging
from typing import Dict, List, Optional
from schemas.download import MediaFormat, ResolveResult
from services.providers.base import ProviderAdapter
from services.yt_dlp_service import YtDlpService
from utils.exceptions import ExternalServiceError, InvalidUrlError, NoFormatAvailableError, UpstreamResolutionError
from utils.url_utils import Provider, extract_youtube_id, normalize_supported_url, sanitize_filename

logger = logging.getLogger(__name__)


def _has_codec(value):
    return bool(value) and value != 'none'


DIRECT_PROTOCOLS = ('http', 'https')


def _is_direct(fmt: Dict) -> bool:
    # m3u8/dash entries point at manifests, not media
    return bool(fmt.get('url')) and fmt.get('protocol') in DIRECT_PROTOCOLS


def _is_audio_only(fmt: Dict) -> bool:
    return _has_codec(fmt.get('acodec')) and not _has_codec(fmt.get('vcodec'))


def _is_audio_video(fmt: Dict) -> bool:
    return _has_codec(fmt.get('acodec')) and _has_codec(fmt.get('vcodec'))


def _audio_sort_key(fmt):
    return (fmt.get('abr') or 0, fmt.get('tbr') or 0)


def _video_sort_key(fmt):
    return (fmt.get('height') or 0, fmt.get('tbr') or 0, fmt.get('ext') == 'mp4')


def choose_format(formats: List[Dict], fmt: MediaFormat) -> Optional[Dict]:
    """Highest quality entry of the wanted encoding class, or None.

    ``mp3`` only ever picks audio-only encodings and ``mp4`` only combined
    audio+video ones. Only progressive http(s) downloads are considered.
    """
    candidates = [f for f in formats or [] if isinstance(f, dict) and _is_direct(f)]
    if fmt == MediaFormat.MP3:
        candidates = [f for f in candidates if _is_audio_only(f)]
        key = _audio_sort_key
    else:
        candidates = [f for f in candidates if _is_audio_video(f)]
        key = _video_sort_key
    if not candidates:
        return None
    return max(candidates, key=key)


class YouTubeAdapter(ProviderAdapter):
    provider = Provider.YOUTUBE

    def __init__(self, ydl: YtDlpService):
        self.ydl = ydl

    def resolve(self, url: str, fmt: MediaFormat) -> ResolveResult:
        url = normalize_supported_url(url)
        if not extract_youtube_id(url):
            raise InvalidUrlError('Invalid YouTube URL')

        try:
            info = self.ydl.extract_info(url)
        except ExternalServiceError as exc:
            logger.error('YouTube scrape error for %s: %s', url, exc)
            raise UpstreamResolutionError('Failed to fetch YouTube video')

        chosen = choose_format(info.get('formats') or [], fmt)
        if not chosen:
            logger.info('No %s format for %s', fmt.value, url)
            raise NoFormatAvailableError('No suitable format found')

        title = info.get('title')
        logger.debug('Picked format %s for %s', chosen.get('format_id'), url)
        return ResolveResult(
            source=self.provider,
            format=fmt,
            filename=sanitize_filename(title, fmt.value),
            downloadUrl=chosen['url'],
            title=title,
        )
