import logging
import requests
from schemas.download import MediaFormat, ResolveResult
from services.providers.base import ProviderAdapter
from utils.exceptions import UpstreamResolutionError, UpstreamUnreachableError
from utils.url_utils import Provider

logger = logging.getLogger(__name__)

TIKTOK_FILENAME = 'tiktok_video.mp4'


class TikTokAdapter(ProviderAdapter):
    """Delegates to an external resolver API that answers ``{"data": {"play": ...}}``.

    The upstream does not tell errors, bad input and missing videos apart,
    so all of them surface as UpstreamResolutionError.
    """

    provider = Provider.TIKTOK

    def __init__(self, api_url: str, timeout: float = 10, http=None):
        self.api_url = api_url
        self.timeout = timeout
        self.http = http or requests

    def resolve(self, url: str, fmt: MediaFormat) -> ResolveResult:
        # audio-only is not offered; always mp4
        try:
            response = self.http.post(
                self.api_url,
                data={'url': url},
                headers={'Accept': 'application/json', 'User-Agent': 'Mozilla/5.0 (ClipGrab)'},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as exc:
            logger.warning('TikTok resolver unreachable: %s', exc)
            raise UpstreamUnreachableError('Cannot reach TikTok resolver')

        try:
            payload = response.json()
        except ValueError:
            logger.warning('TikTok resolver returned non-JSON body (status %s)', response.status_code)
            raise UpstreamResolutionError('Failed to resolve TikTok video')

        data = payload.get('data') if isinstance(payload, dict) else None
        play = data.get('play') if isinstance(data, dict) else None
        if not play:
            logger.info('TikTok resolver gave no playable url for %s: %s', url, payload.get('msg') if isinstance(payload, dict) else payload)
            raise UpstreamResolutionError('Failed to resolve TikTok video')

        return ResolveResult(
            source=self.provider,
            format=MediaFormat.MP4,
            filename=TIKTOK_FILENAME,
            downloadUrl=play,
            title=data.get('title'),
        )
