from schemas.download import MediaFormat, ResolveResult
from services.providers.base import ProviderAdapter
from utils.exceptions import InvalidUrlError
from utils.url_utils import Provider

FAILURE_SENTINEL = 'example-fail'


class InstagramAdapter(ProviderAdapter):
    """Placeholder until a real Instagram scraper is wired in."""

    provider = Provider.INSTAGRAM

    def __init__(self, placeholder_url: str):
        self.placeholder_url = placeholder_url

    def resolve(self, url: str, fmt: MediaFormat) -> ResolveResult:
        if FAILURE_SENTINEL in url:
            raise InvalidUrlError('Instagram link failed to scrape.')
        return ResolveResult(
            source=self.provider,
            format=MediaFormat.MP4,
            filename='instagram_reel_download.mp4',
            downloadUrl=self.placeholder_url,
        )
