import os
import logging
from types import MappingProxyType
from typing import Optional, Dict
import yt_dlp
from utils.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


class YtDlpService:
    """Single place to talk to yt-dlp.

    Built once at startup and shared by every request. The base options are
    frozen after construction and each call opens its own ``YoutubeDL``, so
    concurrent requests never share a yt-dlp instance.
    """

    def __init__(self, timeout: float = 10, cookies_file: Optional[str] = None):
        opts = {
            'quiet': True,
            'no_warnings': True,
            'skip_download': True,
            'noplaylist': True,
            'socket_timeout': timeout,
        }
        # Allow an env-provided cookies file or a shipped youtube.com_cookies.txt
        cookie_file = cookies_file or os.environ.get('YTDLP_COOKIES_FILE')
        if not cookie_file and os.path.exists('youtube.com_cookies.txt'):
            cookie_file = os.path.abspath('youtube.com_cookies.txt')
        if cookie_file:
            opts['cookiefile'] = cookie_file
        self.base_opts = MappingProxyType(opts)

    def extract_info(self, url: str, yt_opts: Optional[Dict] = None) -> Dict:
        """Fetch metadata (title, formats) for ``url`` without downloading."""
        opts = dict(self.base_opts)
        opts.update(yt_opts or {})
        try:
            with yt_dlp.YoutubeDL(opts) as ydl:
                info = ydl.extract_info(url, download=False)
        except yt_dlp.utils.DownloadError as exc:
            msg = str(exc)
            if 'Sign in to confirm' in msg:
                logger.warning('yt-dlp needs cookies for %s; set YTDLP_COOKIES_FILE', url)
            raise ExternalServiceError(f"yt-dlp error: {msg}")
        except Exception as exc:
            raise ExternalServiceError(f"yt-dlp error: {exc}")

        if not isinstance(info, dict):
            raise ExternalServiceError('yt-dlp returned no metadata')
        return info
