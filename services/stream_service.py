import logging
from typing import Iterator, Tuple
import requests
from utils.exceptions import UpstreamUnreachableError

logger = logging.getLogger(__name__)

MIME_TYPES = {'mp4': 'video/mp4', 'mp3': 'audio/mpeg'}


class StreamService:
    """Proxies a resolved media URL back to the client chunk by chunk.

    The upstream connection is opened before the response starts so that
    connection failures still turn into a JSON error instead of a broken
    download.
    """

    def __init__(self, timeout: float = 10, chunk_size: int = 64 * 1024, http=None):
        self.timeout = timeout
        self.chunk_size = chunk_size
        self.http = http or requests

    def open(self, media_url: str) -> Tuple[Iterator[bytes], dict]:
        try:
            upstream = self.http.get(media_url, stream=True, timeout=self.timeout,
                                     headers={'User-Agent': 'Mozilla/5.0 (ClipGrab)'})
        except requests.exceptions.RequestException as exc:
            logger.warning('Upstream media fetch failed: %s', exc)
            raise UpstreamUnreachableError('Failed to fetch media stream')

        try:
            upstream.raise_for_status()
        except requests.exceptions.RequestException as exc:
            # expired googlevideo links answer 403/410
            upstream.close()
            logger.warning('Upstream media fetch failed: %s', exc)
            raise UpstreamUnreachableError('Failed to fetch media stream')

        headers = {}
        length = upstream.headers.get('Content-Length')
        if length:
            headers['Content-Length'] = length

        def generate():
            try:
                for chunk in upstream.iter_content(chunk_size=self.chunk_size):
                    if chunk:
                        yield chunk
            finally:
                upstream.close()

        return generate(), headers
