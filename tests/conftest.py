import pytest
import requests
from app import create_app
from utils.exceptions import ExternalServiceError


YOUTUBE_URL = 'https://www.youtube.com/watch?v=dQw4w9WgXcQ'

FORMATS = [
    {'format_id': '140', 'protocol': 'https', 'url': 'https://cdn.test/audio-128.m4a', 'ext': 'm4a', 'acodec': 'mp4a.40.2', 'vcodec': 'none', 'abr': 128},
    {'format_id': '251', 'protocol': 'https', 'url': 'https://cdn.test/audio-160.webm', 'ext': 'webm', 'acodec': 'opus', 'vcodec': 'none', 'abr': 160},
    {'format_id': '18', 'protocol': 'https', 'url': 'https://cdn.test/av-360.mp4', 'ext': 'mp4', 'acodec': 'mp4a.40.2', 'vcodec': 'avc1', 'height': 360, 'tbr': 500},
    {'format_id': '22', 'protocol': 'https', 'url': 'https://cdn.test/av-720.mp4', 'ext': 'mp4', 'acodec': 'mp4a.40.2', 'vcodec': 'avc1', 'height': 720, 'tbr': 1500},
    {'format_id': '137', 'protocol': 'https', 'url': 'https://cdn.test/video-1080.mp4', 'ext': 'mp4', 'acodec': 'none', 'vcodec': 'avc1', 'height': 1080, 'tbr': 4000},
    {'format_id': '96', 'protocol': 'm3u8_native', 'url': 'https://manifest.test/hls_playlist/index.m3u8', 'ext': 'mp4', 'acodec': 'mp4a.40.2', 'vcodec': 'avc1', 'height': 1080, 'tbr': 5000},
    {'format_id': '233', 'protocol': 'm3u8_native', 'url': 'https://manifest.test/hls_playlist/audio.m3u8', 'ext': 'mp4', 'acodec': 'mp4a.40.2', 'vcodec': 'none', 'abr': 256},
]


class FakeYtDlp:
    def __init__(self, info=None, error=None):
        self.info = info if info is not None else {'title': 'My Video!', 'formats': FORMATS}
        self.error = error
        self.calls = []

    def extract_info(self, url, yt_opts=None):
        self.calls.append(url)
        if self.error:
            raise ExternalServiceError(self.error)
        return self.info


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None, chunks=None, headers=None):
        self._payload = payload
        self.status_code = status_code
        self.text = text
        self.chunks = chunks or []
        self.headers = headers or {}
        self.closed = False

    def json(self):
        if self._payload is None:
            raise ValueError('not json')
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error")

    def iter_content(self, chunk_size=1):
        yield from self.chunks

    def close(self):
        self.closed = True


class FakeHttp:
    """Stands in for the ``requests`` module: post() and get()."""

    def __init__(self):
        self.post_response = FakeResponse({'code': 0, 'data': {'play': 'https://cdn.test/tiktok.mp4', 'title': 'dance'}})
        self.get_response = FakeResponse(chunks=[b'abc', b'def'], headers={'Content-Length': '6'})
        self.error = None
        self.posts = []
        self.gets = []

    def post(self, url, **kwargs):
        self.posts.append((url, kwargs))
        if self.error:
            raise self.error
        return self.post_response

    def get(self, url, **kwargs):
        self.gets.append((url, kwargs))
        if self.error:
            raise self.error
        return self.get_response


@pytest.fixture
def ydl():
    return FakeYtDlp()


@pytest.fixture
def http():
    return FakeHttp()


@pytest.fixture
def app(ydl, http):
    app = create_app({'TESTING': True}, ydl=ydl, http=http)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def resolver(app):
    return app.extensions['resolver']
