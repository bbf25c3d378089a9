import os
from dotenv import load_dotenv

load_dotenv()


def split_list(value):
    return [item.strip().lower() for item in (value or '').split(',') if item.strip()]


class Config:
    """Settings read from the environment (and a local .env file)."""

    PORT = int(os.getenv('PORT', '3000'))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    # outbound calls to yt-dlp and the TikTok resolver
    PROVIDER_TIMEOUT_SECONDS = float(os.getenv('PROVIDER_TIMEOUT_SECONDS', '10'))
    TIKTOK_API_URL = os.getenv('TIKTOK_API_URL', 'https://www.tikwm.com/api/')
    INSTAGRAM_PLACEHOLDER_URL = os.getenv(
        'INSTAGRAM_PLACEHOLDER_URL',
        'https://mock-video-cdn.com/instagram/reel-placeholder.mp4',
    )
    ENABLED_PROVIDERS = split_list(os.getenv('ENABLED_PROVIDERS', 'youtube,tiktok,instagram'))
    YTDLP_COOKIES_FILE = os.getenv('YTDLP_COOKIES_FILE')

    CORS_ORIGINS = split_list(os.getenv('CORS_ORIGINS', '*'))
    STREAM_CHUNK_SIZE = int(os.getenv('STREAM_CHUNK_SIZE', str(64 * 1024)))
