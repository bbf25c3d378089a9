import logging
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException
from config import Config, split_list
from services.yt_dlp_service import YtDlpService
from services.stream_service import StreamService
from services.resolver_service import ResolverService
from services.providers.youtube import YouTubeAdapter
from services.providers.tiktok import TikTokAdapter
from services.providers.instagram import InstagramAdapter
from routes.download import bp as download_bp
from routes.stream import bp as stream_bp
from routes.pages import bp as pages_bp

# --- Logging ---
logging.basicConfig(level=Config.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def build_resolver(config, ydl=None, http=None):
    """Wire the adapters around a single long-lived YtDlpService."""
    timeout = config['PROVIDER_TIMEOUT_SECONDS']
    ydl = ydl or YtDlpService(timeout=timeout, cookies_file=config.get('YTDLP_COOKIES_FILE'))
    adapters = [
        YouTubeAdapter(ydl),
        TikTokAdapter(config['TIKTOK_API_URL'], timeout=timeout, http=http),
        InstagramAdapter(config['INSTAGRAM_PLACEHOLDER_URL']),
    ]
    return ResolverService(adapters, enabled=config['ENABLED_PROVIDERS'])


def create_app(overrides=None, ydl=None, http=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    origins = app.config['CORS_ORIGINS']
    if isinstance(origins, str):
        origins = split_list(origins)
    CORS(app, origins=origins)

    app.extensions['resolver'] = build_resolver(app.config, ydl=ydl, http=http)
    app.extensions['streamer'] = StreamService(
        timeout=app.config['PROVIDER_TIMEOUT_SECONDS'],
        chunk_size=app.config['STREAM_CHUNK_SIZE'],
        http=http,
    )

    app.register_blueprint(pages_bp)
    app.register_blueprint(download_bp)
    app.register_blueprint(stream_bp)

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        if isinstance(e, HTTPException):
            return jsonify({'success': False, 'message': e.description}), e.code
        logger.exception('Download error: %s', e)
        return jsonify({'success': False, 'message': 'Server error'}), 500

    logger.debug('Providers enabled: %s', ', '.join(app.extensions['resolver'].enabled_providers))
    return app


app = create_app()


if __name__ == '__main__':
    logger.info('ClipGrab Scraper API running on port %s', Config.PORT)
    app.run(host='0.0.0.0', port=Config.PORT)
