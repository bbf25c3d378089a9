from flask import Blueprint, jsonify, current_app

bp = Blueprint('pages', __name__)


@bp.route('/')
def index():
    return 'ClipGrab Scraper API is live', 200, {'Content-Type': 'text/plain; charset=utf-8'}


@bp.route('/health')
def health():
    resolver = current_app.extensions['resolver']
    return jsonify({'status': 'ok', 'providers': resolver.enabled_providers})
