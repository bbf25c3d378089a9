import logging
from flask import Blueprint, request, current_app, Response
from routes.download import failure_response
from utils.exceptions import ServiceError, InvalidRequestError, UnsupportedPlatformError
from utils.url_utils import Provider
from services.stream_service import MIME_TYPES

bp = Blueprint('stream', __name__)
logger = logging.getLogger(__name__)


@bp.route('/download-video/stream', methods=['GET', 'POST'])
def stream_video():
    if request.method == 'POST':
        payload = request.get_json(silent=True)
    else:
        payload = request.args.to_dict()

    resolver = current_app.extensions['resolver']
    streamer = current_app.extensions['streamer']
    try:
        req = resolver.parse_request(payload)
        if not req.url:
            raise InvalidRequestError('Missing url')
        # reject before any provider is contacted
        if resolver.select_provider(req) != Provider.YOUTUBE:
            raise UnsupportedPlatformError('Streaming is only available for YouTube')
        result = resolver.resolve(req)
        chunks, headers = streamer.open(result.downloadUrl)
    except ServiceError as e:
        return failure_response(e)

    logger.info('Streaming %s', result.filename)
    headers['Content-Disposition'] = f'attachment; filename="{result.filename}"'
    return Response(chunks, headers=headers, mimetype=MIME_TYPES[result.format.value])
