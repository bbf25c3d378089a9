from flask import Blueprint, request, jsonify, current_app
from schemas.download import ResolveFailure
from utils.exceptions import ServiceError

bp = Blueprint('download', __name__)


def failure_response(exc: ServiceError):
    return jsonify(ResolveFailure(message=exc.message).model_dump()), exc.status_code


@bp.route('/download-video', methods=['POST'])
def download_video():
    payload = request.get_json(silent=True)
    if payload is None:
        return jsonify(ResolveFailure(message='Invalid JSON').model_dump()), 400

    resolver = current_app.extensions['resolver']
    try:
        result = resolver.resolve_payload(payload)
    except ServiceError as e:
        return failure_response(e)
    return jsonify(result.model_dump(mode='json', exclude_none=True))
