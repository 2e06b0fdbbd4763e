"""API routes - JSON endpoints for generating wasteboard G-code."""
import logging

from flask import Blueprint, current_app, request

from src.errors import ParameterError
from src.models import PlanParameters
from src.utils.share_link import build_share_url, decode_share_query, encode_share_query
from web.services.gcode_service import GCodeService
from web.services.preview_service import PreviewService
from web.utils.responses import (
    success_response,
    error_response,
    validation_response,
    gcode_file_response
)

logger = logging.getLogger(__name__)

api_bp = Blueprint('api', __name__)


def _request_params():
    """Plan parameters from the JSON body; an empty body means defaults."""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    return GCodeService.parse_params(data)


@api_bp.route('/defaults')
def get_defaults():
    """Default plan parameters."""
    return success_response(data=PlanParameters().to_dict())


@api_bp.route('/validate', methods=['POST'])
def validate_plan():
    """Validate plan parameters without generating G-code."""
    try:
        params = _request_params()
    except ParameterError as e:
        return validation_response([str(e)])

    errors, warnings = GCodeService.validate(params, current_app.config['MAX_HOLES'])
    return validation_response(errors, warnings)


@api_bp.route('/generate', methods=['POST'])
def generate_gcode():
    """Generate G-code text for the posted parameters."""
    try:
        params = _request_params()
    except ParameterError as e:
        return error_response(str(e))

    errors, warnings = GCodeService.validate(params, current_app.config['MAX_HOLES'])
    if errors:
        return error_response('Invalid parameters', errors=errors)

    result = GCodeService.generate(params, current_app.config['OUTPUT_FILENAME'])
    return success_response(data={
        'gcode': result.gcode,
        'line_count': len(result.program),
        'hole_count': result.hole_count,
        'warnings': warnings,
        'share_query': encode_share_query(params),
    })


@api_bp.route('/download')
def download_gcode():
    """Download G-code for parameters passed as a share query."""
    try:
        params = decode_share_query(request.args)
    except ParameterError as e:
        return error_response(str(e))

    errors, _ = GCodeService.validate(params, current_app.config['MAX_HOLES'])
    if errors:
        return error_response('Invalid parameters', errors=errors)

    content, filename = GCodeService.generate_download(params, current_app.config['OUTPUT_FILENAME'])
    logger.info("Serving %s (%d bytes)", filename, len(content))
    return gcode_file_response(content, filename)


@api_bp.route('/preview', methods=['POST'])
def preview_plan():
    """Generate an SVG preview of the hole grid."""
    try:
        params = _request_params()
    except ParameterError as e:
        return error_response(str(e))

    errors = GCodeService.validate(params, current_app.config['MAX_HOLES'])[0]
    if errors:
        return error_response('Invalid parameters', errors=errors)

    show_order = request.args.get('order', 'false').lower() in ('1', 'true', 'yes')
    svg = PreviewService.generate_svg(params, show_order=show_order)
    return success_response(data={'svg': svg})


@api_bp.route('/share', methods=['POST'])
def share_link():
    """Encode parameters as a shareable query string."""
    try:
        params = _request_params()
    except ParameterError as e:
        return error_response(str(e))

    return success_response(data={
        'query': encode_share_query(params),
        'url': build_share_url(request.host_url, params),
    })
