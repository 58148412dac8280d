"""
Flask routes for the will generation API.

A thin JSON layer over the library: the jurisdiction registry, the
stateless validator and advisory engine, and the will lifecycle service.
The caller is identified by the X-User-Id header and passed explicitly to
every lifecycle operation.
"""

from datetime import date

from flask import Blueprint, current_app, g, jsonify, request

from legacywill import db
from legacywill.audit_logger import (
    log_error, log_validation_run, log_will_content_viewed, log_will_created, log_will_deleted,
    log_will_regenerated, log_will_updated, log_will_verified, get_audit_trail_for_will,
)
from legacywill.jurisdictions import ConfigurationError
from legacywill.lifecycle import WillLifecycleService, WillNotFoundError
from legacywill.security import (
    rate_limit_generate, rate_limit_read, rate_limit_validate,
    sanitize_payload, user_required,
)
from legacywill.storage import SqlWillStore
from legacywill.suggestions import suggest
from legacywill.utils import parse_date
from legacywill.validation import validate
from legacywill.will_data import WillUserData


api_bp = Blueprint('api', __name__, url_prefix='/api')


def get_registry():
    return current_app.extensions['legacywill']['registry']


def get_service() -> WillLifecycleService:
    """Lifecycle service bound to the current request's session."""
    ext = current_app.extensions['legacywill']
    store = SqlWillStore(db.session, current_app.config['WILL_CONTENT_DIR'])
    return WillLifecycleService(store, ext['registry'], templates=ext['templates'])


def get_json_payload():
    """Sanitized JSON object body, or None."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return None
    return sanitize_payload(payload)


def missing_payload():
    return jsonify({
        'ok': False,
        'errors': [{'field': '', 'message': 'No JSON payload provided', 'code': 'missing_payload'}]
    }), 400


# Error handlers

@api_bp.errorhandler(ConfigurationError)
def handle_configuration_error(error):
    current_app.logger.info(f'Configuration error: {str(error)}')
    return jsonify({'ok': False, 'error': str(error), 'code': 'configuration_error'}), 400


@api_bp.errorhandler(WillNotFoundError)
def handle_not_found(error):
    return jsonify({'ok': False, 'error': 'Will not found', 'code': 'not_found'}), 404


@api_bp.errorhandler(ValueError)
def handle_value_error(error):
    current_app.logger.info(f'Rejected request: {str(error)}')
    return jsonify({'ok': False, 'error': str(error), 'code': 'invalid_request'}), 400


# Jurisdictions

@api_bp.route('/jurisdictions', methods=['GET'])
@rate_limit_read()
def api_jurisdictions():
    """List supported jurisdictions with their languages and will types."""
    registry = get_registry()
    jurisdictions = []
    for code in registry.codes():
        support = registry.supported_will_types(code)
        jurisdictions.append({
            'code': code,
            'name': registry.get_config(code).country_name(),
            'languages': [lang.value for lang in registry.supported_languages(code)],
            'will_types': [t.value for t in support.types],
            'default_will_type': support.default.value,
        })
    return jsonify({'ok': True, 'jurisdictions': jurisdictions}), 200


@api_bp.route('/jurisdictions/<code>', methods=['GET'])
@rate_limit_read()
def api_jurisdiction(code: str):
    """Configuration summary of one jurisdiction."""
    config = get_registry().get_config(code)
    return jsonify({'ok': True, 'jurisdiction': config.to_dict()}), 200


# Stateless checks

def _analysis_inputs(payload):
    registry = get_registry()
    config = registry.get_config(payload.get('jurisdiction'))
    will_type = None
    if payload.get('will_type'):
        will_type = registry.resolve_will_type(config.code, payload.get('will_type'))
    as_of = parse_date(payload.get('as_of')) or date.today()
    will = WillUserData.from_dict(payload.get('user_data'))
    return will, config, will_type, as_of


@api_bp.route('/validate', methods=['POST'])
@rate_limit_validate()
def api_validate():
    """
    Validate will data against a jurisdiction.

    Returns:
        JSON response with the validation result (always 200; problems are
        reported in the body)
    """
    payload = get_json_payload()
    if not payload:
        return missing_payload()

    will, config, will_type, as_of = _analysis_inputs(payload)
    result = validate(will, config, will_type, as_of=as_of)

    log_validation_run(config.code, result.is_valid, sorted({e.code for e in result.errors}))
    return jsonify({'ok': True, 'validation': result.to_dict()}), 200


@api_bp.route('/suggestions', methods=['POST'])
@rate_limit_validate()
def api_suggestions():
    """Advisory suggestions for will data."""
    payload = get_json_payload()
    if not payload:
        return missing_payload()

    will, config, will_type, as_of = _analysis_inputs(payload)
    suggestions = suggest(will, config, will_type, as_of=as_of)
    return jsonify({'ok': True, 'suggestions': [s.to_dict() for s in suggestions]}), 200


# Wills

@api_bp.route('/wills', methods=['POST'])
@user_required
@rate_limit_generate()
def api_create_will():
    """
    Generate and store a new will.

    Body: jurisdiction, language, user_data, and optionally will_type and
    preferences. Invalid wills are stored too; see the validation block of
    the response.
    """
    payload = get_json_payload()
    if not payload:
        return missing_payload()

    try:
        generated = get_service().create_will(
            g.user_id,
            payload.get('user_data') or {},
            payload.get('jurisdiction'),
            payload.get('language'),
            will_type=payload.get('will_type'),
            preferences=payload.get('preferences'),
        )
    except (ConfigurationError, ValueError):
        raise
    except Exception as e:
        current_app.logger.error(f'Generation error: {str(e)}')
        log_error('create_will', str(e), user_id=g.user_id)
        raise

    log_will_created(
        generated.will_id, g.user_id, generated.jurisdiction, generated.will_type.value,
        generated.validation.is_valid, generated.metadata.checksum,
    )
    return jsonify({'ok': True, 'will': generated.to_dict()}), 201


@api_bp.route('/wills', methods=['GET'])
@user_required
@rate_limit_read()
def api_list_wills():
    records = get_service().list_wills(g.user_id)
    return jsonify({'ok': True, 'wills': records}), 200


@api_bp.route('/wills/<will_id>', methods=['GET'])
@user_required
@rate_limit_read()
def api_get_will(will_id: str):
    record = get_service().get_will(g.user_id, will_id)
    if record is None:
        raise WillNotFoundError(will_id)
    return jsonify({'ok': True, 'will': record}), 200


@api_bp.route('/wills/<will_id>', methods=['PUT'])
@user_required
@rate_limit_validate()
def api_update_will(will_id: str):
    """
    Store edits to a will.

    Body may contain user_data, preferences, status, language and
    will_type. Content is marked stale until the will is regenerated.
    """
    payload = get_json_payload()
    if not payload:
        return missing_payload()

    record = get_service().update_will(
        g.user_id, will_id,
        user_data=payload.get('user_data'),
        preferences=payload.get('preferences'),
        status=payload.get('status'),
        language=payload.get('language'),
        will_type=payload.get('will_type'),
    )
    log_will_updated(will_id, g.user_id, [k for k in payload if payload[k] is not None])
    return jsonify({'ok': True, 'will': record}), 200


@api_bp.route('/wills/<will_id>', methods=['DELETE'])
@user_required
def api_delete_will(will_id: str):
    try:
        get_service().delete_will(g.user_id, will_id)
    except WillNotFoundError:
        raise
    except Exception as e:
        current_app.logger.error(f'Deletion of will {will_id} failed: {str(e)}')
        log_error('delete_will', str(e), will_id=will_id, user_id=g.user_id)
        raise

    log_will_deleted(will_id, g.user_id)
    return jsonify({'ok': True}), 200


@api_bp.route('/wills/<will_id>/regenerate', methods=['POST'])
@user_required
@rate_limit_generate()
def api_regenerate_will(will_id: str):
    """Regenerate a will from its stored data as a new version."""
    try:
        generated = get_service().regenerate_will(g.user_id, will_id)
    except (WillNotFoundError, ConfigurationError, ValueError):
        raise
    except Exception as e:
        current_app.logger.error(f'Regeneration of will {will_id} failed: {str(e)}')
        log_error('regenerate_will', str(e), will_id=will_id, user_id=g.user_id)
        raise

    log_will_regenerated(will_id, g.user_id, generated.version, generated.metadata.checksum)
    return jsonify({'ok': True, 'will': generated.to_dict()}), 200


@api_bp.route('/wills/<will_id>/content', methods=['GET'])
@user_required
@rate_limit_read()
def api_will_content(will_id: str):
    """Stored content of the current version, or of ?version=N."""
    version = request.args.get('version', type=int)
    content = get_service().get_will_content(g.user_id, will_id, version=version)
    if content is None:
        return jsonify({'ok': False, 'error': 'Content not available', 'code': 'content_missing'}), 404
    log_will_content_viewed(will_id, g.user_id, content.get('version', 0))
    return jsonify({'ok': True, 'content': content}), 200


@api_bp.route('/wills/<will_id>/verify', methods=['GET'])
@user_required
@rate_limit_read()
def api_verify_will(will_id: str):
    """Check stored content against the checksum recorded at generation."""
    intact = get_service().verify_will_content(g.user_id, will_id)
    log_will_verified(will_id, g.user_id, intact)
    return jsonify({'ok': True, 'intact': intact}), 200


@api_bp.route('/wills/<will_id>/audit', methods=['GET'])
@user_required
@rate_limit_read()
def api_will_audit(will_id: str):
    """Audit trail of a will owned by the caller."""
    if get_service().get_will(g.user_id, will_id) is None:
        raise WillNotFoundError(will_id)
    return jsonify({'ok': True, 'audit_trail': get_audit_trail_for_will(will_id)}), 200

