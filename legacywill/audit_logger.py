"""
Audit logging module for immutable audit trail.

Every will action taken through the API is logged with an integrity hash.
This module is append-only - records are never modified or deleted.
"""

import json
from typing import Any, Dict, List, Optional, Tuple

from flask import current_app, has_request_context, request

from legacywill import db
from legacywill.models import AuditLog
from legacywill.security import get_client_ip
from legacywill.utils import utcnow


class AuditAction:
    """Constants for audit actions."""
    # Will actions
    WILL_CREATED = 'will_created'
    WILL_UPDATED = 'will_updated'
    WILL_REGENERATED = 'will_regenerated'
    WILL_DELETED = 'will_deleted'
    WILL_CONTENT_VIEWED = 'will_content_viewed'
    WILL_VERIFIED = 'will_verified'

    # Stateless checks
    VALIDATION_RUN = 'validation_run'

    ERROR_OCCURRED = 'error_occurred'


class AuditCategory:
    """Constants for audit action categories."""
    CREATE = 'create'
    READ = 'read'
    UPDATE = 'update'
    DELETE = 'delete'
    GENERATE = 'generate'
    SYSTEM = 'system'


def log_action(
    action: str,
    action_category: str,
    resource_type: str,
    resource_id: Optional[str] = None,
    will_id: Optional[str] = None,
    actor_type: str = 'system',
    actor_id: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
    success: bool = True,
    error_message: Optional[str] = None
) -> Optional[AuditLog]:
    """
    Log an action to the audit trail.

    Args:
        action: The action performed (use AuditAction constants)
        action_category: Category of action (use AuditCategory constants)
        resource_type: Type of resource affected
        resource_id: Identifier of the resource
        will_id: Associated will id if applicable
        actor_type: Type of actor ('user', 'system')
        actor_id: Identifier of the actor (user id, IP, ...)
        details: Additional structured details
        success: Whether the action succeeded
        error_message: Error message if action failed

    Returns:
        The created AuditLog record, or None if it could not be written
    """
    ip_address = None
    user_agent = None
    if has_request_context():
        ip_address = get_client_ip()
        user_agent = request.headers.get('User-Agent')
        if actor_type == 'user' and not actor_id:
            actor_id = ip_address

    audit_log = AuditLog(
        timestamp=utcnow(),
        action=action,
        action_category=action_category,
        resource_type=resource_type,
        resource_id=str(resource_id) if resource_id else None,
        will_id=will_id,
        actor_type=actor_type,
        actor_id=actor_id,
        details_json=json.dumps(details, sort_keys=True) if details else None,
        success=success,
        error_message=error_message,
        ip_address=ip_address,
        user_agent=user_agent[:500] if user_agent else None
    )
    audit_log.integrity_hash = audit_log.compute_integrity_hash()

    try:
        db.session.add(audit_log)
        db.session.commit()
    except Exception as e:
        # The audited action already happened; a lost audit row is logged, not raised
        db.session.rollback()
        current_app.logger.error(f'Failed to create audit log for {action}: {str(e)}')
        return None

    return audit_log


def log_will_created(will_id: str, user_id: str, jurisdiction: str, will_type: str,
                     is_valid: bool, checksum: str) -> Optional[AuditLog]:
    """Log will creation."""
    return log_action(
        action=AuditAction.WILL_CREATED,
        action_category=AuditCategory.CREATE,
        resource_type='will',
        resource_id=will_id,
        will_id=will_id,
        actor_type='user',
        actor_id=user_id,
        details={
            'jurisdiction': jurisdiction,
            'will_type': will_type,
            'is_valid': is_valid,
            'content_checksum': checksum,
        }
    )


def log_will_updated(will_id: str, user_id: str, changed_fields: List[str]) -> Optional[AuditLog]:
    """Log edits to a stored will."""
    return log_action(
        action=AuditAction.WILL_UPDATED,
        action_category=AuditCategory.UPDATE,
        resource_type='will',
        resource_id=will_id,
        will_id=will_id,
        actor_type='user',
        actor_id=user_id,
        details={'changed_fields': sorted(changed_fields)}
    )


def log_will_regenerated(will_id: str, user_id: str, version: int, checksum: str) -> Optional[AuditLog]:
    """Log regeneration of will content."""
    return log_action(
        action=AuditAction.WILL_REGENERATED,
        action_category=AuditCategory.GENERATE,
        resource_type='will_content',
        resource_id=f'{will_id}:v{version}',
        will_id=will_id,
        actor_type='user',
        actor_id=user_id,
        details={'version': version, 'content_checksum': checksum}
    )


def log_will_deleted(will_id: str, user_id: str) -> Optional[AuditLog]:
    """Log will deletion."""
    return log_action(
        action=AuditAction.WILL_DELETED,
        action_category=AuditCategory.DELETE,
        resource_type='will',
        resource_id=will_id,
        will_id=will_id,
        actor_type='user',
        actor_id=user_id
    )


def log_will_content_viewed(will_id: str, user_id: str, version: int) -> Optional[AuditLog]:
    """Log a read of stored will content."""
    return log_action(
        action=AuditAction.WILL_CONTENT_VIEWED,
        action_category=AuditCategory.READ,
        resource_type='will_content',
        resource_id=f'{will_id}:v{version}',
        will_id=will_id,
        actor_type='user',
        actor_id=user_id
    )


def log_will_verified(will_id: str, user_id: str, intact: bool) -> Optional[AuditLog]:
    """Log a content integrity check."""
    return log_action(
        action=AuditAction.WILL_VERIFIED,
        action_category=AuditCategory.READ,
        resource_type='will_content',
        resource_id=will_id,
        will_id=will_id,
        actor_type='user',
        actor_id=user_id,
        details={'intact': intact},
        success=intact
    )


def log_validation_run(jurisdiction: str, is_valid: bool, error_codes: List[str]) -> Optional[AuditLog]:
    """Log a stateless validation request."""
    return log_action(
        action=AuditAction.VALIDATION_RUN,
        action_category=AuditCategory.SYSTEM,
        resource_type='validation',
        resource_id=jurisdiction,
        actor_type='user',
        details={'is_valid': is_valid, 'error_codes': error_codes} if error_codes else {'is_valid': is_valid},
        success=is_valid
    )


def log_error(action: str, error_message: str, will_id: Optional[str] = None,
              user_id: Optional[str] = None) -> Optional[AuditLog]:
    """Log a failed will action."""
    return log_action(
        action=AuditAction.ERROR_OCCURRED,
        action_category=AuditCategory.SYSTEM,
        resource_type='will',
        resource_id=will_id,
        will_id=will_id,
        actor_type='user',
        actor_id=user_id,
        details={'failed_action': action},
        success=False,
        error_message=error_message
    )


def verify_audit_integrity() -> Tuple[int, int, List[int]]:
    """
    Verify integrity of all audit log records.

    Returns:
        Tuple of (valid_count, invalid_count, invalid_ids)
    """
    logs = AuditLog.query.all()
    valid_count = 0
    invalid_count = 0
    invalid_ids = []

    for log in logs:
        if log.verify_integrity():
            valid_count += 1
        else:
            invalid_count += 1
            invalid_ids.append(log.id)

    return valid_count, invalid_count, invalid_ids


def get_audit_trail_for_will(will_id: str) -> List[Dict[str, Any]]:
    """
    Get complete audit trail for a will.

    Args:
        will_id: The will id

    Returns:
        List of audit log dictionaries, oldest first
    """
    logs = AuditLog.query.filter_by(will_id=will_id) \
                         .order_by(AuditLog.timestamp.asc(), AuditLog.id.asc()) \
                         .all()
    return [log.to_dict() for log in logs]
