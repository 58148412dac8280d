"""
Database models for stored wills.

- WillRecord: the structured will row (testator, beneficiaries, assets,
  executors, guardianship, instructions, validation and suggestion
  metadata, full data snapshot) plus the state of its rendered content
- AuditLog: append-only audit trail with integrity hashes

Rendered content is not stored here; see storage.py.
"""

import hashlib
import json
from enum import Enum as PyEnum

from legacywill import db
from legacywill.utils import utcnow


class WillStatus(PyEnum):
    """Will lifecycle states chosen by the user."""
    DRAFT = 'draft'
    REVIEW = 'review'
    COMPLETED = 'completed'
    WITNESSED = 'witnessed'
    NOTARIZED = 'notarized'
    ARCHIVED = 'archived'


class ContentStatus(PyEnum):
    """State of the rendered content belonging to a record."""
    PENDING = 'pending'    # record written, content not confirmed yet
    READY = 'ready'        # content_version is stored and matches the record
    STALE = 'stale'        # data edited since the last generation
    DELETING = 'deleting'  # deletion started; content may be partly removed


class WillRecord(db.Model):
    """
    Structured will row. JSON columns are stored with stable key ordering.
    """
    __tablename__ = 'wills'

    JSON_FIELDS = (
        'testator', 'beneficiaries', 'asset_distributions', 'executor_appointments',
        'guardianship_appointments', 'special_instructions', 'suggestions', 'validation',
        'user_data', 'preferences',
    )

    id = db.Column(db.String(36), primary_key=True)
    user_id = db.Column(db.String(100), nullable=False, index=True)

    # Classification
    will_type = db.Column(db.String(20), nullable=False)
    record_will_type = db.Column(db.String(20), nullable=False)
    status = db.Column(db.String(20), default=WillStatus.DRAFT.value, nullable=False)
    version = db.Column(db.Integer, default=1, nullable=False)

    # Jurisdiction
    jurisdiction = db.Column(db.String(2), nullable=False)
    language = db.Column(db.String(2), nullable=False)
    legal_framework = db.Column(db.String(100), nullable=True)
    template_id = db.Column(db.String(50), nullable=True)

    # Structured data (JSON)
    testator_json = db.Column(db.Text, nullable=True)
    beneficiaries_json = db.Column(db.Text, nullable=True)
    asset_distributions_json = db.Column(db.Text, nullable=True)
    executor_appointments_json = db.Column(db.Text, nullable=True)
    guardianship_appointments_json = db.Column(db.Text, nullable=True)
    special_instructions_json = db.Column(db.Text, nullable=True)

    # Pipeline output (JSON)
    suggestions_json = db.Column(db.Text, nullable=True)
    validation_json = db.Column(db.Text, nullable=True)
    completeness_score = db.Column(db.Integer, default=0, nullable=False)
    is_valid = db.Column(db.Boolean, default=False, nullable=False)

    # Full snapshot used for regeneration
    user_data_json = db.Column(db.Text, nullable=False)
    preferences_json = db.Column(db.Text, nullable=True)

    # Rendered content state
    content_status = db.Column(db.String(20), default=ContentStatus.PENDING.value, nullable=False)
    content_version = db.Column(db.Integer, default=0, nullable=False)
    content_checksum = db.Column(db.String(64), nullable=True)

    # Timestamps
    generated_at = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    def __repr__(self):
        return f'<WillRecord {self.id} v{self.version} - {self.status}/{self.content_status}>'

    def get_json(self, name):
        """Deserialize a JSON column by field name."""
        raw = getattr(self, f'{name}_json')
        return json.loads(raw) if raw else None

    def set_json(self, name, value):
        """Serialize a value into a JSON column with stable ordering."""
        setattr(self, f'{name}_json', json.dumps(value, sort_keys=True) if value is not None else None)

    def to_dict(self):
        """Convert the record to a dictionary for API responses."""
        data = {
            'id': self.id,
            'user_id': self.user_id,
            'will_type': self.will_type,
            'record_will_type': self.record_will_type,
            'status': self.status,
            'version': self.version,
            'jurisdiction': self.jurisdiction,
            'language': self.language,
            'legal_framework': self.legal_framework,
            'template_id': self.template_id,
            'completeness_score': self.completeness_score,
            'is_valid': self.is_valid,
            'content_status': self.content_status,
            'content_version': self.content_version,
            'content_checksum': self.content_checksum,
            'generated_at': self.generated_at.isoformat() if self.generated_at else None,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
        for name in self.JSON_FIELDS:
            data[name] = self.get_json(name)
        return data


class AuditLog(db.Model):
    """
    Immutable audit trail for all significant actions.

    This table is append-only. Records are never modified or deleted, and
    they outlive the will they describe (no foreign key).
    """
    __tablename__ = 'audit_logs'

    id = db.Column(db.Integer, primary_key=True)

    # When the action occurred
    timestamp = db.Column(db.DateTime, default=utcnow, nullable=False)

    # Who performed the action
    actor_type = db.Column(db.String(20), nullable=False)  # 'user', 'system'
    actor_id = db.Column(db.String(100), nullable=True)

    # What was done
    action = db.Column(db.String(50), nullable=False)
    action_category = db.Column(db.String(20), nullable=False)

    # What was affected
    will_id = db.Column(db.String(36), nullable=True, index=True)
    resource_type = db.Column(db.String(50), nullable=False)
    resource_id = db.Column(db.String(100), nullable=True)

    # Details (structured JSON)
    details_json = db.Column(db.Text, nullable=True)

    # Outcome
    success = db.Column(db.Boolean, nullable=False)
    error_message = db.Column(db.Text, nullable=True)

    # Request context
    ip_address = db.Column(db.String(45), nullable=True)
    user_agent = db.Column(db.String(500), nullable=True)

    # Integrity hash (prevents tampering)
    integrity_hash = db.Column(db.String(64), nullable=False)

    def __repr__(self):
        return f'<AuditLog {self.id} - {self.action} by {self.actor_type}>'

    def to_dict(self):
        """Convert audit log to dictionary."""
        return {
            'id': self.id,
            'timestamp': self.timestamp.isoformat(),
            'actor_type': self.actor_type,
            'actor_id': self.actor_id,
            'action': self.action,
            'action_category': self.action_category,
            'resource_type': self.resource_type,
            'resource_id': self.resource_id,
            'will_id': self.will_id,
            'details': json.loads(self.details_json) if self.details_json else None,
            'success': self.success,
            'error_message': self.error_message
        }

    def compute_integrity_hash(self):
        """Compute hash of this record's content for tamper detection."""
        content = (
            f'{self.timestamp}{self.actor_type}{self.actor_id}{self.action}'
            f'{self.will_id}{self.resource_type}{self.resource_id}{self.details_json}{self.success}'
        )
        return hashlib.sha256(content.encode()).hexdigest()

    def verify_integrity(self):
        """Verify this record has not been tampered with."""
        return self.integrity_hash == self.compute_integrity_hash()
