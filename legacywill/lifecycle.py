"""
Will Lifecycle Service

Creates, regenerates, reads, updates and deletes stored wills. Each
generation runs the validator, the content generator and the advisory
engine over one WillUserData snapshot and persists the result through a
WillStore.

Write ordering:
- create: record (content pending) -> content v1 -> record marked ready.
  A failed content write removes the record again; if that removal fails
  too the record stays visible as pending.
- regenerate: content v(n+1) -> record bumped to n+1. A failed record
  update removes the new content, so version n stays current.
- delete: record marked deleting -> all content -> record.
"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from legacywill.content_generator import GeneratedContent, generate, verify_checksum
from legacywill.execution_checklist import ExecutionInstructions
from legacywill.jurisdictions import JurisdictionConfig, JurisdictionRegistry, Language, WillType
from legacywill.models import ContentStatus, WillStatus
from legacywill.storage import WillStore
from legacywill.suggestions import AISuggestion, suggest
from legacywill.templates import TemplateLibrary, WillTemplate
from legacywill.utils import utcnow
from legacywill.validation import WillValidationResult, validate
from legacywill.will_data import (
    GenerationPreferences, WillUserData, beneficiary_category, record_will_type,
)


logger = logging.getLogger(__name__)

UserDataInput = Union[WillUserData, Mapping[str, Any]]
PreferencesInput = Union[GenerationPreferences, Mapping[str, Any], None]


class WillNotFoundError(LookupError):
    """Will does not exist or belongs to another user."""

    def __init__(self, will_id: str):
        super().__init__(f'Will not found: {will_id}')
        self.will_id = will_id


@dataclass(frozen=True)
class WillMetadata:
    generated_at: datetime
    version: int
    word_count: int
    page_count: int
    checksum: str
    template_version: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'generated_at': self.generated_at.isoformat(),
            'version': self.version,
            'word_count': self.word_count,
            'page_count': self.page_count,
            'checksum': self.checksum,
            'template_version': self.template_version,
        }


@dataclass(frozen=True)
class GeneratedWill:
    """Snapshot of one generation of a will."""
    will_id: str
    user_id: str
    version: int
    jurisdiction: str
    language: Language
    will_type: WillType
    template_id: str
    user_data: WillUserData
    content: Dict[str, str]
    metadata: WillMetadata
    validation: WillValidationResult
    suggestions: List[AISuggestion] = field(default_factory=list)
    execution_instructions: Optional[ExecutionInstructions] = None
    legal_disclaimer: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'will_id': self.will_id,
            'user_id': self.user_id,
            'version': self.version,
            'jurisdiction': self.jurisdiction,
            'language': self.language.value,
            'will_type': self.will_type.value,
            'template_id': self.template_id,
            'user_data': self.user_data.to_dict(),
            'content': dict(self.content),
            'metadata': self.metadata.to_dict(),
            'validation': self.validation.to_dict(),
            'suggestions': [s.to_dict() for s in self.suggestions],
            'execution_instructions': (
                self.execution_instructions.to_dict() if self.execution_instructions else None
            ),
            'legal_disclaimer': self.legal_disclaimer,
        }


@dataclass(frozen=True)
class _Generation:
    config: JurisdictionConfig
    template: WillTemplate
    will: WillUserData
    preferences: GenerationPreferences
    validation: WillValidationResult
    content: GeneratedContent
    suggestions: List[AISuggestion]


def _coerce_user_data(user_data: UserDataInput) -> WillUserData:
    if isinstance(user_data, WillUserData):
        return user_data
    return WillUserData.from_dict(user_data)


def _coerce_preferences(preferences: PreferencesInput) -> GenerationPreferences:
    if isinstance(preferences, GenerationPreferences):
        return preferences
    return GenerationPreferences.from_dict(preferences)


def _beneficiary_records(will: WillUserData) -> List[Dict[str, Any]]:
    records = []
    for beneficiary in will.beneficiaries:
        record = beneficiary.to_dict()
        record['category'] = (
            beneficiary_category(beneficiary.relationship).value if beneficiary.relationship else None
        )
        records.append(record)
    return records


def _asset_distributions(will: WillUserData) -> List[Dict[str, Any]]:
    """One entry per asset with the beneficiaries that name it."""
    distributions = []
    for asset in will.assets:
        recipients = []
        for beneficiary in will.beneficiaries:
            if asset.id and asset.id in beneficiary.share.asset_ids:
                recipients.append({
                    'beneficiary_id': beneficiary.id,
                    'name': beneficiary.name,
                    'share_type': beneficiary.share.type.value if beneficiary.share.type else None,
                    'value': beneficiary.share.value,
                })
        distributions.append({
            'asset_id': asset.id,
            'asset_type': asset.type.value if asset.type else None,
            'description': asset.description,
            'value': asset.value,
            'currency': asset.currency,
            'recipients': recipients,
            'residuary': not recipients,
        })
    return distributions


class WillLifecycleService:
    """
    Orchestrates generation and persistence of wills.

    Args:
        store: Persistence collaborator
        registry: Jurisdiction registry
        templates: Template library (a default library when omitted)
        clock: Returns the current UTC time
        id_factory: Returns a new will id
    """

    def __init__(self, store: WillStore, registry: JurisdictionRegistry,
                 templates: Optional[TemplateLibrary] = None,
                 clock: Optional[Callable[[], datetime]] = None,
                 id_factory: Optional[Callable[[], str]] = None):
        self.store = store
        self.registry = registry
        self.templates = templates or TemplateLibrary()
        self.clock = clock or utcnow
        self.id_factory = id_factory or (lambda: str(uuid.uuid4()))

    # Pipeline

    def _run(self, will: WillUserData, jurisdiction: str, language: Any, will_type: Any,
             preferences: GenerationPreferences, now: datetime) -> _Generation:
        # configuration errors surface here, before anything is written
        config = self.registry.get_config(jurisdiction)
        resolved_language = self.registry.resolve_language(config.code, language)
        resolved_type = self.registry.resolve_will_type(config.code, will_type)
        template = self.templates.get_template(config, resolved_type, resolved_language)

        validation = validate(will, config, resolved_type, as_of=now.date())
        content = generate(will, config, template, preferences)
        suggestions = suggest(will, config, resolved_type, as_of=now.date())

        return _Generation(config, template, will, preferences, validation, content, suggestions)

    def _record_fields(self, user_id: str, gen: _Generation, now: datetime) -> Dict[str, Any]:
        will = gen.will
        return {
            'user_id': user_id,
            'will_type': gen.template.will_type.value,
            'record_will_type': record_will_type(gen.template.will_type).value,
            'jurisdiction': gen.config.code,
            'language': gen.template.language.value,
            'legal_framework': gen.config.legal_framework,
            'template_id': gen.template.id,
            'testator': will.personal.to_dict(),
            'beneficiaries': _beneficiary_records(will),
            'asset_distributions': _asset_distributions(will),
            'executor_appointments': [e.to_dict() for e in will.executors],
            'guardianship_appointments': [g.to_dict() for g in will.guardians],
            'special_instructions': [s.to_dict() for s in will.special_instructions],
            'suggestions': [s.to_dict() for s in gen.suggestions],
            'validation': gen.validation.to_dict(),
            'completeness_score': gen.validation.completeness_score,
            'is_valid': gen.validation.is_valid,
            'user_data': will.to_dict(),
            'preferences': gen.preferences.to_dict(),
            'updated_at': now,
        }

    def _content_blob(self, gen: _Generation, version: int, now: datetime) -> Dict[str, Any]:
        blob = gen.content.to_dict()
        blob['version'] = version
        blob['generated_at'] = now.isoformat()
        blob['legal_disclaimer'] = gen.template.phrase('disclaimer')
        return blob

    def _generated_will(self, will_id: str, user_id: str, version: int, gen: _Generation,
                        now: datetime) -> GeneratedWill:
        return GeneratedWill(
            will_id=will_id,
            user_id=user_id,
            version=version,
            jurisdiction=gen.config.code,
            language=gen.template.language,
            will_type=gen.template.will_type,
            template_id=gen.template.id,
            user_data=gen.will,
            content={'text': gen.content.text, 'html': gen.content.html},
            metadata=WillMetadata(
                generated_at=now,
                version=version,
                word_count=gen.content.word_count,
                page_count=gen.content.page_count,
                checksum=gen.content.checksum,
                template_version=gen.content.template_version,
            ),
            validation=gen.validation,
            suggestions=list(gen.suggestions),
            execution_instructions=gen.content.execution_instructions,
            legal_disclaimer=gen.template.phrase('disclaimer'),
        )

    def _owned_record(self, user_id: str, will_id: str) -> Dict[str, Any]:
        record = self.store.get_record(will_id)
        if record is None or record.get('user_id') != user_id:
            raise WillNotFoundError(will_id)
        return record

    # Operations

    def create_will(self, user_id: str, user_data: UserDataInput, jurisdiction: str, language: Any,
                    will_type: Any = None, preferences: PreferencesInput = None) -> GeneratedWill:
        """
        Generate and persist a new will.

        Invalid wills are stored too; their validation result travels with
        the record.

        Raises:
            ConfigurationError: Unknown jurisdiction, language, will type or template
        """
        now = self.clock()
        gen = self._run(_coerce_user_data(user_data), jurisdiction, language, will_type,
                        _coerce_preferences(preferences), now)
        will_id = self.id_factory()
        version = 1

        fields = self._record_fields(user_id, gen, now)
        fields.update({
            'id': will_id,
            'status': WillStatus.DRAFT.value,
            'version': version,
            'content_status': ContentStatus.PENDING.value,
            'content_version': 0,
            'created_at': now,
        })
        self.store.insert_record(fields)

        try:
            self.store.save_content(will_id, version, self._content_blob(gen, version, now))
        except Exception:
            logger.error('Content write failed for will %s, removing record', will_id)
            try:
                self.store.delete_record(will_id)
            except Exception:
                logger.exception('Could not remove will %s after failed content write; '
                                 'record left pending', will_id)
            raise

        self.store.update_record(will_id, {
            'content_status': ContentStatus.READY.value,
            'content_version': version,
            'content_checksum': gen.content.checksum,
            'generated_at': now,
        })

        logger.info('Created will %s for user %s (%s/%s/%s, valid=%s, score=%d)',
                    will_id, user_id, gen.config.code, gen.template.will_type.value,
                    gen.template.language.value, gen.validation.is_valid,
                    gen.validation.completeness_score)
        return self._generated_will(will_id, user_id, version, gen, now)

    def regenerate_will(self, user_id: str, will_id: str) -> GeneratedWill:
        """
        Rebuild a will from its stored data snapshot as a new version.

        Raises:
            WillNotFoundError: Will missing or owned by another user
            ValueError: Will is being deleted
        """
        record = self._owned_record(user_id, will_id)
        if record.get('content_status') == ContentStatus.DELETING.value:
            raise ValueError(f'Will {will_id} is being deleted')

        now = self.clock()
        gen = self._run(
            WillUserData.from_dict(record.get('user_data')),
            record['jurisdiction'], record['language'], record['will_type'],
            GenerationPreferences.from_dict(record.get('preferences')),
            now,
        )
        version = int(record.get('version') or 0) + 1

        self.store.save_content(will_id, version, self._content_blob(gen, version, now))

        fields = self._record_fields(user_id, gen, now)
        fields.update({
            'version': version,
            'content_status': ContentStatus.READY.value,
            'content_version': version,
            'content_checksum': gen.content.checksum,
            'generated_at': now,
        })
        try:
            self.store.update_record(will_id, fields)
        except Exception:
            logger.error('Record update failed for will %s, discarding content v%d', will_id, version)
            try:
                self.store.delete_content_version(will_id, version)
            except Exception:
                logger.exception('Could not discard content v%d of will %s', version, will_id)
            raise

        logger.info('Regenerated will %s as version %d', will_id, version)
        return self._generated_will(will_id, user_id, version, gen, now)

    def get_will(self, user_id: str, will_id: str) -> Optional[Dict[str, Any]]:
        """Stored record, or None when missing or owned by another user."""
        record = self.store.get_record(will_id)
        if record is None or record.get('user_id') != user_id:
            return None
        return record

    def list_wills(self, user_id: str) -> List[Dict[str, Any]]:
        return self.store.list_records(user_id)

    def get_will_content(self, user_id: str, will_id: str,
                         version: Optional[int] = None) -> Optional[Dict[str, Any]]:
        """
        Stored content of a will.

        Args:
            user_id: Owner
            will_id: Will id
            version: Content version (the current one when omitted)

        Returns:
            The content blob, or None if that version is not stored

        Raises:
            WillNotFoundError: Will missing or owned by another user
        """
        record = self._owned_record(user_id, will_id)
        if version is None:
            version = record.get('content_version') or 0
        if version < 1:
            return None
        return self.store.load_content(will_id, version)

    def update_will(self, user_id: str, will_id: str, user_data: Optional[UserDataInput] = None,
                    preferences: PreferencesInput = None, status: Optional[str] = None,
                    language: Any = None, will_type: Any = None) -> Dict[str, Any]:
        """
        Store edits to a will and refresh its validation metadata.

        Content is not regenerated; edits that change the rendered output
        mark it stale until regenerate_will runs.

        Returns:
            The updated record

        Raises:
            WillNotFoundError: Will missing or owned by another user
            ValueError: Unknown status
            ConfigurationError: Unsupported language or will type
        """
        record = self._owned_record(user_id, will_id)
        config = self.registry.get_config(record['jurisdiction'])

        fields: Dict[str, Any] = {}
        content_changed = False

        if status is not None:
            try:
                fields['status'] = WillStatus(status).value
            except ValueError:
                raise ValueError(f'Unknown will status: {status}') from None

        current_language = record['language']
        if language is not None:
            resolved_language = self.registry.resolve_language(config.code, language)
            if resolved_language.value != current_language:
                content_changed = True
            current_language = resolved_language.value

        current_type = self.registry.resolve_will_type(config.code, record['will_type'])
        if will_type is not None:
            resolved_type = self.registry.resolve_will_type(config.code, will_type)
            if resolved_type != current_type:
                content_changed = True
            current_type = resolved_type

        will = WillUserData.from_dict(record.get('user_data'))
        if user_data is not None:
            new_will = _coerce_user_data(user_data)
            if new_will != will:
                content_changed = True
            will = new_will

        prefs = GenerationPreferences.from_dict(record.get('preferences'))
        if preferences is not None:
            new_prefs = _coerce_preferences(preferences)
            if new_prefs != prefs:
                content_changed = True
            prefs = new_prefs

        now = self.clock()
        if content_changed:
            template = self.templates.get_template(config, current_type, current_language)
            validation = validate(will, config, current_type, as_of=now.date())
            suggestions = suggest(will, config, current_type, as_of=now.date())
            fields.update({
                'will_type': current_type.value,
                'record_will_type': record_will_type(current_type).value,
                'language': current_language,
                'template_id': template.id,
                'testator': will.personal.to_dict(),
                'beneficiaries': _beneficiary_records(will),
                'asset_distributions': _asset_distributions(will),
                'executor_appointments': [e.to_dict() for e in will.executors],
                'guardianship_appointments': [g.to_dict() for g in will.guardians],
                'special_instructions': [s.to_dict() for s in will.special_instructions],
                'suggestions': [s.to_dict() for s in suggestions],
                'validation': validation.to_dict(),
                'completeness_score': validation.completeness_score,
                'is_valid': validation.is_valid,
                'user_data': will.to_dict(),
                'preferences': prefs.to_dict(),
                'content_status': ContentStatus.STALE.value,
            })

        if not fields:
            return record

        fields['updated_at'] = now
        self.store.update_record(will_id, fields)
        logger.info('Updated will %s (%s)%s', will_id, ', '.join(sorted(fields)),
                    ', content stale' if content_changed else '')
        return self.store.get_record(will_id)

    def delete_will(self, user_id: str, will_id: str) -> None:
        """
        Delete a will with all of its content versions.

        Raises:
            WillNotFoundError: Will missing or owned by another user
        """
        self._owned_record(user_id, will_id)

        self.store.update_record(will_id, {
            'content_status': ContentStatus.DELETING.value,
            'updated_at': self.clock(),
        })
        self.store.delete_content(will_id)
        self.store.delete_record(will_id)
        logger.info('Deleted will %s', will_id)

    def verify_will_content(self, user_id: str, will_id: str) -> bool:
        """
        Check the current content against the checksum stored on the record.

        Raises:
            WillNotFoundError: Will missing or owned by another user
        """
        record = self._owned_record(user_id, will_id)
        version = record.get('content_version') or 0
        if version < 1:
            return False
        content = self.store.load_content(will_id, version)
        if content is None:
            return False
        return verify_checksum(content.get('text', ''), record.get('content_checksum') or '')
