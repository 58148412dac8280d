"""
Template Library

A WillTemplate binds a jurisdiction, a will type and a document language
to the section layout, the legal clauses (with their legal basis) and the
phrase catalog used by the renderer.

Templates are built on first use and cached per (jurisdiction, will type,
language). Unsupported combinations raise configuration errors; they are
never silently replaced by another jurisdiction or language.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from legacywill.clause_logic import ClauseKind, SectionId, SECTION_ORDER
from legacywill.jurisdictions import (
    ConfigurationError, JurisdictionConfig, Language, UnsupportedLanguageError,
    UnsupportedWillTypeError, WillType,
    REFERENCE_CAPACITY, REFERENCE_FORCED_HEIRSHIP, REFERENCE_FORMS, REFERENCE_REVOCATION,
)
from legacywill.phrases import PHRASE_CATALOGS


TEMPLATE_VERSION = '1.0'


class TemplateNotFoundError(ConfigurationError):
    """No phrase catalog exists for the requested language."""

    def __init__(self, jurisdiction: str, will_type: str, language: str):
        self.jurisdiction = jurisdiction
        self.will_type = will_type
        self.language = language
        super().__init__(f'No will template for {jurisdiction}/{will_type}/{language}')


@dataclass(frozen=True)
class LegalClause:
    id: str
    kind: ClauseKind
    phrase_key: str
    condition: Optional[str] = None
    legal_basis: Optional[str] = None


@dataclass(frozen=True)
class TemplateSection:
    id: SectionId
    title_key: Optional[str]


@dataclass(frozen=True)
class WillTemplate:
    id: str
    jurisdiction: str
    will_type: WillType
    language: Language
    version: str
    sections: Tuple[TemplateSection, ...]
    legal_clauses: Tuple[LegalClause, ...]
    phrases: Mapping[str, str]

    def phrase(self, key: str, style: Optional[str] = None, **values: Any) -> str:
        """
        Look up a phrase and substitute its named fields.

        Args:
            key: Catalog key
            style: Language style; "<key>@<style>" wins over the plain key
            **values: Values for the placeholders

        Returns:
            The formatted phrase

        Raises:
            KeyError: If the catalog has no such phrase
        """
        text = None
        if style:
            text = self.phrases.get(f'{key}@{style}')
        if text is None:
            text = self.phrases[key]
        return text.format(**values) if values else text

    def section_title(self, section_id: SectionId) -> str:
        for section in self.sections:
            if section.id == section_id and section.title_key:
                return self.phrase(section.title_key)
        return ''


_SECTION_TITLE_KEYS: Dict[SectionId, Optional[str]] = {
    SectionId.HEADER: None,
    SectionId.DECLARATIONS: 'section.declarations',
    SectionId.BENEFICIARIES: 'section.beneficiaries',
    SectionId.ASSET_DISTRIBUTION: 'section.asset_distribution',
    SectionId.EXECUTORS: 'section.executors',
    SectionId.GUARDIANSHIP: 'section.guardianship',
    SectionId.SPECIAL_INSTRUCTIONS: 'section.special_instructions',
    SectionId.FOOTER: 'section.execution',
}


def build_legal_clauses(config: JurisdictionConfig) -> Tuple[LegalClause, ...]:
    """Legal clauses of a jurisdiction, in document order."""
    framework = config.legal_framework
    return (
        LegalClause('revocation', ClauseKind.MANDATORY, 'clause.revocation',
                    legal_basis=config.legal_reference(REFERENCE_REVOCATION) or framework),
        LegalClause('capacity', ClauseKind.MANDATORY, 'clause.capacity',
                    legal_basis=config.legal_reference(REFERENCE_CAPACITY) or framework),
        LegalClause('governing_law', ClauseKind.MANDATORY, 'clause.governing_law',
                    legal_basis=config.legal_reference(REFERENCE_FORMS) or framework),
        LegalClause('forced_heirship', ClauseKind.CONDITIONAL, 'clause.forced_heirship',
                    condition='forced_heirship',
                    legal_basis=config.legal_reference(REFERENCE_FORCED_HEIRSHIP)),
        LegalClause('residuary', ClauseKind.MANDATORY, 'clause.residuary'),
        LegalClause('survivorship', ClauseKind.OPTIONAL, 'clause.survivorship',
                    condition='has_alternate_beneficiary'),
        LegalClause('executor_powers', ClauseKind.CONDITIONAL, 'clause.executor_powers',
                    condition='has_executors'),
        LegalClause('tax', ClauseKind.CONDITIONAL, 'clause.tax',
                    condition='inheritance_tax'),
        LegalClause('digital_assets', ClauseKind.OPTIONAL, 'clause.digital_assets',
                    condition='has_digital_assets'),
    )


class TemplateLibrary:
    """Builds and caches will templates."""

    def __init__(self, catalogs: Optional[Mapping[str, Mapping[str, str]]] = None,
                 version: str = TEMPLATE_VERSION):
        self._catalogs = PHRASE_CATALOGS if catalogs is None else catalogs
        self._version = version
        self._cache: Dict[Tuple[str, WillType, Language], Tuple[JurisdictionConfig, WillTemplate]] = {}

    def get_template(self, config: JurisdictionConfig, will_type: Any, language: Any) -> WillTemplate:
        """
        Template for a jurisdiction, will type and language.

        Args:
            config: Jurisdiction configuration
            will_type: WillType or its code
            language: Language or its code

        Returns:
            The cached or newly built WillTemplate

        Raises:
            UnsupportedWillTypeError: Will type unknown or not allowed in the jurisdiction
            UnsupportedLanguageError: Language unknown or not supported by the jurisdiction
            TemplateNotFoundError: No phrase catalog for the language
        """
        try:
            resolved_type = WillType(will_type)
        except ValueError:
            raise UnsupportedWillTypeError(config.code, will_type) from None
        if resolved_type not in config.supported_will_types:
            raise UnsupportedWillTypeError(config.code, will_type)

        try:
            resolved_language = Language(language)
        except ValueError:
            raise UnsupportedLanguageError(config.code, language) from None
        if resolved_language not in config.supported_languages:
            raise UnsupportedLanguageError(config.code, language)

        key = (config.code, resolved_type, resolved_language)
        cached = self._cache.get(key)
        # a different config under the same code gets its own clauses
        if cached is None or cached[0] != config:
            cached = (config, self._build(config, resolved_type, resolved_language))
            self._cache[key] = cached
        return cached[1]

    def _build(self, config: JurisdictionConfig, will_type: WillType, language: Language) -> WillTemplate:
        catalog = self._catalogs.get(language.value)
        if catalog is None:
            raise TemplateNotFoundError(config.code, will_type.value, language.value)

        return WillTemplate(
            id=f'{config.code.lower()}-{will_type.value}-{language.value}',
            jurisdiction=config.code,
            will_type=will_type,
            language=language,
            version=self._version,
            sections=tuple(TemplateSection(s, _SECTION_TITLE_KEYS[s]) for s in SECTION_ORDER),
            legal_clauses=build_legal_clauses(config),
            phrases=MappingProxyType(dict(catalog)),
        )
