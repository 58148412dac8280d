"""
Jurisdiction Registry

Immutable per-jurisdiction configuration: testamentary capacity, witness
and notarization rules, holographic-will eligibility, forced heirship,
revocation rules, formal requirements, supported languages and will types,
inheritance tax information and notary-body metadata.

Configurations are built once from the plain tables in JURISDICTION_DATA and
looked up through an explicitly constructed JurisdictionRegistry. Unknown
codes are configuration errors and are never defaulted.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple


class ConfigurationError(Exception):
    """Unknown jurisdiction, language, will type or template."""


class JurisdictionNotFoundError(ConfigurationError, LookupError):
    def __init__(self, code: Any):
        super().__init__(f'Unknown jurisdiction code: {code!r}')
        self.code = code


class UnsupportedLanguageError(ConfigurationError, ValueError):
    def __init__(self, jurisdiction: str, language: Any):
        super().__init__(f'Language {language!r} is not supported in jurisdiction {jurisdiction}')
        self.jurisdiction = jurisdiction
        self.language = language


class UnsupportedWillTypeError(ConfigurationError, ValueError):
    def __init__(self, jurisdiction: str, will_type: Any):
        super().__init__(f'Will type {will_type!r} is not supported in jurisdiction {jurisdiction}')
        self.jurisdiction = jurisdiction
        self.will_type = will_type


class WillType(str, Enum):
    """Form of the will document."""
    HOLOGRAPHIC = 'holographic'
    ALLOGRAPHIC = 'allographic'
    NOTARIAL = 'notarial'
    WITNESSED = 'witnessed'


class Language(str, Enum):
    """Document languages with a phrase catalog."""
    CS = 'cs'
    SK = 'sk'
    EN = 'en'
    DE = 'de'


# Witness restriction codes
RESTRICTION_NOT_BENEFICIARY = 'not_beneficiary'
RESTRICTION_ADULT = 'adult'
RESTRICTION_MENTALLY_CAPABLE = 'mentally_capable'
RESTRICTION_SIMULTANEOUS_PRESENCE = 'simultaneous_presence'

# Formal requirement codes
FORMALITY_HANDWRITTEN = 'handwritten'
FORMALITY_SIGNED = 'signed'
FORMALITY_DATED = 'dated'
FORMALITY_PERSONAL_HANDWRITING = 'personal_handwriting_required'
FORMALITY_MINORS_NOTARIAL_ONLY = 'minors_notarial_only'

# Keys of JurisdictionConfig.legal_references
REFERENCE_CAPACITY = 'capacity'
REFERENCE_FORMS = 'forms'
REFERENCE_WITNESSES = 'witnesses'
REFERENCE_FORCED_HEIRSHIP = 'forced_heirship'
REFERENCE_REVOCATION = 'revocation'
REFERENCE_GUARDIANSHIP = 'guardianship'


@dataclass(frozen=True)
class WitnessRequirements:
    required: bool = False
    minimum_count: int = 0
    restrictions: Tuple[str, ...] = ()


@dataclass(frozen=True)
class NotarizationRules:
    required: bool = False
    optional: bool = True
    circumstances: Tuple[str, ...] = ()


@dataclass(frozen=True)
class LegalRequirements:
    minimum_age: int
    witnesses: WitnessRequirements
    notarization: NotarizationRules
    holographic_allowed: bool
    forced_heirship: bool
    revocation_rules: Tuple[str, ...] = ()
    formal_requirements: Tuple[str, ...] = ()
    age_of_majority: int = 18


@dataclass(frozen=True)
class TaxRate:
    relationship: str
    threshold: float
    rate: float


@dataclass(frozen=True)
class TaxInfo:
    inheritance_tax: bool = False
    rates: Tuple[TaxRate, ...] = ()
    exemptions: Tuple[str, ...] = ()
    notes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class NotaryInfo:
    organization: str
    search_url: str
    verification_required: bool
    fee_min: float
    fee_max: float
    fee_currency: str


@dataclass(frozen=True)
class WillTypeSupport:
    types: FrozenSet[WillType]
    default: WillType


@dataclass(frozen=True)
class JurisdictionConfig:
    """Legal rule set of one jurisdiction. Never mutated after construction."""
    code: str
    country_names: Mapping[str, str]
    primary_language: Language
    supported_languages: Tuple[Language, ...]
    supported_will_types: Tuple[WillType, ...]
    default_will_type: WillType
    requirements: LegalRequirements
    tax: TaxInfo
    currency: str
    legal_framework: str
    notary: Optional[NotaryInfo] = None
    legal_references: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'JurisdictionConfig':
        """Build a configuration from a plain table entry."""
        code = str(data['code']).upper()
        legal = data['legal_requirements']
        witnesses = legal.get('witness_requirements', {})
        notarization = legal.get('notarization', {})
        tax = data.get('tax_info', {})
        notary = data.get('notary')

        languages = tuple(Language(lang) for lang in data['supported_languages'])
        primary = Language(data.get('primary_language', languages[0].value))
        if primary not in languages:
            raise ValueError(f'{code}: primary language {primary.value} is not in supported languages')
        # primary language always first
        languages = (primary,) + tuple(lang for lang in languages if lang != primary)

        will_types = tuple(WillType(t) for t in data['supported_will_types'])
        default_will_type = WillType(data.get('default_will_type', will_types[0].value))
        if default_will_type not in will_types:
            raise ValueError(f'{code}: default will type {default_will_type.value} is not supported')

        return cls(
            code=code,
            country_names=MappingProxyType(dict(data.get('country_names', {}))),
            primary_language=primary,
            supported_languages=languages,
            supported_will_types=will_types,
            default_will_type=default_will_type,
            requirements=LegalRequirements(
                minimum_age=int(legal['minimum_age']),
                age_of_majority=int(legal.get('age_of_majority', 18)),
                witnesses=WitnessRequirements(
                    required=bool(witnesses.get('required', False)),
                    minimum_count=int(witnesses.get('minimum_count', 0)),
                    restrictions=tuple(witnesses.get('restrictions', ())),
                ),
                notarization=NotarizationRules(
                    required=bool(notarization.get('required', False)),
                    optional=bool(notarization.get('optional', True)),
                    circumstances=tuple(notarization.get('circumstances', ())),
                ),
                holographic_allowed=bool(legal.get('holographic_allowed', False)),
                forced_heirship=bool(legal.get('forced_heirship', False)),
                revocation_rules=tuple(legal.get('revocation_rules', ())),
                formal_requirements=tuple(legal.get('formal_requirements', ())),
            ),
            tax=TaxInfo(
                inheritance_tax=bool(tax.get('inheritance_tax', False)),
                rates=tuple(
                    TaxRate(r['relationship'], float(r['threshold']), float(r['rate']))
                    for r in tax.get('rates', ())
                ),
                exemptions=tuple(tax.get('exemptions', ())),
                notes=tuple(tax.get('notes', ())),
            ),
            currency=data.get('currency', 'EUR'),
            legal_framework=data.get('legal_framework', f'{code} Civil Code'),
            notary=NotaryInfo(
                organization=notary['organization'],
                search_url=notary['search_url'],
                verification_required=bool(notary.get('verification_required', False)),
                fee_min=float(notary['fee_min']),
                fee_max=float(notary['fee_max']),
                fee_currency=notary['fee_currency'],
            ) if notary else None,
            legal_references=MappingProxyType(dict(data.get('legal_references', {}))),
        )

    def country_name(self, language: Any = None) -> str:
        """Country name in the requested language, else English, else the code."""
        key = language.value if isinstance(language, Language) else language
        return (
            self.country_names.get(key or '')
            or self.country_names.get('en')
            or self.code
        )

    def legal_reference(self, key: str) -> Optional[str]:
        return self.legal_references.get(key)

    def requires_witnesses(self, will_type: Optional[WillType] = None) -> bool:
        """Witnesses are needed by jurisdiction rule or by the witness-based will forms."""
        if self.requirements.witnesses.required:
            return True
        return will_type in (WillType.WITNESSED, WillType.ALLOGRAPHIC)

    def minimum_witnesses(self, will_type: Optional[WillType] = None) -> int:
        if not self.requires_witnesses(will_type):
            return 0
        count = self.requirements.witnesses.minimum_count
        # witness-based forms need two witnesses when the table names no count
        return count if count > 0 else 2

    def to_dict(self) -> Dict[str, Any]:
        req = self.requirements
        return {
            'code': self.code,
            'country_names': dict(self.country_names),
            'primary_language': self.primary_language.value,
            'supported_languages': [lang.value for lang in self.supported_languages],
            'supported_will_types': [t.value for t in self.supported_will_types],
            'default_will_type': self.default_will_type.value,
            'currency': self.currency,
            'legal_framework': self.legal_framework,
            'legal_requirements': {
                'minimum_age': req.minimum_age,
                'age_of_majority': req.age_of_majority,
                'witness_requirements': {
                    'required': req.witnesses.required,
                    'minimum_count': req.witnesses.minimum_count,
                    'restrictions': list(req.witnesses.restrictions),
                },
                'notarization': {
                    'required': req.notarization.required,
                    'optional': req.notarization.optional,
                    'circumstances': list(req.notarization.circumstances),
                },
                'holographic_allowed': req.holographic_allowed,
                'forced_heirship': req.forced_heirship,
                'revocation_rules': list(req.revocation_rules),
                'formal_requirements': list(req.formal_requirements),
            },
            'tax_info': {
                'inheritance_tax': self.tax.inheritance_tax,
                'rates': [
                    {'relationship': r.relationship, 'threshold': r.threshold, 'rate': r.rate}
                    for r in self.tax.rates
                ],
                'exemptions': list(self.tax.exemptions),
                'notes': list(self.tax.notes),
            },
            'notary': {
                'organization': self.notary.organization,
                'search_url': self.notary.search_url,
                'verification_required': self.notary.verification_required,
                'fee_min': self.notary.fee_min,
                'fee_max': self.notary.fee_max,
                'fee_currency': self.notary.fee_currency,
            } if self.notary else None,
            'legal_references': dict(self.legal_references),
        }


class JurisdictionRegistry:
    """Read-only lookup of jurisdiction configurations by two-letter code."""

    def __init__(self, configs: Iterable[JurisdictionConfig]):
        self._configs: Dict[str, JurisdictionConfig] = {}
        for config in configs:
            if config.code in self._configs:
                raise ValueError(f'Duplicate jurisdiction code: {config.code}')
            self._configs[config.code] = config

    @classmethod
    def from_tables(cls, tables: Iterable[Dict[str, Any]]) -> 'JurisdictionRegistry':
        return cls(JurisdictionConfig.from_dict(table) for table in tables)

    def __contains__(self, code: Any) -> bool:
        return isinstance(code, str) and code.upper() in self._configs

    def __len__(self) -> int:
        return len(self._configs)

    def codes(self) -> List[str]:
        return sorted(self._configs)

    def get_config(self, code: Any) -> JurisdictionConfig:
        """
        Look up a jurisdiction.

        Raises:
            JurisdictionNotFoundError: for unknown or non-string codes
        """
        if not isinstance(code, str):
            raise JurisdictionNotFoundError(code)
        try:
            return self._configs[code.strip().upper()]
        except KeyError:
            raise JurisdictionNotFoundError(code) from None

    def supported_languages(self, code: Any) -> List[Language]:
        """Supported languages, primary language first."""
        return list(self.get_config(code).supported_languages)

    def supported_will_types(self, code: Any) -> WillTypeSupport:
        config = self.get_config(code)
        return WillTypeSupport(
            types=frozenset(config.supported_will_types),
            default=config.default_will_type,
        )

    def resolve_language(self, code: Any, language: Any) -> Language:
        config = self.get_config(code)
        try:
            resolved = Language(language)
        except ValueError:
            raise UnsupportedLanguageError(config.code, language) from None
        if resolved not in config.supported_languages:
            raise UnsupportedLanguageError(config.code, language)
        return resolved

    def resolve_will_type(self, code: Any, will_type: Any = None) -> WillType:
        """Resolve a will type; None selects the jurisdiction's default."""
        config = self.get_config(code)
        if will_type is None:
            return config.default_will_type
        try:
            resolved = WillType(will_type)
        except ValueError:
            raise UnsupportedWillTypeError(config.code, will_type) from None
        if resolved not in config.supported_will_types:
            raise UnsupportedWillTypeError(config.code, will_type)
        return resolved


JURISDICTION_DATA: Tuple[Dict[str, Any], ...] = (
    {
        'code': 'CZ',
        'country_names': {
            'cs': 'Česká republika',
            'sk': 'Česká republika',
            'en': 'Czech Republic',
            'de': 'Tschechische Republik',
        },
        'supported_languages': ['cs', 'sk', 'en', 'de'],
        'primary_language': 'cs',
        'supported_will_types': ['holographic', 'witnessed', 'notarial'],
        'default_will_type': 'holographic',
        'currency': 'CZK',
        'legal_framework': 'CZ Civil Code',
        'legal_requirements': {
            'minimum_age': 18,
            'age_of_majority': 18,
            'witness_requirements': {
                'required': False,
                'minimum_count': 2,
                'restrictions': ['not_beneficiary', 'adult', 'mentally_capable'],
            },
            'notarization': {
                'required': False,
                'optional': True,
                'circumstances': ['complex_assets', 'international_assets', 'business_succession'],
            },
            'holographic_allowed': True,
            'forced_heirship': True,
            'revocation_rules': ['explicit_revocation', 'new_will_supersedes', 'marriage_revokes_partial'],
            'formal_requirements': ['handwritten', 'signed', 'dated'],
        },
        'tax_info': {
            'inheritance_tax': False,
            'rates': [],
            'exemptions': ['close_relatives'],
            'notes': ['No inheritance tax between spouses, children, and parents'],
        },
        'notary': {
            'organization': 'Notářská komora České republiky',
            'search_url': 'https://www.nkcr.cz',
            'verification_required': True,
            'fee_min': 1000,
            'fee_max': 5000,
            'fee_currency': 'CZK',
        },
        'legal_references': {
            'capacity': 'Act No. 89/2012 Coll., Civil Code, § 1525 et seq.',
            'forms': 'Act No. 89/2012 Coll., Civil Code, §§ 1533-1535',
            'witnesses': 'Act No. 89/2012 Coll., Civil Code, §§ 1539-1541',
            'forced_heirship': 'Act No. 89/2012 Coll., Civil Code, §§ 1642-1650',
            'revocation': 'Act No. 89/2012 Coll., Civil Code, §§ 1575-1578',
            'guardianship': 'Act No. 89/2012 Coll., Civil Code, § 931',
        },
    },
    {
        'code': 'SK',
        'country_names': {
            'sk': 'Slovenská republika',
            'cs': 'Slovenská republika',
            'en': 'Slovak Republic',
            'de': 'Slowakische Republik',
        },
        'supported_languages': ['sk', 'cs', 'en', 'de'],
        'primary_language': 'sk',
        'supported_will_types': ['holographic', 'witnessed', 'notarial'],
        'default_will_type': 'holographic',
        'currency': 'EUR',
        'legal_framework': 'SK Civil Code',
        'legal_requirements': {
            'minimum_age': 18,
            'age_of_majority': 18,
            'witness_requirements': {
                'required': False,
                'minimum_count': 2,
                'restrictions': ['not_beneficiary', 'adult', 'mentally_capable', 'simultaneous_presence'],
            },
            'notarization': {
                'required': False,
                'optional': True,
                'circumstances': ['international_validity', 'complex_estate'],
            },
            'holographic_allowed': True,
            'forced_heirship': True,
            'revocation_rules': ['explicit_revocation', 'new_will_supersedes', 'material_change_in_circumstances'],
            'formal_requirements': ['handwritten', 'signed', 'dated', 'personal_handwriting_required'],
        },
        'tax_info': {
            'inheritance_tax': False,
            'rates': [],
            'exemptions': ['all_heirs'],
            'notes': ['No inheritance tax in Slovakia'],
        },
        'notary': {
            'organization': 'Notárska komora Slovenskej republiky',
            'search_url': 'https://www.notar.sk',
            'verification_required': True,
            'fee_min': 50,
            'fee_max': 300,
            'fee_currency': 'EUR',
        },
        'legal_references': {
            'capacity': 'Act No. 40/1964 Coll., Civil Code, § 476',
            'forms': 'Act No. 40/1964 Coll., Civil Code, §§ 476a-476c',
            'witnesses': 'Act No. 40/1964 Coll., Civil Code, §§ 476b, 476d',
            'forced_heirship': 'Act No. 40/1964 Coll., Civil Code, § 479',
            'revocation': 'Act No. 40/1964 Coll., Civil Code, § 480',
            'guardianship': 'Act No. 36/2005 Coll., Family Act',
        },
    },
    {
        'code': 'AT',
        'country_names': {
            'de': 'Österreich',
            'en': 'Austria',
            'cs': 'Rakousko',
            'sk': 'Rakúsko',
        },
        'supported_languages': ['de', 'en'],
        'primary_language': 'de',
        'supported_will_types': ['holographic', 'allographic', 'notarial'],
        'default_will_type': 'holographic',
        'currency': 'EUR',
        'legal_framework': 'AT Civil Code (ABGB)',
        'legal_requirements': {
            'minimum_age': 18,
            'age_of_majority': 18,
            'witness_requirements': {
                'required': False,
                'minimum_count': 3,
                'restrictions': ['not_beneficiary', 'adult', 'mentally_capable', 'simultaneous_presence'],
            },
            'notarization': {
                'required': False,
                'optional': True,
                'circumstances': ['international_assets', 'complex_estate'],
            },
            'holographic_allowed': True,
            'forced_heirship': True,
            'revocation_rules': ['explicit_revocation', 'new_will_supersedes', 'destruction_of_document'],
            'formal_requirements': ['handwritten', 'signed'],
        },
        'tax_info': {
            'inheritance_tax': False,
            'rates': [],
            'exemptions': ['all_heirs'],
            'notes': ['Inheritance tax abolished in 2008; real estate transfer tax may apply'],
        },
        'notary': {
            'organization': 'Österreichische Notariatskammer',
            'search_url': 'https://www.notar.at',
            'verification_required': True,
            'fee_min': 150,
            'fee_max': 1500,
            'fee_currency': 'EUR',
        },
        'legal_references': {
            'capacity': 'ABGB §§ 566-569',
            'forms': 'ABGB §§ 578-583',
            'witnesses': 'ABGB §§ 579, 587-588',
            'forced_heirship': 'ABGB §§ 756-776',
            'revocation': 'ABGB §§ 713-719',
            'guardianship': 'ABGB § 204',
        },
    },
    {
        'code': 'DE',
        'country_names': {
            'de': 'Deutschland',
            'en': 'Germany',
            'cs': 'Německo',
            'sk': 'Nemecko',
        },
        'supported_languages': ['de', 'en'],
        'primary_language': 'de',
        'supported_will_types': ['holographic', 'notarial'],
        'default_will_type': 'holographic',
        'currency': 'EUR',
        'legal_framework': 'DE Civil Code (BGB)',
        'legal_requirements': {
            'minimum_age': 16,
            'age_of_majority': 18,
            'witness_requirements': {
                'required': False,
                'minimum_count': 0,
                'restrictions': [],
            },
            'notarization': {
                'required': False,
                'optional': True,
                'circumstances': ['real_estate', 'business_succession', 'complex_estate'],
            },
            'holographic_allowed': True,
            'forced_heirship': True,
            'revocation_rules': ['explicit_revocation', 'new_will_supersedes', 'destruction_of_document'],
            'formal_requirements': ['handwritten', 'signed', 'dated', 'minors_notarial_only'],
        },
        'tax_info': {
            'inheritance_tax': True,
            'rates': [
                {'relationship': 'spouse', 'threshold': 500000, 'rate': 7},
                {'relationship': 'child', 'threshold': 400000, 'rate': 7},
                {'relationship': 'grandchild', 'threshold': 200000, 'rate': 7},
                {'relationship': 'parent', 'threshold': 100000, 'rate': 7},
                {'relationship': 'sibling', 'threshold': 20000, 'rate': 15},
                {'relationship': 'other', 'threshold': 20000, 'rate': 30},
            ],
            'exemptions': ['charity', 'family_home'],
            'notes': ['Rates rise with the value transferred; figures are entry rates'],
        },
        'notary': {
            'organization': 'Bundesnotarkammer',
            'search_url': 'https://www.notar.de',
            'verification_required': True,
            'fee_min': 100,
            'fee_max': 3000,
            'fee_currency': 'EUR',
        },
        'legal_references': {
            'capacity': 'BGB § 2229',
            'forms': 'BGB §§ 2231-2233, 2247',
            'witnesses': 'BeurkG § 29',
            'forced_heirship': 'BGB §§ 2303-2338',
            'revocation': 'BGB §§ 2253-2258',
            'guardianship': 'BGB § 1782',
        },
    },
)


def build_default_registry() -> JurisdictionRegistry:
    """Registry of the shipped jurisdictions."""
    return JurisdictionRegistry.from_tables(JURISDICTION_DATA)
