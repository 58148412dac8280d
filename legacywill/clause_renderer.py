"""
Section Renderer Module

Renders the selected sections into a unified document plan of content
blocks, then into plain text and HTML. The HTML form comes from the Jinja2
template will.html; the text form is built directly from the plan so that
it stays byte-stable for checksums.

Rendering never reads the clock: identical inputs produce identical output.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from jinja2 import Environment, PackageLoader, select_autoescape

from legacywill.clause_logic import (
    SectionId, get_section_flags, get_section_number, select_clauses, select_sections,
)
from legacywill.jurisdictions import JurisdictionConfig, Language, WillType
from legacywill.templates import LegalClause, WillTemplate
from legacywill.utils import format_amount, format_date, format_percentage, join_names, number_to_words
from legacywill.will_data import (
    Asset, Beneficiary, DetailLevel, ExecutorRole, GenerationPreferences, LanguageStyle,
    Priority, ShareType, WillUserData,
)


@dataclass
class ContentBlock:
    """A block of content within a section."""
    type: str  # 'heading1', 'heading2', 'paragraph', 'bullet_list', 'explanation', 'signature_block'
    content: Any
    style: str = 'normal'
    indent_level: int = 0


@dataclass
class DocumentPlanItem:
    """A section in the document plan."""
    id: str
    title: str
    numbering_level: int  # 0 for header/footer, 1 for numbered articles
    content_blocks: List[ContentBlock] = field(default_factory=list)
    section_number: int = 0


# Initialize Jinja environment
jinja_env = Environment(
    loader=PackageLoader('legacywill', 'templates'),
    autoescape=select_autoescape(['html', 'xml']),
    trim_blocks=True,
    lstrip_blocks=True
)

_PRIORITY_ORDER = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


@dataclass
class RenderContext:
    """Everything a section renderer needs."""
    will: WillUserData
    config: JurisdictionConfig
    template: WillTemplate
    preferences: GenerationPreferences
    flags: Dict[str, bool]
    clauses: List[LegalClause]

    @property
    def language(self) -> str:
        return self.template.language.value

    @property
    def detail(self) -> DetailLevel:
        return self.preferences.detail_level

    def phrase(self, key: str, **values: Any) -> str:
        return self.template.phrase(key, self.preferences.language_style.value, **values)

    def date(self, value: Any) -> str:
        return format_date(value, self.language)

    def amount(self, value: Any, currency: str = '') -> str:
        return format_amount(value, currency or self.config.currency, self.language)

    def share(self, value: Optional[float]) -> str:
        """Percentage text; traditional English drafting writes it out in words."""
        text = format_percentage(value)
        if (self.template.language == Language.EN
                and self.preferences.language_style == LanguageStyle.TRADITIONAL
                and value is not None and float(value) == int(value)):
            return f'{number_to_words(int(value))} per cent ({text})'
        return text

    def names(self, names: List[str]) -> str:
        return join_names(names, self.phrase('conjunction'))


def render_document_plan(will: WillUserData, config: JurisdictionConfig, template: WillTemplate,
                         preferences: Optional[GenerationPreferences] = None) -> List[DocumentPlanItem]:
    """
    Render the complete document plan.

    Args:
        will: The will data snapshot
        config: Jurisdiction configuration
        template: Template for the jurisdiction, will type and language
        preferences: Generation preferences

    Returns:
        List of document plan items (sections with content blocks)
    """
    preferences = preferences or GenerationPreferences()
    flags = get_section_flags(will, config, template.will_type)
    context = RenderContext(
        will=will,
        config=config,
        template=template,
        preferences=preferences,
        flags=flags,
        clauses=select_clauses(template, flags, preferences),
    )

    section_ids = select_sections(flags)
    document_plan = []
    for section_id in section_ids:
        number = get_section_number(section_id, section_ids)
        document_plan.append(DocumentPlanItem(
            id=section_id.value,
            title=template.section_title(section_id),
            numbering_level=1 if number else 0,
            content_blocks=_render_section(section_id, context),
            section_number=number,
        ))

    return document_plan


def _render_section(section_id: SectionId, context: RenderContext) -> List[ContentBlock]:
    renderers: Dict[SectionId, Callable[[RenderContext], List[ContentBlock]]] = {
        SectionId.HEADER: _render_header,
        SectionId.DECLARATIONS: _render_declarations,
        SectionId.BENEFICIARIES: _render_beneficiaries,
        SectionId.ASSET_DISTRIBUTION: _render_asset_distribution,
        SectionId.EXECUTORS: _render_executors,
        SectionId.GUARDIANSHIP: _render_guardianship,
        SectionId.SPECIAL_INSTRUCTIONS: _render_special_instructions,
        SectionId.FOOTER: _render_footer,
    }

    blocks = []
    if context.preferences.include_legal_explanations and section_id not in (SectionId.HEADER, SectionId.FOOTER):
        blocks.append(ContentBlock(
            type='explanation',
            content=context.phrase(f'explain.{section_id.value}'),
            style='explanation'
        ))
    blocks.extend(renderers[section_id](context))
    return blocks


def _render_header(context: RenderContext) -> List[ContentBlock]:
    """Render title, will form and testator identification."""
    personal = context.will.personal

    identity = [
        context.phrase('identity.born', dob=context.date(personal.date_of_birth)
                       if personal.date_of_birth else context.phrase('placeholder.date')),
    ]
    if personal.place_of_birth:
        identity[0] = f'{identity[0]} {context.phrase("identity.birthplace", place=personal.place_of_birth)}'
    if context.detail != DetailLevel.BASIC:
        if personal.personal_id:
            identity.append(context.phrase('identity.personal_id', personal_id=personal.personal_id))
        if personal.citizenship:
            identity.append(context.phrase('identity.citizenship', citizenship=personal.citizenship))
    if context.detail == DetailLevel.COMPREHENSIVE and personal.profession:
        identity.append(context.phrase('identity.profession', profession=personal.profession))
    address = personal.address.to_single_line() or context.phrase('placeholder.address')
    identity.append(context.phrase('identity.residing', address=address))

    return [
        ContentBlock(type='heading1', content=context.phrase('title'), style='title'),
        ContentBlock(type='paragraph', content=context.phrase(f'form.{context.template.will_type.value}'),
                     style='subtitle'),
        ContentBlock(type='paragraph', content=context.phrase(
            'intro',
            name=personal.full_name or context.phrase('placeholder.name'),
            identity=', '.join(identity),
        )),
    ]


def _render_declarations(context: RenderContext) -> List[ContentBlock]:
    """Render the selected legal clauses."""
    blocks = []
    country = context.config.country_name(context.language)

    for clause in context.clauses:
        if clause.id == 'residuary':
            residuary = [b.name for b in context.will.remainder_beneficiaries if b.name]
            if residuary:
                text = context.phrase('clause.residuary.named', names=context.names(residuary))
            else:
                text = context.phrase('clause.residuary.statutory')
        else:
            text = context.phrase(clause.phrase_key, country=country)

        blocks.append(ContentBlock(type='paragraph', content=text, style='clause'))

        if context.preferences.include_legal_explanations and clause.legal_basis:
            blocks.append(ContentBlock(
                type='explanation',
                content=context.phrase('explain.legal_basis', reference=clause.legal_basis),
                style='explanation',
                indent_level=1
            ))

    return blocks


def _asset_label(context: RenderContext, asset_id: str) -> str:
    asset = context.will.get_asset(asset_id)
    if asset is None:
        return asset_id
    return asset.description or _asset_type_label(context, asset)


def _asset_type_label(context: RenderContext, asset: Asset) -> str:
    asset_type = asset.type.value if asset.type else 'other'
    return context.phrase(f'asset_type.{asset_type}')


def _relationship_label(context: RenderContext, beneficiary: Beneficiary) -> str:
    relationship = beneficiary.relationship.value if beneficiary.relationship else 'other'
    return context.phrase(f'relationship.{relationship}')


def _beneficiary_line(context: RenderContext, beneficiary: Beneficiary) -> str:
    name = beneficiary.name or context.phrase('placeholder.name')
    if context.detail == DetailLevel.COMPREHENSIVE and beneficiary.date_of_birth:
        name = f'{name}, {context.phrase("beneficiary.born", dob=context.date(beneficiary.date_of_birth))}'
    values = {'name': name, 'relationship': _relationship_label(context, beneficiary)}
    share = beneficiary.share
    assets = context.names([_asset_label(context, a) for a in share.asset_ids])

    if share.type == ShareType.PERCENTAGE:
        if share.asset_ids:
            sentence = context.phrase('beneficiary.percentage_assets', share=context.share(share.value),
                                      assets=assets, **values)
        else:
            sentence = context.phrase('beneficiary.percentage', share=context.share(share.value), **values)
    elif share.type == ShareType.SPECIFIC_AMOUNT:
        sentence = context.phrase('beneficiary.amount', amount=context.amount(share.value), **values)
    elif share.type == ShareType.SPECIFIC_ASSETS:
        sentence = context.phrase('beneficiary.assets', assets=assets, **values)
    elif share.type == ShareType.REMAINDER:
        key = 'beneficiary.remainder' if len(context.will.remainder_beneficiaries) == 1 \
            else 'beneficiary.remainder_shared'
        sentence = context.phrase(key, **values)
    else:
        sentence = context.phrase('beneficiary.undefined', **values)

    sentences = [sentence]
    if beneficiary.conditions:
        sentences.append(context.phrase('beneficiary.conditions', conditions='; '.join(beneficiary.conditions)))
    if beneficiary.alternate_beneficiary_id:
        alternate = context.will.get_beneficiary(beneficiary.alternate_beneficiary_id)
        if alternate is not None and alternate.id != beneficiary.id and alternate.name:
            sentences.append(context.phrase('beneficiary.alternate', name=beneficiary.name or name,
                                            alternate=alternate.name))
    return ' '.join(sentences)


def _render_beneficiaries(context: RenderContext) -> List[ContentBlock]:
    """Render one line per beneficiary, in entry order."""
    return [
        ContentBlock(type='paragraph', content=context.phrase('beneficiaries.intro')),
        ContentBlock(
            type='bullet_list',
            content=[_beneficiary_line(context, b) for b in context.will.beneficiaries],
            indent_level=1
        ),
    ]


def _asset_description(context: RenderContext, asset: Asset) -> str:
    type_label = _asset_type_label(context, asset)
    text = f'{type_label}: {asset.description}' if asset.description else type_label

    details = []
    if context.detail != DetailLevel.BASIC:
        if asset.value is not None:
            details.append(context.phrase('asset.value', value=context.amount(asset.value, asset.currency)))
        if asset.is_partially_owned:
            details.append(context.phrase('asset.ownership',
                                          percentage=format_percentage(asset.ownership_percentage)))
    if context.detail == DetailLevel.COMPREHENSIVE:
        if asset.location:
            details.append(context.phrase('asset.location', location=asset.location))
        if asset.encumbrances:
            details.append(context.phrase('asset.encumbrance', encumbrances=asset.encumbrances))

    if details:
        text = f'{text} ({"; ".join(details)})'
    return text


def _asset_recipients(context: RenderContext, asset: Asset) -> List[str]:
    recipients = []
    for beneficiary in context.will.beneficiaries:
        share = beneficiary.share
        if asset.id not in share.asset_ids:
            continue
        name = beneficiary.name or context.phrase('placeholder.name')
        if share.type == ShareType.PERCENTAGE:
            recipients.append(context.phrase('asset.recipient_share', name=name,
                                             share=format_percentage(share.value)))
        elif share.type == ShareType.SPECIFIC_ASSETS:
            recipients.append(name)
    return recipients


def _render_asset_distribution(context: RenderContext) -> List[ContentBlock]:
    """Render the asset list and the recipients of each asset."""
    will = context.will
    if not will.assets:
        return [ContentBlock(type='paragraph', content=context.phrase('assets.none'))]

    blocks = [
        ContentBlock(type='paragraph', content=context.phrase('assets.intro')),
        ContentBlock(
            type='bullet_list',
            content=[_asset_description(context, a) for a in will.assets],
            indent_level=1
        ),
    ]

    for asset in will.assets:
        label = asset.description or _asset_type_label(context, asset)
        recipients = _asset_recipients(context, asset)
        if recipients:
            text = context.phrase('asset.to', asset=label, recipients=context.names(recipients))
        else:
            text = context.phrase('asset.residuary', asset=label)
        blocks.append(ContentBlock(type='paragraph', content=text))

    return blocks


def _person(name: str, relationship: str) -> str:
    return f'{name} ({relationship})' if relationship else name


def _render_executors(context: RenderContext) -> List[ContentBlock]:
    """Render executor appointments: primary, then co-executors, then alternates."""
    executors = context.will.executors
    primaries = [e for e in executors if e.role in (ExecutorRole.PRIMARY, None)]
    co_executors = [e for e in executors if e.role == ExecutorRole.CO_EXECUTOR]
    alternates = [e for e in executors if e.role == ExecutorRole.ALTERNATE]

    primary_name = next((e.name for e in primaries if e.name), '') or context.phrase('executor.unnamed')
    placeholder = context.phrase('placeholder.name')

    blocks = []
    for executor in primaries + co_executors + alternates:
        person = _person(executor.name or placeholder, executor.relationship)
        if executor.role == ExecutorRole.ALTERNATE:
            text = context.phrase('executor.alternate', name=person, primary=primary_name)
        elif executor.role == ExecutorRole.CO_EXECUTOR:
            text = context.phrase('executor.co_executor', name=person)
        else:
            text = context.phrase('executor.primary', name=person)
        blocks.append(ContentBlock(type='paragraph', content=text))

        name = executor.name or placeholder
        details = []
        if context.detail != DetailLevel.BASIC and executor.is_professional and executor.compensation:
            details.append(context.phrase('executor.compensation', name=name,
                                          compensation=executor.compensation))
        if context.detail == DetailLevel.COMPREHENSIVE:
            if executor.powers:
                details.append(context.phrase('executor.powers', name=name, powers='; '.join(executor.powers)))
            if executor.restrictions:
                details.append(context.phrase('executor.restrictions', name=name,
                                              restrictions='; '.join(executor.restrictions)))
        if details:
            blocks.append(ContentBlock(type='bullet_list', content=details, indent_level=1))

    return blocks


def _child_name(context: RenderContext, child_id: str, child_name: str) -> str:
    if child_name:
        return child_name
    for child in context.will.family.children:
        if child.id == child_id and child.full_name:
            return child.full_name
    return context.phrase('guardian.child_unnamed')


def _render_guardianship(context: RenderContext) -> List[ContentBlock]:
    """Render one appointment per child."""
    blocks = []
    placeholder = context.phrase('placeholder.name')

    for appointment in context.will.guardians:
        child = _child_name(context, appointment.child_id, appointment.child_name)
        primary = appointment.primary_guardian
        guardian = _person(primary.name or placeholder, primary.relationship) if primary else placeholder
        sentences = [context.phrase('guardian.appoint', guardian=guardian, child=child)]

        alternate = appointment.alternate_guardian
        if alternate is not None and alternate.name:
            sentences.append(context.phrase(
                'guardian.alternate',
                guardian=primary.name if primary and primary.name else placeholder,
                alternate=_person(alternate.name, alternate.relationship),
            ))
        blocks.append(ContentBlock(type='paragraph', content=' '.join(sentences)))

        details = []
        if appointment.special_instructions:
            details.append(context.phrase('guardian.instructions', text=appointment.special_instructions))
        if appointment.financial_provisions:
            details.append(context.phrase('guardian.financial', child=child,
                                          text=appointment.financial_provisions))
        if appointment.education_wishes:
            details.append(context.phrase('guardian.education', child=child, text=appointment.education_wishes))
        if details:
            blocks.append(ContentBlock(type='bullet_list', content=details, indent_level=1))

    return blocks


def _render_special_instructions(context: RenderContext) -> List[ContentBlock]:
    """Render instructions, high priority first (entry order within a priority)."""
    blocks = []
    instructions = sorted(context.will.special_instructions, key=lambda s: _PRIORITY_ORDER[s.priority])

    for instruction in instructions:
        category = instruction.category.value if instruction.category else 'other'
        title = instruction.title or context.phrase(f'instruction_category.{category}')
        blocks.append(ContentBlock(type='heading2', content=title, style='subheading'))
        if instruction.content:
            blocks.append(ContentBlock(type='paragraph', content=instruction.content))
        if instruction.recipient:
            blocks.append(ContentBlock(
                type='paragraph',
                content=context.phrase('instruction.recipient', recipient=instruction.recipient),
                style='note'
            ))

    return blocks


def _render_footer(context: RenderContext) -> List[ContentBlock]:
    """Render execution statement and signature blocks."""
    will_type = context.template.will_type
    if will_type == WillType.HOLOGRAPHIC:
        statement = context.phrase('footer.holographic')
    elif will_type == WillType.NOTARIAL:
        statement = context.phrase('footer.notarial')
    else:
        statement = context.phrase('footer.witnessed')

    blocks = [
        ContentBlock(type='paragraph', content=statement),
        ContentBlock(type='paragraph', content=context.phrase('footer.place_date')),
        ContentBlock(
            type='signature_block',
            content={
                'label': context.phrase('footer.signature'),
                'name': context.will.personal.full_name,
            },
            style='signature'
        ),
    ]

    if context.flags.get('requires_witnesses'):
        witnesses = context.will.witnesses
        count = max(context.config.minimum_witnesses(will_type), len(witnesses))
        for number in range(1, count + 1):
            blocks.append(ContentBlock(
                type='signature_block',
                content={
                    'label': context.phrase('footer.witness', number=number),
                    'name': witnesses[number - 1].name if number <= len(witnesses) else '',
                },
                style='signature'
            ))

    return blocks


def document_plan_to_dict(document_plan: List[DocumentPlanItem]) -> List[Dict[str, Any]]:
    """
    Convert document plan to dictionary for serialization.

    Args:
        document_plan: List of DocumentPlanItem

    Returns:
        List of dictionaries
    """
    result = []
    for item in document_plan:
        result.append({
            'id': item.id,
            'title': item.title,
            'section_number': item.section_number,
            'numbering_level': item.numbering_level,
            'content_blocks': [
                {
                    'type': block.type,
                    'content': block.content,
                    'style': block.style,
                    'indent_level': block.indent_level
                }
                for block in item.content_blocks
            ]
        })
    return result


def _block_to_text(block: ContentBlock) -> str:
    indent = '    ' * block.indent_level
    if block.type == 'bullet_list':
        return '\n'.join(f'{indent}- {line}' for line in block.content)
    if block.type == 'signature_block':
        lines = ['', '______________________________', block.content['label']]
        if block.content.get('name'):
            lines.append(block.content['name'])
        return '\n'.join(lines)
    if block.type == 'explanation':
        return f'{indent}[{block.content}]'
    if block.type == 'heading1':
        return block.content
    return f'{indent}{block.content}'


def plan_to_text(document_plan: List[DocumentPlanItem]) -> str:
    """
    Plain text form of a document plan.

    Sections are separated by a blank line; numbered sections get an
    "N. TITLE" heading.
    """
    parts = []
    for item in document_plan:
        lines = []
        if item.section_number:
            lines.append(f'{item.section_number}. {item.title.upper()}')
        elif item.title:
            lines.append(item.title.upper())
        lines.extend(_block_to_text(block) for block in item.content_blocks)
        parts.append('\n\n'.join(lines))
    return '\n\n'.join(parts) + '\n'


def plan_to_html(document_plan: List[DocumentPlanItem], template: WillTemplate) -> str:
    """
    Structured HTML form of a document plan, rendered with autoescaping.

    Args:
        document_plan: List of DocumentPlanItem
        template: WillTemplate that produced the plan

    Returns:
        HTML markup
    """
    html_template = jinja_env.get_template('will.html')
    return html_template.render(
        plan=document_plan,
        language=template.language.value,
        template_id=template.id,
        title=template.phrase('title'),
    )
