"""
Unit tests for section and clause selection.
"""

import pytest

from legacywill.clause_logic import (
    SECTION_ORDER, ClauseKind, SectionId, check_section_dependencies, get_section_flags,
    get_section_number, get_sections_summary, select_clauses, select_sections,
    validate_section_order,
)
from legacywill.conftest import make_will
from legacywill.jurisdictions import WillType
from legacywill.will_data import GenerationPreferences, WillUserData


ALWAYS_SECTIONS = [SectionId.HEADER, SectionId.DECLARATIONS, SectionId.FOOTER]


def clause_ids(clauses):
    return [c.id for c in clauses]


class TestSectionSelection:
    def test_empty_draft_keeps_skeleton(self, sk_config):
        flags = get_section_flags(WillUserData(), sk_config)
        assert select_sections(flags) == ALWAYS_SECTIONS

    def test_complete_will_sections(self, will, sk_config):
        sections = select_sections(get_section_flags(will, sk_config))
        assert sections == [
            SectionId.HEADER,
            SectionId.DECLARATIONS,
            SectionId.BENEFICIARIES,
            SectionId.ASSET_DISTRIBUTION,
            SectionId.EXECUTORS,
            SectionId.FOOTER,
        ]

    def test_guardianship_omitted_without_appointment(self, will, sk_config):
        flags = get_section_flags(will, sk_config)
        assert flags['has_guardianship'] is False
        assert SectionId.GUARDIANSHIP not in select_sections(flags)

    def test_guardianship_included_with_appointment(self, sk_config):
        will = make_will(guardians=[{'child_id': 'c1', 'primary_guardian': {'name': 'Eva Malá'}}])
        assert SectionId.GUARDIANSHIP in select_sections(get_section_flags(will, sk_config))

    def test_special_instructions_conditional(self, sk_config):
        will = make_will(special_instructions=[
            {'id': 's1', 'category': 'funeral', 'content': 'Cremation'},
        ])
        assert SectionId.SPECIAL_INSTRUCTIONS in select_sections(get_section_flags(will, sk_config))

    def test_no_assets_declared_keeps_asset_section(self, sk_config):
        will = make_will(assets=[], no_assets_declared=True)
        assert SectionId.ASSET_DISTRIBUTION in select_sections(get_section_flags(will, sk_config))

    def test_unknown_section_never_included(self):
        assert check_section_dependencies('appendix', {}) is False

    def test_selected_sections_follow_fixed_order(self, sk_config):
        will = make_will(
            guardians=[{'child_id': 'c1', 'primary_guardian': {'name': 'Eva Malá'}}],
            special_instructions=[{'id': 's1', 'category': 'other', 'content': 'Note'}],
        )
        sections = select_sections(get_section_flags(will, sk_config))
        assert sections == SECTION_ORDER
        assert validate_section_order(sections)


class TestSectionNumbering:
    def test_header_and_footer_unnumbered(self):
        assert get_section_number(SectionId.HEADER, SECTION_ORDER) == 0
        assert get_section_number(SectionId.FOOTER, SECTION_ORDER) == 0

    def test_articles_numbered_consecutively(self):
        sections = [SectionId.HEADER, SectionId.DECLARATIONS, SectionId.EXECUTORS, SectionId.FOOTER]
        assert get_section_number(SectionId.DECLARATIONS, sections) == 1
        assert get_section_number(SectionId.EXECUTORS, sections) == 2
        assert get_section_number(SectionId.GUARDIANSHIP, sections) == 0


class TestValidateSectionOrder:
    def test_valid_order(self):
        assert validate_section_order(ALWAYS_SECTIONS) is True

    def test_invalid_order(self):
        assert validate_section_order([SectionId.FOOTER, SectionId.HEADER]) is False

    def test_repeats_rejected(self):
        assert validate_section_order([SectionId.HEADER, SectionId.HEADER]) is False

    def test_unknown_rejected(self):
        assert validate_section_order([SectionId.HEADER, 'appendix']) is False


class TestClauseSelection:
    def test_mandatory_clauses_always_present(self, templates, sk_config):
        template = templates.get_template(sk_config, 'holographic', 'sk')
        flags = get_section_flags(WillUserData(), sk_config, template.will_type)
        selected = clause_ids(select_clauses(template, flags))

        mandatory = [c.id for c in template.legal_clauses if c.kind == ClauseKind.MANDATORY]
        assert mandatory
        for clause_id in mandatory:
            assert clause_id in selected

    def test_conditional_clause_follows_flag(self, templates, sk_config, registry):
        template = templates.get_template(sk_config, 'holographic', 'en')
        flags = get_section_flags(WillUserData(), sk_config)
        assert 'forced_heirship' in clause_ids(select_clauses(template, flags))
        assert 'executor_powers' not in clause_ids(select_clauses(template, flags))

        de_config = registry.get_config('DE')
        de_template = templates.get_template(de_config, 'holographic', 'de')
        de_flags = get_section_flags(WillUserData(), de_config)
        assert 'tax' in clause_ids(select_clauses(de_template, de_flags))

    def test_optional_clauses_need_preference(self, templates, sk_config):
        will = make_will(assets=[{'id': 'a1', 'type': 'digital_asset', 'description': 'Email account'}])
        template = templates.get_template(sk_config, 'holographic', 'en')
        flags = get_section_flags(will, sk_config)

        with_optional = clause_ids(select_clauses(template, flags))
        without_optional = clause_ids(select_clauses(
            template, flags, GenerationPreferences(include_optional_clauses=False)
        ))
        assert 'digital_assets' in with_optional
        assert 'digital_assets' not in without_optional

    def test_clauses_keep_template_order(self, templates, sk_config, will):
        template = templates.get_template(sk_config, 'holographic', 'en')
        selected = clause_ids(select_clauses(template, get_section_flags(will, sk_config)))
        template_order = [c.id for c in template.legal_clauses]
        assert selected == sorted(selected, key=template_order.index)
        assert len(selected) == len(set(selected))


class TestSectionFlags:
    def test_requires_witnesses_depends_on_will_type(self, will, sk_config):
        assert get_section_flags(will, sk_config, WillType.HOLOGRAPHIC)['requires_witnesses'] is False
        assert get_section_flags(will, sk_config, WillType.WITNESSED)['requires_witnesses'] is True

    @pytest.mark.parametrize('flag,expected', [
        ('has_beneficiaries', True),
        ('has_assets', True),
        ('has_primary_executor', True),
        ('has_remainder_beneficiary', False),
        ('has_alternate_beneficiary', False),
        ('has_digital_assets', False),
        ('forced_heirship', True),
    ])
    def test_base_will_flags(self, will, sk_config, flag, expected):
        assert get_section_flags(will, sk_config)[flag] is expected

    def test_summary(self, templates, will, sk_config):
        template = templates.get_template(sk_config, 'holographic', 'sk')
        summary = get_sections_summary(will, sk_config, template)
        assert summary['sections'][0] == 'header'
        assert summary['sections'][-1] == 'footer'
        assert {'id': 'revocation', 'kind': 'mandatory'}.items() <= summary['clauses'][0].items()
