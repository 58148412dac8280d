"""
Determinism Tests

Tests that will generation is deterministic:
- Same will data + same template = identical text, HTML and checksum
- Checksum verification detects changed text
- Incomplete or invalid drafts still render
"""

import copy
import unittest

from legacywill.conftest import AS_OF, make_will, make_will_data
from legacywill.content_generator import compute_checksum, generate, verify_checksum
from legacywill.jurisdictions import JURISDICTION_DATA, JurisdictionConfig, WillType, build_default_registry
from legacywill.templates import TemplateLibrary
from legacywill.utils import format_amount, format_percentage
from legacywill.validation import UNDER_MINIMUM_AGE, validate
from legacywill.will_data import GenerationPreferences, WillUserData


class TestDeterminism(unittest.TestCase):
    """Test deterministic content generation."""

    def setUp(self):
        self.registry = build_default_registry()
        self.config = self.registry.get_config('SK')
        self.template = TemplateLibrary().get_template(self.config, 'holographic', 'sk')
        self.will = make_will(special_instructions=[
            {'id': 's1', 'category': 'funeral', 'content': 'Simple ceremony', 'priority': 'low'},
            {'id': 's2', 'category': 'digital_assets', 'content': 'Close my accounts', 'priority': 'high'},
        ])

    def test_same_input_same_output(self):
        first = generate(self.will, self.config, self.template)
        second = generate(self.will, self.config, self.template)

        self.assertEqual(first.text, second.text)
        self.assertEqual(first.html, second.html)
        self.assertEqual(first.checksum, second.checksum)
        self.assertEqual(first.sections, second.sections)

    def test_fresh_library_same_output(self):
        other_template = TemplateLibrary().get_template(self.config, 'holographic', 'sk')
        first = generate(self.will, self.config, self.template)
        second = generate(self.will, self.config, other_template)
        self.assertEqual(first.checksum, second.checksum)

    def test_rebuilt_snapshot_same_output(self):
        rebuilt = WillUserData.from_dict(self.will.to_dict())
        self.assertEqual(
            generate(self.will, self.config, self.template).checksum,
            generate(rebuilt, self.config, self.template).checksum,
        )

    def test_different_data_different_checksum(self):
        changed = make_will(executors=[{'id': 'e1', 'role': 'primary', 'name': 'Someone Else'}])
        self.assertNotEqual(
            generate(self.will, self.config, self.template).checksum,
            generate(changed, self.config, self.template).checksum,
        )

    def test_checksum_matches_text(self):
        content = generate(self.will, self.config, self.template)
        self.assertEqual(content.checksum, compute_checksum(content.text))
        self.assertEqual(len(content.checksum), 64)


class TestChecksumVerification(unittest.TestCase):
    """Test checksum verification of stored text."""

    def setUp(self):
        registry = build_default_registry()
        config = registry.get_config('CZ')
        template = TemplateLibrary().get_template(config, 'holographic', 'cs')
        self.content = generate(make_will(), config, template)

    def test_verify_valid(self):
        self.assertTrue(verify_checksum(self.content.text, self.content.checksum))

    def test_verify_tampered(self):
        tampered = self.content.text.replace('Mária Nováková', 'Someone Else')
        self.assertNotEqual(tampered, self.content.text)
        self.assertFalse(verify_checksum(tampered, self.content.checksum))

    def test_trailing_whitespace_ignored(self):
        padded = self.content.text.replace('\n', '  \n')
        self.assertTrue(verify_checksum(padded, self.content.checksum))

    def test_empty_checksum_never_verifies(self):
        self.assertFalse(verify_checksum(self.content.text, ''))


class TestDraftRendering(unittest.TestCase):
    """Generation runs whatever the validation outcome is."""

    def setUp(self):
        self.registry = build_default_registry()
        self.library = TemplateLibrary()

    def test_underage_testator_still_renders(self):
        config = self.registry.get_config('SK')
        data = make_will_data()
        data['personal']['date_of_birth'] = '2009-01-01'
        will = WillUserData.from_dict(data)

        result = validate(will, config, as_of=AS_OF)
        self.assertFalse(result.is_valid)
        self.assertTrue(result.has_error(UNDER_MINIMUM_AGE))

        template = self.library.get_template(config, 'holographic', 'sk')
        content = generate(will, config, template)
        self.assertIn('ZÁVET', content.text)
        self.assertIn('Ján Novák', content.text)

    def test_empty_will_renders_skeleton(self):
        config = self.registry.get_config('SK')
        template = self.library.get_template(config, 'holographic', 'en')
        content = generate(WillUserData(), config, template)

        self.assertIn('LAST WILL AND TESTAMENT', content.text)
        self.assertIn('[full name]', content.text)
        self.assertIn('governed by the law of Slovak Republic', content.text)
        self.assertEqual([s['id'] for s in content.sections], ['header', 'declarations', 'footer'])

    def test_no_assets_declared(self):
        config = self.registry.get_config('SK')
        template = self.library.get_template(config, 'holographic', 'en')
        content = generate(make_will(assets=[], no_assets_declared=True), config, template)
        self.assertIn('I declare that I hold no significant assets', content.text)

    def test_non_finite_numbers_still_render(self):
        config = self.registry.get_config('SK')
        template = self.library.get_template(config, 'holographic', 'en')
        will = make_will(
            assets=[{'id': 'a1', 'type': 'vehicle', 'description': 'Car', 'value': 'inf',
                     'ownership_percentage': float('nan')}],
            beneficiaries=[{'id': 'b1', 'name': 'Mária Nováková', 'relationship': 'spouse',
                            'share': {'type': 'percentage', 'value': float('inf')}}],
        )
        content = generate(will, config, template)
        self.assertIn('Car', content.text)

    def test_formatters_leave_non_finite_values_as_text(self):
        self.assertEqual(format_amount(float('inf'), 'EUR'), 'inf')
        self.assertEqual(format_percentage(float('nan')), 'nan')
        self.assertEqual(format_percentage(50), '50%')
        self.assertEqual(format_amount(1500, 'EUR', 'sk'), '1 500 EUR')

    def test_numbered_articles(self):
        config = self.registry.get_config('SK')
        template = self.library.get_template(config, 'holographic', 'en')
        content = generate(make_will(), config, template)
        self.assertIn('1. DECLARATIONS', content.text)
        self.assertIn('2. BENEFICIARIES', content.text)

    def test_html_is_escaped(self):
        config = self.registry.get_config('SK')
        template = self.library.get_template(config, 'holographic', 'en')
        data = make_will_data()
        data['personal']['full_name'] = '<script>alert(1)</script>'
        content = generate(WillUserData.from_dict(data), config, template)
        self.assertNotIn('<script>', content.html)
        self.assertIn('&lt;script&gt;', content.html)

    def test_template_from_other_jurisdiction_rejected(self):
        sk = self.registry.get_config('SK')
        cz_template = self.library.get_template(self.registry.get_config('CZ'), 'holographic', 'cs')
        with self.assertRaises(ValueError):
            generate(make_will(), sk, cz_template)

    def test_witness_signature_lines(self):
        config = self.registry.get_config('CZ')
        template = self.library.get_template(config, WillType.WITNESSED, 'en')
        content = generate(make_will(), config, template)
        self.assertIn('Witness 1', content.text)
        self.assertIn('Witness 2', content.text)

    def test_legal_explanations_preference(self):
        config = self.registry.get_config('SK')
        template = self.library.get_template(config, 'holographic', 'en')
        plain = generate(make_will(), config, template)
        explained = generate(make_will(), config, template,
                             GenerationPreferences(include_legal_explanations=True))
        self.assertGreater(explained.word_count, plain.word_count)

    def test_notarial_instructions_carry_notary_guidance(self):
        config = self.registry.get_config('SK')
        template = self.library.get_template(config, 'notarial', 'en')
        content = generate(make_will(), config, template)
        instructions = content.execution_instructions
        self.assertEqual(instructions.will_type, WillType.NOTARIAL)
        self.assertIsNotNone(instructions.notary)
        self.assertEqual(instructions.notary.organization, config.notary.organization)


class TestTemplateLibrary(unittest.TestCase):
    """Test template caching across jurisdiction configs."""

    def setUp(self):
        self.library = TemplateLibrary()
        self.config = build_default_registry().get_config('SK')

    def test_same_config_reuses_template(self):
        first = self.library.get_template(self.config, 'holographic', 'en')
        self.assertIs(self.library.get_template(self.config, 'holographic', 'en'), first)

    def test_fixture_config_with_same_code_gets_own_clauses(self):
        table = copy.deepcopy([t for t in JURISDICTION_DATA if t['code'] == 'SK'][0])
        table['legal_references']['revocation'] = 'Test Code § 1'
        fixture = JurisdictionConfig.from_dict(table)

        shipped = self.library.get_template(self.config, 'holographic', 'en')
        rebuilt = self.library.get_template(fixture, 'holographic', 'en')

        bases = {c.id: c.legal_basis for c in rebuilt.legal_clauses}
        self.assertEqual(bases['revocation'], 'Test Code § 1')
        self.assertNotEqual({c.id: c.legal_basis for c in shipped.legal_clauses}['revocation'], 'Test Code § 1')


if __name__ == '__main__':
    unittest.main()
