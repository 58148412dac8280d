"""
Unit tests for validation module.
"""

import copy

import pytest

from legacywill.conftest import AS_OF, make_will, make_will_data
from legacywill.jurisdictions import (
    JURISDICTION_DATA, REFERENCE_CAPACITY, REFERENCE_FORCED_HEIRSHIP, JurisdictionConfig, WillType,
)
from legacywill.validation import (
    DANGLING_ASSET_REFERENCE, DUPLICATE_ID, FORCED_HEIRSHIP_REVIEW, HOLOGRAPHIC_NOT_PERMITTED,
    INSUFFICIENT_WITNESSES, INVALID_DATE, INVALID_REFERENCE, INVALID_SHARE, MISSING_GUARDIAN,
    MISSING_PRIMARY_EXECUTOR, MISSING_SHARE_ASSETS, MULTIPLE_PRIMARY_EXECUTORS,
    NOTARIAL_FORM_REQUIRED, OVER_ALLOCATION, REQUIRED, UNDER_ALLOCATION, UNDER_MINIMUM_AGE,
    WITNESS_IS_BENEFICIARY, WITNESS_IS_MINOR, GUARDIANSHIP_INCOMPLETE, WillValidationResult,
    find_minor_children, validate,
)
from legacywill.will_data import WillUserData


SHARE_CODES = {OVER_ALLOCATION, UNDER_ALLOCATION, INVALID_SHARE}


def codes(issues):
    return [issue.code for issue in issues]


def pool(*values, asset_ids=None):
    """Percentage beneficiaries with the given values on one pool."""
    beneficiaries = []
    for i, value in enumerate(values, start=1):
        share = {'type': 'percentage', 'value': value}
        if asset_ids:
            share['asset_ids'] = asset_ids
        beneficiaries.append({
            'id': f'b{i}', 'name': f'Heir {i}', 'relationship': 'child', 'share': share,
        })
    return beneficiaries


class TestWillValidationResult:
    def test_initially_valid(self):
        result = WillValidationResult()
        assert result.is_valid is True
        assert len(result.errors) == 0

    def test_add_error(self):
        result = WillValidationResult()
        result.add_error('personal.full_name', 'Required', 'required')
        assert result.is_valid is False
        assert result.has_error('required')

    def test_add_warning_keeps_valid(self):
        result = WillValidationResult()
        result.add_warning('executors', 'No primary', MISSING_PRIMARY_EXECUTOR)
        assert result.is_valid is True
        assert result.has_warning(MISSING_PRIMARY_EXECUTOR)

    def test_add_missing_records_field_once(self):
        result = WillValidationResult()
        result.add_missing('guardians', 'A guardian is required')
        result.add_missing('guardians', 'A guardian is required')
        assert result.missing_required_fields == ['guardians']

    def test_to_dict(self):
        result = WillValidationResult()
        result.add_error('assets', 'Missing', 'required')
        data = result.to_dict()
        assert data['is_valid'] is False
        assert data['errors'][0]['severity'] == 'error'


class TestCompleteWill:
    def test_complete_will_is_valid(self, will, sk_config):
        result = validate(will, sk_config, as_of=AS_OF)
        assert result.is_valid is True
        assert result.errors == []
        assert result.warnings == []
        assert result.legal_requirements_met is True
        assert result.completeness_score == 100

    def test_determinism(self, will, sk_config):
        first = validate(will, sk_config, WillType.HOLOGRAPHIC, as_of=AS_OF)
        second = validate(will, sk_config, WillType.HOLOGRAPHIC, as_of=AS_OF)
        assert first.to_dict() == second.to_dict()

    def test_determinism_with_problems(self, sk_config):
        will = make_will(beneficiaries=pool(70, 50), executors=[])
        first = validate(will, sk_config, as_of=AS_OF)
        second = validate(will, sk_config, as_of=AS_OF)
        assert first.to_dict() == second.to_dict()


class TestMandatoryFields:
    def test_empty_will(self, sk_config):
        result = validate(WillUserData(), sk_config, as_of=AS_OF)
        assert result.is_valid is False
        for field in ['personal.full_name', 'personal.date_of_birth', 'personal.address',
                      'beneficiaries', 'assets']:
            assert field in result.missing_required_fields

    def test_no_assets_declared_satisfies_assets(self, sk_config):
        will = make_will(assets=[], no_assets_declared=True)
        result = validate(will, sk_config, as_of=AS_OF)
        assert 'assets' not in result.missing_required_fields

    def test_incomplete_address(self, sk_config):
        data = make_will_data()
        data['personal']['address']['postal_code'] = ''
        result = validate(WillUserData.from_dict(data), sk_config, as_of=AS_OF)
        assert 'personal.address' in result.missing_required_fields
        assert 'postal code' in result.errors[0].message

    def test_beneficiary_required_fields(self, sk_config):
        will = make_will(beneficiaries=[{'id': 'b1', 'share': {}}])
        result = validate(will, sk_config, as_of=AS_OF)
        fields = [e.field for e in result.errors]
        assert 'beneficiaries[0].name' in fields
        assert 'beneficiaries[0].relationship' in fields
        assert 'beneficiaries[0].share.type' in fields

    def test_executor_name_required(self, sk_config):
        will = make_will(executors=[{'id': 'e1', 'role': 'primary'}])
        result = validate(will, sk_config, as_of=AS_OF)
        assert 'executors[0].name' in result.missing_required_fields

    def test_duplicate_ids(self, sk_config):
        beneficiaries = pool(50, 50)
        beneficiaries[1]['id'] = 'b1'
        result = validate(make_will(beneficiaries=beneficiaries), sk_config, as_of=AS_OF)
        assert DUPLICATE_ID in codes(result.errors)


class TestAgeGate:
    def test_under_minimum_age_is_error(self, sk_config):
        data = make_will_data()
        data['personal']['date_of_birth'] = '2009-01-01'
        result = validate(WillUserData.from_dict(data), sk_config, as_of=AS_OF)

        assert result.is_valid is False
        assert UNDER_MINIMUM_AGE in codes(result.errors)
        assert result.legal_requirements_met is False
        age_error = [e for e in result.errors if e.code == UNDER_MINIMUM_AGE][0]
        assert age_error.legal_reference == sk_config.legal_reference(REFERENCE_CAPACITY)

    def test_age_gate_regardless_of_completeness(self, sk_config):
        will = WillUserData.from_dict({'personal': {'date_of_birth': '2012-02-02'}})
        assert UNDER_MINIMUM_AGE in codes(validate(will, sk_config, as_of=AS_OF).errors)

    def test_birthday_boundary(self, sk_config):
        data = make_will_data()
        data['personal']['date_of_birth'] = '2007-06-01'
        result = validate(WillUserData.from_dict(data), sk_config, as_of=AS_OF)
        assert UNDER_MINIMUM_AGE not in codes(result.errors)

        data['personal']['date_of_birth'] = '2007-06-02'
        result = validate(WillUserData.from_dict(data), sk_config, as_of=AS_OF)
        assert UNDER_MINIMUM_AGE in codes(result.errors)

    def test_future_birth_date(self, sk_config):
        data = make_will_data()
        data['personal']['date_of_birth'] = '2030-01-01'
        result = validate(WillUserData.from_dict(data), sk_config, as_of=AS_OF)
        assert INVALID_DATE in codes(result.errors)

    def test_german_minor_needs_notarial_will(self, registry):
        config = registry.get_config('DE')
        data = make_will_data()
        data['personal']['date_of_birth'] = '2008-09-01'  # 16 on the reference date

        holographic = validate(WillUserData.from_dict(data), config, WillType.HOLOGRAPHIC, as_of=AS_OF)
        assert UNDER_MINIMUM_AGE not in codes(holographic.errors)
        assert NOTARIAL_FORM_REQUIRED in codes(holographic.errors)

        notarial = validate(WillUserData.from_dict(data), config, WillType.NOTARIAL, as_of=AS_OF)
        assert NOTARIAL_FORM_REQUIRED not in codes(notarial.errors)

        undecided = validate(WillUserData.from_dict(data), config, None, as_of=AS_OF)
        assert NOTARIAL_FORM_REQUIRED in codes(undecided.warnings)


class TestShareArithmetic:
    @pytest.mark.parametrize('values', [(60, 50), (100, 0.5), (70, 20, 20)])
    def test_over_allocation(self, sk_config, values):
        result = validate(make_will(beneficiaries=pool(*values)), sk_config, as_of=AS_OF)
        assert OVER_ALLOCATION in codes(result.errors)

    @pytest.mark.parametrize('values', [(100,), (60, 40), (33.33, 33.33, 33.34), (50, 25, 25)])
    def test_exactly_100_reports_nothing(self, sk_config, values):
        result = validate(make_will(beneficiaries=pool(*values)), sk_config, as_of=AS_OF)
        assert not SHARE_CODES & set(codes(result.errors + result.warnings))

    @pytest.mark.parametrize('values', [(50,), (30, 30), (10, 20, 30)])
    def test_under_allocation_single_warning(self, sk_config, values):
        result = validate(make_will(beneficiaries=pool(*values)), sk_config, as_of=AS_OF)
        assert codes(result.warnings).count(UNDER_ALLOCATION) == 1
        assert UNDER_ALLOCATION not in codes(result.errors)

    def test_under_allocation_with_remainder_is_fine(self, sk_config):
        beneficiaries = pool(30, 30) + [{
            'id': 'b9', 'name': 'Rest', 'relationship': 'friend', 'share': {'type': 'remainder'},
        }]
        result = validate(make_will(beneficiaries=beneficiaries), sk_config, as_of=AS_OF)
        assert UNDER_ALLOCATION not in codes(result.warnings)

    def test_tolerance(self, sk_config):
        result = validate(make_will(beneficiaries=pool(33.33, 33.33, 33.33)), sk_config, as_of=AS_OF)
        assert UNDER_ALLOCATION not in codes(result.warnings)

    def test_pools_checked_separately(self, sk_config):
        beneficiaries = pool(60, 50, asset_ids=['a1']) + [{
            'id': 'b9', 'name': 'Friend', 'relationship': 'friend',
            'share': {'type': 'percentage', 'value': 100},
        }]
        result = validate(make_will(beneficiaries=beneficiaries), sk_config, as_of=AS_OF)
        assert codes(result.errors).count(OVER_ALLOCATION) == 1
        assert UNDER_ALLOCATION not in codes(result.warnings)

    def test_invalid_percentage_values(self, sk_config):
        result = validate(make_will(beneficiaries=pool(-10, 110)), sk_config, as_of=AS_OF)
        assert codes(result.errors).count(INVALID_SHARE) == 2

    @pytest.mark.parametrize('value', [float('nan'), float('inf'), '-inf'])
    def test_non_finite_percentage_is_reported(self, sk_config, value):
        result = validate(make_will(beneficiaries=pool(value)), sk_config, as_of=AS_OF)

        assert result.is_valid is False
        assert REQUIRED in codes(result.errors)
        assert 'beneficiaries[0].share.value' in result.missing_required_fields

    def test_non_finite_asset_value_does_not_raise(self, sk_config):
        will = make_will(assets=[{'id': 'a1', 'type': 'vehicle', 'description': 'Car', 'value': float('inf')}])
        result = validate(will, sk_config, as_of=AS_OF)
        assert result.is_valid is True

    def test_repeated_asset_id_is_not_double_counted(self, sk_config):
        will = make_will(beneficiaries=pool(60, asset_ids=['a1', 'a1']))
        result = validate(will, sk_config, as_of=AS_OF)

        assert OVER_ALLOCATION not in codes(result.errors)
        under = [w for w in result.warnings if w.code == UNDER_ALLOCATION]
        assert len(under) == 1
        assert '60%' in under[0].message

    def test_specific_amount_must_be_positive(self, sk_config):
        will = make_will(beneficiaries=[{
            'id': 'b1', 'name': 'A', 'relationship': 'friend',
            'share': {'type': 'specific_amount', 'value': 0},
        }])
        assert INVALID_SHARE in codes(validate(will, sk_config, as_of=AS_OF).errors)


class TestSixtyFiftyScenario:
    def test_error_names_both_beneficiaries(self, sk_config):
        will = make_will(beneficiaries=pool(60, 50, asset_ids=['a1']))
        result = validate(will, sk_config, as_of=AS_OF)

        over = [e for e in result.errors if e.code == OVER_ALLOCATION]
        assert len(over) == 1
        assert 'Heir 1' in over[0].message
        assert 'Heir 2' in over[0].message

    def test_score_lower_than_sixty_forty(self, sk_config):
        over = validate(make_will(beneficiaries=pool(60, 50, asset_ids=['a1'])), sk_config, as_of=AS_OF)
        exact = validate(make_will(beneficiaries=pool(60, 40, asset_ids=['a1'])), sk_config, as_of=AS_OF)
        assert over.completeness_score < exact.completeness_score


class TestReferences:
    def test_dangling_asset_reference(self, sk_config):
        will = make_will(beneficiaries=pool(100, asset_ids=['missing']))
        assert DANGLING_ASSET_REFERENCE in codes(validate(will, sk_config, as_of=AS_OF).errors)

    def test_specific_assets_share_needs_assets(self, sk_config):
        will = make_will(beneficiaries=[{
            'id': 'b1', 'name': 'A', 'relationship': 'child', 'share': {'type': 'specific_assets'},
        }])
        assert MISSING_SHARE_ASSETS in codes(validate(will, sk_config, as_of=AS_OF).errors)

    def test_alternate_must_exist(self, sk_config):
        beneficiaries = pool(100)
        beneficiaries[0]['alternate_beneficiary_id'] = 'nobody'
        result = validate(make_will(beneficiaries=beneficiaries), sk_config, as_of=AS_OF)
        assert INVALID_REFERENCE in codes(result.errors)

    def test_alternate_cannot_be_self(self, sk_config):
        beneficiaries = pool(100)
        beneficiaries[0]['alternate_beneficiary_id'] = 'b1'
        result = validate(make_will(beneficiaries=beneficiaries), sk_config, as_of=AS_OF)
        assert INVALID_REFERENCE in codes(result.errors)


class TestFormalities:
    def test_sk_holographic_without_witnesses(self, will, sk_config):
        """Slovak holographic wills do not need witnesses."""
        result = validate(will, sk_config, WillType.HOLOGRAPHIC, as_of=AS_OF)
        witness_codes = {INSUFFICIENT_WITNESSES, WITNESS_IS_BENEFICIARY, WITNESS_IS_MINOR}
        assert not witness_codes & set(codes(result.errors + result.warnings))
        assert result.is_valid is True

    def test_witnessed_will_needs_witnesses(self, will, sk_config):
        result = validate(will, sk_config, WillType.WITNESSED, as_of=AS_OF)
        assert INSUFFICIENT_WITNESSES in codes(result.warnings)
        assert result.is_valid is True

    def test_witness_restrictions(self, sk_config):
        will = make_will(witnesses=[
            {'id': 'w1', 'name': 'Mária Nováková', 'date_of_birth': '1972-03-01'},
            {'id': 'w2', 'name': 'Young Witness', 'date_of_birth': '2010-01-01'},
        ])
        result = validate(will, sk_config, WillType.WITNESSED, as_of=AS_OF)
        assert WITNESS_IS_BENEFICIARY in codes(result.warnings)
        assert WITNESS_IS_MINOR in codes(result.warnings)
        assert INSUFFICIENT_WITNESSES not in codes(result.warnings)

    def test_holographic_not_permitted(self, will):
        table = copy.deepcopy([t for t in JURISDICTION_DATA if t['code'] == 'CZ'][0])
        table['legal_requirements']['holographic_allowed'] = False
        config = JurisdictionConfig.from_dict(table)

        result = validate(will, config, WillType.HOLOGRAPHIC, as_of=AS_OF)
        assert HOLOGRAPHIC_NOT_PERMITTED in codes(result.errors)
        assert result.legal_requirements_met is False

    def test_missing_primary_executor(self, sk_config):
        will = make_will(executors=[{'id': 'e1', 'role': 'alternate', 'name': 'Eva'}])
        result = validate(will, sk_config, as_of=AS_OF)
        assert MISSING_PRIMARY_EXECUTOR in codes(result.warnings)
        assert result.is_valid is True

    def test_multiple_primary_executors(self, sk_config):
        will = make_will(executors=[
            {'id': 'e1', 'role': 'primary', 'name': 'A'},
            {'id': 'e2', 'role': 'primary', 'name': 'B'},
        ])
        assert MULTIPLE_PRIMARY_EXECUTORS in codes(validate(will, sk_config, as_of=AS_OF).warnings)


class TestGuardianship:
    def family_with_minor(self):
        return {
            'spouse': {'full_name': 'Mária Nováková'},
            'children': [{'id': 'c1', 'full_name': 'Anna Nováková', 'date_of_birth': '2015-04-04'}],
        }

    def test_minor_child_requires_guardian(self, sk_config):
        will = make_will(family=self.family_with_minor())
        result = validate(will, sk_config, as_of=AS_OF)
        assert MISSING_GUARDIAN in codes(result.errors)
        assert 'guardians' in result.missing_required_fields

    def test_guardian_appointed(self, sk_config):
        will = make_will(family=self.family_with_minor(), guardians=[{
            'child_id': 'c1', 'child_name': 'Anna Nováková',
            'primary_guardian': {'name': 'Eva Malá', 'relationship': 'aunt'},
        }])
        result = validate(will, sk_config, as_of=AS_OF)
        assert MISSING_GUARDIAN not in codes(result.errors)
        assert GUARDIANSHIP_INCOMPLETE not in codes(result.warnings)

    def test_uncovered_minor_is_warning(self, sk_config):
        family = self.family_with_minor()
        family['children'].append({'id': 'c2', 'full_name': 'Boris Novák', 'is_minor': True})
        will = make_will(family=family, guardians=[{
            'child_id': 'c1', 'primary_guardian': {'name': 'Eva Malá'},
        }])
        result = validate(will, sk_config, as_of=AS_OF)
        assert GUARDIANSHIP_INCOMPLETE in codes(result.warnings)

    def test_explicit_flag_overrides_age(self, sk_config):
        family = {'children': [{'id': 'c1', 'full_name': 'Anna', 'date_of_birth': '2015-04-04',
                                'is_minor': False}]}
        assert find_minor_children(make_will(family=family), sk_config, AS_OF) == []

    def test_minor_child_beneficiary(self, sk_config):
        will = make_will(beneficiaries=[{
            'id': 'b1', 'name': 'Small Heir', 'relationship': 'child', 'date_of_birth': '2016-01-01',
            'share': {'type': 'percentage', 'value': 100},
        }])
        assert find_minor_children(will, sk_config, AS_OF) == [('b1', 'Small Heir')]


class TestForcedHeirship:
    def test_omitted_spouse(self, sk_config):
        will = make_will(beneficiaries=[{
            'id': 'b1', 'name': 'Friend', 'relationship': 'friend',
            'share': {'type': 'percentage', 'value': 100},
        }])
        result = validate(will, sk_config, as_of=AS_OF)
        warnings = [w for w in result.warnings if w.code == FORCED_HEIRSHIP_REVIEW]
        assert len(warnings) == 1
        assert 'Mária Nováková' in warnings[0].message
        assert warnings[0].legal_reference == sk_config.legal_reference(REFERENCE_FORCED_HEIRSHIP)

    def test_one_warning_per_omitted_heir(self, sk_config):
        will = make_will(family={
            'spouse': {'full_name': 'Mária Nováková'},
            'children': [
                {'id': 'c1', 'full_name': 'Adult One', 'is_minor': False},
                {'id': 'c2', 'full_name': 'Adult Two', 'is_minor': False},
            ],
        })
        result = validate(will, sk_config, as_of=AS_OF)
        assert codes(result.warnings).count(FORCED_HEIRSHIP_REVIEW) == 2


class TestCompletenessScore:
    @pytest.mark.parametrize('remove', ['full_name', 'date_of_birth', 'address', 'beneficiaries', 'assets'])
    def test_removing_mandatory_field_never_raises_score(self, sk_config, remove):
        full = make_will_data()
        partial = make_will_data()
        if remove in partial['personal']:
            partial['personal'].pop(remove)
        else:
            partial.pop(remove)

        full_score = validate(WillUserData.from_dict(full), sk_config, as_of=AS_OF).completeness_score
        partial_score = validate(WillUserData.from_dict(partial), sk_config, as_of=AS_OF).completeness_score
        assert partial_score <= full_score

    def test_adding_field_to_broken_will_never_lowers_score(self, sk_config):
        data = {'personal': {'full_name': 'Ján Novák'}}
        before = validate(WillUserData.from_dict(data), sk_config, as_of=AS_OF).completeness_score
        data['personal']['date_of_birth'] = '1970-05-12'
        after = validate(WillUserData.from_dict(data), sk_config, as_of=AS_OF).completeness_score
        assert after >= before

    def test_score_bounds(self, sk_config):
        empty = validate(WillUserData(), sk_config, as_of=AS_OF).completeness_score
        assert 0 <= empty <= 100
        assert empty < 30
