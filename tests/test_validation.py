"""
Schema validation tests
"""
from datetime import date

import pytest

from storefront_admin.validation import (
    clean_url,
    clean_url_optional,
    clean_uuid,
    is_valid_url,
    is_valid_url_or_empty,
    validate_application,
    validate_asset_ids,
    validate_image_updates,
    validate_login,
    validate_platform,
    validate_registration,
    validate_template,
    validate_uuid,
)
from storefront_admin.validation.auth import calculate_age

TEMPLATE_ID = '3f2504e0-4f89-41d3-9a0c-0305e82c3301'
TODAY = date(2025, 6, 15)


def valid_application(**overrides):
    data = {
        'name': 'Shop Pro',
        'link': 'https://shop.example.com',
        'admin': 'https://admin.shop.example.com',
        'description': 'Online shop for small businesses.',
        'category': 'web',
        'fee': 50000,
        'rent': 5000,
        'imageUrls': ['apps/shop_1', 'apps/shop_2'],
        'templateId': TEMPLATE_ID,
        'level': 2,
    }
    data.update(overrides)
    return data


def valid_registration(**overrides):
    data = {
        'username': 'Jane Doe',
        'email': 'jane@example.com',
        'phone': '+237690000000',
        'password': 'Str0ng!Pass#42',
        'confirmPassword': 'Str0ng!Pass#42',
        'dateOfBirth': '1990-04-12',
        'terms': True,
    }
    data.update(overrides)
    return data


class TestUrlAndIdHelpers:
    """Shared helpers"""

    @pytest.mark.parametrize('url', ['https://example.com', 'http://a.io/x?y=1', 'example.com/path'])
    def test_valid_urls(self, url):
        assert is_valid_url(url)

    @pytest.mark.parametrize('url', ['', None, 'https://', 'ftp://example.com', 'http://exa mple.com', 42])
    def test_invalid_urls(self, url):
        assert not is_valid_url(url)

    def test_url_or_empty(self):
        assert is_valid_url_or_empty('')
        assert is_valid_url_or_empty('   ')
        assert not is_valid_url_or_empty('ftp://example.com')

    def test_clean_url(self):
        assert clean_url('  https://example.com  ') == 'https://example.com'
        assert clean_url('not a url') is None
        assert clean_url_optional('') is None
        assert clean_url_optional(' https://example.com ') == 'https://example.com'

    def test_uuid_helpers(self):
        assert validate_uuid(TEMPLATE_ID)
        assert clean_uuid(' 3F2504E0-4F89-41D3-9A0C-0305E82C3301 ') == TEMPLATE_ID
        assert clean_uuid('00000000-0000-0000-0000-000000000000') is None
        assert clean_uuid('not-a-uuid') is None
        assert clean_uuid(None) is None

    def test_validate_asset_ids(self):
        assert validate_asset_ids(['apps/a_1', 'bad id', '---', 7, 'b.png']) == ['apps/a_1', 'b.png']
        assert validate_asset_ids('apps/a_1') == []

    def test_image_updates(self):
        result = validate_image_updates(['apps/a', 'apps/c'], ['apps/a', 'apps/b'])
        assert result == {
            'valid_images': ['apps/a', 'apps/c'],
            'images_to_delete': ['apps/b'],
            'has_changes': True,
        }

    def test_image_updates_without_changes(self):
        result = validate_image_updates(['apps/a'], ['apps/a'])
        assert result['images_to_delete'] == []
        assert result['has_changes'] is False


class TestApplicationSchema:
    """validate_application"""

    def test_valid_record(self):
        assert validate_application(valid_application()) == {}

    @pytest.mark.parametrize('name, message', [
        ('', 'Application name is required'),
        ('ab', 'Application name must be at least 3 characters'),
        ('9 Lives', 'Application name must start with a letter'),
        ('My  Shop', 'Application name cannot contain multiple consecutive spaces'),
        ('Admin', 'This application name is not allowed'),
    ])
    def test_name_rules(self, name, message):
        errors = validate_application(valid_application(name=name))
        assert errors['name'] == message

    def test_missing_links(self):
        errors = validate_application(valid_application(link='', admin=''))
        assert errors['link'] == 'Application link is required'
        assert errors['admin'] == 'Admin link is required'

    def test_malformed_link(self):
        errors = validate_application(valid_application(link='not-a-url'))
        assert 'link' in errors

    @pytest.mark.parametrize('fee', [0, 100001, 12.5])
    def test_fee_rules(self, fee):
        assert 'fee' in validate_application(valid_application(fee=fee))

    def test_rent_may_be_zero(self):
        assert validate_application(valid_application(rent=0)) == {}

    def test_rent_upper_bound(self):
        assert 'rent' in validate_application(valid_application(rent=50001))

    @pytest.mark.parametrize('level', [0, 5, 2.5, '2'])
    def test_level_rules(self, level):
        assert 'level' in validate_application(valid_application(level=level))

    def test_category(self):
        errors = validate_application(valid_application(category=''))
        assert errors['category'] == 'Category must be either "web" or "mobile"'

    @pytest.mark.parametrize('images', [[], ['a'] * 11, ['bad id']])
    def test_images(self, images):
        assert 'imageUrls' in validate_application(valid_application(imageUrls=images))

    def test_template_id(self):
        errors = validate_application(valid_application(templateId='00000000-0000-0000-0000-000000000000'))
        assert errors['templateId'] == 'Template ID must be a valid UUID'

    def test_description_too_long(self):
        errors = validate_application(valid_application(description='a' * 1001))
        assert errors['description'] == 'Description must not exceed 1000 characters'

    def test_partial_requires_a_field(self):
        errors = validate_application({}, partial=True)
        assert errors == {'general': 'At least one field must be provided for update'}

    def test_partial_only_checks_present_fields(self):
        assert validate_application({'name': 'New Name', 'fee': 12.5}, partial=True) == {}

    def test_partial_admin_may_be_cleared(self):
        assert validate_application({'admin': None}, partial=True) == {}

    def test_partial_other_versions(self):
        assert validate_application({'otherVersions': ['https://v1.example.com']}, partial=True) == {}
        errors = validate_application({'otherVersions': ['---']}, partial=True)
        assert errors['otherVersions'] == 'Invalid version format'

    def test_partial_is_active_must_be_bool(self):
        errors = validate_application({'isActive': 'yes'}, partial=True)
        assert 'isActive' in errors


class TestTemplateSchema:
    """validate_template"""

    def valid(self, **overrides):
        data = {
            'templateName': 'Boutique',
            'templateImageIds': ['templates/boutique_1'],
            'templateHasWeb': True,
            'templateHasMobile': False,
        }
        data.update(overrides)
        return data

    def test_valid_record(self):
        assert validate_template(self.valid()) == {}

    def test_reserved_name(self):
        errors = validate_template(self.valid(templateName='Template'))
        assert errors['templateName'] == 'This template name is not allowed'

    def test_needs_one_platform(self):
        errors = validate_template(self.valid(templateHasWeb=False))
        assert 'platforms' in errors

    def test_needs_images(self):
        errors = validate_template(self.valid(templateImageIds=[]))
        assert errors['templateImageIds'] == 'At least one template image is required'

    def test_image_id_too_long(self):
        errors = validate_template(self.valid(templateImageIds=['a' * 201]))
        assert errors['templateImageIds'] == 'Template image ID is too long'

    def test_partial(self):
        assert validate_template({'isActive': False}, partial=True) == {}
        assert validate_template({}, partial=True) == {
            'general': 'At least one field must be provided for update'
        }

    def test_partial_platform_flags(self):
        errors = validate_template({'templateHasWeb': False, 'templateHasMobile': False}, partial=True)
        assert 'platforms' in errors


class TestPlatformSchema:
    """validate_platform"""

    def valid(self, **overrides):
        data = {
            'platformName': 'Orange Money',
            'isCashPayment': False,
            'accountName': 'Storefront Ltd',
            'accountNumber': '+237690000000',
            'description': None,
        }
        data.update(overrides)
        return data

    def test_valid_record(self):
        assert validate_platform(self.valid()) == {}

    def test_cash_platform_needs_no_account(self):
        record = self.valid(platformName='Cash', isCashPayment=True, accountName=None, accountNumber=None)
        assert validate_platform(record) == {}

    def test_electronic_platform_needs_account(self):
        errors = validate_platform(self.valid(accountName=None, accountNumber=None))
        assert errors['accountName'] == 'Account name is required for electronic platforms'
        assert errors['accountNumber'] == 'Account number is required for electronic platforms'

    @pytest.mark.parametrize('number, message', [
        ('12', 'Account number must be at least 3 characters'),
        ('+++', 'Account number must contain at least one digit'),
        ('1' * 21, 'Account number must not exceed 20 characters'),
    ])
    def test_account_number(self, number, message):
        errors = validate_platform(self.valid(accountNumber=number))
        assert errors['accountNumber'] == message

    def test_name_length(self):
        errors = validate_platform(self.valid(platformName='A' * 51))
        assert errors['platformName'] == 'Platform name must not exceed 50 characters'

    def test_partial(self):
        assert validate_platform({'isActive': False}, partial=True) == {}
        assert 'general' in validate_platform({'accountName': None}, partial=True)

    def test_partial_account_checked_when_sent(self):
        errors = validate_platform({'accountNumber': 'ab'}, partial=True)
        assert 'accountNumber' in errors


class TestRegistrationSchema:
    """validate_registration"""

    def test_valid_record(self):
        assert validate_registration(valid_registration(), today=TODAY) == {}

    @pytest.mark.parametrize('username, message', [
        ('Jo', 'Username must be at least 3 characters'),
        ('_jane', 'Username must start with a letter'),
        ('Jaaane', 'Username cannot contain repeating characters (e.g., aaa)'),
        ('Root', 'This username is not allowed'),
    ])
    def test_username_rules(self, username, message):
        errors = validate_registration(valid_registration(username=username), today=TODAY)
        assert errors['username'] == message

    def test_disposable_email(self):
        errors = validate_registration(valid_registration(email='jane@mailinator.com'), today=TODAY)
        assert errors['email'] == 'Please use a valid email domain'

    @pytest.mark.parametrize('password, message', [
        ('Sh0rt!', 'Password must be at least 8 characters'),
        ('NoDigits!!', 'Password must contain at least one number'),
        ('n0upper!!', 'Password must contain at least one uppercase letter'),
        ('N0SPECIAL1', 'Password must contain at least one lowercase letter'),
        ('N0special1', 'Password must contain at least one special character'),
        ('Welcome123!', 'Password contains common words that are not allowed'),
    ])
    def test_password_rules(self, password, message):
        record = valid_registration(password=password, confirmPassword=password)
        errors = validate_registration(record, today=TODAY)
        assert errors['password'] == message

    def test_password_contains_username(self):
        record = valid_registration(username='Zorro', password='Zorro#2024x', confirmPassword='Zorro#2024x')
        errors = validate_registration(record, today=TODAY)
        assert errors['password'] == 'Password cannot contain your username'

    def test_passwords_must_match(self):
        errors = validate_registration(valid_registration(confirmPassword='Other!Pass1'), today=TODAY)
        assert errors['confirmPassword'] == 'Passwords must match'

    @pytest.mark.parametrize('phone', ['12345', 'call me', '+1 (555) 12'])
    def test_phone_rules(self, phone):
        assert 'phone' in validate_registration(valid_registration(phone=phone), today=TODAY)

    @pytest.mark.parametrize('dob, message', [
        (None, 'Date of birth is required'),
        ('2030-01-01', 'Date of birth cannot be in the future'),
        ('1899-12-31', 'Invalid date of birth'),
        ('2012-06-16', 'You must be at least 13 years old'),
        ('2025-02-30', 'Invalid date of birth'),
    ])
    def test_date_of_birth(self, dob, message):
        errors = validate_registration(valid_registration(dateOfBirth=dob), today=TODAY)
        assert errors['dateOfBirth'] == message

    def test_thirteenth_birthday_is_enough(self):
        assert validate_registration(valid_registration(dateOfBirth='2012-06-15'), today=TODAY) == {}

    def test_terms_required(self):
        errors = validate_registration(valid_registration(terms=False), today=TODAY)
        assert errors['terms'] == 'You must accept the terms and conditions'

    def test_calculate_age_before_birthday(self):
        assert calculate_age(date(2012, 12, 31), today=date(2025, 12, 11)) == 12


class TestLoginSchema:
    """validate_login"""

    def test_valid(self):
        assert validate_login({'email': 'jane@example.com', 'password': 'Str0ng!Pass#42'}) == {}

    def test_missing_fields(self):
        errors = validate_login({'email': '', 'password': ''})
        assert errors == {'email': 'Email is required', 'password': 'Password is required'}
