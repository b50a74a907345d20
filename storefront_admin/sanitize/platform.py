"""
Payment platform form sanitizers

Cash platforms have no account: in create mode the account name and
number are forced to None whenever ``isCashPayment`` is set.
"""
from .fields import DigitsText, Flag, LooseText, NameText
from .records import FieldSet


def _clear_cash_account(record):
    if record.get('isCashPayment'):
        record['accountName'] = None
        record['accountNumber'] = None


class PlatformNameText(NameText):
    """Update mode treats a null platform name like an empty one"""

    def clean_update(self, value):
        return self.clean(value or '')


_FIELDS = {
    'platformName': PlatformNameText(max_length=50),
    'isCashPayment': Flag(),
    'accountName': NameText(max_length=255, empty_as_none=True),
    'accountNumber': DigitsText(max_length=20, empty_as_none=True),
    'description': LooseText(max_length=500, empty_as_none=True),
}

PLATFORM_FIELDS = FieldSet('platform', _FIELDS, finalize=_clear_cash_account)
PLATFORM_UPDATE_FIELDS = FieldSet('platform update', dict(_FIELDS, isActive=Flag()), partial=True)


def sanitize_platform_inputs(form_data):
    return PLATFORM_FIELDS.sanitize(form_data)


def sanitize_platform_inputs_strict(form_data):
    return PLATFORM_FIELDS.sanitize_strict(form_data)


def sanitize_platform_update_inputs(form_data):
    return PLATFORM_UPDATE_FIELDS.sanitize(form_data)


def sanitize_platform_update_inputs_strict(form_data):
    return PLATFORM_UPDATE_FIELDS.sanitize_strict(form_data)
