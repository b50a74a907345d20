"""Application form sanitizers"""
from .fields import (
    AssetId, Choice, DescriptionText, Flag, NameText, Number, Passthrough,
    StringList, UrlList, UrlText, UuidText,
)
from .records import FieldSet

CATEGORIES = ('web', 'mobile')

MAX_IMAGES = 10
MAX_OTHER_VERSIONS = 5

APPLICATION_FIELDS = FieldSet('application', {
    'name': NameText(max_length=100),
    'link': UrlText(max_length=500),
    'admin': UrlText(max_length=500),
    'description': DescriptionText(max_length=1000),
    'fee': Number(minimum=0, maximum=100000),
    'rent': Number(minimum=0, maximum=50000),
    'category': Choice(CATEGORIES),
    'imageUrls': StringList(AssetId(max_length=200), max_items=MAX_IMAGES),
    'level': Number(minimum=1, maximum=4),
    'templateId': UuidText(max_length=36),
})

APPLICATION_UPDATE_FIELDS = FieldSet('application update', {
    'name': NameText(max_length=100),
    'link': UrlText(max_length=500, optional=True),
    'admin': UrlText(max_length=500, optional=True),
    'description': DescriptionText(max_length=1000, optional=True),
    'fee': Number(minimum=0, maximum=100000, decimal=True),
    'rent': Number(minimum=0, maximum=50000, decimal=True),
    'category': Choice(CATEGORIES),
    'level': Number(minimum=1, maximum=4, default=1),
    'imageUrls': StringList(AssetId(max_length=200), max_items=MAX_IMAGES),
    'otherVersions': UrlList(UrlText(max_length=500), max_items=MAX_OTHER_VERSIONS),
    'isActive': Flag(),
    'oldImageUrls': Passthrough(max_items=MAX_IMAGES),
}, partial=True)


def sanitize_application_inputs(form_data):
    """Sanitize the add-application form"""
    return APPLICATION_FIELDS.sanitize(form_data)


def sanitize_application_inputs_strict(form_data):
    """Sanitize the add-application form with length, range and count limits"""
    return APPLICATION_FIELDS.sanitize_strict(form_data)


def sanitize_application_update_inputs(form_data):
    """
    Sanitize the edit-application form

    Only fields present in ``form_data`` are returned. Empty link, admin
    link and description become None so the column is cleared.
    """
    return APPLICATION_UPDATE_FIELDS.sanitize(form_data)


def sanitize_application_update_inputs_strict(form_data):
    return APPLICATION_UPDATE_FIELDS.sanitize_strict(form_data)
