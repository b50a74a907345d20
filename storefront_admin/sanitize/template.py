"""Template form sanitizers"""
from .fields import AssetId, Flag, NameText, StringList
from .records import FieldSet

MAX_TEMPLATE_IMAGES = 10

_FIELDS = {
    'templateName': NameText(max_length=100),
    'templateImageIds': StringList(AssetId(max_length=200), max_items=MAX_TEMPLATE_IMAGES),
    'templateHasWeb': Flag(),
    'templateHasMobile': Flag(),
}

TEMPLATE_FIELDS = FieldSet('template', _FIELDS)
TEMPLATE_UPDATE_FIELDS = FieldSet('template update', dict(_FIELDS, isActive=Flag()), partial=True)


def sanitize_template_inputs(form_data):
    return TEMPLATE_FIELDS.sanitize(form_data)


def sanitize_template_inputs_strict(form_data):
    return TEMPLATE_FIELDS.sanitize_strict(form_data)


def sanitize_template_update_inputs(form_data):
    return TEMPLATE_UPDATE_FIELDS.sanitize(form_data)


def sanitize_template_update_inputs_strict(form_data):
    return TEMPLATE_UPDATE_FIELDS.sanitize_strict(form_data)
