"""
Field rules for input sanitization

A rule turns one raw request value into a cleaned value and knows the
strict-mode bound for its field (maximum length, numeric range, maximum
item count). Rules never raise: a value of an unexpected type is handed
back unchanged and left for schema validation to reject.
"""
import math
import re
from datetime import date

_WHITESPACE = re.compile(r'\s+')

# JavaScript parseInt/parseFloat read the longest numeric prefix
_INT_PREFIX = re.compile(r'\s*([+-]?[0-9]+)')
_FLOAT_PREFIX = re.compile(
    r'\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-]?Infinity)'
)
# longer digit runs are past the float range and saturate to +/-inf
_MAX_INT_DIGITS = 400


def parse_int(text, default=0):
    """
    Parse the leading integer of a string

    Args:
        text (str): Raw text, e.g. "42px"
        default: Value returned when no digits lead the string

    Returns:
        int: Parsed integer or default; inf for digit runs past the float range
    """
    match = _INT_PREFIX.match(text)
    if not match:
        return default
    digits = match.group(1)
    negative = digits.startswith('-')
    magnitude = digits.lstrip('+-').lstrip('0')
    if len(magnitude) > _MAX_INT_DIGITS:
        return float('-inf') if negative else float('inf')
    value = int(magnitude or '0')
    return -value if negative else value


def parse_float(text, default=0):
    """
    Parse the leading decimal number of a string

    Args:
        text (str): Raw text, e.g. "12.5 EUR"
        default: Value returned when the string has no numeric prefix

    Returns:
        float: Parsed number or default
    """
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return default
    return float(match.group(1))


def is_number(value):
    """bool is an int subclass but never counts as a number here"""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class FieldRule:
    """
    Base sanitization rule

    ``blank`` replaces falsy input in create mode (absent keys included);
    ``None`` means the rule handles falsy input itself.
    """
    blank = None
    scan = True

    def clean(self, value):
        return value

    def clean_create(self, value):
        if self.blank is not None and not value:
            value = self.blank
        return self.clean(value)

    def clean_update(self, value):
        return self.clean(value)

    def bound(self, value):
        """Apply strict-mode limits to an already cleaned value"""
        return value

    def scannable(self, value):
        """Yield (suffix, text) pairs the suspicious-content scan inspects"""
        if not self.scan:
            return
        if isinstance(value, str):
            yield '', value
        elif isinstance(value, list):
            for index, item in enumerate(value):
                if isinstance(item, str):
                    yield f'[{index}]', item


class Text(FieldRule):
    """
    String rule driven by a disallowed-character pattern

    Subclasses set ``disallowed`` (characters to strip), ``whitespace``
    ('collapse', 'remove' or None), ``trim`` and ``lowercase``.
    """
    blank = ''
    disallowed = None
    whitespace = 'collapse'
    trim = True
    lowercase = False

    def __init__(self, max_length=None, optional=False, empty_as_none=False):
        self.max_length = max_length
        # update mode: a blank string means "clear this field"
        self.optional = optional
        self.empty_as_none = empty_as_none

    def clean(self, value):
        if not isinstance(value, str):
            return value

        if self.disallowed is not None:
            value = self.disallowed.sub('', value)
        if self.whitespace == 'collapse':
            value = _WHITESPACE.sub(' ', value)
        elif self.whitespace == 'remove':
            value = _WHITESPACE.sub('', value)
        if self.trim:
            value = value.strip()
        if self.lowercase:
            value = value.lower()

        if self.empty_as_none and not value:
            return None
        return value

    def clean_update(self, value):
        if self.optional and isinstance(value, str) and not value.strip():
            return None
        return self.clean(value)

    def bound(self, value):
        if not isinstance(value, str) or self.max_length is None:
            return value
        value = value[:self.max_length]
        if self.trim:
            value = value.rstrip()
        return value


class NameText(Text):
    """Names and titles: letters, digits, spaces and ._-"""
    disallowed = re.compile(r'[^a-zA-Z0-9._\s-]')


class UrlText(Text):
    """URLs: URL-safe characters only, no whitespace at all"""
    disallowed = re.compile(r'[^a-zA-Z0-9._\s\-/:?=&%#]')
    whitespace = 'remove'


class DescriptionText(Text):
    """Free text: alphanumerics, basic punctuation and accented Latin letters"""
    disallowed = re.compile(
        r'[^A-Za-z0-9_\s.,!?;:()\-\'"àáâãäèéêëìíîïòóôõöùúûüÿñç]'
    )


class LooseText(Text):
    """Free text where only angle brackets are removed"""
    disallowed = re.compile(r'[<>]')


class DigitsText(Text):
    """Account numbers: digits and the plus sign"""
    disallowed = re.compile(r'[^0-9+]')
    whitespace = None


class UuidText(Text):
    """UUIDs: hex digits and dashes, lower-cased"""
    disallowed = re.compile(r'[^a-fA-F0-9-]')
    whitespace = None
    lowercase = True


class AssetId(Text):
    """Image-host public ids such as ``applications/abc_123.png``"""
    disallowed = re.compile(r'[^a-zA-Z0-9._/-]')
    whitespace = None


class EmailText(Text):
    """Emails are trimmed and lower-cased; format is left to validation"""
    whitespace = 'remove'
    lowercase = True


class PhoneText(Text):
    disallowed = re.compile(r'[^0-9+\-\s().]')


class PasswordText(Text):
    """Only control characters are removed; spaces are kept as typed"""
    disallowed = re.compile(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]')
    whitespace = None
    trim = False
    scan = False


class SearchText(Text):
    """Search terms used in LIKE filters"""
    disallowed = re.compile(r'[<>"\'%;()&+]')
    whitespace = None


class Number(FieldRule):
    """
    Integer or float field

    Numbers pass through (NaN becomes the default). Strings are parsed the
    way JavaScript's parseInt/parseFloat read them; anything else becomes
    the default. Strict mode clamps to ``[minimum, maximum]``.
    """

    def __init__(self, minimum=None, maximum=None, default=0, decimal=False):
        self.minimum = minimum
        self.maximum = maximum
        self.default = default
        self.decimal = decimal

    def clean(self, value):
        if is_number(value):
            if isinstance(value, float) and math.isnan(value):
                return self.default
            return value
        if isinstance(value, str):
            parse = parse_float if self.decimal else parse_int
            return parse(value, self.default)
        return self.default

    def bound(self, value):
        if not is_number(value) or (isinstance(value, float) and math.isnan(value)):
            value = self.default
        if self.minimum is not None:
            value = max(value, self.minimum)
        if self.maximum is not None:
            value = min(value, self.maximum)
        return value


class Choice(FieldRule):
    """Enum field: lower-cased, trimmed, then checked against an allow-list"""
    blank = ''

    def __init__(self, choices):
        self.choices = tuple(choices)

    def clean(self, value):
        if value is None:
            return None
        if not isinstance(value, str):
            return ''
        value = value.lower().strip()
        return value if value in self.choices else ''


class Flag(FieldRule):
    """Boolean field coerced by truthiness"""

    def clean(self, value):
        return bool(value)


class DateValue(FieldRule):
    """
    Date field

    ``date`` objects pass through. Strings accept ``/`` and ``.`` as
    separators and must end up as ``YYYY-MM-DD``; anything else is None.
    """
    _FORMAT = re.compile(r'^\d{4}-\d{2}-\d{2}$')
    _SEPARATORS = re.compile(r'[/.]')
    _DISALLOWED = re.compile(r'[^0-9-]')

    def clean(self, value):
        if not value:
            return None
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            normalized = self._SEPARATORS.sub('-', value.strip())
            normalized = self._DISALLOWED.sub('', normalized)
            if self._FORMAT.match(normalized):
                return normalized
        return None


class StringList(FieldRule):
    """
    List of strings cleaned by an item rule

    Non-list input becomes an empty list; non-string and empty entries are
    dropped before and after cleaning. Strict mode caps the item count
    and bounds every item.
    """

    def __init__(self, item, max_items=None):
        self.item = item
        self.max_items = max_items

    def clean(self, value):
        if not isinstance(value, list):
            return []
        cleaned = [self.item.clean(entry) for entry in value
                   if isinstance(entry, str) and entry]
        return [entry for entry in cleaned if entry]

    def bound(self, value):
        if not isinstance(value, list):
            return value
        if self.max_items is not None:
            value = value[:self.max_items]
        return [self.item.bound(entry) for entry in value]


class UrlList(StringList):
    """
    List of URLs given either as a list or a comma-separated string

    A string with no usable URL yields None; any other type yields None.
    """

    def clean(self, value):
        if isinstance(value, list):
            entries = [entry for entry in value
                       if isinstance(entry, str) and entry.strip()]
        elif isinstance(value, str):
            entries = [entry.strip() for entry in value.split(',') if entry.strip()]
        else:
            return None

        cleaned = [entry for entry in (self.item.clean(e) for e in entries) if entry]
        if isinstance(value, str) and not cleaned:
            return None
        return cleaned


class Passthrough(FieldRule):
    """
    Internal bookkeeping values copied as-is

    The value is never rewritten, but strict mode still scans it and caps
    list values at ``max_items``.
    """

    def __init__(self, max_items=None):
        self.max_items = max_items

    def bound(self, value):
        if isinstance(value, list) and self.max_items is not None:
            return value[:self.max_items]
        return value
