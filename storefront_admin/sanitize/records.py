"""
Record sanitizers

A FieldSet binds field names to rules for one entity. Create mode returns
every declared field (missing ones get the rule's default); update mode
only returns the fields the caller sent, so "not provided" stays distinct
from "explicitly cleared".
"""
import logging
from collections.abc import Mapping

from .patterns import scan_record

logger = logging.getLogger(__name__)

_MISSING = object()


class FieldSet:
    """Declared fields of one entity and how each is sanitized"""

    def __init__(self, entity, fields, partial=False, finalize=None):
        self.entity = entity
        self.fields = dict(fields)
        self.partial = partial
        # hook for cross-field rules, called as finalize(record)
        self.finalize = finalize

    def __repr__(self):
        mode = 'update' if self.partial else 'create'
        return f'<FieldSet {self.entity} ({mode})>'

    def sanitize(self, data):
        """
        Run the basic sanitizer

        Args:
            data (dict): Raw input record, e.g. a parsed JSON body

        Returns:
            dict: Sanitized record
        """
        if not isinstance(data, Mapping):
            data = {}

        record = {}
        for name, rule in self.fields.items():
            if self.partial:
                if name in data:
                    record[name] = rule.clean_update(data[name])
            else:
                record[name] = rule.clean_create(data.get(name))

        if self.finalize is not None:
            self.finalize(record)

        if logger.isEnabledFor(logging.DEBUG):
            changed = [name for name, value in record.items()
                       if data.get(name, _MISSING) != value]
            if changed:
                logger.debug('Sanitized %s inputs, changed fields: %s',
                             self.entity, ', '.join(changed))

        return record

    def sanitize_strict(self, data):
        """
        Run the basic sanitizer, then bound every field and scan for
        suspicious content

        Args:
            data (dict): Raw input record

        Returns:
            dict: Sanitized record with lengths, ranges and counts bounded
        """
        record = self.sanitize(data)
        for name, value in record.items():
            record[name] = self.fields[name].bound(value)
        scan_record(record, self.fields, self.entity)
        return record
