"""
Key-case helpers
Convert dictionary keys between snake_case and camelCase, recursively
"""

import re
from typing import Any

_LEADING_UNDERSCORES = re.compile(r'^_*')
_SEPARATORS = re.compile(r'(?<=[^\-_\s])[\-_\s]+([^\-_\s])')
_ACRONYM_BOUNDARY = re.compile(r'([A-Z]+)([A-Z][a-z])')
_WORD_BOUNDARY = re.compile(r'([a-z\d])([A-Z])')


def camelize(name: str) -> str:
    """
    Convert a snake_case, kebab-case, spaced or PascalCase string to camelCase

    Leading underscores are kept. All-caps and numeric strings are returned as-is.

    Example:
        >>> camelize('item_id')
        'itemId'
    """
    if name.isupper() or name.isnumeric():
        return name

    prefix = _LEADING_UNDERSCORES.match(name).group()
    rest = name[len(prefix):]
    if not rest:
        return name

    rest = rest[0].lower() + rest[1:]
    return prefix + _SEPARATORS.sub(lambda match: match.group(1).upper(), rest)


def decamelize(name: str) -> str:
    """
    Convert a camelCase (or PascalCase) string to snake_case

    Example:
        >>> decamelize('itemName')
        'item_name'
        >>> decamelize('HTTPStatus')
        'http_status'
    """
    if name.isupper() or name.isnumeric():
        return name

    name = _ACRONYM_BOUNDARY.sub(r'\1_\2', name)
    name = _WORD_BOUNDARY.sub(r'\1_\2', name)
    return name.lower()


def _convert_keys(obj: Any, convert) -> Any:
    if isinstance(obj, dict):
        return {
            (convert(key) if isinstance(key, str) else key): _convert_keys(value, convert)
            for key, value in obj.items()
        }
    if isinstance(obj, (list, tuple)):
        return [_convert_keys(item, convert) for item in obj]
    return obj


def camelize_keys(obj: Any) -> Any:
    """Return a copy of obj with every dict key converted to camelCase"""
    return _convert_keys(obj, camelize)


def decamelize_keys(obj: Any) -> Any:
    """Return a copy of obj with every dict key converted to snake_case"""
    return _convert_keys(obj, decamelize)
