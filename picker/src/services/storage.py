"""Persistent key/value storage for the picked color and the custom scheme.

Values are kept as JSON text per key (like browser local storage) inside a
single JSON file. StorageInterface guards one key: invalid values are never
written, and invalid stored values are purged on read so they cannot break
the UI on the next start.
"""

import json
import logging
import os
import re
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from constants import STORAGE_FILE, STORAGE_KEY_HSV, STORAGE_KEY_SCHEME, CUSTOM_SCHEME_SIZE, HEX_LENGTH
from utils.numbers import is_number

_logger = logging.getLogger('Storage')

_HEX_PATTERN = re.compile(rf'[0-9A-Fa-f]{{{HEX_LENGTH}}}')


# ========================================
# Backing store
# ========================================

class JsonFileStorage:
    """String key -> JSON text store backed by one file on disk."""

    def __init__(self, path=STORAGE_FILE):
        self.path = path
        self._items = self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                items = json.load(f)
        except (OSError, ValueError) as e:
            _logger.warning(f"Ignoring unreadable storage file {self.path}: {e}")
            return {}
        if not isinstance(items, dict):
            _logger.warning(f"Ignoring malformed storage file {self.path}")
            return {}
        return {key: value for key, value in items.items() if isinstance(value, str)}

    def _save(self):
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(self._items, f, indent=2)

    def get_item(self, key) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key, text):
        previous = self._items.get(key)
        self._items[key] = text
        try:
            self._save()
        except OSError:
            # Keep memory in line with the file
            if previous is None:
                del self._items[key]
            else:
                self._items[key] = previous
            raise

    def remove_item(self, key):
        if key in self._items:
            previous = self._items.pop(key)
            try:
                self._save()
            except OSError:
                self._items[key] = previous
                raise


# ========================================
# Validation
# ========================================

def is_valid_storage_hsv(hsv) -> bool:
    """Exactly three real numbers."""
    return (
        isinstance(hsv, list)
        and len(hsv) == 3
        and all(is_number(component) for component in hsv)
    )


def is_valid_storage_color_scheme(scheme) -> bool:
    """Exactly one entry per custom slot, each empty or a 6 digit hex code."""
    return (
        isinstance(scheme, list)
        and len(scheme) == CUSTOM_SCHEME_SIZE
        and all(
            not color or (isinstance(color, str) and _HEX_PATTERN.fullmatch(color) is not None)
            for color in scheme
        )
    )


# ========================================
# Keyed interface
# ========================================

@dataclass
class StorageResult:
    data: Any = None
    error: bool = False


class StorageInterface:
    """Validated access to a single storage key.

    Never raises for bad data or failed writes; problems are reported
    through StorageResult.error so the UI can show a notice and carry on.
    """

    def __init__(self, key: str, validator: Callable[[Any], bool], storage):
        self.key = key
        self._validator = validator
        self._storage = storage

    def get(self) -> StorageResult:
        text = self._storage.get_item(self.key)
        if text is None:
            return StorageResult()

        try:
            data = json.loads(text)
        except ValueError:
            data = None
        else:
            if self._validator(data):
                return StorageResult(data=data)

        _logger.warning(f"Removed invalid stored value for '{self.key}': {text!r}")
        self.remove()
        return StorageResult(error=True)

    def set(self, value) -> StorageResult:
        if not self._validator(value):
            _logger.warning(f"Refused to store invalid value for '{self.key}': {value!r}")
            return StorageResult(error=True)

        try:
            self._storage.set_item(self.key, json.dumps(value, separators=(',', ':')))
        except OSError as e:
            _logger.error(f"Failed to store '{self.key}': {e}")
            return StorageResult(error=True)
        return StorageResult(data=value)

    def remove(self):
        try:
            self._storage.remove_item(self.key)
        except OSError as e:
            _logger.error(f"Failed to remove '{self.key}': {e}")


def create_hsv_storage(storage) -> StorageInterface:
    return StorageInterface(STORAGE_KEY_HSV, is_valid_storage_hsv, storage)


def create_color_scheme_storage(storage) -> StorageInterface:
    return StorageInterface(STORAGE_KEY_SCHEME, is_valid_storage_color_scheme, storage)


def create_custom_scheme(stored=None) -> List[Optional[str]]:
    """Exactly CUSTOM_SCHEME_SIZE slots, taken from a stored scheme when given."""
    slots = list(stored or [])[:CUSTOM_SCHEME_SIZE]
    slots = [color if color else None for color in slots]
    return slots + [None] * (CUSTOM_SCHEME_SIZE - len(slots))
