"""Whole-collection persistence on top of the key/value store.

load() never raises for bad stored data: an absent key, text that is not
JSON, or objects that don't fit the record type all come back as [].
"""
import json
import logging

from BackEnd.repos import storage_repo

logger = logging.getLogger(__name__)

def _encode(record):
	return record.to_dict() if hasattr(record, "to_dict") else record

def load(key, factory=None):
	"""Load the sequence stored under key.

	factory converts each stored object (e.g. Assignment.from_dict); with no
	factory the raw JSON values are returned.
	"""
	raw = storage_repo.get_item(key)
	if raw is None:
		return []
	try:
		data = json.loads(raw)
		if not isinstance(data, list):
			raise TypeError(f"expected a list, got {type(data).__name__}")
		if factory is None:
			return data
		return [factory(item) for item in data]
	except (ValueError, TypeError, KeyError) as e:
		logger.warning("Ignoring malformed data under %r: %s", key, e)
		return []

def save(key, records):
	"""Serialize the full sequence and overwrite whatever key held."""
	payload = json.dumps([_encode(r) for r in records], indent=2)
	storage_repo.set_item(key, payload)
	logger.debug("saved %d record(s) to %r", len(records), key)

def load_value(key, default=None):
	"""Load a scalar or single-object entry; default when absent or unreadable."""
	raw = storage_repo.get_item(key)
	if raw is None:
		return default
	try:
		return json.loads(raw)
	except ValueError as e:
		logger.warning("Ignoring malformed value under %r: %s", key, e)
		return default

def save_value(key, value):
	storage_repo.set_item(key, json.dumps(_encode(value)))

def remove(key):
	storage_repo.remove_item(key)
