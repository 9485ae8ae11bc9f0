"""Key/value text store: string keys mapped to serialized text values.

One row per key in a single SQLite table inside the user data dir. Callers
read whole entries and write whole entries back; nothing here knows about
the shape of the stored text.
"""
import logging
import sqlite3

from BackEnd.core.paths import db_path

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS storage (
	key TEXT PRIMARY KEY,
	value TEXT NOT NULL,
	updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
);
"""

def connect():
	"""Open SQLite connection and ensure schema is applied."""
	dbfile = db_path()
	conn = sqlite3.connect(dbfile)
	conn.row_factory = sqlite3.Row
	conn.executescript(SCHEMA)
	return conn

def _run(query, params=(), fetch=None):
	conn = connect()
	try:
		with conn:
			cur = conn.execute(query, params)
			if fetch == "one":
				return cur.fetchone()
			if fetch == "all":
				return cur.fetchall()
			return None
	except sqlite3.Error:
		logger.exception("storage query failed: %s", query.split()[0])
		raise
	finally:
		conn.close()

def get_item(key):
	"""Return the stored text for key, or None when absent."""
	row = _run("SELECT value FROM storage WHERE key=?", (key,), fetch="one")
	return row["value"] if row else None

def set_item(key, value):
	"""Overwrite the entry for key with value (text)."""
	_run(
		"""
		INSERT INTO storage (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP)
		ON CONFLICT(key) DO UPDATE SET value=excluded.value, updated_at=excluded.updated_at
		""",
		(key, str(value)),
	)

def remove_item(key):
	_run("DELETE FROM storage WHERE key=?", (key,))

def keys():
	"""All stored keys, alphabetically."""
	rows = _run("SELECT key FROM storage ORDER BY key", fetch="all")
	return [r["key"] for r in rows]

def clear():
	"""Remove every entry. Returns how many were deleted."""
	existing = keys()
	_run("DELETE FROM storage")
	return len(existing)
