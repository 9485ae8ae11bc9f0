import logging
import os
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parent.parent.parent
ENV_FILE = ROOT_DIR / "config.env"

DATA_DIR_VAR = "STUDY_ORGANIZER_DATA_DIR"
DB_NAME_VAR = "STUDY_ORGANIZER_DB"
DEFAULT_DB_NAME = "organizer.db"

_loaded = False

def load():
	"""Load config.env once; real environment variables win."""
	global _loaded
	if not _loaded:
		load_dotenv(ENV_FILE, override=False)
		_loaded = True

def data_dir_override():
	load()
	return os.getenv(DATA_DIR_VAR, "").strip() or None

def db_filename():
	load()
	return os.getenv(DB_NAME_VAR, "").strip() or DEFAULT_DB_NAME

def log_level():
	load()
	return os.getenv("LOG_LEVEL", "INFO").upper()

def configure_logging():
	level = log_level()
	logging.basicConfig(
		level=getattr(logging, level, logging.INFO),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)
