import os
from pathlib import Path

from BackEnd.core import config

def user_data_dir(app_name="StudyOrganizer"):
	"""Return per-user data dir (Windows/macOS/Linux).

	STUDY_ORGANIZER_DATA_DIR overrides the platform location.
	"""
	override = config.data_dir_override()
	if override:
		path = Path(override)
	else:
		if os.name == "nt":
			base = os.environ.get("LOCALAPPDATA", os.path.expanduser("~\\AppData\\Local"))
		elif os.name == "posix":
			base = os.environ.get("XDG_DATA_HOME", os.path.expanduser("~/.local/share"))
		else:
			base = os.path.expanduser("~")
		path = Path(base) / app_name
	path.mkdir(parents=True, exist_ok=True)
	return path

def db_path():
	"""Return Path to the organizer database inside user data dir."""
	return user_data_dir() / config.db_filename()
