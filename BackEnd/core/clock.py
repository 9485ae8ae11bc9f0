from datetime import datetime, date

# Fixed English names; schedule days are stored in English whatever the locale
DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTH_NAMES = ("January", "February", "March", "April", "May", "June", "July",
	"August", "September", "October", "November", "December")

def local_today_str():
	"""Return local date as YYYY-MM-DD string."""
	return datetime.now().date().isoformat()

def weekday_name(day=None):
	"""English weekday name ('Monday'..'Sunday') for day, default today."""
	day = day or date.today()
	return DAY_NAMES[day.weekday()]

def fmt_mmss(minutes: int, seconds: int) -> str:
	"""Format a countdown as MM:SS."""
	return f"{minutes:02}:{seconds:02}"

def today_banner(day=None):
	"""Long form used in the footer, e.g. 'Friday, October 16, 2026'."""
	day = day or date.today()
	return f"{weekday_name(day)}, {MONTH_NAMES[day.month - 1]} {day.day}, {day.year}"
