from pathlib import Path

# ------------ Config -------------
BASE = "https://www.tibia.com"
CHARACTER_URL = f"{BASE}/community/?subtopic=characters"

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/124.0.0.0 Safari/537.36"
)
REQUEST_HEADERS = {"User-Agent": USER_AGENT, "Referer": BASE}
TIMEOUT = 30  # seconds

API_VERSION = 4
API_RELEASE = "1.0.0"
API_COMMIT = "-"

OUTROOT = Path("output/characters")
LOGDIR = Path("output/logs")
