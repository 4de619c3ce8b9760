import logging
from datetime import datetime, timezone
from typing import Dict, Optional

from flask import Flask, jsonify

from .character import parse_character
from .config import API_COMMIT, API_RELEASE, API_VERSION
from .errors import CharacterNotFound, ScraperError
from .fetch import FetchError, fetch_character_page

app = Flask(__name__)


def information(http_code: int, error: Optional[str] = None) -> Dict[str, object]:
    status: Dict[str, object] = {"http_code": http_code}
    if error:
        status["message"] = error
    return {
        "api": {"version": API_VERSION, "release": API_RELEASE, "commit": API_COMMIT},
        "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        "status": status,
    }


def _error(http_code: int, message: str):
    return jsonify({"information": information(http_code, message)}), http_code


# --------------------------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------------------------

@app.route("/healthz")
def healthz():
    return jsonify({"ok": True})


@app.route("/v4/character/<name>")
def character(name: str):
    try:
        record = parse_character(fetch_character_page(name))
    except CharacterNotFound:
        return _error(404, "could not find character")
    except FetchError as e:
        logging.warning("Upstream fetch failed for %s: %s", name, e)
        return _error(502, "upstream request failed")
    except ScraperError as e:
        logging.error("Parsing %s failed: %s", name, e)
        return _error(500, "internal server error")

    payload = {"character": record.to_dict(), "information": information(200)}
    return jsonify(payload)


if __name__ == "__main__":
    app.run(debug=True)
