# Parse a tibia.com character page (saved to disk or fetched live) into TibiaData-style JSON.
#
# Usage:
#   tibia-character --file output/pages/Bobeek.html
#   tibia-character --name "Bobeek" --out output/characters/Bobeek.json

import argparse
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .character import parse_character
from .config import LOGDIR, OUTROOT
from .errors import CharacterNotFound, ScraperError
from .fetch import fetch_character_page
from .site import information


# ------------ Logging -------------
def setup_logging() -> Path:
    LOGDIR.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = LOGDIR / f"run-{stamp}.log"

    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)

    fh = logging.FileHandler(log_path, encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))

    for h in list(logger.handlers):
        logger.removeHandler(h)

    logger.addHandler(fh)
    logger.addHandler(ch)

    logging.info("Logging to %s", log_path)
    return log_path


def default_out_path(name: str) -> Path:
    safe = "".join(c if c.isalnum() or c in " -_" else "_" for c in name).strip() or "character"
    return OUTROOT / f"{safe}.json"


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Parse a tibia.com character page into JSON.")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--file", help="Saved character page (HTML)")
    src.add_argument("--name", help="Character name to fetch from tibia.com")
    ap.add_argument("--out", help="Write JSON here instead of stdout", default=None)
    args = ap.parse_args(argv)

    log_path = setup_logging()

    try:
        if args.file:
            page_html = Path(args.file).read_text(encoding="utf-8")
        else:
            page_html = fetch_character_page(args.name)
        record = parse_character(page_html)
    except CharacterNotFound:
        logging.warning("Character not found (%s)", args.file or args.name)
        return 1
    except ScraperError as e:
        logging.error("Parse failed: %s", e)
        logging.info("Run log: %s", log_path)
        return 1
    except OSError as e:
        logging.error("Could not read %s: %s", args.file, e)
        return 1

    payload = {"character": record.to_dict(), "information": information(200)}
    text = json.dumps(payload, ensure_ascii=False, indent=2)

    out = Path(args.out) if args.out else (default_out_path(args.name) if args.name else None)
    if out is None:
        print(text)
    else:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8")
        logging.info("Saved %s -> %s", record.identity.name, out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
