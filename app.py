import logging
import os
from datetime import datetime, timezone

from flask import Flask, jsonify

GREETING = "Hello, GitHub Actions!"

logger = logging.getLogger(__name__)

app = Flask(__name__)


def utc_timestamp(now=None):
    """Render ``now`` (default: current time) as UTC ISO-8601 with millisecond precision."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@app.get("/")
def hello():
    return GREETING


@app.get("/status")
def status():
    return jsonify(status="OK", timestamp=utc_timestamp())


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", 5000))
    logger.info("Listening on %s:%d", host, port)
    app.run(host=host, port=port)


if __name__ == "__main__":
    main()
