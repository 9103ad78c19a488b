"""Flask-Anwendung für die Synonymregel-API.

Richtet das Logging (UTF-8-sicher, auch unter Windows-Konsolen) ein und
registriert den Blueprint aus :mod:`synonym_rules.api`. Lokal startet
``python server.py`` einen Entwicklungsserver.
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv
from flask import Flask

from synonym_rules.api import bp as synonym_rules_bp


# Custom StreamHandler to handle encoding errors
class SafeEncodingStreamHandler(logging.StreamHandler):
    def emit(self, record):
        """Schreibt Logzeilen robust unter Erhalt nicht-ASCII-Zeichen."""
        try:
            msg = self.format(record)
            stream = self.stream
            stream.write(msg.encode('utf-8', errors='replace').decode('utf-8', errors='ignore') + self.terminator)
            self.flush()
        except Exception:
            self.handleError(record)


def configure_logging(level: int = logging.INFO) -> None:
    """Ersetzt die Root-Handler durch einen UTF-8-sicheren Stream-Handler."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
    safe_handler = SafeEncodingStreamHandler(sys.stdout)
    safe_handler.setFormatter(formatter)
    root_logger.addHandler(safe_handler)
    root_logger.setLevel(level)


logger = logging.getLogger(__name__)


def create_app() -> Flask:
    """Erzeugt die Flask-App mit registrierter Synonym-API."""
    app = Flask(__name__)
    app.json.ensure_ascii = False  # type: ignore[attr-defined]
    app.register_blueprint(synonym_rules_bp)

    @app.after_request
    def _ensure_utf8_charset(response):
        """Stelle sicher, dass JSON-Antworten explizit UTF-8 senden."""
        if response.mimetype == "application/json":
            response.headers["Content-Type"] = "application/json; charset=utf-8"
        return response

    logger.info("Synonym-API registriert unter %s", synonym_rules_bp.url_prefix)
    return app


if __name__ == "__main__":
    load_dotenv()
    configure_logging(logging.DEBUG if os.getenv("SYNONYM_DEBUG") else logging.INFO)
    port = int(os.getenv("PORT", "8000"))
    create_app().run(host="127.0.0.1", port=port)
