"""
WSGI entry point for the Todo API.

Defaults to the production config, which starts with an empty store.
Run ``FLASK_ENV=development python wsgi.py`` (or set ``SEED_TODOS=1``)
to boot with the starter todos "Clean Car" and "Clean Room".
"""

import os

from app import create_app

app = create_app(os.getenv("FLASK_ENV", "production"))


if __name__ == "__main__":
    app.run(host=app.config["HOST"], port=app.config["PORT"])
