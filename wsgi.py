"""WSGI entry point."""

import os

from bloomwell import create_app, db

app = create_app(os.environ.get("FLASK_ENV", "production"))

# Create the record tables on startup
with app.app_context():
    db.create_all()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", 3000)))
