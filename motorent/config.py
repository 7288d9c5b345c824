import os

server_mode = os.getenv("SERVER_MODE", "development")
"""The operational mode of the server."""

api_root = "/api/v1"
"""The base url for the api."""

database_url = os.getenv("DATABASE_URL", "sqlite://db.sqlite3")
"""The tortoise connection string for the database."""

port = int(os.getenv("PORT", "8080"))
"""The port the server listens on."""

jwt_secret = os.getenv("MOTORENT_JWT_SECRET", None)
"""The shared secret used to verify bearer tokens."""

admin_ids = frozenset(
    token.strip() for token in os.getenv("MOTORENT_ADMINS", "").split(",") if token.strip()
)
"""The token subjects that have admin rights."""

payment_strategy = os.getenv("MOTORENT_PAYMENT_STRATEGY", "penalty")
"""The name of the strategy used to price returned rents."""

promotional_discount = float(os.getenv("MOTORENT_PROMOTIONAL_DISCOUNT", "0.1"))
"""The fraction taken off the price when using the promotional strategy."""

license_image_dir = os.getenv("MOTORENT_LICENSE_DIR", "licenses")
"""Where uploaded driver license images are stored."""

sentry_dsn = os.getenv("SENTRY_DSN", None)
"""The sentry DSN. Exception tracking is disabled when unset."""
