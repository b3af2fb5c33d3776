import os

# In a real deployment, set these through the environment
DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite://./orderdesk.sqlite3")
API_PREFIX: str = os.getenv("API_PREFIX", "/api/v1")
GENERATE_SCHEMAS: bool = os.getenv("GENERATE_SCHEMAS", "true").lower() in ("true", "1", "t")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
# Comma separated logger name prefixes, e.g. "orderdesk.features.reports,orderdesk.main"
LOG_NAMESPACES: list[str] = [
    ns.strip() for ns in os.getenv("LOG_NAMESPACES", "").split(",") if ns.strip()
]

MODEL_MODULES: list[str] = [
    "orderdesk.features.clients.models",
    "orderdesk.features.products.models",
    "orderdesk.features.orders.models",
]


def tortoise_config(db_url: str = DATABASE_URL) -> dict:
    """Builds the Tortoise-ORM config shared by the API and the CLI."""
    return {
        "connections": {"default": db_url},
        "apps": {
            "models": {  # App label referenced as "models.<Model>" in relations
                "models": MODEL_MODULES,
                "default_connection": "default",
            }
        },
        "use_tz": False,
        "timezone": "UTC",
    }


TORTOISE_ORM_CONFIG = tortoise_config()
