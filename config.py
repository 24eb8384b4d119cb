import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./crm.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    # The only email allowed to hold the super_admin global role
    SUPER_ADMIN_EMAIL = data.get("SUPER_ADMIN_EMAIL", "superadmin@crm.local")
    # Identity provider token verification
    IDENTITY_TOKEN_SECRET = data.get(
        "IDENTITY_TOKEN_SECRET", "dev-identity-secret-change-in-production"
    )
    IDENTITY_TOKEN_ALGORITHMS = data.get("IDENTITY_TOKEN_ALGORITHMS", None)
    IDENTITY_ISSUER = data.get("IDENTITY_ISSUER", None)
    IDENTITY_AUDIENCE = data.get("IDENTITY_AUDIENCE", None)
    IDENTITY_JWKS_URL = data.get("IDENTITY_JWKS_URL", None)
    IDENTITY_JWKS_CACHE_SECONDS = int(data.get("IDENTITY_JWKS_CACHE_SECONDS", 3600))
    IDENTITY_TIMEOUT_SECONDS = float(data.get("IDENTITY_TIMEOUT_SECONDS", 5.0))
