import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./recruitment_gate.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")

    # Invitations
    FRONTEND_URL = data.get("FRONTEND_URL", "http://localhost:3000")
    INVITATION_EXPIRATION_DAYS = int(data.get("INVITATION_EXPIRATION_DAYS", 7))

    # Outbound email
    SMTP_HOST = data.get("SMTP_HOST", "localhost")
    SMTP_PORT = int(data.get("SMTP_PORT", 465))
    SMTP_USERNAME = data.get("SMTP_USERNAME", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_FROM_EMAIL = data.get("SMTP_FROM_EMAIL", "no-reply@talentree.local")
    SMTP_FROM_NAME = data.get("SMTP_FROM_NAME", "Talentree")
    SMTP_USE_SSL = bool(data.get("SMTP_USE_SSL", True))
    NOTIFICATION_TIMEOUT_SECONDS = float(data.get("NOTIFICATION_TIMEOUT_SECONDS", 10))

    # Video storage
    STORAGE_LOCAL_PATH = data.get("STORAGE_LOCAL_PATH", os.path.join(ROOT_PATH, "uploads"))
    STORAGE_TIMEOUT_SECONDS = float(data.get("STORAGE_TIMEOUT_SECONDS", 30))
    MAX_VIDEO_SIZE_MB = int(data.get("MAX_VIDEO_SIZE_MB", 100))
