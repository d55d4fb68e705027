from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=None, extra="ignore")

    ENV: str = "prod"
    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str

    JWT_SECRET: str
    JWT_ACCESS_MINUTES: int = 1440
    VERIFICATION_TOKEN_MINUTES: int = 10

    OTP_TTL_SECONDS: int = 600
    OTP_PEPPER: str = "CHANGE_ME"
    OTP_RETENTION_DAYS: int = 30

    # none|any|email|phone|both
    PROFILE_REQUIRED_VERIFICATIONS: str = "any"

    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT_SECONDS: int = 30
    DB_POOL_RECYCLE_SECONDS: int = 1800

    ALLOWED_HOSTS: str = "localhost,127.0.0.1"
    SECURITY_HEADERS_ENABLED: bool = True

    # Notifications
    COMMUNITY_NAME: str = "52 Gam Kadva Patel Samaj"
    EMAIL_PROVIDER: str = "console"  # console|brevo|smtp
    EMAIL_FROM: str = "Community <noreply@example.com>"
    BREVO_API_KEY: str | None = None
    BREVO_API_URL: str = "https://api.brevo.com/v3/smtp/email"
    SMTP_HOST: str = "smtp.gmail.com"
    SMTP_PORT: int = 465
    SMTP_USER: str | None = None
    SMTP_PASSWORD: str | None = None
    SMS_PROVIDER: str = "console"  # console|twilio
    TWILIO_ACCOUNT_SID: str | None = None
    TWILIO_AUTH_TOKEN: str | None = None
    TWILIO_FROM_NUMBER: str | None = None
    SMS_DEFAULT_COUNTRY_CODE: str = "91"
    NOTIFY_TIMEOUT_SECONDS: int = 10

    # Bootstrap admin (scripts/create_admin.py)
    ADMIN_EMAIL: str = "admin@community.com"
    ADMIN_PASSWORD: str | None = None
    ADMIN_PHONE: str = "9999999999"

    SEARCH_DEFAULT_PAGE_SIZE: int = 20
    SEARCH_MAX_PAGE_SIZE: int = 100
    ADMIN_TOP_VILLAGES: int = 15

settings = Settings()
