from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional, List

# Environment names of the values needed to authenticate against EmailJS
REQUIRED_EMAILJS_VARS = (
    "EMAILJS_SERVICE_ID",
    "EMAILJS_NOTIFICATION_TEMPLATE_ID",
    "EMAILJS_AUTOREPLY_TEMPLATE_ID",
    "EMAILJS_PUBLIC_KEY",
    "EMAILJS_PRIVATE_KEY",
)


class EmailServiceNotConfigured(Exception):
    """Raised when one or more EmailJS credentials are absent."""

    def __init__(self, missing: List[str]):
        self.missing = missing
        super().__init__(f"EmailJS not configured! Missing: {', '.join(missing)}")


class EmailJSCredentials(BaseModel):
    """Everything needed to address both EmailJS templates"""
    service_id: str
    notification_template_id: str
    autoreply_template_id: str
    public_key: str
    private_key: str


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # EmailJS credentials - must be provided via environment variables
    emailjs_service_id: Optional[str] = None
    emailjs_notification_template_id: Optional[str] = None
    emailjs_autoreply_template_id: Optional[str] = None
    emailjs_public_key: Optional[str] = None
    emailjs_private_key: Optional[str] = None

    emailjs_api_url: str = "https://api.emailjs.com/api/v1.0/email/send"
    emailjs_timeout_seconds: float = 10.0

    # Adds the provider's error text to 500 responses. Keep off in production.
    expose_error_details: bool = False

    log_level: str = "INFO"

    # Auto-reply branding
    site_owner_name: str = "The Team"
    site_owner_tagline: Optional[str] = None
    site_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    whatsapp_url: Optional[str] = None
    facebook_url: Optional[str] = None

    def missing_credentials(self) -> List[str]:
        """Environment names of the EmailJS values that are absent or empty"""
        return [
            var for var in REQUIRED_EMAILJS_VARS
            if not getattr(self, var.lower())
        ]

    def emailjs_credentials(self) -> EmailJSCredentials:
        missing = self.missing_credentials()
        if missing:
            raise EmailServiceNotConfigured(missing)
        return EmailJSCredentials(
            service_id=self.emailjs_service_id,
            notification_template_id=self.emailjs_notification_template_id,
            autoreply_template_id=self.emailjs_autoreply_template_id,
            public_key=self.emailjs_public_key,
            private_key=self.emailjs_private_key,
        )


@lru_cache
def get_settings():
    return Settings()
