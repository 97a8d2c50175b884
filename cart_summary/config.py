"""Configuration management using environment variables"""
import logging
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_TAX_SERVICE_URL = "https://some-tax-service.com/request"


class Settings:
    """Application settings - YAGNI: Only what we need right now"""

    def __init__(self):
        # Environment
        self.environment = os.getenv("ENVIRONMENT", "development")

        # Tax-rate service endpoint
        if self.environment == "production":
            self.tax_service_url = self._get_required("TAX_SERVICE_URL")
        else:
            self.tax_service_url = os.getenv("TAX_SERVICE_URL", DEFAULT_TAX_SERVICE_URL)

        self.tax_service_timeout = float(os.getenv("TAX_SERVICE_TIMEOUT", "10.0"))  # seconds

        # Jurisdictions that require a remote tax lookup (comma-separated)
        self.taxable_jurisdictions = self._parse_jurisdictions(
            os.getenv("TAXABLE_JURISDICTIONS", "CA")
        )
        if not self.taxable_jurisdictions:
            logging.getLogger(__name__).warning(
                "⚠️  TAXABLE_JURISDICTIONS is empty - every cart will be charged zero tax"
            )

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    def _get_required(self, key: str) -> str:
        """Get required environment variable or raise error."""
        value = os.getenv(key, "").strip()
        if not value:
            raise ValueError(
                f"Missing required environment variable: {key}. "
                f"Required in production mode."
            )
        return value

    @staticmethod
    def _parse_jurisdictions(raw: str) -> frozenset:
        """Split a comma-separated list into upper-cased jurisdiction codes."""
        return frozenset(
            code.strip().upper()
            for code in raw.split(",")
            if code.strip()
        )


# Global settings instance
settings = Settings()
