"""
Runtime configuration for the SEO Content Analyzer demo.
Values come from the environment, optionally seeded from a .env file.
"""
import os
from typing import List

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

WEBHOOK_URL = os.getenv("WEBHOOK_URL", "https://n8n.irizpro.com/webhook/analyze-content")
ANALYSIS_TIMEOUT_SECONDS = float(os.getenv("ANALYSIS_TIMEOUT_SECONDS", 120))  # 2 min
DEFAULT_GEO_LOCATION = os.getenv("DEFAULT_GEO_LOCATION", "IN")

# Placeholder identity sent with every webhook call
DEMO_USER_ID = os.getenv("DEMO_USER_ID", "demo-user")
DEMO_USER_EMAIL = os.getenv("DEMO_USER_EMAIL", "demo@example.com")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

BRAND_NAME = os.getenv("BRAND_NAME", "Irizpro")
CONTACT_EMAIL = os.getenv("CONTACT_EMAIL", "team@irizpro.com")
CONTACT_URL = os.getenv(
    "CONTACT_URL",
    "https://api.whatsapp.com/send/?phone=15551611777&text=Hi+I+am+interested&type=phone_number&app_absent=0",
)

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))


def parse_origins(raw: str) -> List[str]:
    """Split a comma-separated origin list, falling back to '*'."""
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


ALLOWED_ORIGINS = parse_origins(os.getenv("ALLOWED_ORIGINS", "*"))
