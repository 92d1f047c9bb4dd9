"""
SEO Content Analyzer
A demo front end that relays content URLs and keywords to an external analysis service
and shows a partial preview of the returned report.
"""

__version__ = "1.0.0"

from .models import AnalysisRequest, ErrorResponse
from .normalizer import extract_html
from .relay import (
    WebhookRelay, RelayError, MissingFieldsError, AnalysisTimeoutError,
    UpstreamError, TransportError
)
