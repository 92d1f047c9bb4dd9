"""
Pydantic models for the SEO Content Analyzer demo.
Defines the request accepted from the form and the error envelope returned on failure.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from content_analyzer.config import DEFAULT_GEO_LOCATION


def _clean(value: Optional[str]) -> str:
    return value.strip() if value else ""


class AnalysisRequest(BaseModel):
    """
    Form submission forwarded to the analysis webhook.

    Every field is optional at the schema level; required-field checks happen in
    the relay so that a missing URL or keyword gets the same 400 reply as a blank one.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "url": "https://example.com/article",
                "targetKeyword": "seo content optimizer",
                "secondaryKeywords": "on-page seo, content marketing",
                "geoLocation": "IN",
            }
        },
    )

    url: Optional[str] = Field(None, description="Content URL to analyze")
    target_keyword: Optional[str] = Field(None, alias="targetKeyword", description="Primary keyword")
    secondary_keywords: Optional[str] = Field(None, alias="secondaryKeywords", description="Optional: secondary keywords")
    geo_location: Optional[str] = Field(None, alias="geoLocation", description="Optional: country code, e.g. 'US', 'GB', 'IN'")

    def missing_required(self) -> bool:
        """True when the URL or the target keyword is absent or blank."""
        return not _clean(self.url) or not _clean(self.target_keyword)

    def to_webhook_inputs(self) -> Dict[str, str]:
        """Trimmed inputs block in the shape the webhook expects."""
        return {
            "content.url": _clean(self.url),
            "targetKeyword": _clean(self.target_keyword),
            "secondaryKeywords": _clean(self.secondary_keywords),
            "geoLocation": _clean(self.geo_location) or DEFAULT_GEO_LOCATION,
        }


class ErrorResponse(BaseModel):
    """Body of every non-200 JSON reply."""
    error: str

    model_config = ConfigDict(
        json_schema_extra={"example": {"error": "Content URL and Target Keyword are required."}}
    )


# The webhook's reply is passed through untouched; no schema is enforced.
AnalysisResponse = Any
