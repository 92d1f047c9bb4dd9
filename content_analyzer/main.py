"""
FastAPI application for the SEO Content Analyzer demo.
Serves the demo page and relays analysis requests to the external webhook.
"""
import logging
import uuid
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import FastAPI, Form, Header, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from content_analyzer import __version__, config
from content_analyzer.models import AnalysisRequest, ErrorResponse
from content_analyzer.normalizer import extract_html
from content_analyzer.relay import (
    GENERIC_FAILURE_MESSAGE, REQUIRED_FIELDS_MESSAGE, RelayError, WebhookRelay
)

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler()
    ]
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="SEO Content Analyzer",
    description="""
    Free demo of the SEO Content Analyzer.

    ## Usage
    1. Submit a content URL and target keyword
    2. The request is relayed to the analysis service
    3. A partial preview of the report is shown
    """,
    version=__version__
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials=config.ALLOWED_ORIGINS != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

# Initialize relay
relay = WebhookRelay()

ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Missing URL or target keyword"},
    408: {"model": ErrorResponse, "description": "Analysis service timed out"},
    500: {"model": ErrorResponse, "description": "Analysis could not be run"},
    502: {"model": ErrorResponse, "description": "Analysis service error or unreadable reply"},
}


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(content={"error": message}, status_code=status_code)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
    return error_response(REQUIRED_FIELDS_MESSAGE, 400)


@app.post("/api/analyze", responses=ERROR_RESPONSES)
async def analyze(
    request: AnalysisRequest,
    x_request_id: Optional[str] = Header(None),
):
    """
    Relay an analysis request to the webhook.

    Returns the webhook's JSON payload verbatim on success. Every failure is
    answered with `{"error": "..."}` and a status describing the outcome.
    """
    request_id = x_request_id or str(uuid.uuid4())
    logger.info(f"[{request_id}] Received analysis request for URL: {request.url}, Keyword: {request.target_keyword}")

    try:
        data = await relay.analyze(request, request_id=request_id)
    except RelayError as e:
        logger.info(f"[{request_id}] Analysis failed with {e.status_code}: {e.message}")
        return error_response(e.message, e.status_code)
    except Exception as e:
        logger.error(f"[{request_id}] Analyze route error: {e}", exc_info=True)
        return error_response(str(e) or GENERIC_FAILURE_MESSAGE, 500)

    return JSONResponse(content=data)


def render_page(
    request: Request,
    form: Optional[AnalysisRequest] = None,
    error: Optional[str] = None,
    report_html: Optional[str] = None,
    status_code: int = 200,
) -> HTMLResponse:
    """Render the demo page with optional error banner or report preview."""
    form = form or AnalysisRequest(geoLocation=config.DEFAULT_GEO_LOCATION)
    context = {
        "form": form,
        "error": error,
        "report_html": report_html,
        "brand_name": config.BRAND_NAME,
        "contact_email": config.CONTACT_EMAIL,
        "contact_url": config.CONTACT_URL,
    }
    return templates.TemplateResponse(request, "index.html", context, status_code=status_code)


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Render the empty analysis form."""
    return render_page(request)


@app.post("/analyze", response_class=HTMLResponse)
async def analyze_form(
    request: Request,
    url: str = Form(""),
    target_keyword: str = Form("", alias="targetKeyword"),
    secondary_keywords: str = Form("", alias="secondaryKeywords"),
    geo_location: str = Form("", alias="geoLocation"),
    x_request_id: Optional[str] = Header(None),
):
    """Handle a form submission and render a partial preview of the report."""
    request_id = x_request_id or str(uuid.uuid4())
    form = AnalysisRequest(
        url=url,
        targetKeyword=target_keyword,
        secondaryKeywords=secondary_keywords,
        geoLocation=geo_location,
    )

    try:
        data = await relay.analyze(form, request_id=request_id)
    except RelayError as e:
        return render_page(request, form=form, error=e.message, status_code=e.status_code)
    except Exception as e:
        logger.error(f"[{request_id}] Analyze form error: {e}", exc_info=True)
        return render_page(request, form=form, error=str(e) or GENERIC_FAILURE_MESSAGE, status_code=500)

    report_html = extract_html(data)
    if not report_html:
        logger.warning(f"[{request_id}] No renderable report in webhook payload ({type(data).__name__})")
    return render_page(request, form=form, report_html=report_html)


@app.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns:
        Dict containing status of the API and its dependencies
    """
    return {
        "status": "healthy",
        "version": __version__,
        "dependencies": {
            "webhook": bool(relay.webhook_url)
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
