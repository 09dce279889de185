"""server.py
Server to launch the CV site generator as a FastAPI / Swagger UI instance.
"""
import os
import uuid
from typing import Optional

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field

from cv_site.config import GENERATOR_DEFAULTS
from cv_site.exceptions import CvSiteConfigError, ExtractionInsufficientError
from cv_site.logging import LoggerFactory
from cv_site.models import GenerateRequestData, ThemeConfig
from cv_site.parse_classes.cv_site_framework import CvSiteFramework

logger = LoggerFactory().get_logger(name="api_server", logger_type="default")

app = FastAPI(title="CV Site Generator API", version="1.0")

UPLOAD_DIR = GENERATOR_DEFAULTS.UPLOAD_DIR


class GenerateRequest(BaseModel):
    """Body of POST /generate. Field names follow the JSON (camelCase) contract."""
    model_config = ConfigDict(populate_by_name=True)

    deepseek_url: str = Field(default="", alias="deepseekUrl")
    theme_type: str = Field(default=GENERATOR_DEFAULTS.DEFAULT_THEME_TYPE, alias="themeType")
    theme_colors: str = Field(default=GENERATOR_DEFAULTS.DEFAULT_THEME_COLORS, alias="themeColors")
    professional: bool = True
    uploaded_file_path: Optional[str] = Field(default=None, alias="uploadedFilePath")

    def to_request_data(self) -> GenerateRequestData:
        return GenerateRequestData(
            deepseek_url=(self.deepseek_url or "").strip(),
            uploaded_file_path=self.uploaded_file_path or None,
            theme=ThemeConfig(
                theme_type=self.theme_type,
                theme_colors=self.theme_colors,
                professional=self.professional,
            ),
        )


# Initiate CvSiteFramework for use when server calls
cv_site_framework = CvSiteFramework()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"ok": False, "error": message})


def resolve_uploaded_path(uploaded_file_path: Optional[str]) -> Optional[str]:
    """
    Resolve a client supplied upload path and make sure it points inside
    UPLOAD_DIR (symlinks and `..` segments are resolved first).

    Raises:
        CvSiteConfigError: If the path resolves outside the upload directory.
    """
    if not uploaded_file_path:
        return None

    upload_root = os.path.realpath(UPLOAD_DIR)
    resolved = os.path.realpath(uploaded_file_path)
    if os.path.commonpath([upload_root, resolved]) != upload_root:
        raise CvSiteConfigError("uploadedFilePath must point to a file returned by /upload-cv.")
    return resolved


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies get the same {ok, error} shape as every other failure."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body") or "body"
        problems.append(f"{location}: {error.get('msg')}")

    logger.info(f"Rejected invalid request to {request.url.path}: {problems}")
    return _error(400, "Invalid request: " + "; ".join(problems))


app.add_exception_handler(RequestValidationError, request_validation_handler)


@app.get("/", response_class=PlainTextResponse)
def health() -> str:
    return "CV Site Generator running"


@app.post(
    "/upload-cv",
    summary="Upload a CV file",
    description="Stores an uploaded CV (PDF, DOCX, DOC or text) and returns its server-side path.",
)
async def upload_cv(cv: Optional[UploadFile] = File(None)):
    """
    Save the uploaded file under a random name (original extension kept).
    """
    if cv is None or not cv.filename:
        return _error(400, "No file uploaded")

    # ---- Validate file size ----
    contents = await cv.read()
    max_bytes = GENERATOR_DEFAULTS.MAX_FILE_SIZE_MB * 1024 * 1024
    if len(contents) > max_bytes:
        return _error(
            413,
            f"File too large. Max allowed size is {GENERATOR_DEFAULTS.MAX_FILE_SIZE_MB} MB.",
        )

    # ---- Save under a random name ----
    os.makedirs(UPLOAD_DIR, exist_ok=True)
    extension = os.path.splitext(cv.filename)[1]
    filename = f"{uuid.uuid4().hex}{extension}"
    local_path = os.path.join(UPLOAD_DIR, filename)

    with open(local_path, "wb") as f:
        f.write(contents)

    logger.info(f"Stored upload '{cv.filename}' as '{local_path}' ({len(contents)} bytes)")
    return {
        "ok": True,
        "filename": filename,
        "originalname": cv.filename,
        "localPath": os.path.abspath(local_path),
    }


@app.post(
    "/generate",
    summary="Generate a CV page",
    description="Extracts text from a shared page and/or an uploaded file and returns a rendered HTML page.",
)
def generate(body: GenerateRequest):
    """
    Run the generation pipeline. Insufficient text, missing inputs and upload
    paths outside UPLOAD_DIR are reported as 400, anything unexpected as 500.
    """
    try:
        request_data = body.to_request_data()
        request_data.uploaded_file_path = resolve_uploaded_path(request_data.uploaded_file_path)
        html = cv_site_framework.generate(request_data)
    except (CvSiteConfigError, ExtractionInsufficientError) as e:
        logger.info(f"Generate rejected: {e.message}")
        return _error(400, e.message)
    except Exception as e:
        logger.exception("Generate failed")
        return _error(500, str(e))

    return {"ok": True, "html": html}
