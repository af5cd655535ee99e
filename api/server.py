"""server.py
Server hosting the resume builder UI and its JSON API.

A single in-memory ResumeBuilderSession holds the document being edited, so
the app is meant to run locally for one user. All state is lost on restart.
"""
import os
import uuid
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, File, HTTPException, Request, UploadFile
from fastapi.responses import FileResponse, HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from resume_architect.config import BUILDER_DEFAULTS
from resume_architect.editor.form_editor import PERSONAL_FIELDS
from resume_architect.exceptions import ResumeDataError
from resume_architect.knowledge_base import DEFAULT_OPEN_CATEGORY, get_knowledge_base
from resume_architect.logging import LoggerFactory
from resume_architect.models import ResumeData, to_camel_case, to_snake_case
from resume_architect.session import ResumeBuilderSession

logger = LoggerFactory().get_logger(__name__)

VIEWS_DIR = Path(__file__).parent / "views"
TEMP_DIR = "temp_files"

# camelCase wire key -> PersonalInfo attribute
PERSONAL_FIELD_KEYS = {to_camel_case(name): name for name in PERSONAL_FIELDS}

app = FastAPI(title="AI Resume Architect", version="1.0")
templates = Jinja2Templates(directory=str(VIEWS_DIR))

# The one session this local app serves
resume_session = ResumeBuilderSession()


def get_session() -> ResumeBuilderSession:
    return resume_session


# --------------------------------------------------------------
# REQUEST MODELS
# --------------------------------------------------------------
class TextValueInput(BaseModel):
    value: str


class ItemFieldInput(BaseModel):
    field: str
    value: Any


class PresentInput(BaseModel):
    checked: bool


class TemplateInput(BaseModel):
    template: str


def _bad_request(e: Exception) -> HTTPException:
    return HTTPException(status_code=400, detail=str(e))


# --------------------------------------------------------------
# PAGES
# --------------------------------------------------------------
@app.get("/", response_class=HTMLResponse)
async def index(request: Request, session: ResumeBuilderSession = Depends(get_session)):
    """Editor shell: upload control, form tabs, template picker and live preview."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "state": session.to_state(),
            "a4_width": BUILDER_DEFAULTS.A4_WIDTH_PX,
            "preview_padding": BUILDER_DEFAULTS.PREVIEW_PADDING_PX,
            "preview_edge": BUILDER_DEFAULTS.PREVIEW_EDGE_PX,
            "max_file_size_mb": BUILDER_DEFAULTS.MAX_FILE_SIZE_MB,
        },
    )


@app.get("/api/preview", response_class=HTMLResponse)
async def preview(session: ResumeBuilderSession = Depends(get_session)):
    """The resume rendered with the selected template as a standalone A4 page."""
    return HTMLResponse(session.render_preview())


# --------------------------------------------------------------
# STATE
# --------------------------------------------------------------
@app.get("/api/state")
async def get_state(session: ResumeBuilderSession = Depends(get_session)) -> Dict[str, Any]:
    return session.to_state()


@app.put("/api/resume")
async def replace_resume(payload: Dict[str, Any], session: ResumeBuilderSession = Depends(get_session)):
    """Load a full resume in its camelCase wire shape."""
    try:
        session.load_resume(ResumeData.from_dict(payload))
    except ResumeDataError as e:
        raise _bad_request(e)
    return session.to_state()


@app.post("/api/alert/dismiss")
async def dismiss_alert(session: ResumeBuilderSession = Depends(get_session)):
    session.dismiss_alert()
    return session.to_state()


# --------------------------------------------------------------
# UPLOAD
# --------------------------------------------------------------
@app.post(
    "/api/upload",
    summary="Upload a resume file and extract its fields",
    description="Accepts PDF, PNG/JPEG or DOC/DOCX up to 5 MB and replaces the resume with the extracted data.",
)
async def upload_resume(
    file: UploadFile = File(...),
    session: ResumeBuilderSession = Depends(get_session),
):
    # ---- Validate file size ----
    contents = await file.read()
    max_bytes = session.max_file_size_mb * 1024 * 1024
    if len(contents) > max_bytes:
        session.error = session.strings["fileSizeError"]
        raise HTTPException(status_code=413, detail=session.error)

    # ---- Save upload to a temp file ----
    os.makedirs(TEMP_DIR, exist_ok=True)
    file_name = os.path.basename(file.filename or "upload")
    temp_path = os.path.join(TEMP_DIR, f"{uuid.uuid4().hex}_{file_name}")

    logger.info(f"Received upload `{file_name}` ({len(contents)} bytes)")
    with open(temp_path, "wb") as f:
        f.write(contents)

    try:
        await session.handle_upload(temp_path, file_name=file_name)
    finally:
        # ---- Cleanup temp file ----
        try:
            os.remove(temp_path)
        except FileNotFoundError:
            pass

    return session.to_state()


# --------------------------------------------------------------
# EDITING
# --------------------------------------------------------------
@app.put("/api/resume/personal/{field}")
async def update_personal_info(
    field: str,
    body: TextValueInput,
    session: ResumeBuilderSession = Depends(get_session),
):
    field_name = PERSONAL_FIELD_KEYS.get(field, field)
    try:
        session.update_personal_info(field_name, body.value)
    except ValueError as e:
        raise _bad_request(e)
    return session.to_state()


@app.put("/api/resume/summary")
async def update_summary(body: TextValueInput, session: ResumeBuilderSession = Depends(get_session)):
    session.update_summary(body.value)
    return session.to_state()


@app.post("/api/resume/avatar")
async def upload_avatar(
    file: UploadFile = File(...),
    session: ResumeBuilderSession = Depends(get_session),
):
    try:
        session.set_avatar(await file.read(), file.content_type or "")
    except ValueError as e:
        raise _bad_request(e)
    return session.to_state()


@app.delete("/api/resume/avatar")
async def remove_avatar(session: ResumeBuilderSession = Depends(get_session)):
    session.remove_avatar()
    return session.to_state()


@app.post("/api/resume/{section}")
async def add_item(section: str, session: ResumeBuilderSession = Depends(get_session)):
    try:
        item_id = session.add_item(section)
    except ValueError as e:
        raise _bad_request(e)
    return {"id": item_id, "state": session.to_state()}


@app.patch("/api/resume/{section}/{item_id}")
async def update_item(
    section: str,
    item_id: str,
    body: ItemFieldInput,
    session: ResumeBuilderSession = Depends(get_session),
):
    try:
        session.update_item(section, item_id, to_snake_case(body.field), body.value)
    except ValueError as e:
        raise _bad_request(e)
    return session.to_state()


@app.post("/api/resume/{section}/{item_id}/present")
async def toggle_present(
    section: str,
    item_id: str,
    body: PresentInput,
    session: ResumeBuilderSession = Depends(get_session),
):
    try:
        session.toggle_present(section, item_id, body.checked)
    except ValueError as e:
        raise _bad_request(e)
    return session.to_state()


@app.delete("/api/resume/{section}/{item_id}")
async def remove_item(section: str, item_id: str, session: ResumeBuilderSession = Depends(get_session)):
    try:
        session.remove_item(section, item_id)
    except ValueError as e:
        raise _bad_request(e)
    return session.to_state()


# --------------------------------------------------------------
# TEMPLATE / LANGUAGE
# --------------------------------------------------------------
@app.put("/api/template")
async def select_template(body: TemplateInput, session: ResumeBuilderSession = Depends(get_session)):
    try:
        session.select_template(body.template)
    except ValueError as e:
        raise _bad_request(e)
    return session.to_state()


@app.post("/api/language/toggle")
async def toggle_language(session: ResumeBuilderSession = Depends(get_session)):
    """Flip the UI language and translate the resume into it."""
    await session.toggle_language()
    return session.to_state()


# --------------------------------------------------------------
# EXPORT
# --------------------------------------------------------------
@app.post("/api/export")
async def export_pdf(session: ResumeBuilderSession = Depends(get_session)):
    """
    Returns the PDF as a download, or a JSON body describing the print fallback.
    """
    result = await session.export_pdf()
    if result is None:
        if session.is_exporting:
            raise HTTPException(status_code=409, detail=session.strings["exporting"])
        return {"method": None, "message": session.alert or "", "state": session.to_state()}

    if result.method == "pdf":
        return FileResponse(result.path, media_type="application/pdf", filename=result.path.name)

    return {"method": result.method, "message": result.message, "state": session.to_state()}


# --------------------------------------------------------------
# KNOWLEDGE BASE
# --------------------------------------------------------------
@app.get("/api/knowledge_base")
async def knowledge_base(
    language: Optional[str] = None,
    session: ResumeBuilderSession = Depends(get_session),
):
    categories = get_knowledge_base(language or session.language)
    return {
        "openCategory": DEFAULT_OPEN_CATEGORY,
        "categories": [category.to_dict() for category in categories],
    }
