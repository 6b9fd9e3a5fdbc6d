import logging
import os
from typing import Optional

from fastapi import FastAPI, Query, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from kolam_canvas.config import CanvasConfig, configure_logging, get_env
from kolam_canvas.exporter import DEFAULT_FILENAME, ExportError
from kolam_canvas.session import CanvasSession
from kolam_canvas.strokes_csv import paths_to_csv_bytes
from kolam_canvas.templates import TEMPLATE_IDS

config = CanvasConfig.from_env()
configure_logging(config.log_level)
logger = logging.getLogger(__name__)

app = FastAPI()
session = CanvasSession(config)

STATIC_DIR = config.export_dir
os.makedirs(STATIC_DIR, exist_ok=True)

MEDIA_TYPES = {"png": "image/png", "jpeg": "image/jpeg", "jpg": "image/jpeg"}


class PointerPayload(BaseModel):
    x: float
    y: float


class TemplatePayload(BaseModel):
    template_id: str


class SymmetryPayload(BaseModel):
    enabled: bool


class ExportPayload(BaseModel):
    filename: Optional[str] = None


def _state_response(state, pattern_events=None):
    body = state.to_dict()
    if pattern_events is not None:
        body["pattern_events"] = pattern_events
    return JSONResponse(body, headers={"Cache-Control": "no-store"})


# ---------------- KolamCanvas -------------------

@app.get("/kolamcanvas/state")
async def canvas_state():
    state, events = await session.apply_counted(lambda c: c.state)
    return _state_response(state, events)


@app.get("/kolamcanvas/templates")
def canvas_templates():
    return {"templates": list(TEMPLATE_IDS)}


@app.post("/kolamcanvas/pointer/down")
async def pointer_down(payload: PointerPayload):
    state = await session.apply(lambda c: c.pointer_down(payload.x, payload.y))
    return _state_response(state)


@app.post("/kolamcanvas/pointer/move")
async def pointer_move(payload: PointerPayload):
    state = await session.apply(lambda c: c.pointer_move(payload.x, payload.y))
    return _state_response(state)


@app.post("/kolamcanvas/pointer/up")
async def pointer_up():
    state, events = await session.apply_counted(lambda c: c.pointer_up())
    return _state_response(state, events)


@app.post("/kolamcanvas/pointer/leave")
async def pointer_leave():
    state, events = await session.apply_counted(lambda c: c.pointer_leave())
    return _state_response(state, events)


@app.post("/kolamcanvas/template")
async def load_template(payload: TemplatePayload):
    """Replace the drawing with a generated template (unknown ids clear it)."""
    state, events = await session.apply_counted(lambda c: c.load_template(payload.template_id))
    return _state_response(state, events)


@app.post("/kolamcanvas/symmetry")
async def set_symmetry(payload: SymmetryPayload):
    state = await session.apply(lambda c: c.set_symmetry_enabled(payload.enabled))
    return _state_response(state)


@app.post("/kolamcanvas/clear")
async def clear_canvas():
    state = await session.apply(lambda c: c.clear())
    return _state_response(state)


@app.get("/kolamcanvas/image")
async def canvas_image(fmt: str = Query("png", description="png or jpeg")):
    media_type = MEDIA_TYPES.get(fmt.lower())
    if media_type is None:
        return JSONResponse({"error": f"Unsupported format '{fmt}'"}, status_code=400)
    try:
        data = await session.apply(lambda c: c.image_bytes(fmt))
    except ExportError as e:
        return JSONResponse({"error": str(e)}, status_code=503)
    return Response(content=data, media_type=media_type, headers={"Cache-Control": "no-store"})


@app.post("/kolamcanvas/export")
async def export_canvas(payload: Optional[ExportPayload] = None):
    filename = os.path.basename((payload and payload.filename) or DEFAULT_FILENAME)
    path = os.path.join(STATIC_DIR, filename)
    saved, err = await session.apply(lambda c: c.export_image(path))
    if err is not None:
        logger.error("[KolamCanvas] Export of %s failed: %s", filename, err)
        return JSONResponse({"success": False, "error": str(err)}, status_code=500)
    return {"success": True, "file": os.path.basename(saved)}


@app.get("/kolamcanvas/strokes_csv")
async def strokes_csv():
    paths = await session.apply(lambda c: c.committed_paths)
    return Response(content=paths_to_csv_bytes(paths), media_type="text/csv", headers={
        "Content-Disposition": "attachment; filename=kolam_strokes.csv"
    })


@app.post("/kolamcanvas/reset")
async def reset_canvas():
    """Start over with a fresh surface built from the current config."""
    state, events = await session.reset()
    return _state_response(state, events)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_env("KOLAM_HOST", "127.0.0.1"), port=int(get_env("KOLAM_PORT", "8000")))
