"""Color export routes"""
from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool
from munsell_api.models.schemas import ExportFormat, ExportJsonResponse, ExportRequest
from munsell_api.services.export import render_png, to_css, to_rgb

router = APIRouter(tags=["export"])


@router.post("/export-colors")
async def export_colors(request: ExportRequest):
    """
    Export a color set

    - **format**: json, css or png
    - **colors**: Non-empty list of colors, exported in order
    """
    if not request.colors:
        raise HTTPException(status_code=400, detail="Invalid colors array")

    try:
        export_format = ExportFormat((request.format or "").lower())
    except ValueError:
        raise HTTPException(status_code=400, detail="Unsupported format (json, css, png)")

    if export_format is ExportFormat.JSON:
        return ExportJsonResponse(colors=request.colors)

    if export_format is ExportFormat.CSS:
        return Response(content=to_css(request.colors), media_type="text/css")

    try:
        rgb_colors = [to_rgb(color) for color in request.colors]
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        png = await run_in_threadpool(render_png, rgb_colors)
    except Exception as e:
        print(f"PNG export error ({len(rgb_colors)} colors): {e!r}")
        raise HTTPException(status_code=500, detail="Failed to export")

    return Response(
        content=png,
        media_type="image/png",
        headers={"Content-Disposition": "attachment; filename=palette.png"}
    )
