import logging
from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from api.schemas import ReportRequest
from models.report_exporter import PdfReportExporter, ReportExportError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["report"])
exporter = PdfReportExporter()


@router.post("/api/v1/report")
def export_report(req: ReportRequest):
    """Download the single-page PDF report of a simulation result"""
    try:
        document = exporter.render(req.result)
    except ReportExportError as e:
        logger.warning(f"Report export refused: {e.message}")
        raise HTTPException(status_code=e.status_code, detail=e.message)

    filename = exporter.filename(req.result)
    return Response(
        content=document,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
