"""Yagi and Moxon design routes."""
import logging
from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from models import YagiInput, YagiDesign, MoxonInput, MoxonDesign, InvalidInputDetail
from services.errors import InvalidInputError
from services.yagi import design_yagi, cut_list_tsv
from services.moxon import design_moxon, design_moxgen

router = APIRouter()
logger = logging.getLogger(__name__)


def invalid_input(e: InvalidInputError) -> HTTPException:
    logger.warning(f"Rejected design input: {e.field} ({e.reason}): {e.message}")
    detail = InvalidInputDetail(field=e.field, reason=e.reason, message=e.message)
    return HTTPException(status_code=422, detail=detail.model_dump())


@router.post("/yagi", response_model=YagiDesign)
async def yagi(request: YagiInput):
    try:
        return design_yagi(request)
    except InvalidInputError as e:
        raise invalid_input(e)


@router.post("/yagi/cut-list")
async def yagi_cut_list(request: YagiInput):
    """Cut list as tab-separated text, ready to paste into a spreadsheet."""
    try:
        design = design_yagi(request)
    except InvalidInputError as e:
        raise invalid_input(e)
    filename = f"yagi_{request.element_count}el_{request.frequency_mhz:g}MHz.tsv"
    return Response(
        content=cut_list_tsv(design),
        media_type="text/tab-separated-values",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@router.post("/moxon", response_model=MoxonDesign)
async def moxon(request: MoxonInput):
    try:
        return design_moxon(request)
    except InvalidInputError as e:
        raise invalid_input(e)


@router.post("/moxon/moxgen", response_model=MoxonDesign)
async def moxon_moxgen(request: MoxonInput):
    try:
        return design_moxgen(request)
    except InvalidInputError as e:
        raise invalid_input(e)
