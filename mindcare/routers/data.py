import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.concurrency import run_in_threadpool

from ..deps import get_store
from ..schemas import DataSummary, ImportResult
from ..services.store import DataStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/data", tags=["data"])

IMPORT_ERROR = "Error importing data. Please check the file format."


@router.get("/export")
def export_data(store: DataStore = Depends(get_store)):
    filename = f"mindcare-data-{store.today().isoformat()}.json"
    return Response(
        content=store.export_all(),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/import", response_model=ImportResult)
async def import_data(request: Request, store: DataStore = Depends(get_store)):
    # Raw body: the client uploads the exported file as-is
    body = await request.body()
    # blocking store call runs in the threadpool
    if not await run_in_threadpool(store.import_all, body):
        raise HTTPException(status_code=400, detail=IMPORT_ERROR)
    return ImportResult(success=True)


@router.delete("", response_model=ImportResult)
def clear_data(store: DataStore = Depends(get_store)):
    store.clear_all()
    logger.info("All local data cleared")
    return ImportResult(success=True)


@router.get("/summary", response_model=DataSummary)
def data_summary(store: DataStore = Depends(get_store)):
    return store.data_summary()
