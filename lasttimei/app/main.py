import time
from typing import Dict

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel
from starlette.middleware.base import BaseHTTPMiddleware

from lasttimei import __version__
from lasttimei.config import HOME_REGION, TABLE_NAME
from lasttimei.lib.errors import StoreReadError, StoreWriteError, UnregisteredDeviceError
from lasttimei.lib.events import fetch_record
from lasttimei.lib.models import ActionRecord, ButtonEvent
from lasttimei.lib.presses import handle_press
from lasttimei.lib.registry import registered_actions
from lasttimei.lib.store import get_table

app = FastAPI(title="LastTimeI", version=__version__)


class Health(BaseModel):
    status: str
    region: str
    table: str


@app.get("/health", response_model=Health)
def health():
    return Health(status="ok", region=HOME_REGION, table=TABLE_NAME)


@app.get("/actions")
def list_actions() -> Dict[str, str]:
    return registered_actions()


@app.post("/presses", response_model=ActionRecord, status_code=201)
def post_press(body: ButtonEvent, table=Depends(get_table)):
    try:
        return handle_press(body, table)
    except UnregisteredDeviceError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreWriteError as e:
        raise HTTPException(status_code=502, detail=e.message)


@app.get("/events/{record_id}", response_model=ActionRecord)
def get_event(record_id: str, table=Depends(get_table)):
    try:
        rec = fetch_record(table, record_id)
    except StoreReadError as e:
        raise HTTPException(status_code=502, detail=e.message)
    if rec is None:
        raise HTTPException(status_code=404, detail="not found")
    return rec


class ObservabilityHeaders(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        t0 = time.perf_counter()
        resp = await call_next(request)
        resp.headers["X-Region"] = HOME_REGION
        resp.headers["X-Server-ProcessMs"] = f"{(time.perf_counter()-t0)*1000:.2f}"
        return resp


app.add_middleware(ObservabilityHeaders)
