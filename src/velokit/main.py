from __future__ import annotations

from typing import List

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .builder import build_parts, compute_spares
from .config import BIKES_PATH, CORS_ENABLED, HOST, PORT
from .data import BikeConfigRepository
from .errors import UnknownBikeError, VelokitError
from .gearing import Gear, Wheel
from .logging import setup_logging
from .schemas import BikeSummary, GearRequest, GearResponse, PartsRequest

repo = BikeConfigRepository(BIKES_PATH)

app = FastAPI(title="velokit")
if CORS_ENABLED:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(ValidationError)
def validation_error(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors(include_url=False))},
    )


@app.exception_handler(UnknownBikeError)
def unknown_bike(request: Request, exc: UnknownBikeError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(VelokitError)
def domain_error(request: Request, exc: VelokitError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.get("/api/bikes")
def list_bikes() -> List[BikeSummary]:
    summaries = []
    for config in repo.all_bikes():
        bicycle = repo.build_bicycle(config.name)
        summaries.append(
            BikeSummary(
                name=config.name,
                size=bicycle.size,
                parts=list(bicycle.parts),
                spares=list(bicycle.spares()),
            )
        )
    return summaries


@app.get("/api/bikes/{name}/spares")
def bike_spares(name: str):
    return repo.build_bicycle(name).spares().as_list()


@app.post("/api/parts")
def build_parts_endpoint(payload: PartsRequest):
    return build_parts(payload.parts).as_list()


@app.post("/api/spares")
def spares_endpoint(payload: PartsRequest):
    return compute_spares(build_parts(payload.parts)).as_list()


@app.post("/api/gear-inches")
def gear_inches(payload: GearRequest) -> GearResponse:
    wheel = Wheel(payload.rim, payload.tire)
    gear = Gear(payload.chainring, payload.cog, wheel=wheel)
    return GearResponse(ratio=gear.ratio, gear_inches=gear.gear_inches, diameter=wheel.diameter)


def run() -> None:
    import uvicorn

    setup_logging()
    uvicorn.run(app, host=HOST, port=PORT)
