from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict

import numpy as np
import pandas as pd
from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from api.schemas import MetaDecadesResponse, MetaListResponse, ViewParamsModel
from awards.data import load_dashboard_data, records_frame
from awards.filters import ViewParams, normalize_params
from awards.metrics_categories import compute_categories
from awards.metrics_decades import compute_decades
from awards.metrics_hierarchy import compute_hierarchy
from awards.metrics_leaderboard import compute_leaderboard
from awards.metrics_network import compute_network
from awards.metrics_overview import compute_overview
from awards.metrics_trend import compute_trend
from awards.summaries import leaderboard, pie_share, stacked_by_decade, yearly_trend


app = FastAPI(title="Awards Dashboard API", version="0.1.0")
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

PageFn = Callable[[ViewParams, Dict[str, Any]], Dict[str, Any]]


def _params_from_model(model: ViewParamsModel, data_ctx: Dict[str, Any]) -> ViewParams:
    raw = model.model_dump()
    return normalize_params(raw, available_decades=data_ctx.get("decades", []), categories=data_ctx.get("categories", []))


def _json(data: object) -> JSONResponse:
    """Return JSON with safe encoding for pandas/numpy objects."""

    def _safe_float(value: object) -> float | None:
        try:
            out = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return None
        if math.isnan(out) or math.isinf(out):
            return None
        return out

    return JSONResponse(
        content=jsonable_encoder(
            data,
            custom_encoder={
                type(pd.NA): lambda _: None,
                np.integer: int,
                float: _safe_float,
                np.floating: _safe_float,
                np.bool_: bool,
                np.ndarray: lambda arr: arr.tolist(),
            },
        )
    )


def _error(name: str, exc: Exception) -> JSONResponse:
    logger.exception("%s failed", name)
    return JSONResponse(status_code=500, content={"error": str(exc), "type": type(exc).__name__})


def _run_page(name: str, compute: PageFn, model: ViewParamsModel) -> JSONResponse:
    try:
        data_ctx = load_dashboard_data()
        params = _params_from_model(model, data_ctx)
        return _json(compute(params, data_ctx))
    except Exception as exc:
        return _error(name, exc)


@app.get("/meta/categories")
def meta_categories():
    try:
        data_ctx = load_dashboard_data()
        return _json(MetaListResponse(values=data_ctx.get("categories", [])).model_dump())
    except Exception as exc:
        return _error("meta_categories", exc)


@app.get("/meta/classes")
def meta_classes():
    try:
        data_ctx = load_dashboard_data()
        return _json(MetaListResponse(values=data_ctx.get("classes", [])).model_dump())
    except Exception as exc:
        return _error("meta_classes", exc)


@app.get("/meta/decades")
def meta_decades():
    try:
        data_ctx = load_dashboard_data()
        return _json(MetaDecadesResponse(decades=data_ctx.get("decades", [])).model_dump())
    except Exception as exc:
        return _error("meta_decades", exc)


@app.post("/overview")
def overview(params: ViewParamsModel):
    return _run_page("overview", compute_overview, params)


@app.post("/categories")
def categories(params: ViewParamsModel):
    return _run_page("categories", compute_categories, params)


@app.post("/decades")
def decades(params: ViewParamsModel):
    return _run_page("decades", compute_decades, params)


@app.post("/trend")
def trend(params: ViewParamsModel):
    return _run_page("trend", compute_trend, params)


@app.post("/hierarchy")
def hierarchy(params: ViewParamsModel):
    return _run_page("hierarchy", compute_hierarchy, params)


@app.post("/network")
def network(params: ViewParamsModel):
    return _run_page("network", compute_network, params)


@app.post("/leaderboard")
def leaderboard_page(params: ViewParamsModel):
    return _run_page("leaderboard", compute_leaderboard, params)


@app.post("/export/{view}")
def export_view(view: str, params: ViewParamsModel):
    data_ctx = load_dashboard_data()
    p = _params_from_model(params, data_ctx)
    records = data_ctx.get("records", ())

    filename = f"{view}.csv"
    if view == "records":
        export_df = records_frame(records)
    elif view == "categories":
        export_df = pd.DataFrame(compute_categories(p, data_ctx)["totals"])
    elif view == "decades":
        rows = stacked_by_decade(records, decade_range=p.decade_range)
        export_df = pd.DataFrame([r["counts"] for r in rows])
        export_df.insert(0, "decade", [r["decade"] for r in rows], allow_duplicates=True)
        export_df.insert(len(export_df.columns), "total", [r["total"] for r in rows], allow_duplicates=True)
    elif view == "trend":
        export_df = pd.DataFrame(yearly_trend(records, p.category))
    elif view == "leaderboard":
        export_df = pd.DataFrame(leaderboard(records, top_n_items=p.leaderboard_top_n)["items"])
    elif view == "pie":
        export_df = pd.DataFrame(pie_share(records)["parts"])
    else:
        export_df = pd.DataFrame()

    csv_bytes = export_df.to_csv(index=False).encode("utf-8")
    return Response(content=csv_bytes, media_type="text/csv", headers={"Content-Disposition": f"attachment; filename={filename}"})
