"""FastAPI server for the EatSafe compliance core."""

from dataclasses import asdict

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from config.settings import settings
from eatsafe.geo import detect_jurisdiction
from eatsafe.registry import (
    get_framework_registry,
    resolve_variant,
)
from eatsafe.scoring import score_assessment
from eatsafe.thresholds import THRESHOLD_FAMILIES, get_threshold, temp_status
from eatsafe.tracing.logger import get_tracer, setup_tracing

from api.schemas import (
    FrameworkListResponse,
    FrameworkResponse,
    FrameworkSummary,
    GeoDetectResponse,
    ScoreRequest,
    ScoreResponse,
    TemperatureResponse,
    VariantResponse,
)

if settings.tracing_enabled:
    setup_tracing(settings.log_level)

app = FastAPI(
    title="EatSafe Compliance API",
    description="Food-safety compliance frameworks, scoring and jurisdiction detection",
    version="0.1.0",
)

# CORS for the mobile and web clients
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============ Health Check ============

@app.get("/health")
async def health():
    """Health check endpoint."""
    registry = get_framework_registry()
    return {
        "status": "ok",
        "service": "eatsafe",
        "variant": settings.app_variant,
        "frameworks": len(registry),
    }


# ============ Frameworks ============

@app.get("/frameworks", response_model=FrameworkListResponse)
async def list_frameworks(region: str | None = None):
    """Get registered compliance frameworks, optionally for one region."""
    registry = get_framework_registry()
    configs = registry.filter_by_region(region) if region else registry.list_all()
    return FrameworkListResponse(
        frameworks=[
            FrameworkSummary(
                id=config.id,
                region_id=config.region_id,
                name=config.labels.framework_name,
                model=config.scoring.model.value,
                item_count=len(config.get_all_items()),
            )
            for config in configs
        ]
    )


@app.get("/framework", response_model=FrameworkResponse)
async def get_variant_framework(variant: str | None = None):
    """Get the framework of an app variant, by default the deployed one.

    Unknown variants resolve to the baseline.
    """
    config = get_framework_registry().get_variant_framework_config(
        variant or settings.app_variant
    )
    return FrameworkResponse.model_validate(config.to_dict())


@app.get("/frameworks/{code}", response_model=FrameworkResponse)
async def get_framework(code: str):
    """Get a framework config; unknown codes resolve to the baseline."""
    config = get_framework_registry().get_framework_config(code)
    return FrameworkResponse.model_validate(config.to_dict())


@app.post("/frameworks/{code}/score", response_model=ScoreResponse)
async def score_framework(code: str, request: ScoreRequest):
    """Score a self-assessment against a framework."""
    config = get_framework_registry().get_framework_config(code)
    answers = {
        item_code: answer.model_dump(mode="json")
        for item_code, answer in request.answers.items()
    }
    result = score_assessment(config, answers)
    return ScoreResponse.model_validate(result.to_dict())


# ============ Variants ============

@app.get("/variants/{variant}", response_model=VariantResponse)
async def get_variant(variant: str):
    """Resolve an app variant into its stream, region, brand and framework."""
    try:
        resolved = resolve_variant(variant)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Variant '{variant}' not found")

    return VariantResponse(
        variant=resolved.variant,
        stream=resolved.stream.id,
        layout=resolved.stream.layout.value,
        store_mode=resolved.stream.store_mode.value,
        region=resolved.region.id,
        currency=resolved.region.currency,
        currency_symbol=resolved.region.currency_symbol,
        locale=resolved.region.locale,
        framework_code=resolved.framework_code,
        base_features=list(resolved.base_features) if resolved.base_features is not None else None,
        release_modules=list(resolved.release_modules),
        brand=asdict(resolved.brand),
    )


# ============ Geo ============

@app.get("/geo/detect", response_model=GeoDetectResponse)
async def detect(address: str = "", region: str = "au"):
    """Detect the jurisdiction and framework for a venue address."""
    jurisdiction, framework_code = detect_jurisdiction(address, region)
    return GeoDetectResponse(
        region=region,
        jurisdiction=jurisdiction,
        framework_code=framework_code,
    )


# ============ Temperature ============

@app.get("/temperature/{family}/{log_type}", response_model=TemperatureResponse)
async def check_temperature(family: str, log_type: str, reading: float):
    """Classify a temperature reading for a logged check."""
    if family not in THRESHOLD_FAMILIES:
        raise HTTPException(status_code=404, detail=f"Threshold family '{family}' not found")

    status = temp_status(THRESHOLD_FAMILIES[family], log_type, reading)
    return TemperatureResponse(
        family=family,
        log_type=log_type,
        reading=reading,
        status=status.value,
        known_log_type=get_threshold(family, log_type) is not None,
    )


# ============ Trace ============

@app.get("/trace")
async def get_trace():
    """Get the event trace from the current session."""
    return {"events": get_tracer().get_events()}


@app.delete("/trace")
async def clear_trace():
    """Clear the event trace."""
    get_tracer().clear()
    return {"status": "cleared"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8888)
