from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from homeservices.api.v1.schemas import (
    BookingResultSchema,
    BookingStateSchema,
    CatalogResponseSchema,
    ComparisonResponseSchema,
    DraftUpdateSchema,
    ServiceRefSchema,
    ServiceSchema,
    TrackRequestSchema,
    TrackResponseSchema,
    VerticalSchema,
)
from homeservices.application.dto.view_state import ViewState
from homeservices.application.exceptions import (
    BookingNotFound,
    BookingValidationError,
    GatewayUnavailable,
    InvalidTransition,
    LoginRequired,
    SubmissionError,
)
from homeservices.application.use_cases.storefront import StorefrontUseCase, UnknownVertical
from homeservices.infrastructure.identity.header_identity import HeaderIdentityProvider
from homeservices.wiring.dependencies import get_storefront

router = APIRouter()


def _vertical(uc: StorefrontUseCase, key: str):
    try:
        return uc.vertical(key)
    except UnknownVertical as e:
        raise HTTPException(status_code=404, detail=str(e))


def _view(uc: StorefrontUseCase, vertical: str, view_id: str) -> ViewState:
    _vertical(uc, vertical)
    return uc.open_view(view_id, vertical)


@router.get("/verticals", response_model=list[VerticalSchema])
def list_verticals(uc: StorefrontUseCase = Depends(get_storefront)):
    return [
        VerticalSchema(
            key=v.key,
            display_name=v.display_name,
            categories=list(v.categories),
            supports_tracking=v.supports_tracking,
        )
        for v in uc.verticals()
    ]


@router.get("/verticals/{vertical}/services", response_model=CatalogResponseSchema)
def list_services(
    vertical: str,
    category: str = Query("All"),
    uc: StorefrontUseCase = Depends(get_storefront),
):
    config = _vertical(uc, vertical)
    catalog = uc.load_catalog(vertical)
    return CatalogResponseSchema(
        vertical=config.key,
        category=category,
        categories=catalog.categories(),
        used_fallback=catalog.used_fallback,
        services=[ServiceSchema.from_service(s, config) for s in catalog.filtered(category)],
    )


@router.get("/verticals/{vertical}/services/{service_id}", response_model=ServiceSchema)
def get_service(vertical: str, service_id: str, uc: StorefrontUseCase = Depends(get_storefront)):
    config = _vertical(uc, vertical)
    service = uc.catalog(vertical).load_detail(service_id)
    if service is None:
        raise HTTPException(status_code=404, detail="Service not found")
    return ServiceSchema.from_service(service, config)


@router.get("/verticals/{vertical}/views/{view_id}/comparison", response_model=ComparisonResponseSchema)
def get_comparison(vertical: str, view_id: str, uc: StorefrontUseCase = Depends(get_storefront)):
    state = _view(uc, vertical, view_id)
    return ComparisonResponseSchema.from_set(state.comparison, state.vertical)


@router.post("/verticals/{vertical}/views/{view_id}/comparison/toggle", response_model=ComparisonResponseSchema)
def toggle_comparison(
    vertical: str,
    view_id: str,
    body: ServiceRefSchema,
    uc: StorefrontUseCase = Depends(get_storefront),
):
    state = _view(uc, vertical, view_id)
    service = state.catalog.get(body.service_id)
    if service is None:
        raise HTTPException(status_code=404, detail="Service not found")
    changed = state.comparison.toggle(service)
    return ComparisonResponseSchema.from_set(state.comparison, state.vertical, changed=changed)


@router.delete("/verticals/{vertical}/views/{view_id}/comparison", response_model=ComparisonResponseSchema)
def clear_comparison(vertical: str, view_id: str, uc: StorefrontUseCase = Depends(get_storefront)):
    state = _view(uc, vertical, view_id)
    state.comparison.clear()
    return ComparisonResponseSchema.from_set(state.comparison, state.vertical)


@router.get("/verticals/{vertical}/views/{view_id}/booking", response_model=BookingStateSchema)
def get_booking(vertical: str, view_id: str, uc: StorefrontUseCase = Depends(get_storefront)):
    state = _view(uc, vertical, view_id)
    return BookingStateSchema.from_session(state.booking)


@router.post("/verticals/{vertical}/views/{view_id}/booking/select", response_model=BookingStateSchema)
def select_service(
    vertical: str,
    view_id: str,
    body: ServiceRefSchema,
    request: Request,
    uc: StorefrontUseCase = Depends(get_storefront),
):
    state = _view(uc, vertical, view_id)
    try:
        service = uc.select_service(state, body.service_id, HeaderIdentityProvider(request.headers))
    except LoginRequired as e:
        raise HTTPException(status_code=401, detail=str(e))
    except InvalidTransition as e:
        raise HTTPException(status_code=409, detail=str(e))
    if service is None:
        raise HTTPException(status_code=404, detail="Service not found")
    return BookingStateSchema.from_session(state.booking)


@router.patch("/verticals/{vertical}/views/{view_id}/booking/draft", response_model=BookingStateSchema)
def update_draft(
    vertical: str,
    view_id: str,
    body: DraftUpdateSchema,
    uc: StorefrontUseCase = Depends(get_storefront),
):
    state = _view(uc, vertical, view_id)
    try:
        state.booking.update_draft(**body.to_values())
    except InvalidTransition as e:
        raise HTTPException(status_code=409, detail=str(e))
    return BookingStateSchema.from_session(state.booking)


@router.post("/verticals/{vertical}/views/{view_id}/booking/submit", response_model=BookingResultSchema)
def submit_booking(vertical: str, view_id: str, uc: StorefrontUseCase = Depends(get_storefront)):
    state = _view(uc, vertical, view_id)
    try:
        result = state.booking.submit()
    except BookingValidationError as e:
        raise HTTPException(status_code=422, detail={"message": str(e), "errors": e.errors})
    except SubmissionError as e:
        raise HTTPException(status_code=502, detail=e.message)
    except InvalidTransition as e:
        raise HTTPException(status_code=409, detail=str(e))
    if result is None:
        raise HTTPException(status_code=410, detail="View closed before the booking completed")
    return BookingResultSchema.from_result(result)


@router.post("/verticals/{vertical}/views/{view_id}/booking/acknowledge", response_model=BookingStateSchema)
def acknowledge_booking(vertical: str, view_id: str, uc: StorefrontUseCase = Depends(get_storefront)):
    state = _view(uc, vertical, view_id)
    try:
        state.booking.acknowledge()
    except InvalidTransition as e:
        raise HTTPException(status_code=409, detail=str(e))
    return BookingStateSchema.from_session(state.booking)


@router.delete("/verticals/{vertical}/views/{view_id}/booking", response_model=BookingStateSchema)
def cancel_booking(vertical: str, view_id: str, uc: StorefrontUseCase = Depends(get_storefront)):
    state = _view(uc, vertical, view_id)
    try:
        state.booking.cancel()
    except InvalidTransition as e:
        raise HTTPException(status_code=409, detail=str(e))
    return BookingStateSchema.from_session(state.booking)


@router.post("/verticals/{vertical}/views/{view_id}/track", response_model=TrackResponseSchema)
def track_booking(
    vertical: str,
    view_id: str,
    body: TrackRequestSchema,
    uc: StorefrontUseCase = Depends(get_storefront),
):
    state = _view(uc, vertical, view_id)
    if state.tracking is None:
        raise HTTPException(status_code=404, detail=f"Tracking is not available for {state.vertical.display_name}")
    try:
        result = state.tracking.track(body.booking_id, body.phone)
    except BookingValidationError as e:
        raise HTTPException(status_code=422, detail={"message": str(e), "errors": e.errors})
    except BookingNotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    except GatewayUnavailable:
        raise HTTPException(status_code=502, detail=state.tracking.error)
    if result is None:
        raise HTTPException(status_code=410, detail="View closed before the lookup completed")
    return TrackResponseSchema.from_result(result)


@router.delete("/verticals/{vertical}/views/{view_id}", status_code=204)
def close_view(vertical: str, view_id: str, uc: StorefrontUseCase = Depends(get_storefront)):
    _vertical(uc, vertical)
    uc.close_view(view_id)
    return Response(status_code=204)
