from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.platform.logging.loguru_io import Logger
from src.service.entry_pass.app.command.book_tickets_use_case import (
    BookTicketsUseCase,
    quote_events,
)
from src.service.entry_pass.app.command.purchase_entry_pass_use_case import (
    PurchaseEntryPassUseCase,
)
from src.service.entry_pass.app.dto.entry_pass_view import EntryPassView
from src.service.entry_pass.app.query.get_entry_pass_use_case import GetEntryPassUseCase
from src.service.entry_pass.domain.entity.entry_pass_entity import pass_state
from src.service.entry_pass.driving_adapter.http_controller.schema.entry_pass_schema import (
    BookEventsRequest,
    BookingResponse,
    BookShowRequest,
    EntryPassResponse,
    EventsQuoteResponse,
    PurchaseQuoteResponse,
    PurchaseRequest,
    build_events_quote,
)
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession
from src.service.shared_kernel.driving_adapter.http_controller.auth_dependency import (
    get_auth_session,
)


router = APIRouter()


@router.get('/me')
@Logger.io
async def get_my_entry_pass(
    available_seats: Optional[int] = Query(None, ge=0),
    session: AuthSession = Depends(get_auth_session),
    use_case: GetEntryPassUseCase = Depends(GetEntryPassUseCase.depends),
) -> EntryPassResponse:
    """Current pass and, when a seat count is given, how many tickets can be booked."""
    view = await use_case.get_view(session=session)
    return EntryPassResponse.from_view(view, available_seats)


@router.post('/quote')
@Logger.io
async def quote_entry_pass(
    request: PurchaseRequest,
    session: AuthSession = Depends(get_auth_session),
    use_case: PurchaseEntryPassUseCase = Depends(PurchaseEntryPassUseCase.depends),
) -> PurchaseQuoteResponse:
    return PurchaseQuoteResponse(
        head_count=request.head_count, amount=use_case.quote_purchase(request.head_count)
    )


@router.post('/purchase', status_code=status.HTTP_201_CREATED)
@Logger.io
async def purchase_entry_pass(
    request: PurchaseRequest,
    session: AuthSession = Depends(get_auth_session),
    use_case: PurchaseEntryPassUseCase = Depends(PurchaseEntryPassUseCase.depends),
) -> EntryPassResponse:
    entry_pass = await use_case.purchase(session=session, head_count=request.head_count)
    view = EntryPassView(entry_pass=entry_pass, state=pass_state(entry_pass))
    return EntryPassResponse.from_view(view)


@router.post('/bookings', status_code=status.HTTP_201_CREATED)
@Logger.io
async def book_show(
    request: BookShowRequest,
    session: AuthSession = Depends(get_auth_session),
    use_case: BookTicketsUseCase = Depends(BookTicketsUseCase.depends),
) -> BookingResponse:
    confirmation = await use_case.book_show(
        session=session,
        event_id=request.event_id,
        show_id=request.show_id,
        head_count=request.head_count,
        available_seats=request.available_seats,
    )
    return BookingResponse.from_confirmation(confirmation)


@router.post('/bookings/events/quote')
@Logger.io
async def quote_event_bookings(
    request: BookEventsRequest,
    session: AuthSession = Depends(get_auth_session),
) -> EventsQuoteResponse:
    selections = request.to_selections()
    return EventsQuoteResponse(
        quantity=request.quantity,
        total=quote_events(selections, request.quantity),
        lines=build_events_quote(selections, request.quantity),
    )


@router.post('/bookings/events', status_code=status.HTTP_201_CREATED)
@Logger.io
async def book_events(
    request: BookEventsRequest,
    session: AuthSession = Depends(get_auth_session),
    use_case: BookTicketsUseCase = Depends(BookTicketsUseCase.depends),
) -> BookingResponse:
    confirmation = await use_case.book_events(
        session=session, events=request.to_selections(), quantity=request.quantity
    )
    return BookingResponse.from_confirmation(confirmation)
