from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.scheduling.app.command.edit_show_schedule_use_case import EditShowScheduleUseCase
from src.service.scheduling.app.command.save_event_schedule_use_case import (
    SaveEventScheduleUseCase,
)
from src.service.scheduling.app.query.get_event_schedule_use_case import GetEventScheduleUseCase
from src.service.scheduling.app.query.get_show_calendar_use_case import GetShowCalendarUseCase
from src.service.scheduling.driving_adapter.http_controller.schema.event_schedule_schema import (
    AddShowRequest,
    CalendarCellResponse,
    CalendarRequest,
    DuplicateShowRequest,
    DuplicateTargetsRequest,
    DuplicateTargetsResponse,
    EditShowRequest,
    EventFormRequest,
    EventScheduleResponse,
    RemoveShowRequest,
    ScheduleResponse,
)
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession
from src.service.shared_kernel.driving_adapter.http_controller.auth_dependency import (
    require_admin,
)


router = APIRouter()


@router.get('/events/{event_id}')
@Logger.io
async def get_event_schedule(
    event_id: str,
    session: AuthSession = Depends(require_admin),
    use_case: GetEventScheduleUseCase = Depends(GetEventScheduleUseCase.depends),
) -> EventScheduleResponse:
    event_schedule = await use_case.get_schedule(session=session, event_id=event_id)
    return EventScheduleResponse.from_event_schedule(event_schedule)


@router.post('/events', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_event(
    request: EventFormRequest,
    session: AuthSession = Depends(require_admin),
    use_case: SaveEventScheduleUseCase = Depends(SaveEventScheduleUseCase.depends),
) -> EventScheduleResponse:
    event_schedule = await use_case.create_event(
        session=session, event=request.to_event(), schedule=request.to_schedule()
    )
    return EventScheduleResponse.from_event_schedule(event_schedule)


@router.put('/events/{event_id}')
@Logger.io
async def update_event(
    event_id: str,
    request: EventFormRequest,
    session: AuthSession = Depends(require_admin),
    use_case: SaveEventScheduleUseCase = Depends(SaveEventScheduleUseCase.depends),
) -> EventScheduleResponse:
    event_schedule = await use_case.update_event(
        session=session,
        event_id=event_id,
        event=request.to_event(),
        schedule=request.to_schedule(event_id),
    )
    return EventScheduleResponse.from_event_schedule(event_schedule)


# ---- In-editor show changes: the caller sends its shows, gets the new list back ----


@router.post('/shows')
@Logger.io
async def add_show(
    request: AddShowRequest,
    session: AuthSession = Depends(require_admin),
    use_case: EditShowScheduleUseCase = Depends(EditShowScheduleUseCase.depends),
) -> ScheduleResponse:
    schedule = request.to_schedule()
    added = use_case.add_show(
        schedule=schedule,
        date=request.show.date,
        start_time=request.show.start_time,
        end_time=request.show.end_time,
    )
    return ScheduleResponse.from_schedule(schedule, [added])


@router.put('/shows/{show_id}')
@Logger.io
async def edit_show(
    show_id: str,
    request: EditShowRequest,
    session: AuthSession = Depends(require_admin),
    use_case: EditShowScheduleUseCase = Depends(EditShowScheduleUseCase.depends),
) -> ScheduleResponse:
    schedule = request.to_schedule()
    edited = use_case.edit_show(
        schedule=schedule,
        show_id=show_id,
        date=request.show.date,
        start_time=request.show.start_time,
        end_time=request.show.end_time,
    )
    return ScheduleResponse.from_schedule(schedule, [edited])


@router.post('/shows/{show_id}/remove')
@Logger.io
async def remove_show(
    show_id: str,
    request: RemoveShowRequest,
    session: AuthSession = Depends(require_admin),
    use_case: EditShowScheduleUseCase = Depends(EditShowScheduleUseCase.depends),
) -> ScheduleResponse:
    schedule = request.to_schedule()
    removed = use_case.remove_show(schedule=schedule, show_id=show_id, confirmed=request.confirmed)
    return ScheduleResponse.from_schedule(schedule, [removed])


@router.post('/shows/{show_id}/duplicate-targets')
@Logger.io
async def list_duplicate_targets(
    show_id: str,
    request: DuplicateTargetsRequest,
    session: AuthSession = Depends(require_admin),
    use_case: EditShowScheduleUseCase = Depends(EditShowScheduleUseCase.depends),
) -> DuplicateTargetsResponse:
    targets = use_case.duplicate_targets(
        schedule=request.to_schedule(), show_id=show_id, candidate_dates=request.candidate_dates
    )
    return DuplicateTargetsResponse(target_dates=targets)


@router.post('/shows/{show_id}/duplicate')
@Logger.io
async def duplicate_show(
    show_id: str,
    request: DuplicateShowRequest,
    session: AuthSession = Depends(require_admin),
    use_case: EditShowScheduleUseCase = Depends(EditShowScheduleUseCase.depends),
) -> ScheduleResponse:
    schedule = request.to_schedule()
    duplicates = use_case.duplicate_show(
        schedule=schedule, show_id=show_id, target_dates=request.target_dates
    )
    return ScheduleResponse.from_schedule(schedule, duplicates)


@router.post('/calendar')
@Logger.io
async def get_show_calendar(
    request: CalendarRequest,
    session: AuthSession = Depends(require_admin),
    use_case: GetShowCalendarUseCase = Depends(GetShowCalendarUseCase.depends),
) -> list[CalendarCellResponse]:
    cells = use_case.get_month(
        month=request.month, year=request.year, schedule=request.to_schedule()
    )
    return [CalendarCellResponse.from_cell(cell) for cell in cells]
