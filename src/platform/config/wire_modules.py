"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.entry_pass.app.command import book_tickets_use_case, purchase_entry_pass_use_case
from src.service.entry_pass.app.query import get_entry_pass_use_case
from src.service.scheduling.app.command import save_event_schedule_use_case
from src.service.scheduling.app.query import get_event_schedule_use_case
from src.service.shared_kernel.driving_adapter.http_controller import auth_dependency
from src.service.verification.app.command import (
    close_scan_session_use_case,
    mark_attended_use_case,
    verify_ticket_use_case,
)
from src.service.verification.app.query import get_scan_session_use_case


WIRE_MODULES: list[ModuleType] = [
    get_event_schedule_use_case,
    save_event_schedule_use_case,
    get_entry_pass_use_case,
    purchase_entry_pass_use_case,
    book_tickets_use_case,
    verify_ticket_use_case,
    mark_attended_use_case,
    get_scan_session_use_case,
    close_scan_session_use_case,
    auth_dependency,
]
