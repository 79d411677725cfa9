"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.http.upstream_api_client import UpstreamApiClient
from src.service.entry_pass.driven_adapter.gateway.booking_api_gateway_impl import (
    BookingApiGatewayImpl,
)
from src.service.entry_pass.driven_adapter.gateway.entry_pass_api_gateway_impl import (
    EntryPassApiGatewayImpl,
)
from src.service.entry_pass.driven_adapter.gateway.simulated_payment_gateway_impl import (
    SimulatedPaymentGatewayImpl,
)
from src.service.scheduling.driven_adapter.repo.event_api_repo_impl import EventApiRepoImpl
from src.service.shared_kernel.driven_adapter.auth_profile_api_gateway_impl import (
    AuthProfileApiGatewayImpl,
)
from src.service.verification.driven_adapter.gateway.ticket_api_gateway_impl import (
    TicketApiGatewayImpl,
)
from src.service.verification.driven_adapter.state.in_memory_scan_session_store import (
    InMemoryScanSessionStore,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Upstream REST API (one pooled httpx client per process)
    upstream_api_client = providers.Singleton(
        UpstreamApiClient,
        base_url=config_service.provided.UPSTREAM_API_URL,
        timeout=config_service.provided.UPSTREAM_TIMEOUT_SECONDS,
    )

    # Shared kernel
    auth_profile_gateway = providers.Singleton(
        AuthProfileApiGatewayImpl, client=upstream_api_client
    )

    # Scheduling (stateless - one adapter class implements both sides)
    event_query_repo = providers.Singleton(EventApiRepoImpl, client=upstream_api_client)
    event_command_repo = providers.Singleton(EventApiRepoImpl, client=upstream_api_client)

    # Entry pass
    entry_pass_gateway = providers.Singleton(EntryPassApiGatewayImpl, client=upstream_api_client)
    booking_gateway = providers.Singleton(BookingApiGatewayImpl, client=upstream_api_client)
    payment_simulator = providers.Singleton(
        SimulatedPaymentGatewayImpl,
        delay_seconds=config_service.provided.PAYMENT_SIMULATION_DELAY_SECONDS,
    )

    # Verification
    ticket_gateway = providers.Singleton(TicketApiGatewayImpl, client=upstream_api_client)
    # Scan sessions live in process memory; a restart falls back to server state
    scan_session_store = providers.Singleton(
        InMemoryScanSessionStore, max_sessions=config_service.provided.SCAN_SESSION_MAX
    )


container = Container()


def setup() -> None:
    container.config_service()


async def cleanup() -> None:
    client = container.upstream_api_client()
    await client.aclose()
    container.reset_singletons()
