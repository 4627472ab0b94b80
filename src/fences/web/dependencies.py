"""FastAPI dependency injection for fence services."""

from typing import Annotated

from fastapi import Depends

from fences.application.commands import CalculateFenceCommand
from fences.application.factory import ServiceFactory, get_factory


def get_service_factory() -> ServiceFactory:
    """Get the process-wide ServiceFactory instance."""
    return get_factory()


def get_calculate_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> CalculateFenceCommand:
    """Dependency for CalculateFenceCommand."""
    return factory.create_calculate_command()


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
CalculateCommandDep = Annotated[CalculateFenceCommand, Depends(get_calculate_command)]
