"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from uuid import UUID

from supabase import create_client

from food_quantity.adapters.supabase_preferences_repository import (
    SupabasePreferencesRepository,
)
from food_quantity.config import Settings, parse_volume_preferences
from food_quantity.domain.units import UserVolumeUnits
from food_quantity.services.quantities import (
    DataCollaborator,
    QuantityService,
    StandardPreferences,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    preferences_for: Callable[[UUID | None], DataCollaborator]
    close_resources: Callable[[], Awaitable[None]]

    def quantity_service(self, user_id: UUID | None) -> QuantityService:
        """Return a quantity service reading the given user's data."""
        return QuantityService(self.preferences_for(user_id))


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    standard_volume_units = UserVolumeUnits.standard().with_overrides(
        parse_volume_preferences(resolved_settings.standard_volume_units)
    )

    def preferences_for(user_id: UUID | None) -> DataCollaborator:
        if user_id is None:
            return StandardPreferences(volume_units=standard_volume_units)
        return SupabasePreferencesRepository(
            client=supabase_client,
            user_id=user_id,
            last_used_table=resolved_settings.last_used_table,
            user_settings_table=resolved_settings.user_settings_table,
            fallback_volume_units=standard_volume_units,
        )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        preferences_for=preferences_for,
        close_resources=close_resources,
    )
