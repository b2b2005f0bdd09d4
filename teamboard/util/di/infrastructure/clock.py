"""Clock providers."""

from dishka import Scope, provide

from teamboard.config import DashboardSettings
from teamboard.util.clock import Clock, SystemClock
from teamboard.util.di.base import ProviderBase


class ClockProvider(ProviderBase):
    """Clock component base."""

    __mock_component__ = "clock"


class ProdClockProvider(ClockProvider):
    """Wall clock in the configured dashboard timezone."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_clock(self, dashboard_settings: DashboardSettings) -> Clock:
        """Provide system clock."""
        return SystemClock(dashboard_settings.timezone)
