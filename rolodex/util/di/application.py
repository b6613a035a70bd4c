"""Application layer DI providers."""

from dishka import Scope, provide

from rolodex.application.logic import LogicManager
from rolodex.domain.repository import AddressBookStorage
from rolodex.domain.service import Model
from rolodex.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application provider - concrete, no mocks needed."""

    @provide(scope=Scope.APP)
    def get_logic_manager(
        self, model: Model, storage: AddressBookStorage
    ) -> LogicManager:
        """Provide logic manager."""
        return LogicManager(model=model, storage=storage)
