"""Domain layer DI providers."""

from dishka import Scope, provide
import logfire

from rolodex.config import HistorySettings
from rolodex.domain.repository import AddressBookStorage
from rolodex.domain.service import Model, ModelManager
from rolodex.persistence.error import StorageError
from rolodex.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    The model is APP-scoped: one address book and one history per process.
    """

    scope = Scope.APP

    @provide
    def get_model(
        self, storage: AddressBookStorage, history_settings: HistorySettings
    ) -> Model:
        """Provide the model, loaded from storage.

        Unreadable data is reported and replaced by an empty address book.
        """
        try:
            address_book = storage.load()
        except StorageError as e:
            logfire.warn(
                "Starting with an empty address book",
                path=str(storage.file_path),
                error=str(e),
            )
            address_book = None

        return ModelManager(address_book, max_history_depth=history_settings.max_depth)
