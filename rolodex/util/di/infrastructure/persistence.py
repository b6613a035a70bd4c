"""Persistence infrastructure providers."""

from dishka import Scope, provide

from rolodex.config import StorageSettings
from rolodex.domain.repository import AddressBookStorage
from rolodex.persistence.repository import JsonAddressBookStorage
from rolodex.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using a JSON file."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_address_book_storage(
        self, storage_settings: StorageSettings
    ) -> AddressBookStorage:
        """Provide address book storage."""
        return JsonAddressBookStorage(storage_settings.address_book_file_path)
