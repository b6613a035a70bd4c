"""Mock persistence providers for testing."""

from dishka import Scope, provide

from rolodex.domain.repository import AddressBookStorage
from rolodex.persistence.repository.inmemory import InMemoryAddressBookStorage
from rolodex.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory storage.

    APP scope matches the production provider; each test builds its own
    container, so storage is never shared between tests.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_address_book_storage(self) -> AddressBookStorage:
        """Provide in-memory address book storage."""
        return InMemoryAddressBookStorage()
