# Local application imports
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    PostProvider,
    RepositoryProvider,
    UserProvider,
)
from ..infrastructure.db.mongo_connection import MongoConnection


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database collections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Use cases (AuthProvider, UserProvider, PostProvider) - depend on repositories

    The container does not open or close the connection; whoever owns the
    MongoConnection (the app lifespan) does.
    """

    def __init__(self, connection: MongoConnection) -> None:
        super().__init__()
        self.connection = connection
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → use cases
        """
        DatabaseProvider.register(self, self.connection)
        RepositoryProvider.register(self)
        AuthProvider.register(self)
        UserProvider.register(self)
        PostProvider.register(self)
