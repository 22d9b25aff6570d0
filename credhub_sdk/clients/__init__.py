from abc import ABC, abstractmethod


class ClientInterface(ABC):
    """Base interface class for clients talking to the credential service.

    Implementations own a connection pool that must be released with
    :meth:`close`.
    """

    @abstractmethod
    def load(self) -> None:
        """Establish the client connection pool."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the client connection and release its resources."""
        pass
