"""Client singletons for external API interactions."""
from street_resolver.clients.street_store_client import StreetStoreClient

__all__ = ["StreetStoreClient"]
