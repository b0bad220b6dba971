from festivals.stores.interfaces import Agenda
from festivals.stores.memory_store import InMemoryAgenda

__all__ = ["Agenda", "InMemoryAgenda"]
