from abc import ABC, abstractmethod
from typing import List, Optional, Protocol, Sequence
from forms_hubspot.models.schemas import CommandResult, MappedProperty, Property, Record

class Configuration(Protocol):
    def get_setting(self, name: str) -> Optional[str]: ...

class ContactService(ABC):
    name: str = "base"

    @abstractmethod
    async def get_contact_properties(self) -> List[Property]:
        """Contact properties available for mapping, sorted by label."""
        raise NotImplementedError

    @abstractmethod
    async def post_contact(self, record: Record, field_mappings: Sequence[MappedProperty]) -> CommandResult:
        raise NotImplementedError
