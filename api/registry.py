"""
Endpoint Registry
Two-level mapping: group name -> endpoint name -> callable bound to the facade
"""

from functools import partial
from types import MappingProxyType
from typing import Dict, Callable, Iterable, Iterator, List, Mapping, Tuple, Any

from api.endpoint import Endpoint
from api.errors import DuplicateEndpointError, RegistrySealedError
from base.logger import Logger


class EndpointRegistry:
    """
    Holds the endpoints registered on an APIClient

    Each stored callable is `descriptor.call` with the client bound as its
    first argument. Lookups return read-only views; once sealed, nothing can
    be added and there is no way to remove an entry.
    """

    def __init__(self, api):
        self._api = api
        self._groups: Dict[str, Dict[str, Callable[..., Any]]] = {}
        self._sealed = False

    def register(self, descriptor: Endpoint):
        """
        Register one endpoint descriptor

        Args:
            descriptor: Endpoint providing group(), name() and call()

        Raises:
            DuplicateEndpointError: group.name is already registered
            RegistrySealedError: registry was sealed
        """
        group_name = descriptor.group()
        endpoint_name = descriptor.name()

        if self._sealed:
            raise RegistrySealedError(group_name, endpoint_name)

        group = self._groups.setdefault(group_name, {})
        if endpoint_name in group:
            raise DuplicateEndpointError(group_name, endpoint_name)

        group[endpoint_name] = partial(descriptor.call, self._api)
        Logger.debug(f"Registered endpoint {group_name}.{endpoint_name}")

    def register_all(self, descriptors: Iterable[Endpoint]):
        """
        Register descriptors in order, stopping at the first duplicate

        Endpoints before the offending one stay registered.
        """
        for descriptor in descriptors:
            self.register(descriptor)

    def seal(self):
        """Forbid any further registration"""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def groups(self) -> List[str]:
        return list(self._groups)

    def names(self, group: str) -> List[str]:
        return list(self._groups[group])

    def __getitem__(self, group: str) -> Mapping[str, Callable[..., Any]]:
        return MappingProxyType(self._groups[group])

    def __contains__(self, group) -> bool:
        return group in self._groups

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        for group_name, endpoints in self._groups.items():
            for endpoint_name in endpoints:
                yield group_name, endpoint_name

    def __len__(self) -> int:
        return sum(len(endpoints) for endpoints in self._groups.values())

    def __repr__(self):
        return f"EndpointRegistry(groups={self.groups()}, endpoints={len(self)})"
