"""
Endpoint Descriptors
An endpoint knows its group, its name and how to perform one HTTP operation
through the facade it is registered on.
"""

from abc import ABC, abstractmethod
from typing import Callable, Any, Optional


class Endpoint(ABC):
    """
    Base class for endpoint descriptors

    Subclasses implement `call`, which receives the APIClient it was
    registered on as its first argument so it can use the verb helpers:

        class GetUser(Endpoint):
            def group(self):
                return 'users'

            def name(self):
                return 'get'

            def call(self, api, user_id):
                return api.get({'url': f'/users/{user_id}'})
    """

    @abstractmethod
    def group(self) -> str:
        """Group the endpoint is registered under"""

    @abstractmethod
    def name(self) -> str:
        """Name of the endpoint inside its group"""

    @abstractmethod
    def call(self, api, *args, **kwargs) -> Any:
        """Perform the HTTP operation through `api`"""

    def __repr__(self):
        return f"{type(self).__name__}({self.group()}.{self.name()})"


class FunctionEndpoint(Endpoint):
    """Endpoint descriptor wrapping a plain function `func(api, *args, **kwargs)`"""

    def __init__(self, group: str, name: str, func: Callable[..., Any]):
        self._group = group
        self._name = name
        self._func = func

    def group(self) -> str:
        return self._group

    def name(self) -> str:
        return self._name

    def call(self, api, *args, **kwargs) -> Any:
        return self._func(api, *args, **kwargs)


def endpoint(group: str, name: Optional[str] = None):
    """
    Decorator turning a function into a FunctionEndpoint

    Args:
        group: Group name
        name: Endpoint name, defaults to the function name

    Example:
        >>> @endpoint('items')
        ... def create(api, item):
        ...     return api.post({'url': '/items'}, item, True)
        >>> create.name()
        'create'
    """
    def decorator(func):
        return FunctionEndpoint(group, name or func.__name__, func)
    return decorator
