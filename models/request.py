"""
Request Models
Pydantic model for the per-call request options
"""

from typing import Optional, Dict, Any, Union
from pydantic import BaseModel, Field, field_validator

from models.types import HttpMethod


class RequestOptions(BaseModel):
    """
    Options for a single HTTP exchange

    Built per call and never persisted. `data` is the request body and
    `params` the query string.
    """
    url: str
    method: Optional[HttpMethod] = None
    headers: Dict[str, str] = Field(default_factory=dict)
    data: Any = None
    params: Optional[Dict[str, Any]] = None

    @field_validator('method', mode='before')
    @classmethod
    def normalize_method(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value

    @classmethod
    def coerce(cls, options: Union['RequestOptions', Dict[str, Any], str]) -> 'RequestOptions':
        """
        Build RequestOptions from a model, a dict or a bare URL

        Args:
            options: RequestOptions instance, dict of fields, or URL string

        Returns:
            RequestOptions: a new instance, the input is never mutated
        """
        if isinstance(options, cls):
            return options.model_copy(deep=True)
        if isinstance(options, str):
            return cls(url=options)
        if isinstance(options, dict):
            return cls(**options)
        raise TypeError(f"Unsupported request options type: {type(options).__name__}")

    def with_defaults(self, **defaults) -> 'RequestOptions':
        """
        Fill in defaults for fields that were not set explicitly

        Explicitly set fields win over the defaults.

        Example:
            >>> RequestOptions(url='/items').with_defaults(method='POST').method
            <HttpMethod.POST: 'POST'>
        """
        values = dict(defaults)
        values.update({name: getattr(self, name) for name in self.model_fields_set})
        return RequestOptions(**values)
