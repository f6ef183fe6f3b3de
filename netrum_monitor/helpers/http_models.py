"""Type definitions for HTTP responses."""

from typing import Any


# Decoded JSON body: the mining API answers with objects, but nothing
# stops an upstream from sending an array or a bare scalar
type JsonResponse = dict[str, Any] | list[Any] | str | int | float | bool | None

__all__ = ["JsonResponse"]
