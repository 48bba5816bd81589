"""Generation policies.

The defaults reproduce the output the SDK's type file has always been
generated with; the opt-in modes correct known quirks of that output.
"""

from typing import Literal

from pydantic import BaseModel

PAGINATION_PARAM_NAMES = {
    "pagination.key",
    "pagination.offset",
    "pagination.limit",
    "pagination.count_total",
    "pagination.reverse",
}


class GeneratorOptions(BaseModel):
    # Where `in: body` parameters are emitted: the legacy output folds them
    # into the query type and always reports the body type as undefined.
    body_params: Literal["query", "body"] = "query"
    # False: a `$ref` is only checked for existence and emitted as `{}`.
    # True: the referenced definition is translated in its place.
    resolve_refs: bool = False
    # Append `& PaginationResponse` to success types of paginated operations.
    pagination: bool = False
