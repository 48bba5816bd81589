"""Operation extraction and the cross-chain catalogue.

One catalogue is extracted per chain document, then folded into the
running catalogue:

    catalogue = {}
    for chain_name, doc in chains:
        catalogue = merge(catalogue, extract_operations(chain_name, doc))

Every per-chain mapping keeps insertion order, so emission order follows
document order and chain order.
"""

import logging
from typing import Iterable, Literal

from pydantic import BaseModel, Field

from cosmos_swagger_gen.errors import DuplicateChainError, EmptyInputError, MissingOperationIdError
from cosmos_swagger_gen.generator.options import PAGINATION_PARAM_NAMES, GeneratorOptions
from cosmos_swagger_gen.generator.resolver import resolve_parameter
from cosmos_swagger_gen.generator.typescript import UNKNOWN_TYPE, TypeScriptTranslator, endpoint_template
from cosmos_swagger_gen.parser.base import MethodData, Parameter, PathItem, SourceDocument

logger = logging.getLogger(__name__)


class Endpoint(BaseModel):
    path: str  # template with `${type}` placeholders
    comment: str  # the literal path from the document


class OperationParams(BaseModel):
    path: dict[str, str] = Field(default_factory=dict)
    query: dict[str, str] = Field(default_factory=dict)
    body: dict[str, str] = Field(default_factory=dict)


class OperationResponse(BaseModel):
    success: dict[str, str] = Field(default_factory=dict)
    error: dict[str, str] = Field(default_factory=dict)


class OperationRecord(BaseModel):
    """One operation, with its endpoint, parameter and response types per chain."""

    method: Literal["get", "post"]
    comment: str | None = None
    endpoint: dict[str, Endpoint] = Field(default_factory=dict)
    params: OperationParams = Field(default_factory=OperationParams)
    response: OperationResponse = Field(default_factory=OperationResponse)


Catalogue = dict[str, OperationRecord]


def select_method(item: PathItem) -> str | None:
    """Return `get` or `post`, whichever the path declares first; None if neither."""
    if item.get is not None:
        return "get"
    if item.post is not None:
        return "post"
    return None


def is_paginated(params: list[Parameter] | None) -> bool:
    names = {p.name for p in params or [] if p.location == "query"}
    return bool(names & PAGINATION_PARAM_NAMES)


def _operation_parameters(chain_name: str, path: str, method_data: MethodData, doc: SourceDocument) -> list[Parameter]:
    """The operation's parameters with shared `#/parameters/...` references substituted."""
    params = []
    for param in method_data.parameters or []:
        resolved = resolve_parameter(param, doc)
        if resolved is None:
            logger.warning(
                "Ignoring parameter '%s' of '%s' on chain '%s': no such shared parameter",
                param.ref, path, chain_name,
            )
            continue
        params.append(resolved)
    return params


def _response_type(translator: TypeScriptTranslator, method_data: MethodData, status: str) -> str:
    response = method_data.responses.get(status)
    if response is None:
        return UNKNOWN_TYPE
    return translator.translate_ref_or_schema(response.schema_)


def extract_operations(
    chain_name: str, doc: SourceDocument, options: GeneratorOptions | None = None
) -> Catalogue:
    """Build a single-chain catalogue from one chain's document."""
    options = options or GeneratorOptions()
    translator = TypeScriptTranslator(doc, options)
    catalogue: Catalogue = {}

    for path, item in doc.paths.items():
        method = select_method(item)
        if method is None:
            logger.warning(
                "Skipping '%s' on chain '%s': only get and post are supported (declared: %s)",
                path, chain_name, ", ".join(item.declared_methods()) or "none",
            )
            continue

        method_data: MethodData = getattr(item, method)
        operation_id = method_data.operation_id
        if not operation_id:
            raise MissingOperationIdError(chain_name, path)
        if operation_id in catalogue:
            logger.warning(
                "Duplicate operationId '%s' on chain '%s', keeping the first one", operation_id, chain_name
            )
            continue

        params = _operation_parameters(chain_name, path, method_data, doc)
        path_type, query_type, body_type = translator.translate_parameters(params)
        success_type = _response_type(translator, method_data, "200")
        if options.pagination and is_paginated(params):
            success_type = f"{success_type} & PaginationResponse"

        catalogue[operation_id] = OperationRecord(
            method=method,
            comment=method_data.summary,
            endpoint={chain_name: Endpoint(path=endpoint_template(path, params), comment=path)},
            params=OperationParams(
                path={chain_name: path_type},
                query={chain_name: query_type},
                body={chain_name: body_type},
            ),
            response=OperationResponse(
                success={chain_name: success_type},
                error={chain_name: _response_type(translator, method_data, "default")},
            ),
        )

    logger.info("Extracted %d operations for chain '%s'", len(catalogue), chain_name)
    return catalogue


def _union(existing: dict, incoming: dict) -> dict:
    """Key-wise union; entries already in `existing` win."""
    merged = dict(existing)
    for key, value in incoming.items():
        merged.setdefault(key, value)
    return merged


def merge(accumulator: Catalogue, incoming: Catalogue) -> Catalogue:
    """Combine two catalogues without mutating either.

    The accumulator's comment is kept unless it is missing, and its
    per-chain entries take precedence on a chain-name collision.
    """
    merged: Catalogue = {op_id: record.model_copy(deep=True) for op_id, record in accumulator.items()}

    for op_id, record in incoming.items():
        existing = merged.get(op_id)
        if existing is None:
            merged[op_id] = record.model_copy(deep=True)
            continue

        if existing.method != record.method:
            logger.warning(
                "Operation '%s' is '%s' on some chains and '%s' on others, keeping '%s'",
                op_id, existing.method, record.method, existing.method,
            )

        merged[op_id] = OperationRecord(
            method=existing.method,
            comment=existing.comment if existing.comment is not None else record.comment,
            endpoint=_union(existing.endpoint, record.endpoint),
            params=OperationParams(
                path=_union(existing.params.path, record.params.path),
                query=_union(existing.params.query, record.params.query),
                body=_union(existing.params.body, record.params.body),
            ),
            response=OperationResponse(
                success=_union(existing.response.success, record.response.success),
                error=_union(existing.response.error, record.response.error),
            ),
        )

    return merged


def build_catalogue(
    chains: Iterable[tuple[str, SourceDocument]], options: GeneratorOptions | None = None
) -> Catalogue:
    """Fold every (chain_name, document) pair into one catalogue, in order."""
    catalogue: Catalogue = {}
    seen: set[str] = set()

    for chain_name, doc in chains:
        if chain_name in seen:
            raise DuplicateChainError(chain_name)
        seen.add(chain_name)
        catalogue = merge(catalogue, extract_operations(chain_name, doc, options))

    if not seen:
        raise EmptyInputError("No chain documents were supplied")
    return catalogue


def chain_names(catalogue: Catalogue) -> list[str]:
    """Every chain name in the catalogue, in first-seen order."""
    names: dict[str, None] = {}
    for record in catalogue.values():
        for name in record.endpoint:
            names.setdefault(name)
    return list(names)
