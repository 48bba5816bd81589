"""Renders a catalogue as a TypeScript declaration file."""

from cosmos_swagger_gen.generator.operations import Catalogue, OperationRecord, chain_names

HEADER = "// DO NOT EDIT THIS FILE MANUALLY"

INDENT = "    "

# (type name, doc, lookup shape)
LOOKUP_TYPES = [
    ("RestApiEndpoint", "REST API endpoint", "endpoint: { [chainName in N]: infer E }"),
    ("RestApiPathParams", "REST API path parameters", "params: { path: { [chainName in N]: infer E } }"),
    ("RestApiQueryParams", "REST API query parameters", "params: { query: { [chainName in N]: infer E } }"),
    ("RestApiBodyParams", "REST API body parameters", "params: { body: { [chainName in N]: infer E } }"),
    ("RestApiSuccessResponse", "REST API successful response type", "response: { success: { [chainName in N]: infer E } }"),
    ("RestApiErrorResponse", "REST API error response type", "response: { error: { [chainName in N]: infer E } }"),
]

PAGINATION_DECLARATIONS = """/** Query parameters accepted by paginated endpoints. */
export interface PaginationQueryParams {
    /** `key` is a value returned in PageResponse.next_key to begin querying the next page most efficiently. Only one of offset or key should be set. */
    'pagination.key'?: string
    /** `offset` is a numeric offset that can be used when key is unavailable. Only one of offset or key should be set. */
    'pagination.offset'?: number
    /** `limit` is the total number of results to be returned in the result page. */
    'pagination.limit'?: number
    /** `count_total` indicates that the result set should include a count of the total number of items. */
    'pagination.count_total'?: boolean
    /** `reverse` returns results in descending order. */
    'pagination.reverse'?: boolean
}

/** Pagination block returned alongside paginated results. */
export interface PaginationResponse {
    pagination: {
        next_key: string | null
        total: string
    }
}"""


def _key(name: str) -> str:
    return name if name.isidentifier() else f"'{name}'"


def _indented(value: str, depth: int) -> str:
    """Indent every line of a multi-line type after the first."""
    return value.replace("\n", "\n" + INDENT * depth)


def _chain_block(lines: list[str], label: str, entries: dict[str, str], depth: int) -> None:
    pad = INDENT * depth
    lines.append(f"{pad}{label}: {{")
    for chain_name, type_expr in entries.items():
        lines.append(f"{pad}{INDENT}{_key(chain_name)}: {_indented(type_expr, depth + 1)}")
    lines.append(f"{pad}}}")


def _operation(lines: list[str], operation_id: str, record: OperationRecord) -> None:
    if record.comment:
        lines.append(f"{INDENT}/** {record.comment} */")
    lines.append(f"{INDENT}{_key(operation_id)}: {{")
    lines.append(f"{INDENT * 2}method: '{record.method}'")

    lines.append(f"{INDENT * 2}endpoint: {{")
    for chain_name, endpoint in record.endpoint.items():
        lines.append(f"{INDENT * 3}/** '{endpoint.comment}' */")
        lines.append(f"{INDENT * 3}{_key(chain_name)}: `{endpoint.path}`")
    lines.append(f"{INDENT * 2}}}")

    lines.append(f"{INDENT * 2}params: {{")
    _chain_block(lines, "path", record.params.path, 3)
    _chain_block(lines, "query", record.params.query, 3)
    _chain_block(lines, "body", record.params.body, 3)
    lines.append(f"{INDENT * 2}}}")

    lines.append(f"{INDENT * 2}response: {{")
    _chain_block(lines, "success", record.response.success, 3)
    _chain_block(lines, "error", record.response.error, 3)
    lines.append(f"{INDENT * 2}}}")

    lines.append(f"{INDENT}}}")


def emit(catalogue: Catalogue, include_pagination: bool = False) -> str:
    """Render the catalogue as TypeScript source."""
    lines = [HEADER, ""]

    for type_name, doc, shape in LOOKUP_TYPES:
        lines.append(f"/** {doc} based on given `ChainName` and `OperationId`. */")
        lines.append(f"export type {type_name}<N extends ChainName, I extends OperationId> =")
        lines.append(f"{INDENT}RestApi[I] extends {{ {shape} }} ? E : never")
        lines.append("")

    if include_pagination:
        lines.append(PAGINATION_DECLARATIONS)
        lines.append("")

    lines.append("/** Stores everything related to Rest API. */")
    lines.append("export interface RestApi {")
    for operation_id, record in catalogue.items():
        _operation(lines, operation_id, record)
    lines.append("}")
    lines.append("")

    names = chain_names(catalogue)
    union = " | ".join(f"'{name}'" for name in names) if names else "never"
    lines.append("/** Represent any of the available chain names. */")
    lines.append(f"export type ChainName = {union}")
    lines.append("")
    lines.append("/** Represent any of the available operation IDs. */")
    lines.append("export type OperationId = keyof RestApi")

    return "\n".join(lines) + "\n"
