"""`$ref` resolution against a document's local `definitions` and `parameters` tables."""

from cosmos_swagger_gen.parser.base import Parameter, Schema, SourceDocument


def reference_name(pointer: str) -> str:
    """Return the definition name a pointer like `#/definitions/Foo` refers to."""
    return pointer.split("/")[-1]


def resolve(pointer: str, doc: SourceDocument) -> Schema | None:
    """Return the schema `pointer` refers to, or None when it is not defined.

    Only the last path segment is used as the lookup key; intermediate
    segments are not interpreted.
    """
    return doc.definitions.get(reference_name(pointer))


def resolve_parameter(param: Parameter, doc: SourceDocument) -> Parameter | None:
    """Return `param` itself, or the shared parameter a `#/parameters/Foo` pointer names."""
    if not param.is_reference:
        return param
    return doc.parameters.get(reference_name(param.ref))
