"""Schema to TypeScript type translation.

Turns Swagger schemas and parameter lists into TypeScript type
expressions, e.g. an object schema with an `amount` integer property
becomes `{\\namount: number\\n}`.
"""

import logging
from typing import NamedTuple

from cosmos_swagger_gen.errors import SchemaCycleError
from cosmos_swagger_gen.generator.options import GeneratorOptions
from cosmos_swagger_gen.generator.resolver import reference_name, resolve
from cosmos_swagger_gen.parser.base import Parameter, Schema, SourceDocument

logger = logging.getLogger(__name__)

UNKNOWN_TYPE = "unknown"
EMPTY_OBJECT_TYPE = "{}"
UNDEFINED = "undefined"

NUMERIC_FORMATS = {"int32", "int64", "uint32", "uint64"}


class TypeExpr(NamedTuple):
    type: str
    comment: str | None = None


def render_comment(comment: str | None) -> str:
    return f"/** {comment} */\n" if comment else ""


def parameter_primitive_type(param: Parameter) -> str:
    """Runtime type of a path or query parameter, inferred from its format."""
    return "number" if param.format in NUMERIC_FORMATS else "string"


def parameter_display_name(name: str) -> str:
    # Dotted names like `pagination.key` are not valid bare keys.
    return f"'{name}'" if "." in name else name


def endpoint_template(path: str, params: list[Parameter] | None) -> str:
    """Replace `{name}` placeholders with `${type}` so the path reads as a template literal type."""
    for param in params or []:
        if param.location == "path" and param.name is not None:
            path = path.replace("{" + param.name + "}", "${" + parameter_primitive_type(param) + "}")
    return path


def _object_type(lines: list[str]) -> str:
    if not lines:
        return UNDEFINED
    return "{\n" + "".join(f"{line}\n" for line in lines) + "}"


class TypeScriptTranslator:
    """Translates the schemas of one source document."""

    def __init__(self, doc: SourceDocument, options: GeneratorOptions | None = None):
        self.doc = doc
        self.options = options or GeneratorOptions()
        self._ref_stack: list[str] = []

    def translate(self, schema: Schema) -> TypeExpr:
        """Translate a schema node into a type expression and its comment."""
        if schema.is_reference:
            if resolve(schema.ref, self.doc) is None:
                return TypeExpr(UNKNOWN_TYPE)
            if self.options.resolve_refs:
                return self._translate_reference(schema)

        # Untyped nodes, including bare `$ref` nodes, are empty objects.
        kind = schema.type or "object"
        comment = schema.comment

        if kind == "object":
            if not schema.properties:
                return TypeExpr(EMPTY_OBJECT_TYPE, comment)
            body = ""
            for name, prop in schema.properties.items():
                if name == "type_url":
                    # protobuf `Any` envelopes
                    body += f"\n{name}: string"
                    continue
                parsed = self.translate(prop)
                body += f"\n{render_comment(parsed.comment)}{name}: {parsed.type}"
            return TypeExpr("{" + body + "\n}", comment)

        if kind == "array":
            item_type = self.translate(schema.items).type if schema.items is not None else UNKNOWN_TYPE
            return TypeExpr(f"Array<{item_type}>", comment)

        if kind in ("integer", "number"):
            return TypeExpr("number", comment)
        if kind in ("string", "boolean"):
            return TypeExpr(kind, comment)

        logger.warning("Unsupported schema type '%s', emitting %s", kind, UNKNOWN_TYPE)
        return TypeExpr(UNKNOWN_TYPE, comment)

    def _translate_reference(self, schema: Schema) -> TypeExpr:
        target = resolve(schema.ref, self.doc)
        name = reference_name(schema.ref)
        if name in self._ref_stack:
            raise SchemaCycleError([*self._ref_stack, name])

        self._ref_stack.append(name)
        try:
            return self.translate(target)
        finally:
            self._ref_stack.pop()

    def translate_ref_or_schema(self, node: Schema | None) -> str:
        """Translate a node that may be a `$ref`, with its comment prepended.

        An unresolvable reference becomes `unknown`. In the default mode a
        resolvable reference is only checked for existence: the reference
        node itself is translated, which yields `{}`.
        """
        if node is None:
            return UNKNOWN_TYPE
        parsed = self.translate(node)
        return f"{render_comment(parsed.comment)}{parsed.type}"

    def translate_parameters(self, params: list[Parameter] | None) -> tuple[str, str, str]:
        """Return the (path, query, body) parameter types; `undefined` for each empty kind."""
        if not params:
            return UNDEFINED, UNDEFINED, UNDEFINED

        path_lines: list[str] = []
        query_lines: list[str] = []
        body_lines: list[str] = []

        for param in params:
            if param.name is None:
                logger.warning("Ignoring parameter without a name (in: %s)", param.location)
                continue
            comment = render_comment(param.description)
            name = parameter_display_name(param.name)

            if param.location == "path":
                path_lines.append(f"{comment}{name}: {parameter_primitive_type(param)}")
            elif param.location == "query":
                query_lines.append(f"{comment}{name}: {parameter_primitive_type(param)}")
            elif param.location == "body":
                target = body_lines if self.options.body_params == "body" else query_lines
                target.append(f"{comment}'{param.name}': {self.translate_ref_or_schema(param.schema_)}")
            else:
                logger.warning(
                    "Ignoring parameter '%s' with unsupported location '%s'", param.name, param.location
                )

        return _object_type(path_lines), _object_type(query_lines), _object_type(body_lines)


def translate_schema(schema: Schema) -> TypeExpr:
    """Translate a standalone schema that contains no references."""
    return TypeScriptTranslator(SourceDocument()).translate(schema)
