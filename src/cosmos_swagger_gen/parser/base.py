"""Data models for parsed Swagger 2.0 documents.

Source documents are validated into these models at the loading boundary,
so the generator can rely on well-typed input.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

HTTP_METHODS = ("get", "post", "put", "delete", "patch", "head", "options")


class Schema(BaseModel):
    """A schema node, or a `$ref` pointer to one in `definitions`."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: str | None = None  # object / array / string / integer / number / boolean
    title: str | None = None
    description: str | None = None
    properties: dict[str, "Schema"] | None = None
    items: "Schema | None" = None
    ref: str | None = Field(default=None, alias="$ref")

    @property
    def is_reference(self) -> bool:
        return isinstance(self.ref, str)

    @property
    def comment(self) -> str | None:
        return self.title if self.title is not None else self.description


class Parameter(BaseModel):
    """A single operation parameter, or a `$ref` pointer to one in `parameters`."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = None
    location: str | None = Field(default=None, alias="in")  # path / query / body
    description: str | None = None
    format: str | None = None  # int32 / int64 / uint32 / uint64
    schema_: Schema | None = Field(default=None, alias="schema")
    ref: str | None = Field(default=None, alias="$ref")

    @property
    def is_reference(self) -> bool:
        return isinstance(self.ref, str)


class Response(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    description: str = ""
    schema_: Schema | None = Field(default=None, alias="schema")


class MethodData(BaseModel):
    """The operation declared under one HTTP method of a path."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    operation_id: str | None = Field(default=None, alias="operationId")
    summary: str | None = None
    parameters: list[Parameter] | None = None
    responses: dict[str, Response] = {}

    @field_validator("responses", mode="before")
    @classmethod
    def _stringify_status_codes(cls, value):
        # Unquoted YAML status codes load as integers.
        if isinstance(value, dict):
            return {str(code): resp for code, resp in value.items()}
        return value


class PathItem(BaseModel):
    """All operations declared for one endpoint path."""

    model_config = ConfigDict(extra="allow")

    get: MethodData | None = None
    post: MethodData | None = None

    def declared_methods(self) -> list[str]:
        """HTTP verbs declared on this path, in document order where known."""
        declared = [m for m in ("get", "post") if getattr(self, m) is not None]
        for key in self.model_extra or {}:
            if key.lower() in HTTP_METHODS:
                declared.append(key.lower())
        return declared


class SourceDocument(BaseModel):
    """The parsed form of one chain's Swagger document."""

    model_config = ConfigDict(extra="ignore")

    swagger: str | None = None
    info: dict = {}
    paths: dict[str, PathItem] = {}
    definitions: dict[str, Schema] = {}
    parameters: dict[str, Parameter] = {}

    @field_validator("swagger", mode="before")
    @classmethod
    def _stringify_version(cls, value):
        if isinstance(value, (int, float)):
            return str(value)
        return value


Schema.model_rebuild()
