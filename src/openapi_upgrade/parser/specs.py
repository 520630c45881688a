"""Structural models for Swagger 2.0 and OpenAPI 3.0 / 3.1 documents.

These check shape only: required fields, enumerated values and a few
cross-field rules. Unknown fields (including `x-` extensions) are allowed
everywhere, and schema objects are not validated beyond being mappings.
"""

from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, field_validator, model_validator

# Tag names used to route "$ref or object" unions. They show up in pydantic
# error locations and are stripped out when issues are reported.
UNION_TAGS: set[str] = set()


class Node(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True, coerce_numbers_to_str=True)


class Reference(Node):
    ref: str = Field(alias="$ref")


def ref_or(model: type[BaseModel]):
    """Annotated type accepting either a Reference Object or `model`."""
    name = model.__name__
    UNION_TAGS.update({name, "$ref"})

    def select(value: Any) -> str:
        if isinstance(value, dict) and "$ref" in value:
            return "$ref"
        if isinstance(value, Reference):
            return "$ref"
        return name

    return Annotated[
        Union[Annotated[Reference, Tag("$ref")], Annotated[model, Tag(name)]],
        Discriminator(select),
    ]


class Contact(Node):
    name: str | None = None
    url: str | None = None
    email: str | None = None


class License(Node):
    name: str


class Info(Node):
    title: str
    version: str
    description: str | None = None
    termsOfService: str | None = None
    contact: Contact | None = None
    license: License | None = None

    @field_validator("version", mode="before")
    @classmethod
    def _version_as_text(cls, value):
        # YAML turns `version: 1.0` into a float
        return str(value) if isinstance(value, (int, float)) else value


class ExternalDocs(Node):
    url: str
    description: str | None = None


class TagObject(Node):
    name: str
    description: str | None = None
    externalDocs: ExternalDocs | None = None


SecurityRequirement = dict[str, list[str]]


def _check_path_keys(paths: dict) -> dict:
    for key in paths:
        if not key.startswith("/") and not key.startswith("x-"):
            raise ValueError(f"path {key!r} must start with '/'")
    return paths


# Swagger 2.0


class SwaggerParameter(Node):
    name: str
    in_: Literal["query", "header", "path", "formData", "body"] = Field(alias="in")
    required: bool = False
    schema_: dict | None = Field(default=None, alias="schema")
    type: str | None = None

    @model_validator(mode="after")
    def _check_location_rules(self):
        if self.in_ == "path" and not self.required:
            raise ValueError(f"path parameter {self.name!r} must be required")
        if self.in_ == "body" and self.schema_ is None:
            raise ValueError(f"body parameter {self.name!r} must have a schema")
        if self.in_ != "body" and self.type is None:
            raise ValueError(f"{self.in_} parameter {self.name!r} must have a type")
        return self


class SwaggerResponse(Node):
    description: str
    schema_: dict | None = Field(default=None, alias="schema")
    headers: dict | None = None


class SwaggerOperation(Node):
    responses: dict[str, ref_or(SwaggerResponse)]
    parameters: list[ref_or(SwaggerParameter)] | None = None
    tags: list[str] | None = None
    consumes: list[str] | None = None
    produces: list[str] | None = None
    security: list[SecurityRequirement] | None = None
    deprecated: bool | None = None


class SwaggerPathItem(Node):
    get: SwaggerOperation | None = None
    put: SwaggerOperation | None = None
    post: SwaggerOperation | None = None
    delete: SwaggerOperation | None = None
    options: SwaggerOperation | None = None
    head: SwaggerOperation | None = None
    patch: SwaggerOperation | None = None
    parameters: list[ref_or(SwaggerParameter)] | None = None


class SwaggerSecurityScheme(Node):
    type: Literal["basic", "apiKey", "oauth2"]
    name: str | None = None
    in_: Literal["query", "header"] | None = Field(default=None, alias="in")
    flow: Literal["implicit", "password", "application", "accessCode"] | None = None

    @model_validator(mode="after")
    def _check_api_key(self):
        if self.type == "apiKey" and (self.name is None or self.in_ is None):
            raise ValueError("apiKey security scheme requires 'name' and 'in'")
        if self.type == "oauth2" and self.flow is None:
            raise ValueError("oauth2 security scheme requires 'flow'")
        return self


class SwaggerDocument(Node):
    swagger: str
    info: Info
    host: str | None = None
    basePath: str | None = None
    schemes: list[Literal["http", "https", "ws", "wss"]] | None = None
    paths: dict[str, SwaggerPathItem]
    definitions: dict[str, dict] | None = None
    parameters: dict[str, SwaggerParameter] | None = None
    responses: dict[str, SwaggerResponse] | None = None
    securityDefinitions: dict[str, SwaggerSecurityScheme] | None = None
    security: list[SecurityRequirement] | None = None
    tags: list[TagObject] | None = None
    externalDocs: ExternalDocs | None = None

    @field_validator("swagger", mode="before")
    @classmethod
    def _check_swagger_version(cls, value):
        if str(value) != "2.0":
            raise ValueError(f"unsupported swagger version {value!r}, expected '2.0'")
        return str(value)

    @field_validator("basePath")
    @classmethod
    def _check_base_path(cls, value):
        if value is not None and not value.startswith("/"):
            raise ValueError("basePath must start with '/'")
        return value

    @field_validator("paths")
    @classmethod
    def _check_paths(cls, value):
        return _check_path_keys(value)


# OpenAPI 3.x


class ServerVariable(Node):
    default: str
    enum: list[str] | None = None


class Server(Node):
    url: str
    description: str | None = None
    variables: dict[str, ServerVariable] | None = None


class MediaType(Node):
    schema_: Any = Field(default=None, alias="schema")
    encoding: dict | None = None


class Parameter(Node):
    name: str
    in_: Literal["query", "header", "path", "cookie"] = Field(alias="in")
    required: bool = False
    schema_: Any = Field(default=None, alias="schema")
    content: dict[str, MediaType] | None = None

    @model_validator(mode="after")
    def _check_path_required(self):
        if self.in_ == "path" and not self.required:
            raise ValueError(f"path parameter {self.name!r} must be required")
        return self


class RequestBody(Node):
    content: dict[str, MediaType]
    description: str | None = None
    required: bool | None = None


class Response(Node):
    description: str
    headers: dict | None = None
    content: dict[str, MediaType] | None = None
    links: dict | None = None


class Operation(Node):
    responses: dict[str, ref_or(Response)] | None = None
    parameters: list[ref_or(Parameter)] | None = None
    requestBody: ref_or(RequestBody) | None = None
    tags: list[str] | None = None
    security: list[SecurityRequirement] | None = None
    servers: list[Server] | None = None
    deprecated: bool | None = None


class PathItem(Node):
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None
    parameters: list[ref_or(Parameter)] | None = None
    servers: list[Server] | None = None


# Required fields per security scheme type
SECURITY_SCHEME_REQUIRED = {
    "apiKey": ("name", "in"),
    "http": ("scheme",),
    "oauth2": ("flows",),
    "openIdConnect": ("openIdConnectUrl",),
}


class SecurityScheme(Node):
    type: Literal["apiKey", "http", "oauth2", "openIdConnect", "mutualTLS"]

    @model_validator(mode="before")
    @classmethod
    def _check_required_fields(cls, data):
        if isinstance(data, dict):
            for field in SECURITY_SCHEME_REQUIRED.get(data.get("type"), ()):
                if data.get(field) is None:
                    raise ValueError(f"{data['type']} security scheme requires {field!r}")
        return data


class Components(Node):
    schemas: dict[str, Any] | None = None
    responses: dict[str, ref_or(Response)] | None = None
    parameters: dict[str, ref_or(Parameter)] | None = None
    requestBodies: dict[str, ref_or(RequestBody)] | None = None
    securitySchemes: dict[str, ref_or(SecurityScheme)] | None = None


class OpenAPIDocument(Node):
    openapi: str
    info: Info
    servers: list[Server] | None = None
    paths: dict[str, PathItem] | None = None
    components: Components | None = None
    security: list[SecurityRequirement] | None = None
    tags: list[TagObject] | None = None
    externalDocs: ExternalDocs | None = None

    version_prefix: ClassVar[str] = "3."

    @field_validator("openapi", mode="before")
    @classmethod
    def _check_openapi_version(cls, value):
        value = str(value)
        if not value.startswith(cls.version_prefix):
            raise ValueError(f"unsupported openapi version {value!r}, expected {cls.version_prefix}x")
        return value

    @field_validator("paths")
    @classmethod
    def _check_paths(cls, value):
        return _check_path_keys(value) if value is not None else value


class OpenAPI30Document(OpenAPIDocument):
    paths: dict[str, PathItem]

    version_prefix: ClassVar[str] = "3.0."


class OpenAPI31Document(OpenAPIDocument):
    version_prefix: ClassVar[str] = "3.1."
