"""Read and write Swagger/OpenAPI documents.

JSON and YAML are both accepted on input: JSON is tried first, YAML is
the fallback. Output format follows the file suffix unless given
explicitly.
"""

import json
from pathlib import Path

import yaml

from openapi_upgrade.errors import DocumentNotFoundError, MalformedDocumentError, OutputWriteError

YAML_SUFFIXES = (".yaml", ".yml")

TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class DocumentLoader(yaml.SafeLoader):
    """SafeLoader that keeps unquoted dates (`2024-01-01`) as strings.

    JSON has no date type, so timestamps must survive as the text they were.
    """


DocumentLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_document(file_path: Path) -> dict:
    """Load a document and return its top-level mapping."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise DocumentNotFoundError(f"Input file not found: {file_path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentNotFoundError(f"Cannot read input file {file_path}: {e}") from e

    return parse_document(text, source=str(file_path))


def parse_document(text: str, source: str = "<string>") -> dict:
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        try:
            data = yaml.load(text, Loader=DocumentLoader)
        except yaml.YAMLError as e:
            raise MalformedDocumentError(f"{source} is not valid JSON or YAML: {e}") from e

    if not isinstance(data, dict):
        raise MalformedDocumentError(
            f"{source} must contain a mapping at the top level, got {type(data).__name__}"
        )
    return data


def output_format(file_path: Path, fmt: str = "auto") -> str:
    if fmt != "auto":
        return fmt
    return "yaml" if file_path.suffix.lower() in YAML_SUFFIXES else "json"


def dump_document(document: dict, fmt: str = "json", indent: int = 2) -> str:
    if fmt == "yaml":
        return yaml.safe_dump(document, sort_keys=False, allow_unicode=True, indent=indent)
    return json.dumps(document, indent=indent, ensure_ascii=False) + "\n"


def write_document(document: dict, file_path: Path, fmt: str = "auto", indent: int = 2) -> None:
    """Serialize and write a document, creating parent directories.

    Nothing is written when serialization fails.
    """
    try:
        text = dump_document(document, output_format(file_path, fmt), indent)
    except (TypeError, ValueError, yaml.YAMLError) as e:
        raise OutputWriteError(f"Cannot serialize output document for {file_path}: {e}") from e

    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(text, encoding="utf-8")
    except (OSError, UnicodeEncodeError) as e:
        raise OutputWriteError(f"Cannot write output file {file_path}: {e}") from e
