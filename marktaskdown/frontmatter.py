"""
Reading and writing Markdown files with a YAML front-matter header.

A document is ``---``, the YAML header, ``---``, a blank line, then the body. String
values in the header are always written double-quoted so that other front-matter
tools read them back unchanged.
"""
import re

import yaml
from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr
from pydantic import ValidationError as PydanticValidationError

from .errors import MalformedFrontMatter

FRONTMATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*\r?(?:\n|\Z)", re.S | re.M)


class _Quoted(str):
    pass


class _DoubleQuotedDumper(yaml.SafeDumper):
    pass


def _represent_quoted(dumper, data):
    return dumper.represent_scalar("tag:yaml.org,2002:str", str(data), style='"')


_DoubleQuotedDumper.add_representer(_Quoted, _represent_quoted)


def _quote_values(value):
    # keys stay plain, only values are forced to double quotes
    if isinstance(value, str):
        return _Quoted(value)
    if isinstance(value, dict):
        return {k: _quote_values(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_quote_values(v) for v in value]
    return value


class TaskFrontMatter(BaseModel):
    """Header fields of a task file."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: StrictStr
    is_done: StrictBool

    @classmethod
    def parse(cls, data: dict) -> "TaskFrontMatter":
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) or "<root>"
                               for err in e.errors())
            raise MalformedFrontMatter(f"Invalid task front matter ({fields})") from e


def encode(body: str, front_matter: dict) -> str:
    """Serialize a header mapping and a body into one document."""
    header = yaml.dump(_quote_values(front_matter), Dumper=_DoubleQuotedDumper,
                       sort_keys=False, allow_unicode=True, default_flow_style=False,
                       width=2**31 - 1)
    body = "\n" + body
    if not body.endswith("\n"):
        body += "\n"
    return f"---\n{header}---\n{body}"


def decode(text: str) -> tuple[dict, str]:
    """Split a document into its header mapping and its body."""
    text = text.removeprefix("\ufeff")
    m = FRONTMATTER_RE.match(text)
    if not m:
        raise MalformedFrontMatter("No front matter found")
    try:
        data = yaml.safe_load(m.group(1))
    except yaml.YAMLError as e:
        raise MalformedFrontMatter(f"Front matter is not valid YAML: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise MalformedFrontMatter(
            f"Front matter must be a mapping, got {type(data).__name__}")
    body = text[m.end():].lstrip("\r\n")
    return data, body


def load(path) -> tuple[dict, str]:
    # newline="" keeps \r\n and lone \r in the body as written
    with open(path, encoding="utf-8", newline="") as f:
        return decode(f.read())


def dump(path, body: str, front_matter: dict) -> None:
    text = encode(body, front_matter)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
