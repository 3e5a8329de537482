# Copyright 2026 declgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Documentation comment blocks attached to declarations and methods."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from declgen.model.errors import InvalidArgumentError
from declgen.model.options import iter_config, optional_string

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class DocBlockTag:
    """A single ``@name description`` line of a doc block."""

    name: str
    description: str | None = None

    def render(self) -> str:
        if self.description:
            return f"@{self.name} {self.description}"
        return f"@{self.name}"


class DocBlockModel:
    """A documentation comment with short and long descriptions and tags."""

    def __init__(
        self,
        short_description: str | None = None,
        long_description: str | None = None,
        tags: list[DocBlockTag] | None = None,
    ) -> None:
        self._short_description = optional_string(short_description, "doc block short description")
        self._long_description = optional_string(long_description, "doc block long description")
        self._tags: list[DocBlockTag] = list(tags or [])

    def __repr__(self) -> str:
        return f"DocBlockModel(short_description={self._short_description!r})"

    @classmethod
    def from_config(cls, config: Mapping[str, Any] | str) -> DocBlockModel:
        """Build a doc block from a configuration value.

        A plain string becomes the short description. A mapping may carry
        ``short_description``, ``long_description`` and ``tags``; each tag is
        either a string (the tag name) or a mapping with ``name`` and
        ``description``.
        """
        if isinstance(config, str):
            return cls(config)
        doc_block = cls()
        for key, value in iter_config(config, _CONFIG_KEYS, "doc block"):
            if key == "shortdescription":
                doc_block.set_short_description(value)
            elif key == "longdescription":
                doc_block.set_long_description(value)
            else:
                if not isinstance(value, (list, tuple)):
                    raise InvalidArgumentError(f"doc block tags must be a list, got {value!r}")
                for tag in value:
                    if isinstance(tag, str):
                        doc_block.add_tag(tag)
                    elif isinstance(tag, Mapping) and "name" in tag:
                        doc_block.add_tag(tag["name"], tag.get("description"))
                    else:
                        raise InvalidArgumentError(f"invalid doc block tag: {tag!r}")
        return doc_block

    @classmethod
    def from_comment(cls, comment: str) -> DocBlockModel:
        """Build a doc block from the text of an existing ``/** ... */`` comment.

        The first paragraph becomes the short description, the remaining
        paragraphs before the first tag the long description. Every line
        starting with ``@`` opens a new tag; following lines continue it.
        """
        lines = _strip_comment_markers(comment)
        text_lines: list[str] = []
        tags: list[DocBlockTag] = []
        tag_lines: list[list[str]] = []
        for line in lines:
            if line.startswith("@"):
                tag_lines.append([line[1:]])
            elif tag_lines:
                tag_lines[-1].append(line)
            else:
                text_lines.append(line)
        for parts in tag_lines:
            name, _, rest = " ".join(p.strip() for p in parts if p.strip()).partition(" ")
            tags.append(DocBlockTag(name, rest.strip() or None))

        paragraphs = "\n".join(text_lines).strip().split("\n\n", 1)
        short_description = paragraphs[0].strip() or None
        long_description = paragraphs[1].strip() if len(paragraphs) > 1 else None
        return cls(short_description, long_description or None, tags)

    def set_short_description(self, description: str | None) -> DocBlockModel:
        self._short_description = optional_string(description, "doc block short description")
        return self

    def get_short_description(self) -> str | None:
        return self._short_description

    def set_long_description(self, description: str | None) -> DocBlockModel:
        self._long_description = optional_string(description, "doc block long description")
        return self

    def get_long_description(self) -> str | None:
        return self._long_description

    def add_tag(self, name: str, description: str | None = None) -> DocBlockModel:
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError(f"doc block tag name must be a non-empty string, got {name!r}")
        self._tags.append(DocBlockTag(name, optional_string(description, "doc block tag description")))
        return self

    def get_tags(self) -> list[DocBlockTag]:
        return list(self._tags)

    def generate(self, indentation: str = "") -> str:
        """Render the doc block, one line per content line, ending with a newline."""
        sections: list[str] = []
        if self._short_description:
            sections.append(self._short_description)
        if self._long_description:
            sections.append(self._long_description)
        content = "\n\n".join(sections)
        if self._tags:
            tag_text = "\n".join(tag.render() for tag in self._tags)
            content = f"{content}\n\n{tag_text}" if content else tag_text

        output = [f"{indentation}/**"]
        for line in content.split("\n"):
            output.append(f"{indentation} * {line}" if line else f"{indentation} *")
        output.append(f"{indentation} */")
        return "\n".join(output) + "\n"


# ################
# Implementation
# ################

_CONFIG_KEYS = {"shortdescription", "longdescription", "tags"}


def _strip_comment_markers(comment: str) -> list[str]:
    """Return the content lines of a doc comment without ``/**``, ``*/`` and ``*``."""
    body = comment.strip()
    if body.startswith("/**"):
        body = body[3:]
    if body.endswith("*/"):
        body = body[:-2]
    lines = []
    for raw in body.split("\n"):
        line = raw.strip()
        if line.startswith("*"):
            line = line[1:]
            if line.startswith(" "):
                line = line[1:]
        lines.append(line.rstrip())
    return lines
