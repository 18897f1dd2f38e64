"""
SafeHTML
========

Build HTML from trusted markup and untrusted values. Values are converted with :code:`str` and
their angle brackets are replaced by :code:`&lt;` and :code:`&gt;`. Values wrapped in
:code:`Raw` and other :code:`SafeHTML` instances are appended unchanged.

..  code-block:: python
    :caption: Example

    unsafe_input = "<script>alert('Oops!')</script>"
    SafeHTML.format("<li>Username{}:{}</li>", Raw("<sup>*</sup>"), unsafe_input)
    # <li>Username<sup>*</sup>:&lt;script&gt;alert('Oops!')&lt;/script&gt;</li>
"""

from string import Formatter
from typing import Any

from attrs import define, field


def escape_html(text: str) -> str:
    """Replace :code:`<` and :code:`>` with their HTML entities."""
    return text.replace("<", "&lt;").replace(">", "&gt;")


@define(frozen=True)
class Raw:
    """Marks a value to be interpolated without escaping."""

    value: Any = field()

    def __str__(self) -> str:
        return str(self.value)


class SafeHTML:
    """HTML fragment whose interpolated parts are escaped.

    Parameters
    ----------
    value : str
        Trusted markup. It is taken literally and not escaped.
    """

    def __init__(self, value: str = "") -> None:
        self._parts = [value] if value else []

    @classmethod
    def unsafe(cls, html: str) -> "SafeHTML":
        """Create a fragment from untrusted text by escaping it."""
        return cls(escape_html(html))

    @classmethod
    def format(cls, template: str, *args: Any, **kwargs: Any) -> "SafeHTML":
        """Interpolate values into a trusted template.

        The template uses :code:`str.format` syntax. Every argument is escaped unless it is a
        :code:`Raw` or a :code:`SafeHTML` instance.
        """
        html = cls()
        formatter = _EscapingFormatter()
        for literal, field_name, format_spec, conversion in formatter.parse(template):
            html.append_literal(literal)
            if field_name is None:
                continue
            value = formatter.value_for(field_name, args, kwargs)
            if conversion:
                value = formatter.convert_field(value, conversion)
            format_spec = formatter.expand_spec(format_spec, args, kwargs)
            if isinstance(value, (Raw, SafeHTML)):
                html.append_raw(format(str(value), format_spec))
            else:
                html.append(format(value, format_spec))
        return html

    def append_literal(self, literal: str) -> "SafeHTML":
        """Append trusted markup verbatim."""
        if literal:
            self._parts.append(literal)
        return self

    def append(self, value: Any) -> "SafeHTML":
        """Append a value converted with :code:`str` and escaped."""
        self._parts.append(escape_html(str(value)))
        return self

    def append_raw(self, value: Any) -> "SafeHTML":
        """Append a value converted with :code:`str` without escaping it."""
        self._parts.append(str(value))
        return self

    @property
    def value(self) -> str:
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"SafeHTML:{self.value}"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeHTML):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)


class _EscapingFormatter(Formatter):
    """Resolves replacement fields like :code:`str.format` including automatic numbering."""

    def __init__(self) -> None:
        super().__init__()
        self._auto_index = 0

    def value_for(self, field_name: str, args: tuple, kwargs: dict) -> Any:
        if field_name == "" or field_name[0] in ".[":
            field_name = f"{self._auto_index}{field_name}"
            self._auto_index += 1
        value, _ = self.get_field(field_name, args, kwargs)
        return value

    def expand_spec(self, format_spec: str, args: tuple, kwargs: dict) -> str:
        """Resolve replacement fields nested in a format spec, e.g. the width in :code:`{:>{}}`."""
        parts = []
        for literal, field_name, nested_spec, conversion in self.parse(format_spec):
            parts.append(literal)
            if field_name is None:
                continue
            value = self.value_for(field_name, args, kwargs)
            if conversion:
                value = self.convert_field(value, conversion)
            parts.append(format(value, nested_spec))
        return "".join(parts)
