"""The DHCPv4 options container, generic option values and humanizers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any, Optional, Protocol, Union

from .types import OptionCode

__all__ = [
    "InvalidOptionsError",
    "OptionValue",
    "OptionGeneric",
    "Option",
    "OptionHumanizer",
    "Options",
    "options_from_list",
    "opt_generic",
    "opt_client_identifier",
]

_PAD = 0
_END = 255
_MAX_CHUNK = 255


class InvalidOptionsError(ValueError):
    """Options data is malformed: short, truncated or with trailing garbage."""


class OptionValue(Protocol):
    """Anything that can be carried as the value of a DHCPv4 option."""

    def to_bytes(self) -> bytes: ...

    def __str__(self) -> str: ...


@dataclass(frozen=True)
class OptionGeneric:
    """An option value kept as raw bytes."""

    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def to_bytes(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return "[" + " ".join(str(b) for b in self.data) + "]"


@dataclass
class Option:
    """A DHCPv4 option: a one-byte code and a value interpreted by that code."""

    code: Any
    value: OptionValue

    def __str__(self) -> str:
        text = str(self.value)
        if "\n" in text:
            return f"{self.code}:\n{text}"
        return f"{self.code}: {text}"


@dataclass(frozen=True)
class OptionHumanizer:
    """Names option codes and interprets option data for one option space."""

    value_humanizer: Callable[[Any, bytes], object]
    code_humanizer: Callable[[int], object]

    def stringify(self, code: int, data: bytes) -> str:
        """Return ``"<name>: <value>"`` for a raw code and its data."""
        named = self.code_humanizer(code)
        value = self.value_humanizer(named, data)
        return f"{named}: {value}"


def _code_key(code: Any) -> int:
    key = int(code)
    if not 0 <= key <= 0xFF:
        raise ValueError(f"option code out of range: {key}")
    return key


class Options(MutableMapping):
    """A map from option code to the (concatenated) option data."""

    def __init__(
        self,
        data: Optional[Union[Mapping[Any, bytes], Iterable[tuple[Any, bytes]]]] = None,
    ) -> None:
        self._data: dict[int, bytes] = {}
        if data is not None:
            for code, value in dict(data).items():
                self[code] = value

    def __getitem__(self, code: Any) -> bytes:
        return self._data[_code_key(code)]

    def __setitem__(self, code: Any, value: bytes) -> None:
        self._data[_code_key(code)] = bytes(value)

    def __delitem__(self, code: Any) -> None:
        key = _code_key(code)
        if key not in self._data:
            raise KeyError(code)
        self._data.pop(key)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Options({self._data!r})"

    def get(self, code: Any) -> Optional[bytes]:  # type: ignore[override]
        """Return the data for ``code``, or None if it is absent."""
        return self._data.get(_code_key(code))

    def has(self, code: Any) -> bool:
        """Whether an option with ``code`` is present."""
        return _code_key(code) in self._data

    def update(self, option: Option) -> None:  # type: ignore[override]
        """Set (or replace) the option's data from its serialized value."""
        self._data[_code_key(option.code)] = bytes(option.value.to_bytes())

    def to_bytes(self) -> bytes:
        """Serialize in ascending code order, splitting long data (RFC 3396).

        Pad and End are never written.
        """
        out = bytearray()
        for code in sorted(self._data):
            if code in (_PAD, _END):
                continue
            data = self._data[code]
            if not data:
                out += bytes((code, 0))
                continue
            for start in range(0, len(data), _MAX_CHUNK):
                chunk = data[start : start + _MAX_CHUNK]
                out.append(code)
                out.append(len(chunk))
                out += chunk
        return bytes(out)

    def from_bytes(self, data: bytes) -> None:
        """Parse options (without the magic cookie) into this map."""
        self.from_bytes_check_end(data, False)

    def from_bytes_check_end(self, data: bytes, check_end: bool) -> None:
        """Parse options; with ``check_end`` an End option is required."""
        data = bytes(data)
        if not data:
            return
        pos = 0
        end = False
        while pos < len(data):
            code = data[pos]
            pos += 1
            if code == _PAD:
                continue
            if code == _END:
                end = True
                break
            if pos >= len(data):
                raise InvalidOptionsError(
                    f"error collecting options: missing length of option {code}"
                )
            length = data[pos]
            pos += 1
            if pos + length > len(data):
                raise InvalidOptionsError(
                    f"error collecting options: option {code} needs {length} bytes, "
                    f"only {len(data) - pos} left"
                )
            # RFC 2131 4.1 / RFC 3396: repeated options are concatenated.
            self._data[code] = self._data.get(code, b"") + data[pos : pos + length]
            pos += length

        if check_end and not end:
            raise InvalidOptionsError("unexpected end of options: no End option")

        if any(b not in (_PAD, _END) for b in data[pos:]):
            raise InvalidOptionsError("invalid options data")

    def to_string(self, humanizer: OptionHumanizer) -> str:
        """Render every option, one per line, using ``humanizer``."""
        parts = []
        for code in sorted(self._data):
            text = humanizer.stringify(code, self._data[code])
            if "\n" in text:
                text = text.replace("\n  ", "\n      ")
            parts.append(f"    {text}\n")
        return "".join(parts)

    def __str__(self) -> str:
        from .humanize import parse_option  # deferred: humanize imports this module

        return self.to_string(
            OptionHumanizer(value_humanizer=parse_option, code_humanizer=OptionCode)
        )


def options_from_list(*options: Option) -> Options:
    """Build an Options map from the given options."""
    result = Options()
    for option in options:
        result.update(option)
    return result


def opt_generic(code: Any, data: bytes) -> Option:
    """An option carrying raw bytes."""
    return Option(code, OptionGeneric(bytes(data)))


def opt_client_identifier(ident: bytes) -> Option:
    """A Client Identifier option."""
    return opt_generic(OptionCode.CLIENT_IDENTIFIER, ident)