"""
Models for decomposed gpEID identifiers.

These Pydantic models are the structured form of a valid gpEID:

    =Gebäude1.Etage2+HLK.VEN_Sensor.001:Siemens.ABC123-Config.v1
    │            │          │            │              │
    location     function   type         product        extensions

Every model is frozen and renders back to its text form with str(). The
validators mirror the grammar invariants, so an Identifier built by hand
cannot hold anything the parser would reject.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

from gpeid.core.grammar.chars import TBD, is_alnum, is_letter

ExtensionSeparator = Literal["-", "$", "|"]


def _is_token(value: str) -> bool:
    return bool(value) and all(is_alnum(c) for c in value)


class TypeId(BaseModel):
    """
    Type component: _{core}.{counter} → _Sensor.001

    The core names what the asset is; the counter numbers assets of the
    same type.
    """

    core: tuple[str, ...]
    counter: str

    model_config = ConfigDict(frozen=True)

    @field_validator("core")
    @classmethod
    def validate_core(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate the core has segments that are TBD or contain a letter."""
        if not v:
            raise ValueError("Type core must have at least one segment")
        for segment in v:
            if segment == TBD:
                continue
            if not _is_token(segment) or not any(is_letter(c) for c in segment):
                raise ValueError(
                    f"Type segment '{segment}' must be alphanumeric with at least one letter"
                )
        return v

    @field_validator("counter")
    @classmethod
    def validate_counter(cls, v: str) -> str:
        """Validate counter is 3 ASCII digits and not 000."""
        if len(v) != 3 or not all("0" <= c <= "9" for c in v):
            raise ValueError("Type counter must be exactly 3 digits")
        if v == "000":
            raise ValueError("Type counter cannot be '000'")
        return v

    def __str__(self) -> str:
        """Format as _{core}.{counter}"""
        return f"_{'.'.join(self.core)}.{self.counter}"


class ProductId(BaseModel):
    """Product component: :{manufacturer}.{product} → :Siemens.ABC123"""

    manufacturer: str
    product: str

    model_config = ConfigDict(frozen=True)

    @field_validator("manufacturer", "product")
    @classmethod
    def validate_token(cls, v: str) -> str:
        """Validate value is TBD or alphanumeric."""
        if v != TBD and not _is_token(v):
            raise ValueError(f"Product token '{v}' must be TBD or alphanumeric")
        return v

    def __str__(self) -> str:
        """Format as :{manufacturer}.{product}"""
        return f":{self.manufacturer}.{self.product}"


class Extension(BaseModel):
    """Free-form extension block: {separator}{parts} → -Config.v1"""

    separator: ExtensionSeparator
    parts: tuple[str, ...]

    model_config = ConfigDict(frozen=True)

    @field_validator("parts")
    @classmethod
    def validate_parts(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate there is at least one part and all are alphanumeric."""
        if not v:
            raise ValueError("Extension must have at least one part")
        for part in v:
            if not _is_token(part):
                raise ValueError(f"Extension part '{part}' must be alphanumeric")
        return v

    def __str__(self) -> str:
        """Format as {separator}{parts}"""
        return f"{self.separator}{'.'.join(self.parts)}"


class Identifier(BaseModel):
    """
    A fully decomposed gpEID.

    Location segments may be TBD or empty (a gap keeps the position of a
    skipped hierarchy level), except the first one (Liegenschaft), which must
    be a real token. Function segments are TBD or three uppercase letters.
    """

    location: tuple[str, ...]
    function: tuple[str, ...]
    type: TypeId
    product: ProductId
    extensions: tuple[Extension, ...] = ()

    model_config = ConfigDict(frozen=True)

    @field_validator("location")
    @classmethod
    def validate_location(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate root location is a real token and the rest are tokens or gaps."""
        if not v or not _is_token(v[0]) or v[0] == TBD:
            raise ValueError("First location segment must be a real token (not TBD or empty)")
        for segment in v[1:]:
            if segment and not _is_token(segment):
                raise ValueError(f"Location segment '{segment}' must be alphanumeric")
        return v

    @field_validator("function")
    @classmethod
    def validate_function(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate function segments are TBD or exactly three of A-Z."""
        if not v:
            raise ValueError("Function must have at least one segment")
        for segment in v:
            if segment == TBD:
                continue
            if len(segment) != 3 or not all("A" <= c <= "Z" for c in segment):
                raise ValueError(
                    f"Function segment '{segment}' must be TBD or three uppercase letters"
                )
        return v

    @property
    def location_text(self) -> str:
        return "=" + ".".join(self.location)

    @property
    def function_text(self) -> str:
        return "+" + ".".join(self.function)

    @property
    def extensions_text(self) -> str:
        """Extensions space-joined, as shown in summaries."""
        return " ".join(str(ext) for ext in self.extensions)

    def __str__(self) -> str:
        """Format as the full gpEID text."""
        tail = "".join(str(ext) for ext in self.extensions)
        return f"{self.location_text}{self.function_text}{self.type}{self.product}{tail}"
