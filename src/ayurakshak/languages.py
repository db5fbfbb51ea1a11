"""Supported display languages.

The selected language is a display parameter only: it is shown in the chat
header and never influences how messages are classified.
"""

from pydantic import BaseModel, ConfigDict, Field


class Language(BaseModel):
    """A selectable locale."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(description="Short locale code, e.g. 'hi'")
    name: str = Field(description="English name of the language")
    native_name: str = Field(description="Name of the language in its own script")


SUPPORTED_LANGUAGES: tuple[Language, ...] = (
    Language(code="en", name="English", native_name="English"),
    Language(code="hi", name="Hindi", native_name="हिंदी"),
    Language(code="te", name="Telugu", native_name="తెలుగు"),
    Language(code="or", name="Odia", native_name="ଓଡିଆ"),
)

DEFAULT_LANGUAGE = "en"

_by_code = {lang.code: lang for lang in SUPPORTED_LANGUAGES}


def get_language(code: str) -> Language | None:
    """Look up a supported language by code. Returns None if unknown."""
    return _by_code.get(code)


def display_name(code: str) -> str:
    """Name to show for a language code.

    Unknown codes are shown as-is rather than rejected.
    """
    lang = _by_code.get(code)
    return lang.native_name if lang else code
