"""
Language Models
-------------
Languages three word addresses are available in.
"""
from typing import List

from w3w.models.base import W3WModel


class Language(W3WModel):
    code: str
    name: str
    native_name: str

    def __str__(self) -> str:
        return f"{self.name} ({self.code})"


class AvailableLanguages(W3WModel):
    """Languages supported for three word addresses, in service order."""

    languages: List[Language]

    def __str__(self) -> str:
        return ",".join(str(language) for language in self.languages)
