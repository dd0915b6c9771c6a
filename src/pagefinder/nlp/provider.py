"""Interface to the external linguistic toolkit.

The editor hands text to a provider for transliteration, morphology and
collocation statistics. Nothing in this package implements those analyses;
plug in a real provider or use :class:`NullLinguisticProvider`.
"""

from __future__ import annotations

from typing import Dict, List, Protocol, runtime_checkable


@runtime_checkable
class LinguisticProvider(Protocol):
    def transliterate(self, text: str) -> str: ...

    def lemmatize(self, text: str) -> Dict[str, str]: ...

    def extract_pos(self, text: str) -> Dict[str, List[str]]: ...

    def extract_roots(self, text: str) -> Dict[str, str]: ...

    def stem(self, text: str) -> Dict[str, str]: ...

    def segment(self, text: str) -> Dict[str, str]: ...

    def pmi(self, text: str) -> Dict[str, float]: ...

    def pkl(self, text: str) -> Dict[str, float]: ...


class NullLinguisticProvider:
    """Provider that performs no analysis."""

    def transliterate(self, text: str) -> str:
        return text

    def lemmatize(self, text: str) -> Dict[str, str]:
        return {}

    def extract_pos(self, text: str) -> Dict[str, List[str]]:
        return {}

    def extract_roots(self, text: str) -> Dict[str, str]:
        return {}

    def stem(self, text: str) -> Dict[str, str]:
        return {}

    def segment(self, text: str) -> Dict[str, str]:
        return {}

    def pmi(self, text: str) -> Dict[str, float]:
        return {}

    def pkl(self, text: str) -> Dict[str, float]:
        return {}
