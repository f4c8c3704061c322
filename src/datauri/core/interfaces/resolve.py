from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class MimeResolverProtocol(Protocol):
    def resolve(self, filename: str, override: Optional[str] = None) -> str:
        ...


@runtime_checkable
class CharsetResolverProtocol(Protocol):
    def resolve(self, filename: str, override: Optional[str] = None) -> Optional[str]:
        ...
