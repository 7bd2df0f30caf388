"""Client capability checks shared by the feature handlers."""

from __future__ import annotations

from pygls.capabilities import get_capability


def client_supports(ls, field: str) -> bool:
    """Return True when the client advertised *field* (dotted path).

    Before ``initialize`` has been handled nothing is supported.
    """
    capabilities = getattr(ls.lsp, "client_capabilities", None)
    if capabilities is None:
        return False
    return bool(get_capability(capabilities, field, False))


__all__ = ["client_supports"]
