from __future__ import annotations

# Icons drawn with the CSS ``currentColor`` keyword pick up the renderer's tint.
TINT_MARKER = "currentColor"


def is_tintable(content: str) -> bool:
    """Return ``True`` when ``content`` supports runtime color substitution.

    This is a substring heuristic, not an SVG parse. Previously cached icons
    were classified the same way, so the rule must stay as loose as it is.
    """

    return TINT_MARKER in content
