def apply_style(text: str, style: str) -> str:
    """Wrap ``text`` in Rich markup for the theme style ``style``."""
    return f"[{style}]{text}[/{style}]"
