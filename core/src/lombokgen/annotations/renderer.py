from typing import Sequence


def render_annotation(name: str, options: Sequence[str] = ()) -> str:
    """Render an annotation literal.

    Returns the bare name when there are no options, otherwise
    ``Name(opt1, opt2, ...)``.
    """
    if not options:
        return name
    return f"{name}({', '.join(options)})"
