"""Plain-text rendering of detected annotations."""

import sys
from typing import Iterable, Optional, TextIO

from .schema import TextAnnotation

HEADER = "Text:"


def format_text_output(annotations: Iterable[TextAnnotation]) -> str:
    """Header line, then each description on its own line, in order."""
    lines = [HEADER]
    lines.extend(annotation.description for annotation in annotations)
    return "\n".join(lines) + "\n"


def write_text_output(annotations: Iterable[TextAnnotation], stream: Optional[TextIO] = None) -> None:
    stream = stream or sys.stdout
    stream.write(format_text_output(annotations))
    stream.flush()
