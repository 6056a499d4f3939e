from datetime import datetime, timezone
from typing import Callable, Optional
from markupsafe import Markup, escape
from models import Post
from config import DEFAULT_NAME

GREENTEXT_LINE = Markup('<span class="greentext">{}</span>')


def format_post_content(content: Optional[str]) -> Markup:
    """Render post text for display, wrapping '>' lines as greentext.

    Detection runs on the raw line (leading whitespace ignored); every line
    is HTML-escaped afterwards. Lines are rejoined with '\\n', so '\\r' from
    CRLF input stays attached to its line.
    """
    if not content:
        return Markup("")

    lines = []
    for line in content.split("\n"):
        if line.strip().startswith(">"):
            lines.append(GREENTEXT_LINE.format(line))
        else:
            lines.append(escape(line))
    return Markup("\n").join(lines)


def format_timestamp(ms: int) -> str:
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc).strftime("%m/%d/%y(%a)%H:%M:%S")


def new_post(id_factory: Callable[[], int], name: Optional[str], content: Optional[str],
             image: Optional[str], timestamp: int) -> Post:
    return Post(
        id=id_factory(),
        name=name or DEFAULT_NAME,
        content=content,
        image=image,
        timestamp=timestamp,
    )
