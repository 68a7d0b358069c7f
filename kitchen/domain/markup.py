import re

import bs4

from kitchen.domain.prompts import ALLOWED_TAGS


OPENING_FENCE = re.compile(r"```html", re.IGNORECASE)
CLOSING_FENCE = "```"

_DROPPED_TAGS = ["script", "style"]


def strip_code_fences(text: str) -> str:
    """Remove the ```html / ``` wrappers models like to add.

    Anything else in the reply is left as it is.
    """
    return OPENING_FENCE.sub("", text).replace(CLOSING_FENCE, "")


def restrict_markup(html: str, allowed: tuple[str, ...] = ALLOWED_TAGS) -> str:
    """Keep only allowed tags, without attributes. Other tags keep their text."""
    soup = bs4.BeautifulSoup(html, features="html.parser")
    for tag in soup.find_all(_DROPPED_TAGS):
        tag.decompose()
    for tag in soup.find_all(True):
        if tag.name in allowed:
            tag.attrs = {}
        else:
            tag.unwrap()
    return str(soup)


def markup_to_text(html: str) -> str:
    soup = bs4.BeautifulSoup(html, features="html.parser")
    return soup.get_text("\n", strip=True)
