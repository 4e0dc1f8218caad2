"""Target username extraction from an NGL link or bare handle."""

LINK_MARKER = "ngl.link/"


def extract_username(url: str) -> str:
    """
    Derive the bare NGL handle from ``url``.

    When the link marker is present, the text after its first occurrence is
    cut at the first ``?`` and then at the first ``/``. Anything else is
    taken verbatim. The result may be empty; callers reject that.
    """
    index = url.find(LINK_MARKER)
    if index == -1:
        return url

    remainder = url[index + len(LINK_MARKER):]
    remainder = remainder.split("?", 1)[0]
    return remainder.split("/", 1)[0]
