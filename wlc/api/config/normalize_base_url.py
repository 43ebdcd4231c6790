"""Normalize the base url that local files are served under."""


def normalize_base_url(base_url: str | None) -> str:
    """Return ``base_url`` with exactly one leading slash.

    An empty or missing value maps to ``/``. A trailing slash is kept as given,
    since ``/docs`` and ``/docs/`` produce different target urls.
    """
    value = (base_url or "").strip()
    if not value:
        return "/"
    return "/" + value.lstrip("/")
