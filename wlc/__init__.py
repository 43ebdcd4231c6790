"""WLC - check the links of a local site or URL with the W3C link checker."""
