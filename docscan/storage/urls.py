from urllib.parse import quote

# Characters encodeURIComponent leaves untouched, beyond quote()'s own "_.-~".
_URI_COMPONENT_SAFE = "!*'()"


def public_url(host: str, bucket: str, path: str) -> str:
    """Token-less download URL for an object: https://{host}/v0/b/{bucket}/o/{path}?alt=media"""
    encoded = quote(path, safe=_URI_COMPONENT_SAFE)
    return f"https://{host}/v0/b/{bucket}/o/{encoded}?alt=media"
