from __future__ import annotations

from urllib.parse import quote

# Identicons are hosted externally; only the URL is computed here.
AVATAR_URL_TEMPLATE = "https://robohash.org/{name}.png?set=set4"

# Neutral "mystery person" image for senders missing from the roster.
PLACEHOLDER_AVATAR = "https://www.gravatar.com/avatar/?d=mp"


def generate_avatar(name: str, template: str = AVATAR_URL_TEMPLATE) -> str:
    return template.format(name=quote(name, safe=""))
