from __future__ import annotations

# ruff: noqa: E501
from html import escape

from .projection import MessageView, ViewState


def _user_item(name: str, avatar: str) -> str:
    return f"""
      <div class="user">
        <img class="avatar" src="{escape(avatar)}" alt="{escape(name)}'s avatar" />
        <div class="who">
          <p class="name">{escape(name)}</p>
          <p class="status">Active now</p>
        </div>
      </div>"""


def _message_item(m: MessageView) -> str:
    if m.is_image:
        body = f'<img src="{escape(m.body)}" alt="gif image" />'
    else:
        body = f"<p>{escape(m.body)}</p>"
    return f"""
      <div class="message">
        <img class="avatar small" src="{escape(m.avatar)}" alt="{escape(m.sender)}'s avatar" />
        <div class="bubble">
          <span class="sender">{escape(m.sender)}</span>
          <span class="body">{body}</span>
        </div>
      </div>"""


def render_html(view: ViewState, *, title: str = "💬 Chat") -> str:
    """
    Render a projection as a standalone HTML page.

    - **users**: sidebar, in roster order
    - **messages**: main column, in arrival order; `.gif` bodies become images
    """
    users = "".join(_user_item(u.name, u.avatar) for u in view.users)
    messages = "".join(_message_item(m) for m in view.messages)
    return f"""<!doctype html>
<html>
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width,initial-scale=1" />
    <title>{escape(title)}</title>
    <style>
      html, body {{ height: 100%; margin: 0; font-family: ui-sans-serif, system-ui, -apple-system; }}
      #wrap {{ display: flex; min-height: 100vh; }}
      aside {{ width: 16rem; background: #f3f4f6; padding: 1rem; }}
      main {{ flex-grow: 1; display: flex; flex-direction: column; background: #f9fafb; }}
      .user {{ display: flex; align-items: center; background: #fff; border-radius: 8px; padding: 8px; margin-bottom: 8px; }}
      .avatar {{ width: 48px; height: 48px; border-radius: 50%; }}
      .avatar.small {{ width: 32px; height: 32px; margin-right: 12px; }}
      .who {{ margin-left: 1rem; }}
      .status {{ font-size: 12px; color: #9ca3af; }}
      .message {{ display: flex; align-items: flex-end; margin-bottom: 1rem; }}
      .bubble {{ display: flex; flex-direction: column; background: #fff; border-radius: 8px; padding: 12px; }}
      .sender {{ font-size: 14px; font-weight: 500; }}
      .body {{ font-size: 12px; color: #4b5563; }}
    </style>
  </head>
  <body>
    <div id="wrap">
      <aside>
        <h2>Users</h2>{users}
      </aside>
      <main>
        <header><h1>{escape(title)}</h1></header>
        <div id="messages">{messages}
        </div>
      </main>
    </div>
  </body>
</html>
"""


def render_text(view: ViewState) -> str:
    """Terminal rendering: roster line, then one line per message."""
    lines = ["users: " + ", ".join(u.name for u in view.users)]
    for m in view.messages:
        body = f"[gif] {m.body}" if m.is_image else m.body
        who = m.sender if m.resolved else f"{m.sender} (?)"
        lines.append(f"<{who}> {body}")
    return "\n".join(lines)
