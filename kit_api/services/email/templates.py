# kit_api/services/email/templates.py
"""
Email templates, rendered with Jinja2.
Every template produces an HTML body and a plain-text body.
"""

from typing import NamedTuple

from jinja2 import DictLoader, Environment, select_autoescape

_LAYOUT = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{% block title %}{% endblock %}</title>
  <style>
    body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Arial, sans-serif;
           line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px; }
    .container { background-color: #f9f9f9; border-radius: 8px; padding: 30px; margin: 20px 0; }
    .button { display: inline-block; padding: 12px 24px; background-color: #0070f3;
              color: white; text-decoration: none; border-radius: 6px; margin: 20px 0; }
    .footer { margin-top: 30px; padding-top: 20px; border-top: 1px solid #ddd;
              font-size: 12px; color: #666; }
  </style>
</head>
<body>
  <div class="container">
    {% block content %}{% endblock %}
  </div>
</body>
</html>
"""

_TEMPLATES = {
    "layout.html": _LAYOUT,
    "email_verification.html": """{% extends "layout.html" %}
{% block title %}Verify your email{% endblock %}
{% block content %}
    <h1>Welcome{% if user_name %}, {{ user_name }}{% endif %}!</h1>
    <p>Thanks for signing up. To complete your registration, please verify your email address by clicking the button below:</p>
    <a href="{{ verification_url }}" class="button">Verify Email Address</a>
    <p>Or copy and paste this link into your browser:</p>
    <p style="word-break: break-all; color: #666;">{{ verification_url }}</p>
    <p>This link will expire in 24 hours.</p>
    <div class="footer">
      <p>If you didn't create an account, you can safely ignore this email.</p>
    </div>
{% endblock %}
""",
    "email_verification.txt": """Welcome{% if user_name %}, {{ user_name }}{% endif %}!

Thanks for signing up. To complete your registration, please verify your email address by clicking the link below:

{{ verification_url }}

This link will expire in 24 hours.

If you didn't create an account, you can safely ignore this email.
""",
    "password_reset.html": """{% extends "layout.html" %}
{% block title %}Reset your password{% endblock %}
{% block content %}
    <h1>Hi{% if user_name %} {{ user_name }}{% endif %},</h1>
    <p>We received a request to reset your password. Click the button below to choose a new one:</p>
    <a href="{{ reset_url }}" class="button">Reset Password</a>
    <p>Or copy and paste this link into your browser:</p>
    <p style="word-break: break-all; color: #666;">{{ reset_url }}</p>
    <p>This link will expire in 1 hour.</p>
    <div class="footer">
      <p>If you didn't request a password reset, you can safely ignore this email. Your password will not change.</p>
    </div>
{% endblock %}
""",
    "password_reset.txt": """Hi{% if user_name %} {{ user_name }}{% endif %},

We received a request to reset your password. Open the link below to choose a new one:

{{ reset_url }}

This link will expire in 1 hour.

If you didn't request a password reset, you can safely ignore this email. Your password will not change.
""",
}

_env = Environment(
    loader=DictLoader(_TEMPLATES),
    autoescape=select_autoescape(enabled_extensions=("html",), default=False),
    keep_trailing_newline=False,
)


class RenderedEmail(NamedTuple):
    html: str
    text: str


def _render(name: str, **context) -> RenderedEmail:
    html = _env.get_template(f"{name}.html").render(**context).strip()
    text = _env.get_template(f"{name}.txt").render(**context).strip()
    return RenderedEmail(html=html, text=text)


def render_email_verification(user_name: str, verification_url: str) -> RenderedEmail:
    """Render email verification template"""
    return _render(
        "email_verification", user_name=user_name, verification_url=verification_url
    )


def render_password_reset(user_name: str, reset_url: str) -> RenderedEmail:
    """Render password reset template"""
    return _render("password_reset", user_name=user_name, reset_url=reset_url)
