"""Invite email templates.

Each template is a (subject, html body) pair of Jinja2 sources rendered with
the content map built for the confirmation.
"""

from roster.domain.value import TemplateName

CLINICIAN_INVITE_SUBJECT = "You've been invited to join {{ ClinicName }}"

CLINICIAN_INVITE_HTML = """\
<html>
<body>
<p>Hello,</p>
<p>
{% if CreatorName %}{{ CreatorName }} has{% else %}You have been{% endif %}
invited {{ Email }} to join the staff of <strong>{{ ClinicName }}</strong>.
</p>
<p>
{% if WebPath == "login" %}
Log in to your account to review the invitation:
{% else %}
Create an account to accept the invitation:
{% endif %}
<a href="{{ InviteLink }}">{{ InviteLink }}</a>
</p>
</body>
</html>
"""

TEMPLATES: dict[TemplateName, tuple[str, str]] = {
    TemplateName.CLINICIAN_INVITE: (CLINICIAN_INVITE_SUBJECT, CLINICIAN_INVITE_HTML),
}
