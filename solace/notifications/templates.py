"""
Plain-text e-mail templates.

Placeholders use str.format syntax; missing keys render as an empty string so a
sparse `data` payload never breaks delivery.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EmailTemplate:
    subject: str
    body: str


TEMPLATES: dict[str, EmailTemplate] = {
    "welcome": EmailTemplate(
        subject="Welcome to Solace Community",
        body=(
            "Hi {displayName},\n\n"
            "Welcome to Solace Community. We are glad you found us.\n\n"
            "Please confirm your e-mail address so you can post in the forums and create memorials:\n"
            "{verifyUrl}\n\n"
            "With care,\nThe Solace Community team\n"
        ),
    ),
    "verify_email": EmailTemplate(
        subject="Confirm your e-mail address",
        body=(
            "Hi {displayName},\n\n"
            "Confirm your e-mail address by opening this link:\n{verifyUrl}\n\n"
            "If you did not create an account you can ignore this message.\n"
        ),
    ),
    "organizer_approved": EmailTemplate(
        subject="You are now a Solace meetup organizer",
        body=(
            "Hi {displayName},\n\n"
            "Your organizer application has been approved. You can now host support meetups:\n"
            "{siteUrl}/meetups/new\n\n"
            "Thank you for supporting others through their grief.\n"
        ),
    ),
    "organizer_rejected": EmailTemplate(
        subject="Update on your organizer application",
        body=(
            "Hi {displayName},\n\n"
            "We were not able to approve your organizer application at this time.\n\n"
            "Reason: {reason}\n\n"
            "You are welcome to apply again in the future.\n"
        ),
    ),
    "meetup_created": EmailTemplate(
        subject="Your meetup \"{meetupTitle}\" was created",
        body=(
            "Your meetup \"{meetupTitle}\" has been created.\n\n"
            "View it here: {siteUrl}/meetups/{meetupId}\n"
        ),
    ),
    "new_message": EmailTemplate(
        subject="New message from {senderName}",
        body=(
            "{senderName} sent you a message on Solace Community.\n\n"
            "Reply here: {siteUrl}/messages/{senderId}\n"
        ),
    ),
    "forum_reply": EmailTemplate(
        subject="New reply in \"{topicTitle}\"",
        body=(
            "Someone replied to a topic you follow: \"{topicTitle}\".\n\n"
            "Read it here: {siteUrl}/forums/topics/{topicId}\n"
        ),
    ),
    "account_verified": EmailTemplate(
        subject="Your account has been verified",
        body=(
            "Hi {displayName},\n\n"
            "Your identity has been verified. You can now message members and RSVP to meetups.\n"
        ),
    ),
}


class _Blank(dict):
    def __missing__(self, key):
        return ""


def is_known_template(template_id: str) -> bool:
    return template_id in TEMPLATES


def render_email(template_id: str, data: dict, site_url: str) -> tuple[str, str]:
    """Return (subject, body). Raises KeyError for an unknown template."""
    template = TEMPLATES[template_id]
    values = _Blank({"siteUrl": site_url.rstrip("/"), "displayName": "there"})
    values.update({k: v for k, v in data.items() if v is not None})
    return template.subject.format_map(values), template.body.format_map(values)
