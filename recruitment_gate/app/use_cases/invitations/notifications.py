"""
Invitation Emails

Message bodies for invitation and welcome emails, and best-effort dispatch.
Dispatch happens only after the state change was committed and never raises.
"""

import logging
from typing import Optional

from recruitment_gate.app.services.notification_sender import INotificationSender
from recruitment_gate.app.services.unit_of_work import UnitOfWork
from recruitment_gate.domain.base import utcnow
from recruitment_gate.domain.entities import ProcessInvitation, SelectionProcess, User

logger = logging.getLogger(__name__)


def invitation_url(frontend_url: str, token: str) -> str:
    return f"{frontend_url.rstrip('/')}/invitations/{token}"


def build_invitation_email(
    invitation: ProcessInvitation,
    process: SelectionProcess,
    frontend_url: str,
    expiration_days: int,
) -> tuple[str, str, str]:
    url = invitation_url(frontend_url, invitation.token)
    name = f"{invitation.first_name} {invitation.last_name}"
    subject = f"Invitation to apply: {process.name}"

    text_body = f"""Hello {name},

You have been invited to apply to the selection process: {process.name}

To accept, visit: {url}

This invitation expires in {expiration_days} days.

Best regards,
The Talentree Team"""

    html_body = f"""<!DOCTYPE html>
<html>
<head><meta charset="UTF-8"></head>
<body style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
  <h1 style="color: #0d9488;">You have been invited!</h1>
  <p>Hello <strong>{name}</strong>,</p>
  <p>You have been invited to apply to the following selection process:</p>
  <h3 style="color: #14b8a6;">{process.name}</h3>
  <p style="text-align: center; margin: 30px 0;">
    <a href="{url}" style="background: #14b8a6; color: white; padding: 15px 30px; text-decoration: none; border-radius: 8px;">Accept invitation</a>
  </p>
  <p style="color: #6b7280; font-size: 14px;">Or copy this link: <a href="{url}">{url}</a></p>
  <p><strong>Important:</strong> this invitation expires in {expiration_days} days.</p>
</body>
</html>"""

    return subject, text_body, html_body


def build_welcome_email(user: User, process: SelectionProcess) -> tuple[str, str, str]:
    worker_name = f"{user.first_name} {user.last_name}".strip() or user.email
    company = process.company_name or "the company"
    position = process.position or process.name
    subject = f"Welcome to the selection process for {position}!"

    text_body = f"""Hello {worker_name},

Thank you for accepting the invitation and applying to "{process.name}" at {company}!

Your application has been received. You can now start the assessments assigned to you:
1. Sign in to the Talentree platform
2. Go to "My Processes"
3. Record your introductory video, then complete the assigned tests

Good luck!

Best regards,
The Talentree Team"""

    html_body = f"""<!DOCTYPE html>
<html>
<head><meta charset="UTF-8"></head>
<body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333;">
  <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
    <h1 style="color: #0d9488;">Welcome to the process!</h1>
    <p>Hello <strong>{worker_name}</strong>,</p>
    <p>Thank you for accepting our invitation.</p>
    <p><strong>Process:</strong> {process.name}<br>
       <strong>Company:</strong> {company}<br>
       <strong>Position:</strong> {position}</p>
    <ol>
      <li>Sign in to the Talentree platform</li>
      <li>Go to "My Processes"</li>
      <li>Record your introductory video, then complete the assigned tests</li>
    </ol>
    <p>The Talentree Team</p>
  </div>
</body>
</html>"""

    return subject, text_body, html_body


async def send_best_effort(
    sender: INotificationSender,
    to: str,
    subject: str,
    text_body: str,
    html_body: Optional[str] = None,
) -> bool:
    """Send and report success; failures are logged, never raised."""
    try:
        delivered = await sender.send(to, subject, text_body, html_body)
    except Exception:
        logger.exception(f"Notification sender raised while emailing {to}")
        return False
    if not delivered:
        logger.warning(f"Notification to {to} was not delivered: {subject}")
    return delivered


async def dispatch_invitation_email(
    uow: UnitOfWork,
    sender: INotificationSender,
    invitation: ProcessInvitation,
    process: SelectionProcess,
    frontend_url: str,
    expiration_days: int,
) -> bool:
    """Email the invitation link and record sent_at if it was delivered."""
    subject, text_body, html_body = build_invitation_email(
        invitation, process, frontend_url, expiration_days
    )
    delivered = await send_best_effort(
        sender, invitation.email, subject, text_body, html_body
    )
    if not delivered:
        return False

    async with uow:
        await uow.invitations.mark_sent(invitation, utcnow())
        await uow.commit()
    return True
