"""
Branded HTML body for the visitor auto-reply.

In the EmailJS auto-reply template set the body to {{{auto_reply_html}}}
(triple braces, so EmailJS does not escape the markup again).
"""

from dataclasses import dataclass
from datetime import datetime
from html import escape
from typing import Optional, List, Tuple
from contactform.core.config import Settings

DEFAULT_SUBJECT = "your message"


@dataclass
class AutoReplyBranding:
    owner_name: str
    tagline: Optional[str] = None
    site_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    whatsapp_url: Optional[str] = None
    facebook_url: Optional[str] = None

    @property
    def initials(self) -> str:
        return "".join(part[0] for part in self.owner_name.split()[:2]).upper() or "?"

    def social_links(self) -> List[Tuple[str, str, str]]:
        """(label, url, colour) for every configured network"""
        links = [
            ("LinkedIn", self.linkedin_url, "#0077b5"),
            ("WhatsApp", self.whatsapp_url, "#25d366"),
            ("Facebook", self.facebook_url, "#1877f2"),
        ]
        return [(label, url, colour) for label, url, colour in links if url]

    @classmethod
    def from_settings(cls, settings: Settings) -> "AutoReplyBranding":
        return cls(
            owner_name=settings.site_owner_name,
            tagline=settings.site_owner_tagline,
            site_url=settings.site_url,
            linkedin_url=settings.linkedin_url,
            whatsapp_url=settings.whatsapp_url,
            facebook_url=settings.facebook_url,
        )


def _social_row(branding: AutoReplyBranding) -> str:
    cells = []
    for label, url, colour in branding.social_links():
        cells.append(
            f'<td style="padding:0 10px;">'
            f'<a href="{escape(url)}" target="_blank" '
            f'style="display:inline-block;padding:10px 18px;border-radius:50px;background:{colour};'
            f'color:#ffffff;font-size:12px;font-weight:600;text-decoration:none;">{label}</a>'
            f'</td>'
        )
    if not cells:
        return ""
    row = "".join(cells)
    return f"""
              <div style="border-top:2px solid #e8edf5;margin:28px 0;"></div>
              <p style="margin:0 0 18px;text-align:center;color:#4a5568;font-size:14px;font-weight:600;text-transform:uppercase;letter-spacing:0.8px;">Connect with me</p>
              <table width="100%" cellpadding="0" cellspacing="0">
                <tr><td align="center"><table cellpadding="0" cellspacing="0"><tr>{row}</tr></table></td></tr>
              </table>"""


def _site_button(branding: AutoReplyBranding) -> str:
    if not branding.site_url:
        return ""
    return f"""
              <div style="text-align:center;margin-bottom:32px;">
                <a href="{escape(branding.site_url)}"
                   style="display:inline-block;background:linear-gradient(135deg,#001f3f,#003d7a);color:#ffffff;text-decoration:none;padding:14px 36px;border-radius:50px;font-size:15px;font-weight:600;">
                  Visit the website &rarr;
                </a>
              </div>"""


def build_auto_reply_html(name: str, subject: Optional[str], branding: AutoReplyBranding) -> str:
    """Render the auto-reply document for one visitor."""
    visitor = escape(name)
    first_name = escape(name.split(" ")[0])
    display_subject = escape(subject or DEFAULT_SUBJECT)
    owner = escape(branding.owner_name)
    tagline = f'<p style="margin:0 0 14px;color:#718096;font-size:12px;">{escape(branding.tagline)}</p>' if branding.tagline else ""
    year = datetime.now().year

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>Thank You</title>
</head>
<body style="margin:0;padding:0;font-family:'Segoe UI',Tahoma,Geneva,Verdana,sans-serif;background:#f0f4f8;">
  <table width="100%" cellpadding="0" cellspacing="0" style="background:#f0f4f8;padding:40px 16px;">
    <tr>
      <td align="center">
        <table width="600" cellpadding="0" cellspacing="0" style="max-width:600px;width:100%;background:#ffffff;border-radius:20px;overflow:hidden;">
          <tr>
            <td style="background:linear-gradient(135deg,#001f3f 0%,#003d7a 60%,#0057a8 100%);padding:40px 32px;text-align:center;">
              <div style="display:inline-block;width:64px;height:64px;background:rgba(255,255,255,0.15);border-radius:50%;line-height:64px;font-size:26px;font-weight:800;color:#ffffff;margin-bottom:18px;">{escape(branding.initials)}</div>
              <h1 style="margin:0 0 6px;color:#ffffff;font-size:26px;font-weight:700;">Message Received!</h1>
              <p style="margin:0;color:rgba(255,255,255,0.8);font-size:15px;">I'll be in touch with you soon, {visitor}.</p>
            </td>
          </tr>
          <tr>
            <td style="padding:36px 32px;">
              <p style="margin:0 0 20px;color:#1a1a2e;font-size:16px;line-height:1.6;">Hi <strong>{visitor}</strong>,</p>
              <p style="margin:0 0 20px;color:#4a5568;font-size:15px;line-height:1.7;">
                Thank you for reaching out regarding <strong style="color:#003d7a;">"{display_subject}"</strong>.
                I've received your message and will get back to you within <strong>24-48 hours</strong>.
              </p>
              <div style="background:#f7f9fc;border-left:4px solid #003d7a;border-radius:0 10px 10px 0;padding:20px 22px;margin-bottom:28px;">
                <p style="margin:0 0 8px;color:#003d7a;font-size:13px;font-weight:700;text-transform:uppercase;">What happens next</p>
                <p style="margin:0;color:#4a5568;font-size:14px;line-height:1.7;">
                  I review every message personally. Expect a reply in {first_name}'s inbox shortly.
                </p>
              </div>{_site_button(branding)}{_social_row(branding)}
            </td>
          </tr>
          <tr>
            <td style="background:#f7f9fc;padding:24px 32px;text-align:center;border-top:2px solid #e8edf5;">
              <p style="margin:0 0 4px;color:#718096;font-size:13px;">Best regards,</p>
              <p style="margin:0 0 2px;color:#001f3f;font-size:18px;font-weight:700;">{owner}</p>
              {tagline}
              <p style="margin:0;color:#a0aec0;font-size:11px;">
                &copy; {year} {owner} &middot; This is an automated reply, please do not reply directly to this email.
              </p>
            </td>
          </tr>
        </table>
      </td>
    </tr>
  </table>
</body>
</html>"""
