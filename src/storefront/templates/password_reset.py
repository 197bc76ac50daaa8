"""Password reset template — carries the single-use reset link."""

from html import escape


class PasswordResetTemplate:
    @staticmethod
    def render(context: dict) -> dict:
        reset_link = context["reset_link"]
        name = context.get("name") or "there"
        return {
            "subject": "Password Reset Request",
            "body": (
                f"Hi {name},\n\n"
                "You have requested to reset your password for your SwiftCart account.\n"
                f"Open the link below to choose a new password:\n\n{reset_link}\n\n"
                "This link will expire in 1 hour.\n"
                "If you did not request a password reset, please ignore this email."
            ),
            "html_body": (
                "<h2>Password Reset Request</h2>"
                "<p>You have requested to reset your password for your SwiftCart account.</p>"
                f'<p><a href="{escape(reset_link, quote=True)}">Reset Password</a></p>'
                "<p>This link will expire in 1 hour.</p>"
                "<p>If you did not request a password reset, please ignore this email.</p>"
            ),
        }
