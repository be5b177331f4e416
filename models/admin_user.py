from flask_login import UserMixin


def is_allowed_email(email, allowed):
    if not email:
        return False
    return email.strip().lower() in allowed


class AdminUser(UserMixin):
    """Signed-in staff member. Not persisted: identity comes from Google and
    access from the ADMIN_EMAILS allow-list."""

    def __init__(self, email, name=None, picture=None):
        self.id = email.strip().lower()
        self.email = self.id
        self.name = name or self.id
        self.picture = picture

    def __repr__(self):
        return f"<AdminUser {self.email}>"
