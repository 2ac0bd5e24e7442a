import re

USER_TYPES = ('entrepreneur', 'investor')
EMAIL_RE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
MIN_PASSWORD_LENGTH = 6


def is_valid_email(email):
    return bool(EMAIL_RE.match(email))


def empty_profile():
    return {
        "bio": "",
        "skills": [],
        "interests": [],
        "location": "",
        "website": "",
    }


def user_doc(user_id, firstname, lastname, username, email, password_hash, user_type, created_at):
    return {
        "id": user_id,
        "firstname": firstname,
        "lastname": lastname,
        "username": username,
        "email": email,
        "password": password_hash,
        "userType": user_type,
        "createdAt": created_at,
        "profile": empty_profile(),
    }


def serialize_user(doc, include_profile=True):
    data = {k: v for k, v in doc.items() if k != 'password'}
    if not include_profile:
        data.pop('profile', None)
        data.pop('favorites', None)
    return data
