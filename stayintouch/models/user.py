# stayintouch/models/user.py
from flask_login import UserMixin
from bson import ObjectId
from .fields import utcnow

class User(UserMixin):
    def __init__(self, name, email, password_hash, is_admin=False, _id=None, created_at=None):
        self.name = name
        self.email = email
        self.password_hash = password_hash
        self.is_admin = is_admin
        self.created_at = created_at or utcnow()
        self._id = _id or ObjectId()

    @property
    def id(self):
        return str(self._id)

    @property
    def role(self):
        return 'admin' if self.is_admin else 'user'

    @classmethod
    def from_dict(cls, data):
        return cls(
            name=data['name'],
            email=data['email'],
            password_hash=data['password_hash'],
            is_admin=data.get('is_admin', False),
            _id=data.get('_id'),
            created_at=data.get('created_at')
        )

    def to_dict(self):
        return {
            "_id": self._id,
            "name": self.name,
            "email": self.email,
            "password_hash": self.password_hash,
            "is_admin": self.is_admin,
            "created_at": self.created_at
        }

    def to_json(self):
        """Public profile; the password hash never leaves the server."""
        return {
            "_id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "created_at": self.created_at.isoformat() if self.created_at else None
        }
