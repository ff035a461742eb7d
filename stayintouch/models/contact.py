# stayintouch/models/contact.py
from bson import ObjectId
from .interaction import Interaction
from .fields import to_object_id, format_datetime, utcnow
from ..errors import ContactValidationError

MERGE = 'merge'
OVERWRITE = 'overwrite'

# Fields a client may set. Nested objects are merged key by key,
# everything else (scalars and lists) is replaced wholesale.
MERGE_RULES = {
    'name': OVERWRITE,
    'email': OVERWRITE,
    'phone': OVERWRITE,
    'company': OVERWRITE,
    'notes': OVERWRITE,
    'address': MERGE,
    'social': MERGE,
    'tags': OVERWRITE,
    'interactions': OVERWRITE,
}

# Never writable through an update, whatever the payload says.
PROTECTED_FIELDS = ('_id', 'user')


def deep_merge(target, source):
    """Recursively merges source into target in place and returns target."""
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            deep_merge(target[key], value)
        else:
            target[key] = value
    return target


def writable_fields(data):
    return {key: value for key, value in data.items()
            if key in MERGE_RULES and key not in PROTECTED_FIELDS}


class Contact:
    def __init__(self, name, user, email=None, phone=None, company=None, notes=None,
                 address=None, social=None, tags=None, interactions=None,
                 _id=None, created_at=None, updated_at=None):
        self._id = _id or ObjectId()
        self.name = name
        # Owning user, set from the authenticated principal on creation.
        self.user = to_object_id(user) if user else None
        self.email = email
        self.phone = phone
        self.company = company
        self.notes = notes
        self.address = address or {}
        self.social = social or {}
        self.tags = tags or []
        self.interactions = [
            i if isinstance(i, Interaction) else Interaction.from_dict(i)
            for i in (interactions or [])
        ]
        self.created_at = created_at or utcnow()
        self.updated_at = updated_at or self.created_at

    def validate(self):
        if self.user is None:
            raise ContactValidationError("A contact must belong to a user.")
        if not isinstance(self.name, str) or not self.name.strip():
            raise ContactValidationError("A contact requires a name.")
        for field, rule in MERGE_RULES.items():
            value = getattr(self, field)
            if rule == MERGE and not isinstance(value, dict):
                raise ContactValidationError(f"'{field}' must be an object.")
        if not isinstance(self.tags, list):
            raise ContactValidationError("'tags' must be a list.")
        interaction_ids = [i._id for i in self.interactions]
        if len(set(interaction_ids)) != len(interaction_ids):
            raise ContactValidationError("Interaction ids must be unique.")

    def apply_updates(self, updates):
        """Applies a partial update according to MERGE_RULES."""
        for field, value in writable_fields(updates).items():
            if field == 'interactions':
                if not isinstance(value, list):
                    raise ContactValidationError("'interactions' must be a list.")
                self.interactions = [Interaction.from_dict(i) for i in value]
            elif MERGE_RULES[field] == MERGE and isinstance(value, dict) \
                    and isinstance(getattr(self, field), dict):
                deep_merge(getattr(self, field), value)
            else:
                setattr(self, field, value)
        return self

    def owned_by(self, user_id):
        return str(self.user) == str(user_id)

    @classmethod
    def from_dict(cls, data):
        return cls(
            _id=data.get('_id'),
            name=data.get('name'),
            user=data.get('user'),
            email=data.get('email'),
            phone=data.get('phone'),
            company=data.get('company'),
            notes=data.get('notes'),
            address=data.get('address'),
            social=data.get('social'),
            tags=data.get('tags', []),
            interactions=data.get('interactions', []),
            created_at=data.get('created_at'),
            updated_at=data.get('updated_at')
        )

    def to_dict(self):
        return {
            "_id": self._id,
            "name": self.name,
            "user": self.user,
            "email": self.email,
            "phone": self.phone,
            "company": self.company,
            "notes": self.notes,
            "address": self.address,
            "social": self.social,
            "tags": self.tags,
            "interactions": [i.to_dict() for i in self.interactions],
            "created_at": self.created_at,
            "updated_at": self.updated_at
        }

    def to_json(self):
        data = self.to_dict()
        data['_id'] = str(self._id)
        data['user'] = str(self.user)
        data['interactions'] = [i.to_json() for i in self.interactions]
        data['created_at'] = format_datetime(self.created_at)
        data['updated_at'] = format_datetime(self.updated_at)
        return data
