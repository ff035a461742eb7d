# stayintouch/models/interaction.py
from bson import ObjectId
from ..errors import ContactValidationError
from .fields import to_object_id, parse_datetime, format_datetime, utcnow


class Interaction:
    """A single touch point with a contact: a call, an email, a coffee."""

    def __init__(self, type=None, notes=None, date=None, _id=None):
        self._id = to_object_id(_id) if _id else ObjectId()
        if self._id is None:
            raise ContactValidationError(f"'{_id}' is not a valid interaction id.")
        self.type = type
        self.notes = notes
        self.date = parse_datetime(date) or utcnow()

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise ContactValidationError("An interaction must be an object.")
        return cls(
            _id=data.get('_id'),
            type=data.get('type'),
            notes=data.get('notes'),
            date=data.get('date')
        )

    def to_dict(self):
        return {
            "_id": self._id,
            "type": self.type,
            "notes": self.notes,
            "date": self.date
        }

    def to_json(self):
        data = self.to_dict()
        data['_id'] = str(self._id)
        data['date'] = format_datetime(self.date)
        return data
