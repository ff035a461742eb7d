# stayintouch/services/contact_service.py
from bson import ObjectId
from ..models.contact import Contact, PROTECTED_FIELDS, writable_fields
from ..models.interaction import Interaction
from ..models.fields import to_object_id, utcnow
from ..errors import ContactValidationError
from ..logger import setup_logger
from .ownership import check_owner
import phonenumbers

class ContactService:
    def __init__(self, db, phone_region='US', log_dir=None):
        self.db = db
        self.contacts_collection = db['contacts']
        self.phone_region = phone_region
        self.logger = setup_logger('contact_service', log_dir)
        self.contacts_collection.create_index('user')

    def _validate_and_format_phone(self, phone_number_str):
        """
        Validates and formats a phone number to E.164 format. Numbers without
        a country code are read in the configured default region.
        Empty values are stored as None.
        """
        if not phone_number_str:
            return None
        try:
            parsed_number = phonenumbers.parse(str(phone_number_str), self.phone_region)

            if not phonenumbers.is_valid_number(parsed_number):
                raise ContactValidationError(f"'{phone_number_str}' is not a valid phone number.")

            return phonenumbers.format_number(
                parsed_number, phonenumbers.PhoneNumberFormat.E164
            )
        except phonenumbers.NumberParseException as e:
            raise ContactValidationError(
                f"Could not parse the phone number '{phone_number_str}'. Please check the format."
            ) from e

    def _prepare(self, contact):
        contact.phone = self._validate_and_format_phone(contact.phone)
        contact.validate()
        return contact

    def _save(self, contact):
        contact.updated_at = utcnow()
        self.contacts_collection.replace_one({"_id": contact._id}, contact.to_dict())
        return contact

    def list_for_user(self, user_id):
        cursor = self.contacts_collection.find({"user": ObjectId(str(user_id))})
        return [Contact.from_dict(data) for data in cursor]

    def get_contact(self, contact_id):
        contact_oid = to_object_id(contact_id)
        if contact_oid is None:
            return None
        data = self.contacts_collection.find_one({"_id": contact_oid})
        return Contact.from_dict(data) if data else None

    def lookup(self, contact_id, user_id):
        """Fetches a contact by id and runs it through the ownership guard."""
        result = check_owner(self.get_contact(contact_id), user_id)
        if not result.found:
            self.logger.warning(f"Contact {contact_id} {result.status.value} for user {user_id}")
        return result

    def create(self, contact_data, user_id):
        if not isinstance(contact_data, dict):
            raise ContactValidationError("A contact must be an object.")
        data = writable_fields(contact_data)
        data['user'] = ObjectId(str(user_id))

        contact = self._prepare(Contact.from_dict(data))
        self.contacts_collection.insert_one(contact.to_dict())
        self.logger.info(f"Created contact {contact._id} for user {user_id}")
        return contact

    def update(self, contact, updates):
        # A request without a body is an empty update.
        if updates is None:
            updates = {}
        if not isinstance(updates, dict):
            raise ContactValidationError("An update must be an object.")
        updates = {k: v for k, v in updates.items() if k not in PROTECTED_FIELDS}

        contact.apply_updates(updates)
        self._save(self._prepare(contact))
        self.logger.info(f"Updated contact {contact._id}")
        return contact

    def remove(self, contact):
        self.contacts_collection.delete_one({"_id": contact._id})
        self.logger.info(f"Removed contact {contact._id}")

    def add_interaction(self, contact, interaction_data):
        if interaction_data is None:
            interaction_data = {}
        if not isinstance(interaction_data, dict):
            raise ContactValidationError("An interaction must be an object.")
        # The server assigns interaction ids.
        data = {k: v for k, v in interaction_data.items() if k != '_id'}
        interaction = Interaction.from_dict(data)

        contact.interactions.append(interaction)
        self._save(contact)
        self.logger.info(f"Added interaction {interaction._id} to contact {contact._id}")
        return contact

    def remove_interaction(self, contact, interaction_id):
        contact.interactions = [
            i for i in contact.interactions if str(i._id) != str(interaction_id)
        ]
        self._save(contact)
        self.logger.info(f"Removed interaction {interaction_id} from contact {contact._id}")
        return contact

    def delete_for_user(self, user_id):
        result = self.contacts_collection.delete_many({"user": ObjectId(str(user_id))})
        return result.deleted_count
