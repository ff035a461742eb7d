# stayintouch/services/user_service.py
from bson import ObjectId
import bcrypt
from ..models.user import User
from ..models.fields import to_object_id
from ..logger import setup_logger

class UserService:
    def __init__(self, db, log_dir=None):
        self.db = db
        self.users_collection = db['users']
        self.logger = setup_logger('user_service', log_dir)
        self.users_collection.create_index('email', unique=True)

    def create_user(self, name, email, password, is_admin=False):
        if not all(isinstance(v, str) and v.strip() for v in (name, email, password)):
            raise ValueError('Name, email and password are required.')
        email = email.strip().lower()
        if self.users_collection.find_one({'email': email}):
            raise ValueError('The specified email address is already in use.')

        password_hash = bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt())
        user = User(
            name=name,
            email=email,
            password_hash=password_hash,
            is_admin=is_admin
        )

        self.users_collection.insert_one(user.to_dict())
        self.logger.info(f"Created {user.role} {user.id} ({user.email})")
        return user

    def get_user(self, user_id):
        user_oid = to_object_id(user_id)
        if user_oid is None:
            return None
        user_data = self.users_collection.find_one({'_id': user_oid})
        return User.from_dict(user_data) if user_data else None

    def get_user_by_email(self, email):
        if not isinstance(email, str) or not email:
            return None
        user_data = self.users_collection.find_one({'email': email.strip().lower()})
        return User.from_dict(user_data) if user_data else None

    def list_users(self):
        return [User.from_dict(data) for data in self.users_collection.find().sort('created_at', 1)]

    def delete_user(self, user_id):
        user_oid = to_object_id(user_id)
        if user_oid is None:
            return False
        result = self.users_collection.delete_one({'_id': user_oid})
        if result.deleted_count:
            self.logger.info(f"Deleted user {user_id}")
        return result.deleted_count > 0

    def verify_password(self, user, password):
        if not isinstance(password, str) or not password:
            return False
        return bcrypt.checkpw(password.encode('utf-8'), user.password_hash)

    def change_password(self, user, old_password, new_password):
        if not isinstance(new_password, str) or not new_password \
                or not self.verify_password(user, old_password):
            return False
        password_hash = bcrypt.hashpw(new_password.encode('utf-8'), bcrypt.gensalt())
        self.users_collection.update_one(
            {'_id': ObjectId(user.id)},
            {'$set': {'password_hash': password_hash}}
        )
        self.logger.info(f"Changed password for user {user.id}")
        return True
