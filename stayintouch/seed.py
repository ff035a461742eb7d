# stayintouch/seed.py
from datetime import datetime, timedelta
from .logger import setup_logger

TEST_USER = {'name': 'Test User', 'email': 'test@example.com', 'password': 'test'}
ADMIN_USER = {'name': 'Admin', 'email': 'admin@example.com', 'password': 'admin'}

SAMPLE_CONTACTS = [
    {
        'name': 'Jane Doe',
        'email': 'jane@example.com',
        'company': 'Acme Corp',
        'address': {'city': 'Portland', 'state': 'OR'},
        'tags': ['work'],
        'interactions': [
            {'type': 'coffee', 'notes': 'Talked about her new role.', 'days_ago': 30},
            {'type': 'email', 'notes': 'Sent the conference link.', 'days_ago': 7},
        ]
    },
    {
        'name': 'John Smith',
        'phone': '+1 650-253-0000',
        'social': {'twitter': '@jsmith'},
        'tags': ['college', 'friends'],
        'interactions': [
            {'type': 'call', 'notes': 'Birthday call.', 'days_ago': 90},
        ]
    },
]


def seed_database(user_service, contact_service, log_dir=None):
    """
    Wipes users and contacts and repopulates them with a test user, an
    admin and a few sample contacts owned by the test user.
    """
    logger = setup_logger('seed', log_dir)
    logger.info("Seeding database...")

    contact_service.contacts_collection.delete_many({})
    user_service.users_collection.delete_many({})

    test_user = user_service.create_user(**TEST_USER)
    user_service.create_user(is_admin=True, **ADMIN_USER)

    now = datetime.utcnow()
    for sample in SAMPLE_CONTACTS:
        data = {k: v for k, v in sample.items() if k != 'interactions'}
        contact = contact_service.create(data, test_user.id)
        for interaction in sample['interactions']:
            contact_service.add_interaction(contact, {
                'type': interaction['type'],
                'notes': interaction['notes'],
                'date': now - timedelta(days=interaction['days_ago'])
            })

    logger.info(f"Finished seeding: 2 users, {len(SAMPLE_CONTACTS)} contacts.")
    return test_user
