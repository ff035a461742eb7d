# seed.py
from stayintouch import create_app
from stayintouch.config import ScriptConfig
from stayintouch.seed import seed_database


def run_seed():
    """Seeds the database at MONGO_URI with the demo users and contacts."""
    app = create_app(ScriptConfig)

    with app.app_context():
        from stayintouch import user_service, contact_service

        print(f"Seeding {app.config['MONGO_URI']} ...")
        test_user = seed_database(user_service, contact_service)
        print(f"Done. Log in as {test_user.email}.")

if __name__ == "__main__":
    run_seed()
