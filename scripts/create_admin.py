# create_admin.py
from stayintouch import create_app
from stayintouch.config import ScriptConfig
import getpass

def create_initial_admin(config_class=ScriptConfig, db=None):
    app = create_app(config_class, db=db)

    with app.app_context():
        from stayintouch import user_service

        print("Create Admin User")
        print("-" * 30)

        name = input("Enter admin name: ")
        email = input("Enter admin email: ")
        password = getpass.getpass("Enter admin password: ")
        confirm_password = getpass.getpass("Confirm admin password: ")

        if password != confirm_password:
            print("Passwords don't match!")
            return None

        try:
            user = user_service.create_user(
                name=name,
                email=email,
                password=password,
                is_admin=True
            )
            print(f"\nAdmin user created successfully!")
            print(f"Name: {user.name}")
            print(f"Email: {user.email}")
            return user

        except ValueError as e:
            print(f"Error creating admin user: {str(e)}")
            return None

if __name__ == "__main__":
    create_initial_admin()
