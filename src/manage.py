"""SwiftCart management CLI.

Usage:
    python src/manage.py setup-db                 # Create all tables
    python src/manage.py drop-db                  # Drop all tables
    python src/manage.py seed [--count 12]        # Add demo products
    python src/manage.py create-admin --name N --email E --password P
"""

import argparse
import json
import sys


def _domain():
    from storefront.domain import storefront

    storefront.init()
    return storefront


def setup_database():
    from storefront.utils.db import setup_db

    domain = _domain()
    print("Creating storefront database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    from storefront.utils.db import drop_db

    domain = _domain()
    print("Dropping storefront database schema...")
    drop_db(domain)
    print("Done.")


def seed_products(count):
    """Add ``count`` demo products with generated details."""
    from faker import Faker

    from storefront.catalogue.creation import AddProduct

    fake = Faker()
    domain = _domain()
    categories = ["electronics", "footwear", "kitchen", "books", "outdoors", "toys"]

    with domain.domain_context():
        for index in range(count):
            price = round(fake.pyfloat(min_value=5, max_value=500, right_digits=2), 2)
            command = AddProduct(
                title=fake.catch_phrase(),
                brand=fake.company(),
                category=categories[index % len(categories)],
                sku=f"SEED-{fake.unique.bothify('??-#####').upper()}",
                price=price,
                original_price=round(price * 1.2, 2),
                description=fake.paragraph(nb_sentences=3),
                main_image=fake.image_url(),
                quantity=fake.random_int(min=1, max=200),
                thumbnails=json.dumps([fake.image_url() for _ in range(3)]),
            )
            product_id = domain.process(command, asynchronous=False)
            print(f"  added {product_id}")
    print("Done.")


def create_admin(name, email, password):
    from storefront.user.registration import RegisterUser
    from storefront.user.roles import ChangeUserRole
    from storefront.user.user import UserRole

    domain = _domain()
    with domain.domain_context():
        user_id = domain.process(RegisterUser(name=name, email=email, password=password), asynchronous=False)
        domain.process(ChangeUserRole(user_id=user_id, role=UserRole.ADMIN.value), asynchronous=False)
    print(f"Admin {email} created ({user_id}).")


def main():
    parser = argparse.ArgumentParser(description="SwiftCart management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    seed_parser = subparsers.add_parser("seed", help="Add demo products")
    seed_parser.add_argument("--count", type=int, default=12)

    admin_parser = subparsers.add_parser("create-admin", help="Register an admin account")
    admin_parser.add_argument("--name", required=True)
    admin_parser.add_argument("--email", required=True)
    admin_parser.add_argument("--password", required=True)

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed_products(args.count)
    elif args.command == "create-admin":
        create_admin(args.name, args.email, args.password)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
