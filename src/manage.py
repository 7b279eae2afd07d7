"""FreshCart management CLI.

Provides commands to create and drop database schemas for all domains, load
the demo catalogue, and create admin accounts.

Usage:
    python src/manage.py setup-db                 # Create all tables
    python src/manage.py drop-db                  # Drop all tables
    python src/manage.py seed                     # Load the demo catalogue
    python src/manage.py create-admin --name "Ops" --email ops@example.com --password ...
"""

import argparse
import sys

DOMAIN_NAMES = ["identity", "catalogue", "ordering"]


def _domains():
    from catalogue.domain import catalogue
    from identity.domain import identity
    from ordering.domain import ordering

    return {"identity": identity, "catalogue": catalogue, "ordering": ordering}


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    from shared.db import setup_db

    all_domains = _domains()
    targets = {d: all_domains[d] for d in domains} if domains else all_domains

    for name, domain in targets.items():
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Creating {name} database schema...")
        providers = setup_db(domain)
        print(f"  {name} schema ready ({', '.join(providers) or 'no relational provider'}).")

    print("Done.")


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    from shared.db import drop_db

    all_domains = _domains()
    targets = {d: all_domains[d] for d in domains} if domains else all_domains

    for name, domain in targets.items():
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Dropping {name} database schema...")
        providers = drop_db(domain)
        print(f"  {name} schema dropped ({', '.join(providers) or 'no relational provider'}).")

    print("Done.")


def seed_catalogue():
    """Replace the catalogue with the demo products."""
    from catalogue.product.seed import SeedCatalogue

    catalogue = _domains()["catalogue"]
    catalogue.init()
    with catalogue.domain_context():
        count = catalogue.process(SeedCatalogue(requested_by="manage-cli"), asynchronous=False)
    print(f"Seeded {count} products.")
    return count


def create_admin(name, email, password, phone=None):
    """Register a user with the admin role. Returns the new user's id."""
    from identity.auth.passwords import MIN_PASSWORD_LENGTH, hash_password
    from identity.user.registration import RegisterUser
    from identity.user.user import Role

    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    identity = _domains()["identity"]
    identity.init()
    with identity.domain_context():
        user_id = identity.process(
            RegisterUser(
                name=name,
                email=email,
                password_hash=hash_password(password),
                phone=phone,
                role=Role.ADMIN.value,
            ),
            asynchronous=False,
        )
    print(f"Created admin {email} ({user_id}).")
    return user_id


def main(argv=None):
    parser = argparse.ArgumentParser(description="FreshCart management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser("setup-db", help="Create all database tables")
    setup_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to set up (default: all)",
    )

    drop_parser = subparsers.add_parser("drop-db", help="Drop all database tables")
    drop_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to drop (default: all)",
    )

    subparsers.add_parser("seed", help="Load the demo product catalogue")

    admin_parser = subparsers.add_parser("create-admin", help="Create an admin account")
    admin_parser.add_argument("--name", required=True)
    admin_parser.add_argument("--email", required=True)
    admin_parser.add_argument("--password", required=True)
    admin_parser.add_argument("--phone")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    elif args.command == "seed":
        seed_catalogue()
    elif args.command == "create-admin":
        create_admin(args.name, args.email, args.password, args.phone)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
