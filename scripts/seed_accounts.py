"""Seed initial accounts and contacts into the database."""
from recordgate.account import Account, AccountRepository
from recordgate.contact import Contact, ContactRepository

INITIAL_ACCOUNTS = [
    {"name": "Acme Corporation", "industry": "Manufacturing", "website": "acme.example"},
    {"name": "Globex", "industry": "Energy", "website": "globex.example"},
    {"name": "Initech", "industry": "Software", "phone": "555-0100"},
]

INITIAL_CONTACTS = {
    "Acme Corporation": [
        {"first_name": "Wile", "last_name": "Coyote", "email": "wile@acme.example"},
    ],
    "Initech": [
        {"first_name": "Peter", "last_name": "Gibbons"},
        {"first_name": "Milton", "last_name": "Waddams"},
    ],
}


def main():
    accounts = AccountRepository()
    contacts = ContactRepository()

    for values in INITIAL_ACCOUNTS:
        if any(existing.name == values["name"] for existing in accounts.search(values["name"])):
            print(f"Skipping {values['name']} - already exists")
            continue

        account = Account(**values)
        accounts.create([account])
        print(f"Created: {account.name} (id={account.id})")

        new_contacts = [
            Contact(account_id=account.id, **contact)
            for contact in INITIAL_CONTACTS.get(account.name, [])
        ]
        contacts.create(new_contacts)
        for contact in new_contacts:
            print(f"  Contact: {contact.full_name} (id={contact.id})")


if __name__ == "__main__":
    main()
