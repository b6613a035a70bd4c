"""User-facing messages shared by several commands."""

MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_PERSONS_LISTED_OVERVIEW = "{count} persons listed!"
MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book."
