"""
User accounts service.

The user accounts service is a FastAPI application that provides account
registration, password login, a session check, logout, and profile image
upload for browser clients on another origin.

User records live in a single table of the account store. Usernames and
e-mail addresses are unique; the store enforces this with unique indexes, so
two concurrent registrations for the same identity cannot both succeed.

When a user registers or logs in, they are issued a session cookie that holds
their user ID and username as JSON. The cookie is HttpOnly, Secure and
SameSite=None so that it travels with cross-site requests from the front end.
It is not signed; see DESIGN.md.

Uploaded profile images are written to a directory on local disk and served
back statically under ``/uploads``.
"""
