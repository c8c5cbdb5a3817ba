"""Items app package.

Items are the things users share. The booking core reads them through
``apps.items.repositories.DjangoItemDirectory``. The app also serves the
item card with the owner's last and next approved bookings and lets
former bookers leave comments.
"""
