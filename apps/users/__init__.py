"""Users app package.

Users are plain records (name and unique email) that own items and book
them. The booking core reads them through
``apps.users.repositories.DjangoUserDirectory``; account management is
out of scope.
"""
