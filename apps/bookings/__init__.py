"""Bookings app package.

This app encapsulates the booking lifecycle: requesting an item for a
time interval, the owner's approve/reject decision and per-user
listings classified by time and status. Framework-free rules live in
``domain``, use cases in ``application``, ORM persistence in
``infrastructure`` and the REST surface in ``views``.
"""
