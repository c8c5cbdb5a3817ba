"""Booking domain: framework-free rules of the booking lifecycle."""
