"""Attendance Sync package.

Shared attendance state (one active session, a flat log of check-ins) served
through a polling JSON API. Feature modules (sync, sessions, records, admin)
each have a thin Flask controller over a service layer; persistence goes
through a Redis store with a local JSON file as fallback.
"""
