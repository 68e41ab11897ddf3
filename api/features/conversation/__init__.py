"""Conversation feature package: DTOs, validators, repository, service, controller, router.

Stores one document per caller-chosen session id in the ``conversations``
collection. Saves replace the whole message list; deletes are idempotent.
"""
