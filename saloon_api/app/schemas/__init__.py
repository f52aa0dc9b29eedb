"""
Pydantic schema definitions for API payloads and stored records.

Saloons are persisted as the JSON dump of the ``Saloon`` model, so the
same schema describes both the stored value and the API response.
Field names are snake_case in Python and camelCase on the wire.
"""
