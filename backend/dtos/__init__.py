"""
Data Transfer Objects (DTOs) Layer

DTOs keep the HTTP contract independent of the ``users`` table.

Structure:
- request/: payloads accepted by the user endpoints
- response/: shapes returned by the user endpoints
- internal/: records passed from the repository to the service
"""
