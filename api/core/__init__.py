"""
Shared, cross-cutting code for the API.

`core/` holds the building blocks every feature uses: settings, the database
handle, CORS, and the exception handlers that shape error responses. Keep
table-specific SQL in the feature package that owns the table (e.g.
`announcements/`).
"""
