"""Use-case layer for connector configuration workflows.

Each module coordinates domain objects and ports without performing transport
I/O directly; the web layer maps :class:`UseCaseError` codes to responses.
"""
