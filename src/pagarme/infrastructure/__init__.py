"""Infrastructure layer — session context, query builder, collections.

This layer bridges the domain models and the injected query executor.
It never imports from services, commands, or output. The HTTP
transport itself is supplied by the caller through
:class:`pagarme.infrastructure.query.QueryExecutor`.
"""
