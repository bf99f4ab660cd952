"""Service layer — operations over the marshaling core.

Every public service method returns a :class:`ServiceResult`; SDK
errors raised underneath are converted into structured failures here.
"""
